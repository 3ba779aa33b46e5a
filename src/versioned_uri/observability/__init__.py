"""Observability utilities for versioned URIs.

This package provides monitoring and debugging capabilities:
- Prometheus metrics counting rewrites and strips by outcome
- Structured logging with contextual information

These tools help operators confirm that asset URIs actually carry the
release version in production.
"""

from versioned_uri.observability.logging import configure_logging, get_logger
from versioned_uri.observability.metrics import record_rewrite, record_strip

__all__ = [
    "configure_logging",
    "get_logger",
    "record_rewrite",
    "record_strip",
]

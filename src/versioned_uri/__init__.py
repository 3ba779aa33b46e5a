"""
Versioned URIs for Python web applications.

This package rewrites outbound URIs that match configured path prefixes so they
carry the application version, either as a path segment or a query parameter,
forcing browsers and proxies to fetch fresh assets after each release.
"""

from versioned_uri.builder import versioned
from versioned_uri.config import VersionedURIConfig
from versioned_uri.exceptions import ConfigurationError, MalformedInputError, VersionedURIError
from versioned_uri.rewriter import rewrite_uri
from versioned_uri.undo import strip_version

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "VersionedURIConfig",
    "rewrite_uri",
    "strip_version",
    "versioned",
    "VersionedURIError",
    "MalformedInputError",
    "ConfigurationError",
]

"""Structured logging configuration for versioned URIs.

This module provides structured logging using structlog to emit
JSON-formatted logs with contextual information.

Rewrite events are logged at debug level since they fire once per generated
link. Typical events:
- matcher.compiled
- uri.rewritten / uri.passthrough
- path.stripped

Examples:
    Configure logging::

        from versioned_uri.observability.logging import configure_logging

        configure_logging(level="DEBUG", json_output=False)

    Use the logger::

        from versioned_uri.observability.logging import get_logger

        logger = get_logger(__name__)
        logger.debug(
            "uri.rewritten",
            uri="/static/app.css",
            result="/static/app.css?v=1.2.3",
            mode="query",
        )
"""

import logging
import sys
from typing import Any

import structlog


def configure_logging(
    level: str = "INFO",
    json_output: bool = True,
) -> None:
    """Configure structured logging for the application.

    This should be called once at application startup.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: If True, emit JSON logs; if False, use console format

    Examples:
        >>> configure_logging(level="DEBUG", json_output=True)
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    processors: list[object] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,  # type: ignore[arg-type]
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ from the calling module)

    Returns:
        A structlog logger instance
    """
    return structlog.get_logger(name)

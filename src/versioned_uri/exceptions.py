"""Custom exceptions for the versioned URI plugin.

This module defines the exception hierarchy used throughout the package to
signal unusable input and configuration problems. Non-matching URIs are never
an error: they pass through unchanged.

Examples:
    Handling a malformed URI::

        from versioned_uri.exceptions import MalformedInputError

        try:
            href = rewrite_uri(raw, base, config)
        except MalformedInputError as e:
            logger.warning("uri.malformed", value=e.value, error=str(e))
            raise

    Catching every plugin error::

        from versioned_uri.exceptions import VersionedURIError

        try:
            app_config = VersionedURIConfig.from_env()
        except VersionedURIError as e:
            logger.error("versioned_uri.disabled", error=e.message)
"""

from typing import Any


class VersionedURIError(Exception):
    """Base exception for all versioned URI errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        """Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class MalformedInputError(VersionedURIError):
    """A URI or base URL could not be parsed.

    Raised by the rewriter and the undo component when handed something that
    is not a string or that ``urllib.parse`` refuses to split, for example an
    unterminated IPv6 host (``http://[::1/static/``). The caller gets the
    error instead of a silently unrewritten URI.

    Attributes:
        message: Human-readable error description.
        value: The offending input.

    Examples:
        Raising a malformed input error::

            try:
                parts = urlsplit(uri)
            except ValueError as e:
                raise MalformedInputError(
                    message=f"Cannot parse URI {uri!r}: {e}",
                    value=uri,
                ) from e
    """

    def __init__(self, message: str, value: Any) -> None:
        """Initialize the malformed input error with details.

        Args:
            message: Human-readable error description.
            value: The input that could not be parsed.
        """
        super().__init__(message)
        self.value = value


class ConfigurationError(VersionedURIError):
    """A configured option cannot be used.

    Field-level validation is handled by pydantic when the configuration is
    built. This exception covers problems only visible later, such as a ``uri``
    entry that is not a valid regular expression once the alternation is
    compiled.

    Attributes:
        message: Human-readable error description.
        option: Name of the offending configuration option.
    """

    def __init__(self, message: str, option: str) -> None:
        """Initialize the configuration error with details.

        Args:
            message: Human-readable error description.
            option: Name of the offending configuration option.
        """
        super().__init__(message)
        self.option = option

"""URI rewriting for versioned URIs.

This module implements the rewrite rule applied to every URI the application
generates:

1. Strip query string and fragment, they play no part in matching
2. Match the rest against ``^<base>(?:<prefix>|<prefix>...)``
3. No match: return the URI untouched
4. Path mode: splice ``v<version>/`` right after the matched prefix
5. Query mode: set the version parameter, replacing any previous value

Examples:
    >>> config = VersionedURIConfig(uri="static", version="1.2.3")
    >>> rewrite_uri("/static/foo.png", "/", config)
    '/static/foo.png?v=1.2.3'
    >>> rewrite_uri("/static/foo.png", "/", config.model_copy(update={"in_path": True}))
    '/static/v1.2.3/foo.png'
    >>> rewrite_uri("/images/foo.png", "/", config)
    '/images/foo.png'
"""

from typing import Any
from urllib.parse import unquote_plus, urlencode, urlsplit

from versioned_uri.config import VersionedURIConfig
from versioned_uri.exceptions import MalformedInputError
from versioned_uri.matcher import build_matcher, normalize_base
from versioned_uri.observability.logging import get_logger
from versioned_uri.observability.metrics import record_rewrite

logger = get_logger(__name__)


def rewrite_uri(uri: str, base: str, config: VersionedURIConfig) -> str:
    """Embed the application version in ``uri`` if it matches a prefix.

    Args:
        uri: Absolute or base-relative URI, optionally with query and fragment.
        base: Root URL the application is mounted under, e.g. "/" or
            "http://example.com/app". A trailing '/' is added if missing.
        config: Versioned URI configuration.

    Returns:
        The rewritten URI, or ``uri`` unchanged when nothing is configured, the
        URI does not match, or (path mode) it already carries the version.

    Raises:
        MalformedInputError: If ``uri`` or ``base`` is not a parsable string.
    """
    validate_uri(uri, "uri")
    validate_uri(base, "base")

    matcher = build_matcher(normalize_base(base), config.patterns)
    match = matcher.match(_strip_query(uri)) if matcher is not None else None

    if match is None:
        record_rewrite(config.mode, "passthrough")
        logger.debug("uri.passthrough", uri=uri, base=base)
        return uri

    if config.in_path:
        end = match.end()
        if uri.startswith(config.segment, end):
            # Already versioned by an earlier call
            record_rewrite(config.mode, "skipped")
            logger.debug("uri.skipped", uri=uri, base=base)
            return uri
        result = uri[:end] + config.segment + uri[end:]
    else:
        result = set_query_param(uri, config.param, config.version)

    record_rewrite(config.mode, "rewritten")
    logger.debug("uri.rewritten", uri=uri, result=result, mode=config.mode)
    return result


def set_query_param(uri: str, name: str, value: str) -> str:
    """Set a query parameter, dropping any previous occurrences.

    Other parameters and the fragment are kept exactly as written. The new
    parameter is appended last, encoded like a form field.

    Args:
        uri: URI to modify.
        name: Parameter name.
        value: Parameter value.

    Returns:
        The URI with exactly one ``name`` parameter.

    Example:
        >>> set_query_param("/a?v=1&x=2#top", "v", "3")
        '/a?x=2&v=3#top'
    """
    head, hash_sign, fragment = uri.partition("#")
    path, _, query = head.partition("?")

    kept = [pair for pair in query.split("&") if pair and _param_name(pair) != name]
    kept.append(urlencode({name: value}))

    return f"{path}?{'&'.join(kept)}{hash_sign}{fragment}"


def validate_uri(value: Any, what: str) -> None:
    """Check ``value`` is a string ``urllib.parse`` can split.

    Args:
        value: Candidate URI.
        what: Label used in the error message ("uri", "base", "path").

    Raises:
        MalformedInputError: If the value is not a string or cannot be parsed.
    """
    if not isinstance(value, str):
        raise MalformedInputError(
            f"{what} must be a string, got {type(value).__name__}",
            value=value,
        )

    try:
        urlsplit(value)
    except ValueError as e:
        raise MalformedInputError(f"Cannot parse {what} {value!r}: {e}", value=value) from e


def _strip_query(uri: str) -> str:
    return uri.partition("#")[0].partition("?")[0]


def _param_name(pair: str) -> str:
    return unquote_plus(pair.partition("=")[0])

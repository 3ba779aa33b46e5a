"""Reverse rewriting of incoming versioned paths.

In path mode the generated links point at ``/static/v1.2.3/foo.png``, a
location that does not exist in the application. A front-end web server
usually maps it back with a rule such as::

    RewriteRule ^v[0123456789._]+/(.*)$ /myapp/static/$1 [PT]

When no such server sits in front of the application (development server,
plain uvicorn), ``strip_version`` performs the same mapping inside the
process. ``versioned_uri.adapters.asgi.VersionStripMiddleware`` applies it to
every incoming request before routing.
"""

import re

from versioned_uri.config import VersionedURIConfig
from versioned_uri.matcher import build_matcher, normalize_base
from versioned_uri.observability.logging import get_logger
from versioned_uri.observability.metrics import record_strip
from versioned_uri.rewriter import validate_uri

logger = get_logger(__name__)

# Digit-led version segment, as accepted by the usual front-end rewrite rule
ANY_VERSION_SEGMENT = re.compile(r"v[0-9][0-9._]*/")


def strip_version(
    path: str,
    base: str,
    config: VersionedURIConfig,
    any_version: bool = False,
) -> str:
    """Remove the version segment following a configured prefix.

    Args:
        path: Incoming path (or URI), e.g. "/static/v1.2.3/foo.png".
        base: Root path the application is mounted under.
        config: Versioned URI configuration.
        any_version: If True, strip any digit-led ``v<digits>/`` segment, so links
            generated by a previous release still resolve. If False, only the
            current version is stripped.

    Returns:
        The path without the version segment, or ``path`` unchanged when the
        config is not in path mode, nothing matches, or no segment follows
        the prefix.

    Raises:
        MalformedInputError: If ``path`` or ``base`` is not a parsable string.

    Example:
        >>> config = VersionedURIConfig(uri="static", in_path=True, version="1.2.3")
        >>> strip_version("/static/v1.2.3/foo.png", "/", config)
        '/static/foo.png'
    """
    validate_uri(path, "path")
    validate_uri(base, "base")

    if not config.in_path:
        return path

    matcher = build_matcher(normalize_base(base), config.patterns)
    match = matcher.match(path) if matcher is not None else None
    if match is None:
        record_strip("passthrough")
        return path

    end = match.end()
    if any_version:
        segment = ANY_VERSION_SEGMENT.match(path, end)
        seg_end = segment.end() if segment else None
    else:
        seg_end = end + len(config.segment) if path.startswith(config.segment, end) else None

    if seg_end is None:
        record_strip("passthrough")
        return path

    result = path[:end] + path[seg_end:]
    record_strip("stripped")
    logger.debug("path.stripped", path=path, result=result)
    return result

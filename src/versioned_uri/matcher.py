"""Pattern compilation for versioned URIs.

Configured prefixes are normalized and joined into one regular expression
alternation, anchored at the request base. Compiled matchers are memoized so
each distinct (base, patterns) pair is compiled once per process and reused by
every rewrite afterwards.

Examples:
    >>> normalize_pattern("/static")
    'static/'
    >>> matcher = build_matcher("/", ("foo/", "bar/"))
    >>> bool(matcher.match("/bar/b.css"))
    True
    >>> build_matcher("/", ()) is None
    True
"""

import re
from collections.abc import Iterable
from functools import lru_cache

from versioned_uri.exceptions import ConfigurationError
from versioned_uri.observability.logging import get_logger

logger = get_logger(__name__)


def normalize_pattern(fragment: str) -> str:
    """Normalize one configured prefix.

    Strips exactly one leading '/' and appends a trailing '/' unless one is
    already present.

    Args:
        fragment: Raw prefix such as "static", "/foo/" or "css/v2".

    Returns:
        The normalized prefix.

    Example:
        >>> normalize_pattern("/foo/")
        'foo/'
        >>> normalize_pattern("//foo")
        '/foo/'
    """
    if fragment.startswith("/"):
        fragment = fragment[1:]
    if not fragment.endswith("/"):
        fragment += "/"
    return fragment


def normalize_patterns(value: str | Iterable[str] | None) -> tuple[str, ...]:
    """Normalize a configured ``uri`` value into a tuple of prefixes.

    Args:
        value: None, a single prefix, or an iterable of prefixes. Surrounding
            whitespace is ignored and blank entries are dropped.

    Returns:
        Tuple of normalized prefixes, empty when nothing is configured.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]

    stripped = (item.strip() for item in value)
    return tuple(normalize_pattern(item) for item in stripped if item)


def join_patterns(patterns: tuple[str, ...]) -> str | None:
    """Join normalized prefixes into a single alternation.

    Args:
        patterns: Normalized prefixes.

    Returns:
        A non-capturing group such as ``(?:foo/|bar/)``, or None when there is
        nothing to match.
    """
    if not patterns:
        return None
    return "(?:" + "|".join(patterns) + ")"


@lru_cache(maxsize=128)
def build_matcher(base: str, patterns: tuple[str, ...]) -> re.Pattern[str] | None:
    """Compile the matcher for URIs generated under ``base``.

    Args:
        base: Normalized request base, ending with '/'.
        patterns: Normalized prefixes.

    Returns:
        Compiled regular expression anchored at the start of the URI, or None
        (never matches) when no prefix is configured.

    Raises:
        ConfigurationError: If a prefix is not a valid regular expression.
    """
    alternation = join_patterns(patterns)
    if alternation is None:
        return None

    try:
        matcher = re.compile("^" + re.escape(base) + alternation)
    except re.error as e:
        raise ConfigurationError(
            f"Invalid uri pattern in {list(patterns)!r}: {e}",
            option="uri",
        ) from e

    logger.debug("matcher.compiled", base=base, patterns=list(patterns))
    return matcher


def normalize_base(base: str) -> str:
    """Ensure the request base ends with exactly one '/'.

    Example:
        >>> normalize_base("http://localhost/app")
        'http://localhost/app/'
    """
    if not base.endswith("/"):
        base += "/"
    return base

"""Wrapping a host URI builder so its output is versioned.

The plugin never builds URIs itself. It post-processes whatever the hosting
framework produces from route names and arguments:

    >>> config = VersionedURIConfig(uri="static", version="1.2.3")
    >>> def build(name, path):
    ...     return f"/{name}/{path}"
    >>> url_for = versioned(build, config)
    >>> url_for("static", "app.css")
    '/static/app.css?v=1.2.3'
"""

from collections.abc import Callable
from functools import wraps
from typing import Any

from versioned_uri.config import VersionedURIConfig
from versioned_uri.rewriter import rewrite_uri


def versioned(
    build: Callable[..., Any],
    config: VersionedURIConfig,
    base: str | Callable[[], str] = "/",
) -> Callable[..., str]:
    """Return ``build`` with its result passed through ``rewrite_uri``.

    Args:
        build: Host URI builder. Its return value is converted with ``str()``,
            so URL objects such as Starlette's ``URL`` are accepted.
        config: Versioned URI configuration.
        base: Request base as a string, or a zero-argument callable evaluated on
            every call (e.g. reading the current request).

    Returns:
        A callable taking the same arguments as ``build`` and returning a string.
    """

    @wraps(build)
    def wrapper(*args: Any, **kwargs: Any) -> str:
        uri = str(build(*args, **kwargs))
        current_base = base() if callable(base) else base
        return rewrite_uri(uri, current_base, config)

    return wrapper

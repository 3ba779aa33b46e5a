"""ASGI adapter for Starlette and FastAPI applications.

This module wires the rewriter into ASGI frameworks:

1. ``install`` stores the configuration on ``app.state`` and optionally adds
   the version-stripping middleware
2. ``versioned_url_for`` wraps ``request.url_for`` so generated links carry
   the version
3. ``VersionStripMiddleware`` maps versioned incoming paths back to the real
   routes when no front-end server does it

Examples:
    FastAPI integration::

        from fastapi import FastAPI, Request
        from fastapi.staticfiles import StaticFiles
        from versioned_uri.adapters.asgi import install, versioned_url_for
        from versioned_uri.config import VersionedURIConfig

        app = FastAPI()
        app.mount("/static", StaticFiles(directory="static"), name="static")

        install(
            app,
            VersionedURIConfig(uri="static", in_path=True, version="1.2.3"),
            strip_incoming=True,
        )

        @app.get("/")
        async def index(request: Request):
            return {"css": versioned_url_for(request, "static", path="app.css")}

    Starlette integration::

        from starlette.applications import Starlette
        from starlette.middleware import Middleware

        middleware = [Middleware(VersionStripMiddleware, config=config)]
        app = Starlette(middleware=middleware)
        app.state.versioned_uri = config
"""

from typing import Any

from starlette.requests import Request
from starlette.types import ASGIApp, Receive, Scope, Send

from versioned_uri.builder import versioned
from versioned_uri.config import VersionedURIConfig
from versioned_uri.exceptions import ConfigurationError
from versioned_uri.undo import strip_version

# Attribute of app.state holding the VersionedURIConfig
STATE_ATTR = "versioned_uri"


class VersionStripMiddleware:
    """Remove the version segment from incoming request paths.

    Only useful in path mode. Non-HTTP scopes and paths without a version
    segment pass through untouched.

    Attributes:
        app: The wrapped ASGI application
        config: Versioned URI configuration
        any_version: Strip any ``v<version>/`` segment, not only the current one
    """

    def __init__(
        self,
        app: ASGIApp,
        config: VersionedURIConfig,
        any_version: bool = False,
    ) -> None:
        self.app = app
        self.config = config
        self.any_version = any_version

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or not self.config.in_path:
            await self.app(scope, receive, send)
            return

        path: str = scope["path"]
        stripped = strip_version(path, self._base(scope, path), self.config, self.any_version)
        if stripped != path:
            scope = dict(scope)
            scope["path"] = stripped

            raw_path = scope.get("raw_path")
            if raw_path is not None:
                # raw_path may or may not carry root_path, independently of path
                raw = raw_path.decode("latin-1")
                scope["raw_path"] = strip_version(
                    raw, self._base(scope, raw), self.config, self.any_version
                ).encode("latin-1")

        await self.app(scope, receive, send)

    def _base(self, scope: Scope, path: str) -> str:
        """Mount path of the application, when ``path`` includes it."""
        root_path: str = scope.get("root_path", "")
        if root_path and path.startswith(root_path.rstrip("/") + "/"):
            return root_path
        return "/"


def install(
    app: Any,
    config: VersionedURIConfig,
    strip_incoming: bool = False,
    any_version: bool = False,
) -> None:
    """Attach versioned URI support to a Starlette or FastAPI application.

    Must be called before the application starts serving requests.

    Args:
        app: Starlette or FastAPI application
        config: Versioned URI configuration
        strip_incoming: Add VersionStripMiddleware (path mode only)
        any_version: Passed to VersionStripMiddleware
    """
    setattr(app.state, STATE_ATTR, config)

    if strip_incoming and config.in_path:
        app.add_middleware(VersionStripMiddleware, config=config, any_version=any_version)


def get_config(request: Request) -> VersionedURIConfig:
    """Return the configuration installed on the request's application.

    Raises:
        ConfigurationError: If ``install`` was never called for the application.
    """
    config = getattr(request.app.state, STATE_ATTR, None)
    if config is None:
        raise ConfigurationError(
            "Versioned URIs are not installed on this application",
            option=STATE_ATTR,
        )
    return config


def versioned_url_for(request: Request, name: str, /, **path_params: Any) -> str:
    """Build a URL for a named route and embed the application version.

    Args:
        request: The current request
        name: Route or mount name, e.g. "static"
        **path_params: Route parameters, e.g. ``path="css/app.css"``

    Returns:
        Absolute URL string, versioned if it matches a configured prefix.
    """
    url_for = versioned(request.url_for, get_config(request), base=str(request.base_url))
    return url_for(name, **path_params)

"""Framework adapters for versioned URIs.

This package connects the framework-agnostic rewriter to specific web
frameworks:

- asgi.py: Starlette / FastAPI helpers and middleware
"""

from versioned_uri.adapters.asgi import VersionStripMiddleware, install, versioned_url_for

__all__ = ["VersionStripMiddleware", "install", "versioned_url_for"]

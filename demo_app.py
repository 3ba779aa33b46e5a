"""Demo FastAPI application with versioned URIs.

This application demonstrates versioned static asset links.
Run with: python demo_app.py
Then open http://localhost:8000 and look at the generated links.
"""

import tempfile
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from versioned_uri.adapters.asgi import install, versioned_url_for
from versioned_uri.config import VersionedURIConfig
from versioned_uri.observability.logging import configure_logging

APP_VERSION = "0.1.0"

# Static assets served from a throwaway directory
static_dir = Path(tempfile.mkdtemp(prefix="versioned-uri-demo-"))
(static_dir / "app.css").write_text("body { font-family: sans-serif; }\n")
(static_dir / "app.js").write_text("console.log('versioned');\n")

app = FastAPI(
    title="Versioned URI Demo",
    description="Demo app embedding the release version in static asset links",
    version=APP_VERSION,
)
app.mount("/static", StaticFiles(directory=static_dir), name="static")

# Path mode, with the app stripping the segment itself since no proxy is in front
config = VersionedURIConfig(
    uri=["static"],
    in_path=True,
    version=APP_VERSION,
)
install(app, config, strip_incoming=True)


@app.get("/", response_class=HTMLResponse)
async def index(request: Request) -> str:
    """Page linking versioned assets."""
    css = versioned_url_for(request, "static", path="app.css")
    js = versioned_url_for(request, "static", path="app.js")
    return (
        "<html><head>"
        f'<link rel="stylesheet" href="{css}">'
        f'<script src="{js}"></script>'
        "</head><body><h1>Versioned URI Demo</h1>"
        f"<p>Stylesheet: <code>{css}</code></p>"
        f"<p>Script: <code>{js}</code></p>"
        "</body></html>"
    )


@app.get("/api/links")
async def links(request: Request) -> dict[str, str]:
    """Generated links as JSON, plus one outside the versioned prefixes."""
    return {
        "css": versioned_url_for(request, "static", path="app.css"),
        "js": versioned_url_for(request, "static", path="app.js"),
        "self": versioned_url_for(request, "links"),
    }


if __name__ == "__main__":
    configure_logging(level="DEBUG", json_output=False)

    print("=" * 60)
    print("Versioned URI Demo Server")
    print("=" * 60)
    print("\nStarting server at http://localhost:8000")
    print("\nTry these commands:")
    print("  curl http://localhost:8000/api/links")
    print(f"  curl http://localhost:8000/static/v{APP_VERSION}/app.css")
    print("\nPress Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")

"""AI Image Generator — FastAPI Application.

This module is the single entry point for the web application.  It defines
the FastAPI ``app`` instance, the REST routes, and the ``main()`` CLI
function that launches the uvicorn server.

Architecture
------------
The application is stateless:

- **Image generation** happens entirely on the external Pollinations
  service.  ``POST /api/generate`` only validates the prompt and builds the
  image URL with :func:`~imagegen.core.image_url.build_image_url`; the
  browser then loads the image from that URL directly.
- **Static assets** (CSS, JS) are served by FastAPI's ``StaticFiles``
  middleware.
- **The HTML page** is served as a raw ``HTMLResponse`` — no template
  engine is needed because the page holds no server-side data.

Endpoints
---------
========  ============================  ====================================
Method    Path                          Purpose
========  ============================  ====================================
GET       ``/``                         Serve the main HTML page
POST      ``/api/generate``             Build the image URL for a prompt
========  ============================  ====================================

Usage
-----
CLI (installed entry point)::

    imagegen

Direct invocation::

    python -m imagegen.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError

from imagegen import __version__
from imagegen.api.models import (
    GENERATION_FAILED,
    PROMPT_REQUIRED,
    ErrorResponse,
    GenerateRequest,
    GenerateResponse,
)
from imagegen.core.config import config
from imagegen.core.image_url import build_image_url

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Resolve paths from the global configuration instance.
# ---------------------------------------------------------------------------
STATIC_DIR: Path = config.static_dir
TEMPLATES_DIR: Path = config.templates_dir


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log the upstream service settings once the server starts.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    logger.info(
        f"Image service: {config.image_service_url} "
        f"({config.image_width}x{config.image_height}, nologo={config.nologo})"
    )
    yield


# ---------------------------------------------------------------------------
# FastAPI application instance.
# ---------------------------------------------------------------------------
app = FastAPI(
    title="AI Image Generator",
    description="Turns a text prompt into an image URL on the Pollinations service.",
    version=__version__,
    lifespan=lifespan,
)

# Allow cross-origin requests so the frontend can be served from a different
# port during development.  In production, restrict ``allow_origins`` to the
# actual deployment domain.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


def _error_response(status_code: int, message: str) -> JSONResponse:
    """Build an ``{"error": message}`` JSON response."""
    return JSONResponse(
        ErrorResponse(error=message).model_dump(),
        status_code=status_code,
    )


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Serve the main application HTML page.

    Returns:
        The HTML content of the application page.

    Raises:
        HTTPException: 404 if ``index.html`` is not found.
    """
    index_path = TEMPLATES_DIR / "index.html"
    if index_path.exists():
        return HTMLResponse(content=index_path.read_text(encoding="utf-8"))
    raise HTTPException(status_code=404, detail="index.html not found")


@app.post(
    "/api/generate",
    response_model=GenerateResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid prompt"},
        500: {"model": ErrorResponse, "description": "Unexpected failure"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": GenerateRequest.model_json_schema()}},
        }
    },
)
async def generate_image(request: Request) -> JSONResponse:
    """Build the upstream image URL for a prompt.

    The body is parsed and validated here rather than through a typed
    parameter so that every failure keeps the ``{"error": ...}`` shape:

    - missing, non-string, or blank ``prompt`` (or a non-object body)
      → 400 ``{"error": "Prompt is required"}``
    - malformed JSON or any other unexpected error
      → 500 ``{"error": "Failed to generate image"}``

    No request is made to the image service; the browser fetches the image
    from the returned URL.

    Args:
        request: The incoming request.

    Returns:
        JSON response with ``imageUrl`` on success, ``error`` otherwise.
    """
    try:
        payload = await request.json()

        try:
            req = GenerateRequest.model_validate(payload)
        except ValidationError:
            return _error_response(400, PROMPT_REQUIRED)

        image_url = build_image_url(req.prompt, config)
        logger.debug(f"Built image URL: {image_url}")

        return JSONResponse(GenerateResponse(image_url=image_url).model_dump(by_alias=True))
    except Exception:
        logger.exception("Error generating image")
        return _error_response(500, GENERATION_FAILED)


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host, port and log level from :data:`~imagegen.core.config.config`
    (``IMAGEGEN_SERVER_HOST``, ``IMAGEGEN_SERVER_PORT`` and
    ``IMAGEGEN_LOG_LEVEL``).  Defaults to ``0.0.0.0:7860``.

    This function is registered as the ``imagegen`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        "imagegen.api.main:app",
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()

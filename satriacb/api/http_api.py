"""
HTTP API adapter for the SatriaCb proxy.

Architectural role:
- Expose the JSON endpoints used by the bundled browser UI.
- Parse transport payloads and delegate work to `satriacb.core.engine`.
- Map errors to JSON bodies in one place.
- Serve the static frontend with an `index.html` fallback.

Endpoint responsibilities:
- `POST /api/chat`: `{message}` -> `{reply}`.
- `POST /api/generate-image`: `{prompt}` -> `{imageBase64}`.
- `POST /api/analyze-image`: multipart `image` -> `{analysis}`.
- `POST /api/feedback`: `{name?, message}` -> `{ok, result}`.
- `GET /<anything else>`: bundled file, or `index.html` when none matches.

Error handling strategy:
- `ProxyError` subclasses become `{error}` (plus `raw` for upstream
  mismatches) with their own status code.
- Malformed bodies become HTTP 400 `{error: "Invalid request body"}`.
- Any other exception is logged and becomes HTTP 500 `{error}`, inside route
  bodies (`_guarded`) and outside them (catch-all handler).

Side effects:
- `create_app()` without arguments reads configuration from the environment
  (and `.env`) once.
"""

import logging
import os
from typing import Optional

from fastapi import Depends, FastAPI, File, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from pydantic import BaseModel

from satriacb.core import engine
from satriacb.core.errors import ProxyError
from satriacb.core.settings import Settings


logger = logging.getLogger(__name__)


# ============================================================
# Request / Response Schemas
# ============================================================
# Request fields are optional so that missing values reach the engine and
# produce the endpoint-specific error messages instead of a generic 400.

class ChatRequest(BaseModel):
    message: Optional[str] = None


class ImageRequest(BaseModel):
    prompt: Optional[str] = None


class FeedbackRequest(BaseModel):
    name: Optional[str] = None
    message: Optional[str] = None


class ChatResponse(BaseModel):
    reply: str


class ImageResponse(BaseModel):
    imageBase64: str


class AnalysisResponse(BaseModel):
    analysis: str


# ============================================================
# Helpers
# ============================================================

def get_settings(request: Request) -> Settings:
    """Return the settings object bound to the running application."""
    return request.app.state.settings


async def _guarded(operation):
    """Await an engine coroutine, turning unexpected errors into `ProxyError`."""
    try:
        return await operation
    except ProxyError:
        raise
    except Exception as exc:
        logger.exception("Request failed")
        raise ProxyError(str(exc) or "Internal error") from exc


def _is_inside(path: str, base_dir: str) -> bool:
    """Return whether `path` resolves inside `base_dir`."""
    try:
        return os.path.commonpath([path, base_dir]) == base_dir
    except ValueError:
        return False


def _resolve_static(public_dir: str, requested: str) -> Optional[str]:
    """
    Map a URL path to a bundled file.

    Returns `None` for directories, missing files and paths escaping
    `public_dir`, so the caller can fall back to `index.html`.
    """
    base_dir = os.path.realpath(public_dir)
    candidate = os.path.realpath(os.path.join(base_dir, requested.lstrip("/")))

    if not _is_inside(candidate, base_dir):
        return None
    if not os.path.isfile(candidate):
        return None
    return candidate


# ============================================================
# Application Factory
# ============================================================

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration to bind; read from the environment when omitted.

    Returns:
        A ready-to-serve application with routes, CORS and error handlers.
    """
    settings = settings or Settings.from_env()

    app = FastAPI(title="SatriaCb", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --------------------------------------------------------
    # Error handlers
    # --------------------------------------------------------

    @app.exception_handler(ProxyError)
    async def proxy_error_handler(request: Request, exc: ProxyError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info("Rejected body for %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("%s %s failed", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": str(exc) or "Internal error"})

    # --------------------------------------------------------
    # API routes
    # --------------------------------------------------------

    @app.post("/api/chat", response_model=ChatResponse)
    async def chat(
        payload: Optional[ChatRequest] = None,
        settings: Settings = Depends(get_settings),
    ):
        message = payload.message if payload else None
        return await _guarded(engine.chat(settings, message))

    @app.post("/api/generate-image", response_model=ImageResponse)
    async def generate_image(
        payload: Optional[ImageRequest] = None,
        settings: Settings = Depends(get_settings),
    ):
        prompt = payload.prompt if payload else None
        return await _guarded(engine.create_image(settings, prompt))

    @app.post("/api/analyze-image", response_model=AnalysisResponse)
    async def analyze_image(
        image: Optional[UploadFile] = File(default=None),
        settings: Settings = Depends(get_settings),
    ):
        data = None
        filename = None
        content_type = None
        if image is not None:
            # One byte past the limit is enough for `stored_upload` to reject it.
            data = await image.read(settings.max_upload_bytes + 1)
            filename = image.filename
            content_type = image.content_type
            await image.close()

        return await _guarded(
            engine.analyze_upload(settings, data, filename=filename, content_type=content_type)
        )

    @app.post("/api/feedback")
    async def feedback(
        payload: Optional[FeedbackRequest] = None,
        settings: Settings = Depends(get_settings),
    ):
        name = payload.name if payload else None
        message = payload.message if payload else None
        return await _guarded(engine.submit_feedback(settings, name, message))

    # --------------------------------------------------------
    # Static frontend (registered last so API routes win)
    # --------------------------------------------------------

    @app.get("/{full_path:path}", include_in_schema=False)
    async def frontend(full_path: str, settings: Settings = Depends(get_settings)):
        path = _resolve_static(settings.public_dir, full_path)
        if path is None:
            path = os.path.join(settings.public_dir, "index.html")
        if not os.path.isfile(path):
            return JSONResponse(status_code=404, content={"error": "Frontend not found"})
        return FileResponse(path)

    return app

"""Per-endpoint request orchestration.

Architectural role:
    Sits between the HTTP adapter and the service modules. Each coroutine
    validates its input, runs the blocking service call in a worker thread,
    and returns the JSON-ready response body.

Control-flow model (every entrypoint):
    1. Validate required fields (`ValidationError` with a fixed message).
    2. Run the service call via `asyncio.to_thread`.
    3. Return the response dict; service errors propagate unchanged.

Interaction surface:
    - Text: `llm.service.generate_answer`, `llm.service.analyze_image`.
    - Image: `image.service.generate_image`.
    - Feedback: `feedback.telegram_client.send_feedback`.
    - Uploads: `api.multimodal.upload_manager.stored_upload`.

Error handling strategy:
    No exception is swallowed here. `satriacb.api.http_api` maps
    `ProxyError` subclasses to their status codes and anything else to 500.

Side effects:
    Outbound HTTP calls and short-lived temporary files only. No state is kept
    between requests.
"""

import asyncio
import logging
from typing import Any, Optional

from satriacb.api.multimodal.upload_manager import stored_upload
from satriacb.core.errors import ConfigurationError, ValidationError
from satriacb.core.settings import Settings
from satriacb.feedback.telegram_client import send_feedback
from satriacb.image.service import generate_image
from satriacb.llm.service import analyze_image, generate_answer
from satriacb.prompting.prompt_builder import build_chat_prompt


logger = logging.getLogger(__name__)


def _require_text(value: Any, message: str) -> str:
    """Return `value` when it is a non-empty string, else raise `ValidationError`."""
    if not isinstance(value, str) or not value:
        raise ValidationError(message)
    return value


async def chat(settings: Settings, message: Optional[str]) -> dict:
    """Answer one chat message with the persona prompt."""
    message = _require_text(message, "Missing message")

    reply = await asyncio.to_thread(generate_answer, settings, build_chat_prompt(message))
    return {"reply": reply}


async def create_image(settings: Settings, prompt: Optional[str]) -> dict:
    """Generate an image; mismatched upstream shapes surface as 502."""
    prompt = _require_text(prompt, "Missing prompt")

    image_base64 = await asyncio.to_thread(generate_image, settings, prompt)
    return {"imageBase64": image_base64}


async def analyze_upload(
    settings: Settings,
    data: Optional[bytes],
    filename: Optional[str] = None,
    content_type: Optional[str] = None,
) -> dict:
    """Describe an uploaded image.

    Args:
        settings: Active process settings.
        data: Raw upload bytes, or `None` when no file part was sent.
        filename: Client-side file name, informational only.
        content_type: Client-declared MIME type, used for the temp-file suffix.

    Returns:
        `{"analysis": <reply text>}`.

    Edge cases:
        - `None` data raises `ValidationError("Missing image file")`.
        - The temporary file is removed even when the model call fails.
        - Disk write, format check and model call all run in one worker thread.
    """
    if data is None:
        raise ValidationError("Missing image file")

    analysis = await asyncio.to_thread(
        _analyze_stored, settings, data, filename, content_type
    )
    return {"analysis": analysis}


def _analyze_stored(
    settings: Settings,
    data: bytes,
    filename: Optional[str],
    content_type: Optional[str],
) -> str:
    with stored_upload(data, settings, filename=filename, content_type=content_type) as image:
        logger.debug("Analyzing upload %s (%s)", image.filename, image.mime_type)
        return analyze_image(settings, image)


async def submit_feedback(
    settings: Settings,
    name: Optional[str],
    message: Optional[str],
) -> dict:
    """Forward feedback to the messaging bot.

    Configuration is checked before the message so an unconfigured deployment
    always answers 500, whatever the body.
    """
    if not settings.telegram_configured:
        raise ConfigurationError("Missing Telegram config")

    message = _require_text(message, "Missing message")
    return await asyncio.to_thread(send_feedback, settings, name, message)

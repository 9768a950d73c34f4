"""
Temporary storage and validation for uploaded images.

Architectural role:
- Persist an uploaded image to a temporary file for the duration of one request.
- Enforce size and image-type constraints before the image reaches the model.
- Provide adapter-level preprocessing only (no endpoint registration).

Processing lifecycle:
1. Reject empty payloads and payloads above the configured size limit.
2. Write the bytes to a temporary file under `settings.upload_dir`.
3. Identify the image with Pillow and map its format to a MIME type.
4. Yield an `UploadedImage` to the caller.
5. Remove the temporary file on exit, including error paths.

Error handling strategy:
- Constraint violations raise `ValidationError` (HTTP 400 at the adapter).
- Cleanup failures are logged and never mask the request outcome.
"""

import logging
import os
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from PIL import Image, UnidentifiedImageError

from satriacb.core.errors import ValidationError
from satriacb.core.settings import Settings


logger = logging.getLogger(__name__)


# ============================================================
# CONFIG
# ============================================================

FORMAT_MIME_TYPES = {
    "PNG": "image/png",
    "JPEG": "image/jpeg",
    "WEBP": "image/webp",
    "GIF": "image/gif",
}

EXTENSION_BY_MIME = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/webp": ".webp",
    "image/gif": ".gif",
}


@dataclass(frozen=True)
class UploadedImage:
    """An uploaded image, valid only inside its `stored_upload` scope."""

    path: str
    mime_type: str
    data: bytes
    filename: Optional[str] = None


# ============================================================
# PUBLIC ENTRYPOINT
# ============================================================

@contextmanager
def stored_upload(
    data: bytes,
    settings: Settings,
    filename: Optional[str] = None,
    content_type: Optional[str] = None,
) -> Iterator[UploadedImage]:
    """
    Store `data` in a temporary file and yield it as an `UploadedImage`.

    The file is deleted when the `with` block exits, whatever the outcome.
    """
    if not data:
        raise ValidationError("Empty image file")

    if len(data) > settings.max_upload_bytes:
        raise ValidationError(f"Image exceeds {settings.max_upload_mb} MB limit")

    os.makedirs(settings.upload_dir, exist_ok=True)

    temp_file = tempfile.NamedTemporaryFile(
        delete=False,
        suffix=EXTENSION_BY_MIME.get(content_type or "", ".tmp"),
        dir=settings.upload_dir,
    )
    temp_path = temp_file.name

    try:
        with temp_file:
            temp_file.write(data)

        mime_type = _identify_image(temp_path)

        yield UploadedImage(
            path=temp_path,
            mime_type=mime_type,
            data=data,
            filename=filename,
        )
    finally:
        _remove_quietly(temp_path)


# ============================================================
# VALIDATION
# ============================================================

def _identify_image(path: str) -> str:
    """Return the MIME type of the image at `path` or raise `ValidationError`."""
    try:
        with Image.open(path) as img:
            image_format = img.format
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as err:
        raise ValidationError("Unsupported image file") from err

    mime_type = FORMAT_MIME_TYPES.get(image_format or "")
    if not mime_type:
        raise ValidationError("Unsupported image file")

    return mime_type


def _remove_quietly(path: str) -> None:
    if not os.path.exists(path):
        return
    try:
        os.remove(path)
    except OSError:
        logger.exception("Failed to remove temporary upload %s", path)

"""Image generation service.

Role in pipeline:
    - Receives a user prompt from `satriacb.core.engine`.
    - Sends an image-modality `generateContent` request.
    - Runs `extract_image` and returns base64 image data.

Error handling strategy:
    - Missing key is checked before any network call (`ConfigurationError`).
    - An `Unrecognized` adapter result becomes `UpstreamMismatchError` carrying
      the raw payload, which the HTTP layer returns with status 502.
    - Transport errors from the client propagate.
"""

import logging

from satriacb.core.errors import ConfigurationError, UpstreamMismatchError
from satriacb.core.settings import Settings
from satriacb.llm.client import send_generate_content
from satriacb.llm.extraction import ImagePayload, extract_image
from satriacb.llm.provider_config import IMAGE_RESPONSE_MODALITIES
from satriacb.prompting.prompt_builder import build_image_prompt


logger = logging.getLogger(__name__)

NO_IMAGE_MESSAGE = "No image returned from Gemini"


def generate_image(settings: Settings, prompt: str) -> str:
    """Generate an image for `prompt` and return it base64-encoded.

    Raises:
        ConfigurationError: No API key configured.
        UpstreamMismatchError: The response carried no recognizable image.
    """
    if not settings.gemini_api_key:
        raise ConfigurationError("Missing GEMINI_API_KEY")

    payload = {
        "contents": [
            {"role": "user", "parts": [{"text": build_image_prompt(prompt)}]},
        ],
        "generationConfig": {
            "responseModalities": IMAGE_RESPONSE_MODALITIES,
        },
    }

    result = extract_image(send_generate_content(settings, payload))

    if isinstance(result, ImagePayload):
        return result.image_base64

    logger.warning("Image response matched no known shape")
    raise UpstreamMismatchError(NO_IMAGE_MESSAGE, raw=result.raw)

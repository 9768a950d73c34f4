"""Prompt-to-payload adapter for text generation.

Architectural role:
    Canonical text entrypoints used by `satriacb.core.engine`. Builds
    `generateContent` payloads, sends them through `satriacb.llm.client`, and
    normalizes the reply with `satriacb.llm.extraction.extract_text`.

Model call flow:
    prompt -> payload construction -> `send_generate_content` -> `extract_text`.

Determinism:
    Payload construction is deterministic for fixed inputs. Generated output is
    not, since inference runs remotely.
"""

import base64

from satriacb.api.multimodal.upload_manager import UploadedImage
from satriacb.core.settings import Settings
from satriacb.llm.client import send_generate_content
from satriacb.llm.extraction import extract_text
from satriacb.llm.provider_config import TEXT_CANDIDATE_COUNT, TEXT_TEMPERATURE
from satriacb.prompting.prompt_builder import ANALYSIS_PROMPT


def _generation_config() -> dict:
    return {
        "temperature": TEXT_TEMPERATURE,
        "candidateCount": TEXT_CANDIDATE_COUNT,
    }


def generate_answer(settings: Settings, prompt: str) -> str:
    """Send a fully built prompt and return the extracted reply text.

    Returns:
        The reply text, or the serialized upstream payload when no text is
        found in a known place.

    Failure scenarios:
        Configuration and transport errors from the client propagate.
    """
    payload = {
        "contents": [
            {"role": "user", "parts": [{"text": prompt}]},
        ],
        "generationConfig": _generation_config(),
    }

    return extract_text(send_generate_content(settings, payload))


def analyze_image(settings: Settings, image: UploadedImage) -> str:
    """Ask the model to describe an uploaded image.

    The image travels as an `inlineData` part next to `ANALYSIS_PROMPT`.
    """
    payload = {
        "contents": [
            {
                "role": "user",
                "parts": [
                    {"text": ANALYSIS_PROMPT},
                    {
                        "inlineData": {
                            "mimeType": image.mime_type,
                            "data": base64.b64encode(image.data).decode("ascii"),
                        }
                    },
                ],
            }
        ],
        "generationConfig": _generation_config(),
    }

    return extract_text(send_generate_content(settings, payload))

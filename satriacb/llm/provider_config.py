"""Endpoint and generation defaults for the generative-language API.

Architectural role:
    Holds the constants consumed by `satriacb.llm.client` and the payload
    builders in `satriacb.llm.service` / `satriacb.image.service`.
    Credentials and the model name live on `satriacb.core.settings.Settings`.
"""

GEMINI_URL_TEMPLATE = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "{model}:generateContent"
)

# Chat/analysis generation config.
TEXT_TEMPERATURE = 0.2
TEXT_CANDIDATE_COUNT = 1

# Image generation asks for both modalities; some models refuse IMAGE alone.
IMAGE_RESPONSE_MODALITIES = ["TEXT", "IMAGE"]


def build_generate_url(model: str) -> str:
    """Return the `generateContent` URL for `model`."""
    return GEMINI_URL_TEMPLATE.format(model=model)

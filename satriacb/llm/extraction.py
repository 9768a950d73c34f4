"""Response-shape adapter for `generateContent` payloads.

Architectural role:
    Turns the loosely-structured JSON returned by the generative-language API
    into one predictable result for services. Several response shapes are in
    circulation, so each known shape is a small pure strategy and the adapter
    runs them in a fixed priority order, stopping at the first match.

Priority order:
    Text:
        1. `candidates[0].content[0].text` (non-empty string)
        2. full payload serialized to JSON (always succeeds)
    Image:
        1. `candidates[0].content[0].image.imageBytes`
        2. base64 data URL embedded in `candidates[0].content[0].text`
        3. `Unrecognized(payload)`

Failure handling model:
    Nothing in this module raises. Missing keys, wrong container types and
    non-dict payloads all degrade to "no match". Callers decide what an
    `Unrecognized` result means (the image service maps it to HTTP 502).

Determinism:
    Pure functions of the payload.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Union


DATA_URL_PATTERN = re.compile(r"data:image/(png|jpeg);base64,([A-Za-z0-9+/=]+)")


@dataclass(frozen=True)
class TextReply:
    """A textual reply found in the payload."""

    text: str


@dataclass(frozen=True)
class ImagePayload:
    """Base64-encoded image bytes found in the payload."""

    image_base64: str


@dataclass(frozen=True)
class Unrecognized:
    """No known shape matched; `raw` is the untouched payload."""

    raw: Any


AdapterResult = Union[TextReply, ImagePayload, Unrecognized]

Strategy = Callable[[Any], Optional[str]]


# ============================================================
# Path helpers
# ============================================================

def _first(value: Any) -> Any:
    """Return `value[0]` for non-empty lists, otherwise `None`."""
    if isinstance(value, list) and value:
        return value[0]
    return None


def _field(value: Any, key: str) -> Any:
    if isinstance(value, dict):
        return value.get(key)
    return None


def _first_content_part(payload: Any) -> Any:
    """Resolve `candidates[0].content[0]`."""
    candidate = _first(_field(payload, "candidates"))
    return _first(_field(candidate, "content"))


def _non_empty_string(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


# ============================================================
# Strategies
# ============================================================

def candidate_text(payload: Any) -> Optional[str]:
    """Match `candidates[0].content[0].text`."""
    return _non_empty_string(_field(_first_content_part(payload), "text"))


def inline_image_bytes(payload: Any) -> Optional[str]:
    """Match `candidates[0].content[0].image.imageBytes` (already base64)."""
    image = _field(_first_content_part(payload), "image")
    return _non_empty_string(_field(image, "imageBytes"))


def data_url_in_text(payload: Any) -> Optional[str]:
    """Match a `data:image/(png|jpeg);base64,...` URL inside the candidate text."""
    text = candidate_text(payload)
    if text is None:
        return None
    match = DATA_URL_PATTERN.search(text)
    if not match:
        return None
    return match.group(2)


TEXT_STRATEGIES: Sequence[Strategy] = (candidate_text,)

# Image bytes are trusted over any data URL found in text.
IMAGE_STRATEGIES: Sequence[Strategy] = (inline_image_bytes, data_url_in_text)


def run_strategies(strategies: Sequence[Strategy], payload: Any) -> Optional[str]:
    """Return the first non-`None` strategy result, or `None` when all miss."""
    for strategy in strategies:
        found = strategy(payload)
        if found is not None:
            return found
    return None


def serialize_payload(payload: Any) -> str:
    """Serialize a payload the way it would travel on the wire."""
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"), default=str)


# ============================================================
# Public entrypoints
# ============================================================

def extract_text(payload: Any) -> str:
    """Return the reply text, or the serialized payload when none is found.

    The fallback means a response is never silently dropped: whatever the
    upstream sent reaches the user.
    """
    text = run_strategies(TEXT_STRATEGIES, payload)
    if text is not None:
        return text
    return serialize_payload(payload)


def extract_image(payload: Any) -> AdapterResult:
    """Return `ImagePayload` for the first matching image shape, else `Unrecognized`."""
    image_base64 = run_strategies(IMAGE_STRATEGIES, payload)
    if image_base64 is not None:
        return ImagePayload(image_base64)
    return Unrecognized(payload)

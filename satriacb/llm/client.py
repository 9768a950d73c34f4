"""Blocking HTTP transport for the `generateContent` endpoint.

Architectural role:
    Sends one JSON payload to the configured model and returns the parsed
    response body untouched. Interpreting the body is the job of
    `satriacb.llm.extraction`.

Model invocation flow:
    service -> `send_generate_content(settings, payload)` -> POST -> parsed JSON.

Retry behavior:
    No retry loop. Each call is attempted once, bounded by
    `settings.request_timeout`.

Failure handling model:
    - Missing API key -> `ConfigurationError`.
    - Connection errors, timeouts, non-JSON bodies -> `TransportError`.
    - Upstream HTTP error statuses are NOT raised: their JSON body is returned
      so the adapter fallback can surface it to the user.
"""

import logging

import requests

from satriacb.core.errors import ConfigurationError, TransportError
from satriacb.core.settings import Settings
from satriacb.llm.provider_config import build_generate_url


logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "Missing GEMINI_API_KEY in environment"


def _describe_request_error(err: requests.exceptions.RequestException) -> str:
    """Build error text without exposing the request URL or headers."""
    if isinstance(err, requests.exceptions.Timeout):
        return "Gemini request timed out"
    if isinstance(err, requests.exceptions.ConnectionError):
        return "Could not connect to Gemini"
    return "Gemini request failed"


def send_generate_content(settings: Settings, payload: dict) -> dict:
    """POST `payload` to the configured model and return the JSON body.

    Args:
        settings: Active process settings (key, model, timeout).
        payload: `generateContent` request body.

    Returns:
        Parsed JSON body of any shape.

    Raises:
        ConfigurationError: No API key configured.
        TransportError: Network failure, timeout or unparsable body.
    """
    if not settings.gemini_api_key:
        raise ConfigurationError(MISSING_KEY_MESSAGE)

    url = build_generate_url(settings.gemini_model)
    headers = {
        "x-goog-api-key": settings.gemini_api_key,
        "Content-Type": "application/json",
    }

    logger.debug("POST generateContent model=%s", settings.gemini_model)

    try:
        response = requests.post(
            url,
            headers=headers,
            json=payload,
            timeout=settings.request_timeout,
        )
    except requests.exceptions.RequestException as err:
        raise TransportError(_describe_request_error(err)) from err

    if response.status_code >= 400:
        logger.warning(
            "Gemini answered with HTTP %s for model=%s",
            response.status_code,
            settings.gemini_model,
        )

    try:
        return response.json()
    except ValueError as err:
        raise TransportError(
            f"Gemini returned a non-JSON response (HTTP {response.status_code})"
        ) from err

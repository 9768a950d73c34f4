"""Messaging-bot client for feedback messages.

Processing flow:
    1. Check bot token and destination chat are configured.
    2. Format the feedback text (`prompt_builder.build_feedback_text`).
    3. POST to the bot `sendMessage` method.
    4. Return `{"ok": ..., "result": ...}` from the bot response.

Error handling strategy:
    - Missing configuration -> `ConfigurationError`.
    - Transport failures and non-JSON bodies -> `TransportError`.
    - A bot-level refusal (`ok: false`) is not an error here; it is returned
      to the browser as-is.

Security considerations:
    The bot token is part of the URL, so it is never logged.
"""

import logging
from typing import Optional

import requests

from satriacb.core.errors import ConfigurationError, TransportError
from satriacb.core.settings import Settings
from satriacb.prompting.prompt_builder import build_feedback_text


logger = logging.getLogger(__name__)

TELEGRAM_URL_TEMPLATE = "https://api.telegram.org/bot{token}/sendMessage"


def send_feedback(settings: Settings, name: Optional[str], message: str) -> dict:
    """Forward one feedback message to the configured chat.

    Returns:
        `{"ok": bool | None, "result": <bot result or full bot body>}`.

    Raises:
        ConfigurationError: Bot token or chat id missing.
        TransportError: Network failure or unparsable bot response.
    """
    if not settings.telegram_configured:
        raise ConfigurationError("Missing Telegram config")

    url = TELEGRAM_URL_TEMPLATE.format(token=settings.telegram_bot_token)
    body = {
        "chat_id": settings.telegram_chat_id,
        "text": build_feedback_text(name, message),
        "parse_mode": "HTML",
    }

    try:
        response = requests.post(url, json=body, timeout=settings.request_timeout)
    except requests.exceptions.RequestException as err:
        raise TransportError("Telegram request failed") from err

    try:
        data = response.json()
    except ValueError as err:
        raise TransportError(
            f"Telegram returned a non-JSON response (HTTP {response.status_code})"
        ) from err

    if not isinstance(data, dict):
        return {"ok": None, "result": data}

    if not data.get("ok"):
        logger.warning("Telegram rejected feedback: %s", data.get("description"))

    return {"ok": data.get("ok"), "result": data.get("result") or data}

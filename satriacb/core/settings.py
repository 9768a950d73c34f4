"""Process configuration for the proxy.

Architectural role:
    Replaces scattered module-level `os.getenv` lookups with one immutable
    `Settings` object. It is built once when the application is created and
    handed to every service call, so tests can substitute credentials by
    constructing their own instance.

Resolution:
    `Settings.from_env()` loads `.env` via python-dotenv, then reads process
    environment variables. Blank values are treated as missing.

Determinism:
    Deterministic for a fixed environment and `.env` file.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv


DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_REQUEST_TIMEOUT = 120.0
DEFAULT_MAX_UPLOAD_MB = 10

PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_PUBLIC_DIR = os.path.join(PACKAGE_DIR, "public")


def _env(name: str) -> Optional[str]:
    """Read an environment variable, returning `None` for unset or blank values."""
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _env_int(name: str, default: int) -> int:
    value = _env(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


def _env_float(name: str, default: float) -> float:
    value = _env(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}")


@dataclass(frozen=True)
class Settings:
    """Credentials and runtime knobs for one proxy process.

    Attributes:
        gemini_api_key: Key for the generative-language API, or `None`.
        gemini_model: Model identifier used in the `generateContent` URL.
        telegram_bot_token: Messaging-bot token, or `None`.
        telegram_chat_id: Destination chat for feedback messages, or `None`.
        host: Interface the HTTP server binds to.
        port: Listening port.
        request_timeout: Upper bound in seconds for every outbound call.
        upload_dir: Directory receiving temporary upload files.
        max_upload_mb: Largest accepted upload.
        public_dir: Directory holding the bundled browser UI.
    """

    gemini_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_GEMINI_MODEL
    telegram_bot_token: Optional[str] = None
    telegram_chat_id: Optional[str] = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    upload_dir: str = "uploads"
    max_upload_mb: int = DEFAULT_MAX_UPLOAD_MB
    public_dir: str = field(default=DEFAULT_PUBLIC_DIR)

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

    @property
    def telegram_configured(self) -> bool:
        return bool(self.telegram_bot_token and self.telegram_chat_id)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from `.env` and the process environment.

        Raises:
            ValueError: When a numeric variable cannot be parsed.
        """
        load_dotenv()

        return cls(
            gemini_api_key=_env("GEMINI_API_KEY"),
            gemini_model=_env("GEMINI_MODEL") or DEFAULT_GEMINI_MODEL,
            telegram_bot_token=_env("TELEGRAM_BOT_TOKEN"),
            telegram_chat_id=_env("TELEGRAM_CHAT_ID"),
            host=_env("HOST") or DEFAULT_HOST,
            port=_env_int("PORT", DEFAULT_PORT),
            request_timeout=_env_float("REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT),
            upload_dir=_env("UPLOAD_DIR") or "uploads",
            max_upload_mb=_env_int("MAX_UPLOAD_MB", DEFAULT_MAX_UPLOAD_MB),
            public_dir=_env("PUBLIC_DIR") or DEFAULT_PUBLIC_DIR,
        )

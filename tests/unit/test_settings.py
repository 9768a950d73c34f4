from __future__ import annotations

import pytest

import satriacb.core.settings as settings_module
from satriacb.core.settings import DEFAULT_GEMINI_MODEL, Settings

ENV_NAMES = (
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "TELEGRAM_BOT_TOKEN",
    "TELEGRAM_CHAT_ID",
    "HOST",
    "PORT",
    "REQUEST_TIMEOUT",
    "UPLOAD_DIR",
    "MAX_UPLOAD_MB",
    "PUBLIC_DIR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings_module, "load_dotenv", lambda: None)
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults_when_environment_is_empty() -> None:
    settings = Settings.from_env()

    assert settings.gemini_api_key is None
    assert settings.gemini_model == DEFAULT_GEMINI_MODEL
    assert settings.port == 3000
    assert settings.request_timeout == 120.0
    assert settings.max_upload_bytes == 10 * 1024 * 1024
    assert settings.telegram_configured is False


def test_reads_values_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", " key-123 ")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-custom")
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "tok")
    monkeypatch.setenv("TELEGRAM_CHAT_ID", "-100")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("REQUEST_TIMEOUT", "7.5")

    settings = Settings.from_env()

    assert settings.gemini_api_key == "key-123"
    assert settings.gemini_model == "gemini-custom"
    assert settings.port == 8080
    assert settings.request_timeout == 7.5
    assert settings.telegram_configured is True


def test_blank_values_count_as_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "   ")
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "tok")
    monkeypatch.setenv("TELEGRAM_CHAT_ID", "")

    settings = Settings.from_env()

    assert settings.gemini_api_key is None
    assert settings.telegram_configured is False


def test_invalid_port_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "eighty")

    with pytest.raises(ValueError, match="PORT"):
        Settings.from_env()

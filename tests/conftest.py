from __future__ import annotations

import io
from typing import Any

import pytest
import requests
from fastapi.testclient import TestClient
from PIL import Image

from satriacb.api.http_api import create_app
from satriacb.core.settings import Settings


class FakeResponse:
    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakePost:
    """Stand-in for `requests.post` returning queued responses in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self._responses: list[Any] = []

    def queue(self, payload: Any, status_code: int = 200) -> None:
        self._responses.append(FakeResponse(payload, status_code))

    def fail_with(self, exc: Exception) -> None:
        self._responses.append(exc)

    def __call__(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append((url, kwargs))
        if not self._responses:
            raise AssertionError(f"unexpected outbound call to {url}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_post(monkeypatch: pytest.MonkeyPatch) -> FakePost:
    fake = FakePost()
    monkeypatch.setattr(requests, "post", fake)
    return fake


@pytest.fixture
def public_dir(tmp_path):
    directory = tmp_path / "public"
    directory.mkdir()
    (directory / "index.html").write_text("<html>SatriaCb</html>", encoding="utf-8")
    (directory / "script.js").write_text("console.log('ok');", encoding="utf-8")
    return directory


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def settings(public_dir, upload_dir) -> Settings:
    return Settings(
        gemini_api_key="test-key",
        gemini_model="gemini-test",
        telegram_bot_token="bot-token",
        telegram_chat_id="12345",
        request_timeout=5.0,
        upload_dir=str(upload_dir),
        public_dir=str(public_dir),
    )


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))


def make_png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color=(200, 30, 30)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    return make_png_bytes()

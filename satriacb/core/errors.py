"""Error taxonomy shared by the proxy layers.

Architectural role:
    Gives services and orchestration a small set of exception types that the
    HTTP adapter maps to JSON error bodies in one place.

Status mapping:
    - `ValidationError` -> 400 (missing message/prompt/file, unreadable upload).
    - `ConfigurationError` -> 500 (missing credential).
    - `UpstreamMismatchError` -> 502 (upstream answered in an unknown shape).
    - `TransportError` -> 500 (network failure or non-JSON upstream body).

Failure handling model:
    Nothing here is retried. Every error is converted to a response at the
    handler boundary by `satriacb.api.http_api`.
"""

from typing import Any


class ProxyError(Exception):
    """Base class for errors that carry their own HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_body(self) -> dict:
        """Return the JSON error body sent to the browser."""
        return {"error": self.message}


class ValidationError(ProxyError):
    """A required request field is missing or unusable."""

    status_code = 400


class ConfigurationError(ProxyError):
    """A credential needed for the outbound call is not configured."""

    status_code = 500


class UpstreamMismatchError(ProxyError):
    """The upstream API answered, but in a shape the adapter does not know.

    The raw payload is attached so the client can inspect it.
    """

    status_code = 502

    def __init__(self, message: str, raw: Any = None):
        super().__init__(message)
        self.raw = raw

    def to_body(self) -> dict:
        return {"error": self.message, "raw": self.raw}


class TransportError(ProxyError):
    """Talking to the upstream API failed before a JSON body was obtained."""

    status_code = 500

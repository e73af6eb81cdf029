"""
Test configuration and fixtures for methodapi tests.

Provides shared fixtures for:
- Raw Starlette requests built from an ASGI scope
- Response writers
- Handler settings
- Environment variable management
"""

from typing import Callable, Dict, List, Optional, Tuple

import pytest
from starlette.requests import Request

from methodapi import AdapterSettings, ResponseWriter


@pytest.fixture
def make_request() -> Callable[..., Request]:
    """Provide a factory for Starlette requests with a fixed body.

    Returns:
        Callable taking the body bytes and optional headers/method.
    """

    def factory(
        body: bytes = b"",
        headers: Optional[Dict[str, str]] = None,
        method: str = "POST",
    ) -> Request:
        raw_headers: List[Tuple[bytes, bytes]] = [
            (key.lower().encode("latin-1"), value.encode("latin-1"))
            for key, value in (headers or {}).items()
        ]
        scope = {
            "type": "http",
            "method": method,
            "path": "/",
            "raw_path": b"/",
            "query_string": b"",
            "headers": raw_headers,
        }
        messages = [{"type": "http.request", "body": body, "more_body": False}]

        async def receive():
            if messages:
                return messages.pop(0)
            return {"type": "http.disconnect"}

        return Request(scope, receive)

    return factory


@pytest.fixture
def writer() -> ResponseWriter:
    """Provide a fresh response writer."""
    return ResponseWriter()


@pytest.fixture
def settings() -> AdapterSettings:
    """Provide default handler settings independent of the environment."""
    return AdapterSettings()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove methodapi environment variables for the duration of a test."""
    for key in (
        "METHODAPI_MAX_BODY_SIZE",
        "METHODAPI_REQUEST_TIMEOUT",
        "METHODAPI_SYNC_IN_THREADPOOL",
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch

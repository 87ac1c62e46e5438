from typing import Any, Callable, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from backend.app import app, get_http_client
from backend.config import get_settings

from .helpers import make_settings


def _unexpected(request: httpx.Request) -> httpx.Response:
    raise AssertionError(f"unexpected outbound request: {request.url}")


@pytest.fixture
def api():
    """Factory building a TestClient whose outbound HTTP goes to `handler`."""

    def _make(handler: Optional[Callable[[httpx.Request], httpx.Response]] = None, **overrides: Any) -> TestClient:
        settings = make_settings(**overrides)
        transport = httpx.MockTransport(handler or _unexpected)

        async def _client():
            async with httpx.AsyncClient(transport=transport) as client:
                yield client

        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_http_client] = _client
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()

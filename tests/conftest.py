from __future__ import annotations

import os

# settings are read at import time
os.environ.setdefault("GET_KEY", "test-key")
os.environ.pop("HOSTNAME_OVERRIDE", None)

import httpx  # noqa: E402
import pytest  # noqa: E402

from app.services.disco_api import DiscoAPIClient  # noqa: E402

API_BASE = "https://api.disco.test"


class FakeBackend:
    """Scripted stand-in for the Disco.pics backend, served through httpx.MockTransport."""

    def __init__(self) -> None:
        self.image_status = 200
        self.image_json: object = None
        self.user_status = 200
        self.user_json: object = {"data": {"user": {}}}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/api/getImage":
            return httpx.Response(self.image_status, json=self.image_json)
        if request.url.path == "/api/user":
            return httpx.Response(self.user_status, json=self.user_json)
        return httpx.Response(404)

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def api_client(backend: FakeBackend) -> DiscoAPIClient:
    return DiscoAPIClient(
        base_url=API_BASE,
        key="secret-key",
        transport=httpx.MockTransport(backend.handler),
    )


@pytest.fixture
def image_json() -> dict:
    return {
        "slug": "abc123",
        "img_url": "https://cdn.discordapp.com/x.png",
        "id": "1",
        "uploaded_at": "t",
        "uploaded_by": "u1",
    }

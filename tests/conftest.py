import asyncio
import sys
from pathlib import Path
from typing import Any

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.config import Settings  # noqa: E402
from core.dispatcher import dispatch  # noqa: E402

API_URL = "https://atlas.test/api"


class FakeDocsApi:
    """
    Stand-in for the documentation API.
    Records every request and answers with a canned response.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status = 200
        self.body: Any = {"ok": True}
        self.raw: bytes | None = None
        self.error: Exception | None = None

    def respond(self, status: int = 200, body: Any = None, raw: bytes | None = None) -> None:
        self.status = status
        self.body = body
        self.raw = raw

    def fail_with(self, error: Exception) -> None:
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw is not None:
            return httpx.Response(self.status, content=self.raw)
        return httpx.Response(self.status, json=self.body)

    def call(self, name: str, arguments: Any = None, settings: Settings | None = None):
        """Run dispatch() against this fake and return the ToolResult."""

        async def go():
            transport = httpx.MockTransport(self.handler)
            async with httpx.AsyncClient(transport=transport) as client:
                return await dispatch(
                    name,
                    arguments,
                    settings=settings or Settings(api_url=API_URL),
                    client=client,
                )

        return asyncio.run(go())


@pytest.fixture
def docs_api() -> FakeDocsApi:
    return FakeDocsApi()


@pytest.fixture(autouse=True)
def set_env(monkeypatch):
    """
    Point every test at the fake API host, never the production one.
    """
    monkeypatch.setenv("ATLAS_API_URL", API_URL)
    yield

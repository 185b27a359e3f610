from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest
import pytest_asyncio

from requestsmith import RequestConfig

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator


class RecordingHandler:
    """Request handler for ``httpx.MockTransport`` that records every
    request it receives.

    Args:
        status_code: The status code of the returned responses.
        exc: Optional exception raised instead of returning a response.
    """

    def __init__(self, status_code: int = 200, exc: Exception | None = None) -> None:
        self.status_code = status_code
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, json={"ok": True})

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def handler() -> RecordingHandler:
    """Create a handler recording the requests sent through the mock
    transport."""
    return RecordingHandler()


@pytest.fixture
def http_client(handler: RecordingHandler) -> Generator[httpx.Client, None, None]:
    """Create an httpx.Client backed by a mock transport."""
    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        yield client


@pytest_asyncio.fixture
async def async_http_client(
    handler: RecordingHandler,
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Create an httpx.AsyncClient backed by a mock transport."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        yield client


@pytest.fixture
def defaults() -> RequestConfig:
    """Create client defaults used across the tests."""
    return RequestConfig(
        base_url="http://api.example.com/v1",
        headers={"X-Api-Key": "secret"},
        params={"format": "json"},
    )

"""
Shared fixtures for Lever client tests.

Requests are served by httpx.MockTransport, so no test touches the network.
"""

import json
from collections.abc import AsyncIterator, Callable

import httpx
import pytest
import pytest_asyncio

API_KEY = "test-api-key"


class RecordingTransport:
    """Serves canned responses and records every request it receives."""

    def __init__(self, status_code: int = 200, body: object = None, **kwargs):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = {"data": {}} if body is None else body
        self.kwargs = kwargs

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body, **self.kwargs)
        return httpx.Response(self.status_code, json=self.body, **self.kwargs)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> object:
        return json.loads(self.last_request.content)


@pytest.fixture
def api_key() -> str:
    """The API key used for every call."""
    return API_KEY


@pytest_asyncio.fixture
async def make_client() -> AsyncIterator[
    Callable[..., tuple[httpx.AsyncClient, RecordingTransport]]
]:
    """Factory returning an AsyncClient backed by a RecordingTransport.

    Every client it creates is closed after the test.
    """
    clients: list[httpx.AsyncClient] = []

    def _make(status_code: int = 200, body: object = None, **kwargs):
        recorder = RecordingTransport(status_code, body, **kwargs)
        client = httpx.AsyncClient(transport=httpx.MockTransport(recorder.handler))
        clients.append(client)
        return client, recorder

    yield _make

    for client in clients:
        await client.aclose()

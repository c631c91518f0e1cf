"""
Shared fixtures: a scripted transport and a recording sleep.
"""
from typing import Any, Dict, List, Optional

import httpx
import pytest

from notion_fetch_client.client import NotionClient
from notion_fetch_client.config import ClientConfig


class FakeTransport:
    """Returns scripted responses in order; the last one repeats."""

    def __init__(self, *responses: Any):
        self._responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    async def __call__(
        self,
        method: str,
        url: str,
        *,
        headers: Dict[str, str],
        content: Optional[bytes] = None,
    ) -> httpx.Response:
        self.calls.append({"method": method, "url": url, "headers": headers, "content": content})
        item = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        if isinstance(item, BaseException):
            raise item
        if callable(item):
            return await item()
        return item


class RecordingSleep:
    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def rate_limited(retry_after: Optional[str] = None) -> httpx.Response:
    headers = {"Retry-After": retry_after} if retry_after is not None else {}
    return httpx.Response(
        429,
        headers=headers,
        json={"object": "error", "status": 429, "code": "rate_limited", "message": "Slow down"},
    )


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def make_client(sleep):
    """Build a NotionClient around a FakeTransport."""
    def _make(*responses: Any, **options: Any):
        transport = FakeTransport(*responses)
        config = ClientConfig(auth="secret_test_token", transport=transport, **options)
        return NotionClient.create(config, sleep=sleep), transport
    return _make

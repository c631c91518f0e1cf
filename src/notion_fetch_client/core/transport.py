"""
HTTP transport used by the request executor.

A transport performs exactly one HTTP exchange and returns the raw
``httpx.Response``. It never retries and never interprets status codes;
that is the executor's job. Tests substitute any async callable with the
same signature.
"""
import logging
from typing import Dict, Optional, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

LOG_PREFIX = "[HttpxTransport]"


@runtime_checkable
class Transport(Protocol):
    """Protocol for the single-exchange network primitive."""

    async def __call__(
        self,
        method: str,
        url: str,
        *,
        headers: Dict[str, str],
        content: Optional[bytes] = None,
    ) -> httpx.Response: ...


class HttpxTransport:
    """
    Default transport wrapping httpx.AsyncClient.

    The client is created lazily on first use unless one is supplied, in
    which case the caller keeps ownership and ``aclose`` leaves it open.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout_seconds: Optional[float] = None,
    ):
        self._client = client
        self._timeout_seconds = timeout_seconds
        # Flag to track if we own the client (created it)
        self._own_client = client is None

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            logger.debug(f"{LOG_PREFIX} Creating httpx.AsyncClient (timeout={self._timeout_seconds})")
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout_seconds),
                follow_redirects=True,
            )
        return self._client

    async def __call__(
        self,
        method: str,
        url: str,
        *,
        headers: Dict[str, str],
        content: Optional[bytes] = None,
    ) -> httpx.Response:
        client = self._ensure_client()
        return await client.request(method, url, headers=headers, content=content)

    @property
    def is_closed(self) -> bool:
        return self._client is None or self._client.is_closed

    async def aclose(self) -> None:
        """Close the underlying client if we own it."""
        if self._own_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpxTransport":
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

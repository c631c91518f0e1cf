"""
High-level NotionClient implementation.
"""
from typing import Any, Mapping, Optional, TypeVar, overload

from .config import ClientConfig
from .core.executor import RequestExecutor, Sleep
from .core.request import RequestBuilder
from .decoding import Decoder
from .types import QueryValue, RequestDescriptor

T = TypeVar("T")


class NotionClient(RequestExecutor):
    """
    HTTP client for the Notion API with convenience methods.
    """

    @classmethod
    def create(cls, config: ClientConfig, *, sleep: Optional[Sleep] = None) -> "NotionClient":
        """Factory method to create a client."""
        return cls(config, sleep=sleep)

    @overload
    async def request(self, descriptor: RequestDescriptor) -> Any: ...

    @overload
    async def request(self, descriptor: RequestDescriptor, decode: Decoder[T]) -> T: ...

    async def request(self, descriptor: RequestDescriptor, decode: Optional[Decoder[Any]] = None) -> Any:
        """Execute a request and optionally decode the response."""
        raw = await self.execute(descriptor)
        if decode is None:
            return raw
        return decode(raw)

    async def get(
        self,
        path: str,
        query: Optional[Mapping[str, QueryValue]] = None,
    ) -> Any:
        """Execute GET request."""
        return await self.execute(RequestBuilder(path, "GET").params(query or {}).build())

    async def post(
        self,
        path: str,
        body: Any = None,
        query: Optional[Mapping[str, QueryValue]] = None,
    ) -> Any:
        """Execute POST request."""
        return await self.execute(
            RequestBuilder(path, "POST").params(query or {}).json(body).build()
        )

    async def patch(
        self,
        path: str,
        body: Any = None,
        query: Optional[Mapping[str, QueryValue]] = None,
    ) -> Any:
        """Execute PATCH request."""
        return await self.execute(
            RequestBuilder(path, "PATCH").params(query or {}).json(body).build()
        )

    async def delete(
        self,
        path: str,
        query: Optional[Mapping[str, QueryValue]] = None,
    ) -> Any:
        """Execute DELETE request."""
        return await self.execute(RequestBuilder(path, "DELETE").params(query or {}).build())

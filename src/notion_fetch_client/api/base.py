"""
Shared helpers for the resource APIs.
"""
from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from ..client import NotionClient
from ..decoding import model_decoder
from ..models import NotionObject, PaginatedList
from ..types import RequestDescriptor
from ..validation import LIMITS, validate_array_length

TModel = TypeVar("TModel", bound=NotionObject)


class BaseAPI(Generic[TModel]):
    """
    Base class for Notion resource APIs.

    Subclasses set ``model``, the pydantic model results are decoded into.
    """
    model: Type[TModel]

    def __init__(self, client: NotionClient):
        self._client = client

    @staticmethod
    def build_pagination_query(
        page_size: Optional[int] = None, start_cursor: Optional[str] = None
    ) -> Dict[str, str]:
        """Pagination parameters for GET endpoints."""
        query: Dict[str, str] = {}
        if page_size:
            query["page_size"] = str(page_size)
        if start_cursor:
            query["start_cursor"] = start_cursor
        return query

    @staticmethod
    def build_pagination_body(
        page_size: Optional[int] = None, start_cursor: Optional[str] = None
    ) -> Dict[str, Any]:
        """Pagination parameters for POST endpoints."""
        body: Dict[str, Any] = {}
        if page_size:
            body["page_size"] = page_size
        if start_cursor:
            body["start_cursor"] = start_cursor
        return body

    @staticmethod
    def build_filter_properties_query(filter_properties: Optional[List[str]] = None) -> Dict[str, str]:
        query: Dict[str, str] = {}
        if filter_properties:
            validate_array_length(filter_properties, LIMITS.ARRAY_ELEMENTS, "filter_properties")
            query["filter_properties"] = ",".join(filter_properties)
        return query

    @staticmethod
    def build_filter_properties_body(filter_properties: Optional[List[str]] = None) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        if filter_properties:
            validate_array_length(filter_properties, LIMITS.ARRAY_ELEMENTS, "filter_properties")
            body["filter_properties"] = filter_properties
        return body

    async def _retrieve(self, path: str, query: Optional[Mapping[str, str]] = None) -> TModel:
        return await self._client.request(
            RequestDescriptor(method="GET", path=path, query=query or None),
            model_decoder(self.model),
        )

    async def _list(self, path: str, query: Optional[Mapping[str, str]] = None) -> PaginatedList[TModel]:
        return await self._client.request(
            RequestDescriptor(method="GET", path=path, query=query or None),
            model_decoder(PaginatedList[self.model]),
        )

    async def _patch_list(self, path: str, body: Mapping[str, Any]) -> PaginatedList[TModel]:
        return await self._client.request(
            RequestDescriptor(method="PATCH", path=path, body=dict(body)),
            model_decoder(PaginatedList[self.model]),
        )

    async def _create(self, path: str, body: Any) -> TModel:
        return await self._client.request(
            RequestDescriptor(method="POST", path=path, body=body),
            model_decoder(self.model),
        )

    async def _update(self, path: str, body: Any) -> TModel:
        return await self._client.request(
            RequestDescriptor(method="PATCH", path=path, body=body),
            model_decoder(self.model),
        )

    async def _delete(self, path: str) -> TModel:
        return await self._client.request(
            RequestDescriptor(method="DELETE", path=path),
            model_decoder(self.model),
        )

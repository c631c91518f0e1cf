"""
Databases API.
"""
from typing import Any, Dict, List, Optional

from ..decoding import model_decoder
from ..models import Database, Page, PaginatedList
from ..types import RequestDescriptor
from ..validation import LIMITS, validate_array_length
from .base import BaseAPI


class DatabasesAPI(BaseAPI[Database]):
    model = Database

    async def retrieve(self, database_id: str, *, filter_properties: Optional[List[str]] = None) -> Database:
        return await self._retrieve(
            f"/databases/{database_id}", self.build_filter_properties_query(filter_properties)
        )

    async def query(
        self,
        database_id: str,
        *,
        filter: Optional[Dict[str, Any]] = None,
        sorts: Optional[List[Dict[str, Any]]] = None,
        filter_properties: Optional[List[str]] = None,
        start_cursor: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> PaginatedList[Page]:
        """Query a database for pages (one page of results)."""
        body: Dict[str, Any] = {}
        if filter:
            body["filter"] = filter
        if sorts:
            validate_array_length(sorts, LIMITS.ARRAY_ELEMENTS, "sorts")
            body["sorts"] = sorts
        body.update(self.build_pagination_body(page_size, start_cursor))
        body.update(self.build_filter_properties_body(filter_properties))

        return await self._client.request(
            RequestDescriptor(method="POST", path=f"/databases/{database_id}/query", body=body or None),
            model_decoder(PaginatedList[Page]),
        )

"""
Search API.
"""
from typing import Any, Dict, Literal, Optional, Union

from ..decoding import model_decoder
from ..models import DataSource, Page, PaginatedList
from ..types import RequestDescriptor
from .base import BaseAPI

SearchFilterObject = Literal["page", "data_source"]
SearchResult = Union[Page, DataSource]


class SearchAPI(BaseAPI[Page]):
    """Search across pages and data sources shared with the integration."""
    model = Page

    async def query(
        self,
        query: Optional[str] = None,
        *,
        filter_object: Optional[SearchFilterObject] = None,
        sort_direction: Optional[Literal["ascending", "descending"]] = None,
        start_cursor: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> PaginatedList[SearchResult]:
        body: Dict[str, Any] = {}
        if query:
            body["query"] = query
        if filter_object:
            body["filter"] = {"property": "object", "value": filter_object}
        if sort_direction:
            body["sort"] = {"timestamp": "last_edited_time", "direction": sort_direction}
        body.update(self.build_pagination_body(page_size, start_cursor))

        # Results are a mix of pages and data sources, told apart by ``object``
        return await self._client.request(
            RequestDescriptor(method="POST", path="/search", body=body or None),
            model_decoder(PaginatedList[SearchResult]),
        )

"""
Blocks API.
"""
from typing import Any, Dict, List, Optional

from ..client import NotionClient
from ..models import Block, PaginatedList
from ..validation import LIMITS, validate_array_length
from .base import BaseAPI


class BlockChildrenAPI(BaseAPI[Block]):
    model = Block

    async def list(
        self,
        block_id: str,
        *,
        start_cursor: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> PaginatedList[Block]:
        return await self._list(
            f"/blocks/{block_id}/children", self.build_pagination_query(page_size, start_cursor)
        )

    async def append(
        self, block_id: str, children: List[Dict[str, Any]], *, after: Optional[str] = None
    ) -> PaginatedList[Block]:
        """Append up to 100 children to a block."""
        validate_array_length(children, LIMITS.ARRAY_ELEMENTS, "children")
        body: Dict[str, Any] = {"children": children}
        if after:
            body["after"] = after
        return await self._patch_list(f"/blocks/{block_id}/children", body)


class BlocksAPI(BaseAPI[Block]):
    model = Block

    def __init__(self, client: NotionClient):
        super().__init__(client)
        self.children = BlockChildrenAPI(client)

    async def retrieve(self, block_id: str, *, filter_properties: Optional[List[str]] = None) -> Block:
        return await self._retrieve(
            f"/blocks/{block_id}", self.build_filter_properties_query(filter_properties)
        )

    async def update(self, block_id: str, **fields: Any) -> Block:
        return await self._update(f"/blocks/{block_id}", fields)

    async def delete(self, block_id: str) -> Block:
        """Archive a block."""
        return await self._delete(f"/blocks/{block_id}")

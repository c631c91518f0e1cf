"""
Comments API.
"""
from typing import Any, Dict, List, Optional

from ..models import Comment, PaginatedList
from ..validation import LIMITS, validate_array_length
from .base import BaseAPI


class CommentsAPI(BaseAPI[Comment]):
    model = Comment

    async def list(
        self,
        block_id: str,
        *,
        start_cursor: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> PaginatedList[Comment]:
        """List unresolved comments on a page or block."""
        query: Dict[str, str] = {"block_id": block_id}
        query.update(self.build_pagination_query(page_size, start_cursor))
        return await self._list("/comments", query)

    async def create(
        self,
        rich_text: List[Dict[str, Any]],
        *,
        parent: Optional[Dict[str, Any]] = None,
        discussion_id: Optional[str] = None,
        attachments: Optional[List[Dict[str, Any]]] = None,
    ) -> Comment:
        """Create a comment on a page or in an existing discussion."""
        if (parent is None) == (discussion_id is None):
            raise ValueError("Exactly one of 'parent' or 'discussion_id' is required")
        validate_array_length(rich_text, LIMITS.ARRAY_ELEMENTS, "rich_text")
        body: Dict[str, Any] = {"rich_text": rich_text}
        if parent is not None:
            body["parent"] = parent
        if discussion_id is not None:
            body["discussion_id"] = discussion_id
        if attachments:
            validate_array_length(attachments, LIMITS.COMMENT_ATTACHMENTS, "attachments")
            body["attachments"] = attachments
        return await self._create("/comments", body)

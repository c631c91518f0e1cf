"""
Pages API.
"""
from typing import Any, Dict, List, Optional

from ..models import Page
from ..validation import LIMITS, validate_array_length
from .base import BaseAPI


class PagesAPI(BaseAPI[Page]):
    model = Page

    async def retrieve(self, page_id: str, *, filter_properties: Optional[List[str]] = None) -> Page:
        return await self._retrieve(
            f"/pages/{page_id}", self.build_filter_properties_query(filter_properties)
        )

    async def create(
        self,
        parent: Dict[str, Any],
        properties: Dict[str, Any],
        *,
        children: Optional[List[Dict[str, Any]]] = None,
        **extra: Any,
    ) -> Page:
        body: Dict[str, Any] = {"parent": parent, "properties": properties, **extra}
        if children is not None:
            validate_array_length(children, LIMITS.ARRAY_ELEMENTS, "children")
            body["children"] = children
        return await self._create("/pages", body)

    async def update(self, page_id: str, **fields: Any) -> Page:
        return await self._update(f"/pages/{page_id}", fields)

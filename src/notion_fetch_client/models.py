"""
Loosely typed Notion response models.

Only the fields the client relies on are declared; every other field the
API returns is kept as an extra attribute.
"""
from typing import Any, Dict, Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")

PaginatedListType = Literal[
    "block",
    "comment",
    "database",
    "data_source",
    "page",
    "page_or_database",
    "page_or_data_source",
    "property_item",
    "user",
]


class NotionObject(BaseModel):
    """Any object returned by the API."""
    model_config = ConfigDict(extra="allow")

    object: str
    id: Optional[str] = None

    def extra(self, key: str, default: Any = None) -> Any:
        return (self.model_extra or {}).get(key, default)


class User(NotionObject):
    object: Literal["user"] = "user"
    type: Optional[str] = None
    name: Optional[str] = None


class Page(NotionObject):
    object: Literal["page"] = "page"
    url: Optional[str] = None
    archived: bool = False
    properties: Dict[str, Any] = {}


class Block(NotionObject):
    object: Literal["block"] = "block"
    type: Optional[str] = None
    has_children: bool = False
    archived: bool = False


class Database(NotionObject):
    object: Literal["database"] = "database"
    title: List[Any] = []
    properties: Dict[str, Any] = {}


class DataSource(NotionObject):
    object: Literal["data_source"] = "data_source"
    properties: Dict[str, Any] = {}


class Comment(NotionObject):
    object: Literal["comment"] = "comment"
    discussion_id: Optional[str] = None
    rich_text: List[Any] = []


class PaginatedList(BaseModel, Generic[T]):
    """One page of a cursor-paginated list response."""
    object: Literal["list"] = "list"
    results: List[T]
    next_cursor: Optional[str] = None
    has_more: bool = False
    type: Optional[PaginatedListType] = None

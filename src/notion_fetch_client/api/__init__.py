from .base import BaseAPI
from .blocks import BlockChildrenAPI, BlocksAPI
from .comments import CommentsAPI
from .databases import DatabasesAPI
from .pages import PagesAPI
from .search import SearchAPI
from .users import UsersAPI

__all__ = [
    "BaseAPI",
    "BlockChildrenAPI",
    "BlocksAPI",
    "CommentsAPI",
    "DatabasesAPI",
    "PagesAPI",
    "SearchAPI",
    "UsersAPI",
]

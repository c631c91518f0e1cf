"""
Users API.
"""
from typing import Optional

from ..models import PaginatedList, User
from .base import BaseAPI


class UsersAPI(BaseAPI[User]):
    model = User

    async def retrieve(self, user_id: str) -> User:
        return await self._retrieve(f"/users/{user_id}")

    async def list(
        self, *, start_cursor: Optional[str] = None, page_size: Optional[int] = None
    ) -> PaginatedList[User]:
        """List all users in the workspace (one page)."""
        return await self._list("/users", self.build_pagination_query(page_size, start_cursor))

    async def me(self) -> User:
        """Retrieve the bot user associated with the token."""
        return await self._retrieve("/users/me")

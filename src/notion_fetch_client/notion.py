"""
Entry point bundling every resource API around one NotionClient.
"""
from typing import Any, Optional

from .api import BlocksAPI, CommentsAPI, DatabasesAPI, PagesAPI, SearchAPI, UsersAPI
from .client import NotionClient
from .config import ClientConfig
from .core.executor import Sleep


class Notion:
    """
    Main SDK object.

    Example::

        async with Notion(ClientConfig(auth=token)) as notion:
            me = await notion.users.me()
            children = await paginate(
                lambda cursor: notion.blocks.children.list("block-id", start_cursor=cursor)
            )
    """

    def __init__(self, config: Optional[ClientConfig] = None, *, sleep: Optional[Sleep] = None, **options: Any):
        if config is None:
            config = ClientConfig.from_env(**options)
        elif options:
            raise TypeError("Pass either a ClientConfig or keyword options, not both")
        self.client = NotionClient.create(config, sleep=sleep)
        self.pages = PagesAPI(self.client)
        self.blocks = BlocksAPI(self.client)
        self.databases = DatabasesAPI(self.client)
        self.search = SearchAPI(self.client)
        self.users = UsersAPI(self.client)
        self.comments = CommentsAPI(self.client)

    async def close(self) -> None:
        await self.client.close()

    async def __aenter__(self) -> "Notion":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

"""
Tests for the pagination helpers.
"""
from typing import Any, Dict, List, Optional

import pytest

from notion_fetch_client.errors import NotionAPIError
from notion_fetch_client.models import PaginatedList
from notion_fetch_client.pagination import (
    PaginationResult,
    paginate,
    paginate_iterator,
    paginate_with_metadata,
)


class PageFetcher:
    """Serves a fixed cursor chain and records the cursors it was asked for."""

    def __init__(self, pages: Dict[Optional[str], Any]):
        self._pages = pages
        self.cursors: List[Optional[str]] = []

    async def __call__(self, cursor: Optional[str]) -> Any:
        self.cursors.append(cursor)
        return self._pages[cursor]


@pytest.fixture
def three_pages():
    return PageFetcher({
        None: PaginatedList(results=["a", "b"], next_cursor="cursor-1", has_more=True),
        "cursor-1": PaginatedList(results=["c", "d"], next_cursor="cursor-2", has_more=True),
        "cursor-2": PaginatedList(results=["e"], next_cursor=None, has_more=False),
    })


class TestPaginate:
    @pytest.mark.asyncio
    async def test_collects_all_pages_in_order(self, three_pages):
        items = await paginate(three_pages)
        assert items == ["a", "b", "c", "d", "e"]
        assert three_pages.cursors == [None, "cursor-1", "cursor-2"]

    @pytest.mark.asyncio
    async def test_single_page(self):
        fetch = PageFetcher({None: PaginatedList(results=[1], next_cursor=None, has_more=False)})
        assert await paginate(fetch) == [1]
        assert fetch.cursors == [None]

    @pytest.mark.asyncio
    async def test_empty_result(self):
        fetch = PageFetcher({None: PaginatedList(results=[], next_cursor=None, has_more=False)})
        assert await paginate(fetch) == []

    @pytest.mark.asyncio
    async def test_accepts_raw_mappings(self):
        fetch = PageFetcher({
            None: {"object": "list", "results": [{"id": 1}], "next_cursor": "next", "has_more": True},
            "next": {"object": "list", "results": [{"id": 2}], "next_cursor": None, "has_more": False},
        })
        assert await paginate(fetch) == [{"id": 1}, {"id": 2}]

    @pytest.mark.asyncio
    async def test_fetch_errors_propagate(self):
        async def failing(cursor: Optional[str]) -> Any:
            if cursor is None:
                return PaginatedList(results=[1], next_cursor="c1", has_more=True)
            raise NotionAPIError({
                "object": "error", "status": 500, "code": "internal_server_error", "message": "boom",
            })

        with pytest.raises(NotionAPIError):
            await paginate(failing)


class TestPaginateIterator:
    @pytest.mark.asyncio
    async def test_yields_every_item(self, three_pages):
        items = [item async for item in paginate_iterator(three_pages)]
        assert items == ["a", "b", "c", "d", "e"]
        assert three_pages.cursors == [None, "cursor-1", "cursor-2"]

    @pytest.mark.asyncio
    async def test_early_break_fetches_no_further_pages(self, three_pages):
        seen = []
        async for item in paginate_iterator(three_pages):
            seen.append(item)
            if len(seen) == 2:
                break
        assert seen == ["a", "b"]
        assert three_pages.cursors == [None]

    @pytest.mark.asyncio
    async def test_fetches_lazily(self, three_pages):
        iterator = paginate_iterator(three_pages)
        assert three_pages.cursors == []
        assert await iterator.__anext__() == "a"
        assert await iterator.__anext__() == "b"
        assert three_pages.cursors == [None]
        assert await iterator.__anext__() == "c"
        assert three_pages.cursors == [None, "cursor-1"]
        await iterator.aclose()

    @pytest.mark.asyncio
    async def test_skips_empty_pages(self):
        fetch = PageFetcher({
            None: PaginatedList(results=[], next_cursor="c1", has_more=True),
            "c1": PaginatedList(results=["x"], next_cursor=None, has_more=False),
        })
        assert [item async for item in paginate_iterator(fetch)] == ["x"]


class TestPaginateWithMetadata:
    @pytest.mark.asyncio
    async def test_counts(self):
        fetch = PageFetcher({
            None: PaginatedList(results=[1], next_cursor="c1", has_more=True),
            "c1": PaginatedList(results=[2, 3, 4], next_cursor="c2", has_more=True),
            "c2": PaginatedList(results=[5, 6], next_cursor=None, has_more=False),
        })
        result = await paginate_with_metadata(fetch)
        assert isinstance(result, PaginationResult)
        assert result.items == [1, 2, 3, 4, 5, 6]
        assert result.page_count == 3
        assert result.total_count == 6

    @pytest.mark.asyncio
    async def test_single_empty_page(self):
        fetch = PageFetcher({None: PaginatedList(results=[], next_cursor=None, has_more=False)})
        result = await paginate_with_metadata(fetch)
        assert (result.items, result.page_count, result.total_count) == ([], 1, 0)

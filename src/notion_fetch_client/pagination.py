"""
Helpers for cursor-paginated endpoints.

Every list endpoint of the Notion API returns ``results``, ``next_cursor``
and ``has_more``. The helpers below take a fetch function that loads one
page for a given cursor and follow the cursor chain for you::

    users = await paginate(lambda cursor: notion.users.list(start_cursor=cursor))

    async for block in paginate_iterator(
        lambda cursor: notion.blocks.children.list("page-id", start_cursor=cursor)
    ):
        print(block.type)

Results are returned in server order. Cursors are forwarded verbatim.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Awaitable, Callable, Generic, List, Mapping, Optional, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

LOG_PREFIX = "[Pagination]"

T = TypeVar("T")

# Receives the cursor of the page to load (None for the first page) and
# returns a PaginatedList or a mapping with the same keys.
PaginatedFetchFunction = Callable[[Optional[str]], Awaitable[Any]]


@dataclass
class PaginationResult(Generic[T]):
    """Collected items plus the number of pages fetched."""
    items: List[T] = field(default_factory=list)
    page_count: int = 0
    total_count: int = 0


def _unpack_page(page: Any) -> Tuple[Sequence[Any], Optional[str]]:
    if isinstance(page, Mapping):
        return page.get("results") or [], page.get("next_cursor")
    return page.results, page.next_cursor


async def paginate(fetch_page: PaginatedFetchFunction) -> List[Any]:
    """Fetch every page and return all results in one list."""
    result = await paginate_with_metadata(fetch_page)
    return result.items


async def paginate_iterator(fetch_page: PaginatedFetchFunction) -> AsyncIterator[Any]:
    """
    Yield results one at a time, fetching the next page only once the
    current one is exhausted. Stopping early fetches nothing further.
    """
    cursor: Optional[str] = None
    while True:
        page = await fetch_page(cursor)
        results, next_cursor = _unpack_page(page)
        for item in results:
            yield item
        if not next_cursor:
            return
        cursor = next_cursor


async def paginate_with_metadata(fetch_page: PaginatedFetchFunction) -> PaginationResult[Any]:
    """Fetch every page, reporting the page count alongside the items."""
    items: List[Any] = []
    cursor: Optional[str] = None
    page_count = 0

    while True:
        page = await fetch_page(cursor)
        page_count += 1
        results, next_cursor = _unpack_page(page)
        items.extend(results)
        logger.debug(f"{LOG_PREFIX} Page {page_count}: {len(results)} item(s), next_cursor={next_cursor!r}")
        if not next_cursor:
            break
        cursor = next_cursor

    return PaginationResult(items=items, page_count=page_count, total_count=len(items))

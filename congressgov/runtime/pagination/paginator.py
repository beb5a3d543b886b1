"""Offset-based auto-pagination.

Turns a single-page fetch callable into a lazy async sequence. The cursor
is a plain offset advanced by ``limit`` after every full page; the run ends
on the first page holding fewer than ``limit`` items (including zero). When
the total is an exact multiple of ``limit`` this costs one trailing request
that comes back empty.

Only one page is ever in flight per sequence, and nothing is fetched ahead
of the consumer: the next request is issued only when the consumer asks for
the item after the last one of the current page.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Sequence
from time import perf_counter
from typing import TypeVar

from ...core.cancellation import CancellationToken
from ...core.exceptions import InvalidArgumentError
from .telemetry import log_page_fetched, log_pagination_complete

PageT = TypeVar("PageT")
ItemT = TypeVar("ItemT")

FetchPage = Callable[[int, int, CancellationToken], Awaitable[PageT]]


def paginate_items(
    fetch_page: FetchPage[PageT],
    project_items: Callable[[PageT], Sequence[ItemT] | None],
    *,
    limit: int,
    start_offset: int = 0,
    token: CancellationToken | None = None,
) -> AsyncIterator[ItemT]:
    """Lazily yield items across pages.

    Args:
        fetch_page: ``async (offset, limit, token) -> page``; must put offset/limit on the request
        project_items: Extracts the ordered items from a page (None counts as empty)
        limit: Page size, must be positive
        start_offset: First offset to request, clamped to >= 0
        token: Cancellation token passed to every fetch

    Returns:
        Async iterator of items in upstream order

    Raises:
        InvalidArgumentError: Immediately, before any fetch, for a bad ``limit`` or callable
    """
    _validate(fetch_page, project_items, limit, "project_items")
    return _iterate_items(
        fetch_page, project_items, limit, max(0, start_offset), token or CancellationToken()
    )


def paginate_pages(
    fetch_page: FetchPage[PageT],
    count_items: Callable[[PageT], int],
    *,
    limit: int,
    start_offset: int = 0,
    token: CancellationToken | None = None,
) -> AsyncIterator[PageT]:
    """Lazily yield whole pages.

    The page that triggers termination (count <= 0 or count < limit) is
    still yielded.
    """
    _validate(fetch_page, count_items, limit, "count_items")
    return _iterate_pages(
        fetch_page, count_items, limit, max(0, start_offset), token or CancellationToken()
    )


def _validate(fetch_page: object, selector: object, limit: object, selector_name: str) -> None:
    if fetch_page is None or not callable(fetch_page):
        raise InvalidArgumentError("fetch_page must be callable")
    if selector is None or not callable(selector):
        raise InvalidArgumentError(f"{selector_name} must be callable")
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise InvalidArgumentError(f"limit must be a positive integer, got {limit!r}")


async def _iterate_items(
    fetch_page: FetchPage[PageT],
    project_items: Callable[[PageT], Sequence[ItemT] | None],
    limit: int,
    offset: int,
    token: CancellationToken,
) -> AsyncIterator[ItemT]:
    pages = 0
    produced = 0
    while True:
        token.raise_if_cancelled()

        started = perf_counter()
        page = await fetch_page(offset, limit, token)
        items = project_items(page) or ()
        count = len(items)
        pages += 1
        log_page_fetched(
            offset=offset,
            limit=limit,
            item_count=count,
            latency_ms=(perf_counter() - started) * 1000.0,
        )

        for item in items:
            yield item
        produced += count

        if count <= 0 or count < limit:
            log_pagination_complete(pages=pages, items=produced, last_offset=offset)
            return

        offset += limit


async def _iterate_pages(
    fetch_page: FetchPage[PageT],
    count_items: Callable[[PageT], int],
    limit: int,
    offset: int,
    token: CancellationToken,
) -> AsyncIterator[PageT]:
    pages = 0
    produced = 0
    while True:
        token.raise_if_cancelled()

        started = perf_counter()
        page = await fetch_page(offset, limit, token)
        count = count_items(page)
        pages += 1
        log_page_fetched(
            offset=offset,
            limit=limit,
            item_count=count,
            latency_ms=(perf_counter() - started) * 1000.0,
        )

        yield page
        produced += max(0, count)

        if count <= 0 or count < limit:
            log_pagination_complete(pages=pages, items=produced, last_offset=offset)
            return

        offset += limit

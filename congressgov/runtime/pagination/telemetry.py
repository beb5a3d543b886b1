"""Structured logging for pagination runs."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(*, offset: int, limit: int, item_count: int, latency_ms: float) -> None:
    """Log one fetched page.

    Args:
        offset: Offset the page was requested at
        limit: Requested page size
        item_count: Items the page actually held
        latency_ms: Time spent in the fetch callable
    """
    logger.debug(
        "page_fetched",
        extra={
            "offset": offset,
            "limit": limit,
            "item_count": item_count,
            "latency_ms": round(latency_ms, 3),
        },
    )


def log_pagination_complete(*, pages: int, items: int, last_offset: int) -> None:
    """Log a run that ended on a short or empty page."""
    logger.debug(
        "pagination_complete",
        extra={"pages": pages, "items": items, "last_offset": last_offset},
    )

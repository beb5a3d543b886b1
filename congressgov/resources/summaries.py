"""Bill summary feed endpoints (/summaries)."""

from __future__ import annotations

from collections.abc import AsyncIterator

from .. import routing
from ..core.cancellation import CancellationToken
from ..filters import SummariesListFilters
from ..models import SummariesListPage, SummaryFeedItem
from .base import ResourceClient


class SummariesResource(ResourceClient):
    def list(
        self,
        filters: SummariesListFilters | None = None,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[SummaryFeedItem]:
        return self._list_summaries(routing.summaries_list(), filters, limit, token)

    def list_by_congress(
        self,
        congress: int,
        filters: SummariesListFilters | None = None,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[SummaryFeedItem]:
        path = routing.summaries_by_congress(congress)
        return self._list_summaries(path, filters, limit, token)

    def list_by_congress_and_bill_type(
        self,
        congress: int,
        bill_type: str,
        filters: SummariesListFilters | None = None,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[SummaryFeedItem]:
        path = routing.summaries_by_congress_and_bill_type(congress, bill_type)
        return self._list_summaries(path, filters, limit, token)

    def _list_summaries(
        self,
        path: str,
        filters: SummariesListFilters | None,
        limit: int | None,
        token: CancellationToken | None,
    ) -> AsyncIterator[SummaryFeedItem]:
        return self._paginate(
            path,
            SummariesListPage,
            lambda page: page.summaries,
            query=filters.to_query() if filters else None,
            limit=limit,
            token=token,
        )

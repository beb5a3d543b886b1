"""Amendment endpoints (/amendment)."""

from __future__ import annotations

from collections.abc import AsyncIterator

from .. import routing
from ..core.cancellation import CancellationToken
from ..filters import AmendmentListFilters
from ..models import (
    AmendmentAction,
    AmendmentActionsPage,
    AmendmentCosponsorsPage,
    AmendmentDetail,
    AmendmentDetailPage,
    AmendmentListItem,
    AmendmentsListPage,
    AmendmentsToAmendmentPage,
    AmendmentTextVersionsPage,
    Cosponsor,
    TextVersion,
)
from .base import ResourceClient


class AmendmentsResource(ResourceClient):
    """Access to House and Senate amendments (``hamdt``, ``samdt``, ``suamdt``)."""

    def list(
        self,
        filters: AmendmentListFilters | None = None,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[AmendmentListItem]:
        return self._list_amendments(routing.amendment_list(), filters, limit, token)

    def list_by_congress(
        self,
        congress: int,
        filters: AmendmentListFilters | None = None,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[AmendmentListItem]:
        path = routing.amendment_by_congress(congress)
        return self._list_amendments(path, filters, limit, token)

    def list_by_congress_and_type(
        self,
        congress: int,
        amendment_type: str,
        filters: AmendmentListFilters | None = None,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[AmendmentListItem]:
        path = routing.amendment_by_congress_and_type(congress, amendment_type)
        return self._list_amendments(path, filters, limit, token)

    async def get(
        self,
        congress: int,
        amendment_type: str,
        amendment_number: int,
        *,
        token: CancellationToken | None = None,
    ) -> AmendmentDetail:
        path = routing.amendment_detail(congress, amendment_type, amendment_number)
        page = await self._get(path, AmendmentDetailPage, token)
        return page.amendment

    def actions(
        self,
        congress: int,
        amendment_type: str,
        amendment_number: int,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[AmendmentAction]:
        path = routing.amendment_sub_resource(congress, amendment_type, amendment_number, "actions")
        return self._paginate(
            path, AmendmentActionsPage, lambda page: page.actions, limit=limit, token=token
        )

    def cosponsors(
        self,
        congress: int,
        amendment_type: str,
        amendment_number: int,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[Cosponsor]:
        path = routing.amendment_sub_resource(
            congress, amendment_type, amendment_number, "cosponsors"
        )
        return self._paginate(
            path, AmendmentCosponsorsPage, lambda page: page.cosponsors, limit=limit, token=token
        )

    def amendments(
        self,
        congress: int,
        amendment_type: str,
        amendment_number: int,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[AmendmentListItem]:
        """Amendments proposed to this amendment."""
        path = routing.amendment_sub_resource(
            congress, amendment_type, amendment_number, "amendments"
        )
        return self._paginate(
            path, AmendmentsToAmendmentPage, lambda page: page.amendments, limit=limit, token=token
        )

    def text_versions(
        self,
        congress: int,
        amendment_type: str,
        amendment_number: int,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[TextVersion]:
        path = routing.amendment_sub_resource(congress, amendment_type, amendment_number, "text")
        return self._paginate(
            path,
            AmendmentTextVersionsPage,
            lambda page: page.text_versions,
            limit=limit,
            token=token,
        )

    def _list_amendments(
        self,
        path: str,
        filters: AmendmentListFilters | None,
        limit: int | None,
        token: CancellationToken | None,
    ) -> AsyncIterator[AmendmentListItem]:
        return self._paginate(
            path,
            AmendmentsListPage,
            lambda page: page.amendments,
            query=filters.to_query() if filters else None,
            limit=limit,
            token=token,
        )

"""Bill endpoints (/bill)."""

from __future__ import annotations

from collections.abc import AsyncIterator

from .. import routing
from ..core.cancellation import CancellationToken
from ..filters import BillCosponsorFilters, BillListFilters
from ..models import (
    AmendmentListItem,
    BillAction,
    BillActionsPage,
    BillAmendmentsPage,
    BillCommitteesPage,
    BillCosponsorsPage,
    BillDetail,
    BillDetailPage,
    BillListItem,
    BillRelatedBillsPage,
    BillsListPage,
    BillSubjects,
    BillSubjectsPage,
    BillSummariesPage,
    BillTextVersionsPage,
    BillTitlesPage,
    CommitteeRef,
    Cosponsor,
    RelatedBill,
    Summary,
    TextVersion,
    TitleEntry,
)
from .base import ResourceClient


class BillsResource(ResourceClient):
    """Access to bills and their sub-resources.

    List-style methods return lazy async iterators; nothing is requested
    until iteration starts.

    Example:
        >>> async for bill in client.bills.list_by_congress(118, limit=50):
        ...     print(bill.type, bill.number, bill.title)
    """

    def list(
        self,
        filters: BillListFilters | None = None,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[BillListItem]:
        """Bills across all Congresses, most recently updated first by default."""
        return self._list_bills(routing.bill_list(), filters, limit, token)

    def list_by_congress(
        self,
        congress: int,
        filters: BillListFilters | None = None,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[BillListItem]:
        return self._list_bills(routing.bill_by_congress(congress), filters, limit, token)

    def list_by_congress_and_type(
        self,
        congress: int,
        bill_type: str,
        filters: BillListFilters | None = None,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[BillListItem]:
        path = routing.bill_by_congress_and_type(congress, bill_type)
        return self._list_bills(path, filters, limit, token)

    async def get(
        self,
        congress: int,
        bill_type: str,
        bill_number: int,
        *,
        token: CancellationToken | None = None,
    ) -> BillDetail:
        """Full record for one bill."""
        path = routing.bill_detail(congress, bill_type, bill_number)
        page = await self._get(path, BillDetailPage, token)
        return page.bill

    def actions(
        self,
        congress: int,
        bill_type: str,
        bill_number: int,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[BillAction]:
        path = routing.bill_sub_resource(congress, bill_type, bill_number, "actions")
        return self._paginate(
            path, BillActionsPage, lambda page: page.actions, limit=limit, token=token
        )

    def amendments(
        self,
        congress: int,
        bill_type: str,
        bill_number: int,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[AmendmentListItem]:
        path = routing.bill_sub_resource(congress, bill_type, bill_number, "amendments")
        return self._paginate(
            path, BillAmendmentsPage, lambda page: page.amendments, limit=limit, token=token
        )

    def committees(
        self,
        congress: int,
        bill_type: str,
        bill_number: int,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[CommitteeRef]:
        path = routing.bill_sub_resource(congress, bill_type, bill_number, "committees")
        return self._paginate(
            path, BillCommitteesPage, lambda page: page.committees, limit=limit, token=token
        )

    def cosponsors(
        self,
        congress: int,
        bill_type: str,
        bill_number: int,
        filters: BillCosponsorFilters | None = None,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[Cosponsor]:
        path = routing.bill_sub_resource(congress, bill_type, bill_number, "cosponsors")
        return self._paginate(
            path,
            BillCosponsorsPage,
            lambda page: page.cosponsors,
            query=filters.to_query() if filters else None,
            limit=limit,
            token=token,
        )

    def related_bills(
        self,
        congress: int,
        bill_type: str,
        bill_number: int,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[RelatedBill]:
        path = routing.bill_sub_resource(congress, bill_type, bill_number, "relatedbills")
        return self._paginate(
            path, BillRelatedBillsPage, lambda page: page.related_bills, limit=limit, token=token
        )

    async def subjects(
        self,
        congress: int,
        bill_type: str,
        bill_number: int,
        *,
        token: CancellationToken | None = None,
    ) -> BillSubjects:
        """Legislative subjects and policy area of one bill."""
        path = routing.bill_sub_resource(congress, bill_type, bill_number, "subjects")
        page = await self._get(path, BillSubjectsPage, token)
        return page.subjects

    def summaries(
        self,
        congress: int,
        bill_type: str,
        bill_number: int,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[Summary]:
        path = routing.bill_sub_resource(congress, bill_type, bill_number, "summaries")
        return self._paginate(
            path, BillSummariesPage, lambda page: page.summaries, limit=limit, token=token
        )

    def text_versions(
        self,
        congress: int,
        bill_type: str,
        bill_number: int,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[TextVersion]:
        path = routing.bill_sub_resource(congress, bill_type, bill_number, "text")
        return self._paginate(
            path, BillTextVersionsPage, lambda page: page.text_versions, limit=limit, token=token
        )

    def titles(
        self,
        congress: int,
        bill_type: str,
        bill_number: int,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[TitleEntry]:
        path = routing.bill_sub_resource(congress, bill_type, bill_number, "titles")
        return self._paginate(
            path, BillTitlesPage, lambda page: page.titles, limit=limit, token=token
        )

    def _list_bills(
        self,
        path: str,
        filters: BillListFilters | None,
        limit: int | None,
        token: CancellationToken | None,
    ) -> AsyncIterator[BillListItem]:
        return self._paginate(
            path,
            BillsListPage,
            lambda page: page.bills,
            query=filters.to_query() if filters else None,
            limit=limit,
            token=token,
        )

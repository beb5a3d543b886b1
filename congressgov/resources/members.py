"""Member endpoints (/member)."""

from __future__ import annotations

from collections.abc import AsyncIterator

from .. import routing
from ..core.cancellation import CancellationToken
from ..filters import MemberListFilters, current_member_query
from ..models import (
    MemberCosponsoredLegislationPage,
    MemberDetail,
    MemberDetailPage,
    MemberLegislationItem,
    MemberListItem,
    MembersListPage,
    MemberSponsoredLegislationPage,
)
from .base import ResourceClient


class MembersResource(ResourceClient):
    """Access to members of Congress, keyed by Bioguide identifier.

    State codes are two-letter postal abbreviations; ``current_member``
    narrows state and district listings to sitting members.
    """

    def list(
        self,
        filters: MemberListFilters | None = None,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[MemberListItem]:
        query = filters.to_query() if filters else None
        return self._list_members(routing.member_list(), query, limit, token)

    def list_by_congress(
        self,
        congress: int,
        filters: MemberListFilters | None = None,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[MemberListItem]:
        path = routing.member_by_congress(congress)
        query = filters.to_query() if filters else None
        return self._list_members(path, query, limit, token)

    def list_by_state(
        self,
        state_code: str,
        *,
        current_member: bool | None = None,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[MemberListItem]:
        path = routing.member_by_state(state_code)
        return self._list_members(path, current_member_query(current_member), limit, token)

    def list_by_state_and_district(
        self,
        state_code: str,
        district: int,
        *,
        current_member: bool | None = None,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[MemberListItem]:
        path = routing.member_by_state_and_district(state_code, district)
        return self._list_members(path, current_member_query(current_member), limit, token)

    def list_by_congress_state_and_district(
        self,
        congress: int,
        state_code: str,
        district: int,
        *,
        current_member: bool | None = None,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[MemberListItem]:
        path = routing.member_by_congress_state_and_district(congress, state_code, district)
        return self._list_members(path, current_member_query(current_member), limit, token)

    async def get(
        self, bioguide_id: str, *, token: CancellationToken | None = None
    ) -> MemberDetail:
        page = await self._get(routing.member_detail(bioguide_id), MemberDetailPage, token)
        return page.member

    def sponsored_legislation(
        self,
        bioguide_id: str,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[MemberLegislationItem]:
        return self._paginate(
            routing.member_sponsored_legislation(bioguide_id),
            MemberSponsoredLegislationPage,
            lambda page: page.sponsored_legislation,
            limit=limit,
            token=token,
        )

    def cosponsored_legislation(
        self,
        bioguide_id: str,
        *,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[MemberLegislationItem]:
        return self._paginate(
            routing.member_cosponsored_legislation(bioguide_id),
            MemberCosponsoredLegislationPage,
            lambda page: page.cosponsored_legislation,
            limit=limit,
            token=token,
        )

    def _list_members(
        self,
        path: str,
        query: dict[str, str] | None,
        limit: int | None,
        token: CancellationToken | None,
    ) -> AsyncIterator[MemberListItem]:
        return self._paginate(
            path, MembersListPage, lambda page: page.members, query=query, limit=limit, token=token
        )

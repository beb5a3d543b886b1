"""Member records and pages (/member)."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import CongressModel
from .common import CountUrlRef, LatestAction, PolicyArea


class Depiction(CongressModel):
    attribution: str | None = None
    image_url: str | None = None


class MemberTerm(CongressModel):
    chamber: str | None = None
    congress: int | None = None
    start_year: int | None = None
    end_year: int | None = None
    member_type: str | None = None
    state_code: str | None = None
    state_name: str | None = None


class MemberTerms(CongressModel):
    """List endpoints wrap terms as ``{"item": [...]}``."""

    item: list[MemberTerm] = Field(default_factory=list)


class MemberListItem(CongressModel):
    bioguide_id: str = ""
    name: str = ""
    party_name: str | None = None
    state: str | None = None
    district: int | None = None
    depiction: Depiction | None = None
    terms: MemberTerms | list[MemberTerm] | None = None
    update_date: datetime | None = None
    url: str | None = None


class LeadershipEntry(CongressModel):
    congress: int | None = None
    type: str = ""


class PartyHistoryEntry(CongressModel):
    party_abbreviation: str | None = None
    party_name: str | None = None
    start_year: int | None = None


class MemberDetail(CongressModel):
    """Full member record (GET /member/{bioguideId})."""

    bioguide_id: str = ""
    birth_year: str | None = None
    direct_order_name: str | None = None
    inverted_order_name: str | None = None
    honorific_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    state: str | None = None
    depiction: Depiction | None = None
    leadership: list[LeadershipEntry] = Field(default_factory=list)
    party_history: list[PartyHistoryEntry] = Field(default_factory=list)
    terms: list[MemberTerm] = Field(default_factory=list)
    sponsored_legislation: CountUrlRef | None = None
    cosponsored_legislation: CountUrlRef | None = None
    update_date: datetime | None = None


class MemberLegislationItem(CongressModel):
    congress: int | None = None
    number: str | None = None
    type: str | None = None
    title: str | None = None
    introduced_date: datetime | None = None
    latest_action: LatestAction | None = None
    policy_area: PolicyArea | None = None
    url: str | None = None


class MembersListPage(CongressModel):
    members: list[MemberListItem] = Field(default_factory=list)


class MemberDetailPage(CongressModel):
    member: MemberDetail


class MemberSponsoredLegislationPage(CongressModel):
    sponsored_legislation: list[MemberLegislationItem] = Field(default_factory=list)


class MemberCosponsoredLegislationPage(CongressModel):
    cosponsored_legislation: list[MemberLegislationItem] = Field(default_factory=list)

"""Amendment records and pages (/amendment)."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import CongressModel
from .common import (
    AmendedBillRef,
    Cosponsor,
    CountUrlRef,
    LatestAction,
    MemberRef,
    RecordedVoteRef,
    SourceSystem,
    TextVersion,
)


class AmendmentListItem(CongressModel):
    congress: int | None = None
    number: str = ""
    type: str = ""
    purpose: str | None = None
    description: str | None = None
    latest_action: LatestAction | None = None
    update_date: datetime | None = None
    url: str | None = None


class AmendmentDetail(CongressModel):
    """Full amendment record."""

    congress: int | None = None
    number: str = ""
    type: str = ""
    chamber: str | None = None
    purpose: str | None = None
    description: str | None = None
    proposed_date: datetime | None = None
    submitted_date: datetime | None = None
    latest_action: LatestAction | None = None
    amended_bill: AmendedBillRef | None = None
    sponsors: list[MemberRef] = Field(default_factory=list)
    actions: CountUrlRef | None = None
    cosponsors: CountUrlRef | None = None
    amendments_to_amendment: CountUrlRef | None = None
    update_date: datetime | None = None


class AmendmentAction(CongressModel):
    action_date: datetime | None = None
    text: str = ""
    type: str | None = None
    source_system: SourceSystem | None = None
    recorded_votes: list[RecordedVoteRef] = Field(default_factory=list)


class AmendmentsListPage(CongressModel):
    amendments: list[AmendmentListItem] = Field(default_factory=list)


class AmendmentDetailPage(CongressModel):
    amendment: AmendmentDetail


class AmendmentActionsPage(CongressModel):
    actions: list[AmendmentAction] = Field(default_factory=list)


class AmendmentCosponsorsPage(CongressModel):
    cosponsors: list[Cosponsor] = Field(default_factory=list)


class AmendmentsToAmendmentPage(CongressModel):
    amendments: list[AmendmentListItem] = Field(default_factory=list)


class AmendmentTextVersionsPage(CongressModel):
    text_versions: list[TextVersion] = Field(default_factory=list)

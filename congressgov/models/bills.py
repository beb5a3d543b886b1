"""Bill records and pages (/bill)."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .amendments import AmendmentListItem
from .base import CongressModel
from .common import (
    CommitteeRef,
    Cosponsor,
    CountUrlRef,
    LatestAction,
    LawEntry,
    LegislativeSubject,
    PolicyArea,
    RelationshipDetail,
    SourceSystem,
    Sponsor,
    TextVersion,
    TitleEntry,
)


class BillListItem(CongressModel):
    """Bill as it appears in list endpoints."""

    congress: int | None = None
    number: str = ""
    type: str = ""
    title: str = ""
    origin_chamber: str | None = None
    origin_chamber_code: str | None = None
    latest_action: LatestAction | None = None
    update_date: datetime | None = None
    update_date_including_text: datetime | None = None
    url: str | None = None


class CboCostEstimate(CongressModel):
    title: str = ""
    description: str | None = None
    pub_date: datetime | None = None
    url: str | None = None


class CommitteeReportRef(CongressModel):
    citation: str = ""
    url: str | None = None


class BillDetail(CongressModel):
    """Full bill record (GET /bill/{congress}/{type}/{number})."""

    congress: int | None = None
    number: str = ""
    type: str = ""
    title: str = ""
    origin_chamber: str | None = None
    introduced_date: datetime | None = None
    constitutional_authority_statement_text: str | None = None
    legislation_url: str | None = None
    latest_action: LatestAction | None = None
    policy_area: PolicyArea | None = None
    sponsors: list[Sponsor] = Field(default_factory=list)
    laws: list[LawEntry] = Field(default_factory=list)
    cbo_cost_estimates: list[CboCostEstimate] = Field(default_factory=list)
    committee_reports: list[CommitteeReportRef] = Field(default_factory=list)
    actions: CountUrlRef | None = None
    amendments: CountUrlRef | None = None
    committees: CountUrlRef | None = None
    cosponsors: CountUrlRef | None = None
    related_bills: CountUrlRef | None = None
    subjects: CountUrlRef | None = None
    summaries: CountUrlRef | None = None
    text_versions: CountUrlRef | None = None
    titles: CountUrlRef | None = None
    update_date: datetime | None = None
    update_date_including_text: datetime | None = None


class BillAction(CongressModel):
    action_code: str | None = None
    action_date: datetime | None = None
    text: str = ""
    type: str | None = None
    source_system: SourceSystem | None = None
    committees: list[CommitteeRef] = Field(default_factory=list)


class RelatedBill(CongressModel):
    congress: int | None = None
    number: int | None = None
    type: str = ""
    title: str | None = None
    latest_action: LatestAction | None = None
    relationship_details: list[RelationshipDetail] = Field(default_factory=list)
    url: str | None = None


class BillSubjects(CongressModel):
    legislative_subjects: list[LegislativeSubject] = Field(default_factory=list)
    policy_area: PolicyArea | None = None


class Summary(CongressModel):
    """CRS summary attached to a bill."""

    action_date: datetime | None = None
    action_desc: str | None = None
    text: str = ""
    update_date: datetime | None = None
    version_code: str | None = None


class BillsListPage(CongressModel):
    bills: list[BillListItem] = Field(default_factory=list)


class BillDetailPage(CongressModel):
    bill: BillDetail


class BillActionsPage(CongressModel):
    actions: list[BillAction] = Field(default_factory=list)


class BillAmendmentsPage(CongressModel):
    amendments: list[AmendmentListItem] = Field(default_factory=list)


class BillCommitteesPage(CongressModel):
    committees: list[CommitteeRef] = Field(default_factory=list)


class BillCosponsorsPage(CongressModel):
    cosponsors: list[Cosponsor] = Field(default_factory=list)


class BillRelatedBillsPage(CongressModel):
    related_bills: list[RelatedBill] = Field(default_factory=list)


class BillSubjectsPage(CongressModel):
    subjects: BillSubjects


class BillSummariesPage(CongressModel):
    summaries: list[Summary] = Field(default_factory=list)


class BillTextVersionsPage(CongressModel):
    text_versions: list[TextVersion] = Field(default_factory=list)


class BillTitlesPage(CongressModel):
    titles: list[TitleEntry] = Field(default_factory=list)

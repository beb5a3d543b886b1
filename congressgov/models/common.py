"""Records shared by several resources."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import CongressModel


class SourceSystem(CongressModel):
    code: int | None = None
    name: str | None = None


class LatestAction(CongressModel):
    """Most recent action taken on a bill or amendment."""

    action_date: datetime | None = None
    action_time: str | None = None
    text: str | None = None
    source_system: SourceSystem | None = None


class CountUrlRef(CongressModel):
    """Pointer to a sub-resource with its item count."""

    count: int = 0
    url: str | None = None


class TextFormat(CongressModel):
    type: str = ""
    url: str = ""
    is_errata: str | None = None
    part: str | None = None


class TextVersion(CongressModel):
    date: datetime | None = None
    formats: list[TextFormat] = Field(default_factory=list)
    type: str | None = None


class TitleEntry(CongressModel):
    title: str = ""
    title_type: str | None = None
    title_type_code: int | None = None
    bill_text_version_code: str | None = None
    bill_text_version_name: str | None = None
    chamber_code: str | None = None
    chamber_name: str | None = None
    update_date: datetime | None = None


class CommitteeActivity(CongressModel):
    date: datetime | None = None
    name: str = ""


class CommitteeRef(CongressModel):
    name: str = ""
    system_code: str | None = None
    chamber: str | None = None
    type: str | None = None
    url: str | None = None
    activities: list[CommitteeActivity] = Field(default_factory=list)


class LawEntry(CongressModel):
    number: str = ""
    type: str = ""


class RelationshipDetail(CongressModel):
    identified_by: str = ""
    type: str = ""


class PolicyArea(CongressModel):
    name: str | None = None


class LegislativeSubject(CongressModel):
    name: str = ""
    update_date: datetime | None = None


class Sponsor(CongressModel):
    bioguide_id: str = ""
    full_name: str | None = None
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    party: str | None = None
    state: str | None = None
    district: int | None = None
    is_by_request: str | None = None
    url: str | None = None


class Cosponsor(CongressModel):
    bioguide_id: str = ""
    full_name: str | None = None
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    party: str | None = None
    state: str | None = None
    district: int | None = None
    is_original_cosponsor: bool = False
    sponsorship_date: datetime | None = None
    url: str | None = None


class MemberRef(CongressModel):
    bioguide_id: str = ""
    first_name: str | None = None
    last_name: str | None = None
    full_name: str | None = None
    url: str | None = None


class AmendedBillRef(CongressModel):
    congress: int | None = None
    number: str = ""
    type: str = ""
    title: str | None = None
    origin_chamber: str | None = None
    origin_chamber_code: str | None = None
    url: str | None = None


class RecordedVoteRef(CongressModel):
    chamber: str | None = None
    congress: int | None = None
    date: datetime | None = None
    roll_number: int | None = None
    session_number: int | None = None
    url: str | None = None

"""Summary feed records and pages (/summaries)."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import CongressModel


class SummaryBillRef(CongressModel):
    congress: int | None = None
    number: str = ""
    type: str = ""
    title: str | None = None
    origin_chamber: str | None = None
    origin_chamber_code: str | None = None
    update_date_including_text: datetime | None = None
    url: str | None = None


class SummaryFeedItem(CongressModel):
    """One entry of the summaries feed."""

    action_date: datetime | None = None
    action_desc: str | None = None
    bill: SummaryBillRef | None = None
    current_chamber: str | None = None
    current_chamber_code: str | None = None
    last_summary_update_date: datetime | None = None
    text: str = ""
    update_date: datetime | None = None
    version_code: str | None = None


class SummariesListPage(CongressModel):
    summaries: list[SummaryFeedItem] = Field(default_factory=list)

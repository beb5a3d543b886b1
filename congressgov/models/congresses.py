"""Congress records and pages (/congress)."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import CongressModel


class CongressSession(CongressModel):
    chamber: str | None = None
    number: int | None = None
    type: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


class CongressEntry(CongressModel):
    """A numbered Congress and its sessions."""

    name: str = ""
    number: int | None = None
    start_year: str | None = None
    end_year: str | None = None
    sessions: list[CongressSession] = Field(default_factory=list)
    update_date: datetime | None = None
    url: str | None = None


class CongressesListPage(CongressModel):
    congresses: list[CongressEntry] = Field(default_factory=list)


class CongressDetailPage(CongressModel):
    congress: CongressEntry

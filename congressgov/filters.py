"""List filters and their query-parameter mapping.

Update windows (``fromDateTime``/``toDateTime``) are always sent in UTC as
``YYYY-MM-DDThh:mm:ssZ``; naive datetimes are taken to be UTC already.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime


def to_zulu(value: datetime) -> str:
    """Render ``value`` as a UTC ``YYYY-MM-DDThh:mm:ssZ`` string."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass(frozen=True)
class UpdateWindowFilters:
    """Filters shared by every list endpoint that supports an update window."""

    from_datetime: datetime | None = None
    to_datetime: datetime | None = None

    def to_query(self) -> dict[str, str]:
        query: dict[str, str] = {}
        if self.from_datetime is not None:
            query["fromDateTime"] = to_zulu(self.from_datetime)
        if self.to_datetime is not None:
            query["toDateTime"] = to_zulu(self.to_datetime)
        return query


@dataclass(frozen=True)
class SortableFilters(UpdateWindowFilters):
    sort: str | None = None

    def to_query(self) -> dict[str, str]:
        query = super().to_query()
        if self.sort and self.sort.strip():
            query["sort"] = self.sort.strip()
        return query


@dataclass(frozen=True)
class BillListFilters(SortableFilters):
    """Filters for /bill list endpoints (sort e.g. ``updateDate+desc``)."""


@dataclass(frozen=True)
class BillCosponsorFilters(SortableFilters):
    """Filters for /bill/.../cosponsors."""


@dataclass(frozen=True)
class SummariesListFilters(SortableFilters):
    """Filters for /summaries list endpoints."""


@dataclass(frozen=True)
class AmendmentListFilters(UpdateWindowFilters):
    """Filters for /amendment list endpoints."""


@dataclass(frozen=True)
class MemberListFilters(UpdateWindowFilters):
    """Filters for /member list endpoints."""

    current_member: bool | None = None

    def to_query(self) -> dict[str, str]:
        query = super().to_query()
        if self.current_member is not None:
            query.update(current_member_query(self.current_member))
        return query


def current_member_query(current_member: bool | None) -> dict[str, str]:
    if current_member is None:
        return {}
    return {"currentMember": "true" if current_member else "false"}

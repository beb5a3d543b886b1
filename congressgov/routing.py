"""Route composition for api.congress.gov endpoints.

Paths carry no leading slash so they resolve under the versioned base URL.
Bill and amendment types are trimmed and lower-cased (``HR`` -> ``hr``).
"""

from __future__ import annotations

from .core.exceptions import InvalidArgumentError


def _require_text(value: str | None, what: str) -> str:
    if value is None or not value.strip():
        raise InvalidArgumentError(f"{what} is required")
    return value.strip()


def _require_district(district: int) -> int:
    district = int(district)
    if district <= 0:
        raise InvalidArgumentError(f"district must be positive, got {district}")
    return district


def _normalize_type(value: str | None) -> str:
    return value.strip().lower() if value and value.strip() else ""


# Bills
def bill_list() -> str:
    return "bill"


def bill_by_congress(congress: int) -> str:
    return f"bill/{int(congress)}"


def bill_by_congress_and_type(congress: int, bill_type: str) -> str:
    return f"bill/{int(congress)}/{_normalize_type(bill_type)}"


def bill_detail(congress: int, bill_type: str, bill_number: int) -> str:
    return f"{bill_by_congress_and_type(congress, bill_type)}/{int(bill_number)}"


def bill_sub_resource(congress: int, bill_type: str, bill_number: int, name: str) -> str:
    """Path of a bill sub-resource such as ``actions`` or ``relatedbills``."""
    return f"{bill_detail(congress, bill_type, bill_number)}/{name}"


# Amendments
def amendment_list() -> str:
    return "amendment"


def amendment_by_congress(congress: int) -> str:
    return f"amendment/{int(congress)}"


def amendment_by_congress_and_type(congress: int, amendment_type: str) -> str:
    return f"amendment/{int(congress)}/{_normalize_type(amendment_type)}"


def amendment_detail(congress: int, amendment_type: str, amendment_number: int) -> str:
    return f"{amendment_by_congress_and_type(congress, amendment_type)}/{int(amendment_number)}"


def amendment_sub_resource(
    congress: int, amendment_type: str, amendment_number: int, name: str
) -> str:
    return f"{amendment_detail(congress, amendment_type, amendment_number)}/{name}"


# Members
def member_list() -> str:
    return "member"


def member_detail(bioguide_id: str) -> str:
    return f"member/{_require_text(bioguide_id, 'Bioguide id')}"


def member_sponsored_legislation(bioguide_id: str) -> str:
    return f"{member_detail(bioguide_id)}/sponsored-legislation"


def member_cosponsored_legislation(bioguide_id: str) -> str:
    return f"{member_detail(bioguide_id)}/cosponsored-legislation"


def member_by_congress(congress: int) -> str:
    return f"member/congress/{int(congress)}"


def member_by_state(state_code: str) -> str:
    return f"member/{_require_text(state_code, 'State code')}"


def member_by_state_and_district(state_code: str, district: int) -> str:
    return f"{member_by_state(state_code)}/{_require_district(district)}"


def member_by_congress_state_and_district(congress: int, state_code: str, district: int) -> str:
    state = _require_text(state_code, "State code")
    return f"{member_by_congress(congress)}/{state}/{_require_district(district)}"


# Summaries
def summaries_list() -> str:
    return "summaries"


def summaries_by_congress(congress: int) -> str:
    return f"summaries/{int(congress)}"


def summaries_by_congress_and_bill_type(congress: int, bill_type: str) -> str:
    return f"summaries/{int(congress)}/{_normalize_type(bill_type)}"


# Congresses
def congress_list() -> str:
    return "congress"


def congress_by_number(congress: int) -> str:
    return f"congress/{int(congress)}"


def congress_current() -> str:
    return "congress/current"

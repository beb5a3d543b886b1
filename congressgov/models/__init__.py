"""Typed payloads for api.congress.gov.

Every record and page derives from ``CongressModel``: camelCase wire keys
matched case-insensitively, unknown keys preserved in ``extension_data``.

See Also:
    - Pydantic documentation: https://docs.pydantic.dev/
"""

from .amendments import (
    AmendmentAction,
    AmendmentActionsPage,
    AmendmentCosponsorsPage,
    AmendmentDetail,
    AmendmentDetailPage,
    AmendmentListItem,
    AmendmentsListPage,
    AmendmentsToAmendmentPage,
    AmendmentTextVersionsPage,
)
from .base import CongressModel
from .bills import (
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
    CboCostEstimate,
    CommitteeReportRef,
    RelatedBill,
    Summary,
)
from .common import (
    AmendedBillRef,
    CommitteeActivity,
    CommitteeRef,
    Cosponsor,
    CountUrlRef,
    LatestAction,
    LawEntry,
    LegislativeSubject,
    MemberRef,
    PolicyArea,
    RecordedVoteRef,
    RelationshipDetail,
    SourceSystem,
    Sponsor,
    TextFormat,
    TextVersion,
    TitleEntry,
)
from .congresses import CongressDetailPage, CongressEntry, CongressesListPage, CongressSession
from .members import (
    Depiction,
    LeadershipEntry,
    MemberCosponsoredLegislationPage,
    MemberDetail,
    MemberDetailPage,
    MemberLegislationItem,
    MemberListItem,
    MembersListPage,
    MemberSponsoredLegislationPage,
    MemberTerm,
    MemberTerms,
    PartyHistoryEntry,
)
from .summaries import SummariesListPage, SummaryBillRef, SummaryFeedItem

__all__ = [
    "CongressModel",
    # Common
    "AmendedBillRef",
    "CommitteeActivity",
    "CommitteeRef",
    "Cosponsor",
    "CountUrlRef",
    "LatestAction",
    "LawEntry",
    "LegislativeSubject",
    "MemberRef",
    "PolicyArea",
    "RecordedVoteRef",
    "RelationshipDetail",
    "SourceSystem",
    "Sponsor",
    "TextFormat",
    "TextVersion",
    "TitleEntry",
    # Bills
    "BillAction",
    "BillActionsPage",
    "BillAmendmentsPage",
    "BillCommitteesPage",
    "BillCosponsorsPage",
    "BillDetail",
    "BillDetailPage",
    "BillListItem",
    "BillRelatedBillsPage",
    "BillsListPage",
    "BillSubjects",
    "BillSubjectsPage",
    "BillSummariesPage",
    "BillTextVersionsPage",
    "BillTitlesPage",
    "CboCostEstimate",
    "CommitteeReportRef",
    "RelatedBill",
    "Summary",
    # Amendments
    "AmendmentAction",
    "AmendmentActionsPage",
    "AmendmentCosponsorsPage",
    "AmendmentDetail",
    "AmendmentDetailPage",
    "AmendmentListItem",
    "AmendmentsListPage",
    "AmendmentsToAmendmentPage",
    "AmendmentTextVersionsPage",
    # Members
    "Depiction",
    "LeadershipEntry",
    "MemberCosponsoredLegislationPage",
    "MemberDetail",
    "MemberDetailPage",
    "MemberLegislationItem",
    "MemberListItem",
    "MembersListPage",
    "MemberSponsoredLegislationPage",
    "MemberTerm",
    "MemberTerms",
    "PartyHistoryEntry",
    # Summaries
    "SummariesListPage",
    "SummaryBillRef",
    "SummaryFeedItem",
    # Congresses
    "CongressDetailPage",
    "CongressEntry",
    "CongressesListPage",
    "CongressSession",
]

"""Resource sub-clients grouped by API area."""

from .amendments import AmendmentsResource
from .base import ResourceClient
from .bills import BillsResource
from .congresses import CongressesResource
from .members import MembersResource
from .summaries import SummariesResource

__all__ = [
    "AmendmentsResource",
    "BillsResource",
    "CongressesResource",
    "MembersResource",
    "ResourceClient",
    "SummariesResource",
]

"""congressgov - typed async client for the api.congress.gov v3 REST API."""

from ._version import __version__
from .client import CongressClient
from .core import (
    DEFAULT_BASE_URL,
    MAX_PAGE_SIZE,
    CancellationToken,
    ClientOptions,
    ClientSettings,
    ConfigurationError,
    CongressError,
    DeserializationError,
    HttpError,
    InvalidArgumentError,
    RateLimitError,
    RequestCancelledError,
    RetryPolicy,
    TransportError,
)
from .filters import (
    AmendmentListFilters,
    BillCosponsorFilters,
    BillListFilters,
    MemberListFilters,
    SummariesListFilters,
)
from .resources import (
    AmendmentsResource,
    BillsResource,
    CongressesResource,
    MembersResource,
    SummariesResource,
)
from .runtime import (
    HTTPClient,
    HttpRequest,
    HttpResponse,
    RequestExecutor,
    paginate_items,
    paginate_pages,
)

__all__ = [
    "__version__",
    "CongressClient",
    # Configuration
    "ClientOptions",
    "ClientSettings",
    "RetryPolicy",
    "DEFAULT_BASE_URL",
    "MAX_PAGE_SIZE",
    "CancellationToken",
    # Exceptions
    "CongressError",
    "ConfigurationError",
    "InvalidArgumentError",
    "TransportError",
    "HttpError",
    "RateLimitError",
    "DeserializationError",
    "RequestCancelledError",
    # Filters
    "AmendmentListFilters",
    "BillCosponsorFilters",
    "BillListFilters",
    "MemberListFilters",
    "SummariesListFilters",
    # Resources
    "AmendmentsResource",
    "BillsResource",
    "CongressesResource",
    "MembersResource",
    "SummariesResource",
    # Runtime
    "HTTPClient",
    "HttpRequest",
    "HttpResponse",
    "RequestExecutor",
    "paginate_items",
    "paginate_pages",
]

"""REST runtime abstractions."""

from .executor import RequestExecutor, parse_retry_after
from .http_client import HTTPClient, HttpRequest, HttpResponse
from .query import QueryParams, redact_api_key

__all__ = [
    "HTTPClient",
    "HttpRequest",
    "HttpResponse",
    "QueryParams",
    "RequestExecutor",
    "parse_retry_after",
    "redact_api_key",
]

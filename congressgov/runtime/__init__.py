"""Request pipeline: transport, executor and pagination."""

from .pagination import paginate_items, paginate_pages
from .rest import HTTPClient, HttpRequest, HttpResponse, RequestExecutor

__all__ = [
    "HTTPClient",
    "HttpRequest",
    "HttpResponse",
    "RequestExecutor",
    "paginate_items",
    "paginate_pages",
]

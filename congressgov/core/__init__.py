"""Core components."""

from .cancellation import CancellationToken
from .exceptions import (
    CongressError,
    ConfigurationError,
    DeserializationError,
    HttpError,
    InvalidArgumentError,
    RateLimitError,
    RequestCancelledError,
    TransportError,
    is_transient_status,
)
from .options import DEFAULT_BASE_URL, MAX_PAGE_SIZE, ClientOptions, RetryPolicy
from .settings import ClientSettings

__all__ = [
    "CancellationToken",
    "ClientOptions",
    "ClientSettings",
    "RetryPolicy",
    "DEFAULT_BASE_URL",
    "MAX_PAGE_SIZE",
    # Exceptions
    "CongressError",
    "ConfigurationError",
    "InvalidArgumentError",
    "TransportError",
    "HttpError",
    "RateLimitError",
    "DeserializationError",
    "RequestCancelledError",
    "is_transient_status",
]

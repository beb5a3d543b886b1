"""Custom exception hierarchy."""

from __future__ import annotations

_BODY_LIMIT = 2000


class CongressError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(CongressError):
    """Client options or settings are invalid or incomplete."""

    pass


class InvalidArgumentError(CongressError, ValueError):
    """A core operation was called with a malformed or missing argument.

    Always a local programming error, raised before any network activity.
    """

    pass


class TransportError(CongressError):
    """The request failed before any HTTP response was obtained.

    The underlying aiohttp/timeout error is chained as ``__cause__``.
    """

    def __init__(self, message: str, *, method: str | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class HttpError(CongressError):
    """Terminal non-2xx response.

    Raised either for a non-retryable status on first encounter or once the
    retry budget for a transient status is exhausted.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        reason: str | None = None,
        method: str | None = None,
        url: str | None = None,
        request_id: str | None = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.method = method
        self.url = url
        self.request_id = request_id
        self.body = body

    @property
    def is_transient(self) -> bool:
        """Whether the status would have been retried (429 or 5xx)."""
        return is_transient_status(self.status_code)


class RateLimitError(HttpError):
    """HTTP 429 that outlived the retry budget."""

    def __init__(self, message: str, *, retry_after: float | None = None, **kwargs) -> None:
        kwargs.setdefault("status_code", 429)
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class DeserializationError(CongressError):
    """Response body could not be parsed into the expected shape."""

    def __init__(self, message: str, *, url: str | None = None, target: str | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.target = target


class RequestCancelledError(CongressError):
    """The caller's cancellation token fired before the operation completed.

    Distinct from HttpError: carries no status and no retry-exhaustion data.
    """

    def __init__(self, message: str = "Operation cancelled", reason: str | None = None) -> None:
        super().__init__(message)
        self.reason = reason


def is_transient_status(status: int) -> bool:
    """Return True for statuses worth retrying: 429 and any 5xx."""
    return status == 429 or 500 <= status <= 599


def truncate_body(value: str | None, limit: int = _BODY_LIMIT) -> str:
    """Cap diagnostic response bodies, marking the cut with an ellipsis."""
    if not value:
        return ""
    if len(value) <= limit:
        return value
    return value[:limit] + "..."

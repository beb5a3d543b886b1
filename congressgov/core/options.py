"""Client configuration structures.

``RetryPolicy`` and ``ClientOptions`` are immutable once constructed and are
shared by reference between the root client, the request executor and every
resource sub-client, so they are safe to use from concurrent tasks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import urlsplit

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.congress.gov/v3/"
MAX_PAGE_SIZE = 250


@dataclass(frozen=True)
class RetryPolicy:
    """Retry policy for transient HTTP failures (429 / 5xx / transport errors).

    Attributes:
        max_retries: Retries in addition to the initial try (0 disables retrying)
        base_delay: Base delay in seconds for exponential backoff
        jitter_factor: Fraction of the backoff added as random jitter, clamped to [0, 1]
        respect_retry_after: Honor the Retry-After header when present
    """

    max_retries: int = 3
    base_delay: float = 1.0
    jitter_factor: float = 0.2
    respect_retry_after: bool = True

    def __post_init__(self) -> None:
        """Validate retry policy configuration."""
        if self.max_retries < 0:
            raise ConfigurationError("RetryPolicy.max_retries must be >= 0")
        if self.base_delay < 0:
            raise ConfigurationError("RetryPolicy.base_delay must be >= 0")

    @property
    def clamped_jitter(self) -> float:
        """Jitter factor clamped to [0, 1]."""
        return min(1.0, max(0.0, self.jitter_factor))


@dataclass(frozen=True)
class ClientOptions:
    """Options applied to every request issued by a client.

    Attributes:
        base_url: Absolute API root, must end with "/" so version segments survive joins
        retry: Retry policy shared by all requests
        force_json_format: Inject format=json into every request
        default_limit: Page size used by list operations when none is given (API max 250)
        request_timeout: Optional total timeout in seconds per HTTP round trip
        user_agent_suffix: Optional text appended to the User-Agent header
    """

    base_url: str = DEFAULT_BASE_URL
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    force_json_format: bool = True
    default_limit: int = MAX_PAGE_SIZE
    request_timeout: float | None = None
    user_agent_suffix: str | None = None

    def __post_init__(self) -> None:
        """Validate client options."""
        if not self.base_url or not self.base_url.strip():
            # Empty base URL falls back to the public API root
            object.__setattr__(self, "base_url", DEFAULT_BASE_URL)

        parts = urlsplit(self.base_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(f"base_url must be an absolute http(s) URL: {self.base_url!r}")
        if not self.base_url.endswith("/"):
            raise ConfigurationError(
                f"base_url must end with '/' so relative paths keep its last segment: {self.base_url!r}"
            )
        if not 1 <= self.default_limit <= MAX_PAGE_SIZE:
            raise ConfigurationError(f"default_limit must be between 1 and {MAX_PAGE_SIZE}")
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ConfigurationError("request_timeout must be positive when set")

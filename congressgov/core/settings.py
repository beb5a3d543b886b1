"""Environment-driven configuration.

Values are read from ``CONGRESS_GOV_*`` environment variables (or a local
``.env`` file) and turned into immutable ``ClientOptions``.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .options import DEFAULT_BASE_URL, MAX_PAGE_SIZE, ClientOptions, RetryPolicy


class ClientSettings(BaseSettings):
    """Settings for ``CongressClient`` resolved from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="CONGRESS_GOV_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(default=None, description="api.congress.gov key")
    base_url: str = Field(default=DEFAULT_BASE_URL, min_length=1)
    max_retries: int = Field(default=3, ge=0)
    base_delay: float = Field(default=1.0, ge=0)
    jitter_factor: float = 0.2
    respect_retry_after: bool = True
    force_json_format: bool = True
    default_limit: int = Field(default=MAX_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    request_timeout: float | None = Field(default=None, gt=0)
    user_agent_suffix: str | None = None

    def to_options(self) -> ClientOptions:
        """Build client options from these settings."""
        return ClientOptions(
            base_url=self.base_url,
            retry=RetryPolicy(
                max_retries=self.max_retries,
                base_delay=self.base_delay,
                jitter_factor=self.jitter_factor,
                respect_retry_after=self.respect_retry_after,
            ),
            force_json_format=self.force_json_format,
            default_limit=self.default_limit,
            request_timeout=self.request_timeout,
            user_agent_suffix=self.user_agent_suffix,
        )

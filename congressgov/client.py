"""Root client for the api.congress.gov v3 REST API.

Architecture:
    ``CongressClient`` is a facade over one ``RequestExecutor`` and one
    ``HTTPClient``. Every resource sub-client shares the same executor and
    options, so a single client can drive any number of concurrent
    pagination runs.

Design Decisions:
    - The API key is resolved once at construction: explicit argument first,
      then ``CONGRESS_GOV_API_KEY`` via ``ClientSettings``.
    - A caller-supplied aiohttp session is never closed by the client.
"""

from __future__ import annotations

import logging
from typing import Any

import aiohttp
from pydantic import ValidationError

from ._version import __version__
from .core.exceptions import ConfigurationError
from .core.options import ClientOptions
from .core.settings import ClientSettings
from .resources import (
    AmendmentsResource,
    BillsResource,
    CongressesResource,
    MembersResource,
    SummariesResource,
)
from .runtime.rest import HTTPClient, RequestExecutor

logger = logging.getLogger(__name__)

USER_AGENT = f"congressgov-python/{__version__}"


def build_user_agent(suffix: str | None = None) -> str:
    if suffix and suffix.strip():
        return f"{USER_AGENT} (+{suffix.strip()})"
    return USER_AGENT


def _load_settings() -> ClientSettings:
    try:
        return ClientSettings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid CONGRESS_GOV_* configuration: {exc}") from exc


class CongressClient:
    """High-level entry point for api.congress.gov.

    Example:
        >>> async with CongressClient() as client:
        ...     bill = await client.bills.get(118, "hr", 1)
        ...     async for action in client.bills.actions(118, "hr", 1):
        ...         print(action.action_date, action.text)
    """

    def __init__(
        self,
        api_key: str | None = None,
        options: ClientOptions | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        settings: ClientSettings | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: api.congress.gov key (falls back to CONGRESS_GOV_API_KEY)
            options: Client options (built from settings when omitted)
            session: Optional aiohttp session; left open on close()
            settings: Optional pre-loaded settings (read from the environment when omitted)

        Raises:
            ConfigurationError: No API key could be resolved
        """
        if api_key is None or not api_key.strip() or options is None:
            settings = settings or _load_settings()
            if api_key is None or not api_key.strip():
                api_key = settings.api_key
            if options is None:
                options = settings.to_options()
        if api_key is None or not api_key.strip():
            raise ConfigurationError(
                "An api.congress.gov API key is required. "
                "Pass api_key or set CONGRESS_GOV_API_KEY."
            )

        self._api_key = api_key.strip()
        self._options = options
        self._http = HTTPClient(
            timeout=options.request_timeout,
            headers={
                "Accept": "application/json",
                "User-Agent": build_user_agent(options.user_agent_suffix),
            },
            session=session,
        )
        self._executor = RequestExecutor(self._http, self._api_key, options)
        self._closed = False

        self.bills = BillsResource(self._executor, options)
        self.amendments = AmendmentsResource(self._executor, options)
        self.members = MembersResource(self._executor, options)
        self.summaries = SummariesResource(self._executor, options)
        self.congresses = CongressesResource(self._executor, options)

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def options(self) -> ClientOptions:
        return self._options

    @property
    def base_url(self) -> str:
        return self._options.base_url

    @property
    def executor(self) -> RequestExecutor:
        """Executor shared by all resource sub-clients."""
        return self._executor

    async def close(self) -> None:
        """Release the transport session if this client created it."""
        if self._closed:
            return
        self._closed = True
        logger.debug("Closing CongressClient")
        await self._http.close()

    async def __aenter__(self) -> CongressClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

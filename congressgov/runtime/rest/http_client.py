"""HTTP client helper.

Thin aiohttp wrapper exposing a single "send one request, get one response"
capability. Retry policy, auth injection and JSON decoding live in the
request executor; this layer only owns the session and maps aiohttp
failures onto ``TransportError``.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

import aiohttp
from multidict import CIMultiDict, CIMultiDictProxy
from yarl import URL

from ...core.exceptions import TransportError


@dataclass(frozen=True)
class HttpRequest:
    """Outbound request descriptor."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class HttpResponse:
    """Fully read HTTP response.

    Headers are case-insensitive; the body is kept as raw bytes and decoded
    on demand.
    """

    status: int
    reason: str | None = None
    headers: CIMultiDictProxy[str] = field(default_factory=lambda: CIMultiDictProxy(CIMultiDict()))
    body: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.headers, CIMultiDictProxy):
            object.__setattr__(self, "headers", CIMultiDictProxy(CIMultiDict(self.headers or {})))

    @property
    def ok(self) -> bool:
        return 200 <= self.status <= 299

    def text(self, encoding: str = "utf-8") -> str:
        return self.body.decode(encoding, errors="replace")


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(
        self,
        *,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout) if timeout else None
        self.headers: dict[str, str] = dict(headers or {})
        self._session: aiohttp.ClientSession | None = session
        # Sessions handed in by the caller are theirs to close
        self._owns_session = session is None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            kwargs: dict[str, Any] = {}
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            self._session = aiohttp.ClientSession(**kwargs)
            self._owns_session = True
        return self._session

    async def send(self, request: HttpRequest) -> HttpResponse:
        """Send one request and read the whole response.

        Raises:
            TransportError: Connection, protocol or timeout failure before a response
        """
        # Default headers go on every request so caller-supplied sessions get them too
        kwargs: dict[str, Any] = {"headers": {**self.headers, **request.headers}}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        try:
            async with self.session.request(
                request.method, URL(request.url, encoded=True), **kwargs
            ) as response:
                body = await response.read()
                return HttpResponse(
                    status=response.status,
                    reason=response.reason,
                    headers=CIMultiDictProxy(CIMultiDict(response.headers)),
                    body=body,
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(
                f"{type(exc).__name__} during {request.method} request: {exc}",
                method=request.method,
            ) from exc

    async def close(self) -> None:
        """Close session."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()

"""Query-string handling for outbound URLs.

Query parameters are keyed case-insensitively: the first spelling and
position of a key are kept, while its value follows last-write-wins.
A ``None`` value renders as a bare key with no ``=``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from urllib.parse import quote, unquote, urlsplit, urlunsplit

API_KEY_PARAM = "api_key"
FORMAT_PARAM = "format"


class QueryParams:
    """Ordered, case-insensitive mapping of query parameters."""

    def __init__(self, items: Iterable[tuple[str, str | None]] | None = None) -> None:
        self._items: dict[str, tuple[str, str | None]] = {}
        for key, value in items or ():
            self[key] = value

    @classmethod
    def parse(cls, query: str) -> QueryParams:
        """Parse a raw query string (with or without leading '?')."""
        params = cls()
        if query.startswith("?"):
            query = query[1:]
        for segment in query.split("&"):
            if not segment:
                continue
            key, sep, value = segment.partition("=")
            params[unquote(key)] = unquote(value) if sep else None
        return params

    def __setitem__(self, key: str, value: str | None) -> None:
        folded = key.casefold()
        existing = self._items.get(folded)
        self._items[folded] = (existing[0] if existing else key, value)

    def force(self, key: str, value: str | None) -> None:
        """Set ``key`` using this exact spelling, replacing any case variant."""
        self._items[key.casefold()] = (key, value)

    def __getitem__(self, key: str) -> str | None:
        return self._items[key.casefold()][1]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.casefold() in self._items

    def __len__(self) -> int:
        return len(self._items)

    def get(self, key: str, default: str | None = None) -> str | None:
        entry = self._items.get(key.casefold())
        return entry[1] if entry else default

    def update(self, other: Mapping[str, object] | None) -> None:
        for key, value in (other or {}).items():
            if key is None:
                continue
            self[key] = None if value is None else str(value)

    def items(self) -> list[tuple[str, str | None]]:
        return list(self._items.values())

    def encode(self, safe: str = "") -> str:
        """Render as a percent-encoded query string (no leading '?')."""
        parts: list[str] = []
        for key, value in self._items.values():
            if not key or not key.strip():
                continue
            encoded = quote(key, safe=safe)
            if value is not None:
                encoded += "=" + quote(value, safe=safe)
            parts.append(encoded)
        return "&".join(parts)


def with_query(url: str, params: QueryParams, safe: str = "") -> str:
    """Replace the query component of ``url`` with ``params``."""
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, params.encode(safe), parts.fragment))


def inject_auth_and_format(
    params: QueryParams, *, api_key: str, force_json_format: bool
) -> QueryParams:
    """Overwrite api_key (and format when forced) so callers cannot bypass them."""
    params.force(API_KEY_PARAM, api_key)
    if force_json_format:
        params.force(FORMAT_PARAM, "json")
    return params


def redact_api_key(url: str) -> str:
    """Mask the api_key value in a URL for error messages and logs."""
    parts = urlsplit(url)
    if not parts.query:
        return url
    params = QueryParams.parse(parts.query)
    if API_KEY_PARAM not in params:
        return url
    params[API_KEY_PARAM] = "***"
    return with_query(url, params, safe="*")

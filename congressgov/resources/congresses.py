"""Congress and session endpoints (/congress)."""

from __future__ import annotations

from collections.abc import AsyncIterator

from .. import routing
from ..core.cancellation import CancellationToken
from ..models import CongressDetailPage, CongressEntry, CongressesListPage
from .base import ResourceClient


class CongressesResource(ResourceClient):
    def list(
        self, *, limit: int | None = None, token: CancellationToken | None = None
    ) -> AsyncIterator[CongressEntry]:
        return self._paginate(
            routing.congress_list(),
            CongressesListPage,
            lambda page: page.congresses,
            limit=limit,
            token=token,
        )

    async def get(
        self, congress: int, *, token: CancellationToken | None = None
    ) -> CongressEntry:
        page = await self._get(routing.congress_by_number(congress), CongressDetailPage, token)
        return page.congress

    async def current(self, *, token: CancellationToken | None = None) -> CongressEntry:
        """The Congress currently in session."""
        page = await self._get(routing.congress_current(), CongressDetailPage, token)
        return page.congress

"""Shared plumbing for resource sub-clients."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable, Mapping, Sequence
from typing import TypeVar

from ..core.cancellation import CancellationToken
from ..core.options import ClientOptions
from ..models.base import CongressModel
from ..runtime.pagination import paginate_items
from ..runtime.rest import RequestExecutor

PageT = TypeVar("PageT", bound=CongressModel)
ItemT = TypeVar("ItemT")


class ResourceClient:
    """Base class binding a sub-client to the shared executor and options."""

    def __init__(self, executor: RequestExecutor, options: ClientOptions) -> None:
        self._executor = executor
        self._options = options

    def _paginate(
        self,
        path: str,
        page_model: type[PageT],
        project: Callable[[PageT], Sequence[ItemT]],
        *,
        query: Mapping[str, str] | None = None,
        limit: int | None = None,
        token: CancellationToken | None = None,
    ) -> AsyncIterator[ItemT]:
        """Lazily iterate items of a list endpoint, ``limit`` items per request."""
        extra = dict(query or {})

        async def fetch_page(offset: int, page_limit: int, page_token: CancellationToken) -> PageT:
            params = {"offset": str(offset), "limit": str(page_limit), **extra}
            return await self._executor.get_json(
                path, params, model=page_model, token=page_token
            )

        page_size = self._options.default_limit if limit is None else limit
        return paginate_items(fetch_page, project, limit=page_size, start_offset=0, token=token)

    async def _get(
        self, path: str, page_model: type[PageT], token: CancellationToken | None = None
    ) -> PageT:
        return await self._executor.get_json(path, model=page_model, token=token)

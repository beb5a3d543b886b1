"""Unit tests for offset-based auto-pagination."""

from __future__ import annotations

import pytest

from congressgov.core import CancellationToken, InvalidArgumentError, RequestCancelledError
from congressgov.runtime.pagination import paginate_items, paginate_pages


class _Pages:
    """Fetch double serving pages of the given sizes and recording offsets."""

    def __init__(self, sizes, *, repeat_last=False):
        self.sizes = list(sizes)
        self.repeat_last = repeat_last
        self.calls: list[tuple[int, int]] = []
        self.tokens: list[CancellationToken] = []

    async def __call__(self, offset, limit, token):
        index = len(self.calls)
        self.calls.append((offset, limit))
        self.tokens.append(token)
        if index < len(self.sizes):
            size = self.sizes[index]
        elif self.repeat_last:
            size = self.sizes[-1]
        else:
            raise AssertionError(f"unexpected fetch at offset {offset}")
        return list(range(offset, offset + size))


async def _collect(iterator):
    return [item async for item in iterator]


class TestPaginateItems:
    """Test paginate_items."""

    @pytest.mark.asyncio
    async def test_walks_until_short_page(self):
        """Test pages of 250, 250, 130 yield 630 items from three fetches."""
        fetch = _Pages([250, 250, 130])

        items = await _collect(paginate_items(fetch, lambda page: page, limit=250))

        assert len(items) == 630
        assert items == list(range(630))
        assert fetch.calls == [(0, 250), (250, 250), (500, 250)]

    @pytest.mark.asyncio
    async def test_exact_multiple_costs_trailing_empty_fetch(self):
        """Test a total divisible by limit ends on an empty page."""
        fetch = _Pages([2, 2, 0])

        items = await _collect(paginate_items(fetch, lambda page: page, limit=2))

        assert items == [0, 1, 2, 3]
        assert [offset for offset, _ in fetch.calls] == [0, 2, 4]

    @pytest.mark.asyncio
    async def test_empty_first_page(self):
        """Test an empty first page ends the run after one fetch."""
        fetch = _Pages([0])

        assert await _collect(paginate_items(fetch, lambda page: page, limit=10)) == []
        assert len(fetch.calls) == 1

    @pytest.mark.asyncio
    async def test_none_items_treated_as_empty(self):
        """Test a projection returning None terminates cleanly."""
        fetch = _Pages([5])

        assert await _collect(paginate_items(fetch, lambda page: None, limit=5)) == []

    @pytest.mark.asyncio
    async def test_start_offset(self):
        """Test start_offset is used as-is and negatives clamp to zero."""
        fetch = _Pages([1])
        await _collect(paginate_items(fetch, lambda page: page, limit=5, start_offset=40))
        assert fetch.calls == [(40, 5)]

        fetch = _Pages([1])
        await _collect(paginate_items(fetch, lambda page: page, limit=5, start_offset=-3))
        assert fetch.calls == [(0, 5)]

    @pytest.mark.asyncio
    async def test_lazy_no_prefetch(self):
        """Test breaking out early never requests the next page."""
        fetch = _Pages([3], repeat_last=True)

        async for item in paginate_items(fetch, lambda page: page, limit=3):
            if item == 2:
                break

        assert len(fetch.calls) == 1

    @pytest.mark.asyncio
    async def test_token_forwarded_to_fetch(self):
        """Test the caller's token reaches every fetch."""
        fetch = _Pages([2, 1])
        token = CancellationToken()

        await _collect(paginate_items(fetch, lambda page: page, limit=2, token=token))

        assert fetch.tokens == [token, token]

    @pytest.mark.parametrize("limit", [0, -1, True, 2.5, None])
    def test_invalid_limit_raises_before_fetch(self, limit):
        """Test bad limits raise at call time without fetching."""
        fetch = _Pages([1])

        with pytest.raises(InvalidArgumentError):
            paginate_items(fetch, lambda page: page, limit=limit)

        assert fetch.calls == []

    def test_missing_callables_rejected(self):
        """Test fetch and projection must be callable."""
        with pytest.raises(InvalidArgumentError):
            paginate_items(None, lambda page: page, limit=1)
        with pytest.raises(InvalidArgumentError):
            paginate_items(_Pages([1]), None, limit=1)

    @pytest.mark.asyncio
    async def test_pre_cancelled_token(self):
        """Test a fired token yields nothing and fetches nothing."""
        fetch = _Pages([1])
        token = CancellationToken()
        token.cancel()
        items = []

        with pytest.raises(RequestCancelledError):
            async for item in paginate_items(fetch, lambda page: page, limit=1, token=token):
                items.append(item)

        assert items == []
        assert fetch.calls == []

    @pytest.mark.asyncio
    async def test_cancel_stops_endless_run(self):
        """Test never-short pages stop once the consumer cancels."""
        fetch = _Pages([10], repeat_last=True)
        token = CancellationToken()
        items = []

        with pytest.raises(RequestCancelledError):
            async for item in paginate_items(fetch, lambda page: page, limit=10, token=token):
                items.append(item)
                if len(items) == 30:
                    token.cancel()

        assert len(items) == 30
        assert len(fetch.calls) == 3

    @pytest.mark.asyncio
    async def test_fetch_error_propagates(self):
        """Test fetch failures surface after already-yielded items."""
        calls = 0

        async def fetch(offset, limit, token):
            nonlocal calls
            calls += 1
            if calls == 2:
                raise RuntimeError("boom")
            return [offset] * limit

        items = []
        with pytest.raises(RuntimeError):
            async for item in paginate_items(fetch, lambda page: page, limit=2):
                items.append(item)

        assert items == [0, 0]


class TestPaginatePages:
    """Test paginate_pages."""

    @pytest.mark.asyncio
    async def test_yields_terminal_page(self):
        """Test the short page that ends the run is still yielded."""
        fetch = _Pages([2, 1])

        pages = await _collect(paginate_pages(fetch, len, limit=2))

        assert pages == [[0, 1], [2]]
        assert fetch.calls == [(0, 2), (2, 2)]

    @pytest.mark.asyncio
    async def test_negative_count_terminates(self):
        """Test a non-positive count ends the run."""
        fetch = _Pages([5, 5], repeat_last=True)

        pages = await _collect(paginate_pages(fetch, lambda page: -1, limit=5))

        assert len(pages) == 1

    def test_invalid_limit(self):
        """Test paginate_pages validates eagerly too."""
        with pytest.raises(InvalidArgumentError):
            paginate_pages(_Pages([1]), len, limit=0)

"""Cooperative cancellation signal.

A ``CancellationToken`` is passed explicitly through every suspend-capable
call (HTTP send, backoff sleep, page fetch) and checked at loop boundaries.
Firing it makes the current operation raise ``RequestCancelledError``.

Example:
    >>> token = CancellationToken()
    >>> token.cancel_after(30.0)  # overall deadline for a pagination run
    >>> async for bill in client.bills.list(token=token):
    ...     ...
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from .exceptions import RequestCancelledError

T = TypeVar("T")


class CancellationToken:
    """Explicit cancellation signal shared between a caller and the library."""

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._reason: str | None = None
        self._timer: asyncio.TimerHandle | None = None

    @property
    def cancelled(self) -> bool:
        """Whether cancellation has been requested."""
        return self._event.is_set()

    @property
    def reason(self) -> str | None:
        return self._reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation. Idempotent; the first reason wins."""
        if self._event.is_set():
            return
        self._reason = reason
        self._event.set()
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def cancel_after(self, delay: float) -> None:
        """Cancel automatically after ``delay`` seconds (must run inside a loop)."""
        if self._timer is not None:
            self._timer.cancel()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(delay, self.cancel, f"deadline of {delay}s exceeded")

    def raise_if_cancelled(self) -> None:
        """Raise RequestCancelledError if cancellation has been requested."""
        if self._event.is_set():
            raise RequestCancelledError(reason=self._reason)

    async def wait(self) -> None:
        """Block until cancellation is requested."""
        await self._event.wait()

    async def sleep(self, delay: float) -> None:
        """Sleep for ``delay`` seconds unless cancelled first.

        Raises:
            RequestCancelledError: If the token fires before or during the sleep
        """
        self.raise_if_cancelled()
        if delay <= 0:
            return
        try:
            await asyncio.wait_for(self._event.wait(), timeout=delay)
        except asyncio.TimeoutError:
            return
        self.raise_if_cancelled()

    async def run(self, awaitable: Awaitable[T]) -> T:
        """Await ``awaitable``, abandoning it as soon as the token fires.

        Raises:
            RequestCancelledError: If the token fires first; the awaitable is cancelled
        """
        if self._event.is_set():
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise RequestCancelledError(reason=self._reason)
        task = asyncio.ensure_future(awaitable)
        waiter = asyncio.ensure_future(self._event.wait())
        try:
            await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            task.cancel()
            raise
        finally:
            waiter.cancel()

        if task.done():
            return task.result()

        task.cancel()
        await asyncio.gather(task, return_exceptions=True)
        raise RequestCancelledError(reason=self._reason)

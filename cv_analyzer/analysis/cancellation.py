"""Cooperative cancellation for an in-flight analysis."""

import asyncio
import contextlib
from collections.abc import Awaitable
from typing import TypeVar

from cv_analyzer.errors import AnalysisCancelled

T = TypeVar("T")


class CancellationToken:
    """
    Set once by the caller; aborts the pending HTTP call or backoff sleep.

    A token belongs to one analysis. Triggering it is idempotent.
    """

    def __init__(self):
        self._event = asyncio.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self.cancelled:
            raise AnalysisCancelled()

    async def run(self, awaitable: Awaitable[T]) -> T:
        """Await `awaitable` unless the token fires first."""
        if self.cancelled:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise AnalysisCancelled()

        task = asyncio.ensure_future(awaitable)
        waiter = asyncio.ensure_future(self._event.wait())
        try:
            done, _ = await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            waiter.cancel()
            if not task.done():
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task

        if task in done:
            return task.result()
        raise AnalysisCancelled()


async def guarded(awaitable: Awaitable[T], token: CancellationToken | None) -> T:
    if token is None:
        return await awaitable
    return await token.run(awaitable)

"""Cancelable handles for simulated-latency lookups."""

import asyncio
from collections.abc import Coroutine
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class PendingLookup(Generic[T]):
    """Handle for a single-shot lookup running on the event loop."""

    task: "asyncio.Task[T]"

    @classmethod
    def start(cls, coro: Coroutine[Any, Any, T]) -> "PendingLookup[T]":
        """Schedule a coroutine on the running loop."""
        return cls(task=asyncio.get_running_loop().create_task(coro))

    @property
    def done(self) -> bool:
        """Return True once the lookup finished or was cancelled."""
        return self.task.done()

    @property
    def cancelled(self) -> bool:
        """Return True when the lookup was cancelled."""
        return self.task.cancelled()

    def cancel(self) -> bool:
        """Abort the lookup if it is still pending."""
        return self.task.cancel()

    async def result(self) -> T | None:
        """Wait for the lookup; None when it was cancelled."""
        await asyncio.wait({self.task})
        if self.task.cancelled():
            return None
        return self.task.result()


@dataclass
class LookupTracker:
    """Keeps outstanding lookups so their owner can cancel them on teardown."""

    pending: list[PendingLookup[Any]] = field(default_factory=list)

    def track(self, lookup: PendingLookup[T]) -> PendingLookup[T]:
        """Remember a lookup until it completes."""
        self.pending = [item for item in self.pending if not item.done]
        self.pending.append(lookup)
        return lookup

    async def cancel_all(self) -> None:
        """Cancel every outstanding lookup and wait for them to settle."""
        outstanding = [item for item in self.pending if not item.done]
        for item in outstanding:
            item.cancel()
        if outstanding:
            await asyncio.wait({item.task for item in outstanding})
        self.pending = []

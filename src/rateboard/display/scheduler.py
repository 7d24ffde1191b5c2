"""One-shot timer primitives used by the display engine.

``AsyncioScheduler`` wraps the running event loop. ``ManualScheduler`` keeps a
simulated clock so rotation can be driven headlessly in tests.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def now(self) -> float: ...

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class AsyncioScheduler:
    """Schedule callbacks on an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop or asyncio.get_running_loop()

    def now(self) -> float:
        return self._loop.time()

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        return self._loop.call_later(max(0.0, delay), callback)


@dataclass(slots=True)
class ManualTimer:
    due: float
    callback: Callable[[], None]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass(slots=True)
class ManualScheduler:
    """Deterministic scheduler whose time only moves through :meth:`advance`."""

    current: float = 0.0
    _queue: list[tuple[float, int, ManualTimer]] = field(default_factory=list, init=False, repr=False)
    _sequence: itertools.count = field(default_factory=itertools.count, init=False, repr=False)

    def now(self) -> float:
        return self.current

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(due=self.current + max(0.0, delay), callback=callback)
        heapq.heappush(self._queue, (timer.due, next(self._sequence), timer))
        return timer

    def advance(self, seconds: float) -> int:
        """Move time forward, firing due callbacks in order; return how many fired."""
        target = self.current + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.current = due
            timer.callback()
            fired += 1
        self.current = target
        return fired

    def pending(self) -> int:
        return sum(1 for _, _, timer in self._queue if not timer.cancelled)

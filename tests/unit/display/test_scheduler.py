import asyncio

import pytest

from src.rateboard.display.scheduler import AsyncioScheduler, ManualScheduler


def test_manual_scheduler_fires_in_due_order() -> None:
    scheduler = ManualScheduler()
    fired: list[str] = []
    scheduler.call_later(2, lambda: fired.append("late"))
    scheduler.call_later(1, lambda: fired.append("early"))
    scheduler.call_later(1, lambda: fired.append("early-second"))

    count = scheduler.advance(5)

    assert count == 3
    assert fired == ["early", "early-second", "late"]
    assert scheduler.now() == 5


def test_manual_scheduler_skips_cancelled_timers() -> None:
    scheduler = ManualScheduler()
    fired: list[int] = []
    handle = scheduler.call_later(1, lambda: fired.append(1))
    handle.cancel()

    assert scheduler.advance(10) == 0
    assert fired == []
    assert scheduler.pending() == 0


def test_manual_scheduler_runs_timers_scheduled_during_advance() -> None:
    scheduler = ManualScheduler()
    seen: list[float] = []

    def tick() -> None:
        seen.append(scheduler.now())
        scheduler.call_later(1, tick)

    scheduler.call_later(1, tick)
    scheduler.advance(3)

    assert seen == [1, 2, 3]
    assert scheduler.pending() == 1


def test_manual_scheduler_keeps_future_timers_pending() -> None:
    scheduler = ManualScheduler()
    scheduler.call_later(10, lambda: None)

    assert scheduler.advance(9.5) == 0
    assert scheduler.pending() == 1


@pytest.mark.asyncio
async def test_asyncio_scheduler_uses_running_loop() -> None:
    scheduler = AsyncioScheduler()
    fired = asyncio.Event()
    stray: list[str] = []

    scheduler.call_later(0.01, fired.set)
    cancelled = scheduler.call_later(0.01, lambda: stray.append("fired"))
    cancelled.cancel()

    await asyncio.wait_for(fired.wait(), timeout=1.0)
    await asyncio.sleep(0.02)
    assert stray == []
    assert scheduler.now() > 0

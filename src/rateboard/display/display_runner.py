"""Headless display process: poll the backend, rotate and log frame changes."""

from __future__ import annotations

import asyncio
import contextlib

import httpx
import structlog

from .display_client import DisplayDataClient
from .display_config import DisplayConfig
from .display_models import DisplayFrame
from .display_poller import DisplayPoller, run_display_polling
from .rotation import RotationEngine
from .scheduler import AsyncioScheduler

logger = structlog.get_logger(__name__)

FRAME_LOG_INTERVAL_SECONDS = 1.0


def describe_frame(frame: DisplayFrame) -> dict[str, object]:
    """Summarise the parts of a frame that change what is on screen."""
    return {
        "status": frame.status.value,
        "media_index": frame.media_index,
        "media": frame.media.name if frame.media else None,
        "promo_index": frame.promo_index,
        "promo": frame.promo.name if frame.promo else None,
        "effect": frame.promo_transition.effect if frame.promo_transition else None,
        "gold_24k_sale": frame.rates.gold_24k_sale if frame.rates else None,
        "screen": frame.layout.screen.value,
        "error": frame.error_message,
    }


async def _watch_frames(engine: RotationEngine, shutdown_event: asyncio.Event) -> None:
    previous: dict[str, object] | None = None
    while not shutdown_event.is_set():
        if engine.disposed:
            return
        current = describe_frame(engine.frame())
        if current != previous:
            logger.info("display.frame_changed", **current)
            previous = current
        try:
            await asyncio.wait_for(shutdown_event.wait(), timeout=FRAME_LOG_INTERVAL_SECONDS)
        except asyncio.TimeoutError:
            continue


async def run_display(config: DisplayConfig, shutdown_event: asyncio.Event) -> None:
    """Run one display instance until ``shutdown_event`` is set."""
    engine = RotationEngine(
        AsyncioScheduler(),
        timezone=config.timezone,
        viewport_width=config.viewport_width,
    )
    async with httpx.AsyncClient(
        base_url=config.api_base_url,
        timeout=config.request_timeout_seconds,
    ) as http:
        poller = DisplayPoller(client=DisplayDataClient(http), engine=engine)
        engine.start()
        logger.info("display.started", api_base_url=config.api_base_url, timezone=config.timezone)
        watcher = asyncio.create_task(_watch_frames(engine, shutdown_event))
        try:
            await run_display_polling(
                poller=poller,
                shutdown_event=shutdown_event,
                fallback_interval_seconds=config.fallback_poll_interval_seconds,
            )
        finally:
            shutdown_event.set()
            watcher.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await watcher
            engine.dispose()
            logger.info("display.stopped")

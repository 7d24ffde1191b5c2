"""Consolidated polling cycle feeding the rotation engine."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from .display_client import DisplayDataClient
from .display_models import FetchResult, Resource
from .rotation import RotationEngine

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_SECONDS = 30.0


@dataclass(slots=True)
class DisplayPoller:
    client: DisplayDataClient
    engine: RotationEngine

    async def poll_once(self) -> dict[Resource, FetchResult]:
        """Fetch all five resources concurrently and apply each result on its own."""
        rates, settings, media, promos, banner = await asyncio.gather(
            self.client.get_current_rates(),
            self.client.get_display_settings(),
            self.client.get_active_media(),
            self.client.get_active_promos(),
            self.client.get_banner(),
        )
        results: dict[Resource, FetchResult] = {
            Resource.RATES: rates,
            Resource.SETTINGS: settings,
            Resource.MEDIA: media,
            Resource.PROMOS: promos,
            Resource.BANNER: banner,
        }
        if self.engine.disposed:
            return results

        # settings first so the rotation timers pick up the new durations
        if settings.ok:
            self.engine.apply_settings(settings.value)
        if rates.ok:
            self.engine.apply_rates(rates.value)
        if media.ok:
            self.engine.apply_media(media.value or [])
        if promos.ok:
            self.engine.apply_promos(promos.value or [])
        if banner.ok:
            self.engine.apply_banner(banner.value)

        for resource, result in results.items():
            if result.error is not None:
                self.engine.report_fetch_failure(resource, result.error)
        return results

    def interval_seconds(self, fallback: float = DEFAULT_POLL_INTERVAL_SECONDS) -> float:
        configured = self.engine.settings.refresh_interval if self.engine.has_settings else None
        return max(1.0, float(configured or fallback))


async def run_display_polling(
    *,
    poller: DisplayPoller,
    shutdown_event: asyncio.Event,
    fallback_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS,
) -> None:
    """Poll until ``shutdown_event`` is signalled, then dispose the engine."""

    try:
        while not shutdown_event.is_set():
            try:
                await poller.poll_once()
            except Exception:  # pragma: no cover
                logger.exception("display.poll_failed")
            interval = poller.interval_seconds(fallback_interval_seconds)
            try:
                await asyncio.wait_for(shutdown_event.wait(), timeout=interval)
            except asyncio.TimeoutError:
                continue
    finally:
        poller.engine.dispose()

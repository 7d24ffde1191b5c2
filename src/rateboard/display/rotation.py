"""Display rotation state machine.

The engine owns three one-shot timers: the 1 s clock tick, the rates/media
rotation and the promo slideshow. Rotation timers are keyed by the inputs that
determine their delay; a timer is recreated only when its key changes, so
re-applying identical poll results leaves it running.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime
from typing import Callable, Hashable
from zoneinfo import ZoneInfo

from ..banner.banner_models import BannerSettings
from ..media.media_models import MediaItem
from ..promo.promo_models import PromoImage
from ..rates.rates_models import RateSnapshot
from ..settings.settings_models import DEFAULT_DISPLAY_SETTINGS, DisplaySettings
from .display_errors import TransientFetchFailure
from .display_models import BannerView, DisplayFrame, DisplayStatus, Resource
from .layout import banner_height, derive_layout, transition_for
from .scheduler import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "Asia/Kolkata"
DEFAULT_VIEWPORT_WIDTH = 1280
CLOCK_TICK_SECONDS = 1.0
DEFAULT_RATES_SECONDS = DEFAULT_DISPLAY_SETTINGS.rates_display_duration_seconds
DEFAULT_MEDIA_SECONDS = 30
DEFAULT_PROMO_SECONDS = 5
DATE_FORMAT = "%A %d-%b-%Y"
TIME_FORMAT = "%H:%M:%S"


def _system_now(tz: ZoneInfo) -> datetime:
    return datetime.now(tz)


class RotationEngine:
    """Decide what the display shows from polled snapshots and elapsed time."""

    def __init__(
        self,
        scheduler: Scheduler,
        *,
        timezone: str = DEFAULT_TIMEZONE,
        viewport_width: int = DEFAULT_VIEWPORT_WIDTH,
        now: Callable[[ZoneInfo], datetime] | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._tz = ZoneInfo(timezone)
        self._now = now or _system_now
        self._viewport_width = viewport_width

        self.showing_rates = True
        self.media_index = 0
        self.promo_index = 0
        self.clock = self._now(self._tz)

        self._rates: RateSnapshot | None = None
        self._settings: DisplaySettings | None = None
        self._media: tuple[MediaItem, ...] = ()
        self._promos: tuple[PromoImage, ...] = ()
        self._banner: BannerSettings | None = None
        self._rates_polls = 0
        self._rates_error: str | None = None

        self._started = False
        self._disposed = False
        self._clock_timer: TimerHandle | None = None
        self._rotation_timer: TimerHandle | None = None
        self._rotation_key: Hashable | None = None
        self._promo_timer: TimerHandle | None = None
        self._promo_key: Hashable | None = None

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def settings(self) -> DisplaySettings:
        return self._settings or DEFAULT_DISPLAY_SETTINGS

    @property
    def has_settings(self) -> bool:
        return self._settings is not None

    def start(self) -> None:
        if self._disposed or self._started:
            return
        self._started = True
        self.clock = self._now(self._tz)
        self._clock_timer = self._scheduler.call_later(CLOCK_TICK_SECONDS, self._on_clock_tick)
        self._reconcile()

    def dispose(self) -> None:
        """Cancel every timer; later callbacks and applies become no-ops."""
        if self._disposed:
            return
        self._disposed = True
        for timer in (self._clock_timer, self._rotation_timer, self._promo_timer):
            if timer is not None:
                timer.cancel()
        self._clock_timer = self._rotation_timer = self._promo_timer = None
        self._rotation_key = self._promo_key = None
        logger.debug("display.engine_disposed")

    def apply_rates(self, snapshot: RateSnapshot | None) -> None:
        if self._disposed:
            return
        self._rates_polls += 1
        if snapshot is None:
            self._rates_error = None
            self._reconcile()
            return
        first = self._rates is None
        self._rates = snapshot
        self._rates_error = None
        if first:
            self.showing_rates = True
            self.media_index = 0
            self.promo_index = 0
            logger.info("display.rates_available", extra={"rate_id": snapshot.id})
        self._reconcile()

    def apply_settings(self, settings: DisplaySettings | None) -> None:
        if self._disposed:
            return
        if settings is not None:
            self._settings = settings
        self._reconcile()

    def apply_media(self, items: Iterable[MediaItem]) -> None:
        if self._disposed:
            return
        was_empty = not self._media
        self._media = tuple(item for item in items if item.is_active)
        if was_empty or self.media_index >= len(self._media):
            self.media_index = 0
        self._reconcile()

    def apply_promos(self, items: Iterable[PromoImage]) -> None:
        if self._disposed:
            return
        was_empty = not self._promos
        self._promos = tuple(item for item in items if item.is_active)
        if was_empty or self.promo_index >= len(self._promos):
            self.promo_index = 0
        self._reconcile()

    def apply_banner(self, banner: BannerSettings | None) -> None:
        if self._disposed:
            return
        self._banner = banner if banner is None or banner.is_active else None

    def report_fetch_failure(self, resource: Resource | str, error: TransientFetchFailure) -> None:
        """Record a failed poll; only a failed first rates poll changes what is shown."""
        if self._disposed:
            return
        resource = Resource(resource)
        logger.warning(
            "display.fetch_failed",
            extra={
                "resource": resource.value,
                "status_code": error.status_code,
                "error": error.message,
            },
        )
        if resource is Resource.RATES:
            if self._rates is None and self._rates_polls == 0:
                self._rates_error = error.message
            self._rates_polls += 1

    def set_viewport(self, width: int) -> None:
        if self._disposed:
            return
        self._viewport_width = max(0, int(width))

    def frame(self) -> DisplayFrame:
        settings = self.settings
        layout = derive_layout(self._viewport_width, settings)
        promo = self._promos[self.promo_index] if self.promo_index < len(self._promos) else None
        media = None
        if not self.showing_rates and self.media_index < len(self._media):
            media = self._media[self.media_index]

        if self._rates is None:
            status = DisplayStatus.ERROR if self._rates_error else DisplayStatus.AWAITING_DATA
        elif media is not None:
            status = DisplayStatus.MEDIA
        else:
            status = DisplayStatus.RATES

        banner = None
        if self._banner is not None and self._banner.banner_image_url:
            banner = BannerView(
                image_url=self._banner.banner_image_url,
                height_px=banner_height(layout.screen, self._banner.banner_height),
            )

        return DisplayFrame(
            status=status,
            showing_rates=self.showing_rates,
            media_index=self.media_index,
            promo_index=self.promo_index,
            date_label=self.clock.strftime(DATE_FORMAT),
            time_label=self.clock.strftime(TIME_FORMAT),
            layout=layout,
            background_color=settings.background_color,
            text_color=settings.text_color,
            rates=self._rates,
            media=media,
            promo=promo,
            promo_transition=transition_for(promo.transition_effect) if promo else None,
            promo_indicators=(
                tuple(index == self.promo_index for index in range(len(self._promos)))
                if len(self._promos) > 1
                else ()
            ),
            banner=banner,
            error_message=self._rates_error if self._rates is None else None,
            clock=self.clock,
        )

    def _media_rotation_enabled(self) -> bool:
        return self.settings.show_media and bool(self._media)

    def _reconcile(self) -> None:
        if self.media_index >= len(self._media):
            self.media_index = 0
        if self.promo_index >= len(self._promos):
            self.promo_index = 0
        if not self._media_rotation_enabled():
            self.showing_rates = True
        self._sync_rotation_timer()
        self._sync_promo_timer()

    def _rotation_plan(self) -> tuple[Hashable, float] | None:
        if not self._started or self._rates is None or not self._media_rotation_enabled():
            return None
        if self.showing_rates:
            seconds = self.settings.rates_display_duration_seconds or DEFAULT_RATES_SECONDS
            return ("rates", seconds), seconds
        item = self._media[self.media_index]
        seconds = item.duration_seconds or DEFAULT_MEDIA_SECONDS
        return ("media", self.media_index, item.id, seconds), seconds

    def _promo_plan(self) -> tuple[Hashable, float] | None:
        if not self._started or self._rates is None or len(self._promos) <= 1:
            return None
        item = self._promos[self.promo_index]
        seconds = item.duration_seconds or DEFAULT_PROMO_SECONDS
        return (self.promo_index, item.id, seconds), seconds

    def _sync_rotation_timer(self) -> None:
        plan = self._rotation_plan()
        key = plan[0] if plan else None
        if key is not None and key == self._rotation_key and self._rotation_timer is not None:
            return
        if self._rotation_timer is not None:
            self._rotation_timer.cancel()
            self._rotation_timer = None
        self._rotation_key = key
        if plan is not None:
            self._rotation_timer = self._scheduler.call_later(plan[1], self._on_rotation_timer)

    def _sync_promo_timer(self) -> None:
        plan = self._promo_plan()
        key = plan[0] if plan else None
        if key is not None and key == self._promo_key and self._promo_timer is not None:
            return
        if self._promo_timer is not None:
            self._promo_timer.cancel()
            self._promo_timer = None
        self._promo_key = key
        if plan is not None:
            self._promo_timer = self._scheduler.call_later(plan[1], self._on_promo_timer)

    def _on_clock_tick(self) -> None:
        if self._disposed:
            return
        self.clock = self._now(self._tz)
        self._clock_timer = self._scheduler.call_later(CLOCK_TICK_SECONDS, self._on_clock_tick)

    def _on_rotation_timer(self) -> None:
        if self._disposed:
            return
        self._rotation_timer = None
        self._rotation_key = None
        if not self._media_rotation_enabled():
            self.showing_rates = True
        elif self.showing_rates:
            self.showing_rates = False
        else:
            self.media_index = (self.media_index + 1) % len(self._media)
            self.showing_rates = True
        logger.debug(
            "display.rotated",
            extra={"showing_rates": self.showing_rates, "media_index": self.media_index},
        )
        self._sync_rotation_timer()

    def _on_promo_timer(self) -> None:
        if self._disposed:
            return
        self._promo_timer = None
        self._promo_key = None
        if len(self._promos) > 1:
            self.promo_index = (self.promo_index + 1) % len(self._promos)
            logger.debug(
                "display.promo_advanced",
                extra={
                    "promo_index": self.promo_index,
                    "effect": self._promos[self.promo_index].transition_effect,
                },
            )
        self._sync_promo_timer()

"""Value objects exchanged between the poller, the engine and renderers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Generic, TypeVar

from ..media.media_models import MediaItem
from ..promo.promo_models import PromoImage
from ..rates.rates_models import RateSnapshot
from .display_errors import TransientFetchFailure
from .layout import DisplayLayout, TransitionSpec

T = TypeVar("T")


class DisplayStatus(str, Enum):
    AWAITING_DATA = "awaiting_data"
    ERROR = "error"
    RATES = "rates"
    MEDIA = "media"


class Resource(str, Enum):
    RATES = "rates"
    SETTINGS = "settings"
    MEDIA = "media"
    PROMOS = "promos"
    BANNER = "banner"


@dataclass(slots=True, frozen=True)
class FetchResult(Generic[T]):
    """Either a fetched value or the failure that prevented it."""

    value: T | None = None
    error: TransientFetchFailure | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "FetchResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: TransientFetchFailure) -> "FetchResult[T]":
        return cls(error=error)


@dataclass(slots=True, frozen=True)
class BannerView:
    image_url: str
    height_px: int


@dataclass(slots=True, frozen=True)
class DisplayFrame:
    """Everything a renderer needs for one paint."""

    status: DisplayStatus
    showing_rates: bool
    media_index: int
    promo_index: int
    date_label: str
    time_label: str
    layout: DisplayLayout
    background_color: str
    text_color: str
    rates: RateSnapshot | None = None
    media: MediaItem | None = None
    promo: PromoImage | None = None
    promo_transition: TransitionSpec | None = None
    promo_indicators: tuple[bool, ...] = ()
    banner: BannerView | None = None
    error_message: str | None = None
    clock: datetime | None = None

"""Database models and bootstrap helpers."""

from .db_models import (
    BannerSettingsModel,
    Base,
    DisplaySettingsModel,
    GoldRateModel,
    MediaItemModel,
    PromoImageModel,
)

__all__ = [
    "Base",
    "BannerSettingsModel",
    "DisplaySettingsModel",
    "GoldRateModel",
    "MediaItemModel",
    "PromoImageModel",
]

"""Top banner model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

DEFAULT_BANNER_HEIGHT = 120


@dataclass(slots=True, frozen=True)
class BannerSettings:
    id: int
    banner_image_url: str | None = None
    banner_height: int = DEFAULT_BANNER_HEIGHT
    is_active: bool = True
    mime_type: str | None = None
    created_date: datetime | None = None

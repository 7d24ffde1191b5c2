"""Display settings domain dataclass and the defaults table."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from datetime import datetime
from typing import Any, Literal

Orientation = Literal["horizontal", "vertical"]


@dataclass(slots=True, frozen=True)
class DisplaySettings:
    orientation: Orientation = "horizontal"
    background_color: str = "#FFF8E1"
    text_color: str = "#212529"
    rate_number_font_size: str = "text-4xl"
    show_media: bool = True
    rates_display_duration_seconds: int = 15
    refresh_interval: int = 30
    id: int | None = None
    created_date: datetime | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return the editable fields (without ``id``/``created_date``)."""
        data = asdict(self)
        data.pop("id")
        data.pop("created_date")
        return data

    def merged(self, overrides: dict[str, Any]) -> "DisplaySettings":
        """Return a copy with non-``None`` overrides applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


DEFAULT_DISPLAY_SETTINGS = DisplaySettings()
"""Values used wherever no display settings row exists."""

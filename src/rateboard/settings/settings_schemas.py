"""Pydantic schemas for the display settings API."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

COLOR_PATTERN = r"^#(?:[0-9a-fA-F]{3}){1,2}$"
FONT_TOKEN_PATTERN = r"^text-(?:xs|sm|base|lg|xl|[2-9]xl)$"


class DisplaySettingsRequest(BaseModel):
    """Body for both creation and partial update; omitted fields keep their value."""

    orientation: Literal["horizontal", "vertical"] | None = None
    background_color: str | None = Field(default=None, pattern=COLOR_PATTERN)
    text_color: str | None = Field(default=None, pattern=COLOR_PATTERN)
    rate_number_font_size: str | None = Field(default=None, pattern=FONT_TOKEN_PATTERN)
    show_media: bool | None = None
    rates_display_duration_seconds: int | None = Field(default=None, ge=1, le=3600)
    refresh_interval: int | None = Field(default=None, ge=1, le=3600)


class DisplaySettingsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    orientation: Literal["horizontal", "vertical"]
    background_color: str
    text_color: str
    rate_number_font_size: str
    show_media: bool
    rates_display_duration_seconds: int
    refresh_interval: int
    created_date: datetime | None = None

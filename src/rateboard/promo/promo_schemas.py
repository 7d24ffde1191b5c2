"""Pydantic schemas for the promo slideshow API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .promo_models import TransitionEffect


class PromoImageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    image_url: str | None = None
    duration_seconds: int | None = None
    transition_effect: str = "fade"
    order_index: int = 0
    is_active: bool = True
    file_size: int | None = None
    mime_type: str | None = None
    created_date: datetime | None = None


class PromoImageUpdateRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    image_url: str | None = Field(default=None, max_length=1024)
    duration_seconds: int | None = Field(default=None, ge=1, le=3600)
    transition_effect: TransitionEffect | None = None
    order_index: int | None = Field(default=None, ge=0)
    is_active: bool | None = None

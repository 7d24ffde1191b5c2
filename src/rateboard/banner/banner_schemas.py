"""Pydantic schemas for the banner API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class BannerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    banner_image_url: str | None = None
    banner_height: int = 120
    is_active: bool = True
    created_date: datetime | None = None


class BannerUploadResponse(BaseModel):
    banner_image_url: str | None
    message: str

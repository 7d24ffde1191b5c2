"""Pydantic schemas for the media library API."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class MediaItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    file_url: str | None = None
    media_type: Literal["image", "video"]
    duration_seconds: int | None = None
    order_index: int = 0
    is_active: bool = True
    file_size: int | None = None
    mime_type: str | None = None
    created_date: datetime | None = None


class MediaItemUpdateRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    file_url: str | None = Field(default=None, max_length=1024)
    media_type: Literal["image", "video"] | None = None
    duration_seconds: int | None = Field(default=None, ge=1, le=3600)
    order_index: int | None = Field(default=None, ge=0)
    is_active: bool | None = None


class UploadedMediaSummary(BaseModel):
    id: int
    name: str
    file_data_present: bool


class MediaUploadResponse(BaseModel):
    message: str
    items: list[UploadedMediaSummary]

"""Media data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

MediaType = Literal["image", "video"]


@dataclass(slots=True, frozen=True)
class MediaItem:
    id: int
    name: str
    media_type: MediaType
    file_url: str | None = None
    duration_seconds: int | None = 30
    order_index: int = 0
    is_active: bool = True
    file_size: int | None = None
    mime_type: str | None = None
    created_date: datetime | None = None


@dataclass(slots=True, frozen=True)
class StoredFile:
    """Binary payload resolved from a row: inline bytes or an external URL."""

    content_type: str
    data: bytes | None = None
    external_url: str | None = None


@dataclass(slots=True, frozen=True)
class ValidatedUpload:
    filename: str
    content_type: str
    data: bytes

    @property
    def size_bytes(self) -> int:
        return len(self.data)

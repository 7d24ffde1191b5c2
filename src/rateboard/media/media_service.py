"""Media library upload orchestration."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from fastapi import UploadFile

from .media_errors import EmptyUploadError
from .media_files import encode_payload
from .media_models import MediaItem, ValidatedUpload
from .media_repository import MediaRepository
from .upload_validation import UploadValidator

logger = logging.getLogger(__name__)

DEFAULT_MEDIA_DURATION_SECONDS = 30


async def read_uploads(
    validator: UploadValidator, uploads: Sequence[UploadFile]
) -> list[ValidatedUpload]:
    """Validate every upload before anything is stored; empty files are skipped."""
    validator.check_count(uploads)
    accepted: list[ValidatedUpload] = []
    for upload in uploads:
        try:
            accepted.append(await validator.read(upload))
        except EmptyUploadError:
            continue
    return accepted


@dataclass(slots=True)
class MediaLibraryService:
    repo: MediaRepository
    validator: UploadValidator

    async def upload(
        self,
        uploads: Sequence[UploadFile],
        *,
        duration_seconds: int | None = None,
        auto_activate: bool = False,
    ) -> list[MediaItem]:
        """Store uploads after the current highest ``order_index``."""
        accepted = await read_uploads(self.validator, uploads)
        base_order = self.repo.highest_order_index()
        created: list[MediaItem] = []
        for offset, upload in enumerate(accepted, start=1):
            item = self.repo.create(
                {
                    "name": upload.filename,
                    "file_data": encode_payload(upload.data),
                    "media_type": "image" if upload.content_type.startswith("image/") else "video",
                    "duration_seconds": duration_seconds or DEFAULT_MEDIA_DURATION_SECONDS,
                    "order_index": base_order + offset,
                    "is_active": auto_activate,
                    "file_size": upload.size_bytes,
                    "mime_type": upload.content_type,
                }
            )
            logger.info(
                "media.uploaded",
                extra={"media_id": item.id, "media_name": item.name, "size_bytes": item.file_size},
            )
            created.append(item)
        return created

"""Promotional slideshow upload orchestration."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from fastapi import UploadFile

from ..media.media_files import encode_payload
from ..media.media_service import read_uploads
from ..media.upload_validation import UploadValidator
from .promo_models import DEFAULT_TRANSITION_EFFECT, PromoImage
from .promo_repository import PromoRepository

logger = logging.getLogger(__name__)

DEFAULT_PROMO_DURATION_SECONDS = 5


@dataclass(slots=True)
class PromoService:
    repo: PromoRepository
    validator: UploadValidator

    async def upload(
        self,
        uploads: Sequence[UploadFile],
        *,
        duration_seconds: int | None = None,
        transition: str | None = None,
        auto_activate: bool = False,
    ) -> list[PromoImage]:
        accepted = await read_uploads(self.validator, uploads)
        base_order = self.repo.highest_order_index()
        created: list[PromoImage] = []
        for offset, upload in enumerate(accepted, start=1):
            image = self.repo.create(
                {
                    "name": upload.filename,
                    "image_data": encode_payload(upload.data),
                    "duration_seconds": duration_seconds or DEFAULT_PROMO_DURATION_SECONDS,
                    "transition_effect": transition or DEFAULT_TRANSITION_EFFECT,
                    "order_index": base_order + offset,
                    "is_active": auto_activate,
                    "file_size": upload.size_bytes,
                    "mime_type": upload.content_type,
                }
            )
            logger.info(
                "promo.uploaded",
                extra={"promo_id": image.id, "transition": image.transition_effect},
            )
            created.append(image)
        return created

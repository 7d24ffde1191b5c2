"""Upload validation utilities."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from fastapi import UploadFile

from ..config import UploadLimits
from .media_errors import (
    EmptyUploadError,
    PayloadTooLargeError,
    TooManyFilesError,
    UnsupportedMediaError,
    UploadReadError,
)
from .media_models import ValidatedUpload

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UploadValidator:
    """Validate multipart uploads against configured limits and read them."""

    limits: UploadLimits

    def check_count(self, uploads: Sequence[UploadFile]) -> None:
        if len(uploads) > self.limits.max_files:
            raise TooManyFilesError(f"At most {self.limits.max_files} files are accepted")

    async def read(self, upload: UploadFile) -> ValidatedUpload:
        allowed = set(self.limits.allowed_content_types)
        if upload.content_type not in allowed:
            logger.warning(
                "upload.unsupported_media",
                extra={"content_type": upload.content_type, "upload_name": upload.filename},
            )
            raise UnsupportedMediaError(upload.content_type)

        cap = self.limits.max_bytes
        chunks: list[bytes] = []
        size = 0

        try:
            while True:
                chunk = await upload.read(self.limits.chunk_size_bytes)
                if not chunk:
                    break
                size += len(chunk)
                if size > cap:
                    logger.warning(
                        "upload.payload_too_large",
                        extra={"size_bytes": size, "limit_bytes": cap},
                    )
                    raise PayloadTooLargeError(size)
                chunks.append(chunk)
        except PayloadTooLargeError:
            raise
        except Exception as exc:  # pragma: no cover
            logger.error("upload.read_failed", exc_info=exc)
            raise UploadReadError(str(exc)) from exc
        finally:
            await upload.seek(0)

        if size == 0:
            logger.warning("upload.empty_file", extra={"upload_name": upload.filename})
            raise EmptyUploadError(upload.filename or "upload")

        result = ValidatedUpload(
            filename=upload.filename or "upload",
            content_type=upload.content_type or "application/octet-stream",
            data=b"".join(chunks),
        )
        logger.info(
            "upload.validated",
            extra={
                "upload_name": result.filename,
                "size_bytes": result.size_bytes,
                "content_type": result.content_type,
            },
        )
        return result

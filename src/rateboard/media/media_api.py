"""Routes for the rotating media library."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from fastapi.responses import Response

from ..api.errors import (
    ApiError,
    bad_request_error,
    internal_error,
    not_found_error,
    payload_too_large_error,
    unsupported_media_error,
)
from ..exceptions import NotFoundError
from .media_errors import PayloadTooLargeError, TooManyFilesError, UnsupportedMediaError, UploadError
from .media_files import stored_file_response
from .media_repository import MEDIA_FILE_URL, MediaRepository
from .media_schemas import (
    MediaItemResponse,
    MediaItemUpdateRequest,
    MediaUploadResponse,
    UploadedMediaSummary,
)
from .media_service import MediaLibraryService

router = APIRouter(prefix="/api/media", tags=["media"])
logger = logging.getLogger(__name__)


def get_media_repo(request: Request) -> MediaRepository:
    try:
        return request.app.state.media_repo  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover
        raise RuntimeError("MediaRepository is not configured") from exc


def get_media_service(request: Request) -> MediaLibraryService:
    try:
        return request.app.state.media_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover
        raise RuntimeError("MediaLibraryService is not configured") from exc


def upload_error_to_api(exc: UploadError) -> ApiError:
    """Map upload validation failures onto HTTP errors."""
    if isinstance(exc, UnsupportedMediaError):
        return unsupported_media_error(f"Unsupported file type: {exc}")
    if isinstance(exc, PayloadTooLargeError):
        return payload_too_large_error("File too large")
    if isinstance(exc, TooManyFilesError):
        return bad_request_error(str(exc))
    return internal_error("Failed to read upload")


@router.get("", response_model=list[MediaItemResponse])
def list_media(
    active: bool = False,
    repo: MediaRepository = Depends(get_media_repo),
) -> list[MediaItemResponse]:
    return [MediaItemResponse.model_validate(item) for item in repo.list(active_only=active)]


@router.post("/upload", status_code=status.HTTP_201_CREATED, response_model=MediaUploadResponse)
async def upload_media(
    files: list[UploadFile] | None = File(None),
    duration_seconds: int | None = Form(None, ge=1, le=3600),
    auto_activate: str | None = Form(None, alias="autoActivate"),
    service: MediaLibraryService = Depends(get_media_service),
) -> MediaUploadResponse:
    if not files:
        raise bad_request_error("No files uploaded")
    try:
        created = await service.upload(
            files,
            duration_seconds=duration_seconds,
            auto_activate=auto_activate == "true",
        )
    except UploadError as exc:
        raise upload_error_to_api(exc) from None
    if not created:
        logger.error("media.upload_empty", extra={"received": len(files)})
        raise internal_error("Failed to upload any files")
    return MediaUploadResponse(
        message="Files uploaded successfully",
        items=[
            UploadedMediaSummary(id=item.id, name=item.name, file_data_present=True)
            for item in created
        ],
    )


@router.put("/{media_id}", response_model=MediaItemResponse)
def update_media(
    media_id: int,
    payload: MediaItemUpdateRequest,
    repo: MediaRepository = Depends(get_media_repo),
) -> MediaItemResponse:
    try:
        item = repo.update(media_id, payload.model_dump(exclude_none=True))
    except NotFoundError:
        raise not_found_error("Media item not found") from None
    return MediaItemResponse.model_validate(item)


@router.delete("/{media_id}")
def delete_media(media_id: int, repo: MediaRepository = Depends(get_media_repo)) -> dict[str, str]:
    try:
        repo.delete(media_id)
    except NotFoundError:
        raise not_found_error("Media item not found") from None
    logger.info("media.deleted", extra={"media_id": media_id})
    return {"message": "Media item deleted successfully"}


@router.get("/{media_id}/file")
def serve_media_file(media_id: int, repo: MediaRepository = Depends(get_media_repo)) -> Response:
    try:
        stored = repo.get_file(media_id)
    except NotFoundError:
        raise not_found_error("Media item not found") from None
    return stored_file_response(stored, own_url=MEDIA_FILE_URL.format(id=media_id))

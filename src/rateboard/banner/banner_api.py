"""Routes for the top banner image."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from fastapi.responses import Response

from ..api.errors import bad_request_error, not_found_error
from ..exceptions import NotFoundError
from ..media.media_api import upload_error_to_api
from ..media.media_errors import EmptyUploadError, UploadError
from ..media.media_files import stored_file_response
from ..media.upload_validation import UploadValidator
from .banner_repository import BANNER_FILE_URL, BannerRepository
from .banner_schemas import BannerResponse, BannerUploadResponse

router = APIRouter(prefix="/api/banner", tags=["banner"])
logger = logging.getLogger(__name__)


def get_banner_repo(request: Request) -> BannerRepository:
    try:
        return request.app.state.banner_repo  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover
        raise RuntimeError("BannerRepository is not configured") from exc


def get_banner_validator(request: Request) -> UploadValidator:
    try:
        return request.app.state.banner_validator  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover
        raise RuntimeError("Banner UploadValidator is not configured") from exc


@router.get("", response_model=BannerResponse | None)
def read_banner(repo: BannerRepository = Depends(get_banner_repo)) -> BannerResponse | None:
    banner = repo.get_active()
    if banner is None:
        return None
    return BannerResponse.model_validate(banner)


@router.post("/upload", status_code=status.HTTP_201_CREATED, response_model=BannerUploadResponse)
async def upload_banner(
    banner: UploadFile | None = File(None),
    banner_height: int | None = Form(None, ge=20, le=1000),
    repo: BannerRepository = Depends(get_banner_repo),
    validator: UploadValidator = Depends(get_banner_validator),
) -> BannerUploadResponse:
    if banner is None:
        raise bad_request_error("No banner file uploaded")
    try:
        upload = await validator.read(banner)
    except EmptyUploadError:
        raise bad_request_error("No banner file uploaded") from None
    except UploadError as exc:
        raise upload_error_to_api(exc) from None

    stored, created = repo.store_image(
        upload.data,
        mime_type=upload.content_type,
        banner_height=banner_height,
    )
    logger.info("banner.stored", extra={"banner_id": stored.id, "created": created})
    return BannerUploadResponse(
        banner_image_url=stored.banner_image_url,
        message="Banner uploaded successfully" if created else "Banner updated successfully",
    )


@router.get("/{banner_id}/file")
def serve_banner_file(banner_id: int, repo: BannerRepository = Depends(get_banner_repo)) -> Response:
    try:
        stored = repo.get_file(banner_id)
    except NotFoundError:
        raise not_found_error("Banner image not found") from None
    return stored_file_response(stored, own_url=BANNER_FILE_URL.format(id=banner_id))

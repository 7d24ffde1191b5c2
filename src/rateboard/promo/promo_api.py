"""Routes for the promotional image slideshow."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from fastapi.responses import Response

from ..api.errors import bad_request_error, internal_error, not_found_error
from ..exceptions import NotFoundError
from ..media.media_api import upload_error_to_api
from ..media.media_errors import UploadError
from ..media.media_files import stored_file_response
from .promo_models import TransitionEffect
from .promo_repository import PROMO_FILE_URL, PromoRepository
from .promo_schemas import PromoImageResponse, PromoImageUpdateRequest
from .promo_service import PromoService

router = APIRouter(prefix="/api/promo", tags=["promo"])
logger = logging.getLogger(__name__)


def get_promo_repo(request: Request) -> PromoRepository:
    try:
        return request.app.state.promo_repo  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover
        raise RuntimeError("PromoRepository is not configured") from exc


def get_promo_service(request: Request) -> PromoService:
    try:
        return request.app.state.promo_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover
        raise RuntimeError("PromoService is not configured") from exc


@router.get("", response_model=list[PromoImageResponse])
def list_promos(
    active: bool = False,
    repo: PromoRepository = Depends(get_promo_repo),
) -> list[PromoImageResponse]:
    return [PromoImageResponse.model_validate(item) for item in repo.list(active_only=active)]


@router.post("/upload", status_code=status.HTTP_201_CREATED, response_model=list[PromoImageResponse])
async def upload_promos(
    files: list[UploadFile] | None = File(None),
    duration_seconds: int | None = Form(None, ge=1, le=3600),
    transition: TransitionEffect | None = Form(None),
    auto_activate: str | None = Form(None, alias="autoActivate"),
    service: PromoService = Depends(get_promo_service),
) -> list[PromoImageResponse]:
    if not files:
        raise bad_request_error("No files uploaded")
    try:
        created = await service.upload(
            files,
            duration_seconds=duration_seconds,
            transition=transition,
            auto_activate=auto_activate == "true",
        )
    except UploadError as exc:
        raise upload_error_to_api(exc) from None
    if not created:
        raise internal_error("Failed to upload promotional images")
    return [PromoImageResponse.model_validate(item) for item in created]


@router.put("/{promo_id}", response_model=PromoImageResponse)
def update_promo(
    promo_id: int,
    payload: PromoImageUpdateRequest,
    repo: PromoRepository = Depends(get_promo_repo),
) -> PromoImageResponse:
    try:
        image = repo.update(promo_id, payload.model_dump(exclude_none=True))
    except NotFoundError:
        raise not_found_error("Promotional image not found") from None
    return PromoImageResponse.model_validate(image)


@router.delete("/{promo_id}")
def delete_promo(promo_id: int, repo: PromoRepository = Depends(get_promo_repo)) -> dict[str, str]:
    try:
        repo.delete(promo_id)
    except NotFoundError:
        raise not_found_error("Promotional image not found") from None
    logger.info("promo.deleted", extra={"promo_id": promo_id})
    return {"message": "Promotional image deleted successfully"}


@router.get("/{promo_id}/file")
def serve_promo_file(promo_id: int, repo: PromoRepository = Depends(get_promo_repo)) -> Response:
    try:
        stored = repo.get_file(promo_id)
    except NotFoundError:
        raise not_found_error("Promotional image not found") from None
    return stored_file_response(stored, own_url=PROMO_FILE_URL.format(id=promo_id))

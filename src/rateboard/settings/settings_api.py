"""Routes for display settings."""

from typing import Any

from fastapi import APIRouter, Depends, Request, status

from .settings_schemas import DisplaySettingsRequest, DisplaySettingsResponse
from .settings_service import SettingsService

router = APIRouter(prefix="/api/settings", tags=["settings"])


def get_settings_service(request: Request) -> SettingsService:
    try:
        return request.app.state.settings_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover
        raise RuntimeError("SettingsService is not configured") from exc


@router.get("/display")
def read_display_settings(
    service: SettingsService = Depends(get_settings_service),
) -> dict[str, Any]:
    settings = service.load()
    if settings is None:
        return {}
    return DisplaySettingsResponse.model_validate(settings).model_dump(mode="json")


@router.post(
    "/display",
    status_code=status.HTTP_201_CREATED,
    response_model=DisplaySettingsResponse,
)
def create_display_settings(
    payload: DisplaySettingsRequest,
    service: SettingsService = Depends(get_settings_service),
) -> DisplaySettingsResponse:
    created = service.create(payload.model_dump(exclude_none=True))
    return DisplaySettingsResponse.model_validate(created)


@router.put("/display", response_model=DisplaySettingsResponse)
@router.put("/display/{settings_id}", response_model=DisplaySettingsResponse)
def update_display_settings(
    payload: DisplaySettingsRequest,
    settings_id: int | None = None,
    service: SettingsService = Depends(get_settings_service),
) -> DisplaySettingsResponse:
    updated = service.update(payload.model_dump(exclude_none=True))
    return DisplaySettingsResponse.model_validate(updated)

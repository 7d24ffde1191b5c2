"""Operational status endpoint."""

from __future__ import annotations

import platform
import time
from datetime import datetime, timezone
from typing import Any
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Request

from ..config import AppConfig
from ..media.media_repository import MediaRepository
from ..promo.promo_repository import PromoRepository
from ..rates.rates_repository import RatesRepository

router = APIRouter(prefix="/api/system", tags=["system"])


def _get_config(request: Request) -> AppConfig:
    try:
        return request.app.state.config  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover
        raise RuntimeError("AppConfig is not configured") from exc


@router.get("/info")
def system_info(
    request: Request,
    config: AppConfig = Depends(_get_config),
) -> dict[str, Any]:
    state = request.app.state
    media_repo: MediaRepository = state.media_repo
    promo_repo: PromoRepository = state.promo_repo
    rates_repo: RatesRepository = state.rates_repo

    started_at: float = getattr(state, "started_at", time.monotonic())
    uptime_seconds = max(0.0, time.monotonic() - started_at)
    snapshot = rates_repo.get_current()
    local_now = datetime.now(ZoneInfo(config.display_timezone))

    return {
        "status": "online",
        "server_time": local_now.strftime("%d/%m/%Y, %H:%M:%S"),
        "timezone": config.display_timezone,
        "uptime_hours": int(uptime_seconds // 3600),
        "database_status": "connected",
        "media_files": media_repo.count(),
        "promo_images": promo_repo.count(),
        "rates_last_updated": snapshot.created_date.isoformat() if snapshot and snapshot.created_date else None,
        "python_version": platform.python_version(),
        "last_sync": datetime.now(timezone.utc).isoformat(),
    }

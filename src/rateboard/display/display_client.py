"""Typed read-only facade over the backend API used by the display."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from ..banner.banner_models import BannerSettings
from ..media.media_models import MediaItem
from ..promo.promo_models import PromoImage
from ..rates.rates_models import RateSnapshot
from ..settings.settings_models import DisplaySettings
from .display_errors import TransientFetchFailure
from .display_models import FetchResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

_rates_adapter = TypeAdapter(RateSnapshot)
_settings_adapter = TypeAdapter(DisplaySettings)
_media_adapter = TypeAdapter(list[MediaItem])
_promo_adapter = TypeAdapter(list[PromoImage])
_banner_adapter = TypeAdapter(BannerSettings)


def _optional(adapter: TypeAdapter[T]) -> Callable[[Any], T | None]:
    def parse(payload: Any) -> T | None:
        if payload is None or payload == {}:
            return None
        return adapter.validate_python(payload)

    return parse


def error_message(response: httpx.Response) -> str:
    """Extract a human readable message from an error response."""
    fallback = f"HTTP error! status: {response.status_code}"
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or fallback
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
        detail = body.get("detail")
        if isinstance(detail, dict) and isinstance(detail.get("message"), str):
            return detail["message"]
        if isinstance(detail, str) and detail:
            return detail
    return response.text.strip() or fallback


@dataclass(slots=True)
class DisplayDataClient:
    """Convenience wrapper around :class:`httpx.AsyncClient`; no call raises."""

    http: httpx.AsyncClient

    async def get_current_rates(self) -> FetchResult[RateSnapshot | None]:
        return await self._fetch("/api/rates/current", _optional(_rates_adapter))

    async def get_display_settings(self) -> FetchResult[DisplaySettings | None]:
        return await self._fetch("/api/settings/display", _optional(_settings_adapter))

    async def get_active_media(self) -> FetchResult[list[MediaItem]]:
        return await self._fetch(
            "/api/media", _media_adapter.validate_python, params={"active": "true"}
        )

    async def get_active_promos(self) -> FetchResult[list[PromoImage]]:
        return await self._fetch(
            "/api/promo", _promo_adapter.validate_python, params={"active": "true"}
        )

    async def get_banner(self) -> FetchResult[BannerSettings | None]:
        return await self._fetch("/api/banner", _optional(_banner_adapter))

    async def _fetch(
        self,
        path: str,
        parse: Callable[[Any], T],
        *,
        params: dict[str, str] | None = None,
    ) -> FetchResult[T]:
        try:
            response = await self.http.get(path, params=params)
        except httpx.HTTPError as exc:
            logger.warning("display.transport_error", extra={"path": path, "error": str(exc)})
            return FetchResult.failure(
                TransientFetchFailure(None, str(exc) or exc.__class__.__name__)
            )

        if response.is_error:
            failure = TransientFetchFailure(response.status_code, error_message(response))
            logger.warning(
                "display.http_error",
                extra={"path": path, "status_code": response.status_code, "error": failure.message},
            )
            return FetchResult.failure(failure)

        try:
            return FetchResult.success(parse(response.json()))
        except (ValueError, ValidationError) as exc:
            logger.warning("display.malformed_payload", extra={"path": path})
            return FetchResult.failure(
                TransientFetchFailure(response.status_code, f"Malformed response from {path}: {exc}")
            )

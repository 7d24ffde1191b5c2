"""Reusable error primitives for API exception handling."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..exceptions import RepositoryError

logger = logging.getLogger(__name__)

_VALIDATION_MESSAGES = {
    "/api/rates": "Invalid rate data",
    "/api/settings": "Invalid settings data",
    "/api/media": "Invalid media data",
    "/api/promo": "Invalid promo data",
    "/api/banner": "Invalid banner data",
}


@dataclass(slots=True)
class ApiError(Exception):
    """Structured application-level error for HTTP handlers."""

    status_code: int
    code: str
    message: str
    headers: Mapping[str, str] | None = None
    errors: Any = None

    def to_response(self) -> JSONResponse:
        """Materialise the error into a ``JSONResponse`` instance."""

        content: dict[str, Any] = {"message": self.message, "failure_reason": self.code}
        if self.errors is not None:
            content["errors"] = jsonable_encoder(self.errors)
        return JSONResponse(
            status_code=self.status_code,
            content=content,
            headers=dict(self.headers or {}),
        )


async def api_error_handler(_: Request, exc: ApiError) -> JSONResponse:
    """Convert :class:`ApiError` exceptions into JSON payloads."""

    return exc.to_response()


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request schema violations as ``400`` with the offending fields."""

    message = "Invalid request data"
    for prefix, candidate in _VALIDATION_MESSAGES.items():
        if request.url.path.startswith(prefix):
            message = candidate
            break
    return bad_request_error(message, errors=exc.errors()).to_response()


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    """Hide persistence failures behind a generic ``500`` payload."""

    logger.error("api.repository_error", extra={"path": request.url.path}, exc_info=exc)
    return internal_error("Database operation failed").to_response()


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RepositoryError, repository_error_handler)  # type: ignore[arg-type]


def bad_request_error(message: str, *, errors: Any = None) -> ApiError:
    """Return an :class:`ApiError` representing a validation failure."""

    return ApiError(status.HTTP_400_BAD_REQUEST, "invalid_request", message, errors=errors)


def not_found_error(message: str) -> ApiError:
    """Return an :class:`ApiError` for a missing resource."""

    return ApiError(status.HTTP_404_NOT_FOUND, "not_found", message)


def payload_too_large_error(message: str) -> ApiError:
    return ApiError(status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, "payload_too_large", message)


def unsupported_media_error(message: str) -> ApiError:
    return ApiError(status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, "unsupported_media_type", message)


def internal_error(message: str) -> ApiError:
    """Return an :class:`ApiError` for unexpected server-side failures."""

    return ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error", message)


__all__ = [
    "ApiError",
    "api_error_handler",
    "bad_request_error",
    "internal_error",
    "not_found_error",
    "payload_too_large_error",
    "register_error_handlers",
    "repository_error_handler",
    "unsupported_media_error",
    "validation_error_handler",
]

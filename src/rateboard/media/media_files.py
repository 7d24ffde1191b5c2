"""Helpers for base64-stored payloads and the binary file endpoints."""

from __future__ import annotations

import base64
import binascii
import logging

from fastapi.responses import RedirectResponse, Response

from ..api.errors import not_found_error
from .media_models import StoredFile

logger = logging.getLogger(__name__)


def encode_payload(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def decode_payload(payload: str | None) -> bytes | None:
    if not payload:
        return None
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        logger.warning("media.payload_corrupt", extra={"length": len(payload)})
        return None


def stored_file_response(stored: StoredFile, *, own_url: str) -> Response:
    """Serve inline bytes, or redirect to an external URL that is not the endpoint itself."""
    if stored.data:
        return Response(
            content=stored.data,
            media_type=stored.content_type,
            headers={"Content-Length": str(len(stored.data))},
        )
    if stored.external_url and stored.external_url != own_url:
        return RedirectResponse(stored.external_url)
    raise not_found_error("File not found")

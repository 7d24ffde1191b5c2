"""Shared HTTP helpers (error payloads, exception handlers)."""

from .errors import ApiError, register_error_handlers

__all__ = ["ApiError", "register_error_handlers"]

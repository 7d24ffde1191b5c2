"""Errors surfaced by the display data facade."""

from __future__ import annotations


class TransientFetchFailure(Exception):
    """A poll failed; the previous state stays on screen."""

    def __init__(self, status_code: int | None, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __repr__(self) -> str:
        return f"TransientFetchFailure(status_code={self.status_code!r}, message={self.message!r})"

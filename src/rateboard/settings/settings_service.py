"""Manage display settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .settings_models import DEFAULT_DISPLAY_SETTINGS, DisplaySettings
from .settings_repository import SettingsRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SettingsService:
    """Provide read/write access to display settings stored in DB."""

    repo: SettingsRepository

    def load(self) -> DisplaySettings | None:
        """Return the newest stored settings row, if any."""
        return self.repo.get_latest()

    def effective(self) -> DisplaySettings:
        """Return stored settings or the defaults table."""
        return self.load() or DEFAULT_DISPLAY_SETTINGS

    def create(self, payload: dict[str, Any]) -> DisplaySettings:
        """Insert a new settings row; missing fields come from the defaults."""
        created = self.repo.create(DEFAULT_DISPLAY_SETTINGS.merged(payload))
        logger.info("settings.created", extra={"settings_id": created.id})
        return created

    def update(self, payload: dict[str, Any]) -> DisplaySettings:
        """Apply a partial update to the newest row, creating one if absent."""
        changes = {key: value for key, value in payload.items() if value is not None}
        current = self.repo.get_latest()
        if current is None or current.id is None:
            return self.create(changes)
        if not changes:
            return current
        updated = self.repo.update(current.id, changes)
        logger.info(
            "settings.updated",
            extra={"settings_id": updated.id, "fields": sorted(changes)},
        )
        return updated

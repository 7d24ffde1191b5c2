"""Persistence for display settings rows."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from ..db.db_models import DisplaySettingsModel
from ..exceptions import ensure_found, handle_sqlalchemy_errors
from .settings_models import DisplaySettings


class SettingsRepository:
    """Store display settings; the most recently created row is authoritative."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def get_latest(self) -> DisplaySettings | None:
        with handle_sqlalchemy_errors(entity="display_settings"), self._session_factory() as session:
            row = (
                session.query(DisplaySettingsModel)
                .order_by(DisplaySettingsModel.created_date.desc(), DisplaySettingsModel.id.desc())
                .first()
            )
            return self._to_domain(row) if row is not None else None

    def create(self, settings: DisplaySettings) -> DisplaySettings:
        with handle_sqlalchemy_errors(entity="display_settings"), self._session_factory() as session:
            row = DisplaySettingsModel(**settings.as_dict(), created_date=datetime.utcnow())
            session.add(row)
            session.commit()
            session.refresh(row)
            return self._to_domain(row)

    def update(self, settings_id: int, changes: dict[str, Any]) -> DisplaySettings:
        with handle_sqlalchemy_errors(entity="display_settings"), self._session_factory() as session:
            row = ensure_found(
                session.get(DisplaySettingsModel, settings_id),
                entity="display_settings",
                identifier=settings_id,
            )
            for key, value in changes.items():
                setattr(row, key, value)
            session.commit()
            session.refresh(row)
            return self._to_domain(row)

    @staticmethod
    def _to_domain(model: DisplaySettingsModel) -> DisplaySettings:
        return DisplaySettings(
            id=model.id,
            orientation=model.orientation,  # type: ignore[arg-type]
            background_color=model.background_color,
            text_color=model.text_color,
            rate_number_font_size=model.rate_number_font_size,
            show_media=model.show_media,
            rates_display_duration_seconds=model.rates_display_duration_seconds,
            refresh_interval=model.refresh_interval,
            created_date=model.created_date,
        )

"""Media library repository backed by SQLAlchemy."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..db.db_models import MediaItemModel
from ..exceptions import ensure_found, handle_sqlalchemy_errors
from .media_files import decode_payload
from .media_models import MediaItem, StoredFile

MEDIA_FILE_URL = "/api/media/{id}/file"


class MediaRepository:
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def list(self, *, active_only: bool = False) -> list[MediaItem]:
        with handle_sqlalchemy_errors(entity="media_items"), self._session_factory() as session:
            stmt = select(MediaItemModel).order_by(
                MediaItemModel.order_index.asc(), MediaItemModel.id.asc()
            )
            if active_only:
                stmt = stmt.where(MediaItemModel.is_active.is_(True))
            return [self._to_domain(row) for row in session.scalars(stmt)]

    def get(self, media_id: int) -> MediaItem:
        with handle_sqlalchemy_errors(entity="media_items"), self._session_factory() as session:
            row = ensure_found(
                session.get(MediaItemModel, media_id), entity="media_items", identifier=media_id
            )
            return self._to_domain(row)

    def get_file(self, media_id: int) -> StoredFile:
        with handle_sqlalchemy_errors(entity="media_items"), self._session_factory() as session:
            row = ensure_found(
                session.get(MediaItemModel, media_id), entity="media_items", identifier=media_id
            )
            return StoredFile(
                content_type=row.mime_type or "application/octet-stream",
                data=decode_payload(row.file_data),
                external_url=row.file_url,
            )

    def highest_order_index(self) -> int:
        with handle_sqlalchemy_errors(entity="media_items"), self._session_factory() as session:
            value = session.scalar(select(func.max(MediaItemModel.order_index)))
            return int(value or 0)

    def count(self, *, active_only: bool = False) -> int:
        with handle_sqlalchemy_errors(entity="media_items"), self._session_factory() as session:
            stmt = select(func.count(MediaItemModel.id))
            if active_only:
                stmt = stmt.where(MediaItemModel.is_active.is_(True))
            return int(session.scalar(stmt) or 0)

    def create(self, values: dict[str, Any]) -> MediaItem:
        """Insert an item; ``file_url`` defaults to the item's own file endpoint."""
        with handle_sqlalchemy_errors(entity="media_items"), self._session_factory() as session:
            row = MediaItemModel(**values, created_date=datetime.utcnow())
            session.add(row)
            session.flush()
            if not row.file_url:
                row.file_url = MEDIA_FILE_URL.format(id=row.id)
            session.commit()
            session.refresh(row)
            return self._to_domain(row)

    def update(self, media_id: int, changes: dict[str, Any]) -> MediaItem:
        with handle_sqlalchemy_errors(entity="media_items"), self._session_factory() as session:
            row = ensure_found(
                session.get(MediaItemModel, media_id), entity="media_items", identifier=media_id
            )
            for key, value in changes.items():
                setattr(row, key, value)
            session.commit()
            session.refresh(row)
            return self._to_domain(row)

    def delete(self, media_id: int) -> None:
        with handle_sqlalchemy_errors(entity="media_items"), self._session_factory() as session:
            row = ensure_found(
                session.get(MediaItemModel, media_id), entity="media_items", identifier=media_id
            )
            session.delete(row)
            session.commit()

    @staticmethod
    def _to_domain(model: MediaItemModel) -> MediaItem:
        return MediaItem(
            id=model.id,
            name=model.name,
            media_type=model.media_type,  # type: ignore[arg-type]
            file_url=model.file_url,
            duration_seconds=model.duration_seconds,
            order_index=model.order_index,
            is_active=model.is_active,
            file_size=model.file_size,
            mime_type=model.mime_type,
            created_date=model.created_date,
        )

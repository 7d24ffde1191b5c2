"""Promotional image repository backed by SQLAlchemy."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..db.db_models import PromoImageModel
from ..exceptions import ensure_found, handle_sqlalchemy_errors
from ..media.media_files import decode_payload
from ..media.media_models import StoredFile
from .promo_models import PromoImage

PROMO_FILE_URL = "/api/promo/{id}/file"


class PromoRepository:
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def list(self, *, active_only: bool = False) -> list[PromoImage]:
        with handle_sqlalchemy_errors(entity="promo_images"), self._session_factory() as session:
            stmt = select(PromoImageModel).order_by(
                PromoImageModel.order_index.asc(), PromoImageModel.id.asc()
            )
            if active_only:
                stmt = stmt.where(PromoImageModel.is_active.is_(True))
            return [self._to_domain(row) for row in session.scalars(stmt)]

    def get_file(self, promo_id: int) -> StoredFile:
        with handle_sqlalchemy_errors(entity="promo_images"), self._session_factory() as session:
            row = ensure_found(
                session.get(PromoImageModel, promo_id), entity="promo_images", identifier=promo_id
            )
            return StoredFile(
                content_type=row.mime_type or "image/jpeg",
                data=decode_payload(row.image_data),
                external_url=row.image_url,
            )

    def highest_order_index(self) -> int:
        with handle_sqlalchemy_errors(entity="promo_images"), self._session_factory() as session:
            return int(session.scalar(select(func.max(PromoImageModel.order_index))) or 0)

    def count(self, *, active_only: bool = False) -> int:
        with handle_sqlalchemy_errors(entity="promo_images"), self._session_factory() as session:
            stmt = select(func.count(PromoImageModel.id))
            if active_only:
                stmt = stmt.where(PromoImageModel.is_active.is_(True))
            return int(session.scalar(stmt) or 0)

    def create(self, values: dict[str, Any]) -> PromoImage:
        with handle_sqlalchemy_errors(entity="promo_images"), self._session_factory() as session:
            row = PromoImageModel(**values, created_date=datetime.utcnow())
            session.add(row)
            session.flush()
            if not row.image_url:
                row.image_url = PROMO_FILE_URL.format(id=row.id)
            session.commit()
            session.refresh(row)
            return self._to_domain(row)

    def update(self, promo_id: int, changes: dict[str, Any]) -> PromoImage:
        with handle_sqlalchemy_errors(entity="promo_images"), self._session_factory() as session:
            row = ensure_found(
                session.get(PromoImageModel, promo_id), entity="promo_images", identifier=promo_id
            )
            for key, value in changes.items():
                setattr(row, key, value)
            session.commit()
            session.refresh(row)
            return self._to_domain(row)

    def delete(self, promo_id: int) -> None:
        with handle_sqlalchemy_errors(entity="promo_images"), self._session_factory() as session:
            row = ensure_found(
                session.get(PromoImageModel, promo_id), entity="promo_images", identifier=promo_id
            )
            session.delete(row)
            session.commit()

    @staticmethod
    def _to_domain(model: PromoImageModel) -> PromoImage:
        return PromoImage(
            id=model.id,
            name=model.name,
            image_url=model.image_url,
            duration_seconds=model.duration_seconds,
            transition_effect=model.transition_effect,
            order_index=model.order_index,
            is_active=model.is_active,
            file_size=model.file_size,
            mime_type=model.mime_type,
            created_date=model.created_date,
        )

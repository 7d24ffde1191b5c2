"""Banner repository backed by SQLAlchemy."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db.db_models import BannerSettingsModel
from ..exceptions import ensure_found, handle_sqlalchemy_errors
from ..media.media_files import decode_payload, encode_payload
from ..media.media_models import StoredFile
from .banner_models import DEFAULT_BANNER_HEIGHT, BannerSettings

BANNER_FILE_URL = "/api/banner/{id}/file"


class BannerRepository:
    """Keep a single active banner row."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def get_active(self) -> BannerSettings | None:
        with handle_sqlalchemy_errors(entity="banner_settings"), self._session_factory() as session:
            row = self._active_row(session)
            return self._to_domain(row) if row is not None else None

    def get_file(self, banner_id: int) -> StoredFile:
        with handle_sqlalchemy_errors(entity="banner_settings"), self._session_factory() as session:
            row = ensure_found(
                session.get(BannerSettingsModel, banner_id),
                entity="banner_settings",
                identifier=banner_id,
            )
            return StoredFile(
                content_type=row.mime_type or "image/jpeg",
                data=decode_payload(row.banner_image_data),
                external_url=row.banner_image_url,
            )

    def store_image(
        self,
        data: bytes,
        *,
        mime_type: str,
        banner_height: int | None = None,
    ) -> tuple[BannerSettings, bool]:
        """Replace the active banner image, creating the row if needed.

        Returns the banner and whether a new row was created.
        """
        with handle_sqlalchemy_errors(entity="banner_settings"), self._session_factory() as session:
            row = self._active_row(session)
            created = row is None
            if row is None:
                row = BannerSettingsModel(
                    banner_height=banner_height or DEFAULT_BANNER_HEIGHT,
                    created_date=datetime.utcnow(),
                )
                session.add(row)
            elif banner_height is not None:
                row.banner_height = banner_height
            row.banner_image_data = encode_payload(data)
            row.mime_type = mime_type
            row.is_active = True
            session.flush()
            row.banner_image_url = BANNER_FILE_URL.format(id=row.id)
            session.commit()
            session.refresh(row)
            return self._to_domain(row), created

    @staticmethod
    def _active_row(session: Session) -> BannerSettingsModel | None:
        stmt = (
            select(BannerSettingsModel)
            .where(BannerSettingsModel.is_active.is_(True))
            .order_by(BannerSettingsModel.created_date.desc(), BannerSettingsModel.id.desc())
            .limit(1)
        )
        return session.scalars(stmt).first()

    @staticmethod
    def _to_domain(model: BannerSettingsModel) -> BannerSettings:
        return BannerSettings(
            id=model.id,
            banner_image_url=model.banner_image_url,
            banner_height=model.banner_height,
            is_active=model.is_active,
            mime_type=model.mime_type,
            created_date=model.created_date,
        )

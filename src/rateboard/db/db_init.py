"""Database initialization helpers."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from ..settings.settings_models import DEFAULT_DISPLAY_SETTINGS
from .db_models import Base, DisplaySettingsModel, GoldRateModel

logger = logging.getLogger(__name__)

DEFAULT_RATES = {
    "gold_24k_sale": 74850,
    "gold_24k_purchase": 73200,
    "gold_22k_sale": 68620,
    "gold_22k_purchase": 67100,
    "gold_18k_sale": 56140,
    "gold_18k_purchase": 54900,
    "silver_per_kg_sale": 92500,
    "silver_per_kg_purchase": 90800,
}

# Columns introduced after the first deployments; older databases lack them.
_PAYLOAD_COLUMNS = {
    "media_items": {
        "file_data": "ALTER TABLE media_items ADD COLUMN file_data TEXT",
        "mime_type": "ALTER TABLE media_items ADD COLUMN mime_type VARCHAR(128)",
    },
    "promo_images": {
        "image_data": "ALTER TABLE promo_images ADD COLUMN image_data TEXT",
        "mime_type": "ALTER TABLE promo_images ADD COLUMN mime_type VARCHAR(128)",
    },
    "banner_settings": {
        "banner_image_data": "ALTER TABLE banner_settings ADD COLUMN banner_image_data TEXT",
        "mime_type": "ALTER TABLE banner_settings ADD COLUMN mime_type VARCHAR(128)",
    },
}


def init_db(
    engine: Engine,
    session_factory: sessionmaker[Session],
    *,
    seed_defaults: bool = True,
) -> None:
    """Create tables, add missing payload columns and seed default rows."""
    Base.metadata.create_all(engine)
    _migrate_payload_columns(engine)

    if not seed_defaults:
        return
    with session_factory() as session:
        _seed_rates(session)
        _seed_display_settings(session)
        session.commit()


def _migrate_payload_columns(engine: Engine) -> None:
    inspector = inspect(engine)
    with engine.begin() as conn:
        for table, required_columns in _PAYLOAD_COLUMNS.items():
            columns = {column["name"] for column in inspector.get_columns(table)}
            for column, ddl in required_columns.items():
                if column not in columns:
                    logger.info("db.migrate.add_column", extra={"table": table, "column": column})
                    conn.execute(text(ddl))


def _seed_rates(session: Session) -> None:
    if session.query(GoldRateModel).count():
        return
    session.add(GoldRateModel(**DEFAULT_RATES, is_active=True, created_date=datetime.utcnow()))


def _seed_display_settings(session: Session) -> None:
    if session.query(DisplaySettingsModel).count():
        return
    session.add(
        DisplaySettingsModel(
            **DEFAULT_DISPLAY_SETTINGS.as_dict(),
            created_date=datetime.utcnow(),
        )
    )

"""Rate snapshot repository backed by SQLAlchemy."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from sqlalchemy import update
from sqlalchemy.orm import Session

from ..db.db_models import GoldRateModel
from ..exceptions import ensure_found, handle_sqlalchemy_errors
from .rates_models import RateSnapshot


class RatesRepository:
    """Persist gold/silver rate snapshots; at most one is active."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def get_current(self) -> RateSnapshot | None:
        with handle_sqlalchemy_errors(entity="gold_rates"), self._session_factory() as session:
            row = (
                session.query(GoldRateModel)
                .filter(GoldRateModel.is_active.is_(True))
                .order_by(GoldRateModel.created_date.desc(), GoldRateModel.id.desc())
                .first()
            )
            return self._to_domain(row) if row is not None else None

    def create(self, payload: dict[str, Any]) -> RateSnapshot:
        """Insert a new snapshot and deactivate every previous one."""
        with handle_sqlalchemy_errors(entity="gold_rates"), self._session_factory() as session:
            session.execute(update(GoldRateModel).values(is_active=False))
            row = GoldRateModel(
                **payload,
                is_active=True,
                created_date=datetime.utcnow(),
            )
            session.add(row)
            session.commit()
            session.refresh(row)
            return self._to_domain(row)

    def update(self, rate_id: int, changes: dict[str, Any]) -> RateSnapshot:
        with handle_sqlalchemy_errors(entity="gold_rates"), self._session_factory() as session:
            row = ensure_found(
                session.get(GoldRateModel, rate_id), entity="gold_rates", identifier=rate_id
            )
            for key, value in changes.items():
                setattr(row, key, value)
            session.commit()
            session.refresh(row)
            return self._to_domain(row)

    @staticmethod
    def _to_domain(model: GoldRateModel) -> RateSnapshot:
        return RateSnapshot(
            id=model.id,
            gold_24k_sale=model.gold_24k_sale,
            gold_24k_purchase=model.gold_24k_purchase,
            gold_22k_sale=model.gold_22k_sale,
            gold_22k_purchase=model.gold_22k_purchase,
            gold_18k_sale=model.gold_18k_sale,
            gold_18k_purchase=model.gold_18k_purchase,
            silver_per_kg_sale=model.silver_per_kg_sale,
            silver_per_kg_purchase=model.silver_per_kg_purchase,
            is_active=model.is_active,
            created_date=model.created_date,
        )

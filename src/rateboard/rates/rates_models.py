"""Rate snapshot domain dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class RateSnapshot:
    id: int
    gold_24k_sale: float
    gold_24k_purchase: float
    gold_22k_sale: float
    gold_22k_purchase: float
    gold_18k_sale: float
    gold_18k_purchase: float
    silver_per_kg_sale: float
    silver_per_kg_purchase: float
    is_active: bool = True
    created_date: datetime | None = None

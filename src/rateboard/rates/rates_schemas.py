"""Pydantic schemas for the rates API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RateCreateRequest(BaseModel):
    gold_24k_sale: float = Field(..., ge=0)
    gold_24k_purchase: float = Field(..., ge=0)
    gold_22k_sale: float = Field(..., ge=0)
    gold_22k_purchase: float = Field(..., ge=0)
    gold_18k_sale: float = Field(..., ge=0)
    gold_18k_purchase: float = Field(..., ge=0)
    silver_per_kg_sale: float = Field(..., ge=0)
    silver_per_kg_purchase: float = Field(..., ge=0)


class RateUpdateRequest(BaseModel):
    gold_24k_sale: float | None = Field(default=None, ge=0)
    gold_24k_purchase: float | None = Field(default=None, ge=0)
    gold_22k_sale: float | None = Field(default=None, ge=0)
    gold_22k_purchase: float | None = Field(default=None, ge=0)
    gold_18k_sale: float | None = Field(default=None, ge=0)
    gold_18k_purchase: float | None = Field(default=None, ge=0)
    silver_per_kg_sale: float | None = Field(default=None, ge=0)
    silver_per_kg_purchase: float | None = Field(default=None, ge=0)
    is_active: bool | None = None


class RateResponse(RateCreateRequest):
    model_config = ConfigDict(from_attributes=True)

    id: int
    is_active: bool = True
    created_date: datetime | None = None


class SaleRatesResponse(BaseModel):
    """Sale-side subset published to external sites."""

    model_config = ConfigDict(from_attributes=True)

    gold_24k_sale: float
    gold_22k_sale: float
    gold_18k_sale: float
    silver_per_kg_sale: float
    created_date: datetime | None = None

"""Routes for gold/silver rate snapshots."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status

from ..api.errors import bad_request_error, not_found_error
from ..exceptions import NotFoundError
from .rates_repository import RatesRepository
from .rates_schemas import (
    RateCreateRequest,
    RateResponse,
    RateUpdateRequest,
    SaleRatesResponse,
)

router = APIRouter(prefix="/api/rates", tags=["rates"])
logger = logging.getLogger(__name__)


def get_rates_repo(request: Request) -> RatesRepository:
    try:
        return request.app.state.rates_repo  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover
        raise RuntimeError("RatesRepository is not configured") from exc


@router.get("/current", response_model=RateResponse | None)
def read_current_rates(repo: RatesRepository = Depends(get_rates_repo)) -> RateResponse | None:
    snapshot = repo.get_current()
    if snapshot is None:
        return None
    return RateResponse.model_validate(snapshot)


@router.get("/sale", response_model=SaleRatesResponse | None)
def read_sale_rates(repo: RatesRepository = Depends(get_rates_repo)) -> SaleRatesResponse | None:
    snapshot = repo.get_current()
    if snapshot is None:
        return None
    return SaleRatesResponse.model_validate(snapshot)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=RateResponse)
def create_rates(
    payload: RateCreateRequest,
    repo: RatesRepository = Depends(get_rates_repo),
) -> RateResponse:
    snapshot = repo.create(payload.model_dump())
    logger.info("rates.created", extra={"rate_id": snapshot.id})
    return RateResponse.model_validate(snapshot)


@router.put("/{rate_id}", response_model=RateResponse)
def update_rates(
    rate_id: int,
    payload: RateUpdateRequest,
    repo: RatesRepository = Depends(get_rates_repo),
) -> RateResponse:
    changes = payload.model_dump(exclude_none=True)
    if not changes:
        raise bad_request_error("Invalid rate data")
    try:
        snapshot = repo.update(rate_id, changes)
    except NotFoundError:
        raise not_found_error("Rate snapshot not found") from None
    return RateResponse.model_validate(snapshot)

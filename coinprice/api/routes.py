from __future__ import annotations

import logging

from fastapi import APIRouter

from coinprice import __version__
from coinprice.api.schemas import (
    BatchErrorItem,
    BatchNormalizeRequest,
    BatchNormalizeResponse,
    BatchResultItem,
    ErrorBody,
    HealthResponse,
    NormalizeRequest,
    NormalizeResponse,
    PriceBody,
)
from coinprice.pricing import Price, PriceError, decode_price

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/v1")


def _to_body(price: Price) -> PriceBody:
    return PriceBody(
        amount_cents=price.amount_cents,
        currency_code=price.currency_code,
    )


@router.post("/prices/normalize", response_model=NormalizeResponse)
def normalize(payload: NormalizeRequest) -> NormalizeResponse:
    """Normalize one raw price object, filling absent fields with defaults."""
    logger.info(
        "normalize_requested",
        extra={"event": "normalize_requested", "count": 1},
    )
    return NormalizeResponse(price=_to_body(decode_price(payload.price)))


@router.post("/prices/normalize/batch", response_model=BatchNormalizeResponse)
def normalize_batch(payload: BatchNormalizeRequest) -> BatchNormalizeResponse:
    """Normalize a batch of raw price objects and return partial successes."""
    logger.info(
        "normalize_batch_requested",
        extra={
            "event": "normalize_batch_requested",
            "count": len(payload.items),
        },
    )

    results: list[BatchResultItem] = []
    errors: list[BatchErrorItem] = []

    for index, item in enumerate(payload.items):
        try:
            price = decode_price(item)
        except PriceError as exc:
            errors.append(
                BatchErrorItem(
                    index=index,
                    error=ErrorBody(
                        code=exc.code, message=exc.message, details=exc.details
                    ),
                )
            )
            continue
        results.append(BatchResultItem(index=index, price=_to_body(price)))

    return BatchNormalizeResponse(results=results, errors=errors)


@router.get("/healthz", response_model=HealthResponse, include_in_schema=False)
def healthz() -> HealthResponse:
    """Liveness probe."""
    return HealthResponse(status="ok", version=__version__)

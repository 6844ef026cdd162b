from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from coinprice.constants import MAX_BATCH_SIZE


class NormalizeRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # extra keys and odd value types are left for Price.from_dict to absorb
    price: dict[str, Any]


class BatchNormalizeRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    items: list[Any] = Field(min_length=1, max_length=MAX_BATCH_SIZE)


class PriceBody(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    amount_cents: str
    currency_code: str


class NormalizeResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    price: PriceBody


class ErrorBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    code: str
    message: str
    details: dict[str, Any]


class BatchResultItem(BaseModel):
    model_config = ConfigDict(extra="forbid")

    index: int
    price: PriceBody


class BatchErrorItem(BaseModel):
    model_config = ConfigDict(extra="forbid")

    index: int
    error: ErrorBody


class BatchNormalizeResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    results: list[BatchResultItem]
    errors: list[BatchErrorItem]


class HealthResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: str
    version: str

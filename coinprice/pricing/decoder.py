from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from coinprice.pricing.exceptions import PriceError
from coinprice.pricing.models import Price


def decode_price(record: Any) -> Price:
    """Decode one API response record into a price."""
    if not isinstance(record, Mapping):
        raise PriceError.unexpected("INVALID_RECORD", "object", record)
    return Price.from_dict(record)


def decode_prices(records: Any) -> list[Price]:
    """Decode a list of API response records, one price per record."""
    if not isinstance(records, list):
        raise PriceError.unexpected("INVALID_PAYLOAD", "array", records)

    prices: list[Price] = []
    for index, record in enumerate(records):
        try:
            prices.append(decode_price(record))
        except PriceError as exc:
            exc.index = index
            raise
    return prices


def decode_price_field(response: Any, key: str) -> Price | None:
    """Decode the price nested under ``key``, or ``None`` when it is absent."""
    if not isinstance(response, Mapping):
        raise PriceError.unexpected("INVALID_PAYLOAD", "object", response)
    if key not in response:
        return None
    try:
        return decode_price(response[key])
    except PriceError as exc:
        exc.key = key
        raise

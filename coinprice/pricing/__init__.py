"""Pricing package exports."""

from coinprice.pricing.decoder import (
    decode_price,
    decode_price_field,
    decode_prices,
)
from coinprice.pricing.exceptions import PriceError
from coinprice.pricing.models import Price

__all__ = [
    "Price",
    "PriceError",
    "decode_price",
    "decode_price_field",
    "decode_prices",
]

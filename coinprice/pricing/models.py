from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from coinprice.constants import (
    CENTS_KEY,
    CURRENCY_KEY,
    DEFAULT_AMOUNT_CENTS,
    DEFAULT_CURRENCY_CODE,
)


@dataclass(frozen=True)
class Price:
    # minor units, kept as the source wrote them
    amount_cents: str
    currency_code: str

    @classmethod
    def from_dict(cls, source: Any) -> Price:
        """Build a price from a decoded JSON object, defaulting absent fields.

        Values are coerced to text the way JSON renders scalars. ``None``,
        containers, non-finite numbers and other non-scalar values count as
        absent, and a ``source`` that is not a mapping is read as an empty
        one, so this never raises.
        """
        if not isinstance(source, Mapping):
            source = {}
        return cls(
            amount_cents=_text_or_default(
                source.get(CENTS_KEY), DEFAULT_AMOUNT_CENTS
            ),
            currency_code=_text_or_default(
                source.get(CURRENCY_KEY), DEFAULT_CURRENCY_CODE
            ),
        )

    def to_dict(self) -> dict[str, str]:
        """Render the price back to its wire keys."""
        return {
            CENTS_KEY: self.amount_cents,
            CURRENCY_KEY: self.currency_code,
        }


def _text_or_default(value: Any, default: str) -> str:
    if isinstance(value, str):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        # Decimal sidesteps the int-to-str digit limit
        return format(Decimal(value), "f")
    if isinstance(value, float):
        if not math.isfinite(value):
            return default
        return _float_text(format(Decimal(repr(value)), "f"))
    if isinstance(value, Decimal):
        if not value.is_finite():
            return default
        return format(value, "f")
    return default


def _float_text(text: str) -> str:
    # floats always keep a fractional part: 1e16 -> "10000000000000000.0"
    if "." not in text:
        return text + ".0"
    return text

from __future__ import annotations

import pytest

from coinprice.pricing import (
    Price,
    PriceError,
    decode_price,
    decode_price_field,
    decode_prices,
)


def test_decode_price_matches_from_dict() -> None:
    """Decode a record with the same defaults as Price.from_dict."""
    assert decode_price({"cents": 150}) == Price(
        amount_cents="150", currency_code="USD"
    )


def test_decode_price_rejects_non_object() -> None:
    """Raise INVALID_RECORD when the record is not a mapping."""
    with pytest.raises(PriceError) as exc_info:
        decode_price(["cents", "150"])

    assert exc_info.value.code == "INVALID_RECORD"
    assert exc_info.value.status_code == 400
    assert exc_info.value.details == {"type": "list"}


def test_decode_prices_one_price_per_record() -> None:
    """Decode each record of a response list in order."""
    prices = decode_prices(
        [
            {"cents": "100", "currency_iso": "USD"},
            {"currency_iso": "EUR"},
            {},
        ]
    )

    assert [p.amount_cents for p in prices] == ["100", "0", "0"]
    assert [p.currency_code for p in prices] == ["USD", "EUR", "USD"]


def test_decode_prices_empty_list() -> None:
    """Return no prices for an empty response list."""
    assert decode_prices([]) == []


def test_decode_prices_rejects_non_list() -> None:
    """Raise INVALID_PAYLOAD when the payload is not a list."""
    with pytest.raises(PriceError) as exc_info:
        decode_prices({"cents": "1"})

    assert exc_info.value.code == "INVALID_PAYLOAD"


def test_decode_prices_reports_bad_record_index() -> None:
    """Report the index of the first record that is not an object."""
    with pytest.raises(PriceError) as exc_info:
        decode_prices([{"cents": "1"}, {"cents": "2"}, "oops"])

    assert exc_info.value.code == "INVALID_RECORD"
    assert exc_info.value.details["index"] == 2
    assert exc_info.value.index == 2


def test_decode_price_field_nested_quote() -> None:
    """Decode prices nested under keys of a quote response."""
    quote = {
        "subtotal": {"cents": "10000", "currency_iso": "USD"},
        "fees": [{"coinbase": {"cents": "100", "currency_iso": "USD"}}],
        "total": {"cents": "10100", "currency_iso": "USD"},
    }

    subtotal = decode_price_field(quote, "subtotal")
    total = decode_price_field(quote, "total")

    assert subtotal == Price(amount_cents="10000", currency_code="USD")
    assert total == Price(amount_cents="10100", currency_code="USD")


def test_decode_price_field_absent_key() -> None:
    """Return None when the response has no such key."""
    assert decode_price_field({"total": {}}, "subtotal") is None


def test_decode_price_field_reports_field() -> None:
    """Name the offending field when the nested value is not an object."""
    with pytest.raises(PriceError) as exc_info:
        decode_price_field({"total": "10100"}, "total")

    assert exc_info.value.key == "total"
    assert exc_info.value.details == {"type": "str", "field": "total"}


@pytest.mark.parametrize("response", ["subtotal", 42, None, [{"cents": "1"}]])
def test_decode_price_field_rejects_non_object_response(
    response: object,
) -> None:
    """Raise INVALID_PAYLOAD when the response itself is not an object."""
    with pytest.raises(PriceError) as exc_info:
        decode_price_field(response, "subtotal")

    assert exc_info.value.code == "INVALID_PAYLOAD"
    assert exc_info.value.key is None

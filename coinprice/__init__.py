"""Price value objects decoded from Coinbase-style API payloads."""

from coinprice.pricing import Price, PriceError

__version__ = "0.1.0"

__all__ = ["Price", "PriceError", "__version__"]

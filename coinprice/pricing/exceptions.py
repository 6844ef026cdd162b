from __future__ import annotations

from typing import Any


class PriceError(Exception):
    """A price payload whose shape could not be decoded.

    ``key`` names the response field holding the bad value and ``index``
    its position in a record list; either is ``None`` when it does not
    apply. Field values never raise, they fall back to defaults.
    """

    status_code = 400

    def __init__(
        self,
        code: str,
        message: str,
        *,
        found: str,
        key: str | None = None,
        index: int | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.found = found
        self.key = key
        self.index = index

    @classmethod
    def unexpected(
        cls, code: str, expected: str, value: Any
    ) -> PriceError:
        found = type(value).__name__
        message = f"Expected a JSON {expected}, got {found}"
        return cls(code, message, found=found)

    @property
    def details(self) -> dict[str, Any]:
        details: dict[str, Any] = {"type": self.found}
        if self.key is not None:
            details["field"] = self.key
        if self.index is not None:
            details["index"] = self.index
        return details

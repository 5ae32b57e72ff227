"""Domain error taxonomy."""

from typing import Any


class FinanceError(Exception):
    """Base class for finance dashboard errors."""


class SettlementValidationError(FinanceError, ValueError):
    """Raised when a settlement request cannot be submitted."""

    def __init__(self, messages: list[str]) -> None:
        super().__init__("; ".join(messages))
        self.messages = list(messages)


class HoldingNotFoundError(FinanceError, LookupError):
    """Raised when a holding does not exist for the current user."""


class StoreWriteError(FinanceError, RuntimeError):
    """Raised when the data store rejects a write."""


class PriceFeedError(FinanceError, RuntimeError):
    """Raised when the external price feed cannot provide a price."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        payload: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


__all__ = [
    "FinanceError",
    "SettlementValidationError",
    "HoldingNotFoundError",
    "StoreWriteError",
    "PriceFeedError",
]

"""Port for the external price feed."""

from decimal import Decimal
from typing import Protocol


class PriceFeedPort(Protocol):
    """Best-effort source of current unit prices."""

    def fetch_price(self, coin_ref: str, currency: str) -> Decimal:
        """Return the current unit price of a coin in ``currency``.

        Raises:
            PriceFeedError: When no price can be obtained.
        """


__all__ = ["PriceFeedPort"]

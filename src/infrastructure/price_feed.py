"""CoinGecko-backed price feed adapter."""

from decimal import Decimal, InvalidOperation
from typing import Any

import requests

from src.application.ports.price_feed import PriceFeedPort
from src.domain.errors import PriceFeedError

DEFAULT_BASE_URL = "https://api.coingecko.com/api/v3"


class CoinGeckoPriceFeed(PriceFeedPort):
    """Minimal CoinGecko client for current unit prices."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        api_key: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root, without trailing slash.
            timeout: Request timeout in seconds.
            api_key: Optional demo API key sent as a header.
            session: Optional requests session, injected in tests.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.api_key = api_key
        self._session = session or requests.Session()

    def fetch_price(self, coin_ref: str, currency: str) -> Decimal:
        """Return the current unit price of ``coin_ref`` in ``currency``.

        Args:
            coin_ref: CoinGecko coin identifier (e.g. ``bitcoin``).
            currency: Quote currency code.

        Returns:
            Decimal: Positive unit price.

        Raises:
            PriceFeedError: If the request fails or the payload has no usable
                price.
        """
        if not coin_ref:
            raise PriceFeedError("coin_ref must be provided")
        vs_currency = currency.strip().lower()
        payload = self._request(
            "/simple/price",
            params={"ids": coin_ref, "vs_currencies": vs_currency},
        )
        coin_prices = payload.get(coin_ref)
        if not isinstance(coin_prices, dict) or vs_currency not in coin_prices:
            raise PriceFeedError(
                f"No {vs_currency} price for {coin_ref}", payload=payload
            )
        price = self._to_decimal(coin_prices[vs_currency])
        if price is None or price <= 0:
            raise PriceFeedError(
                f"Invalid price for {coin_ref}: {coin_prices[vs_currency]!r}",
                payload=payload,
            )
        return price

    def _request(
        self, path: str, *, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        headers = {"accept": "application/json"}
        if self.api_key:
            headers["x-cg-demo-api-key"] = self.api_key
        try:
            response = self._session.get(
                url,
                params=params,
                timeout=self.timeout,
                headers=headers,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            resp = exc.response
            status_code = getattr(resp, "status_code", None)
            error_payload: Any | None = None
            if resp is not None:
                try:
                    error_payload = resp.json()
                except ValueError:
                    error_payload = resp.text
            raise PriceFeedError(
                "Price feed request failed",
                status_code=status_code,
                payload=error_payload,
            ) from exc
        except requests.RequestException as exc:
            status_code = getattr(
                getattr(exc, "response", None), "status_code", None
            )
            raise PriceFeedError(
                "Price feed request failed", status_code=status_code
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise PriceFeedError(
                "Price feed returned invalid JSON", payload=response.text
            ) from exc
        if not isinstance(payload, dict):
            raise PriceFeedError(
                "Price feed returned unexpected payload type", payload=payload
            )
        return payload

    @staticmethod
    def _to_decimal(value: Any) -> Decimal | None:
        if value is None or isinstance(value, bool):
            return None
        try:
            return Decimal(str(value))
        except InvalidOperation:
            return None


__all__ = ["CoinGeckoPriceFeed", "DEFAULT_BASE_URL"]

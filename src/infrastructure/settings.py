"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

import dotenv

from src.domain.constants import DEFAULT_CURRENCY
from src.domain.services.normalization import normalize_currency
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.price_feed import DEFAULT_BASE_URL

DEFAULT_PRICE_FEED_TIMEOUT = 10.0


@dataclass(frozen=True)
class FinanceSettings:
    """Settings for the finance dashboard adapters.

    Attributes:
        currency_code: Display and valuation currency.
        user_id: Identity used when no session provider is wired.
        price_feed_base_url: Root URL of the price API.
        price_feed_timeout: Request timeout in seconds.
        price_feed_api_key: Optional price API key.
    """

    currency_code: str = DEFAULT_CURRENCY
    user_id: Optional[str] = None
    price_feed_base_url: str = DEFAULT_BASE_URL
    price_feed_timeout: float = DEFAULT_PRICE_FEED_TIMEOUT
    price_feed_api_key: Optional[str] = None

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        currency_code = normalize_currency(
            os.getenv("FINANCE_CURRENCY"), DEFAULT_CURRENCY
        )
        user_id = (os.getenv("FINANCE_USER_ID") or "").strip() or None
        base_url = (
            os.getenv("PRICE_FEED_BASE_URL") or ""
        ).strip() or DEFAULT_BASE_URL
        timeout = cls._parse_timeout(
            os.getenv("PRICE_FEED_TIMEOUT"), logger=logger
        )
        api_key = (os.getenv("PRICE_FEED_API_KEY") or "").strip() or None
        return cls(
            currency_code=currency_code,
            user_id=user_id,
            price_feed_base_url=base_url,
            price_feed_timeout=timeout,
            price_feed_api_key=api_key,
        )

    @staticmethod
    def _parse_timeout(raw_value: Optional[str], logger) -> float:
        """Parse the price feed timeout, falling back to the default.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            float: Positive timeout in seconds.
        """
        if raw_value is None or not raw_value.strip():
            return DEFAULT_PRICE_FEED_TIMEOUT
        try:
            timeout = float(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid PRICE_FEED_TIMEOUT {raw_value!r}; "
                f"using {DEFAULT_PRICE_FEED_TIMEOUT}"
            )
            return DEFAULT_PRICE_FEED_TIMEOUT
        if timeout <= 0:
            logger.warning(
                f"PRICE_FEED_TIMEOUT must be positive; "
                f"using {DEFAULT_PRICE_FEED_TIMEOUT}"
            )
            return DEFAULT_PRICE_FEED_TIMEOUT
        return timeout


__all__ = ["FinanceSettings", "DEFAULT_PRICE_FEED_TIMEOUT"]

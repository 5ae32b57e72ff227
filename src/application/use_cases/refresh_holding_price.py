"""Use case to refresh unit prices of holdings from the price feed."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from src.application.ports.holdings_repository import HoldingsRepositoryPort
from src.application.ports.price_feed import PriceFeedPort
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.errors import (
    HoldingNotFoundError,
    PriceFeedError,
    StoreWriteError,
)
from src.domain.models import Holding
from src.domain.services.valuation import apply_price, is_unit_denominated
from src.infrastructure.logging.logger import get_app_logger


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class PriceRefreshResult:
    """Outcome of a price refresh.

    Attributes:
        holding: The refreshed holding, or the untouched one on failure.
        refreshed: Whether a new price was applied.
        warning: Non-fatal message explaining why no price was applied.
        error: Store failure message when the new price could not be saved.
    """

    holding: Holding
    refreshed: bool
    warning: str | None = None
    error: str | None = None


class RefreshHoldingPriceUseCase:
    """Refresh ``current_price`` and ``value`` from the external feed.

    Feed failures never block the holding: the stored state is left as is
    and the result carries a warning instead.
    """

    def __init__(
        self,
        holdings_repository: HoldingsRepositoryPort,
        price_feed: PriceFeedPort,
        logger=None,
        currency_code: str = DEFAULT_CURRENCY,
        now: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the use case.

        Args:
            holdings_repository: Port reading and persisting holdings.
            price_feed: Port returning current unit prices.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_code: Currency prices are requested in.
            now: Clock used for ``updated_at``.
        """
        self._holdings_repository = holdings_repository
        self._price_feed = price_feed
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code
        self._now = now

    def quote(self, holding: Holding) -> PriceRefreshResult:
        """Return the holding valued at the latest price, without saving.

        Args:
            holding: Holding being edited.

        Returns:
            PriceRefreshResult: Priced copy or the untouched holding plus a
            warning.
        """
        if not is_unit_denominated(holding):
            return PriceRefreshResult(
                holding=holding,
                refreshed=False,
                warning=f"{holding.name} is not priced per unit.",
            )
        if not holding.coin_ref:
            return PriceRefreshResult(
                holding=holding,
                refreshed=False,
                warning=f"{holding.name} has no price-feed identifier.",
            )
        try:
            price = self._price_feed.fetch_price(
                holding.coin_ref,
                self._currency_code,
            )
            priced = apply_price(holding, price, updated_at=self._now())
        except (PriceFeedError, ValueError) as exc:
            self._logger.warning(
                f"Price refresh failed for {holding.coin_ref}: {exc}"
            )
            return PriceRefreshResult(
                holding=holding,
                refreshed=False,
                warning=f"Could not fetch the latest price: {exc}",
            )
        return PriceRefreshResult(holding=priced, refreshed=True)

    def execute(self, user_id: str, holding_id: str) -> PriceRefreshResult:
        """Refresh one stored holding and persist it on success.

        Args:
            user_id: Identity of the current user.
            holding_id: Holding to refresh.

        Returns:
            PriceRefreshResult: Outcome of the refresh.

        Raises:
            HoldingNotFoundError: If the holding does not exist.
        """
        holding = self._holdings_repository.fetch_holding(user_id, holding_id)
        if holding is None:
            raise HoldingNotFoundError(f"Holding not found: {holding_id}")
        return self._refresh_and_save(user_id, holding)

    def execute_all(self, user_id: str) -> list[PriceRefreshResult]:
        """Refresh every unit-denominated holding that has a feed identifier.

        Args:
            user_id: Identity of the current user.

        Returns:
            list[PriceRefreshResult]: One result per candidate holding.
        """
        holdings = self._holdings_repository.fetch_holdings(user_id)
        candidates = [
            holding
            for holding in holdings
            if is_unit_denominated(holding) and holding.coin_ref
        ]
        results = [
            self._refresh_and_save(user_id, holding) for holding in candidates
        ]
        refreshed = sum(1 for result in results if result.refreshed)
        self._logger.info(
            f"Refreshed prices for {refreshed}/{len(candidates)} holdings"
        )
        return results

    def _refresh_and_save(
        self,
        user_id: str,
        holding: Holding,
    ) -> PriceRefreshResult:
        result = self.quote(holding)
        if not result.refreshed:
            return result
        try:
            stored = self._holdings_repository.save_holding(
                user_id,
                result.holding,
            )
        except StoreWriteError as exc:
            self._logger.error(
                f"Saving refreshed price failed for holding id={holding.id}: "
                f"{exc}"
            )
            return PriceRefreshResult(
                holding=holding,
                refreshed=False,
                error=f"Could not save the new price: {exc}",
            )
        self._logger.info(
            f"Price refreshed for holding id={stored.id}: "
            f"price={stored.current_price}, value={stored.value}"
        )
        return PriceRefreshResult(holding=stored, refreshed=True)


__all__ = ["RefreshHoldingPriceUseCase", "PriceRefreshResult"]

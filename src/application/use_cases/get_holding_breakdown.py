"""Use case to compute holding subtotals per kind."""

from src.application.ports.holdings_repository import HoldingsRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models import HoldingBreakdown, HoldingKindAmount
from src.domain.services.finance import compute_holding_breakdown
from src.infrastructure.logging.logger import get_app_logger


class GetHoldingBreakdownUseCase:
    """Compute the per-kind breakdown used by category displays."""

    def __init__(
        self,
        holdings_repository: HoldingsRepositoryPort,
        logger=None,
        currency_code: str = DEFAULT_CURRENCY,
    ) -> None:
        self._holdings_repository = holdings_repository
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code

    def execute(
        self,
        user_id: str,
        include_empty: bool = False,
    ) -> HoldingBreakdown:
        """Return subtotals per holding kind.

        Args:
            user_id: Identity of the current user.
            include_empty: Also list kinds without holdings.

        Returns:
            HoldingBreakdown: Unsigned subtotals per kind.
        """
        holdings = self._holdings_repository.fetch_holdings(user_id)
        breakdown = compute_holding_breakdown(
            holdings,
            currency_code=self._currency_code,
            include_empty=include_empty,
        )
        self._logger.info(
            f"Holding breakdown computed for {len(breakdown.kinds)} kinds"
        )
        return breakdown


__all__ = [
    "GetHoldingBreakdownUseCase",
    "HoldingBreakdown",
    "HoldingKindAmount",
]

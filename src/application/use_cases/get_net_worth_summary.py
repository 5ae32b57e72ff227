"""Use case to compute net worth from the user's holdings."""

from typing import Iterable

from src.application.ports.holdings_repository import HoldingsRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY, LIABILITY_KINDS
from src.domain.models import NetWorthSummary
from src.domain.services.finance import compute_net_worth_summary
from src.infrastructure.logging.logger import get_app_logger


class GetNetWorthSummaryUseCase:
    """Compute net worth from the holdings repository."""

    def __init__(
        self,
        holdings_repository: HoldingsRepositoryPort,
        logger=None,
        currency_code: str = DEFAULT_CURRENCY,
        liability_kinds: Iterable[str] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            holdings_repository: Port providing the user's holdings.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_code: Currency of the system.
            liability_kinds: Optional iterable of kinds subtracted from the
                total.
        """
        self._holdings_repository = holdings_repository
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code
        self._liability_kinds = tuple(liability_kinds or LIABILITY_KINDS)

    def execute(self, user_id: str) -> NetWorthSummary:
        """Return the net worth summary.

        Args:
            user_id: Identity of the current user.

        Returns:
            NetWorthSummary: Computed asset, liability, and net worth totals.
        """
        holdings = self._holdings_repository.fetch_holdings(user_id)
        summary = compute_net_worth_summary(
            holdings,
            currency_code=self._currency_code,
            logger=self._logger,
            liability_kinds=self._liability_kinds,
        )
        self._logger.info(
            f"Net worth computed: assets={summary.asset_total}, "
            f"liabilities={summary.liability_total}"
        )
        return summary


__all__ = ["GetNetWorthSummaryUseCase", "NetWorthSummary"]

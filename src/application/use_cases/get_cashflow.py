"""Use cases to compute income/expense totals for a period."""

from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models import CashflowSummary, MonthlyCashflow
from src.domain.services.finance import (
    compute_cashflow_summary,
    compute_monthly_cashflow,
)
from src.infrastructure.logging.logger import get_app_logger


class GetCashflowSummaryUseCase:
    """Compute total income, expense and their difference."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        currency_code: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger entries.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_code: Currency of the system.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code

    def execute(
        self,
        user_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> CashflowSummary:
        """Return cashflow totals for the window.

        Args:
            user_id: Identity of the current user.
            start_date: Optional lower bound for entry dates.
            end_date: Optional upper bound for entry dates.

        Returns:
            CashflowSummary: Income and expense totals.
        """
        entries = self._ledger_repository.fetch_entries(
            user_id,
            start_date,
            end_date,
        )
        summary = compute_cashflow_summary(
            entries,
            currency_code=self._currency_code,
        )
        self._logger.info(
            f"Cashflow totals computed: in={summary.total_in}, "
            f"out={summary.total_out}, entries={len(entries)}"
        )
        return summary


class GetMonthlyCashflowUseCase:
    """Compute income and expense per calendar month."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[MonthlyCashflow]:
        entries = self._ledger_repository.fetch_entries(
            user_id,
            start_date,
            end_date,
        )
        months = compute_monthly_cashflow(entries)
        self._logger.info(f"Monthly cashflow computed for {len(months)} months")
        return months


__all__ = [
    "GetCashflowSummaryUseCase",
    "GetMonthlyCashflowUseCase",
    "CashflowSummary",
    "MonthlyCashflow",
]

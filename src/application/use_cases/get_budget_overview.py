"""Use case to compute monthly budget progress."""

from datetime import date

from src.application.ports.ledger_repository import (
    BudgetsRepositoryPort,
    LedgerRepositoryPort,
)
from src.application.use_cases.periods import month_bounds
from src.domain.constants import DEFAULT_CURRENCY, EXPENSE
from src.domain.models import BudgetOverview
from src.domain.services.finance import compute_budget_overview
from src.infrastructure.logging.logger import get_app_logger


class GetBudgetOverviewUseCase:
    """Compare current-month expenses with each budget."""

    def __init__(
        self,
        budgets_repository: BudgetsRepositoryPort,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        currency_code: str = DEFAULT_CURRENCY,
    ) -> None:
        self._budgets_repository = budgets_repository
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code

    def execute(self, user_id: str, today: date) -> BudgetOverview:
        """Return budget progress for the month containing ``today``.

        Args:
            user_id: Identity of the current user.
            today: Reference date selecting the budget month.

        Returns:
            BudgetOverview: Spent amounts per budget and overall totals.
        """
        start_date, end_date = month_bounds(today)
        budgets = self._budgets_repository.fetch_budgets(user_id)
        entries = self._ledger_repository.fetch_entries(
            user_id,
            start_date,
            end_date,
            direction=EXPENSE,
        )
        overview = compute_budget_overview(
            budgets,
            entries,
            currency_code=self._currency_code,
        )
        over = [
            item.category_name
            for item in overview.items
            if item.is_over_budget
        ]
        if over:
            self._logger.warning(f"Budgets exceeded: {', '.join(over)}")
        return overview


__all__ = ["GetBudgetOverviewUseCase", "BudgetOverview"]

"""Use case to break ledger amounts down by category."""

from datetime import date

from src.application.ports.ledger_repository import (
    CategoriesRepositoryPort,
    LedgerRepositoryPort,
)
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models import CategoryBreakdown
from src.domain.services.finance import compute_category_breakdown
from src.domain.services.normalization import normalize_direction
from src.infrastructure.logging.logger import get_app_logger


class GetCategoryBreakdownUseCase:
    """Compute per-category totals for income or expense entries."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        categories_repository: CategoriesRepositoryPort,
        logger=None,
        currency_code: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger entries.
            categories_repository: Port providing category names.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_code: Currency of the system.
        """
        self._ledger_repository = ledger_repository
        self._categories_repository = categories_repository
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code

    def execute(
        self,
        user_id: str,
        direction: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> CategoryBreakdown:
        """Return the breakdown for one direction.

        Args:
            user_id: Identity of the current user.
            direction: ``income`` or ``expense``.
            start_date: Optional lower bound for entry dates.
            end_date: Optional upper bound for entry dates.

        Returns:
            CategoryBreakdown: Category totals sorted by amount.
        """
        direction = normalize_direction(direction)
        entries = self._ledger_repository.fetch_entries(
            user_id,
            start_date,
            end_date,
            direction=direction,
        )
        categories = self._categories_repository.fetch_categories(user_id)
        breakdown = compute_category_breakdown(
            entries,
            categories,
            direction=direction,
            currency_code=self._currency_code,
        )
        self._logger.info(
            f"Category breakdown computed: direction={direction}, "
            f"categories={len(breakdown.categories)}"
        )
        return breakdown


__all__ = ["GetCategoryBreakdownUseCase", "CategoryBreakdown"]

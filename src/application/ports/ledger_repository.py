"""Port for ledger entries, categories and budgets."""

from datetime import date
from typing import Protocol

from src.domain.models import Budget, Category, LedgerEntry


class LedgerRepositoryPort(Protocol):
    """Port exposing ledger reads and writes."""

    def fetch_entries(
        self,
        user_id: str,
        start_date: date | None,
        end_date: date | None,
        direction: str | None = None,
    ) -> list[LedgerEntry]:
        """Return entries in the window, oldest first."""

    def insert_entry(self, user_id: str, entry: LedgerEntry) -> LedgerEntry:
        """Insert an entry and return it with its identifier."""

    def delete_entry(self, user_id: str, entry_id: str) -> None:
        """Delete an entry."""


class CategoriesRepositoryPort(Protocol):
    """Port exposing ledger categories."""

    def fetch_categories(
        self,
        user_id: str,
        direction: str | None = None,
    ) -> list[Category]:
        """Return categories, optionally for one direction, sorted by name."""


class BudgetsRepositoryPort(Protocol):
    """Port exposing monthly budgets."""

    def fetch_budgets(self, user_id: str) -> list[Budget]:
        """Return budgets joined with their category names."""


__all__ = [
    "LedgerRepositoryPort",
    "CategoriesRepositoryPort",
    "BudgetsRepositoryPort",
]

"""Port for holdings persistence."""

from typing import Protocol

from src.domain.models import Holding, LedgerEntry


class HoldingsRepositoryPort(Protocol):
    """Port exposing reads and writes of a user's holdings."""

    def fetch_holdings(self, user_id: str) -> list[Holding]:
        """Return every holding of the user."""

    def fetch_holding(self, user_id: str, holding_id: str) -> Holding | None:
        """Return one holding, or None when it does not exist."""

    def save_holding(self, user_id: str, holding: Holding) -> Holding:
        """Insert or update a holding and return the stored version."""

    def delete_holding(self, user_id: str, holding_id: str) -> None:
        """Delete a holding."""

    def apply_settlement(
        self,
        user_id: str,
        holding: Holding,
        entry: LedgerEntry | None,
    ) -> LedgerEntry | None:
        """Persist a settled holding and its optional ledger entry.

        Both writes commit together or not at all. Returns the stored entry.
        """


__all__ = ["HoldingsRepositoryPort"]

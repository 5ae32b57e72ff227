"""Use cases to record, list and delete ledger entries."""

from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import LedgerEntry
from src.domain.services.normalization import normalize_direction
from src.infrastructure.logging.logger import get_app_logger


class RecordLedgerEntryUseCase:
    """Validate and store a manual income or expense entry."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port persisting ledger entries.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, entry: LedgerEntry) -> LedgerEntry:
        """Store the entry and return it with its identifier.

        Raises:
            ValueError: If the amount is not positive or the direction is
                unknown.
            StoreWriteError: If the store rejects the write.
        """
        if entry.amount is None or entry.amount <= 0:
            raise ValueError("Amount must be greater than zero")
        direction = normalize_direction(entry.direction)
        stored = self._ledger_repository.insert_entry(
            user_id,
            LedgerEntry(
                direction=direction,
                amount=entry.amount,
                entry_date=entry.entry_date,
                category_ref=entry.category_ref,
                holding_ref=entry.holding_ref,
                description=(entry.description or "").strip() or None,
                id=entry.id,
            ),
        )
        self._logger.info(
            f"Recorded {direction} entry id={stored.id} amount={stored.amount}"
        )
        return stored


class GetRecentEntriesUseCase:
    """Return the latest ledger entries, newest first."""

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
        limit: int = 10,
    ) -> list[LedgerEntry]:
        """Return at most ``limit`` entries of the window.

        Args:
            user_id: Identity of the current user.
            start_date: Optional lower bound for entry dates.
            end_date: Optional upper bound for entry dates.
            limit: Maximum number of entries.

        Returns:
            list[LedgerEntry]: Entries sorted by date, newest first.
        """
        entries = self._ledger_repository.fetch_entries(
            user_id,
            start_date,
            end_date,
        )
        recent = list(reversed(entries))[: max(limit, 0)]
        self._logger.info(
            f"Loaded {len(recent)} recent entries out of {len(entries)}"
        )
        return recent


class DeleteLedgerEntryUseCase:
    """Delete a ledger entry.

    Holdings are not adjusted: a settlement stays applied even when its
    entry is removed.
    """

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, entry_id: str) -> None:
        """Delete the entry.

        Raises:
            ValueError: If no entry identifier is given.
            StoreWriteError: If the store rejects the delete.
        """
        if not entry_id:
            raise ValueError("Entry identifier is required")
        self._ledger_repository.delete_entry(user_id, entry_id)
        self._logger.info(f"Deleted ledger entry id={entry_id}")


__all__ = [
    "RecordLedgerEntryUseCase",
    "GetRecentEntriesUseCase",
    "DeleteLedgerEntryUseCase",
]

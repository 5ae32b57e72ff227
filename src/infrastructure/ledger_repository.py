"""SQLAlchemy-backed repositories for ledger entries, categories and budgets."""

import uuid

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import (
    BudgetsRepositoryPort,
    CategoriesRepositoryPort,
    LedgerRepositoryPort,
)
from src.domain.errors import StoreWriteError
from src.domain.models import Budget, Category, LedgerEntry
from src.infrastructure.holdings_repository import (
    INSERT_LEDGER_ENTRY_SQL,
    ledger_entry_params,
)
from src.infrastructure.sql_values import from_sql_date
from src.utils.decimal_utils import coerce_decimal


SELECT_ENTRIES_SQL = """
    SELECT id, direction, amount, category_ref, holding_ref, description,
           entry_date
    FROM ledger_entries
    WHERE user_id = :user_id
"""

DELETE_ENTRY_SQL = text(
    "DELETE FROM ledger_entries WHERE user_id = :user_id AND id = :id"
)

SELECT_CATEGORIES_SQL = """
    SELECT id, name, direction
    FROM categories
    WHERE user_id = :user_id
"""

SELECT_BUDGETS_SQL = text(
    """
    SELECT b.id, b.category_ref, b.amount, c.name AS category_name
    FROM budgets b
    LEFT JOIN categories c ON c.id = b.category_ref
    WHERE b.user_id = :user_id
    ORDER BY c.name
    """
)


def _build_entries_query(start_date, end_date, direction) -> tuple[str, dict]:
    """Append the optional window and direction filters."""
    sql = SELECT_ENTRIES_SQL
    params: dict = {}
    if start_date is not None:
        sql += " AND entry_date >= :start_date"
        params["start_date"] = start_date.isoformat()
    if end_date is not None:
        sql += " AND entry_date <= :end_date"
        params["end_date"] = end_date.isoformat()
    if direction is not None:
        sql += " AND direction = :direction"
        params["direction"] = direction
    sql += " ORDER BY entry_date, id"
    return sql, params


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for ledger entries."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_entries(
        self,
        user_id: str,
        start_date=None,
        end_date=None,
        direction: str | None = None,
    ) -> list[LedgerEntry]:
        """Return entries inside the inclusive date window, oldest first.

        Args:
            user_id: Owner of the entries.
            start_date: Optional first day of the window.
            end_date: Optional last day of the window.
            direction: Optional income/expense filter.

        Returns:
            list[LedgerEntry]: Matching entries.
        """
        sql, params = _build_entries_query(start_date, end_date, direction)
        params["user_id"] = user_id
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(text(sql), params).all()
        return [
            LedgerEntry(
                id=str(row.id),
                direction=row.direction,
                amount=coerce_decimal(row.amount),
                category_ref=row.category_ref,
                holding_ref=row.holding_ref,
                description=row.description,
                entry_date=from_sql_date(row.entry_date),
            )
            for row in rows
        ]

    def insert_entry(self, user_id: str, entry: LedgerEntry) -> LedgerEntry:
        """Insert an entry, assigning an identifier when missing.

        Raises:
            StoreWriteError: If the data store rejects the write.
        """
        stored = LedgerEntry(
            direction=entry.direction,
            amount=entry.amount,
            entry_date=entry.entry_date,
            category_ref=entry.category_ref,
            holding_ref=entry.holding_ref,
            description=entry.description,
            id=entry.id or str(uuid.uuid4()),
        )
        engine = self._db_port.get_finance_engine()
        try:
            with engine.begin() as conn:
                conn.execute(
                    INSERT_LEDGER_ENTRY_SQL,
                    ledger_entry_params(user_id, stored),
                )
        except SQLAlchemyError as exc:
            raise StoreWriteError(
                f"Failed to insert ledger entry: {exc}"
            ) from exc
        return stored

    def delete_entry(self, user_id: str, entry_id: str) -> None:
        """Delete a ledger entry.

        Raises:
            StoreWriteError: If the data store rejects the delete.
        """
        engine = self._db_port.get_finance_engine()
        try:
            with engine.begin() as conn:
                conn.execute(
                    DELETE_ENTRY_SQL, {"user_id": user_id, "id": entry_id}
                )
        except SQLAlchemyError as exc:
            raise StoreWriteError(
                f"Failed to delete ledger entry {entry_id}: {exc}"
            ) from exc


class SqlAlchemyCategoriesRepository(CategoriesRepositoryPort):
    """Repository backed by SQLAlchemy for ledger categories."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def fetch_categories(
        self,
        user_id: str,
        direction: str | None = None,
    ) -> list[Category]:
        """Return the user's categories sorted by name."""
        sql = SELECT_CATEGORIES_SQL
        params = {"user_id": user_id}
        if direction is not None:
            sql += " AND direction = :direction"
            params["direction"] = direction
        sql += " ORDER BY name"
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(text(sql), params).all()
        return [
            Category(id=str(row.id), name=row.name, direction=row.direction)
            for row in rows
        ]


class SqlAlchemyBudgetsRepository(BudgetsRepositoryPort):
    """Repository backed by SQLAlchemy for monthly budgets."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def fetch_budgets(self, user_id: str) -> list[Budget]:
        """Return budgets joined with their category names."""
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_BUDGETS_SQL, {"user_id": user_id}).all()
        return [
            Budget(
                id=str(row.id),
                category_ref=row.category_ref,
                amount=coerce_decimal(row.amount),
                category_name=row.category_name,
            )
            for row in rows
        ]


__all__ = [
    "SqlAlchemyLedgerRepository",
    "SqlAlchemyCategoriesRepository",
    "SqlAlchemyBudgetsRepository",
]

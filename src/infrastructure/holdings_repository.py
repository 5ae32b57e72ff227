"""SQLAlchemy-backed repository for holdings."""

from datetime import datetime, timezone
import uuid

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.holdings_repository import HoldingsRepositoryPort
from src.domain.errors import StoreWriteError
from src.domain.models import Holding, LedgerEntry
from src.domain.policies.unit_fields import resolve_unit_flag
from src.infrastructure.sql_values import (
    from_sql_datetime,
    to_sql_datetime,
    to_sql_number,
)
from src.utils.decimal_utils import coerce_decimal, coerce_optional_decimal


HOLDING_COLUMNS = """
    id, kind, name, value, quantity, buy_price, current_price, coin_ref,
    currency, description, unit_denominated, updated_at
"""

SELECT_HOLDINGS_SQL = text(
    f"""
    SELECT {HOLDING_COLUMNS}
    FROM holdings
    WHERE user_id = :user_id
    ORDER BY name
    """
)

SELECT_HOLDING_SQL = text(
    f"""
    SELECT {HOLDING_COLUMNS}
    FROM holdings
    WHERE user_id = :user_id AND id = :id
    """
)

UPDATE_HOLDING_SQL = text(
    """
    UPDATE holdings
    SET kind = :kind,
        name = :name,
        value = :value,
        quantity = :quantity,
        buy_price = :buy_price,
        current_price = :current_price,
        coin_ref = :coin_ref,
        currency = :currency,
        description = :description,
        unit_denominated = :unit_denominated,
        updated_at = :updated_at
    WHERE user_id = :user_id AND id = :id
    """
)

INSERT_HOLDING_SQL = text(
    """
    INSERT INTO holdings (
        id, user_id, kind, name, value, quantity, buy_price, current_price,
        coin_ref, currency, description, unit_denominated, updated_at
    )
    VALUES (
        :id, :user_id, :kind, :name, :value, :quantity, :buy_price,
        :current_price, :coin_ref, :currency, :description,
        :unit_denominated, :updated_at
    )
    """
)

DELETE_HOLDING_SQL = text(
    "DELETE FROM holdings WHERE user_id = :user_id AND id = :id"
)

SETTLE_HOLDING_SQL = text(
    """
    UPDATE holdings
    SET value = :value,
        quantity = :quantity,
        updated_at = :updated_at
    WHERE user_id = :user_id AND id = :id
    """
)

INSERT_LEDGER_ENTRY_SQL = text(
    """
    INSERT INTO ledger_entries (
        id, user_id, direction, amount, category_ref, holding_ref,
        description, entry_date, created_at
    )
    VALUES (
        :id, :user_id, :direction, :amount, :category_ref, :holding_ref,
        :description, :entry_date, :created_at
    )
    """
)


def holding_from_row(row) -> Holding:
    """Map a ``holdings`` row to the domain model."""
    return Holding(
        id=str(row.id),
        kind=row.kind,
        name=row.name,
        value=coerce_decimal(row.value),
        quantity=coerce_optional_decimal(row.quantity),
        buy_price=coerce_optional_decimal(row.buy_price),
        current_price=coerce_optional_decimal(row.current_price),
        coin_ref=row.coin_ref,
        currency=row.currency,
        description=row.description,
        updated_at=from_sql_datetime(row.updated_at),
        unit_denominated=resolve_unit_flag(
            row.kind, row.unit_denominated, row.coin_ref
        ),
    )


def holding_params(user_id: str, holding: Holding) -> dict:
    """Build bind parameters for a holding write."""
    return {
        "id": holding.id,
        "user_id": user_id,
        "kind": holding.kind,
        "name": holding.name,
        "value": to_sql_number(holding.value),
        "quantity": to_sql_number(holding.quantity),
        "buy_price": to_sql_number(holding.buy_price),
        "current_price": to_sql_number(holding.current_price),
        "coin_ref": holding.coin_ref,
        "currency": holding.currency,
        "description": holding.description,
        "unit_denominated": holding.unit_denominated,
        "updated_at": to_sql_datetime(holding.updated_at),
    }


def ledger_entry_params(user_id: str, entry: LedgerEntry) -> dict:
    """Build bind parameters for a ledger entry insert."""
    return {
        "id": entry.id,
        "user_id": user_id,
        "direction": entry.direction,
        "amount": to_sql_number(entry.amount),
        "category_ref": entry.category_ref,
        "holding_ref": entry.holding_ref,
        "description": entry.description,
        "entry_date": entry.entry_date.isoformat(),
        "created_at": to_sql_datetime(datetime.now(timezone.utc)),
    }


class SqlAlchemyHoldingsRepository(HoldingsRepositoryPort):
    """Repository backed by SQLAlchemy for user holdings."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_holdings(self, user_id: str) -> list[Holding]:
        """Return every holding of the user ordered by name."""
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_HOLDINGS_SQL, {"user_id": user_id}
            ).all()
        return [holding_from_row(row) for row in rows]

    def fetch_holding(self, user_id: str, holding_id: str) -> Holding | None:
        """Return one holding or None when it does not exist."""
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_HOLDING_SQL, {"user_id": user_id, "id": holding_id}
            ).first()
        if row is None:
            return None
        return holding_from_row(row)

    def save_holding(self, user_id: str, holding: Holding) -> Holding:
        """Update the holding, inserting it when it does not exist yet.

        Raises:
            StoreWriteError: If the data store rejects the write.
        """
        params = holding_params(user_id, holding)
        engine = self._db_port.get_finance_engine()
        try:
            with engine.begin() as conn:
                result = conn.execute(UPDATE_HOLDING_SQL, params)
                if result.rowcount == 0:
                    conn.execute(INSERT_HOLDING_SQL, params)
        except SQLAlchemyError as exc:
            raise StoreWriteError(
                f"Failed to save holding {holding.id}: {exc}"
            ) from exc
        return holding

    def delete_holding(self, user_id: str, holding_id: str) -> None:
        """Delete a holding of the user.

        Raises:
            StoreWriteError: If the data store rejects the delete.
        """
        engine = self._db_port.get_finance_engine()
        try:
            with engine.begin() as conn:
                conn.execute(
                    DELETE_HOLDING_SQL, {"user_id": user_id, "id": holding_id}
                )
        except SQLAlchemyError as exc:
            raise StoreWriteError(
                f"Failed to delete holding {holding_id}: {exc}"
            ) from exc

    def apply_settlement(
        self,
        user_id: str,
        holding: Holding,
        entry: LedgerEntry | None,
    ) -> LedgerEntry | None:
        """Write the settled holding and its ledger entry in one transaction.

        Args:
            user_id: Owner of the holding.
            holding: Holding carrying the post-settlement value and quantity.
            entry: Ledger entry to record, or None.

        Returns:
            LedgerEntry | None: The stored entry with its identifier.

        Raises:
            StoreWriteError: If either write fails or the holding vanished.
                Nothing is committed in that case.
        """
        stored_entry = None
        if entry is not None:
            stored_entry = LedgerEntry(
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
                result = conn.execute(
                    SETTLE_HOLDING_SQL,
                    {
                        "user_id": user_id,
                        "id": holding.id,
                        "value": to_sql_number(holding.value),
                        "quantity": to_sql_number(holding.quantity),
                        "updated_at": to_sql_datetime(holding.updated_at),
                    },
                )
                if result.rowcount == 0:
                    raise StoreWriteError(
                        f"Holding {holding.id} no longer exists"
                    )
                if stored_entry is not None:
                    conn.execute(
                        INSERT_LEDGER_ENTRY_SQL,
                        ledger_entry_params(user_id, stored_entry),
                    )
        except SQLAlchemyError as exc:
            raise StoreWriteError(
                f"Failed to settle holding {holding.id}: {exc}"
            ) from exc
        return stored_entry


__all__ = [
    "SqlAlchemyHoldingsRepository",
    "holding_from_row",
    "holding_params",
    "ledger_entry_params",
]

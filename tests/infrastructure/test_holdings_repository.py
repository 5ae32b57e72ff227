"""Tests for the SQLAlchemy holdings repository."""

from datetime import date, datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from src.domain.constants import CASH, DEBT, EXPENSE
from src.domain.errors import StoreWriteError
from src.domain.models import Holding, LedgerEntry
from src.infrastructure.holdings_repository import (
    SqlAlchemyHoldingsRepository,
)


class _FakeResult:
    def __init__(self, rows=None, rowcount: int = 1) -> None:
        self._rows = rows or []
        self.rowcount = rowcount

    def all(self):
        return self._rows

    def first(self):
        return self._rows[0] if self._rows else None


def _context(conn: MagicMock) -> MagicMock:
    context = MagicMock()
    context.__enter__.return_value = conn
    context.__exit__.return_value = False
    return context


def _build_db_port(results: list[_FakeResult]) -> tuple[MagicMock, MagicMock]:
    engine = MagicMock()
    conn = MagicMock()
    engine.connect.return_value = _context(conn)
    engine.begin.return_value = _context(conn)
    conn.execute.side_effect = results

    db_port = MagicMock()
    db_port.get_finance_engine.return_value = engine
    return db_port, conn


def _row(**overrides) -> SimpleNamespace:
    fields = {
        "id": "h1",
        "kind": DEBT,
        "name": "Loan Ethereum (ETH)",
        "value": 60000000,
        "quantity": "2",
        "buy_price": None,
        "current_price": 30000000.0,
        "coin_ref": "ethereum",
        "currency": "IDR",
        "description": None,
        "unit_denominated": None,
        "updated_at": "2024-05-01T09:30:00+00:00",
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


def test_fetch_holdings_maps_rows() -> None:
    """Rows become Holding models with Decimal amounts."""
    db_port, conn = _build_db_port([_FakeResult([_row()])])

    holdings = SqlAlchemyHoldingsRepository(db_port).fetch_holdings("u1")

    holding = holdings[0]
    assert holding.value == Decimal("60000000")
    assert holding.quantity == Decimal("2")
    assert holding.current_price == Decimal("30000000.0")
    assert holding.buy_price is None
    assert holding.unit_denominated is True
    assert holding.updated_at == datetime(2024, 5, 1, 9, 30,
                                          tzinfo=timezone.utc)
    params = conn.execute.call_args.args[1]
    assert params == {"user_id": "u1"}


def test_fetch_holding_returns_none_when_missing() -> None:
    db_port, _ = _build_db_port([_FakeResult([])])

    assert SqlAlchemyHoldingsRepository(db_port).fetch_holding(
        "u1", "nope"
    ) is None


def test_stored_flag_overrides_coin_ref() -> None:
    """An explicit false flag wins over the coin reference."""
    db_port, _ = _build_db_port([_FakeResult([_row(unit_denominated=0)])])

    holding = SqlAlchemyHoldingsRepository(db_port).fetch_holding("u1", "h1")

    assert holding.unit_denominated is False


def test_save_holding_inserts_when_update_matches_nothing() -> None:
    """Unknown holdings are inserted after an empty update."""
    db_port, conn = _build_db_port(
        [_FakeResult(rowcount=0), _FakeResult(rowcount=1)]
    )
    holding = Holding(id="h2", kind=CASH, name="Wallet",
                      value=Decimal("1500.50"))

    stored = SqlAlchemyHoldingsRepository(db_port).save_holding("u1", holding)

    assert stored is holding
    assert conn.execute.call_count == 2
    insert_sql = str(conn.execute.call_args_list[1].args[0])
    assert "INSERT INTO holdings" in insert_sql
    params = conn.execute.call_args_list[1].args[1]
    assert params["value"] == "1500.50"
    assert params["quantity"] is None
    assert params["user_id"] == "u1"


def test_save_holding_wraps_database_errors() -> None:
    db_port, _ = _build_db_port(
        [OperationalError("UPDATE", {}, Exception("locked"))]
    )

    with pytest.raises(StoreWriteError):
        SqlAlchemyHoldingsRepository(db_port).save_holding(
            "u1", Holding(id="h", kind=CASH, name="W", value=Decimal("1"))
        )


def test_apply_settlement_updates_and_inserts_in_one_transaction() -> None:
    """Holding update and ledger insert share one begin() block."""
    db_port, conn = _build_db_port([_FakeResult(), _FakeResult()])
    engine = db_port.get_finance_engine.return_value
    holding = Holding(id="h1", kind=DEBT, name="Car loan",
                      value=Decimal("0"))
    entry = LedgerEntry(direction=EXPENSE, amount=Decimal("1000000"),
                        entry_date=date(2024, 5, 1), category_ref="c")

    stored = SqlAlchemyHoldingsRepository(db_port).apply_settlement(
        "u1", holding, entry
    )

    engine.begin.assert_called_once()
    assert conn.execute.call_count == 2
    assert stored.id
    assert stored.amount == Decimal("1000000")
    insert_params = conn.execute.call_args_list[1].args[1]
    assert insert_params["entry_date"] == "2024-05-01"
    assert insert_params["amount"] == "1000000"


def test_apply_settlement_without_entry_only_updates() -> None:
    db_port, conn = _build_db_port([_FakeResult()])
    holding = Holding(id="h1", kind=DEBT, name="Car loan",
                      value=Decimal("10"))

    stored = SqlAlchemyHoldingsRepository(db_port).apply_settlement(
        "u1", holding, None
    )

    assert stored is None
    assert conn.execute.call_count == 1


def test_apply_settlement_fails_when_holding_vanished() -> None:
    """A missing row aborts before the ledger insert."""
    db_port, conn = _build_db_port([_FakeResult(rowcount=0)])
    holding = Holding(id="gone", kind=DEBT, name="Car loan",
                      value=Decimal("0"))
    entry = LedgerEntry(direction=EXPENSE, amount=Decimal("1"),
                        entry_date=date(2024, 5, 1))

    with pytest.raises(StoreWriteError, match="gone"):
        SqlAlchemyHoldingsRepository(db_port).apply_settlement(
            "u1", holding, entry
        )
    assert conn.execute.call_count == 1


def test_apply_settlement_wraps_insert_errors() -> None:
    db_port, _ = _build_db_port(
        [_FakeResult(), OperationalError("INSERT", {}, Exception("full"))]
    )
    holding = Holding(id="h1", kind=DEBT, name="Car loan",
                      value=Decimal("0"))
    entry = LedgerEntry(direction=EXPENSE, amount=Decimal("1"),
                        entry_date=date(2024, 5, 1))

    with pytest.raises(StoreWriteError):
        SqlAlchemyHoldingsRepository(db_port).apply_settlement(
            "u1", holding, entry
        )

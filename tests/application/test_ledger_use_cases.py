"""Tests for cashflow, category and budget use cases."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_budget_overview import (
    GetBudgetOverviewUseCase,
)
from src.application.use_cases.get_cashflow import (
    GetCashflowSummaryUseCase,
    GetMonthlyCashflowUseCase,
)
from src.application.use_cases.get_category_breakdown import (
    GetCategoryBreakdownUseCase,
)
from src.application.use_cases.manage_ledger_entries import (
    DeleteLedgerEntryUseCase,
    GetRecentEntriesUseCase,
    RecordLedgerEntryUseCase,
)
from src.application.use_cases.periods import (
    month_bounds,
    trailing_months_start,
)
from src.domain.constants import EXPENSE, INCOME
from src.domain.models import Budget, Category, LedgerEntry


def _entry(direction, amount, day, category_ref=None) -> LedgerEntry:
    return LedgerEntry(direction=direction, amount=Decimal(amount),
                       entry_date=day, category_ref=category_ref)


ENTRIES = [
    _entry(INCOME, "10000000", date(2024, 4, 25), "salary"),
    _entry(EXPENSE, "1500000", date(2024, 5, 2), "food"),
    _entry(EXPENSE, "4000000", date(2024, 5, 5), "rent"),
]


def _ledger(entries=None) -> MagicMock:
    ledger = MagicMock()
    ledger.fetch_entries.return_value = ENTRIES if entries is None else entries
    return ledger


def test_cashflow_summary_use_case_passes_window() -> None:
    """The date window is forwarded to the repository."""
    ledger = _ledger()
    start, end = date(2024, 4, 1), date(2024, 5, 31)

    summary = GetCashflowSummaryUseCase(
        ledger_repository=ledger, logger=MagicMock()
    ).execute("u1", start_date=start, end_date=end)

    ledger.fetch_entries.assert_called_once_with("u1", start, end)
    assert summary.total_in == Decimal("10000000")
    assert summary.total_out == Decimal("5500000")
    assert summary.difference == Decimal("4500000")


def test_monthly_cashflow_use_case() -> None:
    months = GetMonthlyCashflowUseCase(
        ledger_repository=_ledger(), logger=MagicMock()
    ).execute("u1")

    assert [(m.month, m.balance) for m in months] == [
        ("2024-04", Decimal("10000000")),
        ("2024-05", Decimal("-5500000")),
    ]


def test_category_breakdown_use_case_filters_direction() -> None:
    """Entries are requested for the normalized direction only."""
    ledger = _ledger([ENTRIES[1], ENTRIES[2]])
    categories = MagicMock()
    categories.fetch_categories.return_value = [
        Category(id="food", name="Food", direction=EXPENSE),
        Category(id="rent", name="Rent", direction=EXPENSE),
    ]

    breakdown = GetCategoryBreakdownUseCase(
        ledger_repository=ledger,
        categories_repository=categories,
        logger=MagicMock(),
    ).execute("u1", "Expense")

    ledger.fetch_entries.assert_called_once_with(
        "u1", None, None, direction=EXPENSE
    )
    assert [item.name for item in breakdown.categories] == ["Rent", "Food"]
    assert breakdown.total == Decimal("5500000")


def test_category_breakdown_rejects_unknown_direction() -> None:
    use_case = GetCategoryBreakdownUseCase(
        ledger_repository=_ledger(),
        categories_repository=MagicMock(),
        logger=MagicMock(),
    )

    with pytest.raises(ValueError):
        use_case.execute("u1", "transfer")


def test_budget_overview_uses_current_month_and_warns_when_over() -> None:
    """Budgets compare against expenses of the current month."""
    ledger = _ledger([ENTRIES[1], ENTRIES[2]])
    budgets = MagicMock()
    budgets.fetch_budgets.return_value = [
        Budget(id="b1", category_ref="food", amount=Decimal("2000000"),
               category_name="Food"),
        Budget(id="b2", category_ref="rent", amount=Decimal("3500000"),
               category_name="Rent"),
    ]
    logger = MagicMock()

    overview = GetBudgetOverviewUseCase(
        budgets_repository=budgets, ledger_repository=ledger, logger=logger
    ).execute("u1", date(2024, 5, 17))

    ledger.fetch_entries.assert_called_once_with(
        "u1", date(2024, 5, 1), date(2024, 5, 31), direction=EXPENSE
    )
    assert [item.is_over_budget for item in overview.items] == [False, True]
    logger.warning.assert_called_once_with("Budgets exceeded: Rent")


def test_month_bounds_handles_leap_february() -> None:
    assert month_bounds(date(2024, 2, 10)) == (
        date(2024, 2, 1), date(2024, 2, 29)
    )


def test_trailing_months_start_crosses_years() -> None:
    assert trailing_months_start(date(2024, 6, 15)) == date(2024, 1, 1)
    assert trailing_months_start(date(2024, 2, 1), months=6) == date(
        2023, 9, 1
    )
    assert trailing_months_start(date(2024, 2, 1), months=1) == date(
        2024, 2, 1
    )
    with pytest.raises(ValueError):
        trailing_months_start(date(2024, 2, 1), months=0)


def test_record_entry_normalizes_and_stores() -> None:
    """Manual entries are stored with a clean direction and description."""
    ledger = _ledger()
    ledger.insert_entry.side_effect = lambda user_id, entry: LedgerEntry(
        direction=entry.direction,
        amount=entry.amount,
        entry_date=entry.entry_date,
        category_ref=entry.category_ref,
        description=entry.description,
        id="e-1",
    )
    entry = LedgerEntry(
        direction=" Expense ",
        amount=Decimal("75000"),
        entry_date=date(2024, 5, 6),
        category_ref="food",
        description="  ",
    )

    stored = RecordLedgerEntryUseCase(
        ledger_repository=ledger, logger=MagicMock()
    ).execute("u1", entry)

    assert stored.id == "e-1"
    sent = ledger.insert_entry.call_args.args[1]
    assert sent.direction == EXPENSE
    assert sent.description is None


@pytest.mark.parametrize("amount", [None, Decimal("0"), Decimal("-5")])
def test_record_entry_requires_positive_amount(amount) -> None:
    ledger = _ledger()
    entry = LedgerEntry(
        direction=INCOME, amount=amount, entry_date=date(2024, 5, 6)
    )

    with pytest.raises(ValueError):
        RecordLedgerEntryUseCase(
            ledger_repository=ledger, logger=MagicMock()
        ).execute("u1", entry)

    ledger.insert_entry.assert_not_called()


def test_recent_entries_are_newest_first_and_limited() -> None:
    ledger = _ledger()

    recent = GetRecentEntriesUseCase(
        ledger_repository=ledger, logger=MagicMock()
    ).execute("u1", limit=2)

    ledger.fetch_entries.assert_called_once_with("u1", None, None)
    assert [entry.entry_date.day for entry in recent] == [5, 2]


def test_delete_entry_calls_repository() -> None:
    ledger = _ledger()

    DeleteLedgerEntryUseCase(
        ledger_repository=ledger, logger=MagicMock()
    ).execute("u1", "e-9")

    ledger.delete_entry.assert_called_once_with("u1", "e-9")


def test_delete_entry_requires_identifier() -> None:
    ledger = _ledger()

    with pytest.raises(ValueError):
        DeleteLedgerEntryUseCase(
            ledger_repository=ledger, logger=MagicMock()
        ).execute("u1", "")

    ledger.delete_entry.assert_not_called()

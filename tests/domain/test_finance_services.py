"""Tests for finance aggregation services."""

from datetime import date
from decimal import Decimal
import random
from unittest.mock import MagicMock

from src.domain.constants import (
    CASH,
    CRYPTO,
    DEBT,
    EXPENSE,
    INCOME,
    PROPERTY,
    RECEIVABLE,
)
from src.domain.models import Budget, Category, Holding, LedgerEntry
from src.domain.services.finance import (
    compute_budget_overview,
    compute_cashflow_summary,
    compute_category_breakdown,
    compute_holding_breakdown,
    compute_monthly_cashflow,
    compute_net_worth_summary,
)


def _holding(holding_id: str, kind: str, value: str) -> Holding:
    return Holding(id=holding_id, kind=kind, name=holding_id,
                   value=Decimal(value))


def _entry(direction: str, amount: str, day: date,
           category_ref: str | None = None) -> LedgerEntry:
    return LedgerEntry(direction=direction, amount=Decimal(amount),
                       entry_date=day, category_ref=category_ref)


HOLDINGS = [
    _holding("cash", CASH, "5000000"),
    _holding("btc", CRYPTO, "300000000"),
    _holding("house", PROPERTY, "750000000"),
    _holding("friend", RECEIVABLE, "200000"),
    _holding("car", DEBT, "1000000"),
]


def test_net_worth_subtracts_debts() -> None:
    """Assets add up, debts are subtracted once."""
    summary = compute_net_worth_summary(
        HOLDINGS, currency_code="IDR", logger=MagicMock()
    )

    assert summary.asset_total == Decimal("1055200000")
    assert summary.liability_total == Decimal("1000000")
    assert summary.net_worth == Decimal("1054200000")
    assert summary.currency_code == "IDR"


def test_net_worth_is_independent_of_order() -> None:
    """Shuffling holdings does not change the totals."""
    expected = compute_net_worth_summary(
        HOLDINGS, currency_code="IDR", logger=MagicMock()
    )
    shuffled = list(HOLDINGS)
    random.Random(7).shuffle(shuffled)

    result = compute_net_worth_summary(
        reversed(shuffled), currency_code="IDR", logger=MagicMock()
    )

    assert result == expected


def test_net_worth_warns_on_negative_values() -> None:
    """Negative stored values are logged but still aggregated."""
    logger = MagicMock()

    summary = compute_net_worth_summary(
        [_holding("odd", CASH, "-10")], currency_code="IDR", logger=logger
    )

    assert summary.net_worth == Decimal("-10")
    logger.warning.assert_called_once()


def test_net_worth_of_empty_portfolio_is_zero() -> None:
    """No holdings means zero totals."""
    summary = compute_net_worth_summary([], currency_code="IDR",
                                        logger=MagicMock())

    assert summary.net_worth == Decimal("0")


def test_holding_breakdown_keeps_debt_unsigned_and_ordered() -> None:
    """Per-kind subtotals follow kind order and debt stays positive."""
    breakdown = compute_holding_breakdown(
        [*HOLDINGS, _holding("cash2", CASH, "1000000")],
        currency_code="IDR",
    )

    mapping = breakdown.as_mapping()
    assert [item.kind for item in breakdown.kinds] == [
        CASH, CRYPTO, PROPERTY, RECEIVABLE, DEBT,
    ]
    assert mapping[CASH] == Decimal("6000000")
    assert mapping[DEBT] == Decimal("1000000")
    total_share = sum(item.share for item in breakdown.kinds)
    assert abs(total_share - Decimal("100")) < Decimal("0.0001")


def test_holding_breakdown_can_include_empty_kinds() -> None:
    """Empty kinds are listed with zero share when requested."""
    breakdown = compute_holding_breakdown([], currency_code="IDR",
                                          include_empty=True)

    assert len(breakdown.kinds) == 8
    assert all(item.amount == 0 and item.share == 0
               for item in breakdown.kinds)


def test_cashflow_summary_totals_directions() -> None:
    """Income and expense are summed separately."""
    entries = [
        _entry(INCOME, "10000000", date(2024, 5, 1)),
        _entry(EXPENSE, "2500000", date(2024, 5, 3)),
        _entry(EXPENSE, "500000", date(2024, 5, 9)),
    ]

    summary = compute_cashflow_summary(entries, currency_code="IDR")

    assert summary.total_in == Decimal("10000000")
    assert summary.total_out == Decimal("3000000")
    assert summary.difference == Decimal("7000000")


def test_monthly_cashflow_groups_and_sorts_months() -> None:
    """Months are keyed YYYY-MM, oldest first."""
    entries = [
        _entry(EXPENSE, "300", date(2024, 5, 20)),
        _entry(INCOME, "1000", date(2024, 4, 2)),
        _entry(INCOME, "800", date(2024, 5, 1)),
    ]

    months = compute_monthly_cashflow(entries)

    assert [item.month for item in months] == ["2024-04", "2024-05"]
    assert months[0].balance == Decimal("1000")
    assert months[1].income == Decimal("800")
    assert months[1].expense == Decimal("300")
    assert months[1].balance == Decimal("500")


def test_category_breakdown_groups_unknown_as_uncategorized() -> None:
    """Unknown and missing categories share the Uncategorized bucket."""
    categories = [
        Category(id="food", name="Food", direction=EXPENSE),
        Category(id="rent", name="Rent", direction=EXPENSE),
    ]
    day = date(2024, 5, 1)
    entries = [
        _entry(EXPENSE, "300", day, "food"),
        _entry(EXPENSE, "600", day, "rent"),
        _entry(EXPENSE, "50", day, None),
        _entry(EXPENSE, "50", day, "deleted"),
        _entry(INCOME, "9999", day, "salary"),
    ]

    breakdown = compute_category_breakdown(
        entries, categories, direction=EXPENSE, currency_code="IDR"
    )

    assert breakdown.total == Decimal("1000")
    assert [(item.name, item.amount) for item in breakdown.categories] == [
        ("Rent", Decimal("600")),
        ("Food", Decimal("300")),
        ("Uncategorized", Decimal("100")),
    ]
    assert breakdown.categories[0].percentage == Decimal("60")


def test_budget_overview_tracks_spending() -> None:
    """Budgets report spent, remaining and over-budget flags."""
    budgets = [
        Budget(id="b1", category_ref="food", amount=Decimal("1000"),
               category_name="Food"),
        Budget(id="b2", category_ref="fun", amount=Decimal("200"),
               category_name="Fun"),
    ]
    day = date(2024, 5, 10)
    entries = [
        _entry(EXPENSE, "400", day, "food"),
        _entry(EXPENSE, "250", day, "fun"),
        _entry(INCOME, "5000", day, "food"),
    ]

    overview = compute_budget_overview(budgets, entries, currency_code="IDR")

    food, fun = overview.items
    assert food.spent == Decimal("400")
    assert food.remaining == Decimal("600")
    assert food.is_over_budget is False
    assert fun.percentage == Decimal("125")
    assert fun.is_over_budget is True
    assert overview.total_limit == Decimal("1200")
    assert overview.total_spent == Decimal("650")

"""Domain services for finance aggregates."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    EXPENSE,
    HOLDING_KINDS,
    INCOME,
    LIABILITY_KINDS,
    UNCATEGORIZED_LABEL,
)
from src.domain.models import (
    Budget,
    BudgetOverview,
    BudgetProgress,
    CashflowSummary,
    Category,
    CategoryAmount,
    CategoryBreakdown,
    Holding,
    HoldingBreakdown,
    HoldingKindAmount,
    LedgerEntry,
    MonthlyCashflow,
    NetWorthSummary,
)
from src.domain.services.validation import validate_holding_value
from src.utils.decimal_utils import coerce_decimal

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def compute_net_worth_summary(
    holdings: Iterable[Holding],
    *,
    currency_code: str,
    logger: Logger,
    liability_kinds: Iterable[str] = LIABILITY_KINDS,
) -> NetWorthSummary:
    """Compute the signed net worth of a holding set.

    Debts are stored as positive magnitudes and subtracted here; every
    other kind is added.

    Args:
        holdings: Holdings of the current user.
        currency_code: Currency the totals are expressed in.
        logger: Logger used for warnings.
        liability_kinds: Holding kinds subtracted from net worth.

    Returns:
        NetWorthSummary: Asset, liability and net worth totals.
    """
    liability_kinds = tuple(liability_kinds)
    asset_total = ZERO
    liability_total = ZERO
    for holding in holdings:
        validate_holding_value(holding, logger)
        value = coerce_decimal(holding.value)
        if holding.kind in liability_kinds:
            liability_total += value
        else:
            asset_total += value

    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=asset_total - liability_total,
        currency_code=currency_code,
    )


def compute_holding_breakdown(
    holdings: Iterable[Holding],
    *,
    currency_code: str,
    include_empty: bool = False,
) -> HoldingBreakdown:
    """Compute per-kind subtotals of holding values.

    Subtotals are unsigned: debt keeps its positive magnitude here, only the
    net worth total subtracts it. Shares are percentages of the gross total.

    Args:
        holdings: Holdings of the current user.
        currency_code: Currency the totals are expressed in.
        include_empty: Also list known kinds without holdings.

    Returns:
        HoldingBreakdown: Subtotals ordered like ``HOLDING_KINDS``.
    """
    totals: dict[str, Decimal] = {}
    if include_empty:
        totals = {kind: ZERO for kind in HOLDING_KINDS}
    for holding in holdings:
        totals[holding.kind] = (
            totals.get(holding.kind, ZERO) + coerce_decimal(holding.value)
        )

    gross = sum(totals.values(), ZERO)
    order = {kind: index for index, kind in enumerate(HOLDING_KINDS)}
    kinds = [
        HoldingKindAmount(
            kind=kind,
            amount=amount,
            share=amount / gross * HUNDRED if gross else ZERO,
        )
        for kind, amount in sorted(
            totals.items(),
            key=lambda item: (order.get(item[0], len(order)), item[0]),
        )
    ]
    return HoldingBreakdown(currency_code=currency_code, kinds=kinds)


def compute_cashflow_summary(
    entries: Iterable[LedgerEntry],
    *,
    currency_code: str,
) -> CashflowSummary:
    """Sum income and expense entries."""
    total_in = ZERO
    total_out = ZERO
    for entry in entries:
        if entry.direction == INCOME:
            total_in += coerce_decimal(entry.amount)
        elif entry.direction == EXPENSE:
            total_out += coerce_decimal(entry.amount)
    return CashflowSummary(
        total_in=total_in,
        total_out=total_out,
        currency_code=currency_code,
    )


def compute_monthly_cashflow(
    entries: Iterable[LedgerEntry],
) -> list[MonthlyCashflow]:
    """Group ledger entries by ``YYYY-MM`` month, oldest first."""
    months: dict[str, tuple[Decimal, Decimal]] = {}
    for entry in entries:
        month = entry.entry_date.strftime("%Y-%m")
        income, expense = months.get(month, (ZERO, ZERO))
        amount = coerce_decimal(entry.amount)
        if entry.direction == INCOME:
            income += amount
        else:
            expense += amount
        months[month] = (income, expense)
    return [
        MonthlyCashflow(month=month, income=income, expense=expense)
        for month, (income, expense) in sorted(months.items())
    ]


def compute_category_breakdown(
    entries: Iterable[LedgerEntry],
    categories: Iterable[Category],
    *,
    direction: str,
    currency_code: str,
) -> CategoryBreakdown:
    """Aggregate ledger amounts of one direction by category.

    Entries without a category (or with an unknown one) are grouped under
    ``Uncategorized``. Items are sorted by amount, largest first.

    Args:
        entries: Ledger entries of the reporting window.
        categories: Known categories.
        direction: ``income`` or ``expense``.
        currency_code: Currency the totals are expressed in.

    Returns:
        CategoryBreakdown: Totals and percentages per category.
    """
    names = {category.id: category.name for category in categories}
    totals: dict[str | None, Decimal] = {}
    for entry in entries:
        if entry.direction != direction:
            continue
        key = entry.category_ref if entry.category_ref in names else None
        totals[key] = totals.get(key, ZERO) + coerce_decimal(entry.amount)

    total = sum(totals.values(), ZERO)
    items = [
        CategoryAmount(
            category_ref=category_ref,
            name=names.get(category_ref, UNCATEGORIZED_LABEL)
            if category_ref
            else UNCATEGORIZED_LABEL,
            amount=amount,
            percentage=amount / total * HUNDRED if total > 0 else ZERO,
        )
        for category_ref, amount in totals.items()
    ]
    items.sort(key=lambda item: (-item.amount, item.name))
    return CategoryBreakdown(
        direction=direction,
        currency_code=currency_code,
        total=total,
        categories=items,
    )


def compute_budget_overview(
    budgets: Iterable[Budget],
    entries: Iterable[LedgerEntry],
    *,
    currency_code: str,
) -> BudgetOverview:
    """Compute how much of each budget was spent.

    Args:
        budgets: Budgets of the current user.
        entries: Expense entries of the budget period.
        currency_code: Currency the totals are expressed in.

    Returns:
        BudgetOverview: Progress per budget plus overall totals.
    """
    spent: dict[str, Decimal] = {}
    for entry in entries:
        if entry.direction != EXPENSE or not entry.category_ref:
            continue
        spent[entry.category_ref] = (
            spent.get(entry.category_ref, ZERO) + coerce_decimal(entry.amount)
        )
    items = [
        BudgetProgress(
            budget_id=budget.id,
            category_ref=budget.category_ref,
            category_name=budget.category_name or UNCATEGORIZED_LABEL,
            limit=coerce_decimal(budget.amount),
            spent=spent.get(budget.category_ref, ZERO),
        )
        for budget in budgets
    ]
    return BudgetOverview(items=items, currency_code=currency_code)


__all__ = [
    "compute_net_worth_summary",
    "compute_holding_breakdown",
    "compute_cashflow_summary",
    "compute_monthly_cashflow",
    "compute_category_breakdown",
    "compute_budget_overview",
]

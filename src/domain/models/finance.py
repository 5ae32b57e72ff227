"""Domain models for financial aggregates."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of non-debt holding values.
        liability_total: Sum of debt holding values.
        net_worth: Assets minus liabilities.
        currency_code: Currency the totals are expressed in.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal
    currency_code: str


@dataclass(frozen=True)
class HoldingKindAmount:
    """Amount aggregated for a given holding kind."""

    kind: str
    amount: Decimal
    share: Decimal = Decimal("0")


@dataclass(frozen=True)
class HoldingBreakdown:
    """Breakdown of holding values by kind."""

    currency_code: str
    kinds: list[HoldingKindAmount]

    def as_mapping(self) -> dict[str, Decimal]:
        """Return the ``{kind: subtotal}`` map."""
        return {item.kind: item.amount for item in self.kinds}


@dataclass(frozen=True)
class ValuationSnapshot:
    """Unit economics of a holding."""

    initial_value: Decimal
    current_value: Decimal

    @property
    def profit_loss(self) -> Decimal:
        """Return current_value minus initial_value."""
        return self.current_value - self.initial_value


@dataclass(frozen=True)
class CashflowSummary:
    """Summary of ledger totals."""

    total_in: Decimal
    total_out: Decimal
    currency_code: str

    @property
    def difference(self) -> Decimal:
        """Return total_in minus total_out."""
        return self.total_in - self.total_out


@dataclass(frozen=True)
class MonthlyCashflow:
    """Income and expense totals for one ``YYYY-MM`` month."""

    month: str
    income: Decimal
    expense: Decimal

    @property
    def balance(self) -> Decimal:
        return self.income - self.expense


@dataclass(frozen=True)
class CategoryAmount:
    """Ledger amount aggregated for a category."""

    category_ref: str | None
    name: str
    amount: Decimal
    percentage: Decimal


@dataclass(frozen=True)
class CategoryBreakdown:
    """Breakdown of ledger amounts by category for one direction."""

    direction: str
    currency_code: str
    total: Decimal
    categories: list[CategoryAmount]


@dataclass(frozen=True)
class BudgetProgress:
    """Spending progress of a single budget."""

    budget_id: str
    category_ref: str
    category_name: str
    limit: Decimal
    spent: Decimal

    @property
    def remaining(self) -> Decimal:
        return self.limit - self.spent

    @property
    def percentage(self) -> Decimal:
        if self.limit <= 0:
            return Decimal("0")
        return self.spent / self.limit * Decimal("100")

    @property
    def is_over_budget(self) -> bool:
        return self.percentage > 100


@dataclass(frozen=True)
class BudgetOverview:
    """All budget progress rows plus overall totals."""

    items: list[BudgetProgress]
    currency_code: str

    @property
    def total_limit(self) -> Decimal:
        return sum((item.limit for item in self.items), Decimal("0"))

    @property
    def total_spent(self) -> Decimal:
        return sum((item.spent for item in self.items), Decimal("0"))

    @property
    def overall_percentage(self) -> Decimal:
        if self.total_limit <= 0:
            return Decimal("0")
        return self.total_spent / self.total_limit * Decimal("100")


__all__ = [
    "NetWorthSummary",
    "HoldingKindAmount",
    "HoldingBreakdown",
    "ValuationSnapshot",
    "CashflowSummary",
    "MonthlyCashflow",
    "CategoryAmount",
    "CategoryBreakdown",
    "BudgetProgress",
    "BudgetOverview",
]

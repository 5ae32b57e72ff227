"""Domain models for holdings, ledger entries and their reference data."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from src.domain.constants import DEFAULT_CURRENCY


@dataclass(frozen=True)
class Holding:
    """An owned asset or outstanding liability.

    Attributes:
        id: Unique identifier.
        kind: One of the holding kinds in ``src.domain.constants``.
        name: Display label.
        value: Current contribution to net worth. Debts are stored as a
            non-negative magnitude and subtracted only when aggregating.
        quantity: Units held, for unit-denominated holdings.
        buy_price: Per-unit purchase price.
        current_price: Per-unit latest price.
        coin_ref: External price-feed identifier.
        currency: Denomination code.
        description: Free text.
        updated_at: Last mutation timestamp.
        unit_denominated: Whether the value derives from quantity x price.
    """

    id: str
    kind: str
    name: str
    value: Decimal
    quantity: Decimal | None = None
    buy_price: Decimal | None = None
    current_price: Decimal | None = None
    coin_ref: str | None = None
    currency: str = DEFAULT_CURRENCY
    description: str | None = None
    updated_at: datetime | None = None
    unit_denominated: bool = False


@dataclass(frozen=True)
class HoldingDraft:
    """Raw values captured by the holding edit form."""

    kind: str
    name: str
    manual_value: Decimal | None = None
    quantity: Decimal | None = None
    buy_price: Decimal | None = None
    current_price: Decimal | None = None
    coin_ref: str | None = None
    description: str | None = None
    unit_denominated: bool = False
    id: str | None = None


@dataclass(frozen=True)
class LedgerEntry:
    """An income or expense record.

    Entries are immutable once stored; ``id`` is None until persisted.
    """

    direction: str
    amount: Decimal
    entry_date: date
    category_ref: str | None = None
    holding_ref: str | None = None
    description: str | None = None
    id: str | None = None


@dataclass(frozen=True)
class Category:
    """Ledger category for one direction (income or expense)."""

    id: str
    name: str
    direction: str


@dataclass(frozen=True)
class Budget:
    """Monthly spending limit for an expense category."""

    id: str
    category_ref: str
    amount: Decimal
    category_name: str | None = None


__all__ = ["Holding", "HoldingDraft", "LedgerEntry", "Category", "Budget"]

"""Domain models for debt and receivable settlement."""

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.models.holdings import Holding, LedgerEntry

FULL = "full"
PARTIAL = "partial"
SETTLEMENT_MODES = (FULL, PARTIAL)

CURRENCY_INPUT = "currency"
UNITS_INPUT = "units"
SETTLEMENT_UNITS = (CURRENCY_INPUT, UNITS_INPUT)

APPLIED = "applied"
REJECTED = "rejected"
FAILED = "failed"


@dataclass(frozen=True)
class SettlementRequest:
    """User input captured while a settlement is awaiting submission.

    Attributes:
        mode: ``full`` or ``partial``.
        amount: Payment amount, in currency or units depending on ``unit``.
            Ignored for full settlements.
        unit: ``currency`` or ``units``.
        record_transaction: Whether to create a linked ledger entry.
        category_ref: Ledger category, required when recording.
        holding_ref: Optional funding/receiving holding for the entry.
    """

    mode: str = PARTIAL
    amount: Decimal | None = None
    unit: str = CURRENCY_INPUT
    record_transaction: bool = True
    category_ref: str | None = None
    holding_ref: str | None = None


@dataclass(frozen=True)
class SettlementPlan:
    """Computed outcome of a settlement, before it is applied."""

    holding_id: str
    pay_amount: Decimal
    new_value: Decimal
    new_quantity: Decimal | None
    direction: str
    description: str


@dataclass(frozen=True)
class SettlementResult:
    """Structured outcome of a settlement action.

    ``status`` is ``applied`` when both writes committed, ``rejected`` when
    validation blocked the request before any write, and ``failed`` when the
    store refused a write (nothing committed).
    """

    status: str
    plan: SettlementPlan | None = None
    holding: Holding | None = None
    ledger_entry: LedgerEntry | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == APPLIED


__all__ = [
    "FULL",
    "PARTIAL",
    "SETTLEMENT_MODES",
    "CURRENCY_INPUT",
    "UNITS_INPUT",
    "SETTLEMENT_UNITS",
    "APPLIED",
    "REJECTED",
    "FAILED",
    "SettlementRequest",
    "SettlementPlan",
    "SettlementResult",
]

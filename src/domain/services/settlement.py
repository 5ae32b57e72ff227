"""Settlement of debt and receivable holdings.

A settlement moves through three states: the request is awaiting input,
``compute_settlement`` produces a ``SettlementPlan`` (computed), and the
application layer persists it (applied). This module covers the first two;
it performs no I/O.
"""

from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal

from src.domain.constants import DEBT, EXPENSE, INCOME, SETTLEABLE_KINDS
from src.domain.errors import SettlementValidationError
from src.domain.models.holdings import Holding, LedgerEntry
from src.domain.models.settlement import (
    FULL,
    PARTIAL,
    SETTLEMENT_MODES,
    SETTLEMENT_UNITS,
    UNITS_INPUT,
    SettlementPlan,
    SettlementRequest,
)
from src.domain.services.valuation import is_unit_denominated

ZERO = Decimal("0")


def validate_settlement_request(
    holding: Holding,
    request: SettlementRequest,
) -> list[str]:
    """Return the messages blocking submission of a settlement.

    Args:
        holding: Holding being settled.
        request: Captured user input.

    Returns:
        list[str]: Empty when the request can be submitted.
    """
    errors: list[str] = []
    if holding.kind not in SETTLEABLE_KINDS:
        errors.append(
            f"Only debt or receivable holdings can be settled, "
            f"got {holding.kind}."
        )
    if request.mode not in SETTLEMENT_MODES:
        errors.append(f"Unknown settlement mode: {request.mode}.")
    if request.unit not in SETTLEMENT_UNITS:
        errors.append(f"Unknown settlement input unit: {request.unit}.")
    if request.mode == PARTIAL:
        if request.amount is None or request.amount <= 0:
            errors.append("Enter a positive payment amount.")
        if request.unit == UNITS_INPUT and not _can_pay_in_units(holding):
            errors.append(
                "Unit input needs a unit-denominated holding with a "
                "current price."
            )
    if request.record_transaction and not request.category_ref:
        errors.append("Choose a category to record the transaction.")
    return errors


def can_submit(holding: Holding, request: SettlementRequest) -> bool:
    """Return True when the settlement action may be invoked."""
    return not validate_settlement_request(holding, request)


def compute_settlement(
    holding: Holding,
    request: SettlementRequest,
    *,
    cap_overpayment: bool = False,
) -> SettlementPlan:
    """Compute the new balance of a debt or receivable.

    Values never go below zero. Overpayments are recorded as entered unless
    ``cap_overpayment`` limits the paid amount to the remaining balance.

    Args:
        holding: Holding being settled.
        request: Validated user input.
        cap_overpayment: Cap ``pay_amount`` at the remaining balance.

    Returns:
        SettlementPlan: Paid amount and resulting value/quantity.

    Raises:
        SettlementValidationError: If the request cannot be submitted.
    """
    errors = validate_settlement_request(holding, request)
    if errors:
        raise SettlementValidationError(errors)

    unit_denominated = is_unit_denominated(holding)
    current_value = holding.value
    current_quantity = holding.quantity or ZERO
    price = holding.current_price or ZERO

    if request.mode == FULL:
        pay_amount = current_value
        new_quantity = ZERO
        new_value = ZERO
    elif request.unit == UNITS_INPUT:
        units = request.amount
        paid_units = min(units, current_quantity) if cap_overpayment else units
        pay_amount = paid_units * price
        new_quantity = max(ZERO, current_quantity - units)
        new_value = new_quantity * price
    else:
        amount = request.amount
        pay_amount = min(amount, current_value) if cap_overpayment else amount
        new_value = max(ZERO, current_value - amount)
        if unit_denominated and price > 0:
            new_quantity = new_value / price
        else:
            new_quantity = current_quantity

    return SettlementPlan(
        holding_id=holding.id,
        pay_amount=pay_amount,
        new_value=new_value,
        new_quantity=new_quantity if unit_denominated else None,
        direction=EXPENSE if holding.kind == DEBT else INCOME,
        description=describe_settlement(holding, request.mode),
    )


def describe_settlement(holding: Holding, mode: str) -> str:
    """Compose the ledger description, e.g. ``Pay Car loan (Partial)``."""
    verb = "Pay" if holding.kind == DEBT else "Receive"
    label = "Full" if mode == FULL else "Partial"
    return f"{verb} {holding.name} ({label})"


def settled_holding(
    holding: Holding,
    plan: SettlementPlan,
    *,
    updated_at: datetime,
) -> Holding:
    """Return the holding as it looks once the plan is applied."""
    return replace(
        holding,
        value=plan.new_value,
        quantity=plan.new_quantity,
        updated_at=updated_at,
    )


def settlement_entry(
    plan: SettlementPlan,
    request: SettlementRequest,
    *,
    entry_date: date,
) -> LedgerEntry:
    """Return the ledger entry recording the payment of a plan."""
    return LedgerEntry(
        direction=plan.direction,
        amount=plan.pay_amount,
        entry_date=entry_date,
        category_ref=request.category_ref,
        holding_ref=request.holding_ref,
        description=plan.description,
    )


def _can_pay_in_units(holding: Holding) -> bool:
    price = holding.current_price
    return is_unit_denominated(holding) and price is not None and price > 0


__all__ = [
    "validate_settlement_request",
    "can_submit",
    "compute_settlement",
    "describe_settlement",
    "settled_holding",
    "settlement_entry",
]

"""Valuation of holdings from their unit economics."""

from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from src.domain.constants import SETTLEABLE_KINDS, UNIT_PRICED_KINDS
from src.domain.models.finance import ValuationSnapshot
from src.domain.models.holdings import Holding, HoldingDraft
from src.domain.policies import exposes_unit_fields
from src.domain.services.normalization import normalize_coin_ref, normalize_kind
from src.utils.decimal_utils import round_amount

ZERO = Decimal("0")


def is_unit_denominated(holding: Holding) -> bool:
    """Return True when the holding's value derives from quantity x price."""
    return exposes_unit_fields(holding.kind, holding.unit_denominated)


def compute_current_value(
    quantity: Decimal | None,
    current_price: Decimal | None,
) -> Decimal | None:
    """Return ``round(quantity x current_price)`` when both are positive.

    Args:
        quantity: Units held.
        current_price: Latest per-unit price.

    Returns:
        Decimal | None: Rounded value, or None when it cannot be derived.
    """
    if quantity is None or current_price is None:
        return None
    if quantity <= 0 or current_price <= 0:
        return None
    return round_amount(quantity * current_price)


def compute_initial_value(
    quantity: Decimal | None,
    buy_price: Decimal | None,
) -> Decimal:
    """Return ``round(quantity x buy_price)``, or 0 when either is missing."""
    if not quantity or not buy_price:
        return ZERO
    return round_amount(quantity * buy_price)


def describe_valuation(holding: Holding) -> ValuationSnapshot:
    """Return initial value, current value and profit/loss of a holding.

    Manual holdings report their stored value as both initial and current
    value, so their profit/loss is zero.
    """
    if not is_unit_denominated(holding):
        return ValuationSnapshot(
            initial_value=holding.value,
            current_value=holding.value,
        )
    current = compute_current_value(holding.quantity, holding.current_price)
    return ValuationSnapshot(
        initial_value=compute_initial_value(
            holding.quantity,
            holding.buy_price,
        ),
        current_value=holding.value if current is None else current,
    )


def build_holding(
    draft: HoldingDraft,
    *,
    holding_id: str,
    currency: str,
    updated_at: datetime,
) -> Holding:
    """Turn edit-form values into a holding honoring the unit-field policy.

    Unit fields are kept only when the kind exposes them; otherwise they are
    cleared. Manual values are stored as a positive magnitude, debts
    included (the sign is applied only when aggregating).

    Args:
        draft: Values captured by the edit form.
        holding_id: Identifier to assign.
        currency: Currency code of the system.
        updated_at: Mutation timestamp.

    Returns:
        Holding: Holding ready to persist.
    """
    kind = normalize_kind(draft.kind)
    if kind in UNIT_PRICED_KINDS:
        unit_denominated = True
    elif kind in SETTLEABLE_KINDS:
        unit_denominated = draft.unit_denominated
    else:
        unit_denominated = False

    manual_value = abs(draft.manual_value) if draft.manual_value else ZERO
    if not exposes_unit_fields(kind, unit_denominated):
        return Holding(
            id=holding_id,
            kind=kind,
            name=draft.name.strip(),
            value=manual_value,
            currency=currency,
            description=draft.description or None,
            updated_at=updated_at,
            unit_denominated=False,
        )

    derived = compute_current_value(draft.quantity, draft.current_price)
    return Holding(
        id=holding_id,
        kind=kind,
        name=draft.name.strip(),
        value=manual_value if derived is None else derived,
        quantity=draft.quantity if draft.quantity is not None else ZERO,
        buy_price=draft.buy_price or None,
        current_price=draft.current_price or None,
        coin_ref=normalize_coin_ref(draft.coin_ref),
        currency=currency,
        description=draft.description or None,
        updated_at=updated_at,
        unit_denominated=unit_denominated,
    )


def apply_price(
    holding: Holding,
    price: Decimal,
    *,
    updated_at: datetime,
) -> Holding:
    """Return a copy of the holding valued at a refreshed unit price.

    Args:
        holding: Unit-denominated holding.
        price: New per-unit price.
        updated_at: Mutation timestamp.

    Returns:
        Holding: Holding with ``current_price`` and ``value`` updated. The
        value is left unchanged when no positive quantity is held.

    Raises:
        ValueError: If the holding is not unit-denominated or the price is
            not positive.
    """
    if not is_unit_denominated(holding):
        raise ValueError(
            f"Holding {holding.id} is not unit-denominated; cannot price it"
        )
    if price <= 0:
        raise ValueError(f"Price must be positive, got {price}")
    derived = compute_current_value(holding.quantity, price)
    return replace(
        holding,
        current_price=price,
        value=holding.value if derived is None else derived,
        updated_at=updated_at,
    )


__all__ = [
    "is_unit_denominated",
    "compute_current_value",
    "compute_initial_value",
    "describe_valuation",
    "build_holding",
    "apply_price",
]

"""Domain services package."""

from .finance import (
    compute_budget_overview,
    compute_cashflow_summary,
    compute_category_breakdown,
    compute_holding_breakdown,
    compute_monthly_cashflow,
    compute_net_worth_summary,
)
from .normalization import (
    normalize_coin_ref,
    normalize_currency,
    normalize_direction,
    normalize_kind,
)
from .settlement import (
    can_submit,
    compute_settlement,
    describe_settlement,
    settled_holding,
    settlement_entry,
    validate_settlement_request,
)
from .validation import validate_holding_value, validate_unit_fields
from .valuation import (
    apply_price,
    build_holding,
    compute_current_value,
    compute_initial_value,
    describe_valuation,
    is_unit_denominated,
)

__all__ = [
    "apply_price",
    "build_holding",
    "can_submit",
    "compute_budget_overview",
    "compute_cashflow_summary",
    "compute_category_breakdown",
    "compute_current_value",
    "compute_holding_breakdown",
    "compute_initial_value",
    "compute_monthly_cashflow",
    "compute_net_worth_summary",
    "compute_settlement",
    "describe_settlement",
    "describe_valuation",
    "is_unit_denominated",
    "normalize_coin_ref",
    "normalize_currency",
    "normalize_direction",
    "normalize_kind",
    "settled_holding",
    "settlement_entry",
    "validate_holding_value",
    "validate_settlement_request",
    "validate_unit_fields",
]

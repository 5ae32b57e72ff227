"""Domain package for business rules and core models."""

from .constants import HOLDING_KINDS, LIABILITY_KINDS
from .models import (
    Budget,
    Category,
    Holding,
    HoldingBreakdown,
    LedgerEntry,
    NetWorthSummary,
    SettlementPlan,
    SettlementRequest,
    SettlementResult,
)
from .policies import exposes_unit_fields
from .services import (
    compute_holding_breakdown,
    compute_net_worth_summary,
    compute_settlement,
    describe_valuation,
)

__all__ = [
    "Budget",
    "Category",
    "Holding",
    "HoldingBreakdown",
    "LedgerEntry",
    "NetWorthSummary",
    "SettlementPlan",
    "SettlementRequest",
    "SettlementResult",
    "HOLDING_KINDS",
    "LIABILITY_KINDS",
    "compute_holding_breakdown",
    "compute_net_worth_summary",
    "compute_settlement",
    "describe_valuation",
    "exposes_unit_fields",
]

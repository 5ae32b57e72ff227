"""Domain models package."""

from .finance import (
    BudgetOverview,
    BudgetProgress,
    CashflowSummary,
    CategoryAmount,
    CategoryBreakdown,
    HoldingBreakdown,
    HoldingKindAmount,
    MonthlyCashflow,
    NetWorthSummary,
    ValuationSnapshot,
)
from .holdings import Budget, Category, Holding, HoldingDraft, LedgerEntry
from .settlement import (
    SettlementPlan,
    SettlementRequest,
    SettlementResult,
)

__all__ = [
    "Budget",
    "BudgetOverview",
    "BudgetProgress",
    "CashflowSummary",
    "Category",
    "CategoryAmount",
    "CategoryBreakdown",
    "Holding",
    "HoldingBreakdown",
    "HoldingDraft",
    "HoldingKindAmount",
    "LedgerEntry",
    "MonthlyCashflow",
    "NetWorthSummary",
    "SettlementPlan",
    "SettlementRequest",
    "SettlementResult",
    "ValuationSnapshot",
]

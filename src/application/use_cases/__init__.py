"""Application use cases package."""

from .delete_holding import DeleteHoldingUseCase
from .get_budget_overview import GetBudgetOverviewUseCase
from .get_cashflow import GetCashflowSummaryUseCase, GetMonthlyCashflowUseCase
from .get_category_breakdown import GetCategoryBreakdownUseCase
from .get_holding_breakdown import GetHoldingBreakdownUseCase
from .get_holdings import GetHoldingsUseCase, HoldingView
from .get_net_worth_summary import GetNetWorthSummaryUseCase
from .manage_ledger_entries import (
    DeleteLedgerEntryUseCase,
    GetRecentEntriesUseCase,
    RecordLedgerEntryUseCase,
)
from .refresh_holding_price import (
    PriceRefreshResult,
    RefreshHoldingPriceUseCase,
)
from .save_holding import SaveHoldingUseCase
from .settle_holding import SettleHoldingUseCase

__all__ = [
    "DeleteHoldingUseCase",
    "DeleteLedgerEntryUseCase",
    "GetBudgetOverviewUseCase",
    "GetCashflowSummaryUseCase",
    "GetCategoryBreakdownUseCase",
    "GetHoldingBreakdownUseCase",
    "GetHoldingsUseCase",
    "GetMonthlyCashflowUseCase",
    "GetNetWorthSummaryUseCase",
    "GetRecentEntriesUseCase",
    "HoldingView",
    "PriceRefreshResult",
    "RecordLedgerEntryUseCase",
    "RefreshHoldingPriceUseCase",
    "SaveHoldingUseCase",
    "SettleHoldingUseCase",
]

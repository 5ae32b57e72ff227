"""Application ports package."""

from .database import DatabaseEnginePort
from .holdings_repository import HoldingsRepositoryPort
from .identity import IdentityPort
from .ledger_repository import (
    BudgetsRepositoryPort,
    CategoriesRepositoryPort,
    LedgerRepositoryPort,
)
from .price_feed import PriceFeedPort

__all__ = [
    "BudgetsRepositoryPort",
    "CategoriesRepositoryPort",
    "DatabaseEnginePort",
    "HoldingsRepositoryPort",
    "IdentityPort",
    "LedgerRepositoryPort",
    "PriceFeedPort",
]

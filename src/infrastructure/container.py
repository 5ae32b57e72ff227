"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.holdings_repository import HoldingsRepositoryPort
from src.application.ports.identity import IdentityPort
from src.application.ports.ledger_repository import (
    BudgetsRepositoryPort,
    CategoriesRepositoryPort,
    LedgerRepositoryPort,
)
from src.application.ports.price_feed import PriceFeedPort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.holdings_repository import (
    SqlAlchemyHoldingsRepository,
)
from src.infrastructure.identity import EnvironmentIdentityProvider
from src.infrastructure.ledger_repository import (
    SqlAlchemyBudgetsRepository,
    SqlAlchemyCategoriesRepository,
    SqlAlchemyLedgerRepository,
)
from src.infrastructure.price_feed import CoinGeckoPriceFeed
from src.infrastructure.settings import FinanceSettings


def build_settings() -> FinanceSettings:
    """Return settings sourced from the environment."""
    return FinanceSettings.from_env()


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_holdings_repository(
    db_port: DatabaseEnginePort | None = None,
) -> HoldingsRepositoryPort:
    """Return the holdings repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyHoldingsRepository(resolved_db)


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the ledger entries repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_categories_repository(
    db_port: DatabaseEnginePort | None = None,
) -> CategoriesRepositoryPort:
    """Return the categories repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyCategoriesRepository(resolved_db)


def build_budgets_repository(
    db_port: DatabaseEnginePort | None = None,
) -> BudgetsRepositoryPort:
    """Return the budgets repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyBudgetsRepository(resolved_db)


def build_price_feed(
    settings: FinanceSettings | None = None,
) -> PriceFeedPort:
    """Return the configured price feed client."""
    resolved = settings or build_settings()
    return CoinGeckoPriceFeed(
        base_url=resolved.price_feed_base_url,
        timeout=resolved.price_feed_timeout,
        api_key=resolved.price_feed_api_key,
    )


def build_identity_provider(
    settings: FinanceSettings | None = None,
) -> IdentityPort:
    """Return the identity provider."""
    return EnvironmentIdentityProvider(settings or build_settings())


__all__ = [
    "build_settings",
    "build_database_adapter",
    "build_holdings_repository",
    "build_ledger_repository",
    "build_categories_repository",
    "build_budgets_repository",
    "build_price_feed",
    "build_identity_provider",
]

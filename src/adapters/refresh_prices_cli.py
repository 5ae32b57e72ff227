"""CLI adapter to refresh unit prices of every priced holding.

This module wires the RefreshHoldingPriceUseCase to the configured
repositories and price feed so prices can be refreshed manually from the
command line instead of the dashboard button.
"""

from src.application.use_cases.refresh_holding_price import (
    RefreshHoldingPriceUseCase,
)
from src.infrastructure.container import (
    build_holdings_repository,
    build_identity_provider,
    build_price_feed,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Refresh prices for the configured user and print a summary."""
    logger = get_app_logger()
    settings = build_settings()
    user_id = build_identity_provider(settings).current_user_id()
    use_case = RefreshHoldingPriceUseCase(
        holdings_repository=build_holdings_repository(),
        price_feed=build_price_feed(settings),
        logger=logger,
        currency_code=settings.currency_code,
    )

    results = use_case.execute_all(user_id)

    refreshed = sum(1 for result in results if result.refreshed)
    print(f"Refreshed {refreshed} of {len(results)} priced holdings.")
    for result in results:
        if result.error:
            print(f"- {result.holding.name}: {result.error}")
        elif result.warning:
            print(f"- {result.holding.name}: {result.warning}")


if __name__ == "__main__":  # pragma: no cover
    main()

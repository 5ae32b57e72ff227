"""Use case to list holdings with their valuation."""

from dataclasses import dataclass

from src.application.ports.holdings_repository import HoldingsRepositoryPort
from src.domain.models import Holding, ValuationSnapshot
from src.domain.services.validation import validate_unit_fields
from src.domain.services.valuation import describe_valuation
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class HoldingView:
    """Holding paired with its unit economics for display."""

    holding: Holding
    valuation: ValuationSnapshot


class GetHoldingsUseCase:
    """Return the user's holdings sorted by value, largest first."""

    def __init__(
        self,
        holdings_repository: HoldingsRepositoryPort,
        logger=None,
    ) -> None:
        self._holdings_repository = holdings_repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str) -> list[HoldingView]:
        holdings = self._holdings_repository.fetch_holdings(user_id)
        for holding in holdings:
            validate_unit_fields(holding, self._logger)
        ordered = sorted(
            holdings,
            key=lambda holding: (-holding.value, holding.name),
        )
        return [
            HoldingView(holding=holding, valuation=describe_valuation(holding))
            for holding in ordered
        ]


__all__ = ["GetHoldingsUseCase", "HoldingView"]

"""Use case to remove a holding."""

from src.application.ports.holdings_repository import HoldingsRepositoryPort
from src.domain.errors import HoldingNotFoundError
from src.domain.models import Holding
from src.infrastructure.logging.logger import get_app_logger


class DeleteHoldingUseCase:
    """Delete one of the user's holdings.

    Ledger entries that reference the holding are kept; their
    ``holding_ref`` simply no longer resolves.
    """

    def __init__(
        self,
        holdings_repository: HoldingsRepositoryPort,
        logger=None,
    ) -> None:
        self._holdings_repository = holdings_repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, holding_id: str) -> Holding:
        """Delete the holding and return its last stored state.

        Args:
            user_id: Identity of the current user.
            holding_id: Holding to delete.

        Returns:
            Holding: The removed holding.

        Raises:
            HoldingNotFoundError: If the holding does not exist.
            StoreWriteError: If the store rejects the delete.
        """
        holding = self._holdings_repository.fetch_holding(user_id, holding_id)
        if holding is None:
            raise HoldingNotFoundError(f"Holding not found: {holding_id}")
        self._holdings_repository.delete_holding(user_id, holding_id)
        self._logger.info(
            f"Deleted holding id={holding.id} kind={holding.kind}"
        )
        return holding


__all__ = ["DeleteHoldingUseCase"]

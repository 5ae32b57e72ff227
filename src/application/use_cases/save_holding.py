"""Use case to create or edit a holding from form values."""

import uuid
from collections.abc import Callable
from datetime import datetime, timezone

from src.application.ports.holdings_repository import HoldingsRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models import Holding, HoldingDraft
from src.domain.services.valuation import build_holding
from src.infrastructure.logging.logger import get_app_logger


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SaveHoldingUseCase:
    """Derive a holding's stored value and persist it."""

    def __init__(
        self,
        holdings_repository: HoldingsRepositoryPort,
        logger=None,
        currency_code: str = DEFAULT_CURRENCY,
        now: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the use case.

        Args:
            holdings_repository: Port persisting holdings.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_code: Currency of the system.
            now: Clock used for ``updated_at``.
        """
        self._holdings_repository = holdings_repository
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code
        self._now = now

    def execute(self, user_id: str, draft: HoldingDraft) -> Holding:
        """Build the holding from the draft and store it.

        Args:
            user_id: Identity of the current user.
            draft: Values captured by the form. A draft without ``id``
                creates a new holding.

        Returns:
            Holding: The stored holding.

        Raises:
            ValueError: If the draft has no name or an unknown kind.
            StoreWriteError: If the store rejects the write.
        """
        if not draft.name or not draft.name.strip():
            raise ValueError("Holding name is required")
        holding = build_holding(
            draft,
            holding_id=draft.id or str(uuid.uuid4()),
            currency=self._currency_code,
            updated_at=self._now(),
        )
        stored = self._holdings_repository.save_holding(user_id, holding)
        self._logger.info(
            f"Saved holding id={stored.id} kind={stored.kind} "
            f"value={stored.value}"
        )
        return stored


__all__ = ["SaveHoldingUseCase"]

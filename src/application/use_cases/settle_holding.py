"""Use case to settle a debt or receivable, fully or partially."""

from collections.abc import Callable
from datetime import date, datetime, timezone

from src.application.ports.holdings_repository import HoldingsRepositoryPort
from src.domain.errors import StoreWriteError
from src.domain.models import (
    Holding,
    SettlementPlan,
    SettlementRequest,
    SettlementResult,
)
from src.domain.models.settlement import APPLIED, FAILED, REJECTED
from src.domain.services.settlement import (
    compute_settlement,
    settled_holding,
    settlement_entry,
    validate_settlement_request,
)
from src.infrastructure.logging.logger import get_app_logger


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SettleHoldingUseCase:
    """Apply a payment against a debt or receivable holding.

    Validation happens before any write. The holding update and the optional
    ledger entry are handed to the repository as a single unit, so either
    both commit or the stored holding remains the source of truth.
    """

    def __init__(
        self,
        holdings_repository: HoldingsRepositoryPort,
        logger=None,
        cap_overpayment: bool = False,
        now: Callable[[], datetime] = _utc_now,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the use case.

        Args:
            holdings_repository: Port reading and persisting holdings.
            logger: Optional logger compatible with logging.Logger-like API.
            cap_overpayment: Cap recorded payments at the remaining balance.
            now: Clock used for ``updated_at``.
            today: Clock used for the ledger entry date.
        """
        self._holdings_repository = holdings_repository
        self._logger = logger or get_app_logger()
        self._cap_overpayment = cap_overpayment
        self._now = now
        self._today = today

    def preview(
        self,
        holding: Holding,
        request: SettlementRequest,
    ) -> SettlementPlan | None:
        """Return the computed plan, or None while the input is incomplete."""
        if validate_settlement_request(holding, request):
            return None
        return compute_settlement(
            holding,
            request,
            cap_overpayment=self._cap_overpayment,
        )

    def execute(
        self,
        user_id: str,
        holding_id: str,
        request: SettlementRequest,
    ) -> SettlementResult:
        """Settle the holding.

        Args:
            user_id: Identity of the current user.
            holding_id: Debt or receivable being settled.
            request: Settlement input.

        Returns:
            SettlementResult: ``applied``, ``rejected`` (nothing written) or
            ``failed`` (store error, nothing committed).
        """
        holding = self._holdings_repository.fetch_holding(user_id, holding_id)
        if holding is None:
            return SettlementResult(
                status=REJECTED,
                errors=[f"Holding not found: {holding_id}"],
            )

        errors = validate_settlement_request(holding, request)
        if errors:
            self._logger.warning(
                f"Settlement rejected for holding id={holding_id}: "
                f"{'; '.join(errors)}"
            )
            return SettlementResult(
                status=REJECTED,
                holding=holding,
                errors=errors,
            )

        plan = compute_settlement(
            holding,
            request,
            cap_overpayment=self._cap_overpayment,
        )
        updated = settled_holding(holding, plan, updated_at=self._now())
        entry = (
            settlement_entry(plan, request, entry_date=self._today())
            if request.record_transaction
            else None
        )

        try:
            stored_entry = self._holdings_repository.apply_settlement(
                user_id,
                updated,
                entry,
            )
        except StoreWriteError as exc:
            self._logger.error(
                f"Settlement failed for holding id={holding_id}: {exc}"
            )
            return SettlementResult(
                status=FAILED,
                plan=plan,
                holding=holding,
                errors=[str(exc)],
            )

        self._logger.info(
            f"Settled holding id={holding_id}: paid={plan.pay_amount}, "
            f"remaining={plan.new_value}, recorded={entry is not None}"
        )
        return SettlementResult(
            status=APPLIED,
            plan=plan,
            holding=updated,
            ledger_entry=stored_entry,
        )


__all__ = ["SettleHoldingUseCase"]

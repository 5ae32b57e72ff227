"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from src.domain.models.holdings import Holding
from src.domain.policies import exposes_unit_fields


def validate_holding_value(holding: Holding, logger: Logger) -> None:
    """Warn when a holding violates the non-negative value convention.

    Args:
        holding: Holding read from the store.
        logger: Logger used for warnings.
    """
    if holding.value < 0:
        logger.warning(
            f"Holding value is negative for kind={holding.kind} "
            f"id={holding.id}: {holding.value}"
        )


def validate_unit_fields(holding: Holding, logger: Logger) -> None:
    """Warn when unit fields are set on a holding that does not expose them.

    Args:
        holding: Holding read from the store.
        logger: Logger used for warnings.
    """
    if exposes_unit_fields(holding.kind, holding.unit_denominated):
        for label, amount in (
            ("quantity", holding.quantity),
            ("current_price", holding.current_price),
        ):
            if amount is not None and amount < Decimal("0"):
                logger.warning(
                    f"Holding {label} is negative for id={holding.id}: "
                    f"{amount}"
                )
        return
    stray = [
        label
        for label, field_value in (
            ("quantity", holding.quantity),
            ("buy_price", holding.buy_price),
            ("current_price", holding.current_price),
            ("coin_ref", holding.coin_ref),
        )
        if field_value is not None
    ]
    if stray:
        logger.warning(
            f"Holding id={holding.id} of kind={holding.kind} carries unit "
            f"fields: {', '.join(stray)}"
        )


__all__ = ["validate_holding_value", "validate_unit_fields"]

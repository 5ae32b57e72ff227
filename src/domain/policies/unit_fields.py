"""Policy deciding whether a holding exposes quantity and price fields."""

from src.domain.constants import SETTLEABLE_KINDS, UNIT_PRICED_KINDS


def exposes_unit_fields(kind: str, unit_denominated: bool) -> bool:
    """Return True when a holding's value derives from quantity x price.

    Crypto and investment holdings always expose unit fields. Debts and
    receivables expose them only when explicitly flagged (e.g. a DeFi loan
    denominated in coins).

    Args:
        kind: Holding kind.
        unit_denominated: Explicit unit-denomination flag.

    Returns:
        bool: Whether quantity, prices and coin_ref apply.
    """
    if kind in UNIT_PRICED_KINDS:
        return True
    return kind in SETTLEABLE_KINDS and unit_denominated


def resolve_unit_flag(
    kind: str,
    stored_flag: bool | None,
    coin_ref: str | None,
) -> bool:
    """Rebuild the unit-denomination flag for a stored holding.

    Rows written before the flag existed carry NULL; those fall back to the
    presence of a price-feed identifier.
    """
    if kind in UNIT_PRICED_KINDS:
        return True
    if kind not in SETTLEABLE_KINDS:
        return False
    if stored_flag is None:
        return bool(coin_ref)
    return bool(stored_flag)


__all__ = ["exposes_unit_fields", "resolve_unit_flag"]

"""Domain normalization helpers."""

from src.domain.constants import HOLDING_KINDS, LEDGER_DIRECTIONS


def normalize_kind(kind: str | None) -> str:
    """Normalize a holding kind.

    Args:
        kind: Raw kind value from a form or repository.

    Returns:
        str: Lower-case kind.

    Raises:
        ValueError: If the kind is not a known holding kind.
    """
    cleaned = (kind or "").strip().lower()
    if cleaned not in HOLDING_KINDS:
        raise ValueError(f"Unsupported holding kind: {kind!r}")
    return cleaned


def normalize_direction(direction: str | None) -> str:
    """Normalize a ledger direction (income or expense)."""
    cleaned = (direction or "").strip().lower()
    if cleaned not in LEDGER_DIRECTIONS:
        raise ValueError(f"Unsupported ledger direction: {direction!r}")
    return cleaned


def normalize_coin_ref(coin_ref: str | None) -> str | None:
    """Normalize price-feed identifiers.

    Args:
        coin_ref: Raw identifier.

    Returns:
        str | None: Lower-case identifier, None when blank.
    """
    if not coin_ref:
        return None
    cleaned = coin_ref.strip().lower()
    return cleaned or None


def normalize_currency(currency: str | None, default: str) -> str:
    """Normalize currency codes, falling back to ``default`` when blank."""
    if not currency:
        return default
    cleaned = currency.strip()
    return cleaned.upper() if cleaned else default


__all__ = [
    "normalize_kind",
    "normalize_direction",
    "normalize_coin_ref",
    "normalize_currency",
]

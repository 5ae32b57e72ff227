"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, forms or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def coerce_optional_decimal(value) -> Decimal | None:
    """Normalize numeric values to Decimal, keeping missing values as None.

    Empty strings (untouched form inputs) are treated as missing.

    Args:
        value: Raw numeric value.

    Returns:
        Decimal | None: Normalized value or None.
    """
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        return coerce_decimal(value)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid numeric value: {value!r}") from exc


def round_amount(value: Decimal) -> Decimal:
    """Round a monetary amount to whole currency units (half up)."""
    return value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


__all__ = ["coerce_decimal", "coerce_optional_decimal", "round_amount"]

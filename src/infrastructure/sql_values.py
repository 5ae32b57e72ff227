"""Conversions between domain values and SQL parameters/rows."""

from datetime import date, datetime
from decimal import Decimal


def to_sql_number(value: Decimal | None) -> str | None:
    """Bind Decimals as strings so drivers without native decimals keep
    full precision."""
    if value is None:
        return None
    return str(value)


def to_sql_datetime(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.isoformat()


def from_sql_datetime(value) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def from_sql_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


__all__ = [
    "to_sql_number",
    "to_sql_datetime",
    "from_sql_datetime",
    "from_sql_date",
]

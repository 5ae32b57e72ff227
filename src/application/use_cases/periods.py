"""Reporting windows shared by dashboard use cases."""

import calendar
from datetime import date


def month_bounds(today: date) -> tuple[date, date]:
    """Return the first and last day of the month containing ``today``."""
    last_day = calendar.monthrange(today.year, today.month)[1]
    return (
        date(today.year, today.month, 1),
        date(today.year, today.month, last_day),
    )


def trailing_months_start(today: date, months: int = 6) -> date:
    """Return the first day of the window covering the last ``months`` months.

    The current month counts as one of them, so ``months=6`` in June starts
    on January 1st.

    Args:
        today: Reference date.
        months: Number of calendar months in the window (>= 1).

    Returns:
        date: First day of the oldest month in the window.
    """
    if months < 1:
        raise ValueError(f"months must be >= 1, got {months}")
    index = today.year * 12 + (today.month - 1) - (months - 1)
    return date(index // 12, index % 12 + 1, 1)


__all__ = ["month_bounds", "trailing_months_start"]

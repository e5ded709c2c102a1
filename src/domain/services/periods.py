"""Month keys and reporting periods."""

import calendar
from datetime import date

from src.domain.errors import ValidationError

PERIOD_THIS_MONTH = "This Month"
PERIOD_LAST_MONTH = "Last Month"
PERIOD_LAST_3_MONTHS = "Last 3 Months"
PERIOD_LAST_6_MONTHS = "Last 6 Months"
PERIOD_THIS_QUARTER = "This Quarter"
PERIOD_THIS_YEAR = "This Year"
PERIOD_LAST_YEAR = "Last Year"
PERIOD_ALL_TIME = "All Time"

PERIODS = (
    PERIOD_THIS_MONTH,
    PERIOD_LAST_MONTH,
    PERIOD_LAST_3_MONTHS,
    PERIOD_LAST_6_MONTHS,
    PERIOD_THIS_QUARTER,
    PERIOD_THIS_YEAR,
    PERIOD_LAST_YEAR,
    PERIOD_ALL_TIME,
)


def month_key(year: int, month: int) -> str:
    """Return the zero padded ``YYYY-MM`` key for a year and month."""
    if not 1 <= month <= 12:
        raise ValidationError.single("month", f"Month out of range: {month}")
    return f"{year:04d}-{month:02d}"


def split_month_key(key: str) -> tuple[int, int]:
    """Parse a ``YYYY-MM`` key into ``(year, month)``.

    Raises:
        ValidationError: If the key is not a zero padded month key.
    """
    parts = key.split("-") if isinstance(key, str) else []
    if (
        len(parts) != 2
        or len(parts[0]) != 4
        or len(parts[1]) != 2
        or not parts[0].isdigit()
        or not parts[1].isdigit()
    ):
        raise ValidationError.single(
            "month",
            f"Expected a YYYY-MM month key, got {key!r}",
        )
    year, month = int(parts[0]), int(parts[1])
    if not 1 <= month <= 12:
        raise ValidationError.single("month", f"Month out of range: {key}")
    return year, month


def current_month_key(today: date) -> str:
    return month_key(today.year, today.month)


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """Move ``offset`` months from (year, month), negative goes back."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def recent_month_keys(today: date, count: int = 12) -> list[str]:
    """Return the last ``count`` month keys, newest first."""
    keys = []
    for offset in range(count):
        year, month = shift_month(today.year, today.month, -offset)
        keys.append(month_key(year, month))
    return keys


def month_label(key: str) -> str:
    """Return a display label such as ``March 2024``."""
    year, month = split_month_key(key)
    return f"{calendar.month_name[month]} {year}"


def month_bounds(key: str) -> tuple[date, date]:
    """Return the first and last calendar day of a month key."""
    year, month = split_month_key(key)
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def period_bounds(
    period: str,
    today: date,
) -> tuple[date | None, date | None]:
    """Resolve a named reporting period into inclusive date bounds.

    Args:
        period: One of ``PERIODS``.
        today: Reference date.

    Returns:
        tuple[date | None, date | None]: Start and end dates, None for
        open bounds.

    Raises:
        ValidationError: If the period name is unknown.
    """
    if period == PERIOD_ALL_TIME:
        return None, None
    if period == PERIOD_THIS_MONTH:
        return date(today.year, today.month, 1), today
    if period == PERIOD_LAST_MONTH:
        year, month = shift_month(today.year, today.month, -1)
        return month_bounds(month_key(year, month))
    if period in (PERIOD_LAST_3_MONTHS, PERIOD_LAST_6_MONTHS):
        span = 3 if period == PERIOD_LAST_3_MONTHS else 6
        year, month = shift_month(today.year, today.month, -(span - 1))
        return date(year, month, 1), today
    if period == PERIOD_THIS_QUARTER:
        start_month = (today.month - 1) // 3 * 3 + 1
        return date(today.year, start_month, 1), today
    if period == PERIOD_THIS_YEAR:
        return date(today.year, 1, 1), today
    if period == PERIOD_LAST_YEAR:
        return date(today.year - 1, 1, 1), date(today.year - 1, 12, 31)
    raise ValidationError.single("period", f"Unknown period: {period}")


__all__ = [
    "PERIODS",
    "PERIOD_THIS_MONTH",
    "PERIOD_LAST_MONTH",
    "PERIOD_LAST_3_MONTHS",
    "PERIOD_LAST_6_MONTHS",
    "PERIOD_THIS_QUARTER",
    "PERIOD_THIS_YEAR",
    "PERIOD_LAST_YEAR",
    "PERIOD_ALL_TIME",
    "month_key",
    "split_month_key",
    "current_month_key",
    "shift_month",
    "recent_month_keys",
    "month_label",
    "month_bounds",
    "period_bounds",
]

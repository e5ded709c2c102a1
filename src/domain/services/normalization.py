"""Domain normalization helpers."""

from datetime import date, datetime


def normalize_currency_code(currency: str | None) -> str | None:
    """Normalize currency codes.

    Args:
        currency: Raw currency code from a form or repository.

    Returns:
        str | None: Upper-cased code, or None when blank.
    """
    if not currency:
        return None
    cleaned = currency.strip()
    return cleaned.upper() if cleaned else None


def normalize_text(value: str | None) -> str:
    """Strip free-text values, mapping None to an empty string."""
    if value is None:
        return ""
    return str(value).strip()


def normalize_iso_date(value: str | date | None) -> str | None:
    """Normalize a calendar date into ``YYYY-MM-DD``.

    Args:
        value: A date, a datetime, or an ISO formatted string.

    Returns:
        str | None: ISO date string, or None when blank.

    Raises:
        ValueError: If the value is not a valid calendar date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    cleaned = str(value).strip()
    if not cleaned:
        return None
    # Timestamps from the store carry a time part.
    return date.fromisoformat(cleaned[:10]).isoformat()


__all__ = ["normalize_currency_code", "normalize_text", "normalize_iso_date"]

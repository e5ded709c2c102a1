"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, forms, or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def coerce_optional_decimal(value) -> Decimal | None:
    """Normalize optional numeric values, keeping blanks as None.

    Args:
        value: Raw numeric value, None, or an empty string.

    Returns:
        Decimal | None: Normalized value or None when no value was given.

    Raises:
        ValueError: If the value is not a finite number.
    """
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        parsed = coerce_decimal(value)
    except InvalidOperation as exc:
        raise ValueError(f"Not a number: {value!r}") from exc
    if not parsed.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return parsed


__all__ = ["coerce_decimal", "coerce_optional_decimal"]

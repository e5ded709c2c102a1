"""Currency conversion into the base currency."""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from logging import Logger

from src.domain.constants import BASE_CURRENCY
from src.domain.models.rates import (
    ConversionResult,
    ExchangeRateRow,
    MissingRateWarning,
)
from src.domain.services.normalization import normalize_currency_code
from src.utils.decimal_utils import coerce_decimal

_ONE = Decimal("1")


def build_rate_table(
    rows: Iterable[ExchangeRateRow],
    logger: Logger | None = None,
    base_currency: str = BASE_CURRENCY,
) -> dict[str, Decimal]:
    """Build the currency to rate mapping used for conversions.

    The base currency is always present with a rate of 1, whatever the
    stored rows say.

    Args:
        rows: Stored exchange rate rows.
        logger: Optional logger used for warnings.
        base_currency: Reference currency of the ledger.

    Returns:
        dict[str, Decimal]: Rate per currency code.
    """
    base = normalize_currency_code(base_currency) or BASE_CURRENCY
    rates: dict[str, Decimal] = {base: _ONE}
    for row in rows:
        currency = normalize_currency_code(row.currency)
        if not currency or currency == base:
            continue
        rate = coerce_decimal(row.rate)
        if rate <= 0:
            if logger is not None:
                logger.warning(
                    f"Skipping non-positive exchange rate for {currency}: {rate}"
                )
            continue
        rates[currency] = rate
    return rates


def resolve_table_rate(
    currency: str,
    rates: Mapping[str, Decimal],
    base_currency: str = BASE_CURRENCY,
) -> tuple[Decimal, MissingRateWarning | None]:
    """Return the table rate for a currency, defaulting to 1 when absent."""
    rate = rates.get(currency)
    if rate is None:
        return _ONE, MissingRateWarning(
            currency=currency,
            base_currency=base_currency,
        )
    return coerce_decimal(rate), None


def convert_amount(
    amount: Decimal,
    currency: str,
    rates: Mapping[str, Decimal],
    manual_rate: Decimal | None = None,
    manual_converted_amount: Decimal | None = None,
    *,
    base_currency: str = BASE_CURRENCY,
    logger: Logger | None = None,
) -> ConversionResult:
    """Convert an amount into the base currency.

    Resolution order: base currency, manual converted amount, manual rate,
    rate table. When a manual converted amount is given the reported rate
    is derived from it (``manual / amount``) so that scaling any portion of
    the amount by the rate stays consistent with the override; for a zero
    amount the nominal rate is reported instead.

    Args:
        amount: Amount in ``currency``.
        currency: Currency code of the amount.
        rates: Rate per currency code, see ``build_rate_table``.
        manual_rate: Optional user supplied rate.
        manual_converted_amount: Optional user supplied converted amount.
        base_currency: Reference currency of the ledger.
        logger: Optional logger used for missing rate warnings.

    Returns:
        ConversionResult: Converted amount, effective rate, and a warning
        when the rate table had no entry for the currency.
    """
    amount = coerce_decimal(amount)
    code = normalize_currency_code(currency) or ""
    base = normalize_currency_code(base_currency) or BASE_CURRENCY
    if code == base:
        return ConversionResult(converted_amount=amount, effective_rate=_ONE)

    if manual_converted_amount is not None:
        converted = coerce_decimal(manual_converted_amount)
        if amount != 0:
            return ConversionResult(
                converted_amount=converted,
                effective_rate=converted / amount,
            )
        if manual_rate is not None:
            nominal = coerce_decimal(manual_rate)
        else:
            nominal = coerce_decimal(rates.get(code, _ONE))
        return ConversionResult(converted_amount=converted, effective_rate=nominal)

    if manual_rate is not None:
        rate = coerce_decimal(manual_rate)
        return ConversionResult(converted_amount=amount * rate, effective_rate=rate)

    rate, warning = resolve_table_rate(code, rates, base)
    if warning is not None and logger is not None:
        logger.warning(warning.message)
    return ConversionResult(
        converted_amount=amount * rate,
        effective_rate=rate,
        warning=warning,
    )


__all__ = ["build_rate_table", "resolve_table_rate", "convert_amount"]

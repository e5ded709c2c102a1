"""Domain models for currency conversion."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ExchangeRateRow:
    """Stored rate: one unit of ``currency`` equals ``rate`` base units."""

    currency: str
    rate: Decimal


@dataclass(frozen=True)
class MissingRateWarning:
    """Soft signal that no authoritative rate exists for a currency."""

    currency: str
    base_currency: str

    @property
    def message(self) -> str:
        return (
            f"Missing exchange rate for {self.currency} to "
            f"{self.base_currency}; using 1"
        )


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of converting an amount into the base currency."""

    converted_amount: Decimal
    effective_rate: Decimal
    warning: MissingRateWarning | None = None


__all__ = ["ExchangeRateRow", "MissingRateWarning", "ConversionResult"]

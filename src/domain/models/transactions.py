"""Domain models for income and expense transactions."""

from dataclasses import dataclass, field
from datetime import date as date_type
from decimal import Decimal

from src.domain.constants import INCOME_UPCOMING, PAYMENT_PENDING
from src.domain.models.rates import MissingRateWarning


@dataclass(frozen=True)
class IncomeDraft:
    """Raw income as submitted by a caller, before validation.

    Numeric fields accept anything ``coerce_decimal`` understands. The
    ``currency`` field is informational only: the account currency wins.
    """

    date: str | date_type | None
    original_amount: object
    account: str
    status: str = INCOME_UPCOMING
    received_amount: object = None
    category: str = ""
    description: str = ""
    client_name: str = ""
    notes: str = ""
    due_date: str | date_type | None = None
    manual_conversion_rate: object = None
    manual_converted_amount: object = None
    currency: str | None = None
    id: str | None = None


@dataclass(frozen=True)
class ExpenseDraft:
    """Raw expense as submitted by a caller, before validation."""

    date: str | date_type | None
    amount: object
    account: str
    payment_status: str = PAYMENT_PENDING
    category: str = ""
    description: str = ""
    notes: str = ""
    due_date: str | date_type | None = None
    manual_conversion_rate: object = None
    manual_converted_amount: object = None
    currency: str | None = None
    id: str | None = None


@dataclass(frozen=True)
class Income:
    """Normalized income with its conversion frozen at write time.

    Attributes:
        converted_amount: Base-currency value of the received portion.
        original_converted_amount: Base-currency value of the full amount.
        split_amount: Portion feeding the profit distribution.
        split_rate_used: Effective rate applied when the record was written.
        warnings: Conversion warnings raised while normalizing; not stored.
    """

    id: str | None
    date: str
    original_amount: Decimal
    currency: str
    received_amount: Decimal
    status: str
    account: str
    category: str
    description: str
    client_name: str
    converted_amount: Decimal
    original_converted_amount: Decimal
    split_amount: Decimal
    split_rate_used: Decimal
    notes: str = ""
    due_date: str | None = None
    manual_conversion_rate: Decimal | None = None
    manual_converted_amount: Decimal | None = None
    warnings: tuple[MissingRateWarning, ...] = field(
        default=(),
        compare=False,
    )

    @property
    def outstanding_amount(self) -> Decimal:
        """Return the base-currency amount still owed by the client."""
        return self.original_converted_amount - self.converted_amount


@dataclass(frozen=True)
class Expense:
    """Normalized expense with its conversion frozen at write time."""

    id: str | None
    date: str
    amount: Decimal
    currency: str
    converted_amount: Decimal
    payment_status: str
    account: str
    category: str
    description: str
    conversion_rate_used: Decimal = Decimal("1")
    notes: str = ""
    due_date: str | None = None
    manual_conversion_rate: Decimal | None = None
    manual_converted_amount: Decimal | None = None
    warnings: tuple[MissingRateWarning, ...] = field(
        default=(),
        compare=False,
    )


__all__ = ["IncomeDraft", "ExpenseDraft", "Income", "Expense"]

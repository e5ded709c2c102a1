"""Domain validation helpers."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.constants import (
    INCOME_PARTIAL,
    INCOME_RECEIVED,
    INCOME_STATUSES,
    INCOME_UPCOMING,
    PAYMENT_PENDING,
    PAYMENT_STATUSES,
)
from src.domain.errors import ValidationError
from src.domain.models.transactions import ExpenseDraft, IncomeDraft
from src.domain.services.normalization import normalize_iso_date, normalize_text
from src.utils.decimal_utils import coerce_optional_decimal

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


@dataclass(frozen=True)
class IncomeFields:
    """Validated and parsed income fields."""

    date: str
    original_amount: Decimal
    received_amount: Decimal
    status: str
    description: str
    client_name: str
    due_date: str | None
    manual_conversion_rate: Decimal | None
    manual_converted_amount: Decimal | None


@dataclass(frozen=True)
class ExpenseFields:
    """Validated and parsed expense fields."""

    date: str
    amount: Decimal
    payment_status: str
    description: str
    due_date: str | None
    manual_conversion_rate: Decimal | None
    manual_converted_amount: Decimal | None


def _parse_number(
    errors: dict[str, str],
    field: str,
    value,
) -> Decimal | None:
    try:
        return coerce_optional_decimal(value)
    except ValueError:
        errors[field] = "Must be a number"
        return None


def _parse_date(
    errors: dict[str, str],
    field: str,
    value,
    required_message: str | None,
) -> str | None:
    try:
        parsed = normalize_iso_date(value)
    except ValueError:
        errors[field] = "Must be a YYYY-MM-DD date"
        return None
    if parsed is None and required_message:
        errors[field] = required_message
    return parsed


def _check_manual_overrides(
    errors: dict[str, str],
    draft: IncomeDraft | ExpenseDraft,
) -> tuple[Decimal | None, Decimal | None]:
    manual_rate = _parse_number(
        errors,
        "manual_conversion_rate",
        draft.manual_conversion_rate,
    )
    if manual_rate is not None and manual_rate <= 0:
        errors["manual_conversion_rate"] = "Conversion rate must be greater than 0"
    manual_amount = _parse_number(
        errors,
        "manual_converted_amount",
        draft.manual_converted_amount,
    )
    if manual_amount is not None and manual_amount <= 0:
        errors["manual_converted_amount"] = (
            "Converted amount must be greater than 0"
        )
    return manual_rate, manual_amount


def validate_income_draft(draft: IncomeDraft) -> IncomeFields:
    """Validate a raw income and return its parsed fields.

    Received incomes take the full original amount as received; upcoming
    and cancelled incomes take zero, whatever the draft says.

    Raises:
        ValidationError: With every failing field.
    """
    errors: dict[str, str] = {}
    entry_date = _parse_date(errors, "date", draft.date, "Date is required")

    original = _parse_number(errors, "original_amount", draft.original_amount)
    if original is None or original <= 0:
        errors.setdefault(
            "original_amount",
            "Original amount must be greater than 0",
        )
    description = normalize_text(draft.description)
    if not description:
        errors["description"] = "Description is required"
    client_name = normalize_text(draft.client_name)
    if not client_name:
        errors["client_name"] = "Client name is required"

    status = normalize_text(draft.status)
    if status not in INCOME_STATUSES:
        errors["status"] = f"Status must be one of {', '.join(INCOME_STATUSES)}"

    due_date = _parse_date(
        errors,
        "due_date",
        draft.due_date,
        "Due date is required for upcoming payments"
        if status == INCOME_UPCOMING
        else None,
    )

    received = _ZERO
    if status == INCOME_RECEIVED and original is not None:
        received = original
    elif status == INCOME_PARTIAL:
        parsed = _parse_number(errors, "received_amount", draft.received_amount)
        received = parsed if parsed is not None else _ZERO
        if "received_amount" not in errors:
            if received <= 0:
                errors["received_amount"] = (
                    "Received amount must be greater than 0 for partial payments"
                )
            elif original is not None and received >= original:
                errors["received_amount"] = (
                    "Received amount must be less than original amount "
                    "for partial payments"
                )

    manual_rate, manual_amount = _check_manual_overrides(errors, draft)
    if errors:
        raise ValidationError(errors)
    return IncomeFields(
        date=entry_date,
        original_amount=original,
        received_amount=received,
        status=status,
        description=description,
        client_name=client_name,
        due_date=due_date,
        manual_conversion_rate=manual_rate,
        manual_converted_amount=manual_amount,
    )


def validate_expense_draft(draft: ExpenseDraft) -> ExpenseFields:
    """Validate a raw expense and return its parsed fields.

    Raises:
        ValidationError: With every failing field.
    """
    errors: dict[str, str] = {}
    entry_date = _parse_date(errors, "date", draft.date, "Date is required")

    amount = _parse_number(errors, "amount", draft.amount)
    if amount is None or amount <= 0:
        errors.setdefault("amount", "Amount must be greater than 0")
    description = normalize_text(draft.description)
    if not description:
        errors["description"] = "Description is required"

    payment_status = normalize_text(draft.payment_status)
    if payment_status not in PAYMENT_STATUSES:
        errors["payment_status"] = (
            f"Payment status must be one of {', '.join(PAYMENT_STATUSES)}"
        )
    due_date = _parse_date(
        errors,
        "due_date",
        draft.due_date,
        "Due date is required for pending payments"
        if payment_status == PAYMENT_PENDING
        else None,
    )

    manual_rate, manual_amount = _check_manual_overrides(errors, draft)
    if errors:
        raise ValidationError(errors)
    return ExpenseFields(
        date=entry_date,
        amount=amount,
        payment_status=payment_status,
        description=description,
        due_date=due_date,
        manual_conversion_rate=manual_rate,
        manual_converted_amount=manual_amount,
    )


def validate_exchange_rate(currency: str, rate) -> Decimal:
    """Return the rate as a Decimal, rejecting non-positive values."""
    errors: dict[str, str] = {}
    parsed = _parse_number(errors, currency, rate)
    if parsed is None or parsed <= 0:
        errors.setdefault(currency, "Exchange rate must be greater than 0")
    if errors:
        raise ValidationError(errors)
    return parsed


def validate_company_percentage(value) -> Decimal:
    """Return the company percentage, rejecting values outside [0, 100]."""
    errors: dict[str, str] = {}
    parsed = _parse_number(errors, "company_percentage", value)
    if parsed is None or not _ZERO <= parsed <= _HUNDRED:
        errors.setdefault(
            "company_percentage",
            "Company percentage must be between 0 and 100",
        )
    if errors:
        raise ValidationError(errors)
    return parsed


__all__ = [
    "IncomeFields",
    "ExpenseFields",
    "validate_income_draft",
    "validate_expense_draft",
    "validate_exchange_rate",
    "validate_company_percentage",
]

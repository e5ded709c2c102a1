"""Normalization of raw incomes and expenses into stored records."""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    BASE_CURRENCY,
    CONFIRMED_INCOME_STATUSES,
    INCOME_PARTIAL,
)
from src.domain.errors import UnknownAccountError
from src.domain.models.accounts import Account, AccountCurrencyLookup
from src.domain.models.transactions import (
    Expense,
    ExpenseDraft,
    Income,
    IncomeDraft,
)
from src.domain.services.fx import convert_amount
from src.domain.services.normalization import (
    normalize_currency_code,
    normalize_text,
)
from src.domain.services.validation import (
    validate_expense_draft,
    validate_income_draft,
)

_ZERO = Decimal("0")


class AccountDirectory(AccountCurrencyLookup):
    """Account currency lookup over a known set of accounts."""

    def __init__(self, accounts: Iterable[Account]) -> None:
        """Initialize the directory.

        Args:
            accounts: Accounts owned by the current user.
        """
        self._currencies = {
            account.name.strip(): normalize_currency_code(account.currency)
            for account in accounts
        }

    def resolve_account_currency(self, account_name: str) -> str:
        """Return the currency configured on the account.

        Raises:
            UnknownAccountError: If no account has that name or it has no
                currency configured.
        """
        name = normalize_text(account_name)
        currency = self._currencies.get(name)
        if not currency:
            raise UnknownAccountError(name)
        return currency

    def __contains__(self, account_name: str) -> bool:
        return bool(self._currencies.get(normalize_text(account_name)))


def normalize_income(
    draft: IncomeDraft,
    account_lookup: AccountCurrencyLookup,
    rates: Mapping[str, Decimal],
    *,
    base_currency: str = BASE_CURRENCY,
    logger: Logger | None = None,
) -> Income:
    """Validate a raw income and compute its converted amounts.

    Args:
        draft: Raw income from the caller.
        account_lookup: Resolves the currency of the referenced account.
        rates: Current rate table.
        base_currency: Reference currency of the ledger.
        logger: Optional logger used for conversion warnings.

    Returns:
        Income: Record ready to be persisted.

    Raises:
        ValidationError: If a field is missing or out of range.
        UnknownAccountError: If the account cannot be resolved.
    """
    fields = validate_income_draft(draft)
    account = normalize_text(draft.account)
    currency = account_lookup.resolve_account_currency(account)

    original = convert_amount(
        fields.original_amount,
        currency,
        rates,
        manual_rate=fields.manual_conversion_rate,
        manual_converted_amount=fields.manual_converted_amount,
        base_currency=base_currency,
        logger=logger,
    )

    if fields.status not in CONFIRMED_INCOME_STATUSES:
        received_converted = _ZERO
    elif fields.status != INCOME_PARTIAL:
        received_converted = original.converted_amount
    elif fields.manual_converted_amount is not None and (
        currency != normalize_currency_code(base_currency)
    ):
        # The override covers the full amount; scale it to the received part.
        received_converted = (
            fields.manual_converted_amount
            * fields.received_amount
            / fields.original_amount
        )
    else:
        received_converted = fields.received_amount * original.effective_rate

    warnings = (original.warning,) if original.warning is not None else ()
    return Income(
        id=draft.id,
        date=fields.date,
        original_amount=fields.original_amount,
        currency=currency,
        received_amount=fields.received_amount,
        status=fields.status,
        account=account,
        category=normalize_text(draft.category),
        description=fields.description,
        client_name=fields.client_name,
        converted_amount=received_converted,
        original_converted_amount=original.converted_amount,
        split_amount=received_converted,
        split_rate_used=original.effective_rate,
        notes=normalize_text(draft.notes),
        due_date=fields.due_date,
        manual_conversion_rate=fields.manual_conversion_rate,
        manual_converted_amount=fields.manual_converted_amount,
        warnings=warnings,
    )


def normalize_expense(
    draft: ExpenseDraft,
    account_lookup: AccountCurrencyLookup,
    rates: Mapping[str, Decimal],
    *,
    base_currency: str = BASE_CURRENCY,
    logger: Logger | None = None,
) -> Expense:
    """Validate a raw expense and compute its converted amount.

    Raises:
        ValidationError: If a field is missing or out of range.
        UnknownAccountError: If the account cannot be resolved.
    """
    fields = validate_expense_draft(draft)
    account = normalize_text(draft.account)
    currency = account_lookup.resolve_account_currency(account)
    result = convert_amount(
        fields.amount,
        currency,
        rates,
        manual_rate=fields.manual_conversion_rate,
        manual_converted_amount=fields.manual_converted_amount,
        base_currency=base_currency,
        logger=logger,
    )
    return Expense(
        id=draft.id,
        date=fields.date,
        amount=fields.amount,
        currency=currency,
        converted_amount=result.converted_amount,
        payment_status=fields.payment_status,
        account=account,
        category=normalize_text(draft.category),
        description=fields.description,
        conversion_rate_used=result.effective_rate,
        notes=normalize_text(draft.notes),
        due_date=fields.due_date,
        manual_conversion_rate=fields.manual_conversion_rate,
        manual_converted_amount=fields.manual_converted_amount,
        warnings=(result.warning,) if result.warning is not None else (),
    )


def income_to_draft(income: Income) -> IncomeDraft:
    """Return a draft that re-submits ``income`` under its id."""
    return IncomeDraft(
        id=income.id,
        date=income.date,
        original_amount=income.original_amount,
        account=income.account,
        status=income.status,
        received_amount=(
            income.received_amount if income.status == INCOME_PARTIAL else None
        ),
        category=income.category,
        description=income.description,
        client_name=income.client_name,
        notes=income.notes,
        due_date=income.due_date,
        manual_conversion_rate=income.manual_conversion_rate,
        manual_converted_amount=income.manual_converted_amount,
        currency=income.currency,
    )


def expense_to_draft(expense: Expense) -> ExpenseDraft:
    """Return a draft that re-submits ``expense`` under its id."""
    return ExpenseDraft(
        id=expense.id,
        date=expense.date,
        amount=expense.amount,
        account=expense.account,
        payment_status=expense.payment_status,
        category=expense.category,
        description=expense.description,
        notes=expense.notes,
        due_date=expense.due_date,
        manual_conversion_rate=expense.manual_conversion_rate,
        manual_converted_amount=expense.manual_converted_amount,
        currency=expense.currency,
    )


__all__ = [
    "AccountDirectory",
    "normalize_income",
    "normalize_expense",
    "income_to_draft",
    "expense_to_draft",
]

"""Account balance recomputation from posted transactions."""

from collections.abc import Iterable, Mapping
from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    BASE_CURRENCY,
    CONFIRMED_INCOME_STATUSES,
    PAYMENT_DONE,
)
from src.domain.models.accounts import Account
from src.domain.models.transactions import Expense, Income
from src.domain.services.fx import convert_amount
from src.domain.services.normalization import normalize_text
from src.utils.decimal_utils import coerce_decimal

_ZERO = Decimal("0")


def recompute_account_balance(
    account: Account,
    incomes: Iterable[Income] | None,
    expenses: Iterable[Expense] | None,
) -> Decimal:
    """Return the account balance implied by its transactions.

    Confirmed incomes add their received amount, paid expenses subtract
    their amount; other records are ignored.
    Amounts are in the account currency.
    """
    name = normalize_text(account.name)
    balance = _ZERO
    for income in incomes or []:
        if income.account == name and income.status in CONFIRMED_INCOME_STATUSES:
            balance += income.received_amount
    for expense in expenses or []:
        if expense.account == name and expense.payment_status == PAYMENT_DONE:
            balance -= expense.amount
    return balance


def convert_account_balance(
    account: Account,
    balance,
    rates: Mapping[str, Decimal],
    *,
    base_currency: str = BASE_CURRENCY,
    logger: Logger | None = None,
    updated_at: datetime | None = None,
) -> Account:
    """Return a copy of the account holding ``balance`` and its conversion.

    Args:
        account: Account to update.
        balance: New balance in the account currency.
        rates: Current rate table.
        base_currency: Reference currency of the ledger.
        logger: Optional logger used for missing rate warnings.
        updated_at: Timestamp recorded as ``last_updated``, now by default.

    Returns:
        Account: Updated copy; the input is left untouched.
    """
    amount = coerce_decimal(balance)
    result = convert_amount(
        amount,
        account.currency,
        rates,
        base_currency=base_currency,
        logger=logger,
    )
    stamp = updated_at or datetime.now(timezone.utc)
    return replace(
        account,
        balance=amount,
        converted_balance=result.converted_amount,
        last_updated=stamp.isoformat(),
    )


__all__ = ["recompute_account_balance", "convert_account_balance"]

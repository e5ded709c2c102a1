"""Monthly aggregation of normalized transactions."""

from collections.abc import Iterable
from decimal import Decimal
from typing import TypeVar

from src.domain.constants import (
    CONFIRMED_INCOME_STATUSES,
    INCOME_CANCELLED,
    INCOME_UPCOMING,
    PAYMENT_PENDING,
)
from src.domain.models.finance import MonthlyTotals
from src.domain.models.transactions import Expense, Income

_ZERO = Decimal("0")

RecordT = TypeVar("RecordT", Income, Expense)


def in_month(record_date: str, month_key: str) -> bool:
    """Return True when an ISO date belongs to the ``YYYY-MM`` month."""
    return record_date[:7] == month_key


def filter_month(
    records: Iterable[RecordT] | None,
    month_key: str,
) -> list[RecordT]:
    """Keep the records dated within the month, preserving input order."""
    if not records:
        return []
    return [record for record in records if in_month(record.date, month_key)]


def aggregate_month(
    incomes: Iterable[Income] | None,
    expenses: Iterable[Expense] | None,
    month_key: str,
) -> MonthlyTotals:
    """Sum the month's income and expense figures in base currency.

    Expenses count toward ``total_expenses`` whatever their payment status;
    ``pending_payments`` reports the pending subset again for display.

    Args:
        incomes: Normalized incomes, any month.
        expenses: Normalized expenses, any month.
        month_key: Target ``YYYY-MM`` month.

    Returns:
        MonthlyTotals: Totals for the month, zeros when there is no data.
    """
    total_income = _ZERO
    expected_income = _ZERO
    cancelled_income = _ZERO
    for income in filter_month(incomes, month_key):
        if income.status in CONFIRMED_INCOME_STATUSES:
            total_income += income.split_amount
        elif income.status == INCOME_UPCOMING:
            expected_income += income.original_converted_amount
        elif income.status == INCOME_CANCELLED:
            cancelled_income += income.original_converted_amount

    total_expenses = _ZERO
    pending_payments = _ZERO
    for expense in filter_month(expenses, month_key):
        total_expenses += expense.converted_amount
        if expense.payment_status == PAYMENT_PENDING:
            pending_payments += expense.converted_amount

    return MonthlyTotals(
        total_income=total_income,
        expected_income=expected_income,
        cancelled_income=cancelled_income,
        total_expenses=total_expenses,
        pending_payments=pending_payments,
    )


__all__ = ["in_month", "filter_month", "aggregate_month"]

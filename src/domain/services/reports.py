"""Profit and loss reports over arbitrary date ranges."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.constants import CONFIRMED_INCOME_STATUSES
from src.domain.models.finance import CategoryAmount, PeriodReport
from src.domain.models.transactions import Expense, Income

_ZERO = Decimal("0")


def _in_range(
    record_date: str,
    start_date: date | None,
    end_date: date | None,
) -> bool:
    # ISO dates compare correctly as strings.
    if start_date and record_date < start_date.isoformat():
        return False
    if end_date and record_date > end_date.isoformat():
        return False
    return True


def _matches(record, category: str | None, account: str | None) -> bool:
    if category and record.category != category:
        return False
    if account and record.account != account:
        return False
    return True


def _ranked(totals: dict[str, Decimal]) -> list[CategoryAmount]:
    return [
        CategoryAmount(label=label, amount=amount)
        for label, amount in sorted(
            totals.items(),
            key=lambda item: (-item[1], item[0]),
        )
    ]


def build_period_report(
    incomes: Iterable[Income] | None,
    expenses: Iterable[Expense] | None,
    start_date: date | None = None,
    end_date: date | None = None,
    *,
    category: str | None = None,
    account: str | None = None,
) -> PeriodReport:
    """Summarize confirmed income and expenses over a date range.

    Args:
        incomes: Normalized incomes.
        expenses: Normalized expenses.
        start_date: Inclusive lower bound, open when None.
        end_date: Inclusive upper bound, open when None.
        category: Optional category filter applied to both kinds.
        account: Optional account filter applied to both kinds.

    Returns:
        PeriodReport: Totals plus category and account breakdowns, largest
        amounts first.
    """
    confirmed = [
        income
        for income in incomes or []
        if income.status in CONFIRMED_INCOME_STATUSES
        and _in_range(income.date, start_date, end_date)
        and _matches(income, category, account)
    ]
    selected_expenses = [
        expense
        for expense in expenses or []
        if _in_range(expense.date, start_date, end_date)
        and _matches(expense, category, account)
    ]

    income_by_category: dict[str, Decimal] = {}
    income_by_account: dict[str, Decimal] = {}
    for income in confirmed:
        label = income.category or "Uncategorized"
        income_by_category[label] = (
            income_by_category.get(label, _ZERO) + income.split_amount
        )
        income_by_account[income.account] = (
            income_by_account.get(income.account, _ZERO) + income.split_amount
        )

    expenses_by_category: dict[str, Decimal] = {}
    expenses_by_account: dict[str, Decimal] = {}
    for expense in selected_expenses:
        label = expense.category or "Uncategorized"
        expenses_by_category[label] = (
            expenses_by_category.get(label, _ZERO) + expense.converted_amount
        )
        expenses_by_account[expense.account] = (
            expenses_by_account.get(expense.account, _ZERO)
            + expense.converted_amount
        )

    return PeriodReport(
        start_date=start_date,
        end_date=end_date,
        total_income=sum(income_by_category.values(), _ZERO),
        total_expenses=sum(expenses_by_category.values(), _ZERO),
        income_count=len(confirmed),
        expense_count=len(selected_expenses),
        income_by_category=_ranked(income_by_category),
        expenses_by_category=_ranked(expenses_by_category),
        income_by_account=_ranked(income_by_account),
        expenses_by_account=_ranked(expenses_by_account),
    )


__all__ = ["build_period_report"]

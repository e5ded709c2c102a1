"""Assembly of the monthly dashboard view model."""

from collections.abc import Iterable

from src.domain.constants import (
    INCOME_PARTIAL,
    INCOME_UPCOMING,
    PAYMENT_PENDING,
    RECENT_TRANSACTIONS_LIMIT,
)
from src.domain.models.accounts import Account
from src.domain.models.finance import (
    DEFAULT_DISTRIBUTION,
    DashboardSummary,
    MonthlySummary,
    ProfitDistributionSetting,
)
from src.domain.models.transactions import Expense, Income
from src.domain.services.aggregation import aggregate_month, filter_month
from src.domain.services.distribution import distribute_profit


def build_dashboard_summary(
    incomes: Iterable[Income] | None,
    expenses: Iterable[Expense] | None,
    accounts: Iterable[Account] | None,
    month_key: str,
    setting: ProfitDistributionSetting | None = None,
    recent_limit: int = RECENT_TRANSACTIONS_LIMIT,
) -> DashboardSummary:
    """Compose totals, profit split, and reminder lists for a month.

    ``total_balance`` mirrors the month's remaining company balance rather
    than the sum of account balances.

    Args:
        incomes: Normalized incomes, any month.
        expenses: Normalized expenses, any month.
        accounts: Accounts shown alongside the summary.
        month_key: Target ``YYYY-MM`` month.
        setting: Month specific distribution, default when None.
        recent_limit: Number of recent transactions to keep.

    Returns:
        DashboardSummary: Fully populated summary, empty lists when idle.
    """
    monthly_incomes = filter_month(incomes, month_key)
    monthly_expenses = filter_month(expenses, month_key)
    resolved = setting or DEFAULT_DISTRIBUTION

    totals = aggregate_month(monthly_incomes, monthly_expenses, month_key)
    shares = distribute_profit(
        totals.total_income,
        totals.total_expenses,
        resolved,
    )
    current_month = MonthlySummary(
        month=month_key,
        total_income=totals.total_income,
        expected_income=totals.expected_income,
        cancelled_income=totals.cancelled_income,
        total_expenses=totals.total_expenses,
        net_balance=totals.net_balance,
        company_share=shares.company_share,
        roshaan_share=shares.roshaan_share,
        shahbaz_share=shares.shahbaz_share,
        remaining_company_balance=shares.remaining_company_balance,
        pending_payments=totals.pending_payments,
    )

    # sorted() is stable: same-day incomes stay ahead of expenses.
    recent = sorted(
        [*monthly_incomes, *monthly_expenses],
        key=lambda record: record.date,
        reverse=True,
    )[: max(recent_limit, 0)]

    return DashboardSummary(
        current_month=current_month,
        total_balance=shares.remaining_company_balance,
        distribution=resolved,
        accounts=list(accounts or []),
        recent_transactions=recent,
        pending_expenses=[
            expense
            for expense in monthly_expenses
            if expense.payment_status == PAYMENT_PENDING
        ],
        upcoming_income=[
            income
            for income in monthly_incomes
            if income.status == INCOME_UPCOMING
        ],
        partial_payments=[
            income
            for income in monthly_incomes
            if income.status == INCOME_PARTIAL
        ],
    )


__all__ = ["build_dashboard_summary"]

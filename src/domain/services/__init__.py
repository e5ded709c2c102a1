"""Domain services package."""

from .aggregation import aggregate_month, filter_month
from .balances import convert_account_balance, recompute_account_balance
from .dashboard import build_dashboard_summary
from .distribution import build_distribution_setting, distribute_profit
from .fx import build_rate_table, convert_amount
from .normalization import normalize_currency_code, normalize_iso_date
from .reports import build_period_report
from .transactions import (
    AccountDirectory,
    expense_to_draft,
    income_to_draft,
    normalize_expense,
    normalize_income,
)

__all__ = [
    "AccountDirectory",
    "aggregate_month",
    "build_dashboard_summary",
    "build_distribution_setting",
    "build_period_report",
    "build_rate_table",
    "convert_account_balance",
    "convert_amount",
    "distribute_profit",
    "expense_to_draft",
    "filter_month",
    "income_to_draft",
    "normalize_currency_code",
    "normalize_expense",
    "normalize_income",
    "normalize_iso_date",
    "recompute_account_balance",
]

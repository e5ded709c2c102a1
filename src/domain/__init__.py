"""Domain package for business rules and core models."""

from .constants import BASE_CURRENCY
from .errors import (
    LedgerError,
    RecordNotFoundError,
    UnknownAccountError,
    ValidationError,
)
from .models import (
    DEFAULT_DISTRIBUTION,
    Account,
    ConversionResult,
    DashboardSummary,
    ExchangeRateRow,
    Expense,
    ExpenseDraft,
    Income,
    IncomeDraft,
    MissingRateWarning,
    MonthlySummary,
    MonthlyTotals,
    PeriodReport,
    ProfitDistributionSetting,
    ProfitShares,
)
from .services import (
    AccountDirectory,
    aggregate_month,
    build_dashboard_summary,
    build_distribution_setting,
    build_period_report,
    build_rate_table,
    convert_account_balance,
    convert_amount,
    distribute_profit,
    normalize_expense,
    normalize_income,
    recompute_account_balance,
)

__all__ = [
    "BASE_CURRENCY",
    "DEFAULT_DISTRIBUTION",
    "Account",
    "AccountDirectory",
    "ConversionResult",
    "DashboardSummary",
    "ExchangeRateRow",
    "Expense",
    "ExpenseDraft",
    "Income",
    "IncomeDraft",
    "LedgerError",
    "MissingRateWarning",
    "MonthlySummary",
    "MonthlyTotals",
    "PeriodReport",
    "ProfitDistributionSetting",
    "ProfitShares",
    "RecordNotFoundError",
    "UnknownAccountError",
    "ValidationError",
    "aggregate_month",
    "build_dashboard_summary",
    "build_distribution_setting",
    "build_period_report",
    "build_rate_table",
    "convert_account_balance",
    "convert_amount",
    "distribute_profit",
    "normalize_expense",
    "normalize_income",
    "recompute_account_balance",
]

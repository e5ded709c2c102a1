"""Domain models package."""

from .accounts import Account, AccountCurrencyLookup
from .finance import (
    DEFAULT_DISTRIBUTION,
    CategoryAmount,
    DashboardSummary,
    MonthlySummary,
    MonthlyTotals,
    PeriodReport,
    ProfitDistributionSetting,
    ProfitShares,
)
from .rates import ConversionResult, ExchangeRateRow, MissingRateWarning
from .transactions import Expense, ExpenseDraft, Income, IncomeDraft

__all__ = [
    "Account",
    "AccountCurrencyLookup",
    "CategoryAmount",
    "ConversionResult",
    "DashboardSummary",
    "DEFAULT_DISTRIBUTION",
    "ExchangeRateRow",
    "Expense",
    "ExpenseDraft",
    "Income",
    "IncomeDraft",
    "MissingRateWarning",
    "MonthlySummary",
    "MonthlyTotals",
    "PeriodReport",
    "ProfitDistributionSetting",
    "ProfitShares",
]

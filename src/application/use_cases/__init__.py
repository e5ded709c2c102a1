"""Application use cases package."""

from .delete_transactions import DeleteExpenseUseCase, DeleteIncomeUseCase
from .get_dashboard_summary import GetDashboardSummaryUseCase
from .get_period_report import GetPeriodReportUseCase
from .list_transactions import ListTransactionsUseCase
from .manage_accounts import (
    CreateAccountUseCase,
    DeleteAccountUseCase,
    ReconcileAccountBalancesUseCase,
    SeedDefaultAccountsUseCase,
    UpdateAccountBalanceUseCase,
)
from .record_expense import RecordExpenseUseCase
from .record_income import RecordIncomeUseCase
from .set_profit_distribution import SetProfitDistributionUseCase
from .update_exchange_rates import UpdateExchangeRatesUseCase

__all__ = [
    "DeleteExpenseUseCase",
    "DeleteIncomeUseCase",
    "DeleteAccountUseCase",
    "GetDashboardSummaryUseCase",
    "GetPeriodReportUseCase",
    "ListTransactionsUseCase",
    "CreateAccountUseCase",
    "SeedDefaultAccountsUseCase",
    "UpdateAccountBalanceUseCase",
    "ReconcileAccountBalancesUseCase",
    "RecordExpenseUseCase",
    "RecordIncomeUseCase",
    "SetProfitDistributionUseCase",
    "UpdateExchangeRatesUseCase",
]

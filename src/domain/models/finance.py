"""Domain models for monthly financial aggregates."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_COMPANY_PERCENTAGE,
    DEFAULT_ROSHAAN_PERCENTAGE,
    DEFAULT_SHAHBAZ_PERCENTAGE,
)
from src.domain.models.accounts import Account
from src.domain.models.transactions import Expense, Income

_ZERO = Decimal("0")


@dataclass(frozen=True)
class ProfitDistributionSetting:
    """Company/owner percentage split for a month.

    Attributes:
        company_percentage: Share kept by the company, in [0, 100].
        roshaan_percentage: First owner share.
        shahbaz_percentage: Second owner share.
        year: Year the setting applies to, None for the default.
        month: Month number (1-12) the setting applies to.
    """

    company_percentage: Decimal
    roshaan_percentage: Decimal
    shahbaz_percentage: Decimal
    year: int | None = None
    month: int | None = None

    @property
    def owners_percentage(self) -> Decimal:
        return self.roshaan_percentage + self.shahbaz_percentage


DEFAULT_DISTRIBUTION = ProfitDistributionSetting(
    company_percentage=DEFAULT_COMPANY_PERCENTAGE,
    roshaan_percentage=DEFAULT_ROSHAAN_PERCENTAGE,
    shahbaz_percentage=DEFAULT_SHAHBAZ_PERCENTAGE,
)


@dataclass(frozen=True)
class MonthlyTotals:
    """Income and expense totals for one month, in base currency."""

    total_income: Decimal = _ZERO
    expected_income: Decimal = _ZERO
    cancelled_income: Decimal = _ZERO
    total_expenses: Decimal = _ZERO
    pending_payments: Decimal = _ZERO

    @property
    def net_balance(self) -> Decimal:
        """Return confirmed income minus all expenses."""
        return self.total_income - self.total_expenses


@dataclass(frozen=True)
class ProfitShares:
    """Split of confirmed income between the company and the owners."""

    company_share: Decimal
    roshaan_share: Decimal
    shahbaz_share: Decimal
    remaining_company_balance: Decimal


@dataclass(frozen=True)
class MonthlySummary:
    """Dashboard figures for a single month."""

    month: str
    total_income: Decimal
    expected_income: Decimal
    cancelled_income: Decimal
    total_expenses: Decimal
    net_balance: Decimal
    company_share: Decimal
    roshaan_share: Decimal
    shahbaz_share: Decimal
    remaining_company_balance: Decimal
    pending_payments: Decimal

    @property
    def total_potential_income(self) -> Decimal:
        """Return confirmed plus expected income."""
        return self.total_income + self.expected_income


@dataclass(frozen=True)
class DashboardSummary:
    """View model assembled for the dashboard page."""

    current_month: MonthlySummary
    total_balance: Decimal
    distribution: ProfitDistributionSetting
    accounts: list[Account] = field(default_factory=list)
    recent_transactions: list[Income | Expense] = field(default_factory=list)
    pending_expenses: list[Expense] = field(default_factory=list)
    upcoming_income: list[Income] = field(default_factory=list)
    partial_payments: list[Income] = field(default_factory=list)


@dataclass(frozen=True)
class CategoryAmount:
    """Amount aggregated under a category or account label."""

    label: str
    amount: Decimal


@dataclass(frozen=True)
class PeriodReport:
    """Profit and loss figures for an arbitrary date range."""

    start_date: date | None
    end_date: date | None
    total_income: Decimal
    total_expenses: Decimal
    income_count: int
    expense_count: int
    income_by_category: list[CategoryAmount]
    expenses_by_category: list[CategoryAmount]
    income_by_account: list[CategoryAmount]
    expenses_by_account: list[CategoryAmount]

    @property
    def net_profit(self) -> Decimal:
        return self.total_income - self.total_expenses

    @property
    def profit_margin(self) -> Decimal:
        """Return net profit as a percentage of income, 0 without income."""
        if self.total_income == 0:
            return _ZERO
        return self.net_profit / self.total_income * Decimal("100")


__all__ = [
    "ProfitDistributionSetting",
    "DEFAULT_DISTRIBUTION",
    "MonthlyTotals",
    "ProfitShares",
    "MonthlySummary",
    "DashboardSummary",
    "CategoryAmount",
    "PeriodReport",
]

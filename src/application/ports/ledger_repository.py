"""Port for reading and writing ledger records."""

from typing import Protocol

from src.domain.models import (
    Account,
    ExchangeRateRow,
    Expense,
    Income,
    ProfitDistributionSetting,
)


class LedgerRepositoryPort(Protocol):
    """Port exposing user scoped ledger persistence."""

    def fetch_incomes(self, user_id: str) -> list[Income]:
        """Return every income owned by the user."""

    def fetch_expenses(self, user_id: str) -> list[Expense]:
        """Return every expense owned by the user."""

    def fetch_accounts(self, user_id: str) -> list[Account]:
        """Return the user's accounts."""

    def fetch_exchange_rates(self, user_id: str) -> list[ExchangeRateRow]:
        """Return the stored exchange rates."""

    def fetch_distribution_setting(
        self,
        user_id: str,
        year: int,
        month: int,
    ) -> ProfitDistributionSetting | None:
        """Return the month's distribution setting, None when unset."""

    def save_income(self, user_id: str, income: Income) -> str:
        """Insert or update an income and return its id."""

    def save_expense(self, user_id: str, expense: Expense) -> str:
        """Insert or update an expense and return its id."""

    def save_account(self, user_id: str, account: Account) -> str:
        """Insert or update an account and return its id."""

    def upsert_exchange_rate(
        self,
        user_id: str,
        currency: str,
        rate,
    ) -> None:
        """Insert or replace the rate for one currency."""

    def upsert_distribution_setting(
        self,
        user_id: str,
        setting: ProfitDistributionSetting,
    ) -> None:
        """Insert or replace the distribution setting of its month."""

    def delete_income(self, user_id: str, income_id: str) -> None:
        """Delete an income."""

    def delete_expense(self, user_id: str, expense_id: str) -> None:
        """Delete an expense."""

    def delete_account(self, user_id: str, account_id: str) -> None:
        """Delete an account; transactions keep their account name."""


__all__ = ["LedgerRepositoryPort"]

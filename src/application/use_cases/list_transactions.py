"""Use case listing a user's incomes and expenses."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import Expense, Income
from src.domain.services.aggregation import filter_month
from src.domain.services.periods import split_month_key
from src.infrastructure.logging.logger import get_app_logger


class ListTransactionsUseCase:
    """Return incomes and expenses newest first, optionally for one month."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        month_key: str | None = None,
    ) -> tuple[list[Income], list[Expense]]:
        """Return the user's records.

        Args:
            user_id: Owner of the records.
            month_key: Optional ``YYYY-MM`` month; None lists everything.

        Returns:
            tuple[list[Income], list[Expense]]: Records sorted by date,
            newest first.

        Raises:
            ValidationError: If the month key is malformed.
        """
        if month_key is not None:
            split_month_key(month_key)
        incomes = list(self._repository.fetch_incomes(user_id))
        expenses = list(self._repository.fetch_expenses(user_id))
        if month_key is not None:
            incomes = filter_month(incomes, month_key)
            expenses = filter_month(expenses, month_key)
        incomes.sort(key=lambda record: record.date, reverse=True)
        expenses.sort(key=lambda record: record.date, reverse=True)
        self._logger.debug(
            f"Listed {len(incomes)} income(s) and {len(expenses)} expense(s) "
            f"for {month_key or 'all months'}"
        )
        return incomes, expenses


__all__ = ["ListTransactionsUseCase"]

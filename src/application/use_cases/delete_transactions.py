"""Use cases removing incomes and expenses."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.errors import RecordNotFoundError
from src.domain.models import Expense, Income
from src.infrastructure.logging.logger import get_app_logger


class DeleteIncomeUseCase:
    """Delete one income owned by the user."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Ledger repository port.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, income_id: str) -> Income:
        """Delete the income and return the removed record.

        Raises:
            RecordNotFoundError: If the user has no income with that id.
        """
        income = next(
            (
                record
                for record in self._repository.fetch_incomes(user_id)
                if record.id == income_id
            ),
            None,
        )
        if income is None:
            self._logger.error(f"Delete rejected: unknown income {income_id}")
            raise RecordNotFoundError("income", income_id)
        self._repository.delete_income(user_id, income_id)
        self._logger.info(
            f"Income {income_id} deleted ({income.original_amount} "
            f"{income.currency}, {income.date})"
        )
        return income


class DeleteExpenseUseCase:
    """Delete one expense owned by the user."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, expense_id: str) -> Expense:
        """Delete the expense and return the removed record.

        Raises:
            RecordNotFoundError: If the user has no expense with that id.
        """
        expense = next(
            (
                record
                for record in self._repository.fetch_expenses(user_id)
                if record.id == expense_id
            ),
            None,
        )
        if expense is None:
            self._logger.error(f"Delete rejected: unknown expense {expense_id}")
            raise RecordNotFoundError("expense", expense_id)
        self._repository.delete_expense(user_id, expense_id)
        self._logger.info(
            f"Expense {expense_id} deleted ({expense.amount} "
            f"{expense.currency}, {expense.date})"
        )
        return expense


__all__ = ["DeleteIncomeUseCase", "DeleteExpenseUseCase"]

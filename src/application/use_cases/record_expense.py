"""Use case to record an expense entry."""

from dataclasses import replace

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.ledger_context import load_ledger_context
from src.domain.constants import BASE_CURRENCY
from src.domain.errors import (
    RecordNotFoundError,
    UnknownAccountError,
    ValidationError,
)
from src.domain.models import Expense, ExpenseDraft
from src.domain.services.transactions import normalize_expense
from src.infrastructure.logging.logger import get_app_logger


class RecordExpenseUseCase:
    """Normalize a raw expense and persist it."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        base_currency: str = BASE_CURRENCY,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._base_currency = base_currency

    def execute(self, user_id: str, draft: ExpenseDraft) -> Expense:
        """Validate, convert, and store the expense.

        Raises:
            ValidationError: If a field is invalid; nothing is written.
            UnknownAccountError: If the account does not exist.
            RecordNotFoundError: If the draft edits an id the user does
                not own.
        """
        if draft.id is not None:
            self._ensure_exists(user_id, draft.id)
        context = load_ledger_context(
            self._repository,
            user_id,
            self._base_currency,
            logger=self._logger,
        )
        try:
            expense = normalize_expense(
                draft,
                context.directory,
                context.rates,
                base_currency=self._base_currency,
                logger=self._logger,
            )
        except ValidationError as exc:
            self._logger.warning(f"Expense rejected: {exc}")
            raise
        except UnknownAccountError as exc:
            self._logger.error(f"Expense rejected: {exc}")
            raise

        record_id = self._repository.save_expense(user_id, expense)
        saved = replace(expense, id=record_id)
        action = "updated" if draft.id is not None else "recorded"
        self._logger.info(
            f"Expense {record_id} {action}: {saved.amount} {saved.currency} "
            f"({saved.payment_status}) -> {saved.converted_amount} "
            f"{self._base_currency}"
        )
        return saved

    def _ensure_exists(self, user_id: str, record_id: str) -> None:
        known = {record.id for record in self._repository.fetch_expenses(user_id)}
        if record_id not in known:
            self._logger.error(f"Expense update rejected: unknown id {record_id}")
            raise RecordNotFoundError("expense", record_id)


__all__ = ["RecordExpenseUseCase"]

"""Use case to record an income entry."""

from dataclasses import replace

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.ledger_context import load_ledger_context
from src.domain.constants import BASE_CURRENCY
from src.domain.errors import (
    RecordNotFoundError,
    UnknownAccountError,
    ValidationError,
)
from src.domain.models import Income, IncomeDraft
from src.domain.services.transactions import normalize_income
from src.infrastructure.logging.logger import get_app_logger


class RecordIncomeUseCase:
    """Normalize a raw income and persist it."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        base_currency: str = BASE_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Ledger repository port.
            logger: Optional logger compatible with logging.Logger-like API.
            base_currency: Reference currency of the ledger.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._base_currency = base_currency

    def execute(self, user_id: str, draft: IncomeDraft) -> Income:
        """Validate, convert, and store the income.

        Args:
            user_id: Owner of the record.
            draft: Raw income from the caller; a set ``id`` edits that record.

        Returns:
            Income: Stored record carrying its assigned id.

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
            income = normalize_income(
                draft,
                context.directory,
                context.rates,
                base_currency=self._base_currency,
                logger=self._logger,
            )
        except ValidationError as exc:
            self._logger.warning(f"Income rejected: {exc}")
            raise
        except UnknownAccountError as exc:
            self._logger.error(f"Income rejected: {exc}")
            raise

        record_id = self._repository.save_income(user_id, income)
        saved = replace(income, id=record_id)
        action = "updated" if draft.id is not None else "recorded"
        self._logger.info(
            f"Income {record_id} {action}: {saved.original_amount} "
            f"{saved.currency} ({saved.status}) -> {saved.converted_amount} "
            f"{self._base_currency}"
        )
        return saved

    def _ensure_exists(self, user_id: str, record_id: str) -> None:
        known = {record.id for record in self._repository.fetch_incomes(user_id)}
        if record_id not in known:
            self._logger.error(f"Income update rejected: unknown id {record_id}")
            raise RecordNotFoundError("income", record_id)


__all__ = ["RecordIncomeUseCase"]

"""Use case to assemble the monthly dashboard."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import RECENT_TRANSACTIONS_LIMIT
from src.domain.models import DashboardSummary
from src.domain.services.dashboard import build_dashboard_summary
from src.domain.services.periods import split_month_key
from src.infrastructure.logging.logger import get_app_logger


class GetDashboardSummaryUseCase:
    """Build the dashboard summary for a user and month."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        recent_limit: int = RECENT_TRANSACTIONS_LIMIT,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Ledger repository port.
            logger: Optional logger compatible with logging.Logger-like API.
            recent_limit: Number of recent transactions to return.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._recent_limit = recent_limit

    def execute(self, user_id: str, month_key: str) -> DashboardSummary:
        """Return the dashboard summary.

        Args:
            user_id: Owner of the records.
            month_key: Target ``YYYY-MM`` month.

        Returns:
            DashboardSummary: Totals, profit split, and reminder lists.

        Raises:
            ValidationError: If the month key is malformed.
        """
        year, month = split_month_key(month_key)
        incomes = self._repository.fetch_incomes(user_id)
        expenses = self._repository.fetch_expenses(user_id)
        accounts = self._repository.fetch_accounts(user_id)
        setting = self._repository.fetch_distribution_setting(
            user_id,
            year,
            month,
        )
        if setting is None:
            self._logger.debug(
                f"No distribution setting for {month_key}; using default"
            )

        summary = build_dashboard_summary(
            incomes,
            expenses,
            accounts,
            month_key,
            setting=setting,
            recent_limit=self._recent_limit,
        )
        self._logger.info(
            f"Dashboard built for {month_key}: "
            f"income={summary.current_month.total_income}, "
            f"expenses={summary.current_month.total_expenses}"
        )
        return summary


__all__ = ["GetDashboardSummaryUseCase"]

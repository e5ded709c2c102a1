"""Use case to build a profit and loss report for a date range."""

from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import PeriodReport
from src.domain.services.reports import build_period_report
from src.infrastructure.logging.logger import get_app_logger


class GetPeriodReportUseCase:
    """Summarize a user's records over an arbitrary period."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Ledger repository port.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
        category: str | None = None,
        account: str | None = None,
    ) -> PeriodReport:
        """Return the report.

        Args:
            user_id: Owner of the records.
            start_date: Optional inclusive lower bound.
            end_date: Optional inclusive upper bound.
            category: Optional category filter.
            account: Optional account filter.

        Returns:
            PeriodReport: Totals and breakdowns for the period.
        """
        report = build_period_report(
            self._repository.fetch_incomes(user_id),
            self._repository.fetch_expenses(user_id),
            start_date,
            end_date,
            category=category,
            account=account,
        )
        self._logger.info(
            f"Period report {start_date or 'start'}..{end_date or 'now'}: "
            f"income={report.total_income}, expenses={report.total_expenses}"
        )
        return report


__all__ = ["GetPeriodReportUseCase"]

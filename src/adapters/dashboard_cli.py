"""CLI adapter printing the monthly dashboard summary."""

from datetime import date
import os

from src.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)
from src.domain.errors import LedgerError
from src.domain.services.periods import current_month_key
from src.infrastructure.container import build_ledger_repository, build_settings
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Print the summary for LEDGER_USER_ID and LEDGER_MONTH."""
    logger = get_app_logger()
    settings = build_settings()
    if not settings.user_id:
        logger.warning("LEDGER_USER_ID is required to print a summary.")
        return
    month_key = (
        os.getenv("LEDGER_MONTH", "").strip() or current_month_key(date.today())
    )

    use_case = GetDashboardSummaryUseCase(
        build_ledger_repository(),
        logger=logger,
        recent_limit=settings.recent_limit,
    )
    try:
        summary = use_case.execute(settings.user_id, month_key)
    except LedgerError as exc:
        logger.error(str(exc))
        return

    month = summary.current_month
    currency = settings.base_currency
    print(f"Summary for {month_key} ({currency})")
    print(
        f"Income: {month.total_income:,.2f} "
        f"(expected {month.expected_income:,.2f}, "
        f"cancelled {month.cancelled_income:,.2f})"
    )
    print(
        f"Expenses: {month.total_expenses:,.2f} "
        f"(pending {month.pending_payments:,.2f})"
    )
    print(
        f"Shares: company={month.company_share:,.2f}, "
        f"roshaan={month.roshaan_share:,.2f}, "
        f"shahbaz={month.shahbaz_share:,.2f}"
    )
    print(f"Remaining company balance: {summary.total_balance:,.2f}")
    print(f"Recent transactions: {len(summary.recent_transactions)}")


if __name__ == "__main__":  # pragma: no cover
    main()

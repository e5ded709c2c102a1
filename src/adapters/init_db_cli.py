"""CLI adapter to create the ledger tables.

When ``LEDGER_USER_ID`` is set the starter accounts are also created for
that user, skipping the ones that already exist.
"""

from src.application.use_cases.manage_accounts import SeedDefaultAccountsUseCase
from src.infrastructure.container import (
    build_database_adapter,
    build_settings,
)
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Create the schema and seed default accounts."""
    logger = get_app_logger()
    repository = SqlAlchemyLedgerRepository(build_database_adapter())
    repository.ensure_schema()
    print("Ledger tables are ready.")

    settings = build_settings()
    if not settings.user_id:
        logger.info("LEDGER_USER_ID not set; skipping default accounts.")
        return
    created = SeedDefaultAccountsUseCase(repository, logger=logger).execute(
        settings.user_id
    )
    print(f"Created {len(created)} default account(s) for {settings.user_id}.")


if __name__ == "__main__":  # pragma: no cover
    main()

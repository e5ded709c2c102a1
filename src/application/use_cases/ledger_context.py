"""Shared loading of the account directory and rate table for a user."""

from dataclasses import dataclass
from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import Account
from src.domain.services.fx import build_rate_table
from src.domain.services.transactions import AccountDirectory


@dataclass(frozen=True)
class LedgerContext:
    """Accounts and rates needed to normalize records for one user."""

    accounts: list[Account]
    directory: AccountDirectory
    rates: dict[str, Decimal]


def load_ledger_context(
    repository: LedgerRepositoryPort,
    user_id: str,
    base_currency: str,
    logger=None,
) -> LedgerContext:
    """Read the user's accounts and current exchange rates.

    Args:
        repository: Ledger repository port.
        user_id: Owner of the records.
        base_currency: Reference currency of the ledger.
        logger: Optional logger used for rate warnings.

    Returns:
        LedgerContext: Accounts, their currency directory, and the rate table.
    """
    accounts = list(repository.fetch_accounts(user_id))
    rates = build_rate_table(
        repository.fetch_exchange_rates(user_id),
        logger=logger,
        base_currency=base_currency,
    )
    return LedgerContext(
        accounts=accounts,
        directory=AccountDirectory(accounts),
        rates=rates,
    )


__all__ = ["LedgerContext", "load_ledger_context"]

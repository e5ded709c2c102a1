"""Domain models for ledger accounts."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol


@dataclass(frozen=True)
class Account:
    """Money holding account denominated in a single currency.

    Attributes:
        id: Opaque identifier assigned by the persistence layer.
        name: Name unique per owning user, referenced by transactions.
        currency: Currency code the account is held in.
        balance: Balance in the account currency.
        converted_balance: Balance expressed in the base currency.
        last_updated: ISO timestamp of the last balance change.
        notes: Optional free text.
    """

    id: str | None
    name: str
    currency: str
    balance: Decimal = Decimal("0")
    converted_balance: Decimal = Decimal("0")
    last_updated: str | None = None
    notes: str = ""


class AccountCurrencyLookup(Protocol):
    """Capability resolving the configured currency of an account name."""

    def resolve_account_currency(self, account_name: str) -> str:
        """Return the currency of the account or raise UnknownAccountError."""


__all__ = ["Account", "AccountCurrencyLookup"]

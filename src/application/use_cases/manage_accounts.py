"""Use cases maintaining account balances."""

from collections.abc import Mapping
from dataclasses import replace
from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.ledger_context import load_ledger_context
from src.domain.constants import BASE_CURRENCY, DEFAULT_ACCOUNTS
from src.domain.errors import (
    RecordNotFoundError,
    UnknownAccountError,
    ValidationError,
)
from src.domain.models import Account
from src.domain.services.balances import (
    convert_account_balance,
    recompute_account_balance,
)
from src.domain.services.normalization import (
    normalize_currency_code,
    normalize_text,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_optional_decimal


def _parse_balance(value, default=None) -> Decimal:
    """Parse a user supplied balance into a finite Decimal.

    Raises:
        ValidationError: If the value is not a finite number, or is blank
            without a default.
    """
    try:
        balance = coerce_optional_decimal(value)
    except ValueError as exc:
        raise ValidationError.single("balance", "Must be a number") from exc
    if balance is None:
        if default is None:
            raise ValidationError.single("balance", "Balance is required")
        return default
    return balance


class CreateAccountUseCase:
    """Create an account with an opening balance."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        base_currency: str = BASE_CURRENCY,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._base_currency = base_currency

    def execute(
        self,
        user_id: str,
        name: str,
        currency: str,
        balance=0,
        notes: str = "",
    ) -> Account:
        """Store a new account.

        Raises:
            ValidationError: If the name or currency is blank, or the name is
                already used by another account of the user, or the
                opening balance is not a finite number.
        """
        cleaned_name = normalize_text(name)
        code = normalize_currency_code(currency)
        errors: dict[str, str] = {}
        if not cleaned_name:
            errors["name"] = "Account name is required"
        if not code:
            errors["currency"] = "Currency is required"
        context = load_ledger_context(
            self._repository,
            user_id,
            self._base_currency,
            logger=self._logger,
        )
        if cleaned_name and cleaned_name in context.directory:
            errors["name"] = f"Account {cleaned_name!r} already exists"
        try:
            opening = _parse_balance(balance, default=Decimal("0"))
        except ValidationError as exc:
            errors.update(exc.errors)
        if errors:
            error = ValidationError(errors)
            self._logger.warning(f"Account rejected: {error}")
            raise error

        account = convert_account_balance(
            Account(id=None, name=cleaned_name, currency=code, notes=notes),
            opening,
            context.rates,
            base_currency=self._base_currency,
            logger=self._logger,
        )
        record_id = self._repository.save_account(user_id, account)
        self._logger.info(f"Account {cleaned_name} ({code}) created")
        return replace(account, id=record_id)


class SeedDefaultAccountsUseCase:
    """Create the starter accounts a user does not have yet."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        accounts: Mapping[str, str] | None = None,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._accounts = dict(accounts or DEFAULT_ACCOUNTS)

    def execute(self, user_id: str) -> list[str]:
        """Return the names of the accounts that were created."""
        existing = {
            normalize_text(account.name)
            for account in self._repository.fetch_accounts(user_id)
        }
        created = []
        for name, currency in self._accounts.items():
            if name in existing:
                continue
            self._repository.save_account(
                user_id,
                Account(id=None, name=name, currency=currency),
            )
            created.append(name)
        self._logger.info(f"Seeded {len(created)} default account(s)")
        return created


class UpdateAccountBalanceUseCase:
    """Apply a manually entered balance to an account."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        base_currency: str = BASE_CURRENCY,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._base_currency = base_currency

    def execute(self, user_id: str, account_name: str, balance) -> Account:
        """Store the new balance and its base-currency conversion.

        Raises:
            UnknownAccountError: If the user has no account by that name.
            ValidationError: If the balance is blank or not a finite number.
        """
        context = load_ledger_context(
            self._repository,
            user_id,
            self._base_currency,
            logger=self._logger,
        )
        name = normalize_text(account_name)
        account = next(
            (item for item in context.accounts if normalize_text(item.name) == name),
            None,
        )
        if account is None:
            self._logger.error(f"Balance update rejected: unknown account {name}")
            raise UnknownAccountError(name)
        try:
            parsed = _parse_balance(balance)
        except ValidationError as exc:
            self._logger.warning(f"Balance update rejected for {name}: {exc}")
            raise
        updated = convert_account_balance(
            account,
            parsed,
            context.rates,
            base_currency=self._base_currency,
            logger=self._logger,
        )
        self._repository.save_account(user_id, updated)
        self._logger.info(
            f"Account {name} balance set to {updated.balance} "
            f"{updated.currency} ({updated.converted_balance} "
            f"{self._base_currency})"
        )
        return updated


class ReconcileAccountBalancesUseCase:
    """Recompute every account balance from posted transactions.

    Balances are never touched implicitly when transactions are recorded;
    this use case is the explicit recomputation step.
    """

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        base_currency: str = BASE_CURRENCY,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._base_currency = base_currency

    def execute(self, user_id: str) -> list[Account]:
        """Return the updated accounts after storing them."""
        context = load_ledger_context(
            self._repository,
            user_id,
            self._base_currency,
            logger=self._logger,
        )
        incomes = self._repository.fetch_incomes(user_id)
        expenses = self._repository.fetch_expenses(user_id)
        updated_accounts = []
        for account in context.accounts:
            balance = recompute_account_balance(account, incomes, expenses)
            updated = convert_account_balance(
                account,
                balance,
                context.rates,
                base_currency=self._base_currency,
                logger=self._logger,
            )
            self._repository.save_account(user_id, updated)
            updated_accounts.append(updated)
        self._logger.info(f"Reconciled {len(updated_accounts)} account(s)")
        return updated_accounts


class DeleteAccountUseCase:
    """Remove an account on user request.

    Transactions keep the account name they were recorded with.
    """

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, account_id: str) -> Account:
        """Delete the account and return what was removed.

        Raises:
            RecordNotFoundError: If the user has no account with that id.
        """
        account = next(
            (
                item
                for item in self._repository.fetch_accounts(user_id)
                if item.id == account_id
            ),
            None,
        )
        if account is None:
            self._logger.error(f"Delete rejected: unknown account {account_id}")
            raise RecordNotFoundError("account", account_id)
        self._repository.delete_account(user_id, account_id)
        self._logger.info(f"Account {account.name} ({account_id}) deleted")
        return account


__all__ = [
    "CreateAccountUseCase",
    "DeleteAccountUseCase",
    "SeedDefaultAccountsUseCase",
    "UpdateAccountBalanceUseCase",
    "ReconcileAccountBalancesUseCase",
]

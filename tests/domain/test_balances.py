"""Tests for account balance helpers."""

from datetime import datetime, timezone
from decimal import Decimal

from src.domain.models import Account, Expense, Income
from src.domain.services.balances import (
    convert_account_balance,
    recompute_account_balance,
)


def _income(account: str, status: str, received: str) -> Income:
    return Income(
        id=None,
        date="2024-03-01",
        original_amount=Decimal("1000"),
        currency="USD",
        received_amount=Decimal(received),
        status=status,
        account=account,
        category="SEO",
        description="Audit",
        client_name="Acme",
        converted_amount=Decimal("0"),
        original_converted_amount=Decimal("0"),
        split_amount=Decimal("0"),
        split_rate_used=Decimal("280"),
    )


def _expense(account: str, status: str, amount: str) -> Expense:
    return Expense(
        id=None,
        date="2024-03-02",
        amount=Decimal(amount),
        currency="USD",
        converted_amount=Decimal("0"),
        payment_status=status,
        account=account,
        category="Tools",
        description="Hosting",
    )


def test_recompute_balance_uses_confirmed_income_and_paid_expenses() -> None:
    """Only received money and settled expenses move the balance."""
    account = Account(id="1", name="Wise USD", currency="USD")
    incomes = [
        _income("Wise USD", "Received", "1000"),
        _income("Wise USD", "Partial", "400"),
        _income("Wise USD", "Upcoming", "0"),
        _income("Payoneer", "Received", "9999"),
    ]
    expenses = [
        _expense("Wise USD", "Done", "300"),
        _expense("Wise USD", "Pending", "200"),
        _expense("Payoneer", "Done", "50"),
    ]

    assert recompute_account_balance(account, incomes, expenses) == Decimal(
        "1100"
    )


def test_recompute_balance_without_transactions_is_zero() -> None:
    """No transactions means a zero balance."""
    account = Account(id="1", name="Wise USD", currency="USD")

    assert recompute_account_balance(account, None, None) == Decimal("0")


def test_convert_account_balance_returns_updated_copy() -> None:
    """The converted balance follows the current rate table."""
    account = Account(
        id="1",
        name="Wise USD",
        currency="USD",
        balance=Decimal("5"),
        converted_balance=Decimal("1400"),
    )
    stamp = datetime(2024, 3, 31, 12, 0, tzinfo=timezone.utc)

    updated = convert_account_balance(
        account,
        "100",
        {"PKR": Decimal("1"), "USD": Decimal("280")},
        updated_at=stamp,
    )

    assert updated.balance == Decimal("100")
    assert updated.converted_balance == Decimal("28000")
    assert updated.last_updated == stamp.isoformat()
    assert account.balance == Decimal("5")

"""Tests for income and expense normalization."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.errors import UnknownAccountError, ValidationError
from src.domain.models import Account, ExpenseDraft, IncomeDraft
from src.domain.services.transactions import (
    AccountDirectory,
    expense_to_draft,
    income_to_draft,
    normalize_expense,
    normalize_income,
)


RATES = {"PKR": Decimal("1"), "USD": Decimal("280")}

ACCOUNTS = AccountDirectory(
    [
        Account(id="1", name="Wise USD", currency="USD"),
        Account(id="2", name="Bank Alfalah", currency="PKR"),
        Account(id="3", name="Legacy", currency="xyz"),
    ]
)


def _income_draft(**overrides) -> IncomeDraft:
    values = {
        "date": "2024-03-15",
        "original_amount": "1000",
        "account": "Wise USD",
        "status": "Received",
        "description": "Landing page build",
        "client_name": "Acme",
    }
    values.update(overrides)
    return IncomeDraft(**values)


def _expense_draft(**overrides) -> ExpenseDraft:
    values = {
        "date": "2024-03-10",
        "amount": "500",
        "account": "Bank Alfalah",
        "payment_status": "Pending",
        "description": "Office rent",
        "due_date": "2024-03-31",
    }
    values.update(overrides)
    return ExpenseDraft(**values)


def test_received_income_converts_full_amount() -> None:
    """Received income converts the original amount at the table rate."""
    income = normalize_income(_income_draft(currency="PKR"), ACCOUNTS, RATES)

    assert income.currency == "USD"
    assert income.received_amount == Decimal("1000")
    assert income.original_converted_amount == Decimal("280000")
    assert income.converted_amount == Decimal("280000")
    assert income.split_amount == Decimal("280000")
    assert income.split_rate_used == Decimal("280")
    assert income.warnings == ()


def test_partial_income_converts_received_portion() -> None:
    """Partial income converts only the received amount."""
    income = normalize_income(
        _income_draft(status="Partial", received_amount="400"),
        ACCOUNTS,
        RATES,
    )

    assert income.converted_amount == Decimal("112000")
    assert income.split_amount == Decimal("112000")
    assert income.original_converted_amount == Decimal("280000")
    assert income.outstanding_amount == Decimal("168000")


def test_partial_income_scales_manual_converted_amount() -> None:
    """A manual converted amount covers the full income and is prorated."""
    income = normalize_income(
        _income_draft(
            status="Partial",
            received_amount="400",
            manual_converted_amount="290000",
        ),
        ACCOUNTS,
        RATES,
    )

    assert income.original_converted_amount == Decimal("290000")
    assert income.converted_amount == Decimal("116000")
    assert income.split_rate_used == Decimal("290")


@pytest.mark.parametrize("status", ["Upcoming", "Cancelled"])
def test_unconfirmed_income_has_no_received_value(status: str) -> None:
    """Upcoming and cancelled incomes keep only their potential value."""
    income = normalize_income(
        _income_draft(status=status, due_date=date(2024, 4, 1)),
        ACCOUNTS,
        RATES,
    )

    assert income.received_amount == Decimal("0")
    assert income.converted_amount == Decimal("0")
    assert income.split_amount == Decimal("0")
    assert income.original_converted_amount == Decimal("280000")
    assert income.due_date == "2024-04-01"


@pytest.mark.parametrize("received", ["0", "-5", "1000", "1500"])
def test_partial_income_rejects_out_of_range_received(received: str) -> None:
    """Partial payments must be strictly between zero and the original."""
    with pytest.raises(ValidationError) as excinfo:
        normalize_income(
            _income_draft(status="Partial", received_amount=received),
            ACCOUNTS,
            RATES,
        )

    assert "received_amount" in excinfo.value.errors


def test_upcoming_income_requires_due_date() -> None:
    """Upcoming income without a due date is rejected."""
    with pytest.raises(ValidationError) as excinfo:
        normalize_income(_income_draft(status="Upcoming"), ACCOUNTS, RATES)

    assert excinfo.value.field == "due_date"


def test_income_validation_reports_every_failing_field() -> None:
    """All field errors are collected into a single exception."""
    draft = _income_draft(
        date=None,
        original_amount="0",
        description=" ",
        client_name="",
        status="Maybe",
    )

    with pytest.raises(ValidationError) as excinfo:
        normalize_income(draft, ACCOUNTS, RATES)

    assert set(excinfo.value.errors) == {
        "date",
        "original_amount",
        "description",
        "client_name",
        "status",
    }


def test_income_rejects_malformed_date_and_amount() -> None:
    """Unparseable values are reported per field."""
    with pytest.raises(ValidationError) as excinfo:
        normalize_income(
            _income_draft(date="2024-13-01", original_amount="abc"),
            ACCOUNTS,
            RATES,
        )

    assert excinfo.value.errors["date"] == "Must be a YYYY-MM-DD date"
    assert excinfo.value.errors["original_amount"] == "Must be a number"


def test_income_rejects_non_positive_manual_overrides() -> None:
    """Manual rates and amounts must be strictly positive."""
    with pytest.raises(ValidationError) as excinfo:
        normalize_income(
            _income_draft(
                manual_conversion_rate="0",
                manual_converted_amount="-1",
            ),
            ACCOUNTS,
            RATES,
        )

    assert "manual_conversion_rate" in excinfo.value.errors
    assert "manual_converted_amount" in excinfo.value.errors


def test_unknown_account_fails_loudly() -> None:
    """An account that does not exist raises instead of defaulting."""
    with pytest.raises(UnknownAccountError) as excinfo:
        normalize_income(_income_draft(account="Deleted"), ACCOUNTS, RATES)

    assert excinfo.value.account_name == "Deleted"


def test_validation_runs_before_account_resolution() -> None:
    """Invalid drafts are rejected as such even for unknown accounts."""
    with pytest.raises(ValidationError):
        normalize_income(
            _income_draft(account="Deleted", original_amount="-1"),
            ACCOUNTS,
            RATES,
        )


def test_missing_rate_income_is_kept_with_warning() -> None:
    """Incomes in currencies without a rate convert at 1 with a warning."""
    income = normalize_income(_income_draft(account="Legacy"), ACCOUNTS, RATES)

    assert income.currency == "XYZ"
    assert income.converted_amount == Decimal("1000")
    assert income.split_rate_used == Decimal("1")
    assert len(income.warnings) == 1
    assert income.warnings[0].currency == "XYZ"


def test_pending_expense_in_base_currency() -> None:
    """Base currency expenses keep their amount and record a rate of 1."""
    expense = normalize_expense(_expense_draft(), ACCOUNTS, RATES)

    assert expense.currency == "PKR"
    assert expense.converted_amount == Decimal("500")
    assert expense.conversion_rate_used == Decimal("1")
    assert expense.payment_status == "Pending"


def test_expense_in_foreign_currency_uses_manual_rate() -> None:
    """Expenses honour the manual rate override."""
    expense = normalize_expense(
        _expense_draft(
            account="Wise USD",
            amount="20",
            payment_status="Done",
            due_date=None,
            manual_conversion_rate="278.5",
        ),
        ACCOUNTS,
        RATES,
    )

    assert expense.currency == "USD"
    assert expense.converted_amount == Decimal("5570")
    assert expense.conversion_rate_used == Decimal("278.5")


def test_pending_expense_requires_due_date() -> None:
    """Pending expenses need a due date."""
    with pytest.raises(ValidationError) as excinfo:
        normalize_expense(_expense_draft(due_date=""), ACCOUNTS, RATES)

    assert excinfo.value.field == "due_date"


def test_expense_validation_collects_errors() -> None:
    """Amount, description, and status failures are reported together."""
    with pytest.raises(ValidationError) as excinfo:
        normalize_expense(
            _expense_draft(amount="-5", description="", payment_status="Later"),
            ACCOUNTS,
            RATES,
        )

    assert set(excinfo.value.errors) == {"amount", "description", "payment_status"}


def test_account_directory_membership() -> None:
    """Directory lookups strip whitespace around names."""
    assert " Wise USD " in ACCOUNTS
    assert "Missing" not in ACCOUNTS
    assert ACCOUNTS.resolve_account_currency("Bank Alfalah") == "PKR"


def test_income_draft_from_stored_record_renormalizes_unchanged() -> None:
    """Re-submitting a stored income under its id reproduces the record."""
    stored = normalize_income(
        _income_draft(
            id="income-1",
            status="Partial",
            received_amount="400",
            manual_converted_amount="270000",
            notes="first half",
        ),
        ACCOUNTS,
        RATES,
    )

    draft = income_to_draft(stored)

    assert draft.id == "income-1"
    assert draft.received_amount == Decimal("400")
    assert normalize_income(draft, ACCOUNTS, RATES) == stored


def test_income_draft_drops_received_amount_unless_partial() -> None:
    stored = normalize_income(_income_draft(id="income-2"), ACCOUNTS, RATES)

    assert income_to_draft(stored).received_amount is None


def test_expense_draft_from_stored_record_renormalizes_unchanged() -> None:
    stored = normalize_expense(
        _expense_draft(
            id="expense-1",
            account="Wise USD",
            manual_conversion_rate="275",
        ),
        ACCOUNTS,
        RATES,
    )

    draft = expense_to_draft(stored)

    assert draft.id == "expense-1"
    assert draft.manual_conversion_rate == Decimal("275")
    assert normalize_expense(draft, ACCOUNTS, RATES) == stored

"""Tests for period reports."""

from datetime import date
from decimal import Decimal

from src.domain.models import CategoryAmount, Expense, Income
from src.domain.services.reports import build_period_report


def _income(
    record_date: str,
    status: str,
    amount: str,
    category: str = "SEO",
    account: str = "Wise USD",
) -> Income:
    value = Decimal(amount)
    return Income(
        id=None,
        date=record_date,
        original_amount=value,
        currency="PKR",
        received_amount=value,
        status=status,
        account=account,
        category=category,
        description="Work",
        client_name="Acme",
        converted_amount=value,
        original_converted_amount=value,
        split_amount=value,
        split_rate_used=Decimal("1"),
    )


def _expense(
    record_date: str,
    amount: str,
    category: str = "Tools",
    account: str = "Bank Alfalah",
) -> Expense:
    return Expense(
        id=None,
        date=record_date,
        amount=Decimal(amount),
        currency="PKR",
        converted_amount=Decimal(amount),
        payment_status="Done",
        account=account,
        category=category,
        description="Spend",
    )


INCOMES = [
    _income("2024-01-05", "Received", "1000", category="SEO"),
    _income("2024-01-20", "Partial", "3000", category="Website"),
    _income("2024-02-01", "Received", "500", category="SEO", account="Payoneer"),
    _income("2024-01-22", "Upcoming", "8000"),
    _income("2023-12-31", "Received", "7000"),
]
EXPENSES = [
    _expense("2024-01-10", "400", category="Tools"),
    _expense("2024-02-14", "600", category="Office"),
    _expense("2024-03-01", "9000", category="Salary"),
]


def test_report_totals_respect_date_range() -> None:
    """Only confirmed income and expenses inside the range are counted."""
    report = build_period_report(
        INCOMES,
        EXPENSES,
        date(2024, 1, 1),
        date(2024, 2, 29),
    )

    assert report.total_income == Decimal("4500")
    assert report.total_expenses == Decimal("1000")
    assert report.net_profit == Decimal("3500")
    assert report.income_count == 3
    assert report.expense_count == 2
    assert report.income_by_category == [
        CategoryAmount(label="Website", amount=Decimal("3000")),
        CategoryAmount(label="SEO", amount=Decimal("1500")),
    ]
    assert report.income_by_account == [
        CategoryAmount(label="Wise USD", amount=Decimal("4000")),
        CategoryAmount(label="Payoneer", amount=Decimal("500")),
    ]
    assert report.expenses_by_category[0].label == "Office"


def test_report_filters_by_category_and_account() -> None:
    """Category and account filters narrow both kinds of records."""
    report = build_period_report(
        INCOMES,
        EXPENSES,
        category="SEO",
        account="Payoneer",
    )

    assert report.total_income == Decimal("500")
    assert report.total_expenses == Decimal("0")


def test_profit_margin() -> None:
    """The margin is net profit over income, zero without income."""
    report = build_period_report(
        INCOMES,
        EXPENSES,
        date(2024, 1, 1),
        date(2024, 1, 31),
    )
    empty = build_period_report([], [])

    assert report.profit_margin == Decimal("90")
    assert empty.profit_margin == Decimal("0")

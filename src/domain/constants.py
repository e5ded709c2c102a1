"""Domain constants for the ledger."""

from decimal import Decimal

BASE_CURRENCY = "PKR"

INCOME_RECEIVED = "Received"
INCOME_UPCOMING = "Upcoming"
INCOME_PARTIAL = "Partial"
INCOME_CANCELLED = "Cancelled"

INCOME_STATUSES = (
    INCOME_RECEIVED,
    INCOME_UPCOMING,
    INCOME_PARTIAL,
    INCOME_CANCELLED,
)
CONFIRMED_INCOME_STATUSES = (INCOME_RECEIVED, INCOME_PARTIAL)

PAYMENT_PENDING = "Pending"
PAYMENT_DONE = "Done"

PAYMENT_STATUSES = (PAYMENT_PENDING, PAYMENT_DONE)

DEFAULT_COMPANY_PERCENTAGE = Decimal("50")
DEFAULT_ROSHAAN_PERCENTAGE = Decimal("25")
DEFAULT_SHAHBAZ_PERCENTAGE = Decimal("25")

RECENT_TRANSACTIONS_LIMIT = 5

# Starter accounts offered to a new ledger, name to currency.
DEFAULT_ACCOUNTS = {
    "Bank Alfalah": "PKR",
    "Wise USD": "USD",
    "Wise GBP": "GBP",
    "Payoneer": "USD",
}

INCOME_CATEGORIES = (
    "Google Ads",
    "SEO",
    "Website",
    "Backlinks",
    "Automation",
    "Landing Page",
    "Social Media Ads",
    "Social Media Management",
    "Graphics & Design",
    "Others",
)

EXPENSE_CATEGORIES = (
    "Salary",
    "Office",
    "Food",
    "Tools",
    "Donation",
    "Bank",
    "Marketing",
    "Travel",
    "Utilities",
    "Other",
)


__all__ = [
    "BASE_CURRENCY",
    "INCOME_RECEIVED",
    "INCOME_UPCOMING",
    "INCOME_PARTIAL",
    "INCOME_CANCELLED",
    "INCOME_STATUSES",
    "CONFIRMED_INCOME_STATUSES",
    "PAYMENT_PENDING",
    "PAYMENT_DONE",
    "PAYMENT_STATUSES",
    "DEFAULT_COMPANY_PERCENTAGE",
    "DEFAULT_ROSHAAN_PERCENTAGE",
    "DEFAULT_SHAHBAZ_PERCENTAGE",
    "RECENT_TRANSACTIONS_LIMIT",
    "DEFAULT_ACCOUNTS",
    "INCOME_CATEGORIES",
    "EXPENSE_CATEGORIES",
]

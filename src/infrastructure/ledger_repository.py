"""SQLAlchemy-backed repository for ledger records."""

from datetime import datetime, timezone
from decimal import Decimal
import uuid

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import (
    Account,
    ExchangeRateRow,
    Expense,
    Income,
    ProfitDistributionSetting,
)
from src.domain.services.normalization import normalize_iso_date
from src.utils.decimal_utils import coerce_decimal


CREATE_ACCOUNTS_SQL = """
CREATE TABLE IF NOT EXISTS accounts (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    name TEXT NOT NULL,
    currency TEXT NOT NULL,
    balance NUMERIC NOT NULL DEFAULT 0,
    converted_balance NUMERIC NOT NULL DEFAULT 0,
    last_updated TEXT,
    notes TEXT,
    UNIQUE (user_id, name)
)
"""

CREATE_INCOME_SQL = """
CREATE TABLE IF NOT EXISTS income (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    date TEXT NOT NULL,
    original_amount NUMERIC NOT NULL,
    currency TEXT NOT NULL,
    received_amount NUMERIC NOT NULL DEFAULT 0,
    converted_amount NUMERIC NOT NULL DEFAULT 0,
    original_converted_amount NUMERIC NOT NULL DEFAULT 0,
    category TEXT,
    description TEXT,
    client_name TEXT,
    notes TEXT,
    status TEXT NOT NULL,
    account_name TEXT NOT NULL,
    due_date TEXT,
    manual_conversion_rate NUMERIC,
    manual_converted_amount NUMERIC,
    split_amount NUMERIC NOT NULL DEFAULT 0,
    split_rate_used NUMERIC NOT NULL DEFAULT 1,
    created_at TEXT,
    updated_at TEXT
)
"""

CREATE_EXPENSES_SQL = """
CREATE TABLE IF NOT EXISTS expenses (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    date TEXT NOT NULL,
    amount NUMERIC NOT NULL,
    currency TEXT NOT NULL,
    converted_amount NUMERIC NOT NULL DEFAULT 0,
    conversion_rate_used NUMERIC NOT NULL DEFAULT 1,
    category TEXT,
    description TEXT,
    payment_status TEXT NOT NULL,
    notes TEXT,
    account_name TEXT NOT NULL,
    due_date TEXT,
    manual_conversion_rate NUMERIC,
    manual_converted_amount NUMERIC,
    created_at TEXT,
    updated_at TEXT
)
"""

CREATE_EXCHANGE_RATES_SQL = """
CREATE TABLE IF NOT EXISTS exchange_rates (
    user_id TEXT NOT NULL,
    currency TEXT NOT NULL,
    rate NUMERIC NOT NULL,
    updated_at TEXT,
    PRIMARY KEY (user_id, currency)
)
"""

CREATE_DISTRIBUTION_SQL = """
CREATE TABLE IF NOT EXISTS profit_distribution_settings (
    user_id TEXT NOT NULL,
    year INTEGER NOT NULL,
    month INTEGER NOT NULL,
    company_percentage NUMERIC NOT NULL,
    roshaan_percentage NUMERIC NOT NULL,
    shahbaz_percentage NUMERIC NOT NULL,
    updated_at TEXT,
    PRIMARY KEY (user_id, year, month)
)
"""

SCHEMA_STATEMENTS = (
    CREATE_ACCOUNTS_SQL,
    CREATE_INCOME_SQL,
    CREATE_EXPENSES_SQL,
    CREATE_EXCHANGE_RATES_SQL,
    CREATE_DISTRIBUTION_SQL,
)

SELECT_INCOME_SQL = text(
    """
    SELECT id, date, original_amount, currency, received_amount,
           converted_amount, original_converted_amount, category,
           description, client_name, notes, status, account_name, due_date,
           manual_conversion_rate, manual_converted_amount, split_amount,
           split_rate_used
    FROM income
    WHERE user_id = :user_id
    ORDER BY date DESC, id
    """
)

SELECT_EXPENSES_SQL = text(
    """
    SELECT id, date, amount, currency, converted_amount, conversion_rate_used,
           category, description, payment_status, notes, account_name,
           due_date, manual_conversion_rate, manual_converted_amount
    FROM expenses
    WHERE user_id = :user_id
    ORDER BY date DESC, id
    """
)

SELECT_ACCOUNTS_SQL = text(
    """
    SELECT id, name, currency, balance, converted_balance, last_updated, notes
    FROM accounts
    WHERE user_id = :user_id
    ORDER BY name
    """
)

SELECT_EXCHANGE_RATES_SQL = text(
    """
    SELECT currency, rate
    FROM exchange_rates
    WHERE user_id = :user_id
    ORDER BY currency
    """
)

SELECT_DISTRIBUTION_SQL = text(
    """
    SELECT year, month, company_percentage, roshaan_percentage,
           shahbaz_percentage
    FROM profit_distribution_settings
    WHERE user_id = :user_id AND year = :year AND month = :month
    LIMIT 1
    """
)

UPSERT_INCOME_SQL = text(
    """
    INSERT INTO income (
        id, user_id, date, original_amount, currency, received_amount,
        converted_amount, original_converted_amount, category, description,
        client_name, notes, status, account_name, due_date,
        manual_conversion_rate, manual_converted_amount, split_amount,
        split_rate_used, created_at, updated_at
    )
    VALUES (
        :id, :user_id, :date, :original_amount, :currency, :received_amount,
        :converted_amount, :original_converted_amount, :category,
        :description, :client_name, :notes, :status, :account_name,
        :due_date, :manual_conversion_rate, :manual_converted_amount,
        :split_amount, :split_rate_used, :now, :now
    )
    ON CONFLICT (id) DO UPDATE SET
        date = EXCLUDED.date,
        original_amount = EXCLUDED.original_amount,
        currency = EXCLUDED.currency,
        received_amount = EXCLUDED.received_amount,
        converted_amount = EXCLUDED.converted_amount,
        original_converted_amount = EXCLUDED.original_converted_amount,
        category = EXCLUDED.category,
        description = EXCLUDED.description,
        client_name = EXCLUDED.client_name,
        notes = EXCLUDED.notes,
        status = EXCLUDED.status,
        account_name = EXCLUDED.account_name,
        due_date = EXCLUDED.due_date,
        manual_conversion_rate = EXCLUDED.manual_conversion_rate,
        manual_converted_amount = EXCLUDED.manual_converted_amount,
        split_amount = EXCLUDED.split_amount,
        split_rate_used = EXCLUDED.split_rate_used,
        updated_at = EXCLUDED.updated_at
    WHERE income.user_id = EXCLUDED.user_id
    """
)

UPSERT_EXPENSE_SQL = text(
    """
    INSERT INTO expenses (
        id, user_id, date, amount, currency, converted_amount,
        conversion_rate_used, category, description, payment_status, notes,
        account_name, due_date, manual_conversion_rate,
        manual_converted_amount, created_at, updated_at
    )
    VALUES (
        :id, :user_id, :date, :amount, :currency, :converted_amount,
        :conversion_rate_used, :category, :description, :payment_status,
        :notes, :account_name, :due_date, :manual_conversion_rate,
        :manual_converted_amount, :now, :now
    )
    ON CONFLICT (id) DO UPDATE SET
        date = EXCLUDED.date,
        amount = EXCLUDED.amount,
        currency = EXCLUDED.currency,
        converted_amount = EXCLUDED.converted_amount,
        conversion_rate_used = EXCLUDED.conversion_rate_used,
        category = EXCLUDED.category,
        description = EXCLUDED.description,
        payment_status = EXCLUDED.payment_status,
        notes = EXCLUDED.notes,
        account_name = EXCLUDED.account_name,
        due_date = EXCLUDED.due_date,
        manual_conversion_rate = EXCLUDED.manual_conversion_rate,
        manual_converted_amount = EXCLUDED.manual_converted_amount,
        updated_at = EXCLUDED.updated_at
    WHERE expenses.user_id = EXCLUDED.user_id
    """
)

UPSERT_ACCOUNT_SQL = text(
    """
    INSERT INTO accounts (
        id, user_id, name, currency, balance, converted_balance,
        last_updated, notes
    )
    VALUES (
        :id, :user_id, :name, :currency, :balance, :converted_balance,
        :last_updated, :notes
    )
    ON CONFLICT (id) DO UPDATE SET
        name = EXCLUDED.name,
        currency = EXCLUDED.currency,
        balance = EXCLUDED.balance,
        converted_balance = EXCLUDED.converted_balance,
        last_updated = EXCLUDED.last_updated,
        notes = EXCLUDED.notes
    WHERE accounts.user_id = EXCLUDED.user_id
    """
)

UPSERT_EXCHANGE_RATE_SQL = text(
    """
    INSERT INTO exchange_rates (user_id, currency, rate, updated_at)
    VALUES (:user_id, :currency, :rate, :now)
    ON CONFLICT (user_id, currency) DO UPDATE SET
        rate = EXCLUDED.rate,
        updated_at = EXCLUDED.updated_at
    """
)

UPSERT_DISTRIBUTION_SQL = text(
    """
    INSERT INTO profit_distribution_settings (
        user_id, year, month, company_percentage, roshaan_percentage,
        shahbaz_percentage, updated_at
    )
    VALUES (
        :user_id, :year, :month, :company_percentage, :roshaan_percentage,
        :shahbaz_percentage, :now
    )
    ON CONFLICT (user_id, year, month) DO UPDATE SET
        company_percentage = EXCLUDED.company_percentage,
        roshaan_percentage = EXCLUDED.roshaan_percentage,
        shahbaz_percentage = EXCLUDED.shahbaz_percentage,
        updated_at = EXCLUDED.updated_at
    """
)

DELETE_INCOME_SQL = text(
    "DELETE FROM income WHERE id = :id AND user_id = :user_id"
)
DELETE_EXPENSE_SQL = text(
    "DELETE FROM expenses WHERE id = :id AND user_id = :user_id"
)
DELETE_ACCOUNT_SQL = text(
    "DELETE FROM accounts WHERE id = :id AND user_id = :user_id"
)


def _db_number(value: Decimal | None) -> str | None:
    """Render a Decimal for NUMERIC columns without float rounding."""
    if value is None:
        return None
    return str(value)


def _optional_decimal(value) -> Decimal | None:
    if value is None:
        return None
    return coerce_decimal(value)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for ledger records."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def ensure_schema(self) -> None:
        """Create the ledger tables when they do not exist."""
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            for statement in SCHEMA_STATEMENTS:
                conn.exec_driver_sql(statement)

    def fetch_incomes(self, user_id: str) -> list[Income]:
        rows = self._fetch_all(SELECT_INCOME_SQL, {"user_id": user_id})
        return [
            Income(
                id=row.id,
                date=normalize_iso_date(row.date),
                original_amount=coerce_decimal(row.original_amount),
                currency=row.currency,
                received_amount=coerce_decimal(row.received_amount),
                status=row.status,
                account=row.account_name,
                category=row.category or "",
                description=row.description or "",
                client_name=row.client_name or "",
                converted_amount=coerce_decimal(row.converted_amount),
                original_converted_amount=coerce_decimal(
                    row.original_converted_amount
                ),
                split_amount=coerce_decimal(row.split_amount),
                split_rate_used=coerce_decimal(row.split_rate_used),
                notes=row.notes or "",
                due_date=normalize_iso_date(row.due_date),
                manual_conversion_rate=_optional_decimal(
                    row.manual_conversion_rate
                ),
                manual_converted_amount=_optional_decimal(
                    row.manual_converted_amount
                ),
            )
            for row in rows
        ]

    def fetch_expenses(self, user_id: str) -> list[Expense]:
        rows = self._fetch_all(SELECT_EXPENSES_SQL, {"user_id": user_id})
        return [
            Expense(
                id=row.id,
                date=normalize_iso_date(row.date),
                amount=coerce_decimal(row.amount),
                currency=row.currency,
                converted_amount=coerce_decimal(row.converted_amount),
                payment_status=row.payment_status,
                account=row.account_name,
                category=row.category or "",
                description=row.description or "",
                conversion_rate_used=coerce_decimal(row.conversion_rate_used),
                notes=row.notes or "",
                due_date=normalize_iso_date(row.due_date),
                manual_conversion_rate=_optional_decimal(
                    row.manual_conversion_rate
                ),
                manual_converted_amount=_optional_decimal(
                    row.manual_converted_amount
                ),
            )
            for row in rows
        ]

    def fetch_accounts(self, user_id: str) -> list[Account]:
        rows = self._fetch_all(SELECT_ACCOUNTS_SQL, {"user_id": user_id})
        return [
            Account(
                id=row.id,
                name=row.name,
                currency=row.currency,
                balance=coerce_decimal(row.balance),
                converted_balance=coerce_decimal(row.converted_balance),
                last_updated=row.last_updated,
                notes=row.notes or "",
            )
            for row in rows
        ]

    def fetch_exchange_rates(self, user_id: str) -> list[ExchangeRateRow]:
        rows = self._fetch_all(SELECT_EXCHANGE_RATES_SQL, {"user_id": user_id})
        return [
            ExchangeRateRow(currency=row.currency, rate=coerce_decimal(row.rate))
            for row in rows
        ]

    def fetch_distribution_setting(
        self,
        user_id: str,
        year: int,
        month: int,
    ) -> ProfitDistributionSetting | None:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_DISTRIBUTION_SQL,
                {"user_id": user_id, "year": year, "month": month},
            ).first()
        if not row:
            return None
        return ProfitDistributionSetting(
            company_percentage=coerce_decimal(row.company_percentage),
            roshaan_percentage=coerce_decimal(row.roshaan_percentage),
            shahbaz_percentage=coerce_decimal(row.shahbaz_percentage),
            year=row.year,
            month=row.month,
        )

    def save_income(self, user_id: str, income: Income) -> str:
        record_id = income.id or uuid.uuid4().hex
        params = {
            "id": record_id,
            "user_id": user_id,
            "date": income.date,
            "original_amount": _db_number(income.original_amount),
            "currency": income.currency,
            "received_amount": _db_number(income.received_amount),
            "converted_amount": _db_number(income.converted_amount),
            "original_converted_amount": _db_number(
                income.original_converted_amount
            ),
            "category": income.category,
            "description": income.description,
            "client_name": income.client_name,
            "notes": income.notes,
            "status": income.status,
            "account_name": income.account,
            "due_date": income.due_date,
            "manual_conversion_rate": _db_number(income.manual_conversion_rate),
            "manual_converted_amount": _db_number(
                income.manual_converted_amount
            ),
            "split_amount": _db_number(income.split_amount),
            "split_rate_used": _db_number(income.split_rate_used),
            "now": _utc_now(),
        }
        self._execute(UPSERT_INCOME_SQL, params)
        return record_id

    def save_expense(self, user_id: str, expense: Expense) -> str:
        record_id = expense.id or uuid.uuid4().hex
        params = {
            "id": record_id,
            "user_id": user_id,
            "date": expense.date,
            "amount": _db_number(expense.amount),
            "currency": expense.currency,
            "converted_amount": _db_number(expense.converted_amount),
            "conversion_rate_used": _db_number(expense.conversion_rate_used),
            "category": expense.category,
            "description": expense.description,
            "payment_status": expense.payment_status,
            "notes": expense.notes,
            "account_name": expense.account,
            "due_date": expense.due_date,
            "manual_conversion_rate": _db_number(expense.manual_conversion_rate),
            "manual_converted_amount": _db_number(
                expense.manual_converted_amount
            ),
            "now": _utc_now(),
        }
        self._execute(UPSERT_EXPENSE_SQL, params)
        return record_id

    def save_account(self, user_id: str, account: Account) -> str:
        record_id = account.id or uuid.uuid4().hex
        params = {
            "id": record_id,
            "user_id": user_id,
            "name": account.name,
            "currency": account.currency,
            "balance": _db_number(account.balance),
            "converted_balance": _db_number(account.converted_balance),
            "last_updated": account.last_updated or _utc_now(),
            "notes": account.notes,
        }
        self._execute(UPSERT_ACCOUNT_SQL, params)
        return record_id

    def upsert_exchange_rate(self, user_id: str, currency: str, rate) -> None:
        self._execute(
            UPSERT_EXCHANGE_RATE_SQL,
            {
                "user_id": user_id,
                "currency": currency,
                "rate": _db_number(coerce_decimal(rate)),
                "now": _utc_now(),
            },
        )

    def upsert_distribution_setting(
        self,
        user_id: str,
        setting: ProfitDistributionSetting,
    ) -> None:
        if setting.year is None or setting.month is None:
            raise ValueError("Distribution settings need a year and a month")
        self._execute(
            UPSERT_DISTRIBUTION_SQL,
            {
                "user_id": user_id,
                "year": setting.year,
                "month": setting.month,
                "company_percentage": _db_number(setting.company_percentage),
                "roshaan_percentage": _db_number(setting.roshaan_percentage),
                "shahbaz_percentage": _db_number(setting.shahbaz_percentage),
                "now": _utc_now(),
            },
        )

    def delete_income(self, user_id: str, income_id: str) -> None:
        self._execute(DELETE_INCOME_SQL, {"id": income_id, "user_id": user_id})

    def delete_expense(self, user_id: str, expense_id: str) -> None:
        self._execute(DELETE_EXPENSE_SQL, {"id": expense_id, "user_id": user_id})

    def delete_account(self, user_id: str, account_id: str) -> None:
        self._execute(DELETE_ACCOUNT_SQL, {"id": account_id, "user_id": user_id})

    def _fetch_all(self, query, params: dict) -> list:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            return conn.execute(query, params).all()

    def _execute(self, statement, params: dict) -> None:
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(statement, params)


__all__ = [
    "SqlAlchemyLedgerRepository",
    "SCHEMA_STATEMENTS",
    "UPSERT_INCOME_SQL",
    "UPSERT_EXPENSE_SQL",
    "UPSERT_ACCOUNT_SQL",
    "UPSERT_EXCHANGE_RATE_SQL",
    "UPSERT_DISTRIBUTION_SQL",
]

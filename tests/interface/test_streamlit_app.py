"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from src.adapters.interface.streamlit import app
from src.domain.errors import RecordNotFoundError, ValidationError
from src.domain.models import (
    Account,
    CategoryAmount,
    Expense,
    Income,
    ProfitDistributionSetting,
)


def test_fetch_dashboard_summary_invokes_use_case(monkeypatch):
    """_fetch_dashboard_summary should wire the repository and use case."""
    calls = {}

    class _FakeUseCase:
        def __init__(self, repository, recent_limit=5):
            calls["repository"] = repository
            calls["recent_limit"] = recent_limit

        def execute(self, user_id, month_key):
            calls["args"] = (user_id, month_key)
            return "summary"

    monkeypatch.setattr(
        app,
        "build_settings",
        lambda: SimpleNamespace(recent_limit=7),
    )
    monkeypatch.setattr(app, "build_ledger_repository", lambda: "repository")
    monkeypatch.setattr(app, "GetDashboardSummaryUseCase", _FakeUseCase)

    result = app._fetch_dashboard_summary("owner-1", "2024-03")

    assert result == "summary"
    assert calls == {
        "repository": "repository",
        "recent_limit": 7,
        "args": ("owner-1", "2024-03"),
    }


def test_load_dashboard_summary_uses_fetch(monkeypatch):
    """The cached loader should delegate to _fetch_dashboard_summary."""
    monkeypatch.setattr(
        app,
        "_fetch_dashboard_summary",
        lambda user_id, month_key: f"{user_id}:{month_key}",
    )

    result = app._load_dashboard_summary("loader-user", "2031-01")

    assert result == "loader-user:2031-01"


def test_fetch_period_report_passes_bounds_and_filters(monkeypatch):
    captured = {}

    class _FakeUseCase:
        def __init__(self, repository):
            captured["repository"] = repository

        def execute(
            self,
            user_id,
            start_date=None,
            end_date=None,
            category=None,
            account=None,
        ):
            captured["args"] = (user_id, start_date, end_date, category, account)
            return "report"

    monkeypatch.setattr(app, "build_ledger_repository", lambda: "repository")
    monkeypatch.setattr(app, "GetPeriodReportUseCase", _FakeUseCase)

    assert app._fetch_period_report("owner-1", None, None) == "report"
    assert captured["args"] == ("owner-1", None, None, None, None)

    app._fetch_period_report("owner-1", None, None, "SEO", "Wise USD")

    assert captured["args"] == ("owner-1", None, None, "SEO", "Wise USD")


def test_format_currency_uses_rupee_symbol_for_pkr():
    assert app._format_currency(Decimal("1234567.891"), "PKR") == (
        "Rs 1,234,567.89"
    )
    assert app._format_currency(Decimal("12.5"), "USD") == "USD 12.50"


def _summary(total_income, company, roshaan, shahbaz):
    month = SimpleNamespace(
        total_income=Decimal(total_income),
        company_share=Decimal(company),
        roshaan_share=Decimal(roshaan),
        shahbaz_share=Decimal(shahbaz),
    )
    distribution = ProfitDistributionSetting(
        company_percentage=Decimal("50"),
        roshaan_percentage=Decimal("25"),
        shahbaz_percentage=Decimal("25"),
    )
    return SimpleNamespace(current_month=month, distribution=distribution)


def test_prepare_distribution_chart_data_rows():
    """Rows carry the party, the amount and display labels."""
    data = app._prepare_distribution_chart_data(
        _summary("1000", "500", "250", "250"),
        "PKR",
    )

    assert [row["party"] for row in data] == ["Company", "Roshaan", "Shahbaz"]
    assert data[0]["amount"] == 500.0
    assert data[0]["amount_label"] == "Rs 500.00"
    assert data[1]["share_label"] == "25.0%"


def test_prepare_distribution_chart_data_without_income():
    data = app._prepare_distribution_chart_data(
        _summary("0", "0", "0", "0"),
        "PKR",
    )

    assert data == []


def test_transaction_rows_handle_incomes_and_expenses():
    income = Income(
        id="i1",
        date="2024-03-15",
        original_amount=Decimal("1000"),
        currency="USD",
        received_amount=Decimal("1000"),
        status="Received",
        account="Wise USD",
        category="SEO",
        description="Audit",
        client_name="Acme",
        converted_amount=Decimal("280000"),
        original_converted_amount=Decimal("280000"),
        split_amount=Decimal("280000"),
        split_rate_used=Decimal("280"),
    )
    expense = Expense(
        id="e1",
        date="2024-03-10",
        amount=Decimal("500"),
        currency="PKR",
        converted_amount=Decimal("500"),
        payment_status="Pending",
        account="Bank Alfalah",
        category="Office",
        description="Rent",
    )

    rows = app._transaction_rows([income, expense], "PKR")

    assert rows[0]["Type"] == "Income"
    assert rows[0]["Amount"] == "1,000.00 USD"
    assert rows[0]["Converted"] == "Rs 280,000.00"
    assert rows[1]["Type"] == "Expense"
    assert rows[1]["Status"] == "Pending"


def test_account_rows_show_dash_without_update():
    rows = app._account_rows(
        [
            Account(
                id="a1",
                name="Payoneer",
                currency="USD",
                balance=Decimal("10"),
                converted_balance=Decimal("2800"),
            )
        ],
        "PKR",
    )

    assert rows == [
        {
            "Account": "Payoneer",
            "Currency": "USD",
            "Balance": "10.00",
            "Converted": "Rs 2,800.00",
            "Last updated": "-",
        }
    ]


class _FakeStreamlit:
    def __init__(self) -> None:
        self.config_called = False
        self.title_text = None
        self.errors: list[str] = []

    def set_page_config(self, **kwargs):
        self.config_called = True
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def error(self, text: str):
        self.errors.append(text)


def test_show_error_lists_each_field(monkeypatch):
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    app._show_error(
        ValidationError({"amount": "must be positive", "date": "required"})
    )

    assert fake_st.errors == ["amount: must be positive", "date: required"]


def test_main_requires_user_id(monkeypatch):
    """main should stop with an error when no ledger owner is configured."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "build_settings",
        lambda: SimpleNamespace(user_id=None, base_currency="PKR"),
    )

    app.main()

    assert fake_st.config_called
    assert fake_st.title_text == "Ledger Dashboard"
    assert len(fake_st.errors) == 1
    assert "LEDGER_USER_ID" in fake_st.errors[0]


def test_fetch_transactions_lists_month(monkeypatch):
    captured = {}

    class _FakeUseCase:
        def __init__(self, repository):
            captured["repository"] = repository

        def execute(self, user_id, month_key=None):
            captured["args"] = (user_id, month_key)
            return ["income"], ["expense"]

    monkeypatch.setattr(app, "build_ledger_repository", lambda: "repository")
    monkeypatch.setattr(app, "ListTransactionsUseCase", _FakeUseCase)

    assert app._fetch_transactions("owner-1", "2024-03") == (
        ["income"],
        ["expense"],
    )
    assert captured == {
        "repository": "repository",
        "args": ("owner-1", "2024-03"),
    }


def test_load_transactions_uses_fetch(monkeypatch):
    monkeypatch.setattr(
        app,
        "_fetch_transactions",
        lambda user_id, month_key: (user_id, month_key),
    )

    assert app._load_transactions("loader-user", None) == ("loader-user", None)


def test_filter_value_maps_all_to_none():
    assert app._filter_value(app.ALL_OPTION) is None
    assert app._filter_value("SEO") == "SEO"


def test_options_with_keeps_stored_value():
    """Stored values outside the vocabulary stay selectable when editing."""
    assert app._options_with(("SEO", "Web"), "Consulting") == [
        "SEO",
        "Web",
        "Consulting",
    ]
    assert app._options_with(("SEO", "Web"), "Web") == ["SEO", "Web"]
    assert app._options_with(("SEO",), "") == ["SEO"]
    assert app._index_of(["SEO", "Web"], "Web") == 1
    assert app._index_of(["SEO", "Web"], None) == 0


def test_form_values_from_stored_fields():
    assert app._form_text(None) == ""
    assert app._form_text(Decimal("12.50")) == "12.50"
    assert app._form_date("2024-03-15") == date(2024, 3, 15)
    assert app._form_date("") is None
    assert app._form_date(None) is None


def test_record_label_describes_income_and_expense():
    income = Income(
        id="i1",
        date="2024-03-15",
        original_amount=Decimal("1000"),
        currency="USD",
        received_amount=Decimal("1000"),
        status="Received",
        account="Wise USD",
        category="SEO",
        description="Audit",
        client_name="Acme",
        converted_amount=Decimal("280000"),
        original_converted_amount=Decimal("280000"),
        split_amount=Decimal("280000"),
        split_rate_used=Decimal("280"),
    )
    expense = Expense(
        id="e1",
        date="2024-03-10",
        amount=Decimal("1500"),
        currency="PKR",
        converted_amount=Decimal("1500"),
        payment_status="Done",
        account="Bank Alfalah",
        category="Office",
        description="Rent",
    )

    assert app._record_label(income) == "2024-03-15 | Acme | 1,000.00 USD"
    assert app._record_label(expense) == "2024-03-10 | Rent | 1,500.00 PKR"


def test_breakdown_rows_format_amounts():
    rows = app._breakdown_rows(
        [CategoryAmount(label="Wise USD", amount=Decimal("2800"))],
        "Account",
        "PKR",
    )

    assert rows == [{"Account": "Wise USD", "Amount": "Rs 2,800.00"}]


class _FakeCache:
    def __init__(self) -> None:
        self.cleared = False

    def clear(self):
        self.cleared = True


class _FakeDeleteStreamlit:
    def __init__(self, confirmed: bool, pressed: bool) -> None:
        self.confirmed = confirmed
        self.pressed = pressed
        self.cache_data = _FakeCache()
        self.button_kwargs = {}
        self.messages: list[str] = []
        self.errors: list[str] = []

    def checkbox(self, label, key=None):
        return self.confirmed

    def button(self, label, key=None, disabled=False):
        self.button_kwargs = {"key": key, "disabled": disabled}
        return self.pressed and not disabled

    def success(self, text):
        self.messages.append(text)

    def error(self, text):
        self.errors.append(text)


def _deletion_use_case(calls, error=None):
    class _FakeUseCase:
        def __init__(self, repository):
            calls["repository"] = repository

        def execute(self, user_id, record_id):
            calls["args"] = (user_id, record_id)
            if error is not None:
                raise error

    return _FakeUseCase


def test_delete_record_requires_confirmation(monkeypatch):
    fake_st = _FakeDeleteStreamlit(confirmed=False, pressed=True)
    calls = {}
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "build_ledger_repository", lambda: "repository")

    app._render_delete_record(
        "expense",
        "owner-1",
        SimpleNamespace(id="e1"),
        _deletion_use_case(calls),
    )

    assert fake_st.button_kwargs["disabled"] is True
    assert calls == {}
    assert not fake_st.cache_data.cleared


def test_delete_record_calls_use_case(monkeypatch):
    fake_st = _FakeDeleteStreamlit(confirmed=True, pressed=True)
    calls = {}
    usage = []
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "build_ledger_repository", lambda: "repository")
    monkeypatch.setattr(
        app,
        "get_usage_logger",
        lambda: SimpleNamespace(info=usage.append),
    )

    app._render_delete_record(
        "income",
        "owner-1",
        SimpleNamespace(id="i1"),
        _deletion_use_case(calls),
    )

    assert calls == {"repository": "repository", "args": ("owner-1", "i1")}
    assert usage == ["user=owner-1 deleted income i1"]
    assert fake_st.cache_data.cleared
    assert fake_st.messages == ["Income deleted."]


def test_delete_record_shows_lookup_errors(monkeypatch):
    fake_st = _FakeDeleteStreamlit(confirmed=True, pressed=True)
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "build_ledger_repository", lambda: "repository")

    app._render_delete_record(
        "income",
        "owner-1",
        SimpleNamespace(id="i1"),
        _deletion_use_case({}, RecordNotFoundError("income", "i1")),
    )

    assert fake_st.errors == ["Unknown income: 'i1'"]
    assert not fake_st.cache_data.cleared

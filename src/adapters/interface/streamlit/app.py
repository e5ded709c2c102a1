"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.use_cases.delete_transactions import (
    DeleteExpenseUseCase,
    DeleteIncomeUseCase,
)
from src.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)
from src.application.use_cases.get_period_report import GetPeriodReportUseCase
from src.application.use_cases.list_transactions import ListTransactionsUseCase
from src.application.use_cases.manage_accounts import (
    CreateAccountUseCase,
    DeleteAccountUseCase,
    ReconcileAccountBalancesUseCase,
    UpdateAccountBalanceUseCase,
)
from src.application.use_cases.record_expense import RecordExpenseUseCase
from src.application.use_cases.record_income import RecordIncomeUseCase
from src.application.use_cases.set_profit_distribution import (
    SetProfitDistributionUseCase,
)
from src.application.use_cases.update_exchange_rates import (
    UpdateExchangeRatesUseCase,
)
from src.domain.constants import (
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    INCOME_PARTIAL,
    INCOME_STATUSES,
    PAYMENT_STATUSES,
)
from src.domain.errors import LedgerError, ValidationError
from src.domain.models import (
    Account,
    CategoryAmount,
    DashboardSummary,
    Expense,
    ExpenseDraft,
    Income,
    IncomeDraft,
    PeriodReport,
)
from src.domain.services.periods import (
    PERIODS,
    current_month_key,
    month_label,
    period_bounds,
    recent_month_keys,
)
from src.domain.services.transactions import expense_to_draft, income_to_draft
from src.infrastructure.container import (
    build_ledger_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_usage_logger

ALL_OPTION = "All"
NEW_RECORD = "New"


def _fetch_dashboard_summary(user_id: str, month_key: str) -> DashboardSummary:
    """Fetch the dashboard summary for a month."""
    settings = build_settings()
    use_case = GetDashboardSummaryUseCase(
        build_ledger_repository(),
        recent_limit=settings.recent_limit,
    )
    return use_case.execute(user_id, month_key)


@st.cache_data(show_spinner=False)
def _load_dashboard_summary(user_id: str, month_key: str) -> DashboardSummary:
    """Cached wrapper around _fetch_dashboard_summary."""
    return _fetch_dashboard_summary(user_id, month_key)


def _fetch_period_report(
    user_id: str,
    start_date: date | None,
    end_date: date | None,
    category: str | None = None,
    account: str | None = None,
) -> PeriodReport:
    """Fetch a profit and loss report for the period and filters."""
    use_case = GetPeriodReportUseCase(build_ledger_repository())
    return use_case.execute(
        user_id,
        start_date=start_date,
        end_date=end_date,
        category=category,
        account=account,
    )


@st.cache_data(show_spinner=False)
def _load_period_report(
    user_id: str,
    start_date: date | None,
    end_date: date | None,
    category: str | None = None,
    account: str | None = None,
) -> PeriodReport:
    """Cached wrapper around _fetch_period_report."""
    return _fetch_period_report(user_id, start_date, end_date, category, account)


def _fetch_transactions(
    user_id: str,
    month_key: str | None,
) -> tuple[list[Income], list[Expense]]:
    """Fetch incomes and expenses, newest first."""
    return ListTransactionsUseCase(build_ledger_repository()).execute(
        user_id,
        month_key,
    )


@st.cache_data(show_spinner=False)
def _load_transactions(
    user_id: str,
    month_key: str | None,
) -> tuple[list[Income], list[Expense]]:
    """Cached wrapper around _fetch_transactions."""
    return _fetch_transactions(user_id, month_key)


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = "Rs" if currency_code == "PKR" else currency_code
    return f"{symbol} {value:,.2f}"


def _format_percentage(value: Decimal) -> str:
    return f"{value:.1f}%"


def _prepare_distribution_chart_data(
    summary: DashboardSummary,
    currency_code: str,
) -> list[dict[str, str | float]]:
    """Prepare donut chart data for the company and owner shares.

    Args:
        summary: Dashboard summary of the selected month.
        currency_code: Base currency used for labels.

    Returns:
        Altair-ready rows, empty when the month has no confirmed income.
    """
    month = summary.current_month
    shares = [
        ("Company", month.company_share, summary.distribution.company_percentage),
        ("Roshaan", month.roshaan_share, summary.distribution.roshaan_percentage),
        ("Shahbaz", month.shahbaz_share, summary.distribution.shahbaz_percentage),
    ]
    if month.total_income <= 0:
        return []
    return [
        {
            "party": party,
            "amount": float(amount),
            "amount_label": _format_currency(amount, currency_code),
            "share_label": _format_percentage(percentage),
        }
        for party, amount, percentage in shares
        if amount > 0
    ]


def _transaction_rows(
    records: Sequence[Income | Expense],
    currency_code: str,
) -> list[dict[str, str]]:
    """Flatten mixed incomes and expenses for a table."""
    rows = []
    for record in records:
        if isinstance(record, Income):
            rows.append(
                {
                    "Date": record.date,
                    "Type": "Income",
                    "Description": record.description,
                    "Account": record.account,
                    "Status": record.status,
                    "Amount": f"{record.original_amount:,.2f} {record.currency}",
                    "Converted": _format_currency(
                        record.converted_amount,
                        currency_code,
                    ),
                }
            )
        else:
            rows.append(
                {
                    "Date": record.date,
                    "Type": "Expense",
                    "Description": record.description,
                    "Account": record.account,
                    "Status": record.payment_status,
                    "Amount": f"{record.amount:,.2f} {record.currency}",
                    "Converted": _format_currency(
                        record.converted_amount,
                        currency_code,
                    ),
                }
            )
    return rows


def _account_rows(
    accounts: Sequence[Account],
    currency_code: str,
) -> list[dict[str, str]]:
    return [
        {
            "Account": account.name,
            "Currency": account.currency,
            "Balance": f"{account.balance:,.2f}",
            "Converted": _format_currency(
                account.converted_balance,
                currency_code,
            ),
            "Last updated": (account.last_updated or "")[:10] or "-",
        }
        for account in accounts
    ]


def _show_error(exc: LedgerError) -> None:
    if isinstance(exc, ValidationError):
        for field, reason in exc.errors.items():
            st.error(f"{field}: {reason}")
        return
    st.error(str(exc))


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that the numpy/pandas imports Altair relies on are usable.

    Returns:
        Tuple with a success flag and an error message when unusable.
    """
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Chart dependencies are not installed: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy import is incomplete (numpy.ndarray missing)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas import is incomplete (pandas.Timestamp missing)."
    return True, None


def _render_distribution_chart(
    summary: DashboardSummary,
    currency_code: str,
    chart_size: int = 300,
) -> None:
    """Render a donut chart of the month's profit distribution."""
    data = _prepare_distribution_chart_data(summary, currency_code)
    st.subheader("Profit Distribution")
    if not data:
        st.info("No confirmed income this month.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return

    hover = alt.selection_point(
        name="hover",
        fields=["party"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "party:N",
            scale=alt.Scale(range=["#1b9aaa", "#f4a261", "#2e7d32"]),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        tooltip=[
            alt.Tooltip("party:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    chart = base.add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(stroke=None)
    st.altair_chart(chart, width="stretch")


def _render_dashboard(user_id: str, currency_code: str) -> None:
    today = date.today()
    month_keys = recent_month_keys(today)
    month_key = st.sidebar.selectbox(
        "Month",
        month_keys,
        index=month_keys.index(current_month_key(today)),
        format_func=month_label,
    )
    summary = _load_dashboard_summary(user_id, month_key)
    month = summary.current_month

    income_col, expenses_col, balance_col, pending_col = st.columns(4)
    income_col.metric(
        "Total Income",
        _format_currency(month.total_income, currency_code),
        f"Expected {_format_currency(month.expected_income, currency_code)}",
    )
    expenses_col.metric(
        "Total Expenses",
        _format_currency(month.total_expenses, currency_code),
    )
    balance_col.metric(
        "Company Balance",
        _format_currency(summary.total_balance, currency_code),
    )
    pending_col.metric(
        "Pending Payments",
        _format_currency(month.pending_payments, currency_code),
    )

    chart_col, lists_col = st.columns(2)
    with chart_col:
        _render_distribution_chart(summary, currency_code)
    with lists_col:
        st.subheader("Upcoming Income")
        if summary.upcoming_income:
            st.dataframe(
                _transaction_rows(summary.upcoming_income, currency_code),
                hide_index=True,
            )
        else:
            st.caption("Nothing upcoming.")
        st.subheader("Partial Payments")
        for income in summary.partial_payments:
            st.write(
                f"{income.client_name}: "
                f"{_format_currency(income.outstanding_amount, currency_code)}"
                " outstanding"
            )
        st.subheader("Pending Expenses")
        if summary.pending_expenses:
            st.dataframe(
                _transaction_rows(summary.pending_expenses, currency_code),
                hide_index=True,
            )
        else:
            st.caption("No pending expenses.")

    st.subheader("Recent Transactions")
    st.dataframe(
        _transaction_rows(summary.recent_transactions, currency_code),
        width="stretch",
        hide_index=True,
    )
    st.subheader("Accounts")
    st.dataframe(
        _account_rows(summary.accounts, currency_code),
        width="stretch",
        hide_index=True,
    )


def _form_text(value) -> str:
    """Render an optional stored value for a text input."""
    return "" if value is None else str(value)


def _form_date(value: str | date | None) -> date | None:
    if isinstance(value, str):
        return date.fromisoformat(value) if value else None
    return value


def _options_with(options: Sequence[str], value: str | None) -> list[str]:
    """Return the options, appending a stored value missing from them."""
    choices = list(options)
    if value and value not in choices:
        choices.append(value)
    return choices


def _index_of(options: Sequence[str], value: str | None) -> int:
    return options.index(value) if value in options else 0


def _filter_value(choice: str) -> str | None:
    return None if choice == ALL_OPTION else choice


def _record_label(record: Income | Expense) -> str:
    """Describe a record in one line for selection widgets."""
    if isinstance(record, Income):
        who = record.client_name or record.description
        amount = record.original_amount
    else:
        who = record.description
        amount = record.amount
    return f"{record.date} | {who} | {amount:,.2f} {record.currency}"


def _breakdown_rows(
    items: Sequence[CategoryAmount],
    heading: str,
    currency_code: str,
) -> list[dict[str, str]]:
    return [
        {heading: item.label, "Amount": _format_currency(item.amount, currency_code)}
        for item in items
    ]


def _render_income_form(
    user_id: str,
    account_names: Sequence[str],
    draft: IncomeDraft | None = None,
) -> None:
    """Render the income form.

    A draft with an id pre-fills the form and saving updates that record.
    """
    editing = draft is not None and draft.id is not None
    draft = draft or IncomeDraft(date=date.today(), original_amount=None, account="")
    key = f"income_{draft.id or 'new'}"
    categories = _options_with(INCOME_CATEGORIES, draft.category)
    accounts = _options_with(account_names, draft.account)
    with st.form(f"{key}_form", clear_on_submit=False):
        st.subheader("Edit Income" if editing else "Add Income")
        entry_date = st.date_input(
            "Date",
            value=_form_date(draft.date) or date.today(),
            key=f"{key}_date",
        )
        client_name = st.text_input(
            "Client name",
            value=draft.client_name,
            key=f"{key}_client",
        )
        description = st.text_input(
            "Description",
            value=draft.description,
            key=f"{key}_description",
        )
        category = st.selectbox(
            "Category",
            categories,
            index=_index_of(categories, draft.category),
            key=f"{key}_category",
        )
        account = st.selectbox(
            "Account",
            accounts,
            index=_index_of(accounts, draft.account),
            key=f"{key}_account",
        )
        status = st.selectbox(
            "Status",
            INCOME_STATUSES,
            index=_index_of(INCOME_STATUSES, draft.status),
            key=f"{key}_status",
        )
        original_amount = st.text_input(
            "Amount",
            value=_form_text(draft.original_amount),
            key=f"{key}_amount",
        )
        received_amount = st.text_input(
            "Received amount (partial only)",
            value=_form_text(draft.received_amount),
            key=f"{key}_received",
        )
        due_date = st.date_input(
            "Due date",
            value=_form_date(draft.due_date),
            key=f"{key}_due",
        )
        manual_rate = st.text_input(
            "Manual conversion rate (optional)",
            value=_form_text(draft.manual_conversion_rate),
            key=f"{key}_manual_rate",
        )
        manual_amount = st.text_input(
            "Manual converted amount (optional)",
            value=_form_text(draft.manual_converted_amount),
            key=f"{key}_manual_amount",
        )
        notes = st.text_area("Notes", value=draft.notes, key=f"{key}_notes")
        submitted = st.form_submit_button(
            "Update income" if editing else "Save income"
        )
    if not submitted:
        return
    submitted_draft = IncomeDraft(
        id=draft.id,
        date=entry_date,
        original_amount=original_amount,
        account=account or "",
        status=status,
        received_amount=received_amount if status == INCOME_PARTIAL else None,
        category=category,
        description=description,
        client_name=client_name,
        notes=notes,
        due_date=due_date,
        manual_conversion_rate=manual_rate,
        manual_converted_amount=manual_amount,
    )
    try:
        income = RecordIncomeUseCase(
            build_ledger_repository(),
            base_currency=build_settings().base_currency,
        ).execute(user_id, submitted_draft)
    except LedgerError as exc:
        _show_error(exc)
        return
    action = "updated" if editing else "recorded"
    get_usage_logger().info(f"user={user_id} {action} income {income.id}")
    for warning in income.warnings:
        st.warning(warning.message)
    st.cache_data.clear()
    st.success("Income updated." if editing else "Income saved.")


def _render_expense_form(
    user_id: str,
    account_names: Sequence[str],
    draft: ExpenseDraft | None = None,
) -> None:
    """Render the expense form, pre-filled when editing a stored expense."""
    editing = draft is not None and draft.id is not None
    draft = draft or ExpenseDraft(date=date.today(), amount=None, account="")
    key = f"expense_{draft.id or 'new'}"
    categories = _options_with(EXPENSE_CATEGORIES, draft.category)
    accounts = _options_with(account_names, draft.account)
    with st.form(f"{key}_form", clear_on_submit=False):
        st.subheader("Edit Expense" if editing else "Add Expense")
        entry_date = st.date_input(
            "Date",
            value=_form_date(draft.date) or date.today(),
            key=f"{key}_date",
        )
        description = st.text_input(
            "Description",
            value=draft.description,
            key=f"{key}_description",
        )
        category = st.selectbox(
            "Category",
            categories,
            index=_index_of(categories, draft.category),
            key=f"{key}_category",
        )
        account = st.selectbox(
            "Account",
            accounts,
            index=_index_of(accounts, draft.account),
            key=f"{key}_account",
        )
        payment_status = st.selectbox(
            "Payment status",
            PAYMENT_STATUSES,
            index=_index_of(PAYMENT_STATUSES, draft.payment_status),
            key=f"{key}_status",
        )
        amount = st.text_input(
            "Amount",
            value=_form_text(draft.amount),
            key=f"{key}_amount",
        )
        due_date = st.date_input(
            "Due date",
            value=_form_date(draft.due_date),
            key=f"{key}_due",
        )
        manual_rate = st.text_input(
            "Manual conversion rate (optional)",
            value=_form_text(draft.manual_conversion_rate),
            key=f"{key}_manual_rate",
        )
        manual_amount = st.text_input(
            "Manual converted amount (optional)",
            value=_form_text(draft.manual_converted_amount),
            key=f"{key}_manual_amount",
        )
        notes = st.text_area("Notes", value=draft.notes, key=f"{key}_notes")
        submitted = st.form_submit_button(
            "Update expense" if editing else "Save expense"
        )
    if not submitted:
        return
    submitted_draft = ExpenseDraft(
        id=draft.id,
        date=entry_date,
        amount=amount,
        account=account or "",
        payment_status=payment_status,
        category=category,
        description=description,
        notes=notes,
        due_date=due_date,
        manual_conversion_rate=manual_rate,
        manual_converted_amount=manual_amount,
    )
    try:
        expense = RecordExpenseUseCase(
            build_ledger_repository(),
            base_currency=build_settings().base_currency,
        ).execute(user_id, submitted_draft)
    except LedgerError as exc:
        _show_error(exc)
        return
    action = "updated" if editing else "recorded"
    get_usage_logger().info(f"user={user_id} {action} expense {expense.id}")
    for warning in expense.warnings:
        st.warning(warning.message)
    st.cache_data.clear()
    st.success("Expense updated." if editing else "Expense saved.")


def _select_record(
    kind: str,
    records: Sequence[Income | Expense],
) -> Income | Expense | None:
    """Let the user pick a stored record, None meaning a new one."""
    by_id = {record.id: record for record in records}
    choice = st.selectbox(
        f"Edit or delete {kind}",
        [NEW_RECORD, *by_id],
        format_func=lambda record_id: (
            f"{NEW_RECORD} {kind}"
            if record_id == NEW_RECORD
            else _record_label(by_id[record_id])
        ),
        key=f"{kind}_selection",
    )
    return by_id.get(choice)


def _render_delete_record(
    kind: str,
    user_id: str,
    record: Income | Expense,
    use_case_class,
) -> None:
    confirm = st.checkbox(
        f"Confirm deleting this {kind}",
        key=f"{kind}_{record.id}_confirm",
    )
    if not st.button(
        f"Delete {kind}",
        key=f"{kind}_{record.id}_delete",
        disabled=not confirm,
    ):
        return
    try:
        use_case_class(build_ledger_repository()).execute(user_id, record.id)
    except LedgerError as exc:
        _show_error(exc)
        return
    get_usage_logger().info(f"user={user_id} deleted {kind} {record.id}")
    st.cache_data.clear()
    st.success(f"{kind.capitalize()} deleted.")


def _render_transactions_page(user_id: str, currency_code: str) -> None:
    summary = _load_dashboard_summary(user_id, current_month_key(date.today()))
    account_names = [account.name for account in summary.accounts]
    if not account_names:
        st.warning("No accounts found. Run the init script first.")
        return
    month_choice = st.sidebar.selectbox(
        "Month",
        [ALL_OPTION, *recent_month_keys(date.today())],
        format_func=lambda key: key if key == ALL_OPTION else month_label(key),
    )
    incomes, expenses = _load_transactions(user_id, _filter_value(month_choice))

    income_tab, expense_tab = st.tabs(["Income", "Expenses"])
    with income_tab:
        st.dataframe(
            _transaction_rows(incomes, currency_code),
            width="stretch",
            hide_index=True,
        )
        selected_income = _select_record("income", incomes)
        if selected_income is not None:
            _render_delete_record(
                "income",
                user_id,
                selected_income,
                DeleteIncomeUseCase,
            )
        _render_income_form(
            user_id,
            account_names,
            income_to_draft(selected_income) if selected_income else None,
        )
    with expense_tab:
        st.dataframe(
            _transaction_rows(expenses, currency_code),
            width="stretch",
            hide_index=True,
        )
        selected_expense = _select_record("expense", expenses)
        if selected_expense is not None:
            _render_delete_record(
                "expense",
                user_id,
                selected_expense,
                DeleteExpenseUseCase,
            )
        _render_expense_form(
            user_id,
            account_names,
            expense_to_draft(selected_expense) if selected_expense else None,
        )


def _render_accounts_page(user_id: str, currency_code: str) -> None:
    summary = _load_dashboard_summary(user_id, current_month_key(date.today()))
    st.dataframe(
        _account_rows(summary.accounts, currency_code),
        width="stretch",
        hide_index=True,
    )

    st.subheader("Add Account")
    with st.form("account_form"):
        name = st.text_input("Account name", key="account_name")
        currency = st.text_input(
            "Currency code",
            placeholder="USD",
            key="account_currency",
        )
        opening = st.text_input("Opening balance", value="0", key="account_opening")
        notes = st.text_area("Notes", key="account_notes")
        submitted = st.form_submit_button("Create account")
    if submitted:
        try:
            account = CreateAccountUseCase(
                build_ledger_repository(),
                base_currency=currency_code,
            ).execute(user_id, name, currency, balance=opening, notes=notes)
        except LedgerError as exc:
            _show_error(exc)
        else:
            get_usage_logger().info(f"user={user_id} created {account.name}")
            st.cache_data.clear()
            st.success(f"Account {account.name} created.")

    if not summary.accounts:
        return
    st.subheader("Update Balance")
    with st.form("balance_form"):
        account_name = st.selectbox(
            "Account",
            [account.name for account in summary.accounts],
            key="balance_account",
        )
        balance = st.text_input("New balance", key="balance_value")
        submitted = st.form_submit_button("Update balance")
    if submitted:
        try:
            UpdateAccountBalanceUseCase(
                build_ledger_repository(),
                base_currency=currency_code,
            ).execute(user_id, account_name or "", balance)
        except LedgerError as exc:
            _show_error(exc)
        else:
            get_usage_logger().info(f"user={user_id} updated {account_name}")
            st.cache_data.clear()
            st.success("Balance updated.")
    if st.button("Recompute balances from transactions"):
        updated = ReconcileAccountBalancesUseCase(
            build_ledger_repository(),
            base_currency=currency_code,
        ).execute(user_id)
        get_usage_logger().info(f"user={user_id} reconciled balances")
        st.cache_data.clear()
        st.success(f"{len(updated)} account(s) recomputed.")

    st.subheader("Delete Account")
    by_id = {account.id: account for account in summary.accounts}
    account_id = st.selectbox(
        "Account to delete",
        list(by_id),
        format_func=lambda item: by_id[item].name,
        key="delete_account",
    )
    confirm = st.checkbox(
        "Confirm deletion; recorded transactions keep the account name",
        key="delete_account_confirm",
    )
    if st.button("Delete account", disabled=not confirm):
        try:
            removed = DeleteAccountUseCase(build_ledger_repository()).execute(
                user_id,
                account_id,
            )
        except LedgerError as exc:
            _show_error(exc)
        else:
            get_usage_logger().info(f"user={user_id} deleted {removed.name}")
            st.cache_data.clear()
            st.success(f"Account {removed.name} deleted.")


def _render_settings_page(user_id: str, currency_code: str) -> None:
    st.subheader("Exchange Rates")
    with st.form("rates_form"):
        currency = st.text_input("Currency code", placeholder="USD")
        rate = st.text_input(f"Rate to {currency_code}")
        submitted = st.form_submit_button("Save rate")
    if submitted:
        try:
            UpdateExchangeRatesUseCase(
                build_ledger_repository(),
                base_currency=currency_code,
            ).execute(user_id, {currency: rate})
        except LedgerError as exc:
            _show_error(exc)
        else:
            get_usage_logger().info(f"user={user_id} set rate {currency}")
            st.success("Rate saved. Existing records keep their rates.")

    st.subheader("Profit Distribution")
    month_keys = recent_month_keys(date.today())
    with st.form("distribution_form"):
        month_key = st.selectbox("Month", month_keys, format_func=month_label)
        company = st.slider("Company percentage", 0, 100, 50)
        st.caption(f"Each owner receives {(100 - company) / 2:.1f}%")
        submitted = st.form_submit_button("Save distribution")
    if submitted:
        try:
            SetProfitDistributionUseCase(build_ledger_repository()).execute(
                user_id,
                month_key,
                company,
            )
        except LedgerError as exc:
            _show_error(exc)
        else:
            get_usage_logger().info(
                f"user={user_id} set distribution for {month_key}"
            )
            st.cache_data.clear()
            st.success("Distribution saved.")


def _render_reports_page(user_id: str, currency_code: str) -> None:
    summary = _load_dashboard_summary(user_id, current_month_key(date.today()))
    period = st.sidebar.selectbox("Period", PERIODS)
    category = st.sidebar.selectbox(
        "Category",
        [ALL_OPTION, *sorted(set(INCOME_CATEGORIES) | set(EXPENSE_CATEGORIES))],
    )
    account = st.sidebar.selectbox(
        "Account",
        [ALL_OPTION, *(account.name for account in summary.accounts)],
    )
    start_date, end_date = period_bounds(period, date.today())
    report = _load_period_report(
        user_id,
        start_date,
        end_date,
        _filter_value(category),
        _filter_value(account),
    )

    income_col, expenses_col, profit_col, margin_col = st.columns(4)
    income_col.metric(
        "Income",
        _format_currency(report.total_income, currency_code),
    )
    expenses_col.metric(
        "Expenses",
        _format_currency(report.total_expenses, currency_code),
    )
    profit_col.metric(
        "Net Profit",
        _format_currency(report.net_profit, currency_code),
    )
    margin_col.metric("Margin", _format_percentage(report.profit_margin))

    breakdowns = (
        ("Income by Category", report.income_by_category, "Category"),
        ("Expenses by Category", report.expenses_by_category, "Category"),
        ("Income by Account", report.income_by_account, "Account"),
        ("Expenses by Account", report.expenses_by_account, "Account"),
    )
    columns = st.columns(2)
    for index, (title, items, heading) in enumerate(breakdowns):
        with columns[index % 2]:
            st.subheader(title)
            if items:
                st.dataframe(
                    _breakdown_rows(items, heading, currency_code),
                    hide_index=True,
                )
            else:
                st.caption("No records.")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Ledger Dashboard", layout="wide")
    st.title("Ledger Dashboard")

    settings = build_settings()
    if not settings.user_id:
        st.error("Set LEDGER_USER_ID to choose whose ledger to display.")
        return
    currency_code = settings.base_currency
    page = st.sidebar.selectbox(
        "Page",
        ["Dashboard", "Transactions", "Accounts", "Settings", "Reports"],
    )

    if page == "Dashboard":
        _render_dashboard(settings.user_id, currency_code)
    elif page == "Transactions":
        _render_transactions_page(settings.user_id, currency_code)
    elif page == "Accounts":
        _render_accounts_page(settings.user_id, currency_code)
    elif page == "Settings":
        _render_settings_page(settings.user_id, currency_code)
    else:
        _render_reports_page(settings.user_id, currency_code)


if __name__ == "__main__":  # pragma: no cover
    main()

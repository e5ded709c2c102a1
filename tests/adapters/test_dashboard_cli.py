"""Tests for the dashboard_cli adapter."""

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.adapters import dashboard_cli
from src.domain.errors import ValidationError


def _settings(user_id="owner-1"):
    return SimpleNamespace(
        user_id=user_id,
        base_currency="PKR",
        recent_limit=3,
    )


def _summary():
    month = SimpleNamespace(
        total_income=Decimal("280000"),
        expected_income=Decimal("50000"),
        cancelled_income=Decimal("0"),
        total_expenses=Decimal("30000"),
        pending_payments=Decimal("5000"),
        company_share=Decimal("224000"),
        roshaan_share=Decimal("28000"),
        shahbaz_share=Decimal("28000"),
    )
    return SimpleNamespace(
        current_month=month,
        total_balance=Decimal("194000"),
        recent_transactions=[object(), object()],
    )


class _UseCase:
    calls: list = []
    result = None

    def __init__(self, repository, logger=None, recent_limit=5):
        self.recent_limit = recent_limit

    def execute(self, user_id, month_key):
        _UseCase.calls.append((user_id, month_key, self.recent_limit))
        if isinstance(_UseCase.result, Exception):
            raise _UseCase.result
        return _UseCase.result


def _patch(monkeypatch, settings, result):
    logger = MagicMock()
    _UseCase.calls = []
    _UseCase.result = result
    monkeypatch.setattr(dashboard_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(dashboard_cli, "build_settings", lambda: settings)
    monkeypatch.setattr(dashboard_cli, "build_ledger_repository", MagicMock)
    monkeypatch.setattr(dashboard_cli, "GetDashboardSummaryUseCase", _UseCase)
    return logger


def test_main_prints_summary_for_requested_month(monkeypatch, capsys):
    _patch(monkeypatch, _settings(), _summary())
    monkeypatch.setenv("LEDGER_MONTH", "2024-03")

    dashboard_cli.main()

    assert _UseCase.calls == [("owner-1", "2024-03", 3)]
    output = capsys.readouterr().out
    assert "Summary for 2024-03 (PKR)" in output
    assert "Income: 280,000.00" in output
    assert "company=224,000.00" in output
    assert "Remaining company balance: 194,000.00" in output
    assert "Recent transactions: 2" in output


def test_main_requires_user(monkeypatch, capsys):
    logger = _patch(monkeypatch, _settings(user_id=None), _summary())

    dashboard_cli.main()

    assert _UseCase.calls == []
    logger.warning.assert_called_once()
    assert capsys.readouterr().out == ""


def test_main_logs_ledger_errors(monkeypatch, capsys):
    """Invalid months are reported through the logger."""
    logger = _patch(
        monkeypatch,
        _settings(),
        ValidationError({"month": "Month must look like YYYY-MM"}),
    )
    monkeypatch.setenv("LEDGER_MONTH", "March")

    dashboard_cli.main()

    logger.error.assert_called_once()
    assert capsys.readouterr().out == ""

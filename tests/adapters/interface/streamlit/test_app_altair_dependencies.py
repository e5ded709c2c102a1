"""Tests for the chart dependency check of the Streamlit app."""

import sys
import types

import pytest

from src.adapters.interface.streamlit import app


def _install(monkeypatch, numpy_module, pandas_module) -> None:
    monkeypatch.setitem(sys.modules, "numpy", numpy_module)
    monkeypatch.setitem(sys.modules, "pandas", pandas_module)


def test_check_altair_dependencies_ok(monkeypatch) -> None:
    _install(
        monkeypatch,
        types.SimpleNamespace(ndarray=object),
        types.SimpleNamespace(Timestamp=object),
    )

    assert app._check_altair_dependencies() == (True, None)


@pytest.mark.parametrize(
    ("numpy_attrs", "pandas_attrs", "expected"),
    [
        ({}, {"Timestamp": object}, "numpy"),
        ({"ndarray": object}, {}, "pandas"),
    ],
)
def test_check_altair_dependencies_incomplete_modules(
    monkeypatch,
    numpy_attrs,
    pandas_attrs,
    expected,
) -> None:
    """A partially imported module is reported by name."""
    _install(
        monkeypatch,
        types.SimpleNamespace(**numpy_attrs),
        types.SimpleNamespace(**pandas_attrs),
    )

    ok, message = app._check_altair_dependencies()

    assert ok is False
    assert expected in message


def test_check_altair_dependencies_not_installed(monkeypatch) -> None:
    """A missing package disables the chart instead of raising."""
    _install(monkeypatch, None, types.SimpleNamespace(Timestamp=object))

    ok, message = app._check_altair_dependencies()

    assert ok is False
    assert message.startswith("Chart dependencies are not installed")

"""Streamlit dashboard for incomes, expenses, and profit distribution."""

__all__: list[str] = []

"""User-facing interface adapters for the ledger."""

__all__: list[str] = []

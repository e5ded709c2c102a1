"""Domain-specific exceptions for the ledger core."""


class LedgerError(Exception):
    """Base class for ledger errors."""


class ValidationError(LedgerError, ValueError):
    """Raised when a record or setting violates a field invariant.

    Attributes:
        errors: Mapping of field name to a human readable reason.
        field: First failing field, convenient for single-field forms.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        self.field = next(iter(self.errors), None)
        details = "; ".join(
            f"{name}: {reason}" for name, reason in self.errors.items()
        )
        super().__init__(f"Validation failed ({details})")

    @classmethod
    def single(cls, field: str, reason: str) -> "ValidationError":
        """Build an error for one failing field."""
        return cls({field: reason})


class UnknownAccountError(LedgerError, LookupError):
    """Raised when a transaction references an account that does not exist."""

    def __init__(self, account_name: str) -> None:
        self.account_name = account_name
        super().__init__(f"Unknown account: {account_name!r}")


class RecordNotFoundError(LedgerError, LookupError):
    """Raised when a record id does not belong to the user."""

    def __init__(self, kind: str, record_id: str) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"Unknown {kind}: {record_id!r}")


__all__ = [
    "LedgerError",
    "ValidationError",
    "UnknownAccountError",
    "RecordNotFoundError",
]

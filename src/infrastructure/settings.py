"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

from src.domain.constants import BASE_CURRENCY, RECENT_TRANSACTIONS_LIMIT
from src.domain.services.normalization import normalize_currency_code
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerSettings:
    """Runtime settings for the ledger adapters.

    Attributes:
        base_currency: Reference currency every amount is converted into.
        user_id: Owner of the records read and written by the adapters.
        recent_limit: Number of transactions listed as recent.
    """

    base_currency: str = BASE_CURRENCY
    user_id: str | None = None
    recent_limit: int = RECENT_TRANSACTIONS_LIMIT

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        base_currency = (
            normalize_currency_code(os.getenv("LEDGER_BASE_CURRENCY"))
            or BASE_CURRENCY
        )
        user_id = (os.getenv("LEDGER_USER_ID") or "").strip() or None
        recent_limit = cls._parse_recent_limit(
            os.getenv("LEDGER_RECENT_LIMIT"),
            logger=logger,
        )
        return cls(
            base_currency=base_currency,
            user_id=user_id,
            recent_limit=recent_limit,
        )

    @staticmethod
    def _parse_recent_limit(raw_value: str | None, logger) -> int:
        """Parse the recent transactions limit.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Parsed limit, or the default when missing or invalid.
        """
        if raw_value is None or not raw_value.strip():
            return RECENT_TRANSACTIONS_LIMIT
        try:
            value = int(raw_value.strip())
        except ValueError:
            logger.warning(
                f"Invalid LEDGER_RECENT_LIMIT {raw_value!r}; "
                f"using {RECENT_TRANSACTIONS_LIMIT}"
            )
            return RECENT_TRANSACTIONS_LIMIT
        if value < 0:
            logger.warning(
                f"Negative LEDGER_RECENT_LIMIT {value}; "
                f"using {RECENT_TRANSACTIONS_LIMIT}"
            )
            return RECENT_TRANSACTIONS_LIMIT
        return value


__all__ = ["LedgerSettings"]

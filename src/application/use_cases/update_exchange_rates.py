"""Use case to store user-maintained exchange rates."""

from collections.abc import Mapping
from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import BASE_CURRENCY
from src.domain.errors import ValidationError
from src.domain.services.normalization import normalize_currency_code
from src.domain.services.validation import validate_exchange_rate
from src.infrastructure.logging.logger import get_app_logger


class UpdateExchangeRatesUseCase:
    """Validate and upsert a batch of exchange rates.

    The whole batch is validated before anything is written, so a single
    bad rate leaves the stored table untouched. Stored rates only affect
    records written afterwards.
    """

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        base_currency: str = BASE_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Ledger repository port.
            logger: Optional logger compatible with logging.Logger-like API.
            base_currency: Reference currency, never written to the table.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._base_currency = (
            normalize_currency_code(base_currency) or BASE_CURRENCY
        )

    def execute(self, user_id: str, rates: Mapping[str, object]) -> dict[str, Decimal]:
        """Store the given rates.

        Args:
            user_id: Owner of the rate table.
            rates: Raw rate per currency code.

        Returns:
            dict[str, Decimal]: Rates actually written, keyed by currency.

        Raises:
            ValidationError: If any currency is blank or any rate is not
                strictly positive.
        """
        validated: dict[str, Decimal] = {}
        errors: dict[str, str] = {}
        for currency, raw_rate in rates.items():
            code = normalize_currency_code(currency)
            if not code:
                errors["currency"] = "Currency code is required"
                continue
            if code == self._base_currency:
                self._logger.info(
                    f"Ignoring rate for base currency {code}; it is always 1"
                )
                continue
            try:
                validated[code] = validate_exchange_rate(code, raw_rate)
            except ValidationError as exc:
                errors.update(exc.errors)
        if errors:
            self._logger.warning(f"Exchange rates rejected: {errors}")
            raise ValidationError(errors)

        for code, rate in validated.items():
            self._repository.upsert_exchange_rate(user_id, code, rate)
        self._logger.info(f"Stored {len(validated)} exchange rate(s)")
        return validated


__all__ = ["UpdateExchangeRatesUseCase"]

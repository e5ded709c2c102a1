"""Use case to store the profit split for a month."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import ProfitDistributionSetting
from src.domain.services.distribution import build_distribution_setting
from src.domain.services.periods import split_month_key
from src.infrastructure.logging.logger import get_app_logger


class SetProfitDistributionUseCase:
    """Persist a company percentage for a month, owners sharing the rest."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        month_key: str,
        company_percentage,
    ) -> ProfitDistributionSetting:
        """Store and return the setting.

        Raises:
            ValidationError: If the month key is malformed or the percentage
                is outside [0, 100].
        """
        year, month = split_month_key(month_key)
        setting = build_distribution_setting(company_percentage, year, month)
        self._repository.upsert_distribution_setting(user_id, setting)
        self._logger.info(
            f"Distribution for {month_key} set to "
            f"{setting.company_percentage}/{setting.roshaan_percentage}/"
            f"{setting.shahbaz_percentage}"
        )
        return setting


__all__ = ["SetProfitDistributionUseCase"]

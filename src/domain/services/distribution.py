"""Profit distribution between the company and its two owners."""

from decimal import Decimal

from src.domain.models.finance import (
    DEFAULT_DISTRIBUTION,
    ProfitDistributionSetting,
    ProfitShares,
)
from src.domain.services.validation import validate_company_percentage
from src.utils.decimal_utils import coerce_decimal

_HUNDRED = Decimal("100")


def build_distribution_setting(
    company_percentage,
    year: int | None = None,
    month: int | None = None,
) -> ProfitDistributionSetting:
    """Build a setting whose owner shares split the remainder evenly.

    Raises:
        ValidationError: If the percentage is outside [0, 100].
    """
    company = validate_company_percentage(company_percentage)
    owner = (_HUNDRED - company) / 2
    return ProfitDistributionSetting(
        company_percentage=company,
        roshaan_percentage=owner,
        shahbaz_percentage=owner,
        year=year,
        month=month,
    )


def distribute_profit(
    total_income: Decimal,
    total_expenses: Decimal,
    setting: ProfitDistributionSetting | None = None,
) -> ProfitShares:
    """Split confirmed income and charge expenses to the company share.

    Owner shares are never reduced by expenses. The remaining company
    balance may be negative when expenses exceed the company share.

    Args:
        total_income: Confirmed income for the month.
        total_expenses: All expenses for the month.
        setting: Month specific split, the 50/25/25 default when None.

    Returns:
        ProfitShares: Shares and the company's remaining balance.
    """
    resolved = setting or DEFAULT_DISTRIBUTION
    income = coerce_decimal(total_income)
    company_share = income * resolved.company_percentage / _HUNDRED
    return ProfitShares(
        company_share=company_share,
        roshaan_share=income * resolved.roshaan_percentage / _HUNDRED,
        shahbaz_share=income * resolved.shahbaz_percentage / _HUNDRED,
        remaining_company_balance=company_share - coerce_decimal(total_expenses),
    )


__all__ = ["build_distribution_setting", "distribute_profit"]

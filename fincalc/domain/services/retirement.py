"""Retirement lump sum and income projection."""

from decimal import Decimal

from fincalc.domain.models.assumptions import SharedAssumptions
from fincalc.domain.models.client import ClientRecord
from fincalc.domain.models.summary import RetirementProjection
from fincalc.domain.services.loans import (
    calculate_debt_payments_at_retirement,
)
from fincalc.domain.services.resolver import resolve_value
from fincalc.utils.decimal_utils import ZERO

_MONTHS = Decimal("12")


def project_future_value(
    present_value: Decimal,
    annual_rate: Decimal,
    years: int,
) -> Decimal:
    """Return ``present_value * (1 + annual_rate) ** years``."""
    if years <= 0:
        return present_value
    return present_value * (1 + annual_rate) ** years


def years_to_retirement(client: ClientRecord) -> int:
    """Return the whole years left before retirement, never negative."""
    return max(0, client.retirement_age - client.current_age)


def project_retirement(
    client: ClientRecord,
    assumptions: SharedAssumptions,
    monthly_income: Decimal,
) -> RetirementProjection:
    """Project the investable lump sum and retirement income position.

    Super, shares and savings grow at their own assumed rates; property is
    not part of the drawn-down lump sum. Passive income is the lump sum at
    the drawdown rate plus current rental income. Loan repayments still
    running at retirement widen the monthly gap.

    Args:
        client: Client record to project.
        assumptions: Growth, drawdown and income-target assumptions.
        monthly_income: Current total monthly income.

    Returns:
        RetirementProjection: Lump sum, passive income and monthly gap.
    """
    years = years_to_retirement(client)
    savings = resolve_value(client, "savings", assumptions)
    classes = (
        (
            resolve_value(client, "super", assumptions),
            assumptions.super_growth_rate,
        ),
        (
            resolve_value(client, "shares", assumptions),
            assumptions.shares_growth_rate,
        ),
        (savings, assumptions.savings_growth_rate),
    )
    lump_sum = sum(
        (
            project_future_value(value, rate, years)
            for value, rate in classes
        ),
        ZERO,
    )
    passive_income = lump_sum * assumptions.drawdown_rate + resolve_value(
        client, "rental_income", assumptions
    )
    required = monthly_income * assumptions.retirement_income_ratio
    debt_payments = calculate_debt_payments_at_retirement(
        client.liabilities, years
    )
    gap = passive_income / _MONTHS - required - debt_payments

    return RetirementProjection(
        years_to_retirement=years,
        projected_lump_sum=lump_sum,
        projected_annual_passive_income=passive_income,
        required_monthly_income=required,
        monthly_deficit_surplus=gap,
        savings_depletion_years=calculate_savings_depletion(savings, gap),
        monthly_debt_payments=debt_payments,
    )


def calculate_savings_depletion(
    savings: Decimal,
    monthly_deficit_surplus: Decimal,
) -> Decimal | None:
    """Return years until savings cover a monthly deficit, None otherwise."""
    if monthly_deficit_surplus >= 0 or savings <= 0:
        return None
    return savings / (-monthly_deficit_surplus * _MONTHS)


__all__ = [
    "project_future_value",
    "years_to_retirement",
    "project_retirement",
    "calculate_savings_depletion",
]

"""Investment property serviceability."""

from decimal import Decimal

from fincalc.domain.constants import MAX_LOAN_TERM_YEARS
from fincalc.domain.models.assumptions import ServiceabilitySettings
from fincalc.domain.models.summary import ServiceabilityResult
from fincalc.domain.services.loans import calculate_max_borrowing
from fincalc.utils.decimal_utils import ZERO

_MONTHS = Decimal("12")

NO_INCOME_REASON = (
    "Please enter income and expenses to calculate investment property "
    "potential."
)
INVALID_ASSUMPTION_REASON = (
    "Lending assumptions are invalid: interest rate must not be negative, "
    "loan term and loan-to-value ratio must be positive and the term at "
    "most 100 years."
)
NO_SURPLUS_REASON = "Monthly expenses meet or exceed monthly income."


def assess_serviceability(
    monthly_income: Decimal,
    monthly_expenses: Decimal,
    settings: ServiceabilitySettings | None = None,
) -> ServiceabilityResult:
    """Estimate the largest investment property the surplus can carry.

    A share of monthly income is retained as a buffer and the rest of the
    surplus is treated as repayment capacity. The capacity is converted to a
    maximum loan with the inverse amortisation formula, then to a property
    value through the loan-to-value ratio. A second pass credits part of
    the expected rent back to the capacity.

    Args:
        monthly_income: Total monthly income.
        monthly_expenses: Total monthly deductions.
        settings: Lending assumptions; defaults when omitted.

    Returns:
        ServiceabilityResult: Capacity figures, or a non-viable result with
        a reason. Never raises for degenerate inputs.
    """
    settings = settings or ServiceabilitySettings()
    lvr = settings.max_loan_to_value

    if monthly_income <= 0:
        return _not_viable(NO_INCOME_REASON, lvr)
    if (
        settings.annual_interest_rate < 0
        or not 0 < settings.loan_term_years <= MAX_LOAN_TERM_YEARS
        or lvr <= 0
    ):
        return _not_viable(INVALID_ASSUMPTION_REASON, lvr)

    surplus = monthly_income - monthly_expenses
    if surplus <= 0:
        return _not_viable(NO_SURPLUS_REASON, lvr)

    buffer = monthly_income * settings.income_retention_ratio
    capacity = surplus - buffer
    if capacity <= 0:
        return _not_viable(
            "No surplus available after retaining "
            f"{settings.income_retention_ratio * 100:.0f}% of monthly income.",
            lvr,
        )

    monthly_rate = settings.annual_interest_rate / _MONTHS
    periods = settings.loan_term_years * 12

    first_value = (
        calculate_max_borrowing(capacity, monthly_rate, periods) / lvr
    )
    rent_credit = (
        first_value * settings.rental_yield / _MONTHS
    ) * settings.rental_income_credit
    total_capacity = capacity + rent_credit
    max_loan = calculate_max_borrowing(total_capacity, monthly_rate, periods)
    max_value = max_loan / lvr

    return ServiceabilityResult(
        is_viable=True,
        max_property_value=max_value,
        max_loan_amount=max_loan,
        max_monthly_payment=total_capacity,
        surplus_income=capacity,
        loan_to_value_ratio=lvr,
        monthly_rental_income=max_value * settings.rental_yield / _MONTHS,
        monthly_property_expenses=(
            max_value * settings.property_expense_rate / _MONTHS
        ),
    )


def _not_viable(reason: str, lvr: Decimal) -> ServiceabilityResult:
    return ServiceabilityResult(
        is_viable=False,
        loan_to_value_ratio=lvr if lvr > 0 else ZERO,
        reason=reason,
    )


__all__ = [
    "assess_serviceability",
    "NO_INCOME_REASON",
    "INVALID_ASSUMPTION_REASON",
    "NO_SURPLUS_REASON",
]

"""Loan amortisation helpers."""

from collections.abc import Iterable
from decimal import Decimal

from fincalc.domain.constants import PAYMENT_FREQUENCIES
from fincalc.domain.models.client import Liability
from fincalc.utils.decimal_utils import ZERO

_MONTHS_PER_YEAR = Decimal("12")

# Term assumed for liabilities entered without one.
DEFAULT_LOAN_TERM_YEARS = 30


def calculate_loan_payment(
    principal: Decimal,
    annual_rate: Decimal,
    term_years: int,
) -> Decimal:
    """Return the monthly repayment of an amortising loan.

    ``PMT = P * r(1+r)^n / ((1+r)^n - 1)`` with a monthly rate ``r`` and
    ``n`` monthly payments. A zero rate spreads the principal evenly.

    Args:
        principal: Amount borrowed.
        annual_rate: Annual interest rate as a decimal.
        term_years: Loan term in years.

    Returns:
        Decimal: Monthly repayment, zero for an empty loan or term.
    """
    if principal <= 0 or term_years <= 0:
        return ZERO
    periods = term_years * 12
    if annual_rate == 0:
        return principal / periods
    monthly_rate = annual_rate / _MONTHS_PER_YEAR
    growth = (1 + monthly_rate) ** periods
    return principal * (monthly_rate * growth) / (growth - 1)


def calculate_max_borrowing(
    monthly_payment: Decimal,
    monthly_rate: Decimal,
    periods: int,
) -> Decimal:
    """Return the principal a monthly payment can service.

    ``P = PMT * ((1+r)^n - 1) / (r(1+r)^n)``; a zero rate gives ``PMT * n``.

    Args:
        monthly_payment: Payment capacity per month.
        monthly_rate: Monthly interest rate as a decimal, not negative.
        periods: Number of monthly payments.

    Returns:
        Decimal: Maximum principal, zero for no capacity or no term.
    """
    if monthly_payment <= 0 or periods <= 0:
        return ZERO
    if monthly_rate == 0:
        return monthly_payment * periods
    growth = (1 + monthly_rate) ** periods
    return monthly_payment * (growth - 1) / (monthly_rate * growth)


def monthly_repayment(liability: Liability) -> Decimal:
    """Return a liability repayment normalised to a monthly amount.

    ``monthly_payment`` holds the amount per repayment period named by
    ``payment_frequency``; unknown or missing frequencies are monthly.
    """
    frequency = (liability.payment_frequency or "M").strip().upper()
    per_year = PAYMENT_FREQUENCIES.get(frequency, 12)
    return liability.monthly_payment * per_year / _MONTHS_PER_YEAR


def calculate_debt_payments_at_retirement(
    liabilities: Iterable[Liability],
    years_to_retirement: int,
) -> Decimal:
    """Return the monthly repayments still due once the client retires.

    A liability counts when it has a balance and a repayment and its term
    runs past the retirement date. Terms are in years from today; a missing
    term is taken as ``DEFAULT_LOAN_TERM_YEARS``.

    Args:
        liabilities: Liabilities to inspect.
        years_to_retirement: Whole years until retirement.

    Returns:
        Decimal: Monthly repayments carried into retirement.
    """
    if years_to_retirement <= 0:
        return ZERO
    total = ZERO
    for liability in liabilities:
        if liability.balance <= 0 or liability.monthly_payment <= 0:
            continue
        term = liability.loan_term or DEFAULT_LOAN_TERM_YEARS
        if term > years_to_retirement:
            total += monthly_repayment(liability)
    return total


__all__ = [
    "DEFAULT_LOAN_TERM_YEARS",
    "calculate_loan_payment",
    "calculate_max_borrowing",
    "monthly_repayment",
    "calculate_debt_payments_at_retirement",
]

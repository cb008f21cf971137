"""Shared planning assumptions passed explicitly into every aggregation."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class ServiceabilitySettings:
    """Lending assumptions for investment property serviceability.

    Attributes:
        annual_interest_rate: Assessment rate as a decimal (0.06 for 6%).
        loan_term_years: Loan term used to invert the repayment formula.
        max_loan_to_value: Maximum LVR a lender will extend.
        rental_yield: Expected gross yield as a decimal of property value.
        property_expense_rate: Annual holding costs as a decimal of value.
        income_retention_ratio: Share of monthly income kept as a buffer.
        rental_income_credit: Share of expected rent counted as capacity.
    """

    annual_interest_rate: Decimal = Decimal("0.06")
    loan_term_years: int = 30
    max_loan_to_value: Decimal = Decimal("0.8")
    rental_yield: Decimal = Decimal("0.04")
    property_expense_rate: Decimal = Decimal("0.02")
    income_retention_ratio: Decimal = Decimal("0.7")
    rental_income_credit: Decimal = Decimal("0.75")


@dataclass(frozen=True)
class LendingPolicy:
    """Lender tests applied to a proposed loan.

    Attributes:
        max_serviceability_ratio: Largest share of net income that loan
            commitments may take.
        buffer_ratio: Share of net income that must remain after
            commitments.
        stress_test_margin: Rate added to the loan rate for the stress test.
    """

    max_serviceability_ratio: Decimal = Decimal("0.35")
    buffer_ratio: Decimal = Decimal("0.10")
    stress_test_margin: Decimal = Decimal("0.03")


@dataclass(frozen=True)
class SharedAssumptions:
    """Session-wide assumptions, immutable during a computation.

    Attributes:
        super_growth_rate: Annual growth applied to superannuation.
        shares_growth_rate: Annual growth applied to shares.
        savings_growth_rate: Annual growth applied to cash savings.
        drawdown_rate: Share of the retirement lump sum drawn each year.
        retirement_income_ratio: Required retirement income as a share of
            current monthly income.
        serviceability: Lending assumptions.
        fallbacks: Shared values used when a client record has neither
            structured nor legacy data for a quantity, keyed by quantity name.
    """

    super_growth_rate: Decimal = Decimal("0.07")
    shares_growth_rate: Decimal = Decimal("0.07")
    savings_growth_rate: Decimal = Decimal("0.07")
    drawdown_rate: Decimal = Decimal("0.04")
    retirement_income_ratio: Decimal = Decimal("0.7")
    serviceability: ServiceabilitySettings = field(
        default_factory=ServiceabilitySettings
    )
    fallbacks: Mapping[str, Decimal] = field(default_factory=dict)

    def fallback(self, quantity: str) -> Decimal:
        """Return the shared fallback for a quantity, zero when unset."""
        return self.fallbacks.get(quantity, Decimal("0"))


DEFAULT_ASSUMPTIONS = SharedAssumptions()


__all__ = [
    "ServiceabilitySettings",
    "LendingPolicy",
    "SharedAssumptions",
    "DEFAULT_ASSUMPTIONS",
]

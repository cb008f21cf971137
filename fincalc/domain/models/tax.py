"""Domain models for the income tax engine."""

from dataclasses import dataclass, field, replace
from decimal import Decimal


@dataclass(frozen=True)
class TaxBracket:
    """Marginal bracket starting at ``min_income``."""

    min_income: Decimal
    rate: Decimal
    base_amount: Decimal = Decimal("0")


@dataclass(frozen=True)
class TaxRules:
    """Bracket schedules and thresholds for one tax year.

    Attributes:
        tax_year: Label of the year the rules apply to.
        income_brackets: Marginal income tax brackets, ascending.
        levy_rate: Flat levy rate applied above ``levy_threshold``.
        levy_threshold: Taxable income at which the levy starts.
        surcharge_brackets: Means-tested surcharge rates, ascending, applied
            when no private health cover is held.
        loan_repayment_brackets: Income-contingent education loan repayment
            rates keyed on gross income, ascending.
        franking_rate: Franking credit as a share of franked dividends.
        capital_gains_discount: Share of a realised capital gain left out
            of taxable income.
        contributions_tax_rate: Tax charged inside the super fund on
            concessional contributions.
    """

    tax_year: str
    income_brackets: tuple[TaxBracket, ...]
    levy_rate: Decimal
    levy_threshold: Decimal
    surcharge_brackets: tuple[TaxBracket, ...]
    loan_repayment_brackets: tuple[TaxBracket, ...]
    franking_rate: Decimal = Decimal("0.3")
    capital_gains_discount: Decimal = Decimal("0.5")
    contributions_tax_rate: Decimal = Decimal("0.15")


@dataclass(frozen=True)
class TaxInput:
    """Annual figures fed into a tax calculation."""

    gross_income: Decimal = Decimal("0")
    deductions: Decimal = Decimal("0")
    negative_gearing_loss: Decimal = Decimal("0")
    franked_dividends: Decimal = Decimal("0")
    capital_gains: Decimal = Decimal("0")
    concessional_contributions: Decimal = Decimal("0")
    loan_balance: Decimal = Decimal("0")
    private_health_insurance: bool = False

    def with_changes(self, **changes) -> "TaxInput":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


@dataclass(frozen=True)
class TaxResult:
    """Breakdown of an annual tax calculation."""

    gross_income: Decimal
    taxable_income: Decimal
    income_tax: Decimal
    franking_credits: Decimal
    levy: Decimal
    surcharge: Decimal
    loan_repayment: Decimal
    marginal_rate: Decimal
    contributions_tax: Decimal = Decimal("0")

    @property
    def total_tax(self) -> Decimal:
        """Return income tax, levies, contributions tax and loan repayment."""
        return self.tax_excluding_loan + self.loan_repayment

    @property
    def tax_excluding_loan(self) -> Decimal:
        """Return the tax component without the education loan repayment."""
        return (
            self.income_tax
            + self.levy
            + self.surcharge
            + self.contributions_tax
        )


@dataclass(frozen=True)
class OptimizationStrategy:
    """A structuring strategy applied in the optimised tax scenario."""

    name: str
    category: str
    description: str
    amount: Decimal
    potential_saving: Decimal


@dataclass(frozen=True)
class TaxOptimization:
    """Current versus optimised tax for one client."""

    current: TaxResult
    optimized: TaxResult
    strategies: list[OptimizationStrategy] = field(default_factory=list)

    @property
    def savings(self) -> Decimal:
        """Return current minus optimised total tax, unclamped."""
        return self.current.total_tax - self.optimized.total_tax


__all__ = [
    "TaxBracket",
    "TaxRules",
    "TaxInput",
    "TaxResult",
    "OptimizationStrategy",
    "TaxOptimization",
]

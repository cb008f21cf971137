"""Domain models for aggregated client figures."""

from dataclasses import dataclass, field, fields
from decimal import Decimal


@dataclass(frozen=True)
class PortfolioTotals:
    """Resolved holdings and their totals.

    Attributes:
        total_assets: Sum of every resolved asset class.
        total_liabilities: Sum of every resolved liability class.
        net_worth: Assets minus liabilities.
        total_property_value: Resolved property value.
        total_property_debt: Resolved mortgage balances.
        property_equity: Property value minus property debt.
        investment_properties: Number of property holdings.
        asset_classes: Resolved value per asset quantity.
        liability_classes: Resolved balance per liability quantity.
    """

    total_assets: Decimal
    total_liabilities: Decimal
    net_worth: Decimal
    total_property_value: Decimal
    total_property_debt: Decimal
    property_equity: Decimal
    investment_properties: int
    asset_classes: dict[str, Decimal] = field(default_factory=dict)
    liability_classes: dict[str, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class CashflowBreakdown:
    """Monthly income and deductions for one client."""

    employment_income: Decimal
    rental_income: Decimal
    investment_income: Decimal
    other_income: Decimal
    living_expenses: Decimal
    income_tax: Decimal
    loan_repayment: Decimal
    property_expenses: Decimal
    existing_loan_repayments: Decimal

    @property
    def total_income(self) -> Decimal:
        """Return total monthly income."""
        return (
            self.employment_income
            + self.rental_income
            + self.investment_income
            + self.other_income
        )

    @property
    def total_deductions(self) -> Decimal:
        """Return living costs, tax, loan repayment and property costs."""
        return (
            self.living_expenses
            + self.income_tax
            + self.loan_repayment
            + self.property_expenses
        )

    @property
    def cash_flow(self) -> Decimal:
        """Return total income minus total deductions."""
        return self.total_income - self.total_deductions

    @property
    def savings_rate(self) -> Decimal:
        """Return cash flow as a percentage of income."""
        if self.total_income <= 0:
            return Decimal("0")
        return self.cash_flow / self.total_income * Decimal("100")


@dataclass(frozen=True)
class RetirementProjection:
    """Projected retirement position."""

    years_to_retirement: int
    projected_lump_sum: Decimal
    projected_annual_passive_income: Decimal
    required_monthly_income: Decimal
    monthly_deficit_surplus: Decimal
    savings_depletion_years: Decimal | None = None
    monthly_debt_payments: Decimal = Decimal("0")

    @property
    def is_deficit(self) -> bool:
        """Return True when passive income falls short of the target."""
        return self.monthly_deficit_surplus < 0


@dataclass(frozen=True)
class ServiceabilityResult:
    """Investment property borrowing capacity."""

    is_viable: bool
    max_property_value: Decimal = Decimal("0")
    max_loan_amount: Decimal = Decimal("0")
    max_monthly_payment: Decimal = Decimal("0")
    surplus_income: Decimal = Decimal("0")
    loan_to_value_ratio: Decimal = Decimal("0")
    monthly_rental_income: Decimal = Decimal("0")
    monthly_property_expenses: Decimal = Decimal("0")
    reason: str | None = None


@dataclass(frozen=True)
class FinancialSummary:
    """Flat summary consumed by the on-screen view and the PDF report."""

    client_name: str
    total_assets: Decimal
    total_liabilities: Decimal
    net_worth: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal
    monthly_cash_flow: Decimal
    projected_retirement_lump_sum: Decimal
    retirement_deficit_surplus: Decimal
    is_retirement_deficit: bool
    years_to_retirement: int
    current_tax: Decimal
    optimized_tax: Decimal
    tax_savings: Decimal
    investment_properties: int
    total_property_value: Decimal
    total_property_debt: Decimal
    property_equity: Decimal
    recommendations: list[str] = field(default_factory=list)

    @classmethod
    def numeric_field_names(cls) -> tuple[str, ...]:
        """Return the names of the numeric summary fields."""
        return tuple(
            item.name
            for item in fields(cls)
            if item.type in (Decimal, int, "Decimal", "int")
        )


__all__ = [
    "PortfolioTotals",
    "CashflowBreakdown",
    "RetirementProjection",
    "ServiceabilityResult",
    "FinancialSummary",
]

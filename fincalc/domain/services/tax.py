"""Progressive income tax engine and optimisation catalogue."""

from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal

from fincalc.domain.models.assumptions import SharedAssumptions
from fincalc.domain.models.client import ClientRecord
from fincalc.domain.models.tax import (
    OptimizationStrategy,
    TaxBracket,
    TaxInput,
    TaxOptimization,
    TaxResult,
    TaxRules,
)
from fincalc.domain.services.resolver import resolve_value
from fincalc.utils.decimal_utils import ZERO


def _brackets(*rows: tuple[str, str, str]) -> tuple[TaxBracket, ...]:
    return tuple(
        TaxBracket(Decimal(min_income), Decimal(rate), Decimal(base))
        for min_income, rate, base in rows
    )


DEFAULT_TAX_RULES = TaxRules(
    tax_year="2024-25",
    income_brackets=_brackets(
        ("0", "0", "0"),
        ("18200", "0.16", "0"),
        ("45000", "0.30", "4288"),
        ("135000", "0.37", "31288"),
        ("190000", "0.45", "51638"),
    ),
    levy_rate=Decimal("0.02"),
    levy_threshold=Decimal("24276"),
    surcharge_brackets=_brackets(
        ("97000", "0.01", "0"),
        ("113000", "0.0125", "0"),
        ("151000", "0.015", "0"),
    ),
    loan_repayment_brackets=_brackets(
        ("51550", "0.01", "0"),
        ("59519", "0.02", "0"),
        ("65001", "0.025", "0"),
        ("72000", "0.03", "0"),
        ("80000", "0.035", "0"),
        ("90000", "0.04", "0"),
        ("100001", "0.045", "0"),
        ("110000", "0.05", "0"),
        ("125000", "0.055", "0"),
        ("140000", "0.10", "0"),
    ),
)

CONCESSIONAL_SUPER_CAP = Decimal("27500")
SALARY_SACRIFICE_INCOME_FLOOR = Decimal("50000")
SALARY_SACRIFICE_SHARE = Decimal("0.15")
WORK_DEDUCTION_TARGET = Decimal("3000")
DONATION_TARGET = Decimal("2000")
CAPITAL_GAINS_DEFERRAL_SHARE = Decimal("0.5")


def find_bracket(
    income: Decimal,
    brackets: tuple[TaxBracket, ...],
) -> TaxBracket | None:
    """Return the highest bracket whose minimum the income reaches."""
    for bracket in reversed(brackets):
        if income >= bracket.min_income:
            return bracket
    return None


def calculate_income_tax(taxable_income: Decimal, rules: TaxRules) -> Decimal:
    """Return base income tax: ``base + (income - min) * rate``."""
    if taxable_income <= 0:
        return ZERO
    bracket = find_bracket(taxable_income, rules.income_brackets)
    if bracket is None:
        return ZERO
    return bracket.base_amount + (
        taxable_income - bracket.min_income
    ) * bracket.rate


def calculate_levy(taxable_income: Decimal, rules: TaxRules) -> Decimal:
    """Return the flat levy due above the levy threshold."""
    if taxable_income <= rules.levy_threshold:
        return ZERO
    return taxable_income * rules.levy_rate


def calculate_surcharge(
    taxable_income: Decimal,
    rules: TaxRules,
    private_health_insurance: bool,
) -> Decimal:
    """Return the means-tested surcharge for clients without cover."""
    if private_health_insurance:
        return ZERO
    bracket = find_bracket(taxable_income, rules.surcharge_brackets)
    if bracket is None:
        return ZERO
    return taxable_income * bracket.rate


def calculate_loan_repayment(
    gross_income: Decimal,
    loan_balance: Decimal,
    rules: TaxRules,
) -> Decimal:
    """Return the compulsory education loan repayment.

    The rate is keyed on gross income and the repayment never exceeds the
    outstanding balance.
    """
    if loan_balance <= 0:
        return ZERO
    bracket = find_bracket(gross_income, rules.loan_repayment_brackets)
    if bracket is None:
        return ZERO
    return min(gross_income * bracket.rate, loan_balance)


def calculate_marginal_rate(
    taxable_income: Decimal,
    rules: TaxRules,
    loan_balance: Decimal = ZERO,
) -> Decimal:
    """Return the rate on the next dollar.

    The bracket rate plus the levy rate, plus the education loan rate while
    a loan balance is outstanding.
    """
    bracket = find_bracket(max(taxable_income, ZERO), rules.income_brackets)
    rate = bracket.rate if bracket else ZERO
    if taxable_income > rules.levy_threshold:
        rate += rules.levy_rate
    loan_bracket = find_bracket(taxable_income, rules.loan_repayment_brackets)
    if loan_balance > 0 and loan_bracket is not None:
        rate += loan_bracket.rate
    return rate


def calculate_tax(
    tax_input: TaxInput,
    rules: TaxRules = DEFAULT_TAX_RULES,
) -> TaxResult:
    """Calculate annual tax for one set of figures.

    Args:
        tax_input: Gross income, deductions and flags for the year.
        rules: Bracket schedules to apply.

    Returns:
        TaxResult: Breakdown of income tax, levies and loan repayment.
    """
    franking_credits = tax_input.franked_dividends * rules.franking_rate
    taxable_gains = tax_input.capital_gains * (
        1 - rules.capital_gains_discount
    )
    taxable_income = max(
        ZERO,
        tax_input.gross_income
        - tax_input.deductions
        - tax_input.negative_gearing_loss
        + franking_credits
        + taxable_gains,
    )
    base_tax = calculate_income_tax(taxable_income, rules)
    return TaxResult(
        gross_income=tax_input.gross_income,
        taxable_income=taxable_income,
        income_tax=max(ZERO, base_tax - franking_credits),
        franking_credits=franking_credits,
        levy=calculate_levy(taxable_income, rules),
        surcharge=calculate_surcharge(
            taxable_income,
            rules,
            tax_input.private_health_insurance,
        ),
        loan_repayment=calculate_loan_repayment(
            tax_input.gross_income,
            tax_input.loan_balance,
            rules,
        ),
        marginal_rate=calculate_marginal_rate(
            taxable_income,
            rules,
            tax_input.loan_balance,
        ),
        contributions_tax=(
            tax_input.concessional_contributions
            * rules.contributions_tax_rate
        ),
    )


def build_tax_input(
    client: ClientRecord,
    assumptions: SharedAssumptions,
) -> TaxInput:
    """Assemble annual tax figures from resolved client fields."""
    rental_income = resolve_value(client, "rental_income", assumptions)
    rental_expenses = client.flat_value("rentalExpenses")
    gross_income = (
        resolve_value(client, "employment_income", assumptions)
        + rental_income
        + resolve_value(client, "investment_income", assumptions)
        + resolve_value(client, "franked_dividends", assumptions)
        + resolve_value(client, "other_income", assumptions)
    )
    deductions = (
        client.flat_value("workRelatedExpenses")
        + client.flat_value("investmentExpenses")
        + client.flat_value("vehicleExpenses")
        + client.flat_value("homeOfficeExpenses")
        + client.flat_value("charityDonations")
        + max(ZERO, min(rental_expenses, rental_income))
    )
    return TaxInput(
        gross_income=gross_income,
        deductions=deductions,
        negative_gearing_loss=max(ZERO, rental_expenses - rental_income),
        franked_dividends=resolve_value(
            client, "franked_dividends", assumptions
        ),
        capital_gains=client.flat_value("capitalGains"),
        loan_balance=resolve_value(client, "hecs", assumptions),
        private_health_insurance=client.private_health_insurance,
    )


@dataclass(frozen=True)
class _StrategyStep:
    name: str
    category: str
    amount: Decimal
    apply: Callable[[TaxInput], TaxInput]
    description: str


def _salary_sacrifice(
    client: ClientRecord,
    tax_input: TaxInput,
    assumptions: SharedAssumptions,
    rules: TaxRules,
) -> _StrategyStep | None:
    employment = resolve_value(client, "employment_income", assumptions)
    if employment <= SALARY_SACRIFICE_INCOME_FLOOR:
        return None
    headroom = CONCESSIONAL_SUPER_CAP - client.flat_value("superContributions")
    amount = min(headroom, employment * SALARY_SACRIFICE_SHARE)
    if amount <= 0:
        return None
    return _StrategyStep(
        name="Salary sacrifice to super",
        category="Super",
        amount=amount,
        apply=lambda item: item.with_changes(
            gross_income=item.gross_income - amount,
            concessional_contributions=(
                item.concessional_contributions + amount
            ),
        ),
        description=(
            f"Make pre-tax super contributions of ${amount:,.0f} within "
            "the concessional cap, taxed at "
            f"{rules.contributions_tax_rate * 100:.0f}% in the fund."
        ),
    )


def _work_deductions(
    client: ClientRecord,
    tax_input: TaxInput,
    assumptions: SharedAssumptions,
    rules: TaxRules,
) -> _StrategyStep | None:
    amount = WORK_DEDUCTION_TARGET - client.flat_value("workRelatedExpenses")
    if amount <= 0 or tax_input.gross_income <= 0:
        return None
    return _StrategyStep(
        name="Work-related expenses",
        category="Deductions",
        amount=amount,
        apply=lambda item: item.with_changes(
            deductions=item.deductions + amount
        ),
        description=(
            f"Claim a further ${amount:,.0f} of work-related expenses such "
            "as home office, tools and professional development."
        ),
    )


def _charitable_donations(
    client: ClientRecord,
    tax_input: TaxInput,
    assumptions: SharedAssumptions,
    rules: TaxRules,
) -> _StrategyStep | None:
    amount = DONATION_TARGET - client.flat_value("charityDonations")
    if amount <= 0 or tax_input.gross_income <= 0:
        return None
    return _StrategyStep(
        name="Charitable donations",
        category="Deductions",
        amount=amount,
        apply=lambda item: item.with_changes(
            deductions=item.deductions + amount
        ),
        description=(
            f"Increase deductible donations by ${amount:,.0f}."
        ),
    )


def _private_health(
    client: ClientRecord,
    tax_input: TaxInput,
    assumptions: SharedAssumptions,
    rules: TaxRules,
) -> _StrategyStep | None:
    if tax_input.private_health_insurance:
        return None
    surcharge = calculate_tax(tax_input, rules).surcharge
    if surcharge <= 0:
        return None
    return _StrategyStep(
        name="Private health insurance",
        category="Other",
        amount=surcharge,
        apply=lambda item: item.with_changes(private_health_insurance=True),
        description=(
            "Hold private hospital cover to avoid the levy surcharge of "
            f"${surcharge:,.0f}."
        ),
    )


def _capital_gains_timing(
    client: ClientRecord,
    tax_input: TaxInput,
    assumptions: SharedAssumptions,
    rules: TaxRules,
) -> _StrategyStep | None:
    amount = tax_input.capital_gains * CAPITAL_GAINS_DEFERRAL_SHARE
    if amount <= 0:
        return None
    return _StrategyStep(
        name="Capital gains tax planning",
        category="Timing",
        amount=amount,
        apply=lambda item: item.with_changes(
            capital_gains=item.capital_gains - amount
        ),
        description=(
            f"Defer sales realising ${amount:,.0f} of capital gains to a "
            "lower-income year."
        ),
    )


STRATEGY_CATALOG = (
    _salary_sacrifice,
    _work_deductions,
    _charitable_donations,
    _private_health,
    _capital_gains_timing,
)


def optimize_tax(
    client: ClientRecord,
    assumptions: SharedAssumptions,
    rules: TaxRules = DEFAULT_TAX_RULES,
) -> TaxOptimization:
    """Compare current tax with every applicable strategy applied.

    Each strategy's saving is measured on its own against the current
    position; the optimised result applies all of them together.

    Args:
        client: Client record to assess.
        assumptions: Shared assumptions for field resolution.
        rules: Bracket schedules to apply.

    Returns:
        TaxOptimization: Current and optimised results with strategies,
        sorted by potential saving.
    """
    current_input = build_tax_input(client, assumptions)
    current = calculate_tax(current_input, rules)

    optimized_input = current_input
    strategies: list[OptimizationStrategy] = []
    for build_step in STRATEGY_CATALOG:
        step = build_step(client, current_input, assumptions, rules)
        if step is None:
            continue
        alone = calculate_tax(step.apply(current_input), rules)
        strategies.append(
            OptimizationStrategy(
                name=step.name,
                category=step.category,
                description=step.description,
                amount=step.amount,
                potential_saving=current.total_tax - alone.total_tax,
            )
        )
        optimized_input = step.apply(optimized_input)

    strategies.sort(key=lambda item: item.potential_saving, reverse=True)
    return TaxOptimization(
        current=current,
        optimized=calculate_tax(optimized_input, rules),
        strategies=strategies,
    )


__all__ = [
    "DEFAULT_TAX_RULES",
    "find_bracket",
    "calculate_income_tax",
    "calculate_levy",
    "calculate_surcharge",
    "calculate_loan_repayment",
    "calculate_marginal_rate",
    "calculate_tax",
    "build_tax_input",
    "optimize_tax",
    "STRATEGY_CATALOG",
]

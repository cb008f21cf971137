"""Tests for the tax engine and the optimisation catalogue."""

from decimal import Decimal

from fincalc.domain.models.assumptions import DEFAULT_ASSUMPTIONS
from fincalc.domain.models.client import ClientRecord
from fincalc.domain.models.tax import TaxInput
from fincalc.domain.services.tax import (
    DEFAULT_TAX_RULES,
    build_tax_input,
    calculate_income_tax,
    calculate_loan_repayment,
    calculate_marginal_rate,
    calculate_tax,
    find_bracket,
    optimize_tax,
)


def test_find_bracket_picks_highest_reached_bracket() -> None:
    """Bracket lookup should scan from the top."""
    brackets = DEFAULT_TAX_RULES.income_brackets

    assert find_bracket(Decimal("18200"), brackets).rate == Decimal("0.16")
    assert find_bracket(Decimal("18199"), brackets).rate == Decimal("0")
    assert find_bracket(Decimal("250000"), brackets).rate == Decimal("0.45")


def test_income_tax_uses_base_plus_marginal_amount() -> None:
    """Income tax is base amount plus the rate on the excess."""
    assert calculate_income_tax(Decimal("120000"), DEFAULT_TAX_RULES) == (
        Decimal("26788")
    )
    assert calculate_income_tax(Decimal("0"), DEFAULT_TAX_RULES) == 0


def test_calculate_tax_without_private_cover() -> None:
    """Levy and surcharge apply on top of income tax."""
    result = calculate_tax(TaxInput(gross_income=Decimal("120000")))

    assert result.taxable_income == Decimal("120000")
    assert result.income_tax == Decimal("26788")
    assert result.levy == Decimal("2400")
    assert result.surcharge == Decimal("1500")
    assert result.loan_repayment == Decimal("0")
    assert result.total_tax == Decimal("30688")


def test_private_cover_removes_surcharge() -> None:
    """Clients with private cover pay no surcharge."""
    result = calculate_tax(
        TaxInput(
            gross_income=Decimal("120000"),
            private_health_insurance=True,
        )
    )

    assert result.surcharge == Decimal("0")
    assert result.total_tax == Decimal("29188")


def test_levy_starts_above_threshold() -> None:
    """Incomes at or below the levy threshold pay no levy."""
    low = calculate_tax(TaxInput(gross_income=Decimal("24276")))
    high = calculate_tax(TaxInput(gross_income=Decimal("30000")))

    assert low.levy == Decimal("0")
    assert high.levy == Decimal("600")


def test_franking_credits_gross_up_and_offset() -> None:
    """Franking credits are added to taxable income then offset."""
    result = calculate_tax(
        TaxInput(
            gross_income=Decimal("50000"),
            franked_dividends=Decimal("10000"),
        )
    )

    assert result.franking_credits == Decimal("3000")
    assert result.taxable_income == Decimal("53000")
    assert result.income_tax == Decimal("3688")


def test_franking_offset_never_makes_income_tax_negative() -> None:
    """Excess franking credits floor income tax at zero."""
    result = calculate_tax(
        TaxInput(
            gross_income=Decimal("20000"),
            franked_dividends=Decimal("20000"),
        )
    )

    assert result.income_tax == Decimal("0")


def test_loan_repayment_keyed_on_gross_and_capped() -> None:
    """Loan repayment uses the gross-income rate and caps at the balance."""
    rules = DEFAULT_TAX_RULES

    assert calculate_loan_repayment(
        Decimal("60000"), Decimal("10000"), rules
    ) == Decimal("1200")
    assert calculate_loan_repayment(
        Decimal("60000"), Decimal("500"), rules
    ) == Decimal("500")
    assert calculate_loan_repayment(
        Decimal("60000"), Decimal("0"), rules
    ) == Decimal("0")
    assert calculate_loan_repayment(
        Decimal("40000"), Decimal("10000"), rules
    ) == Decimal("0")


def test_marginal_rate_combines_components() -> None:
    """Marginal rate adds the loan rate only while a balance is owed."""
    income = Decimal("120000")

    assert calculate_marginal_rate(income, DEFAULT_TAX_RULES) == (
        Decimal("0.32")
    )
    assert calculate_marginal_rate(
        income, DEFAULT_TAX_RULES, Decimal("5000")
    ) == Decimal("0.37")


def test_total_tax_is_monotonic_in_income() -> None:
    """More taxable income never means less tax."""
    previous = Decimal("-1")
    for income in range(0, 300001, 2500):
        total = calculate_tax(
            TaxInput(
                gross_income=Decimal(income),
                loan_balance=Decimal("50000"),
            )
        ).total_tax
        assert total >= previous
        previous = total


def test_build_tax_input_splits_rental_expenses() -> None:
    """Rental losses become negative gearing, the rest are deductions."""
    client = ClientRecord.from_mapping(
        {
            "annualIncome": 100000,
            "rentalIncome": 20000,
            "rentalExpenses": 30000,
            "workRelatedExpenses": 1500,
            "hecsBalance": 8000,
        }
    )

    tax_input = build_tax_input(client, DEFAULT_ASSUMPTIONS)
    result = calculate_tax(tax_input)

    assert tax_input.gross_income == Decimal("120000")
    assert tax_input.deductions == Decimal("21500")
    assert tax_input.negative_gearing_loss == Decimal("10000")
    assert tax_input.loan_balance == Decimal("8000")
    assert result.taxable_income == Decimal("88500")


def test_optimize_tax_applies_all_strategies() -> None:
    """The optimised result applies every applicable strategy."""
    client = ClientRecord.from_mapping({"annualIncome": 120000})

    optimization = optimize_tax(client, DEFAULT_ASSUMPTIONS)

    names = {item.name for item in optimization.strategies}
    assert names == {
        "Salary sacrifice to super",
        "Work-related expenses",
        "Charitable donations",
        "Private health insurance",
    }
    assert optimization.current.total_tax == Decimal("30688")
    assert optimization.optimized.taxable_income == Decimal("97000")
    assert optimization.optimized.contributions_tax == Decimal("2700")
    assert optimization.optimized.total_tax == Decimal("24528")
    assert optimization.savings == Decimal("6160")
    savings = [item.potential_saving for item in optimization.strategies]
    assert savings == sorted(savings, reverse=True)


def test_optimize_tax_on_empty_client_has_no_strategies() -> None:
    """No income means nothing to optimise."""
    optimization = optimize_tax(ClientRecord(), DEFAULT_ASSUMPTIONS)

    assert optimization.strategies == []
    assert optimization.savings == Decimal("0")


def test_salary_sacrifice_saving_nets_contributions_tax() -> None:
    """Sacrificed salary is still taxed at 15% inside the fund."""
    client = ClientRecord.from_mapping(
        {"annualIncome": 120000, "privateHealthInsurance": True}
    )

    optimization = optimize_tax(client, DEFAULT_ASSUMPTIONS)

    sacrifice = next(
        item
        for item in optimization.strategies
        if item.name == "Salary sacrifice to super"
    )
    assert sacrifice.amount == Decimal("18000")
    assert sacrifice.potential_saving == Decimal("3060")
    assert optimization.current.contributions_tax == Decimal("0")


def test_contributions_tax_is_part_of_total_tax() -> None:
    """Contributions tax counts towards total tax, not the loan."""
    result = calculate_tax(
        TaxInput(
            gross_income=Decimal("100000"),
            concessional_contributions=Decimal("10000"),
            private_health_insurance=True,
        )
    )

    assert result.contributions_tax == Decimal("1500")
    assert result.tax_excluding_loan == result.total_tax
    assert result.total_tax == result.income_tax + result.levy + Decimal(
        "1500"
    )


def test_capital_gains_are_discounted_before_tax() -> None:
    """Only half of a realised gain is taxable."""
    result = calculate_tax(
        TaxInput(
            gross_income=Decimal("100000"),
            capital_gains=Decimal("20000"),
            private_health_insurance=True,
        )
    )

    assert result.taxable_income == Decimal("110000")
    assert result.income_tax == Decimal("23788")
    assert result.gross_income == Decimal("100000")


def test_capital_gains_timing_strategy() -> None:
    """Deferring half of the gains saves tax on the discounted amount."""
    client = ClientRecord.from_mapping(
        {
            "annualIncome": 100000,
            "capitalGains": "20000",
            "privateHealthInsurance": True,
        }
    )

    assert build_tax_input(client, DEFAULT_ASSUMPTIONS).capital_gains == (
        Decimal("20000")
    )
    optimization = optimize_tax(client, DEFAULT_ASSUMPTIONS)

    timing = next(
        item
        for item in optimization.strategies
        if item.name == "Capital gains tax planning"
    )
    assert timing.category == "Timing"
    assert timing.amount == Decimal("10000")
    assert timing.potential_saving == Decimal("1600")

"""Tests for the retirement projection."""

from decimal import Decimal

from fincalc.domain.models.assumptions import SharedAssumptions
from fincalc.domain.models.client import ClientRecord
from fincalc.domain.services.retirement import (
    calculate_savings_depletion,
    project_future_value,
    project_retirement,
    years_to_retirement,
)


def test_project_future_value_compounds_annually() -> None:
    """Values compound once per year."""
    assert project_future_value(
        Decimal("1000"), Decimal("0.1"), 2
    ) == Decimal("1210")
    assert project_future_value(Decimal("1000"), Decimal("0.1"), 0) == (
        Decimal("1000")
    )


def test_years_to_retirement_never_negative() -> None:
    """Clients past retirement age have zero years left."""
    assert years_to_retirement(
        ClientRecord(current_age=70, retirement_age=65)
    ) == 0
    assert years_to_retirement(
        ClientRecord(current_age=35, retirement_age=65)
    ) == 30


def test_projection_excludes_property_and_uses_class_rates() -> None:
    """Super, shares and savings grow at their own rates."""
    client = ClientRecord.from_mapping(
        {
            "currentAge": 55,
            "retirementAge": 57,
            "superFundValue": 100000,
            "currentShares": 50000,
            "savingsValue": 10000,
            "homeValue": 900000,
            "rentalIncome": 12000,
        }
    )
    assumptions = SharedAssumptions(
        super_growth_rate=Decimal("0.1"),
        shares_growth_rate=Decimal("0.05"),
        savings_growth_rate=Decimal("0"),
    )

    projection = project_retirement(client, assumptions, Decimal("5000"))

    expected_lump = (
        Decimal("121000") + Decimal("55125") + Decimal("10000")
    )
    assert projection.years_to_retirement == 2
    assert projection.projected_lump_sum == expected_lump
    assert projection.projected_annual_passive_income == (
        expected_lump * Decimal("0.04") + Decimal("12000")
    )
    assert projection.required_monthly_income == Decimal("3500")
    assert projection.monthly_deficit_surplus == (
        projection.projected_annual_passive_income / 12 - Decimal("3500")
    )


def test_deficit_reports_savings_depletion() -> None:
    """A deficit is flagged and savings depletion is estimated."""
    client = ClientRecord.from_mapping(
        {"currentAge": 60, "retirementAge": 60, "savingsValue": 24000}
    )

    projection = project_retirement(
        client,
        SharedAssumptions(),
        Decimal("10000"),
    )

    assert projection.is_deficit is True
    assert projection.savings_depletion_years is not None
    assert projection.savings_depletion_years > 0


def test_savings_depletion_is_none_without_deficit() -> None:
    """No deficit means savings never deplete."""
    assert calculate_savings_depletion(Decimal("1000"), Decimal("0")) is None
    assert calculate_savings_depletion(
        Decimal("24000"), Decimal("-1000")
    ) == Decimal("2")


def test_debt_repayments_at_retirement_widen_the_gap() -> None:
    """Repayments still due at retirement reduce the monthly position."""
    base = {
        "currentAge": 40,
        "retirementAge": 60,
        "superFundValue": 300000,
    }
    indebted = dict(
        base,
        liabilities=[
            {
                "type": "mortgage",
                "balance": 350000,
                "monthlyPayment": 2000,
                "loanTerm": 25,
            }
        ],
    )

    clear = project_retirement(
        ClientRecord.from_mapping(base), SharedAssumptions(), Decimal("8000")
    )
    carried = project_retirement(
        ClientRecord.from_mapping(indebted),
        SharedAssumptions(),
        Decimal("8000"),
    )

    assert clear.monthly_debt_payments == Decimal("0")
    assert carried.monthly_debt_payments == Decimal("2000")
    assert carried.monthly_deficit_surplus == (
        clear.monthly_deficit_surplus - Decimal("2000")
    )

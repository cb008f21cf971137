"""Monthly cash-flow composition shared by every consumer."""

from decimal import Decimal

from fincalc.domain.models.assumptions import SharedAssumptions
from fincalc.domain.models.client import ClientRecord
from fincalc.domain.models.summary import CashflowBreakdown
from fincalc.domain.models.tax import TaxResult
from fincalc.domain.services.loans import monthly_repayment
from fincalc.domain.services.resolver import resolve_value
from fincalc.utils.decimal_utils import ZERO

_MONTHS = Decimal("12")


def compute_cashflow(
    client: ClientRecord,
    assumptions: SharedAssumptions,
    tax: TaxResult,
) -> CashflowBreakdown:
    """Compute the monthly cash-flow breakdown.

    Deductions are living expenses, income tax excluding the education
    loan, the education loan repayment and rental property expenses.
    Existing loan repayments are reported but not deducted.

    Args:
        client: Client record to aggregate.
        assumptions: Shared assumptions for field resolution.
        tax: Current-year tax result for the same client.

    Returns:
        CashflowBreakdown: Monthly income and deduction components.
    """
    investment = resolve_value(
        client, "investment_income", assumptions
    ) + resolve_value(client, "franked_dividends", assumptions)
    return CashflowBreakdown(
        employment_income=resolve_value(
            client, "employment_income", assumptions
        )
        / _MONTHS,
        rental_income=resolve_value(client, "rental_income", assumptions)
        / _MONTHS,
        investment_income=investment / _MONTHS,
        other_income=resolve_value(client, "other_income", assumptions)
        / _MONTHS,
        living_expenses=client.flat_value("monthlyExpenses"),
        income_tax=tax.tax_excluding_loan / _MONTHS,
        loan_repayment=tax.loan_repayment / _MONTHS,
        property_expenses=client.flat_value("rentalExpenses") / _MONTHS,
        existing_loan_repayments=sum(
            (monthly_repayment(item) for item in client.liabilities),
            ZERO,
        ),
    )


__all__ = ["compute_cashflow"]

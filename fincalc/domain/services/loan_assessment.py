"""Lender-style assessment of a proposed loan."""

from fincalc.domain.constants import MAX_LOAN_TERM_YEARS
from fincalc.domain.models.assumptions import LendingPolicy
from fincalc.domain.models.loan import LoanAssessment, LoanProposal
from fincalc.domain.models.summary import CashflowBreakdown
from fincalc.domain.services.loans import calculate_loan_payment
from fincalc.utils.decimal_utils import ZERO

NO_NET_INCOME_REASON = "Insufficient net income to calculate serviceability"
RATIO_REASON = "Serviceability ratio too high"
BUFFER_REASON = "Insufficient buffer remaining"
STRESS_TEST_REASON = "Failed stress test at higher interest rate"
NEGATIVE_CASH_FLOW_REASON = "Negative cash flow after loan"
INVALID_LOAN_REASON = (
    "Loan terms are invalid: interest rate must not be negative and the "
    "term must be between 1 and 100 years."
)


def assess_loan_application(
    cashflow: CashflowBreakdown,
    proposal: LoanProposal,
    policy: LendingPolicy | None = None,
) -> LoanAssessment:
    """Run the lender tests for a proposed loan.

    Net income is monthly income after income tax and the education loan
    repayment. The loan is declined when commitments take more than the
    serviceability ratio of net income, when less than the buffer share of
    net income remains, when the repayment at the stressed rate would eat
    into the buffer, or when monthly cash flow turns negative.

    Args:
        cashflow: Current monthly cash-flow breakdown of the client.
        proposal: Loan being requested.
        policy: Lender tests; defaults when omitted.

    Returns:
        LoanAssessment: Figures and reasons; never raises for degenerate
        inputs.
    """
    policy = policy or LendingPolicy()
    net_income = (
        cashflow.total_income - cashflow.income_tax - cashflow.loan_repayment
    )
    existing = cashflow.existing_loan_repayments
    required_buffer = net_income * policy.buffer_ratio

    valid_terms = (
        proposal.annual_interest_rate >= 0
        and 0 < proposal.term_years <= MAX_LOAN_TERM_YEARS
    )
    if valid_terms:
        repayment = calculate_loan_payment(
            proposal.amount,
            proposal.annual_interest_rate,
            proposal.term_years,
        )
        stress_repayment = calculate_loan_payment(
            proposal.amount,
            proposal.annual_interest_rate + policy.stress_test_margin,
            proposal.term_years,
        )
    else:
        repayment = stress_repayment = ZERO

    commitments = existing + repayment
    ratio = commitments / net_income if net_income > 0 else None
    actual_buffer = net_income - commitments
    passes_stress_test = (
        net_income - existing - stress_repayment > required_buffer
    )
    net_surplus = cashflow.cash_flow - repayment

    reasons = []
    if not valid_terms:
        reasons.append(INVALID_LOAN_REASON)
    if ratio is None:
        reasons.append(NO_NET_INCOME_REASON)
    elif ratio > policy.max_serviceability_ratio:
        reasons.append(
            f"{RATIO_REASON} "
            f"(>{policy.max_serviceability_ratio * 100:.0f}%)"
        )
    if actual_buffer < required_buffer:
        reasons.append(BUFFER_REASON)
    if not passes_stress_test:
        reasons.append(STRESS_TEST_REASON)
    if net_surplus < 0:
        reasons.append(NEGATIVE_CASH_FLOW_REASON)

    return LoanAssessment(
        loan_amount=proposal.amount,
        monthly_repayment=repayment,
        total_monthly_commitments=commitments,
        monthly_net_income=net_income,
        net_surplus_after_loan=net_surplus,
        serviceability_ratio=ratio,
        required_buffer=required_buffer,
        actual_buffer=actual_buffer,
        stress_test_repayment=stress_repayment,
        passes_stress_test=passes_stress_test,
        reasons=reasons,
    )


__all__ = [
    "assess_loan_application",
    "NO_NET_INCOME_REASON",
    "RATIO_REASON",
    "BUFFER_REASON",
    "STRESS_TEST_REASON",
    "NEGATIVE_CASH_FLOW_REASON",
    "INVALID_LOAN_REASON",
]

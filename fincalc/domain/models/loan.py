"""Domain models for assessing a proposed loan."""

from dataclasses import dataclass, field
from decimal import Decimal

APPROVED = "APPROVED"
DECLINED = "DECLINED"


@dataclass(frozen=True)
class LoanProposal:
    """A loan the client is asking a lender for."""

    amount: Decimal
    annual_interest_rate: Decimal = Decimal("0.06")
    term_years: int = 30


@dataclass(frozen=True)
class LoanAssessment:
    """Outcome of the lender tests for one proposed loan.

    Attributes:
        loan_amount: Principal requested.
        monthly_repayment: Repayment at the proposed rate.
        total_monthly_commitments: Existing repayments plus the new one.
        monthly_net_income: Income after tax and education loan repayment.
        net_surplus_after_loan: Monthly cash flow less the new repayment.
        serviceability_ratio: Commitments as a share of net income, None
            when there is no net income.
        required_buffer: Net income that must remain after commitments.
        actual_buffer: Net income left after commitments.
        stress_test_repayment: Repayment at the stressed rate.
        passes_stress_test: True when the stressed repayment still leaves
            more than the required buffer.
        reasons: Why the loan was declined, empty when approved.
    """

    loan_amount: Decimal
    monthly_repayment: Decimal
    total_monthly_commitments: Decimal
    monthly_net_income: Decimal
    net_surplus_after_loan: Decimal
    serviceability_ratio: Decimal | None
    required_buffer: Decimal
    actual_buffer: Decimal
    stress_test_repayment: Decimal
    passes_stress_test: bool
    reasons: list[str] = field(default_factory=list)

    @property
    def has_buffer(self) -> bool:
        """Return True when the remaining income covers the buffer."""
        return self.actual_buffer >= self.required_buffer

    @property
    def can_afford(self) -> bool:
        """Return True when every lender test passes."""
        return not self.reasons

    @property
    def assessment(self) -> str:
        """Return ``APPROVED`` or ``DECLINED``."""
        return APPROVED if self.can_afford else DECLINED


__all__ = ["APPROVED", "DECLINED", "LoanProposal", "LoanAssessment"]

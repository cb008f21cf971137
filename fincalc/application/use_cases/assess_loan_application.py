"""Use case to run the lender tests for a proposed loan."""

from fincalc.domain.models.assumptions import LendingPolicy
from fincalc.domain.models.loan import LoanAssessment, LoanProposal
from fincalc.domain.services.aggregation import ClientAnalysis
from fincalc.domain.services.loan_assessment import assess_loan_application
from fincalc.infrastructure.logging.logger import get_app_logger


class AssessLoanApplicationUseCase:
    """Assess a proposed loan against a client's current cash flow."""

    def __init__(self, policy: LendingPolicy | None = None, logger=None):
        self._policy = policy or LendingPolicy()
        self._logger = logger or get_app_logger()

    def execute(
        self,
        analysis: ClientAnalysis,
        proposal: LoanProposal,
    ) -> LoanAssessment:
        """Assess the proposal for an analysed client.

        Args:
            analysis: Aggregation result of the borrowing client.
            proposal: Loan being requested.

        Returns:
            LoanAssessment: Outcome with the reasons for a decline.
        """
        result = assess_loan_application(
            analysis.cashflow,
            proposal,
            self._policy,
        )
        self._logger.info(
            f"Loan of {proposal.amount} assessed for "
            f"{analysis.summary.client_name}: {result.assessment}"
        )
        return result


__all__ = ["AssessLoanApplicationUseCase"]

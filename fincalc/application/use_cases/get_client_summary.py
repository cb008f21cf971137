"""Use case to compute the financial summary of a stored client."""

from fincalc.application.ports.client_repository import ClientRepositoryPort
from fincalc.domain.errors import MissingClientError
from fincalc.domain.models.assumptions import (
    DEFAULT_ASSUMPTIONS,
    SharedAssumptions,
)
from fincalc.domain.models.summary import FinancialSummary
from fincalc.domain.models.tax import TaxRules
from fincalc.domain.services.aggregation import ClientAnalysis, analyze_client
from fincalc.domain.services.tax import DEFAULT_TAX_RULES
from fincalc.infrastructure.logging.logger import get_app_logger


class GetClientSummaryUseCase:
    """Load a client record and run the aggregation engine on it."""

    def __init__(
        self,
        repository: ClientRepositoryPort,
        assumptions: SharedAssumptions | None = None,
        logger=None,
        tax_rules: TaxRules | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing stored client records.
            assumptions: Shared assumptions loaded for the session.
            logger: Optional logger compatible with logging.Logger-like API.
            tax_rules: Optional tax rules; current year when omitted.
        """
        self._repository = repository
        self._assumptions = assumptions or DEFAULT_ASSUMPTIONS
        self._logger = logger or get_app_logger()
        self._tax_rules = tax_rules or DEFAULT_TAX_RULES

    def execute(self, client_id: str) -> FinancialSummary:
        """Return the financial summary of a client.

        Args:
            client_id: Identifier of the stored client.

        Returns:
            FinancialSummary: Freshly computed summary.

        Raises:
            MissingClientError: If no record exists for the id.
        """
        return self.analyze(client_id).summary

    def analyze(self, client_id: str) -> ClientAnalysis:
        """Return the summary together with its intermediate results."""
        client = self._repository.fetch_client(client_id)
        if client is None:
            self._logger.warning(f"No client record found for id={client_id}")
            raise MissingClientError(client_id)

        analysis = analyze_client(
            client,
            self._assumptions,
            rules=self._tax_rules,
            logger=self._logger,
        )
        summary = analysis.summary
        self._logger.info(
            f"Summary computed for client {client_id}: "
            f"assets={summary.total_assets}, "
            f"liabilities={summary.total_liabilities}, "
            f"net_worth={summary.net_worth}"
        )
        return analysis


__all__ = ["GetClientSummaryUseCase"]

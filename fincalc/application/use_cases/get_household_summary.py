"""Use case to compute the combined summary of a couple."""

from fincalc.application.ports.client_repository import ClientRepositoryPort
from fincalc.application.use_cases.get_client_summary import (
    GetClientSummaryUseCase,
)
from fincalc.domain.models.assumptions import SharedAssumptions
from fincalc.domain.models.summary import FinancialSummary
from fincalc.domain.services.combine import combine_summaries
from fincalc.infrastructure.logging.logger import get_app_logger


class GetHouseholdSummaryUseCase:
    """Summarise two clients independently and combine the results."""

    def __init__(
        self,
        repository: ClientRepositoryPort,
        assumptions: SharedAssumptions | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing stored client records.
            assumptions: Shared assumptions loaded for the session.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()
        self._client_summary = GetClientSummaryUseCase(
            repository,
            assumptions=assumptions,
            logger=self._logger,
        )

    def execute(
        self,
        first_client_id: str,
        second_client_id: str,
    ) -> FinancialSummary:
        """Return the combined household summary.

        Args:
            first_client_id: Identifier of the first client.
            second_client_id: Identifier of the second client.

        Returns:
            FinancialSummary: Sum of both summaries, earliest retirement.

        Raises:
            MissingClientError: If either record is absent.
        """
        first = self._client_summary.execute(first_client_id)
        second = self._client_summary.execute(second_client_id)
        combined = combine_summaries(first, second)
        self._logger.info(
            f"Household summary computed for {first_client_id} and "
            f"{second_client_id}: net_worth={combined.net_worth}"
        )
        return combined


__all__ = ["GetHouseholdSummaryUseCase"]

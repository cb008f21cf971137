"""Tests for the GetHouseholdSummaryUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from fincalc.application.use_cases.get_household_summary import (
    GetHouseholdSummaryUseCase,
)
from fincalc.domain.errors import MissingClientError
from fincalc.domain.models.client import ClientRecord

RECORDS = {
    "a": ClientRecord.from_mapping(
        {
            "firstName": "A",
            "savingsValue": 10000,
            "currentAge": 30,
            "retirementAge": 65,
        }
    ),
    "b": ClientRecord.from_mapping(
        {
            "firstName": "B",
            "savingsValue": 5000,
            "currentAge": 50,
            "retirementAge": 60,
        }
    ),
}


def _repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_client.side_effect = RECORDS.get
    return repository


def test_execute_combines_independent_summaries() -> None:
    """Both clients are aggregated separately and then combined."""
    logger = MagicMock()
    use_case = GetHouseholdSummaryUseCase(_repository(), logger=logger)

    summary = use_case.execute("a", "b")

    assert summary.client_name == "A & B"
    assert summary.total_assets == Decimal("15000")
    assert summary.years_to_retirement == 10
    assert "Household summary" in logger.info.call_args.args[0]


def test_execute_propagates_missing_client() -> None:
    """A missing partner record raises MissingClientError."""
    use_case = GetHouseholdSummaryUseCase(_repository(), logger=MagicMock())

    with pytest.raises(MissingClientError):
        use_case.execute("a", "nobody")

"""Tests for the GetClientSummaryUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from fincalc.application.use_cases.get_client_summary import (
    GetClientSummaryUseCase,
)
from fincalc.domain.errors import MissingClientError
from fincalc.domain.models.assumptions import SharedAssumptions
from fincalc.domain.models.client import ClientRecord


def _repository(record: ClientRecord | None) -> MagicMock:
    repository = MagicMock()
    repository.fetch_client.return_value = record
    return repository


def test_execute_returns_summary_and_logs_totals() -> None:
    """The use case should aggregate the fetched record."""
    record = ClientRecord.from_mapping(
        {"firstName": "Ana", "homeValue": 500000, "homeBalance": 200000}
    )
    repository = _repository(record)
    logger = MagicMock()
    use_case = GetClientSummaryUseCase(repository, logger=logger)

    summary = use_case.execute("c-1")

    repository.fetch_client.assert_called_once_with("c-1")
    assert summary.client_name == "Ana"
    assert summary.net_worth == Decimal("300000")
    logger.info.assert_called_once()
    assert "net_worth=300000" in logger.info.call_args.args[0]


def test_execute_uses_session_assumptions() -> None:
    """Shared fallbacks injected at construction reach the engine."""
    repository = _repository(ClientRecord())
    assumptions = SharedAssumptions(fallbacks={"shares": Decimal("5000")})
    use_case = GetClientSummaryUseCase(
        repository,
        assumptions=assumptions,
        logger=MagicMock(),
    )

    summary = use_case.execute("c-2")

    assert summary.total_assets == Decimal("5000")


def test_execute_raises_for_missing_client() -> None:
    """A missing record is reported as MissingClientError."""
    logger = MagicMock()
    use_case = GetClientSummaryUseCase(_repository(None), logger=logger)

    with pytest.raises(MissingClientError) as excinfo:
        use_case.execute("ghost")

    assert excinfo.value.client_id == "ghost"
    logger.warning.assert_called_once()


def test_analyze_returns_intermediate_results() -> None:
    """analyze exposes totals alongside the summary."""
    record = ClientRecord.from_mapping({"currentShares": 12000})
    use_case = GetClientSummaryUseCase(
        _repository(record),
        logger=MagicMock(),
    )

    analysis = use_case.analyze("c-3")

    assert analysis.totals.asset_classes["shares"] == Decimal("12000")
    assert analysis.summary.total_assets == Decimal("12000")

"""Tests for the composition root."""

from decimal import Decimal
from unittest.mock import MagicMock

from fincalc.application.use_cases.get_client_summary import (
    GetClientSummaryUseCase,
)
from fincalc.application.use_cases.get_household_summary import (
    GetHouseholdSummaryUseCase,
)
from fincalc.infrastructure import container
from fincalc.infrastructure.client_repository import (
    SqlAlchemyClientRepository,
)
from fincalc.infrastructure.pdf_report_renderer import FpdfReportRenderer


def test_build_client_repository_uses_given_port(monkeypatch) -> None:
    """The repository should wrap the provided database port."""
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    db_port = MagicMock()

    repository = container.build_client_repository(db_port)

    assert isinstance(repository, SqlAlchemyClientRepository)
    assert repository._db_port is db_port


def test_build_use_cases_load_assumptions_from_env(monkeypatch) -> None:
    """Use cases receive assumptions built from the environment."""
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    monkeypatch.setattr(
        container.AssumptionSettings,
        "from_env",
        classmethod(
            lambda cls: cls(fallbacks={"savings": Decimal("1000")})
        ),
    )
    repository = MagicMock()

    single = container.build_client_summary_use_case(repository)
    household = container.build_household_summary_use_case(repository)

    assert isinstance(single, GetClientSummaryUseCase)
    assert isinstance(household, GetHouseholdSummaryUseCase)
    assert single._assumptions.fallback("savings") == Decimal("1000")


def test_build_export_report_use_case_wires_pdf_renderer(monkeypatch) -> None:
    """Report export defaults to the PDF renderer and both loggers."""
    app_logger = MagicMock()
    usage_logger = MagicMock()
    monkeypatch.setattr(container, "get_app_logger", lambda: app_logger)
    monkeypatch.setattr(container, "get_usage_logger", lambda: usage_logger)

    use_case = container.build_export_report_use_case()

    assert isinstance(use_case._renderer, FpdfReportRenderer)
    assert use_case._logger is app_logger
    assert use_case._usage_logger is usage_logger


def test_build_loan_assessment_use_case(monkeypatch) -> None:
    """The loan assessment use case logs through the app logger."""
    app_logger = MagicMock()
    monkeypatch.setattr(container, "get_app_logger", lambda: app_logger)

    use_case = container.build_loan_assessment_use_case()

    assert use_case._logger is app_logger

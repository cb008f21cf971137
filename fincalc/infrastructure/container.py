"""Composition root for wiring infrastructure adapters."""

from fincalc.application.ports.client_repository import ClientRepositoryPort
from fincalc.application.ports.database import DatabaseEnginePort
from fincalc.application.ports.report_renderer import ReportRendererPort
from fincalc.application.use_cases.assess_loan_application import (
    AssessLoanApplicationUseCase,
)
from fincalc.application.use_cases.export_summary_report import (
    ExportSummaryReportUseCase,
)
from fincalc.application.use_cases.get_client_summary import (
    GetClientSummaryUseCase,
)
from fincalc.application.use_cases.get_household_summary import (
    GetHouseholdSummaryUseCase,
)
from fincalc.domain.models.assumptions import SharedAssumptions
from fincalc.infrastructure.client_repository import (
    SqlAlchemyClientRepository,
)
from fincalc.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from fincalc.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from fincalc.infrastructure.pdf_report_renderer import FpdfReportRenderer
from fincalc.infrastructure.settings import AssumptionSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_client_repository(
    db_port: DatabaseEnginePort | None = None,
) -> ClientRepositoryPort:
    """Return the client repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyClientRepository(resolved_db, logger=get_app_logger())


def build_shared_assumptions() -> SharedAssumptions:
    """Return the session assumptions loaded from the environment."""
    return AssumptionSettings.from_env().to_assumptions()


def build_client_summary_use_case(
    repository: ClientRepositoryPort | None = None,
) -> GetClientSummaryUseCase:
    """Return the single-client summary use case."""
    return GetClientSummaryUseCase(
        repository or build_client_repository(),
        assumptions=build_shared_assumptions(),
        logger=get_app_logger(),
    )


def build_household_summary_use_case(
    repository: ClientRepositoryPort | None = None,
) -> GetHouseholdSummaryUseCase:
    """Return the combined household summary use case."""
    return GetHouseholdSummaryUseCase(
        repository or build_client_repository(),
        assumptions=build_shared_assumptions(),
        logger=get_app_logger(),
    )


def build_loan_assessment_use_case() -> AssessLoanApplicationUseCase:
    """Return the proposed loan assessment use case."""
    return AssessLoanApplicationUseCase(logger=get_app_logger())


def build_report_renderer() -> ReportRendererPort:
    """Return the PDF report renderer."""
    return FpdfReportRenderer()


def build_export_report_use_case(
    renderer: ReportRendererPort | None = None,
) -> ExportSummaryReportUseCase:
    """Return the report export use case."""
    return ExportSummaryReportUseCase(
        renderer or build_report_renderer(),
        logger=get_app_logger(),
        usage_logger=get_usage_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_client_repository",
    "build_shared_assumptions",
    "build_client_summary_use_case",
    "build_household_summary_use_case",
    "build_loan_assessment_use_case",
    "build_report_renderer",
    "build_export_report_use_case",
]

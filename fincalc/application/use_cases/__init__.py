"""Application use cases package."""

from .assess_loan_application import AssessLoanApplicationUseCase
from .export_summary_report import (
    ExportSummaryReportUseCase,
    ReportExportResult,
)
from .get_client_summary import GetClientSummaryUseCase
from .get_household_summary import GetHouseholdSummaryUseCase
from .report_payload import build_report_payload

__all__ = [
    "AssessLoanApplicationUseCase",
    "ExportSummaryReportUseCase",
    "ReportExportResult",
    "GetClientSummaryUseCase",
    "GetHouseholdSummaryUseCase",
    "build_report_payload",
]

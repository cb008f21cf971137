"""Use case to hand a finished summary to the report generator."""

from collections.abc import Mapping
from dataclasses import dataclass

from fincalc.application.ports.report_renderer import ReportRendererPort
from fincalc.application.use_cases.report_payload import build_report_payload
from fincalc.domain.errors import ReportPayloadError
from fincalc.domain.models.summary import FinancialSummary
from fincalc.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)

RETRY_MESSAGE = "The report could not be generated, please retry."


@dataclass(frozen=True)
class ReportExportResult:
    """Outcome of a report export.

    Attributes:
        success: True when the renderer produced a document.
        content: Rendered document, None on failure.
        message: User-facing status message.
    """

    success: bool
    content: bytes | None = None
    message: str = ""


class ExportSummaryReportUseCase:
    """Validate a summary and render it through the report port."""

    def __init__(
        self,
        renderer: ReportRendererPort,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            renderer: Port rendering report payloads.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording successful exports.
        """
        self._renderer = renderer
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(
        self,
        summary: FinancialSummary,
        chart_images: Mapping[str, str] | None = None,
        contact: Mapping[str, str] | None = None,
    ) -> ReportExportResult:
        """Render the report for a summary.

        Failures are logged and reported in the result instead of raised.

        Args:
            summary: Summary computed by the aggregation engine.
            chart_images: Optional pre-rendered chart images.
            contact: Optional client contact fields.

        Returns:
            ReportExportResult: Rendered content or a retry message.
        """
        try:
            payload = build_report_payload(summary, chart_images, contact)
        except ReportPayloadError as exc:
            self._logger.error(f"Report preflight failed: {exc}")
            return ReportExportResult(success=False, message=RETRY_MESSAGE)

        try:
            content = self._renderer.render(payload)
        except Exception as exc:
            self._logger.error(f"Report rendering failed: {exc}")
            return ReportExportResult(success=False, message=RETRY_MESSAGE)

        client_name = payload.summary["clientName"]
        self._logger.info(
            f"Report rendered for {client_name} ({len(content)} bytes)"
        )
        self._usage_logger.info(f"report_export client={client_name!r}")
        return ReportExportResult(
            success=True,
            content=content,
            message="Report generated.",
        )


__all__ = [
    "ExportSummaryReportUseCase",
    "ReportExportResult",
    "RETRY_MESSAGE",
]

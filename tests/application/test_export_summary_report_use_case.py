"""Tests for the ExportSummaryReportUseCase."""

from dataclasses import replace
from decimal import Decimal
from unittest.mock import MagicMock

from fincalc.application.use_cases.export_summary_report import (
    RETRY_MESSAGE,
    ExportSummaryReportUseCase,
)
from fincalc.domain.models.client import ClientRecord
from fincalc.domain.services.aggregation import compute_summary

SUMMARY = compute_summary(
    ClientRecord.from_mapping({"firstName": "Lou", "annualIncome": 70000})
)


def test_execute_renders_payload() -> None:
    """A valid summary is handed to the renderer."""
    renderer = MagicMock()
    renderer.render.return_value = b"%PDF-1.7"
    logger = MagicMock()
    usage_logger = MagicMock()
    use_case = ExportSummaryReportUseCase(
        renderer, logger=logger, usage_logger=usage_logger
    )

    result = use_case.execute(SUMMARY, contact={"firstName": "Lou"})

    assert result.success is True
    assert result.content == b"%PDF-1.7"
    payload = renderer.render.call_args.args[0]
    assert payload.summary["clientName"] == "Lou"
    assert payload.contact["firstName"] == "Lou"
    logger.info.assert_called_once()
    usage_logger.info.assert_called_once_with("report_export client='Lou'")


def test_execute_reports_preflight_failure() -> None:
    """Invalid summaries never reach the renderer."""
    renderer = MagicMock()
    logger = MagicMock()
    usage_logger = MagicMock()
    use_case = ExportSummaryReportUseCase(
        renderer, logger=logger, usage_logger=usage_logger
    )

    result = use_case.execute(
        replace(SUMMARY, monthly_income=Decimal("Infinity"))
    )

    assert result.success is False
    assert result.message == RETRY_MESSAGE
    renderer.render.assert_not_called()
    logger.error.assert_called_once()
    usage_logger.info.assert_not_called()


def test_execute_reports_renderer_failure() -> None:
    """Renderer errors become a retry message instead of an exception."""
    renderer = MagicMock()
    renderer.render.side_effect = RuntimeError("renderer down")
    logger = MagicMock()
    usage_logger = MagicMock()
    use_case = ExportSummaryReportUseCase(
        renderer, logger=logger, usage_logger=usage_logger
    )

    result = use_case.execute(SUMMARY)

    assert result.success is False
    assert result.content is None
    assert result.message == RETRY_MESSAGE
    assert "renderer down" in logger.error.call_args.args[0]

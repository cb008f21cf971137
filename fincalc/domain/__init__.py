"""Domain package for aggregation rules and core models."""

from .errors import MissingClientError, ReportPayloadError
from .models import (
    DEFAULT_ASSUMPTIONS,
    ClientRecord,
    FinancialSummary,
    SharedAssumptions,
)
from .services import combine_summaries, compute_summary

__all__ = [
    "MissingClientError",
    "ReportPayloadError",
    "DEFAULT_ASSUMPTIONS",
    "ClientRecord",
    "FinancialSummary",
    "SharedAssumptions",
    "combine_summaries",
    "compute_summary",
]

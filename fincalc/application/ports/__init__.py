"""Application ports package."""

from .client_repository import ClientListing, ClientRepositoryPort
from .database import DatabaseEnginePort
from .report_renderer import ReportPayload, ReportRendererPort

__all__ = [
    "ClientListing",
    "ClientRepositoryPort",
    "DatabaseEnginePort",
    "ReportPayload",
    "ReportRendererPort",
]

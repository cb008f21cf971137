"""Application port for the PDF report generator."""

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class ReportPayload:
    """Everything the report generator consumes.

    Attributes:
        summary: Every declared summary field; numbers are finite floats or
            ints and recommendations are a list.
        chart_images: Pre-rendered chart bitmaps as ``data:`` URLs, keyed by
            chart name.
        contact: Basic client contact fields.
    """

    summary: dict
    chart_images: dict[str, str] = field(default_factory=dict)
    contact: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Return a JSON-compatible representation."""
        return {
            "summary": dict(self.summary),
            "chartImages": dict(self.chart_images),
            "contact": dict(self.contact),
        }


class ReportRendererPort(Protocol):
    """Port rendering a finished report payload into a document."""

    def render(self, payload: ReportPayload) -> bytes:
        """Render the payload.

        Args:
            payload: Normalised summary, chart images and contact fields.

        Returns:
            bytes: Rendered document content.
        """


__all__ = ["ReportPayload", "ReportRendererPort"]

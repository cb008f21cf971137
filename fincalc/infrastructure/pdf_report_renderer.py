"""PDF rendering of financial summary reports with fpdf2."""

import base64
from io import BytesIO

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from fincalc.application.ports.report_renderer import ReportPayload

# (heading, ((summary key, label, kind), ...)); kind is money, years or count.
REPORT_SECTIONS = (
    (
        "Financial position",
        (
            ("totalAssets", "Total assets", "money"),
            ("totalLiabilities", "Total liabilities", "money"),
            ("netWorth", "Net worth", "money"),
        ),
    ),
    (
        "Monthly cash flow",
        (
            ("monthlyIncome", "Monthly income", "money"),
            ("monthlyExpenses", "Monthly expenses", "money"),
            ("monthlyCashFlow", "Monthly cash flow", "money"),
        ),
    ),
    (
        "Retirement",
        (
            ("yearsToRetirement", "Years to retirement", "years"),
            (
                "projectedRetirementLumpSum",
                "Projected lump sum",
                "money",
            ),
            (
                "retirementDeficitSurplus",
                "Monthly surplus / deficit",
                "money",
            ),
        ),
    ),
    (
        "Tax",
        (
            ("currentTax", "Current tax", "money"),
            ("optimizedTax", "Optimised tax", "money"),
            ("taxSavings", "Potential savings", "money"),
        ),
    ),
    (
        "Property",
        (
            ("investmentProperties", "Properties", "count"),
            ("totalPropertyValue", "Property value", "money"),
            ("totalPropertyDebt", "Property debt", "money"),
            ("propertyEquity", "Property equity", "money"),
        ),
    ),
)

_PDF_REPLACEMENTS = {
    "\u2022": "-",
    "\u2013": "-",
    "\u2014": "-",
    "\u2019": "'",
    "\u201c": '"',
    "\u201d": '"',
    "\u2026": "...",
}


def sanitize_for_pdf(text) -> str:
    """Return text restricted to the Latin-1 range of the core fonts."""
    if text is None:
        return ""
    text = str(text)
    for source, target in _PDF_REPLACEMENTS.items():
        text = text.replace(source, target)
    return text.encode("latin-1", "replace").decode("latin-1")


def format_value(value, kind: str) -> str:
    """Format a summary value for the report."""
    if kind == "money":
        sign = "-" if value < 0 else ""
        return f"{sign}${abs(value):,.0f}"
    return f"{int(value)}"


def decode_image(data_url: str) -> BytesIO:
    """Decode a base64 ``data:`` URL into an in-memory image.

    Raises:
        ValueError: If the URL carries no valid base64 payload.
    """
    _, _, encoded = data_url.partition(",")
    return BytesIO(base64.b64decode(encoded, validate=True))


class FpdfReportRenderer:
    """Render report payloads as a single PDF document."""

    def __init__(self, title: str = "Financial Summary") -> None:
        self._title = title

    def render(self, payload: ReportPayload) -> bytes:
        """Render the payload.

        Args:
            payload: Normalised summary, chart images and contact fields.

        Returns:
            bytes: PDF document content.
        """
        summary = payload.summary
        pdf = FPDF()
        pdf.set_auto_page_break(auto=True, margin=15)
        pdf.add_page()

        pdf.set_font("Helvetica", "B", 20)
        self._line(pdf, self._title, height=15, align="C")
        pdf.set_font("Helvetica", "", 12)
        self._line(pdf, summary.get("clientName") or "Client", align="C")
        contact = " ".join(
            value
            for value in (
                payload.contact.get("firstName", ""),
                payload.contact.get("lastName", ""),
                payload.contact.get("email", ""),
            )
            if value
        )
        if contact:
            self._line(pdf, contact, align="C")
        pdf.ln(5)

        for heading, rows in REPORT_SECTIONS:
            self._heading(pdf, heading)
            pdf.set_font("Helvetica", "", 11)
            for key, label, kind in rows:
                pdf.cell(90, 8, sanitize_for_pdf(label), border=1)
                self._line(
                    pdf,
                    format_value(summary.get(key, 0), kind),
                    width=90,
                    border=1,
                    align="R",
                )
            pdf.ln(4)

        self._heading(pdf, "Recommendations")
        pdf.set_font("Helvetica", "", 11)
        for item in summary.get("recommendations", []):
            pdf.multi_cell(
                0,
                7,
                sanitize_for_pdf(f"- {item}"),
                new_x=XPos.LMARGIN,
                new_y=YPos.NEXT,
            )

        for name, data_url in payload.chart_images.items():
            pdf.add_page()
            self._heading(pdf, name.replace("_", " ").title())
            pdf.image(decode_image(data_url), w=170)

        return bytes(pdf.output())

    @staticmethod
    def _heading(pdf: FPDF, text: str) -> None:
        pdf.set_font("Helvetica", "B", 14)
        FpdfReportRenderer._line(pdf, text, height=10)
        pdf.line(10, pdf.get_y(), 200, pdf.get_y())
        pdf.ln(3)

    @staticmethod
    def _line(
        pdf: FPDF,
        text: str,
        width: float = 0,
        height: float = 8,
        **kwargs,
    ) -> None:
        pdf.cell(
            width,
            height,
            sanitize_for_pdf(text),
            new_x=XPos.LMARGIN,
            new_y=YPos.NEXT,
            **kwargs,
        )


__all__ = [
    "FpdfReportRenderer",
    "REPORT_SECTIONS",
    "decode_image",
    "format_value",
    "sanitize_for_pdf",
]

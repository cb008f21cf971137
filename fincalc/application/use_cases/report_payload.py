"""Preflight that turns a summary into a complete report payload."""

from collections.abc import Mapping
from dataclasses import fields
from decimal import Decimal
import math

from fincalc.application.ports.report_renderer import ReportPayload
from fincalc.domain.errors import ReportPayloadError
from fincalc.domain.models.summary import FinancialSummary
from fincalc.utils.decimal_utils import ZERO

CONTACT_FIELDS = ("firstName", "lastName", "email")
CHART_IMAGE_PREFIX = "data:image/"


def to_camel_case(name: str) -> str:
    """Return ``snake_case`` names as ``camelCase``."""
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)


def build_report_payload(
    summary: FinancialSummary,
    chart_images: Mapping[str, str] | None = None,
    contact: Mapping[str, str] | None = None,
) -> ReportPayload:
    """Normalise a summary for the report generator.

    Every declared summary field is emitted under its camelCase name. Missing
    numbers become zero, missing text becomes an empty string and missing
    recommendations an empty list.

    Args:
        summary: Summary computed by the aggregation engine.
        chart_images: Optional pre-rendered charts; entries that are not
            image ``data:`` URLs are dropped.
        contact: Optional client contact fields.

    Returns:
        ReportPayload: Payload with no missing field.

    Raises:
        ReportPayloadError: If a numeric field is not a finite number.
    """
    values: dict = {}
    for item in fields(FinancialSummary):
        raw = getattr(summary, item.name, None)
        key = to_camel_case(item.name)
        if item.type is Decimal:
            values[key] = _finite_float(item.name, raw)
        elif item.type is int:
            values[key] = int(_finite_float(item.name, raw))
        elif item.type is bool:
            values[key] = bool(raw)
        elif item.type is str:
            values[key] = "" if raw is None else str(raw)
        else:
            values[key] = [str(entry) for entry in (raw or [])]

    images = {
        str(name): image
        for name, image in (chart_images or {}).items()
        if isinstance(image, str) and image.startswith(CHART_IMAGE_PREFIX)
    }
    contact = contact or {}
    contact_fields = {
        name: str(contact.get(name) or "") for name in CONTACT_FIELDS
    }
    return ReportPayload(
        summary=values,
        chart_images=images,
        contact=contact_fields,
    )


def _finite_float(field_name: str, value) -> float:
    if value is None:
        value = ZERO
    if isinstance(value, bool):
        raise ReportPayloadError(field_name, value)
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ReportPayloadError(field_name, value) from exc
    if not math.isfinite(number):
        raise ReportPayloadError(field_name, value)
    return number


__all__ = ["build_report_payload", "to_camel_case", "CONTACT_FIELDS"]

"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation

ZERO = Decimal("0")

# Largest decimal exponent accepted from raw input (about a quadrillion).
MAX_EXPONENT = 15

TRUE_STRINGS = ("true", "1", "yes", "y", "on")


def coerce_decimal(value) -> Decimal:
    """Normalize raw numeric input to Decimal.

    Missing, non-numeric, non-finite and absurdly large values collapse to
    zero so that a partially filled client record still aggregates.

    Args:
        value: Raw value from a client record, form or database row.

    Returns:
        Decimal: Normalized finite value.
    """
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        result = value
    else:
        text = str(value).strip().replace(",", "")
        if not text:
            return ZERO
        try:
            result = Decimal(text)
        except InvalidOperation:
            return ZERO
    if not result.is_finite():
        return ZERO
    if result and result.adjusted() > MAX_EXPONENT:
        return ZERO
    return result


def coerce_non_negative(value) -> Decimal:
    """Coerce a value and clamp it at zero."""
    result = coerce_decimal(value)
    return result if result > 0 else ZERO


def coerce_int(value, maximum: int | None = None) -> int:
    """Coerce a value to an int, truncating fractions.

    Args:
        value: Raw value to coerce.
        maximum: Optional bound on the magnitude; larger values become 0.

    Returns:
        int: Coerced value.
    """
    result = int(coerce_decimal(value))
    if maximum is not None and abs(result) > maximum:
        return 0
    return result


def coerce_flag(value) -> bool:
    """Coerce a form flag, reading strings such as ``"false"`` literally."""
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return coerce_decimal(value) != 0


__all__ = [
    "ZERO",
    "MAX_EXPONENT",
    "TRUE_STRINGS",
    "coerce_decimal",
    "coerce_non_negative",
    "coerce_int",
    "coerce_flag",
]

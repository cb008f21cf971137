"""Combined summary for two independently aggregated clients."""

from fincalc.domain.models.summary import FinancialSummary

_MIN_FIELDS = ("years_to_retirement",)


def combine_summaries(
    first: FinancialSummary,
    second: FinancialSummary,
) -> FinancialSummary:
    """Fold two finished summaries into one household summary.

    Numeric fields are summed, ``years_to_retirement`` takes the earlier of
    the two and recommendations are concatenated. Raw client records are
    never consulted, so nothing leaks between the two clients.

    Args:
        first: Summary of the first client.
        second: Summary of the second client.

    Returns:
        FinancialSummary: Combined household summary.
    """
    values = {}
    for name in FinancialSummary.numeric_field_names():
        left = getattr(first, name)
        right = getattr(second, name)
        if name in _MIN_FIELDS:
            values[name] = min(left, right)
        else:
            values[name] = left + right

    names = [item for item in (first.client_name, second.client_name) if item]
    values["client_name"] = " & ".join(names)
    values["is_retirement_deficit"] = values["retirement_deficit_surplus"] < 0
    values["recommendations"] = [
        *first.recommendations,
        *second.recommendations,
    ]

    return FinancialSummary(**values)


__all__ = ["combine_summaries"]

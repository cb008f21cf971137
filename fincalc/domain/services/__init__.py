"""Domain services package."""

from .aggregation import ClientAnalysis, analyze_client, compute_summary
from .cashflow import compute_cashflow
from .combine import combine_summaries
from .loan_assessment import assess_loan_application
from .loans import (
    calculate_debt_payments_at_retirement,
    calculate_loan_payment,
    calculate_max_borrowing,
    monthly_repayment,
)
from .pairing import build_financial_pairs, unpaired_items
from .recommendations import build_recommendations
from .resolver import (
    ResolutionSource,
    ResolvedQuantity,
    resolve_quantity,
    resolve_value,
)
from .retirement import project_retirement
from .serviceability import assess_serviceability
from .tax import DEFAULT_TAX_RULES, calculate_tax, optimize_tax
from .totals import compute_portfolio_totals
from .validation import validate_links, validate_resolved_sign

__all__ = [
    "ClientAnalysis",
    "analyze_client",
    "compute_summary",
    "compute_cashflow",
    "combine_summaries",
    "assess_loan_application",
    "calculate_debt_payments_at_retirement",
    "calculate_loan_payment",
    "calculate_max_borrowing",
    "monthly_repayment",
    "build_financial_pairs",
    "unpaired_items",
    "build_recommendations",
    "ResolutionSource",
    "ResolvedQuantity",
    "resolve_quantity",
    "resolve_value",
    "project_retirement",
    "assess_serviceability",
    "DEFAULT_TAX_RULES",
    "calculate_tax",
    "optimize_tax",
    "compute_portfolio_totals",
    "validate_links",
    "validate_resolved_sign",
]

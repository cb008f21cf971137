"""Aggregation engine: one client record in, one financial summary out."""

from dataclasses import dataclass
from logging import Logger

from fincalc.domain.errors import MissingClientError
from fincalc.domain.models.assumptions import (
    DEFAULT_ASSUMPTIONS,
    SharedAssumptions,
)
from fincalc.domain.models.client import (
    Asset,
    ClientRecord,
    FinancialPair,
    Liability,
)
from fincalc.domain.models.summary import (
    CashflowBreakdown,
    FinancialSummary,
    PortfolioTotals,
    RetirementProjection,
    ServiceabilityResult,
)
from fincalc.domain.models.tax import TaxOptimization, TaxRules
from fincalc.domain.services.cashflow import compute_cashflow
from fincalc.domain.services.pairing import (
    build_financial_pairs,
    unpaired_items,
)
from fincalc.domain.services.recommendations import (
    RecommendationContext,
    build_recommendations,
)
from fincalc.domain.services.resolver import resolve_value
from fincalc.domain.services.retirement import project_retirement
from fincalc.domain.services.serviceability import assess_serviceability
from fincalc.domain.services.tax import (
    DEFAULT_TAX_RULES,
    WORK_DEDUCTION_TARGET,
    optimize_tax,
)
from fincalc.domain.services.totals import compute_portfolio_totals
from fincalc.domain.services.validation import validate_links


@dataclass(frozen=True)
class ClientAnalysis:
    """Every intermediate result behind one financial summary."""

    summary: FinancialSummary
    totals: PortfolioTotals
    cashflow: CashflowBreakdown
    tax: TaxOptimization
    retirement: RetirementProjection
    serviceability: ServiceabilityResult
    client: ClientRecord

    @property
    def pairs(self) -> list[FinancialPair]:
        """Return assets grouped with the liabilities financing them."""
        return build_financial_pairs(self.client)

    @property
    def unpaired(self) -> tuple[list[Asset], list[Liability]]:
        """Return the assets and liabilities outside any pair."""
        return unpaired_items(self.client)


def analyze_client(
    client: ClientRecord | None,
    assumptions: SharedAssumptions = DEFAULT_ASSUMPTIONS,
    *,
    rules: TaxRules = DEFAULT_TAX_RULES,
    logger: Logger | None = None,
) -> ClientAnalysis:
    """Run the full aggregation pipeline for one client.

    Args:
        client: Client record to aggregate.
        assumptions: Shared assumptions, immutable for the call.
        rules: Tax rules to apply.
        logger: Optional logger for data-quality warnings.

    Returns:
        ClientAnalysis: Summary plus the intermediate results.

    Raises:
        MissingClientError: If no client record was supplied.
    """
    if client is None:
        raise MissingClientError(None)

    validate_links(client, logger)
    totals = compute_portfolio_totals(client, assumptions, logger=logger)
    tax = optimize_tax(client, assumptions, rules)
    cashflow = compute_cashflow(client, assumptions, tax.current)
    monthly_income = cashflow.total_income
    monthly_expenses = cashflow.total_deductions
    retirement = project_retirement(client, assumptions, monthly_income)
    serviceability = assess_serviceability(
        monthly_income,
        monthly_expenses,
        assumptions.serviceability,
    )

    annual_income = resolve_value(client, "employment_income", assumptions)
    recommendations = build_recommendations(
        RecommendationContext(
            annual_income=annual_income,
            super_balance=totals.asset_classes["super"],
            savings_balance=totals.asset_classes["savings"],
            monthly_living_expenses=cashflow.living_expenses,
            monthly_cash_flow=cashflow.cash_flow,
            is_retirement_deficit=retirement.is_deficit,
            total_assets=totals.total_assets,
            total_liabilities=totals.total_liabilities,
            credit_card_balance=totals.liability_classes["credit_card"],
            levy_surcharge=tax.current.surcharge,
            work_deduction_gap=WORK_DEDUCTION_TARGET
            - client.flat_value("workRelatedExpenses"),
            property_viable=serviceability.is_viable,
        )
    )

    summary = FinancialSummary(
        client_name=client.full_name or "Client",
        total_assets=totals.total_assets,
        total_liabilities=totals.total_liabilities,
        net_worth=totals.net_worth,
        monthly_income=monthly_income,
        monthly_expenses=monthly_expenses,
        monthly_cash_flow=cashflow.cash_flow,
        projected_retirement_lump_sum=retirement.projected_lump_sum,
        retirement_deficit_surplus=retirement.monthly_deficit_surplus,
        is_retirement_deficit=retirement.is_deficit,
        years_to_retirement=retirement.years_to_retirement,
        current_tax=tax.current.total_tax,
        optimized_tax=tax.optimized.total_tax,
        tax_savings=tax.savings,
        investment_properties=totals.investment_properties,
        total_property_value=totals.total_property_value,
        total_property_debt=totals.total_property_debt,
        property_equity=totals.property_equity,
        recommendations=recommendations,
    )
    return ClientAnalysis(
        summary=summary,
        totals=totals,
        cashflow=cashflow,
        tax=tax,
        retirement=retirement,
        serviceability=serviceability,
        client=client,
    )


def compute_summary(
    client: ClientRecord | None,
    assumptions: SharedAssumptions = DEFAULT_ASSUMPTIONS,
    *,
    rules: TaxRules = DEFAULT_TAX_RULES,
    logger: Logger | None = None,
) -> FinancialSummary:
    """Return the financial summary for one client.

    Pure and deterministic: identical inputs give identical summaries.
    """
    return analyze_client(
        client,
        assumptions,
        rules=rules,
        logger=logger,
    ).summary


__all__ = ["ClientAnalysis", "analyze_client", "compute_summary"]

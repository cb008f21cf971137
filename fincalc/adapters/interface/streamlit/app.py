"""Streamlit summary page."""

from collections.abc import Sequence
from decimal import Decimal

import altair as alt
import streamlit as st

from fincalc.application.ports.client_repository import ClientListing
from fincalc.application.use_cases.export_summary_report import (
    ReportExportResult,
)
from fincalc.domain.errors import MissingClientError
from fincalc.domain.models.loan import LoanAssessment, LoanProposal
from fincalc.domain.models.summary import FinancialSummary
from fincalc.domain.services.aggregation import ClientAnalysis
from fincalc.domain.services.combine import combine_summaries
from fincalc.infrastructure.container import (
    build_client_repository,
    build_client_summary_use_case,
    build_export_report_use_case,
    build_loan_assessment_use_case,
)

NO_PARTNER = "None"

ASSET_CLASS_LABELS = {
    "property": "Property",
    "vehicle": "Vehicles",
    "savings": "Savings",
    "shares": "Shares",
    "super": "Superannuation",
    "other_assets": "Other",
}


def _fetch_clients() -> Sequence[ClientListing]:
    """Fetch the stored clients for the picker."""
    return build_client_repository().list_clients()


@st.cache_data(show_spinner=False, ttl=60)
def _load_clients() -> Sequence[ClientListing]:
    """Cached wrapper around _fetch_clients for Streamlit sessions."""
    return _fetch_clients()


def _fetch_analysis(client_id: str) -> ClientAnalysis:
    """Run the aggregation engine for one client."""
    return build_client_summary_use_case().analyze(client_id)


def _assess_loan(
    analysis: ClientAnalysis,
    proposal: LoanProposal,
) -> LoanAssessment:
    """Run the lender tests for a proposed loan."""
    return build_loan_assessment_use_case().execute(analysis, proposal)


def _export_report(
    summary: FinancialSummary,
    contact: dict[str, str],
) -> ReportExportResult:
    """Render the PDF report for the displayed summary."""
    return build_export_report_use_case().execute(summary, contact=contact)


def _format_currency(value: Decimal) -> str:
    """Format currency values for display."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def _render_metrics(summary: FinancialSummary) -> None:
    """Render the headline metric cards."""
    assets_col, liabilities_col, net_worth_col = st.columns(3)
    assets_col.metric("Total Assets", _format_currency(summary.total_assets))
    liabilities_col.metric(
        "Total Liabilities",
        _format_currency(summary.total_liabilities),
    )
    net_worth_col.metric("Net Worth", _format_currency(summary.net_worth))

    income_col, expenses_col, cash_flow_col = st.columns(3)
    income_col.metric(
        "Monthly Income",
        _format_currency(summary.monthly_income),
    )
    expenses_col.metric(
        "Monthly Expenses",
        _format_currency(summary.monthly_expenses),
    )
    cash_flow_col.metric(
        "Monthly Cash Flow",
        _format_currency(summary.monthly_cash_flow),
    )

    lump_col, gap_col, tax_col = st.columns(3)
    lump_col.metric(
        "Projected Retirement Lump Sum",
        _format_currency(summary.projected_retirement_lump_sum),
        f"{summary.years_to_retirement} years to retirement",
        delta_color="off",
    )
    gap_col.metric(
        "Retirement Deficit" if summary.is_retirement_deficit
        else "Retirement Surplus",
        _format_currency(summary.retirement_deficit_surplus),
    )
    tax_col.metric(
        "Current Tax",
        _format_currency(summary.current_tax),
        f"{_format_currency(summary.tax_savings)} potential savings",
        delta_color="off",
    )


def _prepare_asset_chart_data(
    asset_classes: dict[str, Decimal],
) -> list[dict[str, str | float]]:
    """Prepare donut chart rows for every non-zero asset class."""
    total = sum(asset_classes.values(), Decimal("0"))
    data: list[dict[str, str | float]] = []
    for name, amount in sorted(
        asset_classes.items(),
        key=lambda item: item[1],
        reverse=True,
    ):
        if amount <= 0:
            continue
        share = amount / total * Decimal("100") if total else Decimal("0")
        data.append(
            {
                "category": ASSET_CLASS_LABELS.get(name, name),
                "amount": float(amount),
                "amount_label": _format_currency(amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _render_asset_chart(
    analysis: ClientAnalysis,
    title: str,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of resolved asset classes."""
    data = _prepare_asset_chart_data(analysis.totals.asset_classes)
    st.subheader(title)
    if not data:
        st.info("No assets recorded for this client.")
        return

    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(
        width=chart_size,
        height=chart_size,
    )
    st.altair_chart(chart, width="stretch")


def _render_recommendations(summary: FinancialSummary) -> None:
    st.subheader("Recommendations")
    st.markdown("\n".join(f"- {item}" for item in summary.recommendations))


def _render_serviceability(analysis: ClientAnalysis) -> None:
    """Render the investment property capacity of one client."""
    result = analysis.serviceability
    if not result.is_viable:
        st.info(result.reason or "No borrowing capacity available.")
        return
    value_col, loan_col, payment_col = st.columns(3)
    value_col.metric(
        "Max Property Value",
        _format_currency(result.max_property_value),
    )
    loan_col.metric("Max Loan", _format_currency(result.max_loan_amount))
    payment_col.metric(
        "Monthly Repayment Capacity",
        _format_currency(result.max_monthly_payment),
    )


def _prepare_holdings_rows(
    analysis: ClientAnalysis,
) -> list[dict[str, str]]:
    """Prepare table rows: linked pairs first, then standalone items."""
    rows: list[dict[str, str]] = []
    for pair in analysis.pairs:
        rows.append(
            {
                "Asset": pair.asset.name,
                "Value": _format_currency(pair.asset.current_value),
                "Liability": pair.liability.name,
                "Balance": _format_currency(pair.liability.balance),
                "Equity": _format_currency(
                    pair.asset.current_value - pair.liability.balance
                ),
            }
        )
    assets, liabilities = analysis.unpaired
    for asset in assets:
        rows.append(
            {
                "Asset": asset.name,
                "Value": _format_currency(asset.current_value),
                "Liability": "",
                "Balance": "",
                "Equity": _format_currency(asset.current_value),
            }
        )
    for liability in liabilities:
        rows.append(
            {
                "Asset": "",
                "Value": "",
                "Liability": liability.name,
                "Balance": _format_currency(liability.balance),
                "Equity": _format_currency(-liability.balance),
            }
        )
    return rows


def _render_holdings(analysis: ClientAnalysis) -> None:
    """Render assets grouped with the loans that finance them."""
    st.subheader(f"Holdings: {analysis.summary.client_name}")
    rows = _prepare_holdings_rows(analysis)
    if not rows:
        st.info("No itemised assets or liabilities recorded.")
        return
    st.dataframe(rows, width="stretch", hide_index=True)


def _render_loan_assessment(analysis: ClientAnalysis) -> None:
    """Render the proposed loan form and its lender assessment."""
    st.subheader("Loan Application")
    amount_col, rate_col, term_col = st.columns(3)
    amount = amount_col.number_input(
        "Loan amount",
        min_value=0.0,
        value=0.0,
        step=10000.0,
    )
    rate = rate_col.number_input(
        "Interest rate (%)",
        min_value=0.0,
        max_value=30.0,
        value=6.0,
        step=0.25,
    )
    term = term_col.number_input(
        "Term (years)",
        min_value=1,
        max_value=40,
        value=30,
        step=1,
    )
    if amount <= 0:
        st.caption("Enter a loan amount to run the lender tests.")
        return

    proposal = LoanProposal(
        amount=Decimal(str(amount)),
        annual_interest_rate=Decimal(str(rate)) / Decimal("100"),
        term_years=int(term),
    )
    result = _assess_loan(analysis, proposal)
    repayment_col, ratio_col, stress_col = st.columns(3)
    repayment_col.metric(
        "Monthly Repayment",
        _format_currency(result.monthly_repayment),
    )
    ratio_col.metric(
        "Serviceability Ratio",
        "n/a"
        if result.serviceability_ratio is None
        else f"{result.serviceability_ratio * 100:.1f}%",
    )
    stress_col.metric(
        "Stressed Repayment",
        _format_currency(result.stress_test_repayment),
    )
    if result.can_afford:
        st.success(f"{result.assessment}: all lender tests passed.")
    else:
        st.error(f"{result.assessment}: " + "; ".join(result.reasons))


def _contact_for(listing: ClientListing | None) -> dict[str, str]:
    if listing is None:
        return {}
    return {
        "firstName": listing.first_name,
        "lastName": listing.last_name,
        "email": listing.email,
    }


def _render_report_export(
    summary: FinancialSummary,
    listing: ClientListing | None,
) -> None:
    """Render the PDF export button and, once built, the download."""
    st.subheader("Report")
    if not st.button("Generate PDF report"):
        return
    result = _export_report(summary, _contact_for(listing))
    if not result.success or result.content is None:
        st.error(result.message)
        return
    st.success(result.message)
    st.download_button(
        "Download PDF report",
        data=result.content,
        file_name="financial-summary.pdf",
        mime="application/pdf",
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Financial Summary", layout="wide")
    st.title("Financial Summary")

    clients = _load_clients()
    if not clients:
        st.warning("No clients found. Add a client record first.")
        return

    labels = {client.id: client.display_name for client in clients}
    client_id = st.sidebar.selectbox(
        "Client",
        options=list(labels),
        format_func=lambda item: labels[item],
    )
    partner_id = st.sidebar.selectbox(
        "Partner",
        options=[NO_PARTNER] + [item for item in labels if item != client_id],
        format_func=lambda item: labels.get(item, item),
    )

    try:
        analysis = _fetch_analysis(client_id)
        partner = (
            _fetch_analysis(partner_id) if partner_id != NO_PARTNER else None
        )
        summary = (
            combine_summaries(analysis.summary, partner.summary)
            if partner is not None
            else analysis.summary
        )
    except MissingClientError:
        st.warning("No client selected.")
        return

    st.caption(summary.client_name)
    _render_metrics(summary)

    if partner is None:
        _render_asset_chart(analysis, "Assets by Class")
    else:
        left, right = st.columns(2)
        with left:
            _render_asset_chart(analysis, analysis.summary.client_name)
        with right:
            _render_asset_chart(partner, partner.summary.client_name)

    _render_holdings(analysis)
    if partner is not None:
        _render_holdings(partner)

    st.subheader("Investment Property Capacity")
    _render_serviceability(analysis)
    _render_loan_assessment(analysis)
    _render_recommendations(summary)

    listings = {client.id: client for client in clients}
    _render_report_export(summary, listings.get(client_id))


if __name__ == "__main__":  # pragma: no cover
    main()

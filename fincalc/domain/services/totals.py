"""Net worth and property totals from resolved holdings."""

from logging import Logger

from fincalc.domain.models.assumptions import SharedAssumptions
from fincalc.domain.models.client import ClientRecord
from fincalc.domain.models.summary import PortfolioTotals
from fincalc.domain.services.resolver import (
    ASSET_QUANTITIES,
    LIABILITY_QUANTITIES,
    resolve_many,
)
from fincalc.domain.services.validation import validate_resolved_sign
from fincalc.utils.decimal_utils import ZERO


def compute_portfolio_totals(
    client: ClientRecord,
    assumptions: SharedAssumptions,
    *,
    logger: Logger | None = None,
) -> PortfolioTotals:
    """Compute asset, liability and property totals for a client.

    Args:
        client: Client record to aggregate.
        assumptions: Shared assumptions carrying the global fallbacks.
        logger: Optional logger used for sign warnings.

    Returns:
        PortfolioTotals: Resolved classes and derived totals.
    """
    assets = resolve_many(client, ASSET_QUANTITIES, assumptions)
    liabilities = resolve_many(client, LIABILITY_QUANTITIES, assumptions)
    for resolved in (*assets.values(), *liabilities.values()):
        validate_resolved_sign(resolved, logger)

    total_assets = sum((item.value for item in assets.values()), ZERO)
    total_liabilities = sum(
        (item.value for item in liabilities.values()),
        ZERO,
    )
    property_value = assets["property"].value
    property_debt = liabilities["mortgage"].value

    return PortfolioTotals(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=total_assets - total_liabilities,
        total_property_value=property_value,
        total_property_debt=property_debt,
        property_equity=property_value - property_debt,
        investment_properties=assets["property"].count,
        asset_classes={name: item.value for name, item in assets.items()},
        liability_classes={
            name: item.value for name, item in liabilities.items()
        },
    )


__all__ = ["compute_portfolio_totals"]

"""Presentation grouping of assets with the liabilities financing them."""

from fincalc.domain.models.client import (
    Asset,
    ClientRecord,
    FinancialPair,
    Liability,
)


def build_financial_pairs(client: ClientRecord) -> list[FinancialPair]:
    """Group each asset with its liability when the link is mutual.

    Pairing only affects presentation; totals are computed from the
    underlying arrays either way.

    Args:
        client: Client record to inspect.

    Returns:
        list[FinancialPair]: Pairs in asset order.
    """
    liabilities = {item.id: item for item in client.liabilities if item.id}
    pairs: list[FinancialPair] = []
    for asset in client.assets:
        liability = liabilities.get(asset.linked_liability_id or "")
        if liability is None or liability.linked_asset_id != asset.id:
            continue
        pairs.append(
            FinancialPair(
                id=f"{asset.id}:{liability.id}",
                asset=asset,
                liability=liability,
            )
        )
    return pairs


def unpaired_items(
    client: ClientRecord,
) -> tuple[list[Asset], list[Liability]]:
    """Return the assets and liabilities not grouped into a pair."""
    pairs = build_financial_pairs(client)
    paired_assets = {pair.asset.id for pair in pairs}
    paired_liabilities = {pair.liability.id for pair in pairs}
    return (
        [item for item in client.assets if item.id not in paired_assets],
        [
            item
            for item in client.liabilities
            if item.id not in paired_liabilities
        ],
    )


__all__ = ["build_financial_pairs", "unpaired_items"]

"""Domain validation helpers."""

from logging import Logger

from fincalc.domain.models.client import ClientRecord
from fincalc.domain.services.resolver import ResolvedQuantity


def validate_resolved_sign(
    resolved: ResolvedQuantity,
    logger: Logger | None,
) -> None:
    """Warn when a resolved holding is negative.

    Args:
        resolved: Resolved asset or liability quantity.
        logger: Logger used for warnings.
    """
    if logger is not None and resolved.value < 0:
        logger.warning(
            f"Resolved {resolved.name} is negative "
            f"(source={resolved.source.value}): {resolved.value}"
        )


def validate_links(client: ClientRecord, logger: Logger | None) -> list[str]:
    """Return ids of assets whose linked liability does not link back.

    Args:
        client: Client record to inspect.
        logger: Logger used for warnings.

    Returns:
        list[str]: Asset ids with a one-sided or dangling link.
    """
    liabilities = {liability.id: liability for liability in client.liabilities}
    broken: list[str] = []
    for asset in client.assets:
        if not asset.linked_liability_id:
            continue
        liability = liabilities.get(asset.linked_liability_id)
        if liability is None or liability.linked_asset_id != asset.id:
            broken.append(asset.id)
    if broken and logger is not None:
        logger.warning(f"Asset/liability links are not mutual: {broken}")
    return broken


__all__ = ["validate_resolved_sign", "validate_links"]

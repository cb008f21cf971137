"""Field resolution across structured, legacy and shared data sources.

Every logical quantity is resolved through the same precedence chain:

1. structured ``assets`` / ``liabilities`` entries of the matching type,
2. the named legacy flat fields,
3. the shared fallback carried by ``SharedAssumptions``,
4. zero.

Resolution stops at the first non-empty tier. Tiers are never summed
together, which keeps a holding entered on both the new and the old forms
from being counted twice.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from fincalc.domain.models.assumptions import SharedAssumptions
from fincalc.domain.models.client import ClientRecord
from fincalc.utils.decimal_utils import ZERO


class ResolutionSource(str, Enum):
    """Tier a resolved quantity came from."""

    STRUCTURED = "structured"
    LEGACY = "legacy"
    SHARED = "shared"
    DEFAULT = "default"


@dataclass(frozen=True)
class QuantitySpec:
    """How one logical quantity maps onto the client record.

    Attributes:
        name: Quantity identifier.
        structured_kind: ``"asset"``, ``"liability"`` or None when the
            quantity has no structured representation.
        structured_type: Asset or liability type matched in that tier.
        legacy_slots: Legacy field groups. Names inside one slot are aliases
            of the same holding (first non-zero wins); slots are summed.
    """

    name: str
    structured_kind: str | None = None
    structured_type: str | None = None
    legacy_slots: tuple[tuple[str, ...], ...] = ()


@dataclass(frozen=True)
class ResolvedQuantity:
    """Value of a quantity tagged with the tier that produced it."""

    name: str
    value: Decimal
    source: ResolutionSource
    count: int = 0


_INVESTMENT_SLOTS = tuple(range(1, 5))

QUANTITY_CATALOG: dict[str, QuantitySpec] = {
    spec.name: spec
    for spec in (
        QuantitySpec(
            "property",
            "asset",
            "property",
            (("homeValue",),)
            + tuple((f"investment{i}Value",) for i in _INVESTMENT_SLOTS),
        ),
        QuantitySpec("vehicle", "asset", "vehicle", (("vehicleValue",),)),
        QuantitySpec(
            "savings",
            "asset",
            "savings",
            (("savingsValue", "currentSavings"),),
        ),
        QuantitySpec(
            "shares",
            "asset",
            "shares",
            (("sharesTotalValue", "currentShares"),),
        ),
        QuantitySpec(
            "super",
            "asset",
            "super",
            (("superFundValue", "currentSuper"),),
        ),
        QuantitySpec("other_assets", "asset", "other"),
        QuantitySpec(
            "mortgage",
            "liability",
            "mortgage",
            (("homeBalance",),)
            + tuple((f"investment{i}Balance",) for i in _INVESTMENT_SLOTS),
        ),
        QuantitySpec(
            "personal_loan",
            "liability",
            "personal-loan",
            (("personalLoanBalance",),),
        ),
        QuantitySpec(
            "credit_card",
            "liability",
            "credit-card",
            (("creditCardBalance",),),
        ),
        QuantitySpec(
            "hecs",
            "liability",
            "hecs",
            (("hecsBalance", "helpDebt"),),
        ),
        QuantitySpec("other_liabilities", "liability", "other"),
        QuantitySpec(
            "employment_income",
            legacy_slots=(
                (
                    "annualIncome",
                    "grossSalary",
                    "grossIncome",
                    "employmentIncome",
                ),
            ),
        ),
        QuantitySpec("rental_income", legacy_slots=(("rentalIncome",),)),
        QuantitySpec("investment_income", legacy_slots=(("dividends",),)),
        QuantitySpec(
            "franked_dividends",
            legacy_slots=(("frankedDividends",),),
        ),
        QuantitySpec("other_income", legacy_slots=(("otherIncome",),)),
    )
}

ASSET_QUANTITIES = (
    "property",
    "vehicle",
    "savings",
    "shares",
    "super",
    "other_assets",
)
LIABILITY_QUANTITIES = (
    "mortgage",
    "personal_loan",
    "credit_card",
    "hecs",
    "other_liabilities",
)


def resolve_quantity(
    client: ClientRecord,
    quantity: str,
    assumptions: SharedAssumptions | None = None,
) -> ResolvedQuantity:
    """Resolve one logical quantity through the precedence chain.

    Args:
        client: Client record to read from.
        quantity: Identifier from ``QUANTITY_CATALOG``.
        assumptions: Shared assumptions carrying the global fallbacks.

    Returns:
        ResolvedQuantity: Value and the tier it was taken from.

    Raises:
        KeyError: If the quantity is not part of the catalogue.
    """
    spec = QUANTITY_CATALOG[quantity]

    structured = _structured_values(client, spec)
    if structured:
        return ResolvedQuantity(
            quantity,
            sum(structured, ZERO),
            ResolutionSource.STRUCTURED,
            len(structured),
        )

    legacy = [
        value
        for value in (_slot_value(client, slot) for slot in spec.legacy_slots)
        if value != 0
    ]
    if legacy:
        return ResolvedQuantity(
            quantity,
            sum(legacy, ZERO),
            ResolutionSource.LEGACY,
            len(legacy),
        )

    shared = assumptions.fallback(quantity) if assumptions else ZERO
    if shared != 0:
        return ResolvedQuantity(quantity, shared, ResolutionSource.SHARED, 1)

    return ResolvedQuantity(quantity, ZERO, ResolutionSource.DEFAULT, 0)


def resolve_value(
    client: ClientRecord,
    quantity: str,
    assumptions: SharedAssumptions | None = None,
) -> Decimal:
    """Return only the resolved value of a quantity."""
    return resolve_quantity(client, quantity, assumptions).value


def resolve_many(
    client: ClientRecord,
    quantities: tuple[str, ...],
    assumptions: SharedAssumptions | None = None,
) -> dict[str, ResolvedQuantity]:
    """Resolve several quantities, keyed by name."""
    return {
        quantity: resolve_quantity(client, quantity, assumptions)
        for quantity in quantities
    }


def _structured_values(
    client: ClientRecord,
    spec: QuantitySpec,
) -> list[Decimal]:
    if spec.structured_kind == "asset":
        return [
            asset.current_value
            for asset in client.assets
            if asset.type == spec.structured_type
        ]
    if spec.structured_kind == "liability":
        return [
            liability.balance
            for liability in client.liabilities
            if liability.type == spec.structured_type
        ]
    return []


def _slot_value(client: ClientRecord, aliases: tuple[str, ...]) -> Decimal:
    for alias in aliases:
        value = client.flat_value(alias)
        if value != 0:
            return value
    return ZERO


__all__ = [
    "ResolutionSource",
    "QuantitySpec",
    "ResolvedQuantity",
    "QUANTITY_CATALOG",
    "ASSET_QUANTITIES",
    "LIABILITY_QUANTITIES",
    "resolve_quantity",
    "resolve_value",
    "resolve_many",
]

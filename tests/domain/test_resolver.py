"""Tests for quantity resolution across data tiers."""

from decimal import Decimal

import pytest

from fincalc.domain.models.assumptions import SharedAssumptions
from fincalc.domain.models.client import ClientRecord
from fincalc.domain.services.resolver import (
    ResolutionSource,
    resolve_quantity,
    resolve_value,
)


def test_structured_tier_wins_over_legacy_fields() -> None:
    """A structured entry of the matching type should shadow legacy data."""
    client = ClientRecord.from_mapping(
        {
            "assets": [
                {"id": "s1", "type": "super", "currentValue": 50000},
            ],
            "superFundValue": 99999,
        }
    )

    resolved = resolve_quantity(client, "super")

    assert resolved.value == Decimal("50000")
    assert resolved.source is ResolutionSource.STRUCTURED
    assert resolved.count == 1


def test_structured_entries_of_a_type_are_summed() -> None:
    """Several structured entries of one type should be summed."""
    client = ClientRecord.from_mapping(
        {
            "assets": [
                {"id": "p1", "type": "property", "currentValue": 800000},
                {"id": "p2", "type": "property", "currentValue": 450000},
                {"id": "c1", "type": "vehicle", "currentValue": 30000},
            ],
            "homeValue": 1,
        }
    )

    resolved = resolve_quantity(client, "property")

    assert resolved.value == Decimal("1250000")
    assert resolved.count == 2


def test_zero_valued_structured_entry_still_claims_the_quantity() -> None:
    """An existing structured entry stops resolution even when zero."""
    client = ClientRecord.from_mapping(
        {
            "assets": [{"id": "s1", "type": "savings", "currentValue": 0}],
            "savingsValue": 20000,
        }
    )

    resolved = resolve_quantity(client, "savings")

    assert resolved.value == Decimal("0")
    assert resolved.source is ResolutionSource.STRUCTURED


def test_legacy_aliases_do_not_double_count() -> None:
    """Aliases of one holding should resolve to the first non-zero value."""
    first_alias = ClientRecord.from_mapping(
        {"savingsValue": 100, "currentSavings": 5000}
    )
    second_alias = ClientRecord.from_mapping(
        {"savingsValue": 0, "currentSavings": 5000}
    )

    assert resolve_value(first_alias, "savings") == Decimal("100")
    assert resolve_value(second_alias, "savings") == Decimal("5000")


def test_legacy_property_slots_are_summed() -> None:
    """Home and investment property slots are separate holdings."""
    client = ClientRecord.from_mapping(
        {
            "homeValue": 500000,
            "investment1Value": 300000,
            "investment3Value": "250000",
            "homeBalance": 200000,
            "investment1Balance": 240000,
        }
    )

    property_value = resolve_quantity(client, "property")
    mortgage = resolve_quantity(client, "mortgage")

    assert property_value.value == Decimal("1050000")
    assert property_value.source is ResolutionSource.LEGACY
    assert property_value.count == 3
    assert mortgage.value == Decimal("440000")


def test_employment_income_aliases() -> None:
    """Any of the income aliases should feed employment income."""
    client = ClientRecord.from_mapping({"grossSalary": 88000})

    assert resolve_value(client, "employment_income") == Decimal("88000")


def test_shared_fallback_applies_only_without_client_data() -> None:
    """Shared fallbacks fill gaps but never override client data."""
    assumptions = SharedAssumptions(fallbacks={"super": Decimal("42000")})
    empty = ClientRecord()
    legacy = ClientRecord.from_mapping({"currentSuper": 70000})

    shared = resolve_quantity(empty, "super", assumptions)
    own = resolve_quantity(legacy, "super", assumptions)

    assert shared.value == Decimal("42000")
    assert shared.source is ResolutionSource.SHARED
    assert own.value == Decimal("70000")
    assert own.source is ResolutionSource.LEGACY


def test_missing_everywhere_resolves_to_zero() -> None:
    """A quantity with no data in any tier should be zero."""
    resolved = resolve_quantity(ClientRecord(), "hecs", SharedAssumptions())

    assert resolved.value == Decimal("0")
    assert resolved.source is ResolutionSource.DEFAULT
    assert resolved.count == 0


def test_unknown_quantity_raises() -> None:
    """Unknown quantity names are programming errors."""
    with pytest.raises(KeyError):
        resolve_quantity(ClientRecord(), "yacht")

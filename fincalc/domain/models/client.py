"""Domain models for advisor-entered client records."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal

from fincalc.domain.constants import (
    ASSET_TYPE_ALIASES,
    ASSET_TYPES,
    FLAT_NUMERIC_FIELDS,
    LIABILITY_TYPES,
    MAX_AGE,
    MAX_LOAN_TERM_YEARS,
)
from fincalc.utils.decimal_utils import (
    ZERO,
    coerce_decimal,
    coerce_flag,
    coerce_int,
    coerce_non_negative,
)


def _normalize_type(
    raw,
    allowed: tuple[str, ...],
    aliases: dict[str, str] | None = None,
) -> str:
    if not raw:
        return "other"
    cleaned = str(raw).strip().lower().replace("_", "-").replace(" ", "-")
    cleaned = (aliases or {}).get(cleaned, cleaned)
    return cleaned if cleaned in allowed else "other"


def _optional_str(value) -> str | None:
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None


@dataclass(frozen=True)
class Asset:
    """A structured asset holding.

    Attributes:
        id: Identifier assigned by the client form.
        name: Display name.
        current_value: Market value, never negative.
        type: One of ``ASSET_TYPES``.
        owner_occupied: True for the family home.
        linked_liability_id: Liability financing this asset, if any.
    """

    id: str
    name: str
    current_value: Decimal
    type: str
    owner_occupied: bool = False
    linked_liability_id: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping) -> "Asset":
        """Build an asset from a JSON-compatible mapping."""
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            current_value=coerce_non_negative(data.get("currentValue")),
            type=_normalize_type(
                data.get("type"), ASSET_TYPES, ASSET_TYPE_ALIASES
            ),
            owner_occupied=coerce_flag(data.get("ownerOccupied")),
            linked_liability_id=_optional_str(data.get("linkedLiabilityId")),
        )


@dataclass(frozen=True)
class Liability:
    """A structured liability such as a mortgage or credit card."""

    id: str
    name: str
    balance: Decimal
    monthly_payment: Decimal
    interest_rate: Decimal
    loan_term: int
    type: str
    term_remaining: int | None = None
    lender: str | None = None
    loan_type: str | None = None
    payment_frequency: str | None = None
    linked_asset_id: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping) -> "Liability":
        """Build a liability from a JSON-compatible mapping."""
        term_remaining = data.get("termRemaining")
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            balance=coerce_non_negative(data.get("balance")),
            monthly_payment=coerce_non_negative(data.get("monthlyPayment")),
            interest_rate=coerce_decimal(data.get("interestRate")),
            loan_term=coerce_int(data.get("loanTerm"), MAX_LOAN_TERM_YEARS),
            type=_normalize_type(data.get("type"), LIABILITY_TYPES),
            term_remaining=(
                None
                if term_remaining is None
                else coerce_int(term_remaining, MAX_LOAN_TERM_YEARS)
            ),
            lender=_optional_str(data.get("lender")),
            loan_type=_optional_str(data.get("loanType")),
            payment_frequency=_optional_str(data.get("paymentFrequency")),
            linked_asset_id=_optional_str(data.get("linkedAssetId")),
        )


@dataclass(frozen=True)
class FinancialPair:
    """An asset grouped with the liability that finances it."""

    id: str
    asset: Asset
    liability: Liability


@dataclass(frozen=True)
class ClientRecord:
    """Advisor input for one person.

    Structured holdings live in ``assets`` and ``liabilities``. Every flat
    numeric field (legacy holdings, income, expenses) is kept in
    ``flat_fields`` keyed by its form name and already coerced to Decimal.
    """

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    id: str | None = None
    assets: tuple[Asset, ...] = ()
    liabilities: tuple[Liability, ...] = ()
    flat_fields: Mapping[str, Decimal] = field(default_factory=dict)
    current_age: int = 0
    retirement_age: int = 0
    private_health_insurance: bool = False

    @property
    def full_name(self) -> str:
        """Return the display name of the client."""
        return f"{self.first_name} {self.last_name}".strip()

    def flat_value(self, name: str) -> Decimal:
        """Return a flat numeric field, zero when absent."""
        return self.flat_fields.get(name, ZERO)

    @classmethod
    def from_mapping(cls, data: Mapping) -> "ClientRecord":
        """Build a client record from a JSON-compatible mapping.

        Args:
            data: Raw record using the camelCase names of the client forms.

        Returns:
            ClientRecord: Parsed record with every numeric field coerced.
        """
        raw_assets = data.get("assets")
        raw_liabilities = data.get("liabilities")
        assets = tuple(
            Asset.from_mapping(item)
            for item in (raw_assets if isinstance(raw_assets, list) else [])
            if isinstance(item, Mapping)
        )
        liabilities = tuple(
            Liability.from_mapping(item)
            for item in (
                raw_liabilities if isinstance(raw_liabilities, list) else []
            )
            if isinstance(item, Mapping)
        )
        flat_fields = {
            name: coerce_decimal(data.get(name))
            for name in FLAT_NUMERIC_FIELDS
            if data.get(name) is not None
        }
        raw_id = data.get("id")
        return cls(
            first_name=str(data.get("firstName") or ""),
            last_name=str(data.get("lastName") or ""),
            email=str(data.get("email") or ""),
            id=None if raw_id is None else str(raw_id),
            assets=assets,
            liabilities=liabilities,
            flat_fields=flat_fields,
            current_age=coerce_int(data.get("currentAge"), MAX_AGE),
            retirement_age=coerce_int(data.get("retirementAge"), MAX_AGE),
            private_health_insurance=(
                coerce_flag(data.get("privateHealthInsurance"))
                or coerce_flag(data.get("healthInsurance"))
            ),
        )


__all__ = ["Asset", "Liability", "FinancialPair", "ClientRecord"]

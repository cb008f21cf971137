"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field, fields
from decimal import Decimal, InvalidOperation
import os

import dotenv

from fincalc.domain.models.assumptions import (
    ServiceabilitySettings,
    SharedAssumptions,
)
from fincalc.domain.services.resolver import QUANTITY_CATALOG
from fincalc.infrastructure.logging.logger import get_app_logger
from fincalc.utils.decimal_utils import MAX_EXPONENT

ENV_PREFIX = "FINCALC_"
FALLBACK_PREFIX = f"{ENV_PREFIX}FALLBACK_"


@dataclass(frozen=True)
class AssumptionSettings:
    """Planning assumptions sourced from the environment.

    Each field is read from ``FINCALC_<FIELD_NAME>``; shared fallbacks are
    read from ``FINCALC_FALLBACK_<QUANTITY>`` (for example
    ``FINCALC_FALLBACK_SUPER``).
    """

    super_growth_rate: Decimal = Decimal("0.07")
    shares_growth_rate: Decimal = Decimal("0.07")
    savings_growth_rate: Decimal = Decimal("0.07")
    drawdown_rate: Decimal = Decimal("0.04")
    retirement_income_ratio: Decimal = Decimal("0.7")
    annual_interest_rate: Decimal = Decimal("0.06")
    loan_term_years: int = 30
    max_loan_to_value: Decimal = Decimal("0.8")
    rental_yield: Decimal = Decimal("0.04")
    property_expense_rate: Decimal = Decimal("0.02")
    income_retention_ratio: Decimal = Decimal("0.7")
    rental_income_credit: Decimal = Decimal("0.75")
    fallbacks: dict[str, Decimal] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "AssumptionSettings":
        """Build settings from environment variables.

        Invalid values are logged and replaced by the default.

        Returns:
            AssumptionSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        values = {}
        for item in fields(cls):
            if item.name == "fallbacks":
                continue
            raw = os.getenv(f"{ENV_PREFIX}{item.name.upper()}")
            if raw is None or not raw.strip():
                continue
            parsed = cls._parse(raw, item.type, logger, item.name)
            if parsed is not None:
                values[item.name] = parsed

        fallbacks = {}
        for quantity in QUANTITY_CATALOG:
            raw = os.getenv(f"{FALLBACK_PREFIX}{quantity.upper()}")
            if raw is None or not raw.strip():
                continue
            parsed = cls._parse(raw, Decimal, logger, quantity)
            if parsed is not None:
                fallbacks[quantity] = parsed
        return cls(fallbacks=fallbacks, **values)

    def to_assumptions(self) -> SharedAssumptions:
        """Return the immutable assumptions passed to the engine."""
        return SharedAssumptions(
            super_growth_rate=self.super_growth_rate,
            shares_growth_rate=self.shares_growth_rate,
            savings_growth_rate=self.savings_growth_rate,
            drawdown_rate=self.drawdown_rate,
            retirement_income_ratio=self.retirement_income_ratio,
            serviceability=ServiceabilitySettings(
                annual_interest_rate=self.annual_interest_rate,
                loan_term_years=self.loan_term_years,
                max_loan_to_value=self.max_loan_to_value,
                rental_yield=self.rental_yield,
                property_expense_rate=self.property_expense_rate,
                income_retention_ratio=self.income_retention_ratio,
                rental_income_credit=self.rental_income_credit,
            ),
            fallbacks=dict(self.fallbacks),
        )

    @staticmethod
    def _parse(raw: str, kind, logger, name: str):
        """Parse one raw value, returning None when it is invalid.

        Args:
            raw: Raw environment value.
            kind: Target type, ``Decimal`` or ``int``.
            logger: Logger used for warnings.
            name: Setting name used in the warning.

        Returns:
            Decimal | int | None: Parsed finite value or None.
        """
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            logger.warning(f"Ignoring invalid value for {name}: {raw!r}")
            return None
        if not value.is_finite():
            logger.warning(f"Ignoring non-finite value for {name}: {raw!r}")
            return None
        if value and value.adjusted() > MAX_EXPONENT:
            logger.warning(f"Ignoring out-of-range value for {name}: {raw!r}")
            return None
        if kind is int:
            return int(value)
        return value


__all__ = ["AssumptionSettings", "ENV_PREFIX", "FALLBACK_PREFIX"]

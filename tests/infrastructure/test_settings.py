"""Tests for environment-driven assumption settings."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from fincalc.infrastructure import settings as settings_module
from fincalc.infrastructure.settings import AssumptionSettings


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    return logger


def test_from_env_defaults_without_variables(monkeypatch) -> None:
    """Without variables the defaults are used."""
    monkeypatch.delenv("FINCALC_DRAWDOWN_RATE", raising=False)

    assumptions = AssumptionSettings.from_env().to_assumptions()

    assert assumptions.drawdown_rate == Decimal("0.04")
    assert assumptions.serviceability.loan_term_years == 30
    assert assumptions.fallbacks == {}


def test_from_env_reads_rates_and_fallbacks(monkeypatch) -> None:
    """Prefixed variables override defaults and fill fallbacks."""
    monkeypatch.setenv("FINCALC_SUPER_GROWTH_RATE", "0.065")
    monkeypatch.setenv("FINCALC_LOAN_TERM_YEARS", "25")
    monkeypatch.setenv("FINCALC_RETIREMENT_INCOME_RATIO", "0.6")
    monkeypatch.setenv("FINCALC_FALLBACK_SUPER", "30000")

    assumptions = AssumptionSettings.from_env().to_assumptions()

    assert assumptions.super_growth_rate == Decimal("0.065")
    assert assumptions.retirement_income_ratio == Decimal("0.6")
    assert assumptions.serviceability.loan_term_years == 25
    assert assumptions.fallback("super") == Decimal("30000")


def test_from_env_ignores_invalid_values(
    monkeypatch,
    _isolate_environment,
) -> None:
    """Invalid values are logged and the default is kept."""
    monkeypatch.setenv("FINCALC_RENTAL_YIELD", "four percent")
    monkeypatch.setenv("FINCALC_FALLBACK_SAVINGS", "inf")

    settings = AssumptionSettings.from_env()

    assert settings.rental_yield == Decimal("0.04")
    assert "savings" not in settings.fallbacks
    assert _isolate_environment.warning.call_count == 2


def test_from_env_ignores_out_of_range_values(
    monkeypatch,
    _isolate_environment,
) -> None:
    """Values too large to aggregate safely keep the default."""
    monkeypatch.setenv("FINCALC_LOAN_TERM_YEARS", "1e1000000")
    monkeypatch.setenv("FINCALC_FALLBACK_SUPER", "5E+20")

    settings = AssumptionSettings.from_env()

    assert settings.loan_term_years == 30
    assert "super" not in settings.fallbacks
    _isolate_environment.warning.assert_called()
    assert "out-of-range" in _isolate_environment.warning.call_args[0][0]

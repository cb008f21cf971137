"""Rule-based advisory recommendations."""

from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal

from fincalc.domain.constants import DEFAULT_RECOMMENDATION


@dataclass(frozen=True)
class RecommendationContext:
    """Figures the recommendation rules are evaluated against."""

    annual_income: Decimal
    super_balance: Decimal
    savings_balance: Decimal
    monthly_living_expenses: Decimal
    monthly_cash_flow: Decimal
    is_retirement_deficit: bool
    total_assets: Decimal
    total_liabilities: Decimal
    credit_card_balance: Decimal
    levy_surcharge: Decimal
    work_deduction_gap: Decimal
    property_viable: bool


@dataclass(frozen=True)
class RecommendationRule:
    """A predicate and the advice emitted when it holds."""

    name: str
    applies: Callable[[RecommendationContext], bool]
    message: str


RECOMMENDATION_RULES: tuple[RecommendationRule, ...] = (
    RecommendationRule(
        "super_below_twice_income",
        lambda ctx: ctx.annual_income > 0
        and ctx.super_balance < 2 * ctx.annual_income,
        "Increase superannuation contributions through salary sacrifice",
    ),
    RecommendationRule(
        "retirement_deficit",
        lambda ctx: ctx.is_retirement_deficit,
        "Address the projected retirement income shortfall by increasing "
        "investment contributions",
    ),
    RecommendationRule(
        "negative_cash_flow",
        lambda ctx: ctx.monthly_cash_flow < 0,
        "Reduce discretionary spending to restore a positive monthly "
        "cash flow",
    ),
    RecommendationRule(
        "emergency_fund",
        lambda ctx: ctx.monthly_living_expenses > 0
        and ctx.savings_balance < 3 * ctx.monthly_living_expenses,
        "Build an emergency fund covering at least three months of "
        "living expenses",
    ),
    RecommendationRule(
        "credit_card_debt",
        lambda ctx: ctx.credit_card_balance > 0,
        "Prioritise repaying high-interest credit card debt",
    ),
    RecommendationRule(
        "high_gearing",
        lambda ctx: ctx.total_assets > 0
        and ctx.total_liabilities > ctx.total_assets / 2,
        "Review debt levels as liabilities exceed half of total assets",
    ),
    RecommendationRule(
        "work_deductions",
        lambda ctx: ctx.annual_income > 0 and ctx.work_deduction_gap > 0,
        "Maximise work-related tax deductions",
    ),
    RecommendationRule(
        "private_health",
        lambda ctx: ctx.levy_surcharge > 0,
        "Consider private health insurance to avoid the Medicare Levy "
        "Surcharge",
    ),
    RecommendationRule(
        "investment_property",
        lambda ctx: ctx.property_viable,
        "Consider an additional investment property for negative gearing "
        "benefits",
    ),
)


def build_recommendations(
    context: RecommendationContext,
    rules: tuple[RecommendationRule, ...] = RECOMMENDATION_RULES,
) -> list[str]:
    """Return advice for every rule that holds, in rule order.

    Args:
        context: Figures to evaluate.
        rules: Ordered rules to check.

    Returns:
        list[str]: Matching messages, or the single default message when
        no rule fires.
    """
    messages = [rule.message for rule in rules if rule.applies(context)]
    return messages or [DEFAULT_RECOMMENDATION]


__all__ = [
    "RecommendationContext",
    "RecommendationRule",
    "RECOMMENDATION_RULES",
    "build_recommendations",
]

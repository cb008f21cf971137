"""Domain models package."""

from .assumptions import (
    DEFAULT_ASSUMPTIONS,
    LendingPolicy,
    ServiceabilitySettings,
    SharedAssumptions,
)
from .client import Asset, ClientRecord, FinancialPair, Liability
from .loan import LoanAssessment, LoanProposal
from .summary import (
    CashflowBreakdown,
    FinancialSummary,
    PortfolioTotals,
    RetirementProjection,
    ServiceabilityResult,
)
from .tax import (
    OptimizationStrategy,
    TaxBracket,
    TaxInput,
    TaxOptimization,
    TaxResult,
    TaxRules,
)

__all__ = [
    "DEFAULT_ASSUMPTIONS",
    "LendingPolicy",
    "ServiceabilitySettings",
    "SharedAssumptions",
    "Asset",
    "ClientRecord",
    "FinancialPair",
    "Liability",
    "LoanAssessment",
    "LoanProposal",
    "CashflowBreakdown",
    "FinancialSummary",
    "PortfolioTotals",
    "RetirementProjection",
    "ServiceabilityResult",
    "OptimizationStrategy",
    "TaxBracket",
    "TaxInput",
    "TaxOptimization",
    "TaxResult",
    "TaxRules",
]

"""Domain constants for client aggregation."""

ASSET_TYPES = (
    "property",
    "vehicle",
    "savings",
    "shares",
    "super",
    "other",
)

LIABILITY_TYPES = (
    "mortgage",
    "personal-loan",
    "credit-card",
    "hecs",
    "other",
)

# Flat numeric fields still written by the older client forms.
LEGACY_HOLDING_FIELDS = (
    "homeValue",
    "homeBalance",
    "investment1Value",
    "investment1Balance",
    "investment2Value",
    "investment2Balance",
    "investment3Value",
    "investment3Balance",
    "investment4Value",
    "investment4Balance",
    "vehicleValue",
    "savingsValue",
    "currentSavings",
    "superFundValue",
    "currentSuper",
    "sharesTotalValue",
    "currentShares",
    "creditCardBalance",
    "personalLoanBalance",
    "hecsBalance",
    "helpDebt",
)

INCOME_FIELDS = (
    "annualIncome",
    "grossSalary",
    "grossIncome",
    "employmentIncome",
    "rentalIncome",
    "dividends",
    "frankedDividends",
    "capitalGains",
    "otherIncome",
)

EXPENSE_FIELDS = (
    "monthlyExpenses",
    "workRelatedExpenses",
    "investmentExpenses",
    "rentalExpenses",
    "vehicleExpenses",
    "homeOfficeExpenses",
    "charityDonations",
    "superContributions",
)

FLAT_NUMERIC_FIELDS = LEGACY_HOLDING_FIELDS + INCOME_FIELDS + EXPENSE_FIELDS

# Alternative type names written by some client forms.
ASSET_TYPE_ALIASES = {"cash": "savings"}

MAX_AGE = 120
MAX_LOAN_TERM_YEARS = 100

# Repayments per year for liability payment frequencies.
PAYMENT_FREQUENCIES = {
    "W": 52,
    "WEEKLY": 52,
    "F": 26,
    "FORTNIGHTLY": 26,
    "M": 12,
    "MONTHLY": 12,
}

DEFAULT_RECOMMENDATION = "Continue current financial strategy"


__all__ = [
    "ASSET_TYPES",
    "LIABILITY_TYPES",
    "ASSET_TYPE_ALIASES",
    "MAX_AGE",
    "MAX_LOAN_TERM_YEARS",
    "LEGACY_HOLDING_FIELDS",
    "INCOME_FIELDS",
    "EXPENSE_FIELDS",
    "FLAT_NUMERIC_FIELDS",
    "PAYMENT_FREQUENCIES",
    "DEFAULT_RECOMMENDATION",
]

"""Domain services package."""

from .balance import apply_transaction, revert_transaction, signed_amount
from .budget import (
    compute_budget_percentage,
    compute_budget_summary,
    estimate_monthly_income,
)
from .periods import month_bounds, period_bounds
from .validation import (
    build_config,
    validate_amount,
    validate_balance,
    validate_transaction_type,
)

__all__ = [
    "apply_transaction",
    "revert_transaction",
    "signed_amount",
    "compute_budget_percentage",
    "compute_budget_summary",
    "estimate_monthly_income",
    "month_bounds",
    "period_bounds",
    "build_config",
    "validate_amount",
    "validate_balance",
    "validate_transaction_type",
]

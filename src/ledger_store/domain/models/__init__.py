"""Domain models package."""

from .finance import BudgetSummary, CategoryExpense
from .ledger import DEFAULT_CONFIG, Account, LedgerConfig, Transaction

__all__ = [
    "Account",
    "Transaction",
    "LedgerConfig",
    "DEFAULT_CONFIG",
    "BudgetSummary",
    "CategoryExpense",
]

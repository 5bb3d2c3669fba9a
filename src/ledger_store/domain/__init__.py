"""Domain package for ledger rules and core models."""

from .constants import EXPENSE, INCOME, TRANSACTION_TYPES
from .errors import (
    AccountNotFoundError,
    InvalidAccountError,
    InvalidConfigError,
    InvalidPeriodError,
    InvalidTransactionError,
    LedgerStoreError,
    TransactionNotFoundError,
)
from .models import (
    DEFAULT_CONFIG,
    Account,
    BudgetSummary,
    CategoryExpense,
    LedgerConfig,
    Transaction,
)

__all__ = [
    "EXPENSE",
    "INCOME",
    "TRANSACTION_TYPES",
    "AccountNotFoundError",
    "InvalidAccountError",
    "InvalidConfigError",
    "InvalidPeriodError",
    "InvalidTransactionError",
    "LedgerStoreError",
    "TransactionNotFoundError",
    "Account",
    "BudgetSummary",
    "CategoryExpense",
    "DEFAULT_CONFIG",
    "LedgerConfig",
    "Transaction",
]

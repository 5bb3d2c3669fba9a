"""Domain constants for the ledger."""

from decimal import Decimal

INCOME = "income"
EXPENSE = "expense"
TRANSACTION_TYPES = (INCOME, EXPENSE)

PERIOD_TODAY = "today"
PERIOD_MONTH = "month"
EXPENSE_PERIODS = (PERIOD_TODAY, PERIOD_MONTH)

DEFAULT_ACCOUNT_COLOR = "#64748b"

# (name, initial balance, color) seeded into an empty store.
DEFAULT_ACCOUNTS = (
    ("Nubank", Decimal("1500.00"), "#8B5CF6"),
    ("Carteira", Decimal("150.00"), "#10B981"),
)

CONFIG_ROW_ID = 1
DEFAULT_DAILY_RATE = Decimal("100")
DEFAULT_DAYS_PER_WEEK = 5
DEFAULT_MANUAL_OVERRIDE = False
DEFAULT_MANUAL_AMOUNT = Decimal("3000")

WEEKS_PER_MONTH = Decimal("4.33")

DEFAULT_TRANSACTIONS_LIMIT = 100


__all__ = [
    "INCOME",
    "EXPENSE",
    "TRANSACTION_TYPES",
    "PERIOD_TODAY",
    "PERIOD_MONTH",
    "EXPENSE_PERIODS",
    "DEFAULT_ACCOUNT_COLOR",
    "DEFAULT_ACCOUNTS",
    "CONFIG_ROW_ID",
    "DEFAULT_DAILY_RATE",
    "DEFAULT_DAYS_PER_WEEK",
    "DEFAULT_MANUAL_OVERRIDE",
    "DEFAULT_MANUAL_AMOUNT",
    "WEEKS_PER_MONTH",
    "DEFAULT_TRANSACTIONS_LIMIT",
]

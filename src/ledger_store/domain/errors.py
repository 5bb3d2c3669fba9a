"""Typed errors raised inside the ledger.

The LedgerStore call surface converts these into neutral return values, so
only repositories, domain services and use cases see them.
"""


class LedgerStoreError(Exception):
    """Base class for ledger failures."""


class AccountNotFoundError(LedgerStoreError):
    """Raised when an operation references an unknown account id."""

    def __init__(self, account_id: int) -> None:
        super().__init__(f"Account not found: {account_id}")
        self.account_id = account_id


class TransactionNotFoundError(LedgerStoreError):
    """Raised when an operation references an unknown transaction id."""

    def __init__(self, transaction_id: int) -> None:
        super().__init__(f"Transaction not found: {transaction_id}")
        self.transaction_id = transaction_id


class InvalidTransactionError(LedgerStoreError):
    """Raised when transaction fields fail validation."""


class InvalidAccountError(LedgerStoreError):
    """Raised when account fields fail validation."""


class InvalidPeriodError(LedgerStoreError):
    """Raised for an unsupported expense period name."""


class InvalidConfigError(LedgerStoreError):
    """Raised when income estimation settings fail validation."""


__all__ = [
    "LedgerStoreError",
    "AccountNotFoundError",
    "TransactionNotFoundError",
    "InvalidTransactionError",
    "InvalidAccountError",
    "InvalidPeriodError",
    "InvalidConfigError",
]

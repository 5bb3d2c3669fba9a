"""Port for reading and writing ledger records."""

from datetime import datetime
from decimal import Decimal
from typing import Protocol

from ledger_store.domain.models import Account, LedgerConfig, Transaction


class LedgerRepositoryPort(Protocol):
    """Port exposing persistence of accounts, transactions and config.

    Implementations raise LedgerStoreError subclasses or storage errors;
    they never convert failures into neutral values.
    """

    def ensure_schema(self) -> None:
        """Create the ledger tables when missing."""

    def seed_defaults(self, now: datetime) -> tuple[bool, int]:
        """Insert the default config row and accounts when absent.

        Returns:
            tuple[bool, int]: Whether config was seeded, accounts inserted.
        """

    def fetch_accounts(self) -> list[Account]:
        """Return accounts in creation order."""

    def insert_account(
        self,
        name: str,
        balance: Decimal,
        color: str,
        now: datetime,
    ) -> int:
        """Insert an account and return its id."""

    def set_account_balance(self, account_id: int, balance: Decimal) -> None:
        """Overwrite the balance of an account."""

    def remove_account(self, account_id: int) -> int:
        """Delete an account with its transactions.

        Returns:
            int: Number of transactions removed with the account.
        """

    def fetch_transactions(self, limit: int) -> list[Transaction]:
        """Return the newest transactions first."""

    def record_transaction(
        self,
        description: str,
        amount: Decimal,
        tx_type: str,
        category: str,
        account_id: int,
        account_name: str | None,
        now: datetime,
    ) -> int:
        """Insert a transaction and apply its balance delta atomically."""

    def remove_transaction(self, transaction_id: int) -> Transaction:
        """Delete a transaction and revert its balance delta atomically."""

    def sum_expenses(self, start: datetime, end: datetime) -> Decimal:
        """Return the expense total dated within ``[start, end)``."""

    def sum_expenses_by_category(
        self,
        start: datetime,
        end: datetime,
    ) -> dict[str, Decimal]:
        """Return expense totals by category, largest first."""

    def fetch_config(self) -> LedgerConfig | None:
        """Return the singleton config row when present."""

    def save_config(self, config: LedgerConfig) -> None:
        """Overwrite the singleton config row."""

    def close(self) -> None:
        """Release storage resources."""


__all__ = ["LedgerRepositoryPort"]

"""Call surface of the ledger store consumed by UI layers.

Every public method is fail-soft: repository and storage errors are logged
and turned into a neutral value (None, False, zero, an empty collection or
the default config), so callers never handle an exception from a store call.
The repository underneath raises typed LedgerStoreError subclasses, which
keeps the reason for a failure in the logs.
"""

from datetime import datetime
from decimal import Decimal
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError

from ledger_store.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from ledger_store.application.use_cases.initialize_ledger import (
    InitializeLedgerUseCase,
)
from ledger_store.domain.constants import (
    DEFAULT_ACCOUNT_COLOR,
    DEFAULT_TRANSACTIONS_LIMIT,
    PERIOD_MONTH,
)
from ledger_store.domain.errors import LedgerStoreError
from ledger_store.domain.models import (
    DEFAULT_CONFIG,
    Account,
    LedgerConfig,
    Transaction,
)
from ledger_store.domain.services.periods import period_bounds
from ledger_store.domain.services.validation import (
    build_config,
    validate_balance,
)
from ledger_store.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


_STORE_ERRORS = (LedgerStoreError, SQLAlchemyError)


class LedgerStore:
    """Persistent store of accounts, transactions and income config.

    The store is constructed explicitly around a repository and closed
    explicitly; it can also be used as a context manager.
    """

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        usage_logger=None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the store.

        Args:
            repository: Port persisting ledger records.
            logger: Optional logger for failures and diagnostics.
            usage_logger: Optional logger auditing successful mutations.
            clock: Callable returning the current local time.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._clock = clock

    def __enter__(self) -> "LedgerStore":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the storage engine."""
        try:
            self._repository.close()
        except _STORE_ERRORS as exc:
            self._logger.error(f"Failed to close ledger store: {exc}")

    def init_database(self) -> bool:
        """Create tables and seed defaults; safe to call repeatedly.

        Returns:
            bool: True when the store is ready, False if initialization failed.
        """
        use_case = InitializeLedgerUseCase(
            self._repository,
            logger=self._logger,
            clock=self._clock,
        )
        try:
            use_case.run()
        except _STORE_ERRORS as exc:
            self._logger.error(f"Failed to initialize ledger database: {exc}")
            return False
        return True

    # Accounts

    def get_accounts(self) -> list[Account]:
        """Return all accounts in creation order, or [] on failure."""
        try:
            return self._repository.fetch_accounts()
        except _STORE_ERRORS as exc:
            self._logger.error(f"Failed to fetch accounts: {exc}")
            return []

    def add_account(
        self,
        name: str,
        initial_balance,
        color: str = DEFAULT_ACCOUNT_COLOR,
    ) -> int | None:
        """Create an account with a starting balance.

        Args:
            name: Display name; duplicates are allowed.
            initial_balance: Starting balance.
            color: Display tag.

        Returns:
            int | None: New account id, or None on failure.
        """
        try:
            balance = validate_balance(initial_balance)
            account_id = self._repository.insert_account(
                name,
                balance,
                color,
                self._clock(),
            )
        except _STORE_ERRORS as exc:
            self._logger.error(f"Failed to add account {name!r}: {exc}")
            return None
        self._usage_logger.info(
            f"Account added: id={account_id}, name={name!r}, "
            f"balance={balance}"
        )
        return account_id

    def update_account_balance(self, account_id: int, new_balance) -> bool:
        """Overwrite an account balance as a manual correction.

        The new value becomes the baseline later transactions adjust; it is
        not checked against transaction history.

        Returns:
            bool: True on success, False on failure or unknown account.
        """
        try:
            balance = validate_balance(new_balance)
            self._repository.set_account_balance(account_id, balance)
        except _STORE_ERRORS as exc:
            self._logger.error(
                f"Failed to update balance of account {account_id}: {exc}"
            )
            return False
        self._usage_logger.info(
            f"Account balance overridden: id={account_id}, balance={balance}"
        )
        return True

    def delete_account(self, account_id: int) -> bool:
        """Delete an account together with all of its transactions.

        Returns:
            bool: True on success, False on failure or unknown account.
        """
        try:
            removed = self._repository.remove_account(account_id)
        except _STORE_ERRORS as exc:
            self._logger.error(f"Failed to delete account {account_id}: {exc}")
            return False
        self._usage_logger.info(
            f"Account deleted: id={account_id}, transactions_removed={removed}"
        )
        return True

    # Transactions

    def get_transactions(
        self,
        limit: int = DEFAULT_TRANSACTIONS_LIMIT,
    ) -> list[Transaction]:
        """Return up to ``limit`` transactions, newest first, or [] on failure."""
        try:
            return self._repository.fetch_transactions(limit)
        except _STORE_ERRORS as exc:
            self._logger.error(f"Failed to fetch transactions: {exc}")
            return []

    def add_transaction(
        self,
        description: str,
        amount,
        tx_type: str,
        category: str,
        account_id: int,
        account_name: str | None = None,
    ) -> int | None:
        """Record a transaction and adjust its account balance atomically.

        Args:
            description: Free-text description.
            amount: Non-negative amount.
            tx_type: ``income`` adds to the balance, ``expense`` subtracts.
            category: Category label.
            account_id: Account the transaction belongs to.
            account_name: Name snapshot; defaults to the account's current
                name.

        Returns:
            int | None: New transaction id, or None when nothing was written.
        """
        try:
            transaction_id = self._repository.record_transaction(
                description,
                amount,
                tx_type,
                category,
                account_id,
                account_name,
                self._clock(),
            )
        except _STORE_ERRORS as exc:
            self._logger.error(
                f"Failed to add {tx_type} transaction to account "
                f"{account_id}: {exc}"
            )
            return None
        self._usage_logger.info(
            f"Transaction added: id={transaction_id}, type={tx_type}, "
            f"amount={amount}, account_id={account_id}"
        )
        return transaction_id

    def delete_transaction(self, transaction_id: int) -> bool:
        """Delete a transaction and reverse its effect on the balance.

        Returns:
            bool: True on success, False on failure or unknown transaction.
        """
        try:
            removed = self._repository.remove_transaction(transaction_id)
        except _STORE_ERRORS as exc:
            self._logger.error(
                f"Failed to delete transaction {transaction_id}: {exc}"
            )
            return False
        self._usage_logger.info(
            f"Transaction deleted: id={transaction_id}, type={removed.type}, "
            f"amount={removed.amount}, account_id={removed.account_id}"
        )
        return True

    # Aggregates

    def get_expenses_by_period(self, period: str = PERIOD_MONTH) -> Decimal:
        """Return expenses of the current local day or month.

        Args:
            period: ``today`` or ``month``.

        Returns:
            Decimal: Expense total, zero when empty or on failure.
        """
        try:
            start, end = period_bounds(period, self._clock())
            return self._repository.sum_expenses(start, end)
        except _STORE_ERRORS as exc:
            self._logger.error(f"Failed to sum expenses for {period!r}: {exc}")
            return Decimal("0")

    def get_expenses_by_category(self) -> dict[str, Decimal]:
        """Return current-month expense totals by category, largest first."""
        try:
            start, end = period_bounds(PERIOD_MONTH, self._clock())
            return self._repository.sum_expenses_by_category(start, end)
        except _STORE_ERRORS as exc:
            self._logger.error(f"Failed to sum expenses by category: {exc}")
            return {}

    # Config

    def get_config(self) -> LedgerConfig:
        """Return the income config, or the defaults when it cannot be read."""
        try:
            config = self._repository.fetch_config()
        except _STORE_ERRORS as exc:
            self._logger.error(f"Failed to fetch config: {exc}")
            return DEFAULT_CONFIG
        if config is None:
            self._logger.warning("Config row missing; using defaults")
            return DEFAULT_CONFIG
        return config

    def update_config(
        self,
        daily_rate,
        days_per_week,
        manual_override,
        manual_amount,
    ) -> bool:
        """Overwrite all income config fields at once.

        Returns:
            bool: True on success, False on failure.
        """
        try:
            config = build_config(
                daily_rate,
                days_per_week,
                manual_override,
                manual_amount,
            )
            self._repository.save_config(config)
        except _STORE_ERRORS as exc:
            self._logger.error(f"Failed to update config: {exc}")
            return False
        self._usage_logger.info(
            f"Config updated: daily_rate={config.daily_rate}, "
            f"days_per_week={config.days_per_week}, "
            f"manual_override={config.manual_override}, "
            f"manual_amount={config.manual_amount}"
        )
        return True


__all__ = ["LedgerStore"]

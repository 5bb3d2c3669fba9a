"""SQLAlchemy-backed repository for accounts, transactions and config."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import text

from ledger_store.application.ports.database import DatabaseEnginePort
from ledger_store.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from ledger_store.domain.constants import (
    CONFIG_ROW_ID,
    DEFAULT_ACCOUNTS,
    EXPENSE,
)
from ledger_store.domain.errors import (
    AccountNotFoundError,
    LedgerStoreError,
    TransactionNotFoundError,
)
from ledger_store.domain.models import Account, LedgerConfig, Transaction
from ledger_store.domain.services.balance import (
    apply_transaction,
    revert_transaction,
)
from ledger_store.domain.services.validation import (
    validate_amount,
    validate_transaction_type,
)
from ledger_store.utils.decimal_utils import to_money, to_storage_amount


TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

CREATE_ACCOUNTS_SQL = """
CREATE TABLE IF NOT EXISTS accounts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    balance REAL NOT NULL DEFAULT 0,
    color TEXT NOT NULL DEFAULT '#64748b',
    created_at TEXT NOT NULL
)
"""

CREATE_TRANSACTIONS_SQL = """
CREATE TABLE IF NOT EXISTS transactions (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    description TEXT NOT NULL,
    amount REAL NOT NULL,
    type TEXT NOT NULL CHECK(type IN ('income', 'expense')),
    category TEXT NOT NULL,
    account_id INTEGER NOT NULL,
    account_name TEXT NOT NULL,
    date TEXT NOT NULL,
    FOREIGN KEY (account_id) REFERENCES accounts(id) ON DELETE CASCADE
)
"""

CREATE_CONFIG_SQL = """
CREATE TABLE IF NOT EXISTS config (
    id INTEGER PRIMARY KEY CHECK(id = 1),
    daily_rate REAL NOT NULL DEFAULT 100,
    days_per_week INTEGER NOT NULL DEFAULT 5,
    manual_override INTEGER NOT NULL DEFAULT 0,
    manual_amount REAL NOT NULL DEFAULT 3000
)
"""

CREATE_INDEXES_SQL = (
    "CREATE INDEX IF NOT EXISTS idx_transactions_date "
    "ON transactions(date DESC)",
    "CREATE INDEX IF NOT EXISTS idx_transactions_account "
    "ON transactions(account_id)",
)

SELECT_CONFIG_SQL = text(
    """
    SELECT id, daily_rate, days_per_week, manual_override, manual_amount
    FROM config
    WHERE id = :config_id
    """
)

INSERT_DEFAULT_CONFIG_SQL = text("INSERT INTO config (id) VALUES (:config_id)")

UPDATE_CONFIG_SQL = text(
    """
    UPDATE config
    SET daily_rate = :daily_rate,
        days_per_week = :days_per_week,
        manual_override = :manual_override,
        manual_amount = :manual_amount
    WHERE id = :config_id
    """
)

COUNT_ACCOUNTS_SQL = text("SELECT COUNT(*) AS count FROM accounts")

SELECT_ACCOUNTS_SQL = text(
    """
    SELECT id, name, balance, color, created_at
    FROM accounts
    ORDER BY created_at ASC, id ASC
    """
)

SELECT_ACCOUNT_BALANCE_SQL = text(
    "SELECT balance FROM accounts WHERE id = :account_id"
)

INSERT_ACCOUNT_SQL = text(
    """
    INSERT INTO accounts (name, balance, color, created_at)
    VALUES (:name, :balance, :color, :created_at)
    """
)

UPDATE_ACCOUNT_BALANCE_SQL = text(
    "UPDATE accounts SET balance = :balance WHERE id = :account_id"
)

DELETE_ACCOUNT_SQL = text("DELETE FROM accounts WHERE id = :account_id")

DELETE_ACCOUNT_TRANSACTIONS_SQL = text(
    "DELETE FROM transactions WHERE account_id = :account_id"
)

SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT id, description, amount, type, category,
           account_id, account_name, date
    FROM transactions
    ORDER BY date DESC, id DESC
    LIMIT :limit
    """
)

SELECT_TRANSACTION_SQL = text(
    """
    SELECT id, description, amount, type, category,
           account_id, account_name, date
    FROM transactions
    WHERE id = :transaction_id
    """
)

# account_name falls back to the account's current name; a missing account
# leaves it NULL and the NOT NULL constraint rejects the row.
INSERT_TRANSACTION_SQL = text(
    """
    INSERT INTO transactions (
        description,
        amount,
        type,
        category,
        account_id,
        account_name,
        date
    )
    VALUES (
        :description,
        :amount,
        :type,
        :category,
        :account_id,
        COALESCE(
            :account_name,
            (SELECT name FROM accounts WHERE id = :account_id)
        ),
        :date
    )
    """
)

DELETE_TRANSACTION_SQL = text(
    "DELETE FROM transactions WHERE id = :transaction_id"
)

SUM_EXPENSES_SQL = text(
    """
    SELECT COALESCE(SUM(amount), 0) AS total
    FROM transactions
    WHERE type = :type
      AND date >= :start
      AND date < :end
    """
)

SUM_EXPENSES_BY_CATEGORY_SQL = text(
    """
    SELECT category, SUM(amount) AS total
    FROM transactions
    WHERE type = :type
      AND date >= :start
      AND date < :end
    GROUP BY category
    HAVING SUM(amount) > 0
    ORDER BY total DESC, category ASC
    """
)


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for the ledger tables."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def ensure_schema(self) -> None:
        """Create the ledger tables and indexes if they do not exist."""
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_ACCOUNTS_SQL)
            conn.exec_driver_sql(CREATE_TRANSACTIONS_SQL)
            conn.exec_driver_sql(CREATE_CONFIG_SQL)
            for statement in CREATE_INDEXES_SQL:
                conn.exec_driver_sql(statement)

    def seed_defaults(self, now: datetime) -> tuple[bool, int]:
        """Insert the default config row and accounts when absent.

        Args:
            now: Timestamp used as the seeded accounts' creation time.

        Returns:
            tuple[bool, int]: Whether the config row was inserted and how
            many default accounts were inserted.
        """
        config_seeded = False
        accounts_seeded = 0
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            existing = conn.execute(
                SELECT_CONFIG_SQL,
                {"config_id": CONFIG_ROW_ID},
            ).first()
            if existing is None:
                conn.execute(
                    INSERT_DEFAULT_CONFIG_SQL,
                    {"config_id": CONFIG_ROW_ID},
                )
                config_seeded = True

            count = conn.execute(COUNT_ACCOUNTS_SQL).scalar_one()
            if count == 0:
                payload = [
                    {
                        "name": name,
                        "balance": to_storage_amount(balance),
                        "color": color,
                        "created_at": _format_timestamp(now),
                    }
                    for name, balance, color in DEFAULT_ACCOUNTS
                ]
                conn.execute(INSERT_ACCOUNT_SQL, payload)
                accounts_seeded = len(payload)
        return config_seeded, accounts_seeded

    def fetch_accounts(self) -> list[Account]:
        """Return accounts in creation order."""
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_ACCOUNTS_SQL).all()
        return [
            Account(
                id=row.id,
                name=row.name,
                balance=to_money(row.balance),
                color=row.color,
                created_at=_parse_timestamp(row.created_at),
            )
            for row in rows
        ]

    def insert_account(
        self,
        name: str,
        balance: Decimal,
        color: str,
        now: datetime,
    ) -> int:
        """Insert an account and return its generated id."""
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            result = conn.execute(
                INSERT_ACCOUNT_SQL,
                {
                    "name": name,
                    "balance": to_storage_amount(balance),
                    "color": color,
                    "created_at": _format_timestamp(now),
                },
            )
            return result.lastrowid

    def set_account_balance(self, account_id: int, balance: Decimal) -> None:
        """Overwrite an account balance without consulting its history.

        Raises:
            AccountNotFoundError: If no account has the given id.
        """
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            result = conn.execute(
                UPDATE_ACCOUNT_BALANCE_SQL,
                {
                    "balance": to_storage_amount(balance),
                    "account_id": account_id,
                },
            )
            if result.rowcount == 0:
                raise AccountNotFoundError(account_id)

    def remove_account(self, account_id: int) -> int:
        """Delete an account and its transactions in one unit of work.

        Args:
            account_id: Identifier of the account to delete.

        Returns:
            int: Number of transactions deleted with the account.

        Raises:
            AccountNotFoundError: If no account has the given id.
        """
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            trans = conn.begin()
            try:
                removed = conn.execute(
                    DELETE_ACCOUNT_TRANSACTIONS_SQL,
                    {"account_id": account_id},
                ).rowcount
                deleted = conn.execute(
                    DELETE_ACCOUNT_SQL,
                    {"account_id": account_id},
                ).rowcount
                if deleted == 0:
                    raise AccountNotFoundError(account_id)
                trans.commit()
            except Exception:
                trans.rollback()
                raise
        return removed

    def fetch_transactions(self, limit: int) -> list[Transaction]:
        """Return at most ``limit`` transactions, newest first."""
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_TRANSACTIONS_SQL, {"limit": limit}).all()
        return [_row_to_transaction(row) for row in rows]

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
        """Insert a transaction and apply its balance delta atomically.

        The insert, the balance read and the balance write share one
        database transaction. Any failure rolls back explicitly, so neither
        an orphan row nor a stray balance change survives.

        Args:
            description: Free-text description.
            amount: Non-negative amount.
            tx_type: ``income`` or ``expense``.
            category: Category label.
            account_id: Account the transaction belongs to.
            account_name: Name snapshot; the account's current name when None.
            now: Timestamp stamped on the transaction.

        Returns:
            int: Identifier of the new transaction.

        Raises:
            InvalidTransactionError: If type or amount are invalid.
            AccountNotFoundError: If the account does not exist.
        """
        validate_transaction_type(tx_type)
        value = validate_amount(amount)
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            trans = conn.begin()
            try:
                result = conn.execute(
                    INSERT_TRANSACTION_SQL,
                    {
                        "description": description,
                        "amount": to_storage_amount(value),
                        "type": tx_type,
                        "category": category,
                        "account_id": account_id,
                        "account_name": account_name,
                        "date": _format_timestamp(now),
                    },
                )
                transaction_id = result.lastrowid
                row = conn.execute(
                    SELECT_ACCOUNT_BALANCE_SQL,
                    {"account_id": account_id},
                ).first()
                if row is None:
                    raise AccountNotFoundError(account_id)
                new_balance = apply_transaction(
                    to_money(row.balance),
                    value,
                    tx_type,
                )
                conn.execute(
                    UPDATE_ACCOUNT_BALANCE_SQL,
                    {
                        "balance": to_storage_amount(new_balance),
                        "account_id": account_id,
                    },
                )
                trans.commit()
            except Exception:
                trans.rollback()
                raise
        return transaction_id

    def remove_transaction(self, transaction_id: int) -> Transaction:
        """Delete a transaction and revert its balance delta atomically.

        Returns:
            Transaction: The deleted record.

        Raises:
            TransactionNotFoundError: If no transaction has the given id.
        """
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            trans = conn.begin()
            try:
                row = conn.execute(
                    SELECT_TRANSACTION_SQL,
                    {"transaction_id": transaction_id},
                ).first()
                if row is None:
                    raise TransactionNotFoundError(transaction_id)
                removed = _row_to_transaction(row)
                conn.execute(
                    DELETE_TRANSACTION_SQL,
                    {"transaction_id": transaction_id},
                )
                account = conn.execute(
                    SELECT_ACCOUNT_BALANCE_SQL,
                    {"account_id": removed.account_id},
                ).first()
                if account is None:
                    raise AccountNotFoundError(removed.account_id)
                new_balance = revert_transaction(
                    to_money(account.balance),
                    removed.amount,
                    removed.type,
                )
                conn.execute(
                    UPDATE_ACCOUNT_BALANCE_SQL,
                    {
                        "balance": to_storage_amount(new_balance),
                        "account_id": removed.account_id,
                    },
                )
                trans.commit()
            except Exception:
                trans.rollback()
                raise
        return removed

    def sum_expenses(self, start: datetime, end: datetime) -> Decimal:
        """Return the expense total dated within ``[start, end)``."""
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            total = conn.execute(
                SUM_EXPENSES_SQL,
                _range_params(start, end),
            ).scalar_one()
        return to_money(total)

    def sum_expenses_by_category(
        self,
        start: datetime,
        end: datetime,
    ) -> dict[str, Decimal]:
        """Return expense totals by category within ``[start, end)``.

        Returns:
            dict[str, Decimal]: Totals keyed by category, largest first.
            Categories without expenses in the range are absent.
        """
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SUM_EXPENSES_BY_CATEGORY_SQL,
                _range_params(start, end),
            ).all()
        return {row.category: to_money(row.total) for row in rows}

    def fetch_config(self) -> LedgerConfig | None:
        """Return the singleton config row, or None when it is missing."""
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_CONFIG_SQL,
                {"config_id": CONFIG_ROW_ID},
            ).first()
        if row is None:
            return None
        return LedgerConfig(
            daily_rate=to_money(row.daily_rate),
            days_per_week=int(row.days_per_week),
            manual_override=bool(row.manual_override),
            manual_amount=to_money(row.manual_amount),
        )

    def save_config(self, config: LedgerConfig) -> None:
        """Overwrite all fields of the singleton config row.

        Raises:
            LedgerStoreError: If the config row has not been seeded.
        """
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            result = conn.execute(
                UPDATE_CONFIG_SQL,
                {
                    "daily_rate": to_storage_amount(config.daily_rate),
                    "days_per_week": config.days_per_week,
                    "manual_override": 1 if config.manual_override else 0,
                    "manual_amount": to_storage_amount(config.manual_amount),
                    "config_id": CONFIG_ROW_ID,
                },
            )
            if result.rowcount == 0:
                raise LedgerStoreError(
                    "Config row is missing; initialize the ledger first"
                )

    def close(self) -> None:
        """Dispose of the underlying engine."""
        self._db_port.dispose()


def _format_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)


def _parse_timestamp(value) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _range_params(start: datetime, end: datetime) -> dict[str, str]:
    return {
        "type": EXPENSE,
        "start": _format_timestamp(start),
        "end": _format_timestamp(end),
    }


def _row_to_transaction(row) -> Transaction:
    return Transaction(
        id=row.id,
        description=row.description,
        amount=to_money(row.amount),
        type=row.type,
        category=row.category,
        account_id=row.account_id,
        account_name=row.account_name,
        date=_parse_timestamp(row.date),
    )


__all__ = [
    "SqlAlchemyLedgerRepository",
    "TIMESTAMP_FORMAT",
    "CREATE_ACCOUNTS_SQL",
    "CREATE_TRANSACTIONS_SQL",
    "CREATE_CONFIG_SQL",
]

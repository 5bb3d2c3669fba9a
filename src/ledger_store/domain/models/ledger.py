"""Domain models for persisted ledger records."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from ledger_store.domain.constants import (
    CONFIG_ROW_ID,
    DEFAULT_DAILY_RATE,
    DEFAULT_DAYS_PER_WEEK,
    DEFAULT_MANUAL_AMOUNT,
    DEFAULT_MANUAL_OVERRIDE,
)


@dataclass(frozen=True)
class Account:
    """Named balance-holding account.

    Attributes:
        id: Store-assigned identifier.
        name: Display name, not unique.
        balance: Current balance kept in sync by transaction writes.
        color: Display tag (hex color).
        created_at: Local timestamp of creation.
    """

    id: int
    name: str
    balance: Decimal
    color: str
    created_at: datetime | None


@dataclass(frozen=True)
class Transaction:
    """Income or expense event recorded against one account.

    Attributes:
        account_name: Snapshot of the account name at insert time.
        date: Local timestamp stamped by the store.
    """

    id: int
    description: str
    amount: Decimal
    type: str
    category: str
    account_id: int
    account_name: str
    date: datetime


@dataclass(frozen=True)
class LedgerConfig:
    """Singleton income-estimation settings."""

    daily_rate: Decimal = DEFAULT_DAILY_RATE
    days_per_week: int = DEFAULT_DAYS_PER_WEEK
    manual_override: bool = DEFAULT_MANUAL_OVERRIDE
    manual_amount: Decimal = DEFAULT_MANUAL_AMOUNT
    id: int = CONFIG_ROW_ID


DEFAULT_CONFIG = LedgerConfig()


__all__ = ["Account", "Transaction", "LedgerConfig", "DEFAULT_CONFIG"]

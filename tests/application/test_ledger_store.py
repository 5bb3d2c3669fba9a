"""Tests for the LedgerStore call surface."""

from datetime import datetime, timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from ledger_store.application.ledger_store import LedgerStore
from ledger_store.domain.models import DEFAULT_CONFIG, LedgerConfig


def _balance(store: LedgerStore, account_id: int) -> Decimal:
    return next(a.balance for a in store.get_accounts() if a.id == account_id)


def _transaction_count(db_port) -> int:
    with db_port.get_ledger_engine().connect() as conn:
        return conn.execute(
            text("SELECT COUNT(*) FROM transactions")
        ).scalar_one()


def test_init_database_twice_does_not_duplicate_seed_data(store) -> None:
    """Re-running initialization keeps two seed accounts and one config."""
    assert store.init_database()
    assert store.init_database()

    assert [a.name for a in store.get_accounts()] == ["Nubank", "Carteira"]
    assert store.get_config() == DEFAULT_CONFIG


def test_balance_tracks_sequence_of_transactions(store) -> None:
    """Balance equals initial balance plus signed successful amounts."""
    account_id = store.add_account("Checking", Decimal("200.00"))
    calls = [
        ("Salary", Decimal("1000.00"), "income", True),
        ("Rent", Decimal("700.00"), "expense", True),
        ("Bad", Decimal("-5"), "expense", False),
        ("Coffee", Decimal("3.45"), "expense", True),
        ("Refund", Decimal("10"), "transfer", False),
    ]

    expected = Decimal("200.00")
    for description, amount, tx_type, should_succeed in calls:
        tx_id = store.add_transaction(
            description, amount, tx_type, "Misc", account_id, "Checking"
        )
        assert (tx_id is not None) is should_succeed
        if should_succeed:
            expected += amount if tx_type == "income" else -amount

    assert _balance(store, account_id) == expected == Decimal("496.55")
    assert len(store.get_transactions()) == 3


def test_add_transaction_to_missing_account_leaves_no_orphan(
    store,
    db_port,
    app_logger,
) -> None:
    before = _transaction_count(db_port)

    result = store.add_transaction(
        "Ghost", Decimal("10"), "expense", "Food", 999, "Ghost"
    )

    assert result is None
    assert _transaction_count(db_port) == before
    app_logger.error.assert_called_once()


def test_delete_account_removes_account_transactions_and_total(store) -> None:
    nubank, carteira = [a.id for a in store.get_accounts()]
    store.add_transaction("Lunch", Decimal("25"), "expense", "Food", nubank)
    store.add_transaction("Bus", Decimal("5"), "expense", "Transport", carteira)

    assert store.delete_account(nubank)

    accounts = store.get_accounts()
    assert [a.id for a in accounts] == [carteira]
    assert all(t.account_id != nubank for t in store.get_transactions())
    assert sum(a.balance for a in accounts) == Decimal("145.00")


def test_delete_unknown_account_returns_false(store) -> None:
    assert store.delete_account(12345) is False


def test_expenses_today_excludes_yesterday_within_24_hours(
    store,
    clock,
) -> None:
    """A transaction from 23:50 yesterday must not count for today."""
    account_id = store.get_accounts()[0].id
    clock.now = datetime(2024, 5, 14, 23, 50)
    store.add_transaction("Late snack", Decimal("7"), "expense", "Food", account_id)
    clock.now = datetime(2024, 5, 15, 0, 10)
    store.add_transaction("Breakfast", Decimal("12"), "expense", "Food", account_id)
    store.add_transaction("Salary", Decimal("500"), "income", "Work", account_id)

    assert store.get_expenses_by_period("today") == Decimal("12.00")
    assert store.get_expenses_by_period("month") == Decimal("19.00")


def test_expenses_by_month_excludes_previous_month(store, clock) -> None:
    account_id = store.get_accounts()[0].id
    clock.now = datetime(2024, 4, 30, 23, 59)
    store.add_transaction("April", Decimal("40"), "expense", "Food", account_id)
    clock.now = datetime(2024, 5, 1, 0, 0)

    assert store.get_expenses_by_period("month") == Decimal("0")


def test_expenses_by_unknown_period_is_zero(store) -> None:
    assert store.get_expenses_by_period("year") == Decimal("0")


def test_expenses_by_category_for_current_month(store, clock) -> None:
    """{Food: 20, Food: 30, Transport: 15} gives {Food: 50, Transport: 15}."""
    account_id = store.get_accounts()[0].id
    clock.now = datetime(2024, 4, 20, 9, 0)
    store.add_transaction("Old", Decimal("99"), "expense", "Health", account_id)
    clock.now = datetime(2024, 5, 15, 9, 0)
    store.add_transaction("A", Decimal("20"), "expense", "Food", account_id)
    store.add_transaction("B", Decimal("30"), "expense", "Food", account_id)
    store.add_transaction("C", Decimal("15"), "expense", "Transport", account_id)
    store.add_transaction("D", Decimal("80"), "income", "Work", account_id)

    assert store.get_expenses_by_category() == {
        "Food": Decimal("50.00"),
        "Transport": Decimal("15.00"),
    }
    assert list(store.get_expenses_by_category()) == ["Food", "Transport"]


def test_update_config_round_trip(store) -> None:
    assert store.update_config(Decimal("150.5"), 6, True, Decimal("4000"))

    assert store.get_config() == LedgerConfig(
        daily_rate=Decimal("150.50"),
        days_per_week=6,
        manual_override=True,
        manual_amount=Decimal("4000.00"),
    )

    assert store.update_config(100, 5, False, 3000)
    assert store.get_config() == DEFAULT_CONFIG


def test_update_config_with_invalid_values_returns_false(store) -> None:
    assert store.update_config("abc", 5, False, 3000) is False
    assert store.get_config() == DEFAULT_CONFIG


def test_delete_transaction_reverses_balance(store) -> None:
    account_id = store.get_accounts()[1].id
    tx_id = store.add_transaction(
        "Market", Decimal("50"), "expense", "Food", account_id
    )
    assert _balance(store, account_id) == Decimal("100.00")

    assert store.delete_transaction(tx_id)

    assert _balance(store, account_id) == Decimal("150.00")
    assert store.delete_transaction(tx_id) is False


def test_account_name_is_a_snapshot(store, db_port) -> None:
    """Renaming an account leaves recorded transactions untouched."""
    account_id = store.get_accounts()[0].id
    store.add_transaction("Gym", Decimal("90"), "expense", "Health", account_id)
    with db_port.get_ledger_engine().begin() as conn:
        conn.execute(
            text("UPDATE accounts SET name = 'Renamed' WHERE id = :id"),
            {"id": account_id},
        )

    [tx] = store.get_transactions()

    assert tx.account_name == "Nubank"


def test_update_account_balance_sets_new_baseline(store) -> None:
    account_id = store.get_accounts()[0].id

    assert store.update_account_balance(account_id, Decimal("10"))
    store.add_transaction("Tip", Decimal("2.50"), "income", "Other", account_id)

    assert _balance(store, account_id) == Decimal("12.50")
    assert store.update_account_balance(999, Decimal("1")) is False


def test_get_transactions_newest_first_with_limit(store, clock) -> None:
    account_id = store.get_accounts()[0].id
    for offset in range(5):
        clock.now = datetime(2024, 5, 15, 8, 0) + timedelta(minutes=offset)
        store.add_transaction(
            f"tx{offset}", Decimal("1"), "expense", "Food", account_id
        )

    recent = store.get_transactions(limit=3)

    assert [t.description for t in recent] == ["tx4", "tx3", "tx2"]


@pytest.mark.parametrize("bad_balance", [None, "abc", True, float("inf")])
def test_invalid_balance_leaves_accounts_untouched(
    store,
    bad_balance,
) -> None:
    """A missing or non-numeric balance must never be stored as zero."""
    account_id = store.get_accounts()[0].id

    assert store.update_account_balance(account_id, bad_balance) is False
    assert store.add_account("Broken", bad_balance) is None

    assert _balance(store, account_id) == Decimal("1500.00")
    assert [a.name for a in store.get_accounts()] == ["Nubank", "Carteira"]


def test_negative_balance_is_accepted(store) -> None:
    account_id = store.add_account("Credit card", "-250.5")

    assert _balance(store, account_id) == Decimal("-250.50")


def test_add_account_returns_new_ids(store) -> None:
    first = store.add_account("Savings", "1000")
    second = store.add_account("Savings", 0, "#000000")

    assert first is not None and second is not None
    assert first != second
    assert [a.name for a in store.get_accounts()][-2:] == ["Savings", "Savings"]


def test_storage_failures_degrade_to_neutral_values() -> None:
    """Every call should swallow storage errors and log them."""
    repository = MagicMock()
    failure = OperationalError("SELECT 1", {}, Exception("disk I/O error"))
    for name in (
        "ensure_schema",
        "fetch_accounts",
        "insert_account",
        "set_account_balance",
        "remove_account",
        "fetch_transactions",
        "record_transaction",
        "remove_transaction",
        "sum_expenses",
        "sum_expenses_by_category",
        "fetch_config",
        "save_config",
        "close",
    ):
        getattr(repository, name).side_effect = failure
    logger = MagicMock()
    usage_logger = MagicMock()
    store = LedgerStore(
        repository,
        logger=logger,
        usage_logger=usage_logger,
        clock=lambda: datetime(2024, 5, 15),
    )

    assert store.init_database() is False
    assert store.get_accounts() == []
    assert store.add_account("X", 1) is None
    assert store.update_account_balance(1, 1) is False
    assert store.delete_account(1) is False
    assert store.get_transactions() == []
    assert store.add_transaction("d", 1, "expense", "c", 1, "X") is None
    assert store.delete_transaction(1) is False
    assert store.get_expenses_by_period("today") == Decimal("0")
    assert store.get_expenses_by_category() == {}
    assert store.get_config() == DEFAULT_CONFIG
    assert store.update_config(1, 1, False, 1) is False
    store.close()

    assert logger.error.call_count == 13
    usage_logger.info.assert_not_called()


def test_context_manager_closes_repository() -> None:
    repository = MagicMock()

    with LedgerStore(repository, logger=MagicMock(), usage_logger=MagicMock()):
        pass

    repository.close.assert_called_once()


def test_update_config_rejects_fractional_days(store) -> None:
    assert store.update_config(100, 5.7, False, 3000) is False
    assert store.get_config() == DEFAULT_CONFIG

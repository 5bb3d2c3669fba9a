"""Tests for domain validation helpers."""

from decimal import Decimal

import pytest

from ledger_store.domain.errors import (
    InvalidAccountError,
    InvalidConfigError,
    InvalidTransactionError,
)
from ledger_store.domain.models import LedgerConfig
from ledger_store.domain.services.validation import (
    build_config,
    validate_amount,
    validate_balance,
    validate_transaction_type,
)


def test_validate_amount_quantizes_valid_values() -> None:
    assert validate_amount("12.5") == Decimal("12.50")
    assert validate_amount(0) == Decimal("0.00")


@pytest.mark.parametrize("amount", [-1, "abc", None, float("nan"), True])
def test_validate_amount_rejects_invalid_values(amount) -> None:
    with pytest.raises(InvalidTransactionError):
        validate_amount(amount)


def test_validate_balance_allows_negative_values() -> None:
    assert validate_balance("-12.345") == Decimal("-12.35")


@pytest.mark.parametrize("balance", [None, "", "abc", False, float("nan")])
def test_validate_balance_rejects_missing_values(balance) -> None:
    with pytest.raises(InvalidAccountError):
        validate_balance(balance)


def test_validate_transaction_type() -> None:
    assert validate_transaction_type("income") == "income"
    with pytest.raises(InvalidTransactionError):
        validate_transaction_type("INCOME")


def test_build_config_coerces_caller_values() -> None:
    """Form-style inputs should become a typed config."""
    config = build_config("120", "6", 1, 2500)

    assert config == LedgerConfig(
        daily_rate=Decimal("120.00"),
        days_per_week=6,
        manual_override=True,
        manual_amount=Decimal("2500.00"),
    )


def test_build_config_rejects_non_numeric_fields() -> None:
    with pytest.raises(InvalidConfigError):
        build_config("abc", 5, False, 3000)
    with pytest.raises(InvalidConfigError):
        build_config(100, "five", False, 3000)


def test_build_config_accepts_whole_number_days() -> None:
    assert build_config(100, "5.0", False, 3000).days_per_week == 5


@pytest.mark.parametrize("days", [5.7, "5.5", True, None, float("inf")])
def test_build_config_rejects_fractional_or_boolean_days(days) -> None:
    with pytest.raises(InvalidConfigError):
        build_config(100, days, False, 3000)

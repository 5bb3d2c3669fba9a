"""Domain validation helpers."""

from decimal import Decimal, InvalidOperation

from ledger_store.domain.constants import TRANSACTION_TYPES
from ledger_store.domain.errors import (
    InvalidAccountError,
    InvalidConfigError,
    InvalidTransactionError,
)
from ledger_store.domain.models import LedgerConfig
from ledger_store.utils.decimal_utils import to_money


def validate_transaction_type(tx_type: str) -> str:
    """Return the transaction type when it is income or expense.

    Args:
        tx_type: Raw transaction type.

    Returns:
        str: The validated type.

    Raises:
        InvalidTransactionError: If the type is not supported.
    """
    if tx_type not in TRANSACTION_TYPES:
        raise InvalidTransactionError(
            f"Unsupported transaction type: {tx_type!r}. "
            f"Expected one of {', '.join(TRANSACTION_TYPES)}."
        )
    return tx_type


def validate_amount(amount) -> Decimal:
    """Return the amount as money when it is a non-negative number.

    Args:
        amount: Raw amount supplied by the caller.

    Returns:
        Decimal: Amount quantized to cents.

    Raises:
        InvalidTransactionError: If the amount is not numeric or negative.
    """
    value = _parse_money(amount)
    if value is None or value < 0:
        raise InvalidTransactionError(
            f"Transaction amount must be a non-negative number: {amount!r}"
        )
    return value


def validate_balance(balance) -> Decimal:
    """Return an account balance as money; negative balances are allowed.

    Raises:
        InvalidAccountError: If the balance is missing or not a finite number.
    """
    value = _parse_money(balance)
    if value is None:
        raise InvalidAccountError(
            f"Account balance must be a number: {balance!r}"
        )
    return value


def build_config(
    daily_rate,
    days_per_week,
    manual_override,
    manual_amount,
) -> LedgerConfig:
    """Return a LedgerConfig from raw caller values.

    Raises:
        InvalidConfigError: If a numeric field cannot be parsed.
    """
    rate = _parse_money(daily_rate)
    amount = _parse_money(manual_amount)
    if rate is None or amount is None:
        raise InvalidConfigError(
            f"Invalid config amounts: daily_rate={daily_rate!r}, "
            f"manual_amount={manual_amount!r}"
        )
    days = _parse_whole_number(days_per_week)
    if days is None:
        raise InvalidConfigError(f"Invalid days_per_week: {days_per_week!r}")
    return LedgerConfig(
        daily_rate=rate,
        days_per_week=days,
        manual_override=bool(manual_override),
        manual_amount=amount,
    )


def _parse_whole_number(value) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    if not parsed.is_finite() or parsed != parsed.to_integral_value():
        return None
    return int(parsed)


def _parse_money(value) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = to_money(value)
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not parsed.is_finite():
        return None
    return parsed


__all__ = [
    "validate_transaction_type",
    "validate_amount",
    "validate_balance",
    "build_config",
]

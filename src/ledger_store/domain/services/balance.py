"""Balance arithmetic for transaction writes."""

from decimal import Decimal

from ledger_store.domain.constants import INCOME
from ledger_store.domain.services.validation import validate_transaction_type


def signed_amount(amount: Decimal, tx_type: str) -> Decimal:
    """Return the balance delta a transaction applies.

    Args:
        amount: Non-negative transaction amount.
        tx_type: ``income`` or ``expense``.

    Returns:
        Decimal: ``amount`` for income, ``-amount`` for expense.
    """
    validate_transaction_type(tx_type)
    return amount if tx_type == INCOME else -amount


def apply_transaction(
    balance: Decimal,
    amount: Decimal,
    tx_type: str,
) -> Decimal:
    """Return the balance after recording a transaction."""
    return balance + signed_amount(amount, tx_type)


def revert_transaction(
    balance: Decimal,
    amount: Decimal,
    tx_type: str,
) -> Decimal:
    """Return the balance after removing a previously recorded transaction."""
    return balance - signed_amount(amount, tx_type)


__all__ = ["signed_amount", "apply_transaction", "revert_transaction"]

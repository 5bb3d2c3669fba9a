"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_money(value) -> Decimal:
    """Coerce a value to Decimal and round it to cents.

    Args:
        value: Raw numeric value (float from SQLite, str, int or Decimal).

    Returns:
        Decimal: Amount quantized to two decimal places.
    """
    return coerce_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def to_storage_amount(value) -> float:
    """Convert a money value to the float bound into REAL columns."""
    return float(to_money(value))


def format_currency(value, symbol: str = "R$") -> str:
    """Format an amount as ``R$ 1.234,56``.

    Args:
        value: Amount to format.
        symbol: Currency symbol prefix.

    Returns:
        str: Amount with dot thousands separators and a comma decimal mark.
    """
    amount = to_money(value)
    sign = "-" if amount < 0 else ""
    grouped = f"{abs(amount):,.2f}"
    localized = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}{symbol} {localized}"


__all__ = [
    "CENT",
    "coerce_decimal",
    "to_money",
    "to_storage_amount",
    "format_currency",
]

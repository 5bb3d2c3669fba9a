"""Calendar period bounds in local time."""

from datetime import datetime, timedelta

from ledger_store.domain.constants import (
    EXPENSE_PERIODS,
    PERIOD_MONTH,
    PERIOD_TODAY,
)
from ledger_store.domain.errors import InvalidPeriodError


def period_bounds(period: str, now: datetime) -> tuple[datetime, datetime]:
    """Return the half-open ``[start, end)`` range of a calendar period.

    Args:
        period: ``today`` for the current day, ``month`` for the current month.
        now: Current local time.

    Returns:
        tuple[datetime, datetime]: Inclusive start and exclusive end.

    Raises:
        InvalidPeriodError: If the period name is not supported.
    """
    if period == PERIOD_TODAY:
        start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        return start, start + timedelta(days=1)
    if period == PERIOD_MONTH:
        return month_bounds(now)
    raise InvalidPeriodError(
        f"Unsupported period: {period!r}. "
        f"Expected one of {', '.join(EXPENSE_PERIODS)}."
    )


def month_bounds(now: datetime) -> tuple[datetime, datetime]:
    """Return the ``[start, end)`` range of the month containing ``now``."""
    start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    if start.month == 12:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return start, end


__all__ = ["period_bounds", "month_bounds"]

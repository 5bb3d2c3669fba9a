"""Budget computations for the dashboard."""

from decimal import Decimal
from logging import Logger

from ledger_store.domain.constants import WEEKS_PER_MONTH
from ledger_store.domain.models import (
    Account,
    BudgetSummary,
    CategoryExpense,
    LedgerConfig,
)
from ledger_store.utils.decimal_utils import coerce_decimal, to_money

_HUNDRED = Decimal("100")


def estimate_monthly_income(config: LedgerConfig) -> Decimal:
    """Return the monthly income implied by the config rule.

    Args:
        config: Income estimation settings.

    Returns:
        Decimal: ``manual_amount`` when overridden, otherwise
        ``daily_rate * days_per_week * 4.33``.
    """
    if config.manual_override:
        return to_money(config.manual_amount)
    return to_money(
        coerce_decimal(config.daily_rate)
        * Decimal(config.days_per_week)
        * WEEKS_PER_MONTH
    )


def compute_budget_percentage(
    expenses: Decimal,
    income: Decimal,
) -> Decimal:
    """Return the spent share of income clamped to ``[0, 100]``.

    Args:
        expenses: Expenses for the month.
        income: Estimated monthly income.

    Returns:
        Decimal: Percentage rounded to cents.
    """
    if income <= 0:
        return _HUNDRED if expenses > 0 else Decimal("0")
    ratio = expenses / income * _HUNDRED
    return to_money(min(_HUNDRED, max(Decimal("0"), ratio)))


def compute_budget_summary(
    config: LedgerConfig,
    accounts: list[Account],
    expenses_today: Decimal,
    expenses_month: Decimal,
    categories: dict[str, Decimal],
    logger: Logger,
) -> BudgetSummary:
    """Assemble dashboard figures from store reads.

    Args:
        config: Income estimation settings.
        accounts: Accounts currently in the store.
        expenses_today: Expense total for the current day.
        expenses_month: Expense total for the current month.
        categories: Current-month expenses by category, largest first.
        logger: Logger used for warnings.

    Returns:
        BudgetSummary: Computed dashboard figures.
    """
    income = estimate_monthly_income(config)
    total_balance = sum(
        (coerce_decimal(account.balance) for account in accounts),
        Decimal("0"),
    )
    if expenses_month > income:
        logger.warning(
            f"Monthly expenses {expenses_month} exceed estimated income {income}"
        )
    return BudgetSummary(
        estimated_income=income,
        total_balance=to_money(total_balance),
        expenses_today=to_money(expenses_today),
        expenses_month=to_money(expenses_month),
        budget_percentage=compute_budget_percentage(expenses_month, income),
        categories=[
            CategoryExpense(category=name, amount=to_money(amount))
            for name, amount in categories.items()
        ],
    )


__all__ = [
    "estimate_monthly_income",
    "compute_budget_percentage",
    "compute_budget_summary",
]

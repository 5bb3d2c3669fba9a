"""Domain models for dashboard aggregates."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CategoryExpense:
    """Expense total for a single category."""

    category: str
    amount: Decimal


@dataclass(frozen=True)
class BudgetSummary:
    """Dashboard figures for the current month.

    Attributes:
        estimated_income: Monthly income from the config rule.
        total_balance: Sum of all account balances.
        expenses_today: Expenses dated on the current local day.
        expenses_month: Expenses dated in the current local month.
        budget_percentage: Share of income already spent, within [0, 100].
        categories: Current-month expenses, largest first.
    """

    estimated_income: Decimal
    total_balance: Decimal
    expenses_today: Decimal
    expenses_month: Decimal
    budget_percentage: Decimal
    categories: list[CategoryExpense]

    @property
    def remaining_budget(self) -> Decimal:
        """Return estimated income minus this month's expenses."""
        return self.estimated_income - self.expenses_month


__all__ = ["CategoryExpense", "BudgetSummary"]

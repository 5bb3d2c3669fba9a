"""Use case to compute the dashboard budget summary."""

from ledger_store.application.ledger_store import LedgerStore
from ledger_store.domain.constants import PERIOD_MONTH, PERIOD_TODAY
from ledger_store.domain.models import BudgetSummary
from ledger_store.domain.services.budget import compute_budget_summary
from ledger_store.infrastructure.logging.logger import get_app_logger


class GetBudgetSummaryUseCase:
    """Combine income config, balances and expenses into dashboard figures.

    Reads go through the LedgerStore, so a storage failure shows up as empty
    or zero figures rather than an exception.
    """

    def __init__(self, store: LedgerStore, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Ledger store providing fail-soft reads.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> BudgetSummary:
        """Return the budget summary for the current month."""
        config = self._store.get_config()
        accounts = self._store.get_accounts()
        expenses_today = self._store.get_expenses_by_period(PERIOD_TODAY)
        expenses_month = self._store.get_expenses_by_period(PERIOD_MONTH)
        categories = self._store.get_expenses_by_category()

        summary = compute_budget_summary(
            config,
            accounts,
            expenses_today,
            expenses_month,
            categories,
            self._logger,
        )
        self._logger.info(
            f"Budget summary computed: income={summary.estimated_income}, "
            f"expenses_month={summary.expenses_month}, "
            f"balance={summary.total_balance}"
        )
        return summary


__all__ = ["GetBudgetSummaryUseCase"]

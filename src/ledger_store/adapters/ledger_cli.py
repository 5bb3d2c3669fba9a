"""CLI adapter to operate a ledger store file.

This module wires the LedgerStore to the concrete database adapter and
exposes a few subcommands for local use: initializing the store, listing
accounts and transactions, recording entries and printing the budget
summary.
"""

import argparse
from collections.abc import Sequence

from ledger_store.application.use_cases.get_budget_summary import (
    GetBudgetSummaryUseCase,
)
from ledger_store.domain.constants import (
    DEFAULT_ACCOUNT_COLOR,
    DEFAULT_TRANSACTIONS_LIMIT,
    TRANSACTION_TYPES,
)
from ledger_store.infrastructure.container import (
    build_database_adapter,
    build_ledger_store,
)
from ledger_store.infrastructure.logging.logger import get_app_logger
from ledger_store.infrastructure.settings import LedgerSettings
from ledger_store.utils.decimal_utils import format_currency


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ledger-store",
        description="Manage a local personal finance ledger.",
    )
    parser.add_argument(
        "--db",
        help="Path to the SQLite ledger file (defaults to LEDGER_DB_* env).",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init", help="Create tables and default data.")
    commands.add_parser("accounts", help="List accounts and balances.")

    add_account = commands.add_parser("add-account", help="Create an account.")
    add_account.add_argument("name")
    add_account.add_argument("balance")
    add_account.add_argument("--color", default=DEFAULT_ACCOUNT_COLOR)

    record = commands.add_parser("record", help="Record a transaction.")
    record.add_argument("description")
    record.add_argument("amount")
    record.add_argument("type", choices=TRANSACTION_TYPES)
    record.add_argument("category")
    record.add_argument("account_id", type=int)

    transactions = commands.add_parser(
        "transactions",
        help="List recent transactions.",
    )
    transactions.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_TRANSACTIONS_LIMIT,
    )

    commands.add_parser("summary", help="Print the monthly budget summary.")
    return parser


def _parse_amount(raw: str) -> str:
    """Accept both ``12.50`` and ``12,50`` amount spellings."""
    return raw.strip().replace(",", ".")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ledger CLI.

    Args:
        argv: Command-line arguments; ``sys.argv[1:]`` when None.

    Returns:
        int: Process exit code.
    """
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    settings = LedgerSettings.for_file(args.db) if args.db else None
    store = build_ledger_store(build_database_adapter(settings))

    with store:
        if not store.init_database():
            logger.error("Ledger database could not be initialized")
            return 1

        if args.command == "init":
            print("Ledger database ready.")
            return 0

        if args.command == "accounts":
            for account in store.get_accounts():
                print(
                    f"{account.id:>4}  {account.name:<20} "
                    f"{format_currency(account.balance)}"
                )
            return 0

        if args.command == "add-account":
            account_id = store.add_account(
                args.name,
                _parse_amount(args.balance),
                args.color,
            )
            if account_id is None:
                print("Account could not be created.")
                return 1
            print(f"Created account {account_id}.")
            return 0

        if args.command == "record":
            transaction_id = store.add_transaction(
                args.description,
                _parse_amount(args.amount),
                args.type,
                args.category,
                args.account_id,
            )
            if transaction_id is None:
                print("Transaction could not be recorded.")
                return 1
            print(f"Recorded transaction {transaction_id}.")
            return 0

        if args.command == "transactions":
            for tx in store.get_transactions(args.limit):
                sign = "+" if tx.type == "income" else "-"
                print(
                    f"{tx.date:%Y-%m-%d}  {sign}{format_currency(tx.amount)}  "
                    f"{tx.description} ({tx.category} / {tx.account_name})"
                )
            return 0

        summary = GetBudgetSummaryUseCase(store, logger=logger).execute()
        print(f"Estimated income: {format_currency(summary.estimated_income)}")
        print(f"Total balance:    {format_currency(summary.total_balance)}")
        print(f"Spent today:      {format_currency(summary.expenses_today)}")
        print(f"Spent this month: {format_currency(summary.expenses_month)}")
        print(f"Remaining:        {format_currency(summary.remaining_budget)}")
        print(f"Budget used:      {summary.budget_percentage}%")
        for item in summary.categories:
            print(f"  {item.category:<20} {format_currency(item.amount)}")
        return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

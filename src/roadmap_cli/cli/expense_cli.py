# src/roadmap_cli/cli/expense_cli.py

"""
expense-tracker entrypoint (argparse subcommands).

Exit status is 1 for validation and storage errors; a missing expense id
is reported but still exits 0.
"""

from __future__ import annotations

import argparse
import calendar
import logging
import sys

from ..config import Settings, get_settings
from ..expenses.expense_models import Expense
from ..expenses.expense_store import ExpenseStore
from ..storage.json_store import StoreError
from .bootstrap import build_expense_store, init_logging
from .commands import ArgumentParser, UsageError

logger = logging.getLogger(__name__)


def format_expense(expense: Expense) -> str:
    return (
        f"{expense.id}   {expense.date:%Y-%m-%d}  "
        f"{expense.description:<12} ${expense.amount:.2f}"
    )


def cmd_add(store: ExpenseStore, args: argparse.Namespace) -> str:
    expense = store.add_expense(args.description, args.amount)
    return f"Expense added successfully (ID: {expense.id})"


def cmd_update(store: ExpenseStore, args: argparse.Namespace) -> str:
    expense = store.update_expense(args.id, description=args.description, amount=args.amount)
    if expense is None:
        return f"Expense {args.id} not found"
    return "Expense updated successfully"


def cmd_delete(store: ExpenseStore, args: argparse.Namespace) -> str:
    if not store.delete_expense(args.id):
        return f"Expense {args.id} not found"
    return "Expense deleted successfully"


def cmd_list(store: ExpenseStore, args: argparse.Namespace) -> str:
    expenses = store.list_expenses()
    if not expenses:
        return "No expenses found"
    lines = ["ID  Date       Description  Amount"]
    lines.extend(format_expense(e) for e in expenses)
    return "\n".join(lines)


def cmd_summary(store: ExpenseStore, args: argparse.Namespace) -> str:
    total = store.summary(args.month)
    if args.month is None:
        return f"Total expenses: ${total:.2f}"
    return f"Total expenses for {calendar.month_name[args.month]}: ${total:.2f}"


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="expense-tracker", description="Track personal expenses.")
    sub = parser.add_subparsers(dest="command", metavar="<command>", required=True)

    p_add = sub.add_parser("add", help="Add an expense.")
    p_add.add_argument("--description", required=True, help="Description of the expense")
    p_add.add_argument("--amount", required=True, type=float, help="Amount of the expense")
    p_add.set_defaults(handler=cmd_add)

    p_update = sub.add_parser("update", help="Change an expense's description and/or amount.")
    p_update.add_argument("--id", required=True, type=int, help="ID of the expense to update")
    p_update.add_argument("--description", help="New description")
    p_update.add_argument("--amount", type=float, help="New amount")
    p_update.set_defaults(handler=cmd_update)

    p_delete = sub.add_parser("delete", help="Delete an expense.")
    p_delete.add_argument("--id", required=True, type=int, help="ID of the expense to delete")
    p_delete.set_defaults(handler=cmd_delete)

    p_list = sub.add_parser("list", help="List all expenses.")
    p_list.set_defaults(handler=cmd_list)

    p_summary = sub.add_parser("summary", help="Total of all expenses, or of one month this year.")
    p_summary.add_argument("--month", type=int, help="Month number (1-12) for summary")
    p_summary.set_defaults(handler=cmd_summary)

    return parser


def main(
    argv: list[str] | None = None,
    *,
    settings: Settings | None = None,
    store: ExpenseStore | None = None,
) -> int:
    if settings is None:
        settings = get_settings()
    init_logging(settings)

    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        print(exc)
        return 1

    if store is None:
        store = build_expense_store(settings)

    try:
        output = args.handler(store, args)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    except StoreError as exc:
        logger.debug("Expense command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}")
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

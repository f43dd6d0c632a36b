# src/roadmap_cli/expenses/expense_store.py

from __future__ import annotations

import logging

from ..core.clock import Clock, local_now
from ..storage.json_store import Document, JsonRecordStore, next_id
from .expense_models import Expense, validate_amount

logger = logging.getLogger(__name__)


class ExpenseStore:
    """JSON-file expense store (same read-modify-write cycle as TaskStore)."""

    def __init__(self, document: Document, *, clock: Clock | None = None) -> None:
        self._records: JsonRecordStore[Expense] = JsonRecordStore(document, Expense)
        self._clock = clock or local_now

    @property
    def records(self) -> JsonRecordStore[Expense]:
        return self._records

    def add_expense(self, description: str, amount: float) -> Expense:
        if not description or not description.strip():
            raise ValueError("description is required")
        value = validate_amount(amount)

        expenses = self._records.load()
        expense = Expense(
            id=next_id(expenses),
            date=self._clock(),
            description=description.strip(),
            amount=value,
        )
        expenses.append(expense)
        self._records.save(expenses)
        logger.info("Expense added id=%s amount=%.2f", expense.id, expense.amount)
        return expense

    def update_expense(
        self,
        expense_id: int,
        *,
        description: str | None = None,
        amount: float | None = None,
    ) -> Expense | None:
        if description is None and amount is None:
            raise ValueError("nothing to update: give a description and/or an amount")
        if description is not None and not description.strip():
            raise ValueError("description must not be empty")
        value = validate_amount(amount) if amount is not None else None

        expenses = self._records.load()
        for expense in expenses:
            if expense.id == expense_id:
                if description is not None:
                    expense.description = description.strip()
                if value is not None:
                    expense.amount = value
                self._records.save(expenses)
                logger.info("Expense updated id=%s", expense_id)
                return expense
        logger.debug("update_expense: expense id=%s not found", expense_id)
        return None

    def delete_expense(self, expense_id: int) -> bool:
        expenses = self._records.load()
        for idx, expense in enumerate(expenses):
            if expense.id == expense_id:
                del expenses[idx]
                self._records.save(expenses)
                logger.info("Expense deleted id=%s", expense_id)
                return True
        logger.debug("delete_expense: expense id=%s not found", expense_id)
        return False

    def list_expenses(self) -> list[Expense]:
        return self._records.load()

    def summary(self, month: int | None = None) -> float:
        """
        Total amount of all expenses, or only of those dated in `month`
        (1-12) of the current year.
        """
        if month is not None and not 1 <= month <= 12:
            raise ValueError("month must be between 1 and 12")

        expenses = self._records.load()
        if month is None:
            return sum(e.amount for e in expenses)

        year = self._clock().year
        return sum(e.amount for e in expenses if e.date.year == year and e.date.month == month)

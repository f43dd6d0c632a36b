# tests/test_expense_store.py

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from roadmap_cli.expenses.expense_store import ExpenseStore

from .fakes import FakeClock, MemoryDocument


def _seed(store: ExpenseStore, clock: FakeClock, items: list[tuple[datetime, str, float]]) -> None:
    for when, desc, amount in items:
        clock.now = when
        store.add_expense(desc, amount)


def test_add_and_list(expense_store: ExpenseStore, expense_doc: MemoryDocument, clock: FakeClock) -> None:
    first = expense_store.add_expense("Lunch", 20)
    second = expense_store.add_expense("Dinner", 10.5)

    assert (first.id, second.id) == (1, 2)
    assert [e.description for e in expense_store.list_expenses()] == ["Lunch", "Dinner"]

    data = json.loads(expense_doc.text or "")
    assert data[0] == {
        "id": 1,
        "date": clock().isoformat(),
        "description": "Lunch",
        "amount": 20.0,
    }


@pytest.mark.parametrize(
    ("description", "amount"),
    [("", 5.0), ("  ", 5.0), ("x", 0), ("x", -1.5), ("x", float("nan")), ("x", float("inf"))],
)
def test_add_validation(
    expense_store: ExpenseStore, expense_doc: MemoryDocument, description: str, amount: float
) -> None:
    with pytest.raises(ValueError):
        expense_store.add_expense(description, amount)
    assert expense_doc.writes == 0


def test_delete_uses_max_plus_one_afterwards(expense_store: ExpenseStore) -> None:
    for i in range(3):
        expense_store.add_expense(f"e{i}", 1)

    assert expense_store.delete_expense(1)
    assert expense_store.delete_expense(1) is False
    # count+1 would collide with id 3 here
    assert expense_store.add_expense("new", 1).id == 4


def test_update_expense(expense_store: ExpenseStore) -> None:
    expense_store.add_expense("Taxi", 12)

    updated = expense_store.update_expense(1, amount=15.25)
    assert updated is not None
    assert updated.description == "Taxi"
    assert updated.amount == 15.25

    updated = expense_store.update_expense(1, description="Cab")
    assert updated is not None
    assert updated.description == "Cab"

    assert expense_store.update_expense(7, amount=1) is None

    with pytest.raises(ValueError):
        expense_store.update_expense(1)
    with pytest.raises(ValueError):
        expense_store.update_expense(1, amount=-3)


def test_summary_total_and_month(expense_store: ExpenseStore, clock: FakeClock) -> None:
    year = clock().year
    _seed(
        expense_store,
        clock,
        [
            (datetime(year, 1, 10, tzinfo=timezone.utc), "Books", 10.00),
            (datetime(year, 3, 2, tzinfo=timezone.utc), "Shoes", 20.00),
            (datetime(year - 1, 1, 20, tzinfo=timezone.utc), "Old", 5.00),
        ],
    )
    clock.now = datetime(year, 6, 1, tzinfo=timezone.utc)

    assert expense_store.summary() == pytest.approx(35.0)
    assert expense_store.summary(1) == pytest.approx(10.0)
    assert expense_store.summary(3) == pytest.approx(20.0)
    assert expense_store.summary(12) == 0


@pytest.mark.parametrize("month", [0, 13, -1])
def test_summary_rejects_bad_month(expense_store: ExpenseStore, month: int) -> None:
    with pytest.raises(ValueError, match="between 1 and 12"):
        expense_store.summary(month)

# src/roadmap_cli/expenses/expense_models.py

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any


def validate_amount(amount: float) -> float:
    """Return the amount as float; it must be finite and greater than zero."""
    value = float(amount)
    if not math.isfinite(value) or value <= 0:
        raise ValueError("amount must be a positive number")
    return value


@dataclass(slots=True)
class Expense:
    id: int
    date: datetime
    description: str
    amount: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "description": self.description,
            "amount": self.amount,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Expense:
        expense_id = data["id"]
        if not isinstance(expense_id, int) or isinstance(expense_id, bool):
            raise TypeError("id must be an integer")
        raw_date = data["date"]
        if not isinstance(raw_date, str):
            raise TypeError("date must be a string timestamp")
        description = data["description"]
        if not isinstance(description, str):
            raise TypeError("description must be a string")
        amount = data["amount"]
        if not isinstance(amount, (int, float)) or isinstance(amount, bool):
            raise TypeError("amount must be a number")
        return cls(
            id=expense_id,
            date=datetime.fromisoformat(raw_date),
            description=description,
            amount=validate_amount(amount),
        )

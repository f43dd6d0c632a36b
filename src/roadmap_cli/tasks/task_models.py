# src/roadmap_cli/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any


class InvalidStatusError(ValueError):
    """Raised for a status string outside the TaskStatus values."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"invalid status {raw!r}")
        self.raw = raw


class TaskStatus(StrEnum):
    """Task lifecycle status, stored as its string value."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def parse(cls, raw: str) -> TaskStatus:
        try:
            return cls(raw)
        except ValueError:
            raise InvalidStatusError(raw) from None

    @classmethod
    def choices(cls) -> str:
        return ", ".join(s.value for s in cls)


def _parse_ts(raw: Any, key: str) -> datetime:
    if not isinstance(raw, str):
        raise TypeError(f"{key} must be a string timestamp")
    return datetime.fromisoformat(raw)


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        task_id = data["id"]
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise TypeError("id must be an integer")
        description = data["description"]
        if not isinstance(description, str):
            raise TypeError("description must be a string")
        return cls(
            id=task_id,
            description=description,
            status=TaskStatus.parse(data["status"]),
            created_at=_parse_ts(data["createdAt"], "createdAt"),
            updated_at=_parse_ts(data["updatedAt"], "updatedAt"),
        )

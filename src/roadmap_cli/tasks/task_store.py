# src/roadmap_cli/tasks/task_store.py

from __future__ import annotations

import logging

from ..core.clock import Clock, local_now
from ..storage.json_store import Document, JsonRecordStore, next_id
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON-file task store.

    Each mutating call is a full read-modify-write of the document:
    - load every task
    - change the in-memory list
    - save the whole list back

    A missing document counts as an empty store; it is created by the first add.
    """

    def __init__(self, document: Document, *, clock: Clock | None = None) -> None:
        self._records: JsonRecordStore[Task] = JsonRecordStore(document, Task)
        self._clock = clock or local_now

    @property
    def records(self) -> JsonRecordStore[Task]:
        return self._records

    def add_task(self, description: str) -> Task:
        if not description or not description.strip():
            raise ValueError("description is required")

        tasks = self._records.load()
        now = self._clock()
        task = Task(
            id=next_id(tasks),
            description=description.strip(),
            status=TaskStatus.TODO,
            created_at=now,
            updated_at=now,
        )
        tasks.append(task)
        self._records.save(tasks)
        logger.info("Task added id=%s", task.id)
        return task

    def get_task(self, task_id: int) -> Task | None:
        for task in self._records.load():
            if task.id == task_id:
                return task
        return None

    def update_description(self, task_id: int, description: str) -> Task | None:
        if not description or not description.strip():
            raise ValueError("description is required")

        tasks = self._records.load()
        for task in tasks:
            if task.id == task_id:
                task.description = description.strip()
                task.updated_at = self._clock()
                self._records.save(tasks)
                logger.info("Task updated id=%s", task_id)
                return task
        logger.debug("update_description: task id=%s not found", task_id)
        return None

    def set_status(self, task_id: int, status: str | TaskStatus) -> Task | None:
        """
        Move a task to another status.

        The status is validated before the store is read, so an invalid value
        raises InvalidStatusError with the document untouched.
        """
        new_status = TaskStatus.parse(str(status))

        tasks = self._records.load()
        for task in tasks:
            if task.id == task_id:
                task.status = new_status
                task.updated_at = self._clock()
                self._records.save(tasks)
                logger.info("Task status changed id=%s status=%s", task_id, new_status.value)
                return task
        logger.debug("set_status: task id=%s not found", task_id)
        return None

    def delete_task(self, task_id: int) -> bool:
        tasks = self._records.load()
        for idx, task in enumerate(tasks):
            if task.id == task_id:
                del tasks[idx]
                self._records.save(tasks)
                logger.info("Task deleted id=%s", task_id)
                return True
        logger.debug("delete_task: task id=%s not found", task_id)
        return False

    def list_tasks(self, status: str | TaskStatus | None = None) -> list[Task]:
        """All tasks in stored order, optionally only those with an exact status."""
        wanted = TaskStatus.parse(str(status)) if status is not None else None
        tasks = self._records.load()
        if wanted is None:
            return tasks
        return [t for t in tasks if t.status is wanted]

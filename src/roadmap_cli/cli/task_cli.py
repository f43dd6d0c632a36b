# src/roadmap_cli/cli/task_cli.py

"""
task-tracker entrypoint.

    task-tracker add <description...>
    task-tracker update <id> <description...>
    task-tracker delete <id>
    task-tracker in-progress|done|todo <id>
    task-tracker mark <id> <status>
    task-tracker list [status] | list-todo | list-in-progress | list-done
"""

from __future__ import annotations

import logging
import sys

from ..config import Settings, get_settings
from ..storage.json_store import StoreError
from ..tasks.task_models import InvalidStatusError, Task, TaskStatus
from ..tasks.task_store import TaskStore
from .bootstrap import build_task_store, init_logging
from .commands import CommandHandler, CommandRegistry, UsageError, join_words, parse_id

logger = logging.getLogger(__name__)

registry: CommandRegistry[TaskStore] = CommandRegistry("task-tracker")

INVALID_STATUS_MESSAGE = f"Invalid status. Use: {TaskStatus.choices()}"


def format_task(task: Task) -> str:
    return (
        f"ID: {task.id}, Description: {task.description}, Status: {task.status.value}, "
        f"Created: {task.created_at.isoformat()}, Updated: {task.updated_at.isoformat()}"
    )


def _task_id(raw: str) -> int:
    return parse_id(raw, "Task ID")


def _format_list(tasks: list[Task]) -> str:
    if not tasks:
        return "No tasks found"
    return "\n".join(format_task(t) for t in tasks)


def cmd_help(store: TaskStore, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(store: TaskStore, args: list[str]) -> str:
    description = join_words(args)
    if not description:
        raise UsageError(registry.usage_for("add"))
    task = store.add_task(description)
    return f"Task added with ID: {task.id}"


def cmd_update(store: TaskStore, args: list[str]) -> str:
    if len(args) < 2:
        raise UsageError(registry.usage_for("update"))
    task_id = _task_id(args[0])
    description = join_words(args[1:])
    if not description:
        raise UsageError(registry.usage_for("update"))

    if store.update_description(task_id, description) is None:
        return f"Task {task_id} not found"
    return f"Task {task_id} updated"


def cmd_delete(store: TaskStore, args: list[str]) -> str:
    if len(args) != 1:
        raise UsageError(registry.usage_for("delete"))
    task_id = _task_id(args[0])
    if not store.delete_task(task_id):
        return f"Task {task_id} not found"
    return f"Task {task_id} deleted"


def _apply_status(store: TaskStore, task_id: int, status: str) -> str:
    try:
        task = store.set_status(task_id, status)
    except InvalidStatusError:
        return INVALID_STATUS_MESSAGE
    if task is None:
        return f"Task {task_id} not found"
    return f"Task {task_id} status updated to {task.status.value}"


def cmd_mark(store: TaskStore, args: list[str]) -> str:
    if len(args) != 2:
        raise UsageError(registry.usage_for("mark"))
    return _apply_status(store, _task_id(args[0]), args[1])


def _status_command(status: TaskStatus) -> CommandHandler[TaskStore]:
    def handler(store: TaskStore, args: list[str]) -> str:
        if len(args) != 1:
            raise UsageError(registry.usage_for(status.value))
        return _apply_status(store, _task_id(args[0]), status.value)

    return handler


def cmd_list(store: TaskStore, args: list[str]) -> str:
    if len(args) > 1:
        raise UsageError(registry.usage_for("list"))
    if not args:
        return _format_list(store.list_tasks())
    try:
        return _format_list(store.list_tasks(args[0]))
    except InvalidStatusError:
        return INVALID_STATUS_MESSAGE


def _list_command(status: TaskStatus) -> CommandHandler[TaskStore]:
    def handler(store: TaskStore, args: list[str]) -> str:
        if args:
            raise UsageError(registry.usage_for(f"list-{status.value}"))
        return _format_list(store.list_tasks(status))

    return handler


registry.register("add", cmd_add, "Add a new task.", usage="<description...>")
registry.register(
    "update", cmd_update, "Change a task's description.", usage="<id> <description...>"
)
registry.register("delete", cmd_delete, "Delete a task.", usage="<id>")
registry.register(
    "in-progress",
    _status_command(TaskStatus.IN_PROGRESS),
    "Mark a task as in progress.",
    usage="<id>",
)
registry.register("done", _status_command(TaskStatus.DONE), "Mark a task as done.", usage="<id>")
registry.register(
    "todo", _status_command(TaskStatus.TODO), "Move a task back to todo.", usage="<id>"
)
registry.register(
    "mark", cmd_mark, f"Set a task's status ({TaskStatus.choices()}).", usage="<id> <status>"
)
registry.register("list", cmd_list, "List tasks, optionally only one status.", usage="[status]")
registry.register("list-todo", _list_command(TaskStatus.TODO), "List tasks still to do.")
registry.register(
    "list-in-progress", _list_command(TaskStatus.IN_PROGRESS), "List tasks in progress."
)
registry.register("list-done", _list_command(TaskStatus.DONE), "List finished tasks.")
registry.register("help", cmd_help, "Show available commands.", aliases=["-h", "--help"])


def main(
    argv: list[str] | None = None,
    *,
    settings: Settings | None = None,
    store: TaskStore | None = None,
) -> int:
    if settings is None:
        settings = get_settings()
    init_logging(settings)

    if argv is None:
        argv = sys.argv[1:]
    if store is None:
        store = build_task_store(settings)

    try:
        output = registry.handle(store, argv)
    except UsageError as exc:
        print(exc)
        return 1
    except StoreError as exc:
        logger.debug("Task command failed", exc_info=True)
        print(f"Error: {exc}")
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

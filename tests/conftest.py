# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from roadmap_cli.expenses.expense_store import ExpenseStore
from roadmap_cli.tasks.task_store import TaskStore

from .fakes import FakeClock, MemoryDocument


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Entry points configure root logging; keep pytest's own handlers intact."""
    monkeypatch.setattr("roadmap_cli.cli.bootstrap.setup_logging", lambda **_: None)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the entry points.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment and .env.
    """
    return SimpleNamespace(
        app_name="roadmap-cli-test",
        log_level="WARNING",
        log_file=None,
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.json",
        expenses_path=tmp_path / "expenses.json",
        github_api_url="https://api.github.test",
        github_timeout_seconds=1.0,
        github_user_agent="roadmap-cli-test",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def task_doc() -> MemoryDocument:
    return MemoryDocument()


@pytest.fixture()
def task_store(task_doc: MemoryDocument, clock: FakeClock) -> TaskStore:
    """TaskStore on an in-memory document with a pinned clock."""
    return TaskStore(task_doc, clock=clock)


@pytest.fixture()
def expense_doc() -> MemoryDocument:
    return MemoryDocument()


@pytest.fixture()
def expense_store(expense_doc: MemoryDocument, clock: FakeClock) -> ExpenseStore:
    return ExpenseStore(expense_doc, clock=clock)

# src/roadmap_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root" shared by the three entry points:
- configures logging from settings,
- wires settings into concrete stores and the GitHub client.
"""

from __future__ import annotations

import logging

from ..activity.github_client import GitHubClient
from ..config import Settings, get_settings
from ..expenses.expense_store import ExpenseStore
from ..logging_setup import level_from_name, setup_logging
from ..storage.json_store import FileDocument
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def init_logging(settings: Settings | None = None) -> None:
    if settings is None:
        settings = get_settings()
    setup_logging(
        console_level=level_from_name(getattr(settings, "log_level", "WARNING")),
        log_file=getattr(settings, "log_file", None),
    )


def build_task_store(settings: Settings) -> TaskStore:
    logger.debug("Task store at %s", settings.tasks_path)
    return TaskStore(FileDocument(settings.tasks_path))


def build_expense_store(settings: Settings) -> ExpenseStore:
    logger.debug("Expense store at %s", settings.expenses_path)
    return ExpenseStore(FileDocument(settings.expenses_path))


def build_github_client(settings: Settings) -> GitHubClient:
    return GitHubClient(
        base_url=settings.github_api_url,
        timeout=settings.github_timeout_seconds,
        user_agent=settings.github_user_agent,
    )

# src/roadmap_cli/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object shared by all three command-line tools.
- Nothing required at import time: every key has a default.
- Data files default to the current directory, like the original scripts.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "ROADMAP"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except ImportError:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Path | None

    # ---- Local data files ----
    data_dir: Path
    tasks_path: Path
    expenses_path: Path

    # ---- GitHub activity feed ----
    github_api_url: str
    github_timeout_seconds: float
    github_user_agent: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "roadmap-cli")
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_file = _env_optional_path(_k("LOG_FILE"))

        data_dir = _env_path(_k("DATA_DIR"), Path("."))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.json")
        expenses_path = _env_path(_k("EXPENSES_PATH"), data_dir / "expenses.json")

        github_api_url = _env(_k("GITHUB_API_URL"), "https://api.github.com").rstrip("/")
        # Zero or negative would disable the timeout entirely; fall back to the default.
        github_timeout_seconds = _env_float(_k("GITHUB_TIMEOUT_SECONDS"), 10.0)
        if github_timeout_seconds <= 0:
            github_timeout_seconds = 10.0
        github_user_agent = _env(_k("GITHUB_USER_AGENT"), f"{app_name}/github-activity")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file=log_file,
            data_dir=data_dir,
            tasks_path=tasks_path,
            expenses_path=expenses_path,
            github_api_url=github_api_url,
            github_timeout_seconds=github_timeout_seconds,
            github_user_agent=github_user_agent,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS

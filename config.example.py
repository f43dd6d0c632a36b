# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting without opening roadmap_cli/config.py.
"""

ENV_VARS = {
    # App / logging
    "ROADMAP_APP_NAME": "App name used in the default User-Agent (default: roadmap-cli).",
    "ROADMAP_LOG_LEVEL": "Console (stderr) logging level (default: WARNING).",
    "ROADMAP_LOG_FILE": "Optional path of a DEBUG-level log file (default: unset, no file).",
    # Data files
    "ROADMAP_DATA_DIR": "Directory holding the JSON data files (default: current directory).",
    "ROADMAP_TASKS_PATH": "Task store file (default: $ROADMAP_DATA_DIR/tasks.json).",
    "ROADMAP_EXPENSES_PATH": "Expense store file (default: $ROADMAP_DATA_DIR/expenses.json).",
    # GitHub activity feed
    "ROADMAP_GITHUB_API_URL": "GitHub REST base URL (default: https://api.github.com).",
    "ROADMAP_GITHUB_TIMEOUT_SECONDS": "HTTP timeout in seconds (default: 10).",
    "ROADMAP_GITHUB_USER_AGENT": "User-Agent header sent to GitHub.",
}

# src/roadmap_cli/cli/activity_cli.py

"""github-activity entrypoint: print a user's recent public GitHub events."""

from __future__ import annotations

import logging
import sys

from ..activity.events import describe_event
from ..activity.github_client import FeedError, GitHubClient, friendly_feed_error_message
from ..config import Settings, get_settings
from .bootstrap import build_github_client, init_logging
from .commands import ArgumentParser, UsageError

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="github-activity", description="Show recent GitHub activity.")
    parser.add_argument("username", help="GitHub username")
    return parser


def main(
    argv: list[str] | None = None,
    *,
    settings: Settings | None = None,
    client: GitHubClient | None = None,
) -> int:
    if settings is None:
        settings = get_settings()
    init_logging(settings)

    try:
        args = build_parser().parse_args(argv)
    except UsageError as exc:
        print(exc)
        return 1

    username = args.username.strip()
    if not username:
        print("Usage: github-activity <username>")
        return 1

    owns_client = client is None
    if client is None:
        client = build_github_client(settings)

    try:
        events = client.fetch_user_events(username)
    except FeedError as exc:
        logger.debug("Feed fetch failed for %s", username, exc_info=True)
        print(friendly_feed_error_message(exc))
        return 1
    finally:
        if owns_client:
            client.close()

    lines = [line for line in (describe_event(e) for e in events) if line]
    if not lines:
        print(f"No recent activity found for {username}")
        return 0

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())

# src/roadmap_cli/activity/events.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Event:
    """The parts of a GitHub event the activity printer needs."""

    type: str
    repo_name: str
    commit_messages: list[str] = field(default_factory=list)
    payload: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Event:
        repo = data.get("repo") or {}
        payload = data.get("payload") or {}
        if not isinstance(repo, dict) or not isinstance(payload, dict):
            raise TypeError("event repo/payload must be objects")

        commits = payload.get("commits") or []
        messages: list[str] = []
        if isinstance(commits, list):
            for c in commits:
                if isinstance(c, dict):
                    messages.append(str(c.get("message", "")))

        return cls(
            type=str(data.get("type") or "UnknownEvent"),
            repo_name=str(repo.get("name") or "<unknown>"),
            commit_messages=messages,
            payload=payload,
        )


def _plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


def describe_event(event: Event) -> str | None:
    """
    Turn one event into a human-readable line.

    Returns None for pushes without commits, which are not worth printing.
    """
    repo = event.repo_name

    if event.type == "PushEvent":
        count = len(event.commit_messages)
        if count == 0:
            return None
        return f"Pushed {_plural(count, 'commit')} to {repo}"

    if event.type == "IssuesEvent":
        action = str(event.payload.get("action") or "opened")
        if action == "opened":
            return f"Opened a new issue in {repo}"
        return f"{action.capitalize()} an issue in {repo}"

    if event.type == "WatchEvent":
        return f"Starred {repo}"

    if event.type == "ForkEvent":
        return f"Forked {repo}"

    if event.type == "CreateEvent":
        ref_type = event.payload.get("ref_type")
        if ref_type:
            return f"Created {ref_type} in {repo}"
        return f"Created {repo}"

    return f"Performed {event.type} on {repo}"

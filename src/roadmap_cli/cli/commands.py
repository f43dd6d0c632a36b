# src/roadmap_cli/cli/commands.py

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S")

# A handler gets the store and the verb's remaining argv, and returns the text to print.
CommandHandler = Callable[[S, list[str]], str]


class UsageError(Exception):
    """Bad or missing command-line arguments. The CLI exits with status 1."""


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that raises UsageError instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(f"{self.format_usage().rstrip()}\nError: {message}")


def parse_id(raw: str, what: str = "ID") -> int:
    try:
        return int(raw)
    except ValueError:
        raise UsageError(f"{what} must be a number") from None


def join_words(words: list[str]) -> str:
    """Multi-word positional text: single spaces between words, no outer whitespace."""
    return " ".join(w.strip() for w in words if w.strip())


@dataclass(frozen=True, slots=True)
class _Command(Generic[S]):
    handler: CommandHandler[S]
    usage: str
    help_text: str


class CommandRegistry(Generic[S]):
    """Verb -> handler registry for positional-verb CLIs (add, list, done, ...)."""

    def __init__(self, prog: str) -> None:
        self.prog = prog
        self._commands: dict[str, _Command[S]] = {}
        self._order: list[str] = []

    def register(
        self,
        name: str,
        handler: CommandHandler[S],
        help_text: str,
        *,
        usage: str = "",
        aliases: list[str] | None = None,
    ) -> None:
        key = name.lower()
        cmd = _Command(handler=handler, usage=f"{key} {usage}".strip(), help_text=help_text)
        self._commands[key] = cmd
        self._order.append(key)
        for alias in aliases or []:
            self._commands[alias.lower()] = cmd

    def names(self) -> list[str]:
        return list(self._order)

    def usage_for(self, name: str) -> str:
        return f"Usage: {self.prog} {self._commands[name.lower()].usage}"

    def handle(self, store: S, argv: list[str]) -> str:
        """
        Dispatch ["verb", *args] to its handler.

        Raises UsageError for a missing or unknown verb.
        """
        if not argv:
            raise UsageError(self.build_help())

        name = argv[0].lower()
        cmd = self._commands.get(name)
        if cmd is None:
            raise UsageError(f"Unknown command: {name}\n{self.build_help()}")

        logger.debug("Dispatching command=%s args=%d", name, len(argv) - 1)
        return cmd.handler(store, argv[1:])

    def build_help(self) -> str:
        lines = [f"Usage: {self.prog} <command> [args]", "Commands:"]
        width = max((len(self._commands[n].usage) for n in self._order), default=0)
        for name in self._order:
            cmd = self._commands[name]
            lines.append(f"  {cmd.usage.ljust(width)}  {cmd.help_text}")
        return "\n".join(lines)

# src/roadmap_cli/core/clock.py

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

# Injected into stores so tests can pin "now".
Clock = Callable[[], datetime]


def local_now() -> datetime:
    """Current local time with UTC offset, truncated to whole seconds."""
    return datetime.now().astimezone().replace(microsecond=0)

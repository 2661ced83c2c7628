from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable


@dataclass
class TodoItem:
    id: int
    text: str
    completed: bool = False


@dataclass(frozen=True)
class ChatMessage:
    id: int
    content: str
    is_user: bool
    timestamp: datetime


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class IdSequence:
    """Millisecond timestamp ids that never repeat within one sequence.

    Two ids requested in the same millisecond are bumped by one, so the
    sequence is strictly increasing even when the clock is not.
    """

    def __init__(self, clock_ms: Callable[[], int] | None = None) -> None:
        self._clock_ms = clock_ms or _now_ms
        self._last = 0

    def next_id(self) -> int:
        candidate = max(self._clock_ms(), self._last + 1)
        self._last = candidate
        return candidate

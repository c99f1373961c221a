"""
Bounded calculation history, most recent first.
"""
from collections import deque
from dataclasses import dataclass
from typing import Tuple

from backend import config


@dataclass(frozen=True)
class HistoryEntry:
    expression: str
    result: str

    def __str__(self):
        return f"{self.expression} = {self.result}"


class HistoryLog:
    def __init__(self, capacity: int = config.HISTORY_CAPACITY):
        # appendleft on a bounded deque drops the oldest entry from the right
        self._entries = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen

    def append(self, expression: str, result: str) -> HistoryEntry:
        entry = HistoryEntry(expression, result)
        self._entries.appendleft(entry)
        return entry

    def clear(self):
        self._entries.clear()

    def entries(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def __len__(self):
        return len(self._entries)

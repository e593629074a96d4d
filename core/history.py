# core/history.py
from __future__ import annotations
from typing import List

HISTORY_SIZE = 3


class PasswordHistory:
    """
    Most-recent-first list of generated passwords.
      - pushing a value already present moves it to the front
      - entries beyond `capacity` are evicted, oldest first
    """

    def __init__(self, capacity: int = HISTORY_SIZE):
        if capacity < 1:
            raise ValueError("History capacity must be at least 1.")
        self.capacity = capacity
        self._items: List[str] = []

    def push(self, password: str) -> None:
        if not password:
            return
        self._items = [password] + [p for p in self._items if p != password]
        del self._items[self.capacity:]

    def items(self) -> List[str]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

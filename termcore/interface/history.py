#!/usr/bin/env python3
# termcore/interface/history.py
from __future__ import annotations

"""
Bounded command history with older/newer navigation and persistence.

Entries are kept oldest first. The navigation cursor counts back from the
most recent entry: -1 is the live input line, 0 the newest entry.
"""

import enum
import json
import logging
from typing import Optional

from termcore.db.storage import KeyValueStore, MemoryStore

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 100
DEFAULT_HISTORY_KEY = "termcore.history"


class HistoryDirection(str, enum.Enum):
    OLDER = "older"
    NEWER = "newer"

    @classmethod
    def parse(cls, value: "HistoryDirection | str") -> "HistoryDirection":
        """Accept enum members, their values, or arrow-key names (up/down)."""
        if isinstance(value, cls):
            return value
        lowered = str(value).strip().lower()
        aliases = {"up": cls.OLDER, "down": cls.NEWER}
        if lowered in aliases:
            return aliases[lowered]
        return cls(lowered)


class HistoryStore:
    """Tracks submitted lines; skips empty lines and consecutive duplicates."""

    def __init__(
        self,
        storage: Optional[KeyValueStore] = None,
        *,
        capacity: int = DEFAULT_CAPACITY,
        key: str = DEFAULT_HISTORY_KEY,
    ) -> None:
        if capacity < 1:
            raise ValueError("History capacity must be >= 1")
        self._storage = storage if storage is not None else MemoryStore()
        self._capacity = capacity
        self._key = key
        self._entries: list[str] = []
        self._cursor = -1
        self._pending_input = ""
        self.restore()

    # ---------------- State ----------------

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def pending_input(self) -> str:
        return self._pending_input

    @property
    def navigating(self) -> bool:
        return self._cursor != -1

    def __len__(self) -> int:
        return len(self._entries)

    def reset_navigation(self) -> None:
        """Return to the live input line without touching entries."""
        self._cursor = -1
        self._pending_input = ""

    # ---------------- Mutation ----------------

    def record(self, line: str) -> bool:
        """Append line unless empty or equal to the last entry. Returns True if appended."""
        self.reset_navigation()
        if not line or not line.strip():
            return False
        if self._entries and self._entries[-1] == line:
            return False
        self._entries.append(line)
        if len(self._entries) > self._capacity:
            del self._entries[: len(self._entries) - self._capacity]
        self.persist()
        return True

    def clear(self) -> None:
        """Drop all entries and navigation state, then persist the empty list."""
        self._entries = []
        self.reset_navigation()
        self.persist()

    def navigate(self, direction: HistoryDirection | str, current_input: str) -> str:
        """Move through history and return the text the input line should show."""
        direction = HistoryDirection.parse(direction)
        if not self._entries:
            return current_input

        newest = len(self._entries) - 1
        if direction is HistoryDirection.OLDER:
            if self._cursor == -1:
                # Leaving the live line: keep what the user was typing
                self._pending_input = current_input
            if self._cursor >= newest:
                return current_input
            self._cursor += 1
            return self._entries[newest - self._cursor]

        if self._cursor > 0:
            self._cursor -= 1
            return self._entries[newest - self._cursor]
        if self._cursor == 0:
            restored = self._pending_input
            self.reset_navigation()
            return restored
        return current_input

    # ---------------- Persistence ----------------

    def persist(self) -> None:
        """Write entries to storage as a JSON array; failures are logged, not raised."""
        try:
            self._storage.set(self._key, json.dumps(self._entries))
        except Exception as exc:  # noqa: BLE001
            logger.warning("Failed to save history: %s", exc)

    def restore(self) -> None:
        """Load entries from storage; missing or malformed data yields empty history."""
        self._entries = []
        self.reset_navigation()
        try:
            raw = self._storage.get(self._key)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Failed to read history: %s", exc)
            return
        if not raw:
            return
        try:
            loaded = json.loads(raw)
        except (TypeError, ValueError) as exc:
            logger.warning("Failed to parse history: %s", exc)
            return
        if not isinstance(loaded, list) or not all(isinstance(item, str) for item in loaded):
            logger.warning("Ignoring stored history: expected a list of strings")
            return
        entries: list[str] = []
        for item in loaded:
            if item and (not entries or entries[-1] != item):
                entries.append(item)
        self._entries = entries[-self._capacity:]

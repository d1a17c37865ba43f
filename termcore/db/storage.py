#!/usr/bin/env python3
# termcore/db/storage.py
from __future__ import annotations
"""
Key-value persistence adapters for console state (history).

Adapters implement `get(key) -> str | None` and `set(key, value)`:
  MemoryStore: process-local dict, the default for embedded interpreters.
  SQLiteStore: single `kv` table in a SQLite file, one connection per call.
"""

import sqlite3
from pathlib import Path
from typing import Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Persistence adapter consumed by HistoryStore."""

    def get(self, key: str) -> Optional[str]:  # pragma: no cover - protocol
        ...

    def set(self, key: str, value: str) -> None:  # pragma: no cover - protocol
        ...


class MemoryStore:
    """Dict-backed store; state lives as long as the object."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class SQLiteStore:
    """Key-value table in a SQLite database file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.initialize()

    def _open_connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.path)
        conn.execute("PRAGMA journal_mode=WAL;")
        conn.execute("PRAGMA synchronous=NORMAL;")
        return conn

    def initialize(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        conn = self._open_connection()
        try:
            with conn:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS kv (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL
                    )
                    """
                )
        finally:
            conn.close()

    def get(self, key: str) -> Optional[str]:
        conn = self._open_connection()
        try:
            row = conn.execute(
                "SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        finally:
            conn.close()
        return None if row is None else row[0]

    def set(self, key: str, value: str) -> None:
        conn = self._open_connection()
        try:
            with conn:
                conn.execute(
                    """
                    INSERT INTO kv (key, value) VALUES (?, ?)
                    ON CONFLICT(key) DO UPDATE SET value = excluded.value
                    """,
                    (key, value),
                )
        finally:
            conn.close()

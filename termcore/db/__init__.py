#!/usr/bin/env python3
# termcore/db/__init__.py
from __future__ import annotations

"""
Package for configuration and persistence.

Provides:
- Configuration loader with environment variable overrides (`config`).
- Key-value persistence adapters used by the history store (`storage`).
"""


from .config import ConsoleConfig, DEFAULTS, load_config
from .storage import KeyValueStore, MemoryStore, SQLiteStore

__all__ = [
    "ConsoleConfig",
    "DEFAULTS",
    "load_config",
    "KeyValueStore",
    "MemoryStore",
    "SQLiteStore",
]

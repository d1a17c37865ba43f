#!/usr/bin/env python3
# termcore/commands/__init__.py
from __future__ import annotations

"""
Package for command definitions and registration.

Provides:
- Data structures and protocols (`CommandDefinition`, `CommandAction`,
  `CommandValidator`, `CommandCompleter`).
- The per-interpreter registry (`CommandRegistry`).

This package re-exports public APIs from:
- command_types.py
- commands.py
"""


# Re-export from submodules
from .command_types import (
    CommandAction,
    CommandCompleter,
    CommandDefinition,
    CommandValidator,
)
from .commands import CommandRegistry

__all__ = [
    "CommandAction",
    "CommandCompleter",
    "CommandDefinition",
    "CommandValidator",
    "CommandRegistry",
]

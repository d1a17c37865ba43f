#!/usr/bin/env python3
# termcore/commands/commands.py
from __future__ import annotations

"""
Command registry and decorator utilities.

This module provides:
- CommandRegistry: per-interpreter mapping of lower-cased names to commands.
- CommandRegistry.command: decorator to register functions with metadata.
"""

import logging
from typing import Any, Callable, Dict, Iterator, Optional

from termcore.commands.command_types import (
    CommandCompleter,
    CommandDefinition,
    CommandValidator,
)

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Holds command definitions keyed by lower-cased name, in registration order."""

    def __init__(self) -> None:
        self._commands_by_name: Dict[str, CommandDefinition] = {}

    # ---------------- Registration ----------------

    def register(self, command_obj: CommandDefinition) -> CommandDefinition:
        """Register a command; an existing entry with the same name is replaced."""
        if not isinstance(command_obj, CommandDefinition):
            raise TypeError(
                f"Expected CommandDefinition, got {type(command_obj).__name__}.")
        key = command_obj.key
        if key in self._commands_by_name:
            logger.debug("Replacing command definition for '%s'", key)
        self._commands_by_name[key] = command_obj
        return command_obj

    def unregister(self, name: str) -> Optional[CommandDefinition]:
        """Remove and return a command, or None if it was not registered."""
        return self._commands_by_name.pop(name.lower(), None)

    def command(
        self,
        *,
        name: str | None = None,
        description: str | None = None,
        usage: str | None = None,
        validator: CommandValidator | None = None,
        tab_complete: CommandCompleter | None = None,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """
        Decorator to register a function as a command.

        - `name` defaults to the function name.
        - `description` defaults to the first docstring line.
        """

        def wrapper(func: Callable[..., Any]) -> Callable[..., Any]:
            doc_line = (func.__doc__ or "").strip().splitlines()
            self.register(
                CommandDefinition(
                    name=name or func.__name__,
                    action=func,
                    description=(description or (
                        doc_line[0] if doc_line else "")).strip(),
                    usage=usage or "",
                    validator=validator,
                    tab_complete=tab_complete,
                )
            )
            return func

        return wrapper

    # ---------------- Lookup ----------------

    def lookup(self, name: str) -> Optional[CommandDefinition]:
        """Return the command registered under name (any case), or None."""
        return self._commands_by_name.get(name.lower())

    def list_all(self) -> Iterator[CommandDefinition]:
        """Yield commands in registration order (for help listings)."""
        yield from self._commands_by_name.values()

    def names(self) -> list[str]:
        """Return registry keys in registration order."""
        return list(self._commands_by_name.keys())

    def match_prefix(self, partial: str) -> list[str]:
        """Return registry keys starting with partial, case-insensitively."""
        prefix = partial.lower()
        return [key for key in self._commands_by_name if key.startswith(prefix)]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._commands_by_name

    def __len__(self) -> int:
        return len(self._commands_by_name)

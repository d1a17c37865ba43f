#!/usr/bin/env python3
# termcore/commands/command_types.py
from __future__ import annotations

"""
Command data structures and protocols.

This module defines:
- CommandAction: callable run with the argument list and the interpreter.
- CommandValidator: optional argument gate evaluated before the action.
- CommandCompleter: optional argument completer used by tab completion.
- CommandDefinition: a registered command with metadata and callables.
"""

from dataclasses import dataclass
from typing import Any, Protocol, Sequence


class CommandAction(Protocol):
    """Protocol for a command implementation."""

    def __call__(self, args: list[str], context: Any) -> Any:  # pragma: no cover - signature only
        ...


class CommandValidator(Protocol):
    """Protocol for an argument validator; False rejects the call."""

    def __call__(self, args: list[str]) -> bool:  # pragma: no cover - signature only
        ...


class CommandCompleter(Protocol):
    """Protocol for an argument completer."""

    def __call__(
        self,
        partial_arg: str,
        preceding_args: list[str],
        context: Any,
        arg_position: int,
    ) -> Sequence[str] | None:  # pragma: no cover - signature only
        ...


def _noop_action(args: list[str], context: Any) -> None:
    return None


@dataclass(slots=True)
class CommandDefinition:
    """
    A command with metadata and the callables that implement it.

    Important fields:
        name: Display name; the registry key is its lower-cased form.
        action: Function implementing the command (no-op when omitted).
        description: Short, user-facing description.
        usage: Usage line shown on invalid arguments (defaults to name).
        validator: Optional gate; returning False skips the action.
        tab_complete: Optional completer for the command's arguments.
    """

    name: str
    action: CommandAction | None = None
    description: str = ""
    usage: str = ""
    validator: CommandValidator | None = None
    tab_complete: CommandCompleter | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Command name must be a non-empty string.")
        if any(ch.isspace() for ch in self.name):
            raise ValueError(
                f"Command name '{self.name}' must not contain whitespace.")

        if self.action is None:
            self.action = _noop_action
        for field_name in ("action", "validator", "tab_complete"):
            value = getattr(self, field_name)
            if value is not None and not callable(value):
                raise TypeError(
                    f"Command '{self.name}': {field_name} must be callable, got {type(value).__name__}.")

        self.description = self.description or ""
        self.usage = self.usage or self.name

    @property
    def key(self) -> str:
        """Registry key (case-insensitive lookups)."""
        return self.name.lower()

    def accepts(self, args: list[str]) -> bool:
        """Return True when no validator is set or the validator accepts args."""
        if self.validator is None:
            return True
        return bool(self.validator(args))

    def invoke(self, args: list[str], context: Any) -> Any:
        """Execute the underlying action with the argument list and context."""
        return self.action(args, context)  # type: ignore[misc]

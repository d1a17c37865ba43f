#!/usr/bin/env python3
# termcore/interface/handler.py
from __future__ import annotations

"""
Command dispatch, history replay and completion entry points.

The Interpreter owns the registry, the history store and the completion
engine. A presentation surface forwards raw events to it:

  submit(line)              - run one input line
  navigate_history(dir)     - replace the input with an older/newer entry
  request_completion()      - apply the next tab completion
  input_changed(value)      - notify that the input line was edited

and receives output text, input replacements and an exit signal back.
"""

import logging
from typing import Callable, Optional

from termcore.commands import (
    CommandAction,
    CommandCompleter,
    CommandDefinition,
    CommandRegistry,
    CommandValidator,
)
from termcore.db.config import ConsoleConfig
from termcore.db.storage import KeyValueStore
from termcore.interface.builtins import register_default_commands
from termcore.interface.completion import CompletionEngine
from termcore.interface.history import HistoryDirection, HistoryStore
from termcore.interface.parser import split_command
from termcore.interface.surface import BufferSurface, ConsoleSurface

logger = logging.getLogger(__name__)


class Interpreter:
    """Single-threaded command interpreter; one event is handled at a time."""

    def __init__(
        self,
        surface: Optional[ConsoleSurface] = None,
        *,
        registry: Optional[CommandRegistry] = None,
        storage: Optional[KeyValueStore] = None,
        config: Optional[ConsoleConfig] = None,
        on_exit: Optional[Callable[[], None]] = None,
        install_defaults: bool = True,
    ) -> None:
        self.config = config if config is not None else ConsoleConfig()
        self.surface: ConsoleSurface = surface if surface is not None else BufferSurface()
        self.registry = registry if registry is not None else CommandRegistry()
        self.history = HistoryStore(
            storage,
            capacity=self.config.history_size,
            key=self.config.history_key,
        )
        self.completion = CompletionEngine(self.registry, context=self)
        self.prompt_symbol = self.config.prompt_symbol
        self._on_exit = on_exit
        self._last_written_input: Optional[str] = None
        self._skip_record = False
        self.colors: dict[str, Optional[str]] = {"foreground": None, "background": None}

        if install_defaults:
            register_default_commands(self)
        if self.config.welcome_message:
            self.write_line(self.config.welcome_message)

    # ---------------- Registration ----------------

    def register_command(
        self,
        name: str,
        action: Optional[CommandAction] = None,
        *,
        description: str = "",
        usage: str = "",
        validator: Optional[CommandValidator] = None,
        tab_complete: Optional[CommandCompleter] = None,
    ) -> CommandDefinition:
        """Build a definition from keyword options and register it."""
        return self.registry.register(
            CommandDefinition(
                name=name,
                action=action,
                description=description,
                usage=usage,
                validator=validator,
                tab_complete=tab_complete,
            )
        )

    # ---------------- Output ----------------

    def write(self, text: str) -> None:
        self.surface.write(text)

    def write_line(self, text: str = "") -> None:
        self.surface.write(f"{text}\n")

    def clear(self) -> None:
        """Clear the output area (history is kept)."""
        self.surface.clear()

    def hide(self) -> None:
        """Ask the presentation layer to hide or close the console."""
        if self._on_exit is None:
            logger.debug("exit requested but no exit handler is installed")
            return
        self._on_exit()

    def clear_history(self) -> None:
        """Empty history; the line being executed is not recorded afterwards."""
        self.history.clear()
        self._skip_record = True

    def update_appearance(
        self,
        *,
        foreground: Optional[str] = None,
        background: Optional[str] = None,
    ) -> None:
        """Change console colors; a layer left as None keeps its color."""
        if foreground is not None:
            self.colors["foreground"] = foreground
        if background is not None:
            self.colors["background"] = background
        # set_colors is optional on surfaces
        apply = getattr(self.surface, "set_colors", None)
        if apply is not None:
            apply(dict(self.colors))

    # ---------------- Events ----------------

    def submit(self, line: str) -> bool:
        """
        Execute one input line and record it in history.

        Returns True when a command ran to completion. Lookup, validation
        and execution failures are reported as output, never raised.
        """
        text = line.strip()
        if not text:
            return False

        self.completion.reset()
        self.history.reset_navigation()
        self.write_line(f"{self.prompt_symbol} {text}")

        self._skip_record = False
        try:
            ok = self._execute(text)
        finally:
            if not self._skip_record:
                self.history.record(text)
            self._skip_record = False
        return ok

    def submit_input(self) -> bool:
        """Submit the surface's current input line and clear it."""
        line = self.surface.get_input()
        self._set_input("")
        return self.submit(line)

    def navigate_history(self, direction: HistoryDirection | str) -> str:
        """Replace the input with an older or newer history entry; returns the new input."""
        current = self.surface.get_input()
        new_input = self.history.navigate(direction, current)
        self.completion.reset()
        if new_input != current:
            self._set_input(new_input)
        return new_input

    def request_completion(self) -> Optional[str]:
        """Apply the next completion to the input; returns it, or None if unchanged."""
        if not self.config.enable_completion:
            return None
        new_input = self.completion.complete(self.surface.get_input())
        if new_input is None:
            return None
        self._set_input(new_input)
        return new_input

    def input_changed(self, new_value: str) -> None:
        """
        Handle an input-line change reported by the surface.

        Values equal to the last input this interpreter wrote are echoes of
        its own writes; anything else is a user edit and ends any completion
        cycle.
        """
        if self._last_written_input is not None and new_value == self._last_written_input:
            return
        self._last_written_input = None
        self.completion.reset()

    # ---------------- Internals ----------------

    def _set_input(self, text: str) -> None:
        self._last_written_input = text
        self.surface.set_input(text)

    def _execute(self, text: str) -> bool:
        command_name, args = split_command(text)
        command_obj = self.registry.lookup(command_name)
        if command_obj is None:
            self.write_line(f"Command not found: {command_name}")
            return False

        try:
            if not command_obj.accepts(args):
                self.write_line(
                    f"Error: Invalid arguments for command '{command_name}'")
                self.write_line(f"Usage: {command_obj.usage}")
                return False
            command_obj.invoke(args, self)
        except Exception as exc:
            logger.debug("Command '%s' raised", command_name, exc_info=True)
            self.write_line(
                f"Error executing command '{command_name}': {exc}")
            return False
        return True

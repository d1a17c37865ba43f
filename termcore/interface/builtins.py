#!/usr/bin/env python3
# termcore/interface/builtins.py
from __future__ import annotations

"""
Default commands every interpreter ships with.

help          list commands, or show one command's description and usage
clear         clear the output area
about         static description text
clearHistory  empty the command history
exit          hide/close the console through the exit handler
"""

from typing import Any

from termcore.commands import CommandDefinition

# Short hint shown after the command listing
HELP_TEXT = 'Type "help <command>" for more information about a specific command.'

ABOUT_TEXT = (
    "Termcore - an embeddable command console",
    'Type "help" to see available commands.',
)


def _help(args: list[str], terminal: Any) -> None:
    if args:
        command_obj = terminal.registry.lookup(args[0])
        if command_obj is None:
            terminal.write_line(f"Command not found: {args[0].lower()}")
            return
        terminal.write_line(f"{command_obj.name}: {command_obj.description}")
        terminal.write_line(f"Usage: {command_obj.usage}")
        return

    terminal.write_line("Available commands:")
    for command_obj in terminal.registry.list_all():
        terminal.write_line(f"  {command_obj.name}: {command_obj.description}")
    terminal.write_line(f"\n{HELP_TEXT}")


def _help_complete(partial: str, preceding: list[str], terminal: Any, position: int) -> list[str]:
    if position != 1:
        return []
    return terminal.registry.match_prefix(partial)


def _clear(args: list[str], terminal: Any) -> None:
    terminal.clear()


def _about(args: list[str], terminal: Any) -> None:
    for line in ABOUT_TEXT:
        terminal.write_line(line)


def _clear_history(args: list[str], terminal: Any) -> None:
    terminal.clear_history()
    terminal.write_line("History cleared.")


def _exit(args: list[str], terminal: Any) -> None:
    terminal.hide()


def default_commands() -> list[CommandDefinition]:
    """Fresh definitions of the default commands, one set per interpreter."""
    return [
        CommandDefinition(
            name="help",
            action=_help,
            description="Display available commands",
            usage="help [command]",
            tab_complete=_help_complete,
        ),
        CommandDefinition(
            name="clear",
            action=_clear,
            description="Clear the terminal screen",
        ),
        CommandDefinition(
            name="about",
            action=_about,
            description="Display information about the terminal",
        ),
        CommandDefinition(
            name="clearHistory",
            action=_clear_history,
            description="Clear the terminal history",
        ),
        CommandDefinition(
            name="exit",
            action=_exit,
            description="Minimises the terminal",
        ),
    ]


def register_default_commands(terminal: Any) -> int:
    """Register defaults not already present in the registry; returns the count added."""
    added = 0
    for command_obj in default_commands():
        if command_obj.name in terminal.registry:
            continue
        terminal.registry.register(command_obj)
        added += 1
    return added

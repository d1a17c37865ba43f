# termcore/plugins/session.py
from __future__ import annotations

from typing import Any

from termcore.commands import CommandDefinition


# ---------- history ----------
def _history(args: list[str], terminal: Any) -> None:
    entries = terminal.history.entries
    if args:
        entries = entries[-int(args[0]):]
    if not entries:
        terminal.write_line("History is empty.")
        return
    offset = len(terminal.history) - len(entries)
    for number, line in enumerate(entries, start=offset + 1):
        terminal.write_line(f"{number:>4}  {line}")


def _history_args_ok(args: list[str]) -> bool:
    return len(args) == 0 or (len(args) == 1 and args[0].isdecimal() and int(args[0]) > 0)


# ---------- prompt ----------
def _prompt(args: list[str], terminal: Any) -> None:
    terminal.prompt_symbol = args[0]
    terminal.write_line(f"Prompt set to '{args[0]}'.")


COMMANDS = [
    CommandDefinition(
        name="history",
        action=_history,
        description="Show previously entered commands",
        usage="history [count]",
        validator=_history_args_ok,
    ),
    CommandDefinition(
        name="prompt",
        action=_prompt,
        description="Change the prompt symbol",
        usage="prompt <symbol>",
        validator=lambda args: len(args) == 1,
    ),
]

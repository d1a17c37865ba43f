# termcore/plugins/text.py
from __future__ import annotations

from typing import Any

from termcore.commands import CommandRegistry

COLORS = ("black", "blue", "cyan", "green", "magenta", "red", "white", "yellow")
LAYERS = ("background", "foreground")


def _color_complete(partial: str, preceding: list[str], terminal: Any, position: int) -> list[str]:
    """Position 1 picks the layer, position 2 the color name."""
    if position == 1:
        pool = LAYERS
    elif position == 2:
        pool = COLORS
    else:
        return []
    return [word for word in pool if word.startswith(partial.lower())]


def register(registry: CommandRegistry) -> None:
    @registry.command(usage="echo <text...>")
    def echo(args: list[str], terminal: Any) -> None:
        """Print the arguments back"""
        terminal.write_line(" ".join(args))

    @registry.command(
        usage="greet <name>",
        validator=lambda args: len(args) == 1,
    )
    def greet(args: list[str], terminal: Any) -> None:
        """Greet someone by name"""
        terminal.write_line(f"Hello, {args[0]}!")

    @registry.command(
        usage="color <background|foreground> <color>",
        validator=lambda args: len(args) == 2 and args[0].lower() in LAYERS and args[1].lower() in COLORS,
        tab_complete=_color_complete,
    )
    def color(args: list[str], terminal: Any) -> None:
        """Pick a console color"""
        layer, name = args[0].lower(), args[1].lower()
        terminal.update_appearance(**{layer: name})
        terminal.write_line(f"{layer.capitalize()} color set to {name}.")

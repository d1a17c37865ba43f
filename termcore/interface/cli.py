#!/usr/bin/env python3
# termcore/interface/cli.py
from __future__ import annotations

"""
Interactive terminal frontends (presentation surfaces).

Selection order:
    1) prompt_toolkit on a terminal (history keys + cycling tab completion)
    2) plain input for piped stdin (no completion)

Each frontend implements ConsoleSurface, is attached to an Interpreter with
`attach()`, and runs the read/submit loop with `run()` until `request_exit()`
is called (the interpreter's exit handler) or input ends.
"""

import sys
from typing import TYPE_CHECKING, Optional

from termcore.ui import clear_screen, colorize, print_line

if TYPE_CHECKING:
    from termcore.interface.handler import Interpreter


class BaseCLI:
    """
    Plain `input()` frontend and base class for richer ones.

    Subclasses usually override:
        - read_line()
        - get_input() / set_input()
    """

    def __init__(self) -> None:
        self.interpreter: Optional["Interpreter"] = None
        self._running = False
        self._input_text = ""
        self.colors: dict[str, Optional[str]] = {}

    # ---- ConsoleSurface ----

    def write(self, text: str) -> None:
        styles = []
        if self.colors.get("foreground"):
            styles.append(self.colors["foreground"])
        if self.colors.get("background"):
            styles.append(f"bg_{self.colors['background']}")
        print_line(colorize(text.removesuffix("\n"), *styles))

    def clear(self) -> None:
        clear_screen()

    def get_input(self) -> str:
        return self._input_text

    def set_input(self, text: str) -> None:
        self._input_text = text

    def set_colors(self, colors: dict[str, Optional[str]]) -> None:
        self.colors = dict(colors)

    # ---- lifecycle ----

    def attach(self, interpreter: "Interpreter") -> None:
        self.interpreter = interpreter

    def request_exit(self) -> None:
        self._running = False

    def prompt_text(self) -> str:
        symbol = self.interpreter.prompt_symbol if self.interpreter else ">"
        return f"{symbol} "

    def read_line(self) -> str:
        return input(self.prompt_text())

    def run(self) -> None:
        if self.interpreter is None:
            raise RuntimeError("No interpreter attached to the frontend.")
        self._running = True
        while self._running:
            try:
                line = self.read_line()
            except KeyboardInterrupt:
                continue
            except EOFError:
                break
            self.interpreter.submit(line)

    # Context manager helpers
    def __enter__(self) -> "BaseCLI":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._running = False


# ===== Preferred: prompt_toolkit =====
class PromptToolkitCLI(BaseCLI):
    """Line editor whose Up/Down/Tab keys are driven by the interpreter."""

    def __init__(self) -> None:
        super().__init__()
        from prompt_toolkit import PromptSession
        from prompt_toolkit.document import Document
        from prompt_toolkit.history import InMemoryHistory
        from prompt_toolkit.key_binding import KeyBindings

        self._document_cls = Document
        kb = KeyBindings()

        @kb.add("up")
        def _(event):
            if self.interpreter is not None:
                self.interpreter.navigate_history("older")

        @kb.add("down")
        def _(event):
            if self.interpreter is not None:
                self.interpreter.navigate_history("newer")

        @kb.add("tab")
        def _(event):
            if self.interpreter is not None:
                self.interpreter.request_completion()

        # History lives in the interpreter; keep prompt_toolkit's own empty.
        self._session = PromptSession(
            history=InMemoryHistory(),
            key_bindings=kb,
            complete_while_typing=False,
            # the interpreter echoes submitted lines itself
            erase_when_done=True,
        )
        self._session.default_buffer.on_text_changed += self._on_text_changed

    def _on_text_changed(self, buffer) -> None:
        if self.interpreter is not None:
            self.interpreter.input_changed(buffer.text)

    def get_input(self) -> str:
        return self._session.default_buffer.text

    def set_input(self, text: str) -> None:
        # Cursor to end of line after replacement
        self._session.default_buffer.document = self._document_cls(
            text, cursor_position=len(text))

    def read_line(self) -> str:
        return self._session.prompt(self.prompt_text)


def make_cli(*, interactive: Optional[bool] = None) -> BaseCLI:
    """
    Select the frontend: prompt_toolkit on a terminal, plain input for pipes.
    """
    if interactive is None:
        interactive = sys.stdin.isatty() and sys.stdout.isatty()
    return PromptToolkitCLI() if interactive else BaseCLI()

#!/usr/bin/env python3
# termcore/interface/surface.py
from __future__ import annotations

"""
Presentation surfaces.

A surface receives output text and owns the editable input line. The
interpreter only appends output, clears it, and reads/replaces the input.
Surfaces that can render colors may also define `set_colors(colors)`; it
receives a {"foreground": name, "background": name} mapping.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConsoleSurface(Protocol):
    """Interface the interpreter drives."""

    def write(self, text: str) -> None:  # pragma: no cover - interface
        ...

    def clear(self) -> None:  # pragma: no cover - interface
        ...

    def get_input(self) -> str:  # pragma: no cover - interface
        ...

    def set_input(self, text: str) -> None:  # pragma: no cover - interface
        ...


class BufferSurface:
    """In-memory surface for embedding and tests."""

    def __init__(self) -> None:
        self._chunks: list[str] = []
        self.input_text = ""
        self.clear_count = 0
        self.colors: dict[str, str | None] = {}

    def write(self, text: str) -> None:
        self._chunks.append(text)

    def clear(self) -> None:
        self._chunks.clear()
        self.clear_count += 1

    def get_input(self) -> str:
        return self.input_text

    def set_input(self, text: str) -> None:
        self.input_text = text

    def set_colors(self, colors: dict[str, str | None]) -> None:
        self.colors = dict(colors)

    @property
    def text(self) -> str:
        return "".join(self._chunks)

    @property
    def lines(self) -> list[str]:
        """Output split into lines (trailing newline dropped)."""
        return self.text.splitlines()

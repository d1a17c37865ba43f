#!/usr/bin/env python3
# termcore/ui/console.py
from __future__ import annotations

import sys
import threading

from .ansi import strip_ansi, supports_ansi

# Single shared print mutex for frontend output and logging.
PRINT_MUTEX = threading.Lock()


def print_line(text: str = "", *, file=None, flush: bool = False) -> None:
    """Thread-safe single-line print; escape sequences are dropped off-TTY."""
    stream = file if file is not None else sys.stdout
    if not supports_ansi(stream):
        text = strip_ansi(text)
    with PRINT_MUTEX:
        stream.write(f"{text}\n")
        if flush:
            stream.flush()


def clear_screen(*, file=None) -> None:
    """Clear the terminal and home the cursor (no-op off-TTY)."""
    stream = file if file is not None else sys.stdout
    if not supports_ansi(stream):
        return
    with PRINT_MUTEX:
        stream.write("\x1b[2J\x1b[H")
        stream.flush()

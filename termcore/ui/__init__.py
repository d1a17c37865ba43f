#!/usr/bin/env python3
# termcore/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .ansi import ANSI, colorize, strip_ansi, supports_ansi
from .console import PRINT_MUTEX, clear_screen, print_line
from .logging import ColorizingStreamHandler, PlainFormatter, init_logger

__all__ = [
    "ANSI",
    "colorize",
    "strip_ansi",
    "supports_ansi",
    "PRINT_MUTEX",
    "clear_screen",
    "print_line",
    "ColorizingStreamHandler",
    "PlainFormatter",
    "init_logger",
]

#!/usr/bin/env python3
# termcore/__init__.py
from __future__ import annotations
"""
Embeddable command console.

The interpreter engine lives in `termcore.interface`; command data types in
`termcore.commands`. prompt_toolkit is only imported when a terminal
frontend is built.
"""

try:
    from importlib.metadata import version

    __version__ = version("termcore")
except Exception:
    __version__ = "0.0.0.dev"

from termcore.commands import CommandDefinition, CommandRegistry  # noqa: E402
from termcore.interface.handler import Interpreter  # noqa: E402

__all__ = ["CommandDefinition", "CommandRegistry", "Interpreter", "__version__"]

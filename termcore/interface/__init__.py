#!/usr/bin/env python3
# termcore/interface/__init__.py
from __future__ import annotations

"""
Package for the interactive console engine and its frontends.

Provides:
- Tokenizer helpers.
- Bounded, persisted command history with navigation.
- Cycling tab completion for command names and arguments.
- The Interpreter (dispatch, default commands, event entry points).
- Dynamic command loader for plugin packages.
- Presentation surfaces: in-memory buffer and terminal frontends.
"""


# Parser utilities
from .parser import tokenize, split_command, split_for_completion, join_tokens

# Engine pieces
from .history import HistoryDirection, HistoryStore
from .completion import CompletionEngine, CompletionState
from .surface import BufferSurface, ConsoleSurface

# Command dispatcher / defaults
from .builtins import HELP_TEXT, default_commands, register_default_commands
from .handler import Interpreter

# Loader
from .loader import load_commands

# CLI frontends
from .cli import BaseCLI, PromptToolkitCLI, make_cli

__all__ = [
    # parser
    "tokenize",
    "split_command",
    "split_for_completion",
    "join_tokens",
    # engine
    "HistoryDirection",
    "HistoryStore",
    "CompletionEngine",
    "CompletionState",
    "BufferSurface",
    "ConsoleSurface",
    # handler
    "default_commands",
    "HELP_TEXT",
    "register_default_commands",
    "Interpreter",
    # loader
    "load_commands",
    # cli
    "BaseCLI",
    "PromptToolkitCLI",
    "make_cli",
]

#!/usr/bin/env python3
# termcore/interface/parser.py
from __future__ import annotations

"""
Input tokenization helpers.

Lines are split on runs of whitespace; there is no quoting or escaping.
"""


def tokenize(command_line: str) -> list[str]:
    """Split a raw command line into whitespace-delimited tokens."""
    return command_line.split()


def split_command(command_line: str) -> tuple[str, list[str]]:
    """
    Return (command_name, args) for a line.

    The command name is lower-cased; an empty line yields ("", []).
    """
    tokens = tokenize(command_line)
    if not tokens:
        return "", []
    command_name, *arg_tokens = tokens
    return command_name.lower(), arg_tokens


def split_for_completion(raw_input: str) -> list[str]:
    """
    Tokenize text being completed.

    Trailing whitespace appends an empty token so that "cmd " completes the
    first argument rather than the command name.
    """
    parts = raw_input.split()
    if raw_input and raw_input[-1].isspace():
        parts.append("")
    return parts or [""]


def join_tokens(tokens: list[str]) -> str:
    """Rejoin tokens with single spaces."""
    return " ".join(tokens)

#!/usr/bin/env python3
# termcore/interface/completion.py
from __future__ import annotations

"""
Tab completion with candidate cycling.

This module offers token-aware completion for:
- First token: registered command names (case-insensitive prefix match).
- Subsequent tokens: the command's own `tab_complete` handler, called with
  the partial argument, the arguments before it, the interpreter and the
  1-based position of the argument being completed.

When several candidates match, repeated requests cycle through them. A cycle
is identified by a key; while it is active, matching is recomputed from the
input as it was before the first request, so applied candidates never feed
back into the match.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Hashable, Optional

from termcore.commands import CommandRegistry
from termcore.interface.parser import join_tokens, split_for_completion

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CompletionState:
    """
    Snapshot of an in-progress completion cycle.

    Attributes:
        candidates: Match set being cycled through.
        index: Position of the candidate currently applied.
        key: Identity of the cycle; None when idle.
        original_input: Input line before the first request of the cycle.
    """
    candidates: tuple[str, ...] = ()
    index: int = 0
    key: Optional[Hashable] = None
    original_input: Optional[str] = None

    @classmethod
    def empty(cls) -> "CompletionState":
        return cls()

    @property
    def active(self) -> bool:
        return self.key is not None and bool(self.candidates)

    @property
    def current(self) -> str:
        return self.candidates[self.index]

    def advanced(self) -> "CompletionState":
        """Return the state pointing at the next candidate (wrapping)."""
        return replace(self, index=(self.index + 1) % len(self.candidates))


class CompletionEngine:
    """Computes replacement input lines for tab-completion requests."""

    def __init__(self, registry: CommandRegistry, context: Any = None) -> None:
        self._registry = registry
        self._context = context
        self._state = CompletionState.empty()

    @property
    def state(self) -> CompletionState:
        return self._state

    @property
    def active(self) -> bool:
        return self._state.active

    def reset(self) -> None:
        """Forget the current cycle; the next request matches afresh."""
        self._state = CompletionState.empty()

    def complete(self, current_input: str) -> Optional[str]:
        """
        Return the new input line for a completion request, or None for no change.
        """
        base = current_input
        if self._state.active and self._state.original_input is not None:
            base = self._state.original_input

        tokens = split_for_completion(base)
        if len(tokens) == 1:
            return self._complete_command_name(tokens[0], base)
        return self._complete_argument(tokens, base)

    # ---------------- Modes ----------------

    def _complete_command_name(self, partial: str, base: str) -> Optional[str]:
        if not partial:
            return None

        matches = self._registry.match_prefix(partial)
        if not matches:
            return None
        if len(matches) == 1:
            self.reset()
            return matches[0]

        key = ("command", partial.lower())
        self._state = self._next_state(key, matches, base)
        return self._state.current

    def _complete_argument(self, tokens: list[str], base: str) -> Optional[str]:
        command_name = tokens[0].lower()
        command_obj = self._registry.lookup(command_name)
        if command_obj is None or command_obj.tab_complete is None:
            return None

        partial_arg = tokens[-1]
        preceding_args = tokens[1:-1]
        arg_position = len(tokens) - 1

        try:
            result = command_obj.tab_complete(
                partial_arg, list(preceding_args), self._context, arg_position)
            candidates = [str(item) for item in (result or ())]
        except Exception:
            logger.exception("Error in tab completion for '%s'", command_name)
            return None

        if not candidates:
            return None
        if len(candidates) == 1:
            self.reset()
            return join_tokens([*tokens[:-1], candidates[0]])

        key = ("argument", command_name, arg_position, partial_arg)
        self._state = self._next_state(key, candidates, base)
        return join_tokens([*tokens[:-1], self._state.current])

    def _next_state(self, key: Hashable, candidates: list[str], base: str) -> CompletionState:
        """Advance the active cycle for key, or start a new one at index 0."""
        if self._state.active and self._state.key == key:
            return self._state.advanced()
        return CompletionState(
            candidates=tuple(candidates),
            index=0,
            key=key,
            original_input=base,
        )

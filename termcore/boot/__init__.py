#!/usr/bin/env python3
# termcore/boot/__init__.py
from __future__ import annotations
"""
Boot sequence package.

Exports:
- boot_sequence: startup pipeline with Linux-style [  OK  ] / [FAILED] lines.
- BootState: config, logger, storage, interpreter, frontend and plugin count.
"""


from .boot import BootState, boot_sequence

__all__ = ["boot_sequence", "BootState"]

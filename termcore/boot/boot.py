#!/usr/bin/env python3
# termcore/boot/boot.py
from __future__ import annotations
"""
Boot sequence for the termcore console.

Steps: load configuration, initialize logging, open history storage, build
the frontend and interpreter, load plugin commands. Each step reports a
Linux-style [  OK  ] / [FAILED] status line when SHOW_BOOT_STEPS is on.
"""

import logging
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from termcore.db import ConsoleConfig, KeyValueStore, MemoryStore, SQLiteStore, load_config
from termcore.interface import BaseCLI, Interpreter, load_commands, make_cli
from termcore.ui import colorize, init_logger, print_line


@dataclass(slots=True)
class BootState:
    config: ConsoleConfig
    logger: logging.Logger
    storage: KeyValueStore
    interpreter: Interpreter
    cli: BaseCLI
    loaded_count: int


def _step(label: str, fn: Callable[[], Any], *, verbose: bool = True) -> Any:
    """Run a boot step with status output."""
    try:
        out = fn()
    except Exception as exc:
        print_line(
            colorize(f"[FAILED] {label} ({type(exc).__name__}: {exc})", "red")
        )
        raise
    if verbose:
        print_line(colorize(f"[  OK  ] {label}", "green"))
    return out


def _open_storage(config: ConsoleConfig) -> KeyValueStore:
    if config.history_db_path is None:
        return MemoryStore()
    return SQLiteStore(config.history_db_path)


def boot_sequence(
    *,
    cwd: str | Path | None = None,
    environ: Optional[Mapping[str, str]] = None,
    cli: Optional[BaseCLI] = None,
) -> BootState:
    # ---------- config ----------
    config = _step("Load configuration",
                   lambda: load_config(cwd=cwd, environ=environ), verbose=False)
    verbose = config.show_boot_steps
    _step(
        f"Detect environment: {platform.system()} {platform.release()} / Python {platform.python_version()}",
        lambda: None,
        verbose=verbose,
    )

    # ---------- logging ----------
    logger = _step(
        "Initialize logger",
        lambda: init_logger(
            "termcore",
            level=config.log_level or logging.WARNING,
            logfile=config.log_file_path,
        ),
        verbose=verbose,
    )

    # ---------- storage ----------
    storage = _step(
        f"Open history storage ({config.history_db_path or 'memory'})",
        lambda: _open_storage(config),
        verbose=verbose,
    )

    # ---------- interpreter ----------
    frontend = cli if cli is not None else _step(
        "Select frontend", make_cli, verbose=verbose)
    interpreter = _step(
        "Build interpreter",
        lambda: Interpreter(
            frontend,
            storage=storage,
            config=config,
            on_exit=frontend.request_exit,
        ),
        verbose=verbose,
    )
    frontend.attach(interpreter)
    logger.debug("Restored %d history entries", len(interpreter.history))

    # ---------- commands ----------
    loaded_count = 0
    if config.plugin_package:
        loaded_count = _step(
            f"Load commands from '{config.plugin_package}'",
            lambda: load_commands(interpreter.registry, config.plugin_package),
            verbose=verbose,
        )
    _step(f"Boot complete ({len(interpreter.registry)} commands)",
          lambda: None, verbose=verbose)

    return BootState(
        config=config,
        logger=logger,
        storage=storage,
        interpreter=interpreter,
        cli=frontend,
        loaded_count=loaded_count,
    )

#!/usr/bin/env python3
# termcore/interface/loader.py
from __future__ import annotations

"""
Dynamic command loader.

Features:
- Imports all public modules under a given package (default: 'termcore.plugins').
- Supports 'entrypoint.py' inside a subpackage.
- A module contributes commands by exporting COMMAND / COMMANDS
  (CommandDefinition objects) and/or a `register(registry)` function.
"""

import importlib
import logging
import pkgutil
from pathlib import Path
from types import ModuleType
from typing import Iterable

from termcore.commands import CommandDefinition, CommandRegistry

logger = logging.getLogger(__name__)

DEFAULT_PLUGIN_PACKAGE = "termcore.plugins"


def _register_from_module(module: ModuleType, registry: CommandRegistry) -> int:
    """Register COMMAND/COMMANDS and run register(registry) if present."""
    registered_count = 0
    obj = getattr(module, "COMMAND", None)
    if isinstance(obj, CommandDefinition):
        registry.register(obj)
        registered_count += 1

    objs = getattr(module, "COMMANDS", None)
    if isinstance(objs, Iterable):
        for item in objs:
            if isinstance(item, CommandDefinition):
                registry.register(item)
                registered_count += 1

    hook = getattr(module, "register", None)
    if callable(hook):
        before = len(registry)
        hook(registry)
        registered_count += max(0, len(registry) - before)

    logger.debug("Loaded %d command(s) from %s",
                 registered_count, module.__name__)
    return registered_count


def load_commands(registry: CommandRegistry, commands_package: str = DEFAULT_PLUGIN_PACKAGE) -> int:
    """
    Import all modules under the given package and register their commands.

    Supported layouts:
      1) Plain modules: plugins/foo.py -> import plugins.foo
      2) Packages with an entrypoint: plugins/bar/entrypoint.py
         -> import plugins.bar.entrypoint
      3) Packages without one: plugins/baz/__init__.py -> import plugins.baz

    Returns the number of modules loaded.
    """
    package = importlib.import_module(commands_package)
    package_paths = [str(p) for p in getattr(package, "__path__", [])]

    if not package_paths:
        raise RuntimeError(
            f"'{commands_package}' must be a package (folder) with modules.")

    loaded_count = 0
    for base_path in package_paths:
        for modinfo in pkgutil.iter_modules([base_path]):
            module_name = modinfo.name
            if module_name.startswith("_"):
                # Ignore private modules
                continue

            target = f"{commands_package}.{module_name}"
            if modinfo.ispkg and (Path(base_path) / module_name / "entrypoint.py").exists():
                target = f"{target}.entrypoint"

            module = importlib.import_module(target)
            _register_from_module(module, registry)
            loaded_count += 1

    return loaded_count

#!/usr/bin/env python3
# termcore/db/config.py
from __future__ import annotations

"""
Configuration loader (stdlib-only, Python 3.11+).

Precedence (low → high):
  1) Built-in defaults
  2) Files in CWD: .env, config.ini, config.json, config.toml
  3) Environment variables prefixed with TERMCORE_

Validation:
  - PROMPT_SYMBOL: non-empty str
  - WELCOME_MESSAGE: None or str
  - HISTORY_SIZE: int >= 1
  - HISTORY_KEY: non-empty str
  - HISTORY_DB_PATH: None (in-memory history) or normalized path
  - PLUGIN_PACKAGE: None or dotted module name
  - ENABLE_COMPLETION / SHOW_BOOT_STEPS: bool
  - LOG_LEVEL: None or one of {'DEBUG','INFO','WARNING','ERROR','CRITICAL'}
  - LOG_FILE_PATH: None or normalized path
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping
import configparser
import json
import os
import re
import tomllib  # stdlib in 3.11+

ENV_PREFIX = "TERMCORE_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# ---------- defaults ----------


def _default_data_path() -> str:
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or str(
            Path.home() / "AppData" / "Local")
        return str(Path(base) / "Termcore" / "history.db")
    return str(Path.home() / ".local" / "share" / "Termcore" / "history.db")


def _default_welcome() -> str:
    # termcore/__init__ sets __version__ before importing this module
    from termcore import __version__

    return f'Termcore v{__version__}\nType "help" for available commands.'


DEFAULTS: dict[str, Any] = {
    "PROMPT_SYMBOL": ">",
    "WELCOME_MESSAGE": _default_welcome(),
    "HISTORY_SIZE": 100,
    "HISTORY_KEY": "termcore.history",
    "HISTORY_DB_PATH": _default_data_path(),
    "PLUGIN_PACKAGE": "termcore.plugins",
    "ENABLE_COMPLETION": True,
    "SHOW_BOOT_STEPS": False,
    "LOG_LEVEL": None,
    "LOG_FILE_PATH": None,
}


# ---------- data model ----------

@dataclass(frozen=True)
class ConsoleConfig:
    prompt_symbol: str = DEFAULTS["PROMPT_SYMBOL"]
    welcome_message: str | None = DEFAULTS["WELCOME_MESSAGE"]
    history_size: int = DEFAULTS["HISTORY_SIZE"]
    history_key: str = DEFAULTS["HISTORY_KEY"]
    history_db_path: Path | None = None
    plugin_package: str | None = DEFAULTS["PLUGIN_PACKAGE"]
    enable_completion: bool = True
    show_boot_steps: bool = False
    log_level: str | None = None
    log_file_path: Path | None = None

    # Unrecognized keys, kept for plugins that read their own settings
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- file sources ----------
# Every loader returns a flat mapping with UPPER_SNAKE keys; a missing or
# unparsable file contributes nothing.

_ENV_LINE = re.compile(r"^([A-Za-z_]\w*)\s*=\s*(.*)$")


def _flatten(obj: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """{'history': {'size': 50}} -> {'HISTORY_SIZE': 50}"""
    flat: dict[str, Any] = {}
    for k, v in obj.items():
        key = f"{prefix}_{k}".upper() if prefix else str(k).upper()
        if isinstance(v, Mapping):
            flat.update(_flatten(v, key))
        else:
            flat[key] = v
    return flat


def _read_env(path: Path) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        m = _ENV_LINE.match(line) if line and not line.startswith("#") else None
        if m is None:
            continue
        value = m.group(2).strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
            value = value[1:-1]
        out[m.group(1).upper()] = value
    return out


def _read_ini(path: Path) -> dict[str, Any]:
    parser = configparser.ConfigParser(interpolation=None)
    parser.read_string(path.read_text(encoding="utf-8"))
    # section names are grouping only
    return {k.upper(): v for sec in parser.sections() for k, v in parser.items(sec)}


def _read_json(path: Path) -> dict[str, Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    return _flatten(data) if isinstance(data, dict) else {}


def _read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as f:
        return _flatten(tomllib.load(f))


_SOURCES: tuple[tuple[str, Callable[[Path], dict[str, Any]]], ...] = (
    (".env", _read_env),
    ("config.ini", _read_ini),
    ("config.json", _read_json),
    ("config.toml", _read_toml),
)

_PARSE_ERRORS = (OSError, UnicodeDecodeError, configparser.Error,
                 json.JSONDecodeError, tomllib.TOMLDecodeError)


def _merge_sources(cwd: Path, environ: Mapping[str, str]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(DEFAULTS)
    for filename, reader in _SOURCES:
        try:
            merged.update(reader(cwd / filename))
        except _PARSE_ERRORS:
            continue

    # Environment variables override all; only take TERMCORE_* keys
    merged.update({k[len(ENV_PREFIX):]: v for k, v in environ.items()
                   if k.startswith(ENV_PREFIX) and re.fullmatch(r"[A-Z0-9_]+", k)})
    return merged


# ---------- coercion ----------

def _as_bool(val: Any) -> bool:
    if isinstance(val, bool):
        return val
    s = str(val).strip().lower()
    if s in {"1", "true", "yes", "y", "on"}:
        return True
    if s in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"Expected boolean, got: {val!r}")


def _as_int(val: Any) -> int:
    if isinstance(val, int) and not isinstance(val, bool):
        return val
    try:
        return int(str(val).strip())
    except ValueError as exc:
        raise ValueError(f"Expected integer, got: {val!r}") from exc


def _as_opt_str(val: Any) -> str | None:
    """'' and 'none' (any case) switch an optional setting off."""
    return None if val is None or str(val).strip().lower() in {"", "none"} else str(val)


def _as_opt_path(val: Any, base: Path) -> Path | None:
    v = _as_opt_str(val)
    if v is None:
        return None
    p = Path(os.path.expandvars(os.path.expanduser(v)))
    return (p if p.is_absolute() else base / p).resolve()


# ---------- validation ----------

def _validate_and_build(config: dict[str, Any], cwd: Path) -> ConsoleConfig:
    prompt_symbol = _as_opt_str(config.get("PROMPT_SYMBOL"))
    if prompt_symbol is None:
        raise ValueError("PROMPT_SYMBOL must not be empty")

    welcome_message = _as_opt_str(config.get("WELCOME_MESSAGE"))
    if welcome_message is not None:
        # .env / ini values carry literal backslash escapes
        welcome_message = welcome_message.replace("\\n", "\n")

    history_size = _as_int(config.get("HISTORY_SIZE"))
    if history_size < 1:
        raise ValueError("HISTORY_SIZE must be >= 1")

    history_key = _as_opt_str(config.get("HISTORY_KEY"))
    if history_key is None:
        raise ValueError("HISTORY_KEY must not be empty")

    plugin_package = _as_opt_str(config.get("PLUGIN_PACKAGE"))
    if plugin_package is not None and not re.fullmatch(r"[A-Za-z_][\w.]*", plugin_package):
        raise ValueError(
            f"PLUGIN_PACKAGE must be a dotted module name, got {plugin_package!r}")

    log_level = _as_opt_str(config.get("LOG_LEVEL"))
    if log_level is not None:
        log_level = log_level.upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got {log_level!r}")

    return ConsoleConfig(
        prompt_symbol=prompt_symbol,
        welcome_message=welcome_message,
        history_size=history_size,
        history_key=history_key,
        history_db_path=_as_opt_path(config.get("HISTORY_DB_PATH"), cwd),
        plugin_package=plugin_package,
        enable_completion=_as_bool(config.get("ENABLE_COMPLETION")),
        show_boot_steps=_as_bool(config.get("SHOW_BOOT_STEPS")),
        log_level=log_level,
        log_file_path=_as_opt_path(config.get("LOG_FILE_PATH"), cwd),
        extra={k: v for k, v in config.items() if k not in DEFAULTS},
    )


# ---------- public API ----------

def load_config(
    cwd: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ConsoleConfig:
    """
    Load, merge, normalize, and validate configuration.
    No filesystem side-effects (no directory creation).
    """
    base = Path(cwd) if cwd is not None else Path.cwd()
    env = os.environ if environ is None else environ
    return _validate_and_build(_merge_sources(base, env), base)

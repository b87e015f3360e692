from __future__ import annotations
import logging
import os
from pathlib import Path

_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_HISTORY_FILE = Path.home() / ".urlisp_history"


def setting_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return raw.strip()


def get_log_level() -> int:
    name = setting_from_env('URLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_recursion_limit() -> int:
    raw = setting_from_env('URLISP_RECURSION_LIMIT', str(_DEFAULT_RECURSION_LIMIT))
    try:
        limit = int(raw)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT
    return limit if limit > 0 else _DEFAULT_RECURSION_LIMIT


def get_history_file() -> Path:
    return Path(setting_from_env('URLISP_HISTORY_FILE', str(_DEFAULT_HISTORY_FILE))).expanduser()

from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional

_FALSE_WORDS = {"0", "false", "no", "off"}

DEFAULT_PROMPT = "kappa> "
DEFAULT_RECURSION_LIMIT = 10000


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSE_WORDS


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def strict_arity_from_env() -> bool:
    return flag_from_env("KAPPA_STRICT_ARITY", True)


def get_recursion_limit() -> int:
    return int_from_env("KAPPA_RECURSION_LIMIT", DEFAULT_RECURSION_LIMIT)


def get_prelude_path() -> Optional[Path]:
    raw = os.environ.get("KAPPA_PRELUDE_PATH")
    return Path(raw.strip()) if raw and raw.strip() else None


def get_prompt() -> str:
    return os.environ.get("KAPPA_PROMPT", DEFAULT_PROMPT)


def get_log_level() -> int:
    """
    Determine log level from LOGLEVEL environment variable.
    Defaults to WARNING if not set.
    """
    loglevel_env = os.getenv("LOGLEVEL", "").upper()
    if loglevel_env:
        level = getattr(logging, loglevel_env, None)
        if isinstance(level, int):
            return level
    return logging.WARNING

from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional


_DEFAULT_PROMPT = "blisp> "
_DEFAULT_LOG_LEVEL = logging.WARNING


def get_prompt() -> str:
    return os.environ.get("BLISP_PROMPT", _DEFAULT_PROMPT)


def get_history_file() -> Optional[Path]:
    raw = os.environ.get("BLISP_HISTORY_FILE")
    if not raw or not raw.strip():
        return None
    return Path(raw.strip()).expanduser()


def log_level_from_name(name: Optional[str]) -> int:
    # unknown names fall back to the default rather than failing startup
    if not name:
        return _DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else _DEFAULT_LOG_LEVEL


def get_log_level() -> int:
    return log_level_from_name(os.environ.get("BLISP_LOG_LEVEL"))

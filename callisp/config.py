from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import List

DEFAULT_PROMPT = "callisp> "
DEFAULT_LOG_LEVEL = "WARNING"


def paths_from_env(var: str) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return []
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_search_roots() -> List[Path]:
    """Directories searched by `use` after the current directory."""
    return paths_from_env('CALLISP_PATH')


def get_prompt() -> str:
    return os.environ.get('CALLISP_PROMPT', DEFAULT_PROMPT)


def get_log_level() -> int:
    name = os.environ.get('CALLISP_LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a string for names it does not know
    return level if isinstance(level, int) else logging.WARNING

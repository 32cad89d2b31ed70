from __future__ import annotations
import logging
import os
import sys
from typing import Optional


_DEFAULT_LOG_LEVEL = 'WARNING'


def log_level_from_env(var: str = 'KAPPA_LOG_LEVEL') -> int:
    raw = os.environ.get(var)
    if not raw:
        raw = _DEFAULT_LOG_LEVEL
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get('KAPPA_RECURSION_LIMIT')
    if not raw or not raw.strip().isdigit():
        return None
    return int(raw.strip())


def configure() -> None:
    """Apply environment settings: package logger level and host recursion limit."""
    logging.getLogger('kappa').setLevel(log_level_from_env())
    limit = get_recursion_limit()
    if limit is not None and limit > sys.getrecursionlimit():
        sys.setrecursionlimit(limit)

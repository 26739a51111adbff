from __future__ import annotations
import logging
import os

# Defaults
_DEFAULT_POOL_CAPACITY = 1 << 24
_DEFAULT_LOG_LEVEL = 'WARNING'


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip(), 0)
    except ValueError:
        return default
    return value if value > 0 else default


def get_pool_capacity() -> int:
    """Maximum number of records per arena pool."""
    return int_from_env('CELLA_POOL_CAPACITY', _DEFAULT_POOL_CAPACITY)


def get_log_level() -> int:
    raw = os.environ.get('CELLA_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING

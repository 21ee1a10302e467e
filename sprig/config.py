from __future__ import annotations
import logging
import os

# Defaults
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_DEBUG_SYMBOL = "DEBUG-EVAL"
_DEFAULT_RECURSION_LIMIT = 10000


def get_log_level() -> int:
    """Level for the `sprig` logger, from SPRIG_LOG_LEVEL (name or number)."""
    raw = os.environ.get("SPRIG_LOG_LEVEL", "").strip() or _DEFAULT_LOG_LEVEL
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.WARNING


def get_debug_symbol() -> str:
    """Name whose truthy binding switches on per-step evaluation tracing."""
    return os.environ.get("SPRIG_DEBUG_SYMBOL", "").strip() or _DEFAULT_DEBUG_SYMBOL


def get_recursion_limit() -> int:
    """Python recursion limit an Interpreter needs, from SPRIG_RECURSION_LIMIT."""
    raw = os.environ.get("SPRIG_RECURSION_LIMIT", "").strip()
    return int(raw) if raw.isdigit() else _DEFAULT_RECURSION_LIMIT

from __future__ import annotations
import logging
import os

logger = logging.getLogger(__name__)

# Defaults
_DEFAULT_RECURSION_LIMIT = 20000
_DEFAULT_PROMPT = "scm> "
_DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %d", var, raw, default)
        return default


def get_recursion_limit() -> int:
    return max(int_from_env('SCM_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT), 1000)


def get_prompt() -> str:
    # An explicitly empty SCM_PROMPT disables the prompt
    return os.environ.get('SCM_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    name = os.environ.get('SCM_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING

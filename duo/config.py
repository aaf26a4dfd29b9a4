from __future__ import annotations
import os


# Defaults
_DEFAULT_RECURSION_LIMIT = 10_000
_DEFAULT_TAIL_CALLS = True

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{var} must be a boolean flag, got {raw!r}")


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return int(raw.strip())


def tail_calls_enabled() -> bool:
    return flag_from_env('DUO_TAIL_CALLS', _DEFAULT_TAIL_CALLS)


def get_recursion_limit() -> int:
    return int_from_env('DUO_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)

"""Display forms for Duo values.

Numbers display JavaScript-style (`2`, not `2.0`; `NaN`, `Infinity`). Strings
are shown quoted; every other value renders through its own ``__str__``.
"""

from __future__ import annotations

import math

from duo import DuoValue

# Largest magnitude at which every integer is exactly representable as a double.
MAX_SAFE_INTEGER = 2 ** 53


def is_number(value: DuoValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def normalize_number(value: int | float) -> int | float:
    """Keep Duo numbers within double range.

    Integral floats collapse to int while they are exactly representable;
    ints beyond that range become floats, overflowing to +/-Infinity.
    """
    if isinstance(value, int):
        if abs(value) <= MAX_SAFE_INTEGER:
            return value
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if value.is_integer() and abs(value) <= MAX_SAFE_INTEGER:
        return int(value)
    return value


def format_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def show(value: DuoValue) -> str:
    """Return the source-like display string of any Duo value."""
    if isinstance(value, str):
        return f'"{value}"'
    if is_number(value):
        return format_number(value)
    return str(value)

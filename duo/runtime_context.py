from __future__ import annotations

import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from duo import PrintFn


@dataclass(frozen=True)
class Runtime:
    """Per-interpreter settings threaded through every evaluation step."""

    print_fn: PrintFn
    tail_calls: bool = True


@contextmanager
def recursion_limit(limit: int) -> Iterator[None]:
    """Raise the interpreter recursion limit to at least `limit` for the block.

    An already higher limit is left alone; the previous value is restored on exit.
    """
    previous = sys.getrecursionlimit()
    if limit > previous:
        sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Sequence

from duo import DuoValue, Node

if TYPE_CHECKING:
    from duo.runtime_context import Runtime
    from duo.types.environment import Environment

NativeFn = Callable[[DuoValue | None, Sequence[Node], "Environment", "Runtime"], DuoValue]


class NativeFunction:
    """A host-implemented callable.

    The wrapped function receives the evaluated receiver (or None), the raw
    argument nodes, the caller's environment and the runtime; it evaluates
    whatever arguments it needs and validates them itself.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def __call__(
        self,
        receiver: DuoValue | None,
        args: Sequence[Node],
        env: Environment,
        runtime: Runtime,
    ) -> DuoValue:
        return self.fn(receiver, args, env, runtime)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<NativeFunction {self.name}>"

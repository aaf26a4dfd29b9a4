"""The Message node: Duo's only syntax tree node and a first-class value.

`Message(receiver, name, args)` means "send `name` to `receiver` with `args`".
`args is None` marks a slot reference (`a`, `obj.x`); a tuple, even an empty
one, marks a call (`f()`, `obj.f(1)`). Operators are messages too:
`1 + 2` is `Message(1, "+", (2,))`.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable

from duo import Node
from duo.printer import show


class Message:
    __slots__ = ("receiver", "name", "args", "is_tail_call")

    def __init__(
        self,
        receiver: Node | None,
        name: str,
        args: Iterable[Node] | None = None,
    ):
        self.receiver: Node | None = receiver
        self.name: str = name
        self.args: tuple[Node, ...] | None = None if args is None else tuple(args)
        # Set once when an enclosing fun(...) is built; read by the trampoline
        self.is_tail_call: bool = False

    @property
    def is_slot_reference(self) -> bool:
        return self.args is None

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Message)
            and self.name == other.name
            and self.receiver == other.receiver
            and self.args == other.args
        )

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            if self.receiver is not None:
                buffer.write(show(self.receiver))
                buffer.write(".")
            buffer.write(self.name)
            if self.args is not None:
                buffer.write("(")
                buffer.write(", ".join(show(a) for a in self.args))
                buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Message({self})"

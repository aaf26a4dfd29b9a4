"""User-defined callables: closures (`fun`) and macros (`macro`)."""

from __future__ import annotations

from io import StringIO
from typing import Sequence

from duo import Node
from duo.errors import DuoArityError, DuoSyntaxError
from duo.printer import show
from duo.types.environment import Environment
from duo.types.message import Message


def split_params(kind: str, args: Sequence[Node]) -> tuple[list[str], Node]:
    """Split raw `fun`/`macro` arguments into parameter names and body.

    The last argument is the body; every preceding one must be a bare slot
    reference such as `a` (no receiver, no call parentheses).
    """
    if not args:
        raise DuoArityError(f"{kind} requires at least a body")
    params: list[str] = []
    for arg in args[:-1]:
        if not (isinstance(arg, Message) and arg.receiver is None and arg.args is None):
            raise DuoSyntaxError(f"{kind} parameter must be a plain name, got {show(arg)}")
        params.append(arg.name)
    return params, args[-1]


def _signature(kind: str, params: list[str], body: Node) -> str:
    with StringIO() as buffer:
        buffer.write(kind)
        buffer.write("(")
        if params:
            buffer.write(",".join(params))
            buffer.write(",")
        buffer.write(show(body))
        buffer.write(")")
        return buffer.getvalue()


class Fun:
    """A closure: parameters, body, and the environment it was created in."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[str], body: Node, env: Environment):
        self.params: list[str] = params
        self.body: Node = body
        self.env: Environment = env

    @classmethod
    def from_args(cls, args: Sequence[Node], env: Environment) -> Fun:
        params, body = split_params("fun", args)
        return cls(params, body, env)

    def __str__(self) -> str:
        return _signature("fun", self.params, self.body)

    def __repr__(self) -> str:
        return f"<Fun {self}>"


class Macro:
    """Like Fun, minus the captured environment.

    Arguments are bound unevaluated and the body runs in a child of the
    caller's environment.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: list[str], body: Node):
        self.params: list[str] = params
        self.body: Node = body

    @classmethod
    def from_args(cls, args: Sequence[Node]) -> Macro:
        params, body = split_params("macro", args)
        return cls(params, body)

    def __str__(self) -> str:
        return _signature("macro", self.params, self.body)

    def __repr__(self) -> str:
        return f"<Macro {self}>"

"""Operator sugar: arithmetic, comparison, sequencing, logic and assignment.

A message qualifies when it has a receiver, exactly one argument and an
operator name; `1 + 2` arrives here as `Message(1, "+", (2,))`.
"""

from __future__ import annotations

import math
import operator as ops
import sys
from typing import Callable

from duo import DuoValue, Node
from duo.errors import DuoSyntaxError, DuoTypeError, DuoZeroDivision
from duo.printer import format_number, is_number, normalize_number, show
from duo.runtime_context import Runtime
from duo.types.environment import Environment
from duo.types.message import Message
from duo.types.nil import Nil
from duo.types.proto_object import ProtoObject

EvaluatorFn = Callable[..., DuoValue]

TRUE = 1


def _divide(a, b):
    if b == 0:
        raise DuoZeroDivision("Division by zero")
    return a / b


def _remainder(a, b):
    """Truncated remainder: the result takes the sign of the dividend."""
    if b == 0:
        raise DuoZeroDivision("Modulo by zero")
    if isinstance(a, int) and isinstance(b, int):
        r = abs(a) % abs(b)
        return -r if a < 0 else r
    if math.isinf(a):
        return math.nan
    return math.fmod(a, b)


ARITHMETIC: dict[str, Callable] = {
    "+": ops.add,
    "-": ops.sub,
    "*": ops.mul,
    "/": _divide,
    "%": _remainder,
}

COMPARISON: dict[str, Callable[[int], bool]] = {
    "==": lambda c: c == 0,
    "!=": lambda c: c != 0,
    "<": lambda c: c < 0,
    "<=": lambda c: c <= 0,
    ">": lambda c: c > 0,
    ">=": lambda c: c >= 0,
}

SPECIAL = frozenset({":=", "=", ".", ";", ",", "&&", "||"})

OPERATORS = frozenset(ARITHMETIC) | frozenset(COMPARISON) | SPECIAL


def is_operator_send(message: Message) -> bool:
    return (
        message.receiver is not None
        and message.args is not None
        and len(message.args) == 1
        and message.name in OPERATORS
    )


def compare(a: DuoValue, b: DuoValue) -> int:
    """Three-way compare: 0 equal, -1 less, 1 greater.

    Identical values are equal; numbers compare numerically and strings
    lexicographically; any other pairing is unequal (-1).
    """
    if a is b:
        return 0
    if (is_number(a) and is_number(b)) or (isinstance(a, str) and isinstance(b, str)):
        return (a > b) - (a < b)
    return -1


def coerce_number(text: str, message: Message) -> int | float:
    text = text.strip()
    if not text:
        return 0
    # int() and float() also take Unicode digits and `_` separators
    if not text.isascii() or "_" in text:
        raise DuoTypeError(f"Cannot use {show(text)} as a number in {message}")
    try:
        return normalize_number(int(text))
    except ValueError:
        pass
    try:
        return normalize_number(float(text))
    except ValueError:
        raise DuoTypeError(f"Cannot use {show(text)} as a number in {message}") from None


def _slice_index(n: int | float) -> int:
    if math.isnan(n):
        return 0
    if math.isinf(n):
        return 0 if n < 0 else sys.maxsize
    return max(0, int(n))


def arithmetic(a: DuoValue, op: str, b: DuoValue, message: Message) -> DuoValue:
    if is_number(a):
        if isinstance(b, str):
            b = coerce_number(b, message)
        if is_number(b):
            return normalize_number(ARITHMETIC[op](a, b))
    elif isinstance(a, str):
        if op == "+" and isinstance(b, str):
            return a + b
        if op == "+" and is_number(b):
            return a + format_number(b)
        # string slicing: "abc" / 1 -> "a", "abc" % 1 -> "bc"
        if op == "/" and is_number(b):
            return a[:_slice_index(b)]
        if op == "%" and is_number(b):
            return a[_slice_index(b):]
    raise DuoTypeError(f"Cannot apply {op} to {show(a)} and {show(b)} in {message}")


def assign(
    op: str,
    target: Node,
    value_node: Node,
    env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
) -> DuoValue:
    """`:=` defines, `=` updates; object slots accept either."""
    if not isinstance(target, Message):
        raise DuoTypeError(f"Unsupported assignment target {show(target)}")
    value = evaluate_fn(value_node, env, runtime)
    if target.receiver is not None:
        owner = evaluate_fn(target.receiver, env, runtime)
        if isinstance(owner, ProtoObject) and target.args is None:
            return owner.assign(target.name, value)
    elif target.args is None:
        if op == ":=":
            return env.define(target.name, value)
        return env.update(target.name, value)
    raise DuoTypeError(f"Unsupported assignment target {target}")


def eval_operator(
    message: Message,
    env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> DuoValue:
    lhs, op, rhs = message.receiver, message.name, message.args[0]

    if op in ARITHMETIC:
        a = evaluate_fn(lhs, env, runtime)
        b = evaluate_fn(rhs, env, runtime)
        return arithmetic(a, op, b, message)

    if op in COMPARISON:
        a = evaluate_fn(lhs, env, runtime)
        b = evaluate_fn(rhs, env, runtime)
        return TRUE if COMPARISON[op](compare(a, b)) else Nil

    if op == ";":
        evaluate_fn(lhs, env, runtime)
        return evaluate_fn(rhs, env, runtime, is_tail_call)

    if op == "&&":
        if evaluate_fn(lhs, env, runtime) is Nil:
            return Nil
        return evaluate_fn(rhs, env, runtime, is_tail_call)

    if op == "||":
        left = evaluate_fn(lhs, env, runtime)
        if left is not Nil:
            return left
        return evaluate_fn(rhs, env, runtime, is_tail_call)

    if op in (":=", "="):
        return assign(op, lhs, rhs, env, runtime, evaluate_fn)

    # '.' and ',' are resolved by the parser; only hand-built messages get here
    raise DuoSyntaxError(f"Operator '{op}' cannot be sent as a message: {message}")

"""Native functions bound in the root environment.

Natives receive their arguments as raw nodes; each one evaluates (or keeps as
data) what it needs and checks its own arity. This module also provides
`register`, which populates a fresh root environment.
"""

from __future__ import annotations

import logging
from typing import Sequence

from duo import DuoValue, Node
from duo.errors import DuoArityError, DuoTypeError
from duo.evaluation.evaluator import eval_source, evaluate
from duo.evaluation.tail_calls import mark_tail_calls
from duo.printer import show
from duo.runtime_context import Runtime
from duo.types.environment import Environment
from duo.types.fun import Fun, Macro
from duo.types.message import Message
from duo.types.native import NativeFunction
from duo.types.nil import Nil
from duo.types.proto_object import ProtoObject

logger = logging.getLogger(__name__)


def _require_count(name: str, args: Sequence[Node], count: int) -> None:
    if len(args) != count:
        raise DuoArityError(f"{name} takes exactly {count} argument(s), got {len(args)}")


def make_fun(receiver: DuoValue | None, args: Sequence[Node], env: Environment, runtime: Runtime) -> Fun:
    """fun(a, b, body): a closure over the calling environment."""
    fn = Fun.from_args(args, env)
    mark_tail_calls(fn.body)
    logger.debug("Closure created: %s", fn)
    return fn


def make_macro(receiver: DuoValue | None, args: Sequence[Node], env: Environment, runtime: Runtime) -> Macro:
    """macro(a, b, body): like fun, but arguments arrive unevaluated."""
    m = Macro.from_args(args)
    logger.debug("Macro created: %s", m)
    return m


def make_message(receiver: DuoValue | None, args: Sequence[Node], env: Environment, runtime: Runtime) -> Message:
    """Build a Message from a shape tag and raw parts.

    message("__", "name")                  -> name
    message("_@", "name", a, ...)          -> name(a, ...)
    message("@_", target, "name")          -> target.name
    message("@@", target, "name", a, ...)  -> target.name(a, ...)
    """
    if len(args) < 2:
        raise DuoArityError(f"message takes a shape tag and a name, got {len(args)} argument(s)")
    tag = args[0]
    if tag == "__" and len(args) == 2 and isinstance(args[1], str):
        return Message(None, args[1])
    if tag == "_@" and isinstance(args[1], str):
        return Message(None, args[1], args[2:])
    if tag == "@_" and len(args) == 3 and isinstance(args[2], str):
        return Message(args[1], args[2])
    if tag == "@@" and len(args) >= 3 and isinstance(args[2], str):
        return Message(args[1], args[2], args[3:])
    raise DuoTypeError(f"message({', '.join(show(a) for a in args)}) does not describe a message")


def eval_node(receiver: DuoValue | None, args: Sequence[Node], env: Environment, runtime: Runtime) -> DuoValue:
    """evalNode(expr): evaluate expr to get a node, then evaluate that node."""
    _require_count("evalNode", args, 1)
    node = evaluate(args[0], env, runtime)
    return evaluate(node, env, runtime)


def eval_str(receiver: DuoValue | None, args: Sequence[Node], env: Environment, runtime: Runtime) -> DuoValue:
    """evalStr(code): run source text in the calling environment."""
    _require_count("evalStr", args, 1)
    code = evaluate(args[0], env, runtime)
    if not isinstance(code, str):
        raise DuoTypeError(f"evalStr needs a string, got {show(code)}")
    return eval_source(code, env, runtime)


FUN = NativeFunction("fun", make_fun)
MACRO = NativeFunction("macro", make_macro)
MESSAGE = NativeFunction("message", make_message)
EVAL_NODE = NativeFunction("evalNode", eval_node)
EVAL_STR = NativeFunction("evalStr", eval_str)

NATIVES: tuple[NativeFunction, ...] = (FUN, MACRO, MESSAGE, EVAL_NODE, EVAL_STR)


def register(env: Environment) -> ProtoObject:
    """Populate a root environment; returns the root `Object` prototype."""
    root_object = ProtoObject(Environment())
    env.define("nil", Nil)
    env.define("Object", root_object)
    for native in NATIVES:
        env.define(native.name, native)
    return root_object

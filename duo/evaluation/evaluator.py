"""Core evaluator for the Duo interpreter.

Every Message is resolved by the same protocol, in order:
1. operator sugar (`a + b`, `a := b`, `a; b`, ...)
2. default methods (`if`, `print`, `clone`, `doWhile`)
3. generic dispatch: find the slot on the receiver object or in scope, then
   read it (no args) or call it as a closure, macro or native function.

Tail-position closure calls come back as TailCall objects and are bounced by
the trampoline in `apply_fun` (and here in `evaluate`).
"""

from __future__ import annotations

from duo import DuoValue, Node
from duo.errors import DuoNotCallable, DuoUndefinedSlot
from duo.evaluation.apply import apply_fun, apply_macro
from duo.evaluation.default_methods import DEFAULT_METHODS
from duo.evaluation.operators import eval_operator, is_operator_send
from duo.printer import show
from duo.reader.parser import read
from duo.runtime_context import Runtime
from duo.types.environment import Environment
from duo.types.fun import Fun, Macro
from duo.types.message import Message
from duo.types.native import NativeFunction
from duo.types.proto_object import ProtoObject
from duo.types.tail_call import TailCall


def evaluate(node: Node, env: Environment, runtime: Runtime) -> DuoValue:
    """
    Trampoline evaluator: always returns a finished value.
    """
    result = evaluate0(node, env, runtime)
    while isinstance(result, TailCall):
        result = evaluate0(result.fn.body, result.env, runtime, True)
    return result


def evaluate0(
    node: Node,
    env: Environment,
    runtime: Runtime,
    is_tail_call: bool = False,
) -> DuoValue | TailCall:
    """
    Single-step evaluation; returns a TailCall only when `is_tail_call` is set.
    """
    if not isinstance(node, Message):
        # Numbers, strings, nil, funs, macros and objects evaluate to themselves
        return node
    if is_operator_send(node):
        return eval_operator(node, env, runtime, evaluate0, is_tail_call)
    return eval_message(node, env, runtime, is_tail_call)


def eval_message(
    message: Message,
    env: Environment,
    runtime: Runtime,
    is_tail_call: bool = False,
) -> DuoValue | TailCall:
    form = DEFAULT_METHODS.get(message.name)
    if form is not None:
        return form(message, env, runtime, evaluate0, is_tail_call)

    receiver = None
    if message.receiver is not None:
        receiver = evaluate0(message.receiver, env, runtime)

    if isinstance(receiver, ProtoObject):
        slot = receiver.get(message.name)
    else:
        slot = env.get(message.name)
    if slot is None:
        raise DuoUndefinedSlot(f"{message.name} is not defined: {message}")

    if message.args is None:
        return slot

    match slot:
        case Fun():
            args = [evaluate0(arg, env, runtime) for arg in message.args]
            return apply_fun(
                slot, receiver, args, runtime, evaluate0, is_tail_call and message.is_tail_call
            )
        case Macro():
            return apply_macro(slot, receiver, message.args, env, runtime, evaluate0)
        case NativeFunction():
            return slot(receiver, message.args, env, runtime)
        case _:
            raise DuoNotCallable(f"{show(slot)} is not callable: {message}")


def eval_source(code: str, env: Environment, runtime: Runtime) -> DuoValue:
    """Tokenize, parse and evaluate `code` in `env`."""
    return evaluate(read(code), env, runtime)

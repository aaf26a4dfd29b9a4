"""Application engine for Duo.

Centralizes how user callables are entered:
- Closures (Fun) bind evaluated arguments in a child of their captured
  environment and run their body under a local trampoline, so tail calls
  marked at construction time run in constant Python stack.
- Macros bind the raw argument nodes in a child of the caller's environment.
- Either kind binds `this` when the call had a receiver.
"""

from __future__ import annotations

from typing import Callable, Sequence

from duo import DuoValue, Node
from duo.errors import DuoArityError
from duo.runtime_context import Runtime
from duo.types.environment import Environment
from duo.types.fun import Fun, Macro
from duo.types.tail_call import TailCall

EvaluatorFn = Callable[..., DuoValue]


def bind_arguments(
    callee: Fun | Macro,
    values: Sequence[DuoValue],
    this: DuoValue | None,
    outer: Environment,
) -> Environment:
    """Return a child of `outer` holding the callee's parameters (and `this`)."""
    if len(callee.params) != len(values):
        raise DuoArityError(
            f"{callee} expects {len(callee.params)} argument(s), got {len(values)}"
        )
    env = outer.child()
    for name, value in zip(callee.params, values):
        env.define_force(name, value)
    if this is not None:
        env.define_force("this", this)
    return env


def apply_fun(
    fn: Fun,
    this: DuoValue | None,
    args: Sequence[DuoValue],
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> DuoValue | TailCall:
    """Call a closure with already-evaluated arguments.

    In tail position (and with tail calls enabled) the bound call is handed
    back as a TailCall for the enclosing trampoline; otherwise the body is run
    here, bouncing through any TailCalls it produces.
    """
    call_env = bind_arguments(fn, args, this, fn.env)
    if is_tail_call and runtime.tail_calls:
        return TailCall(fn, call_env)

    result = evaluate_fn(fn.body, call_env, runtime, runtime.tail_calls)
    while isinstance(result, TailCall):
        result = evaluate_fn(result.fn.body, result.env, runtime, True)
    return result


def apply_macro(
    macro: Macro,
    this: DuoValue | None,
    args: Sequence[Node],
    caller_env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
) -> DuoValue:
    """Call a macro: arguments stay unevaluated, scope is the caller's."""
    call_env = bind_arguments(macro, args, this, caller_env)
    return evaluate_fn(macro.body, call_env, runtime)

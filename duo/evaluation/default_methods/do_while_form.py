from duo import DuoValue
from duo.errors import DuoTypeError
from duo.evaluation.apply import EvaluatorFn, apply_fun
from duo.evaluation.default_methods.common import require_args, require_receiver
from duo.printer import show
from duo.runtime_context import Runtime
from duo.types.environment import Environment
from duo.types.fun import Fun
from duo.types.message import Message
from duo.types.nil import Nil


def do_while_form(
    message: Message,
    env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> DuoValue:
    """fun(cond).doWhile(body)

    Calls the zero-argument closure and evaluates `body` in the current scope
    for as long as the closure returns something other than nil. Returns the
    last body value, or nil when the body never ran.
    """
    require_receiver(message)
    require_args(message, 1)

    condition = evaluate_fn(message.receiver, env, runtime)
    if not isinstance(condition, Fun) or condition.params:
        raise DuoTypeError(f"doWhile needs a zero-argument fun as receiver, got {show(condition)}")

    body = message.args[0]
    result: DuoValue = Nil
    while apply_fun(condition, None, [], runtime, evaluate_fn) is not Nil:
        result = evaluate_fn(body, env, runtime)
    return result

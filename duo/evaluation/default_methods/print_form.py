from duo import DuoValue
from duo.evaluation.apply import EvaluatorFn
from duo.evaluation.default_methods.common import require_args, require_receiver
from duo.printer import show
from duo.runtime_context import Runtime
from duo.types.environment import Environment
from duo.types.message import Message


def print_form(
    message: Message,
    env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> DuoValue:
    """x.print(): emit the display form of x and return x."""
    require_receiver(message)
    require_args(message, 0)
    value = evaluate_fn(message.receiver, env, runtime)
    runtime.print_fn(show(value))
    return value

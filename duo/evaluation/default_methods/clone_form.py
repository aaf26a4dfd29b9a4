from duo import DuoValue
from duo.evaluation.apply import EvaluatorFn
from duo.evaluation.default_methods.common import require_args, require_receiver
from duo.runtime_context import Runtime
from duo.types.environment import Environment
from duo.types.message import Message
from duo.types.proto_object import clone_value


def clone_form(
    message: Message,
    env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> DuoValue:
    require_receiver(message)
    require_args(message, 0)
    return clone_value(evaluate_fn(message.receiver, env, runtime))

from duo import DuoValue
from duo.evaluation.apply import EvaluatorFn
from duo.evaluation.default_methods.common import require_args, require_receiver
from duo.runtime_context import Runtime
from duo.types.environment import Environment
from duo.types.message import Message
from duo.types.nil import Nil


def if_form(
    message: Message,
    env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> DuoValue:
    """cond.if(then) / cond.if(then, else): only the selected branch is evaluated."""
    require_receiver(message)
    require_args(message, 1, 2)

    cond = evaluate_fn(message.receiver, env, runtime)
    if cond is not Nil:
        return evaluate_fn(message.args[0], env, runtime, is_tail_call)
    elif len(message.args) > 1:
        return evaluate_fn(message.args[1], env, runtime, is_tail_call)
    else:
        return Nil

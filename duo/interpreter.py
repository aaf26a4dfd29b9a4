from __future__ import annotations

import logging

from duo import DuoValue, PrintFn
from duo import config
from duo.builtin.natives import register
from duo.errors import DuoRecursionError
from duo.evaluation.evaluator import eval_source
from duo.runtime_context import Runtime, recursion_limit
from duo.types.environment import Environment
from duo.types.proto_object import ProtoObject

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Embeds the Duo engine: owns a root environment and evaluates source text
    against it. State persists across `eval` calls.

    `print_fn` receives everything the language prints (default: builtin print).
    `tail_calls` and `max_depth` override DUO_TAIL_CALLS and DUO_RECURSION_LIMIT.
    """

    def __init__(
        self,
        print_fn: PrintFn | None = None,
        *,
        tail_calls: bool | None = None,
        max_depth: int | None = None,
    ):
        self.runtime = Runtime(
            print_fn=print_fn if print_fn is not None else print,
            tail_calls=config.tail_calls_enabled() if tail_calls is None else tail_calls,
        )
        self.max_depth: int = config.get_recursion_limit() if max_depth is None else max_depth
        self.env: Environment = Environment()
        self.root_object: ProtoObject = register(self.env)

    def eval(self, code: str) -> DuoValue:
        """Tokenize, parse and evaluate `code`; any error aborts the whole call."""
        logger.debug("Evaluating %d chars (tail_calls=%s)", len(code), self.runtime.tail_calls)
        with recursion_limit(self.max_depth):
            try:
                return eval_source(code, self.env, self.runtime)
            except RecursionError as e:
                raise DuoRecursionError(
                    f"Maximum recursion depth exceeded (limit {self.max_depth})"
                ) from e

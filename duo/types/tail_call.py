from duo.types.environment import Environment
from duo.types.fun import Fun


class TailCall:
    """A closure call deferred to the caller's trampoline; `env` is already bound."""

    __slots__ = ("fn", "env")

    def __init__(self, fn: Fun, env: Environment):
        self.fn = fn
        self.env = env

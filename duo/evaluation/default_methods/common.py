from duo.errors import DuoArityError, DuoSyntaxError
from duo.types.message import Message


def require_receiver(message: Message) -> None:
    if message.receiver is None:
        raise DuoSyntaxError(f"{message.name} must be sent to a receiver: {message}")


def require_args(message: Message, *counts: int) -> None:
    if message.args is None or len(message.args) not in counts:
        expected = " or ".join(str(c) for c in counts)
        raise DuoArityError(f"{message.name} takes {expected} argument(s): {message}")

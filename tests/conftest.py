import pytest

# This test configuration runs every test twice:
# 1) with the tail-call trampoline enabled ["trampoline"]
# 2) with plain recursive evaluation ["recursive"]
# Most tests instantiate Interpreter() directly, which reads DUO_TAIL_CALLS at
# construction. Tests that need one mode pass tail_calls= explicitly.


@pytest.fixture(params=["trampoline", "recursive"])
def evaluation_mode(request):
    return request.param


@pytest.fixture(autouse=True)
def _force_evaluation_mode(evaluation_mode, monkeypatch):
    monkeypatch.setenv("DUO_TAIL_CALLS", "1" if evaluation_mode == "trampoline" else "0")


class PrintLog:
    """Collects everything the interpreter prints."""

    def __init__(self):
        self.lines: list[str] = []

    def __call__(self, text: str) -> None:
        self.lines.append(text)

    @property
    def last(self) -> str | None:
        return self.lines[-1] if self.lines else None


@pytest.fixture
def printed():
    return PrintLog()


@pytest.fixture
def interp(printed):
    from duo.interpreter import Interpreter
    return Interpreter(printed)

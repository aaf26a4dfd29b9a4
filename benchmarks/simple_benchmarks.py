from timeit import timeit

from duo.interpreter import Interpreter
from duo.types.environment import Environment

# Helpers to parse once, and to measure the two evaluation modes separately
from duo.reader.parser import read
from duo.evaluation.evaluator import evaluate
from duo.runtime_context import recursion_limit


def _silent(_: str) -> None:
    pass


def time_mode(setup: str, code: str, rounds: int, tail_calls: bool) -> float:
    """Time repeated evaluation of one pre-parsed expression. `setup` runs once
    in the same interpreter and is excluded from the measurement.
    """
    itp = Interpreter(_silent, tail_calls=tail_calls)
    itp.eval(setup)
    expr = read(code)
    with recursion_limit(itp.max_depth):
        # Warmup
        evaluate(expr, itp.env, itp.runtime)
        # Timed
        return timeit(lambda: evaluate(expr, itp.env, itp.runtime), number=rounds)


# Existing micro-benchmark: environment lookup chain (does not involve evaluation)

def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    root = Environment()
    root.define("answer", 42)
    env = root
    for _ in range(n_envs):
        env = env.child()
    # Warmup
    for _ in range(1000):
        env.get("answer")
    # Timed
    t = timeit(lambda: env.get("answer"), number=n_lookups)
    return t


# A few Duo-level benchmarks to compare trampoline vs recursive evaluation

FUN_APPLY = ("add := fun(x, y, x + y)", "add(1, 2)")

TAIL_RECURSION = (
    "fact := fun(n, acc, (n <= 1).if(acc, fact(n - 1, n * acc)))",
    "fact(100, 1)",
)

# Sum 1..N using tail recursion
ARITH_SUM = (
    "sumN := fun(n, acc, (n <= 0).if(acc, sumN(n - 1, acc + n)))",
    "sumN(500, 0)",
)

# Prototype dispatch: method lookup falls through three clones
METHOD_DISPATCH = (
    "P := Object.clone(); P.get := fun(this.v); C := P.clone().clone().clone(); C.v := 1",
    "C.get()",
)

# Loop via doWhile with a closure condition
DO_WHILE = ("i := 0", "i = 0; fun(i < 200).doWhile(i = i + 1)")


def _print_pair(name: str, bench: tuple[str, str], rounds: int) -> None:
    setup, code = bench
    ttr = time_mode(setup, code, rounds, tail_calls=True)
    trec = time_mode(setup, code, rounds, tail_calls=False)
    print(f"Benchmark: {name}")
    print(f"  trampoline: {ttr:.6f}s  |  recursive: {trec:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    # Pure environment benchmark
    print("Benchmark: environment lookup chain (pure Python env lookup)")
    print(f"  time: {bench_lookup_chain():.6f}s")

    # Compare the two evaluation modes on several workloads
    _print_pair("fun application", FUN_APPLY, rounds=20000)
    _print_pair("tail recursion (factorial)", TAIL_RECURSION, rounds=500)
    _print_pair("arithmetic sum 1..500 (tail-rec)", ARITH_SUM, rounds=200)
    _print_pair("prototype method dispatch", METHOD_DISPATCH, rounds=20000)
    _print_pair("doWhile loop", DO_WHILE, rounds=200)

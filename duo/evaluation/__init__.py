from duo.evaluation.evaluator import evaluate, evaluate0, eval_message, eval_source

__all__ = ["evaluate", "evaluate0", "eval_message", "eval_source"]

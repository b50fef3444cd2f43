from .evaluator import eval_program, eval_expr, evaluate

__all__ = ["eval_program", "eval_expr", "evaluate"]

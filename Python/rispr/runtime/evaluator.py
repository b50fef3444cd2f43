from typing import Optional, Sequence
from ..config import RisprConfig
from ..errors import ArityError, EvaluationFailure, MalformedExpression, UnknownOperator
from ..parsing import parse, show_expr
from ..prelude import check_arity, eval_primitive, lookup_primitive
from ..syntax.ast import Expr, Expression, Number, Symbol

DEBUG_EVAL = False

def log(msg: str):
    if DEBUG_EVAL:
        print(f"[EVAL] {msg}")

def fallback(err: EvaluationFailure, strict: bool) -> int:
    # Permissive mode keeps the legacy result for malformed applications
    if strict:
        raise err
    log(f"  -> 0 ({err})")
    return 0

def eval_expr(expr: Expr, strict: bool = True) -> int:
    if DEBUG_EVAL:
        log(f"eval_expr: {show_expr(expr)}")
    if isinstance(expr, Number):
        return expr.value
    if isinstance(expr, Expression):
        return eval_expression(expr, strict)
    if isinstance(expr, Symbol):
        return fallback(MalformedExpression(f"operator '{expr.name}' cannot be used as a value"), strict)
    return fallback(MalformedExpression(f"cannot evaluate {expr!r}"), strict)

def eval_expression(expr: Expression, strict: bool) -> int:
    head = expr.head
    if isinstance(head, Number):
        return head.value
    if isinstance(head, Symbol):
        return eval_apply(head.name, expr.operands, strict)
    if head is None:
        return fallback(MalformedExpression("cannot evaluate an empty expression"), strict)
    return fallback(MalformedExpression(f"{show_expr(expr)} does not start with an operator"), strict)

def eval_apply(op: str, operands: Sequence[Expr], strict: bool) -> int:
    failure = None
    try:
        check_arity(lookup_primitive(op), len(operands))
    except (UnknownOperator, ArityError) as e:
        if strict:
            raise
        failure = e

    # Operands are all evaluated, left to right, before the operator runs
    args = [eval_expr(operand, strict) for operand in operands]
    if failure is not None:
        return fallback(failure, strict)
    result = eval_primitive(op, args)
    log(f"  ({' '.join([op] + [str(a) for a in args])}) -> {result}")
    return result

def eval_program(root: Expression, strict: bool = True) -> int:
    """Evaluate a parsed line.

    A line that starts with a number or operator is itself the expression
    (``5``, ``+ 1 2``). Otherwise each top-level form is evaluated in turn
    and the last value is the result.
    """
    try:
        if isinstance(root, Expression) and isinstance(root.head, Expression):
            result = 0
            for i, form in enumerate(root.children):
                if DEBUG_EVAL:
                    log(f"Evaluating form {i}: {show_expr(form)}")
                result = eval_expr(form, strict)
            return result
        return eval_expr(root, strict)
    except RecursionError:
        raise MalformedExpression("expression nested too deeply") from None

def evaluate(line: str, config: Optional[RisprConfig] = None) -> int:
    config = config or RisprConfig.default()
    root = parse(line, config)
    return eval_program(root, config.strict)

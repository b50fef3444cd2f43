from .config import RisprConfig
from .errors import (
    RisprError, ParseFailure, NumeralRangeError, EvaluationFailure,
    DivisionByZero, IntegerOverflow, UnknownOperator, ArityError, MalformedExpression,
)
from .syntax.ast import Expr, Number, Symbol, Expression
from .lexing import lex_spans
from .parsing import parse, build_ast, show_expr, show_program
from .runtime import eval_expr, eval_program, evaluate

__version__ = "0.0.1"

__all__ = [
    "RisprConfig",
    "RisprError", "ParseFailure", "NumeralRangeError", "EvaluationFailure",
    "DivisionByZero", "IntegerOverflow", "UnknownOperator", "ArityError", "MalformedExpression",
    "Expr", "Number", "Symbol", "Expression",
    "lex_spans", "parse", "build_ast", "show_expr", "show_program",
    "eval_expr", "eval_program", "evaluate",
]

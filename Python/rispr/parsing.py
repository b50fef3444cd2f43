from typing import Optional
from lark import Token, Transformer, Tree, v_args
from lark.exceptions import VisitError
from .config import RisprConfig
from .errors import NumeralRangeError, ParseFailure
from .lexing import lex_spans
from .syntax.ast import Expr, Number, Symbol, Expression

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# ======================================
# Tree Builder
# ======================================

class ASTBuilder(Transformer):
    def __init__(self, line: str = ""):
        super().__init__()
        self.line = line

    @v_args(inline=True)
    def number(self, tok: Token) -> Number:
        text = str(tok)
        digits = text.lstrip("+-").lstrip("0") or "0"
        # More than 19 significant digits never fits; int() also refuses very long strings
        if len(digits) > len(str(INT64_MAX)):
            raise NumeralRangeError(text, self.line, tok.column)
        value = -int(digits) if text.startswith("-") else int(digits)
        if not INT64_MIN <= value <= INT64_MAX:
            raise NumeralRangeError(str(tok), self.line, tok.column)
        return Number(value)

    @v_args(inline=True)
    def operator(self, tok: Token) -> Symbol:
        return Symbol(str(tok))

    def expression(self, children) -> Expression:
        return Expression(tuple(children))

    def program(self, children) -> Expression:
        return Expression(tuple(children))

def build_ast(spans: Tree, line: str = "") -> Expression:
    try:
        return ASTBuilder(line).transform(spans)
    except VisitError as e:
        # Transformer wraps callback errors; surface ours unchanged
        if isinstance(e.orig_exc, (ParseFailure, RecursionError)):
            raise e.orig_exc from None
        raise

def parse(line: str, config: Optional[RisprConfig] = None) -> Expression:
    spans = lex_spans(line, config)
    try:
        return build_ast(spans, line)
    except RecursionError:
        raise ParseFailure("expression nested too deeply", line) from None

# ======================================
# Display
# ======================================

def show_expr(expr: Expr) -> str:
    if isinstance(expr, Number): return str(expr.value)
    if isinstance(expr, Symbol): return expr.name
    if isinstance(expr, Expression):
        return f"({' '.join(map(show_expr, expr.children))})"
    return str(expr)

def show_program(root: Expression) -> str:
    """Render the top-level forms of a parsed line without the implicit outer list."""
    return " ".join(map(show_expr, root.children))

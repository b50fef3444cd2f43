from typing import Dict, Iterable, Optional, Sequence, Tuple
from lark import Lark, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken
from .config import RisprConfig, DEFAULT_OPERATORS
from .constraints.checker import check_nesting_order
from .errors import ParseFailure

DEBUG_LEX = False

def log(msg: str):
    if DEBUG_LEX:
        print(f"[LEX] {msg}")

# ======================================
# Grammar
# ======================================

# Span kinds: program, expression, operator, number.
GRAMMAR_TEMPLATE = r"""
    program: _form+
    _form: expression | number | operator
    expression: "(" _form+ ")"
    number: NUMBER
    operator: OPERATOR

    NUMBER.2: /[+-]?[0-9]+/
    OPERATOR: %(operators)s

    %%import common.WS
    %%ignore WS
"""

TERMINAL_NAMES = {
    "NUMBER": "number",
    "OPERATOR": "operator",
    "LPAR": "'('",
    "RPAR": "')'",
    "$END": "end of input",
}

def _lark_string(s: str) -> str:
    return '"' + s.replace("\\", "\\\\").replace('"', '\\"') + '"'

def build_grammar(operators: Sequence[str] = DEFAULT_OPERATORS) -> str:
    # Longest first so that alternation never stops at a shorter prefix
    sorted_ops = sorted(set(operators), key=len, reverse=True)
    op_alternatives = " | ".join(_lark_string(op) for op in sorted_ops)
    return GRAMMAR_TEMPLATE % {"operators": op_alternatives}

_parsers: Dict[Tuple[str, ...], Lark] = {}

def build_parser(config: Optional[RisprConfig] = None) -> Lark:
    config = config or RisprConfig.default()
    key = tuple(sorted(set(config.operators)))
    if key not in _parsers:
        log(f"building parser for operators {' '.join(key)}")
        _parsers[key] = Lark(build_grammar(key), start="program", parser="lalr")
    return _parsers[key]

# ======================================
# Span Tree
# ======================================

def describe_expected(names: Iterable[str]) -> Tuple[str, ...]:
    described = {TERMINAL_NAMES.get(n, n) for n in names}
    return tuple(sorted(described))

def lex_spans(line: str, config: Optional[RisprConfig] = None) -> Tree:
    """Match `line` against the grammar and return the root `program` span.

    Raises ParseFailure for empty input, unbalanced parentheses, characters
    outside the grammar and misplaced tokens.
    """
    if not line.strip():
        raise ParseFailure("empty input", line, None, ("'('", "number", "operator"))

    parser = build_parser(config)
    try:
        tree = parser.parse(line)
    except UnexpectedCharacters as e:
        raise ParseFailure(
            f"unrecognized character {line[e.pos_in_stream]!r}",
            line, e.column, describe_expected(e.allowed or ()),
        ) from None
    except UnexpectedInput as e:
        unbalanced = check_nesting_order(line)
        if unbalanced is not None:
            raise unbalanced from None
        if isinstance(e, UnexpectedToken) and e.token.type != "$END":
            raise ParseFailure(
                f"unexpected {e.token.value!r}",
                line, e.column, describe_expected(e.expected),
            ) from None
        raise ParseFailure(
            "unexpected end of input",
            line, len(line) + 1, describe_expected(getattr(e, "expected", ()) or ()),
        ) from None

    if DEBUG_LEX:
        log(f"span tree:\n{tree.pretty()}")
    return tree

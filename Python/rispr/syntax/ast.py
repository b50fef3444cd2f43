from dataclasses import dataclass
from typing import Tuple

# ======================================
# AST Nodes
# ======================================

class Expr: pass

@dataclass(frozen=True)
class Number(Expr):
    value: int
    def __repr__(self): return f"Number({self.value})"
    def __str__(self): return str(self.value)

@dataclass(frozen=True)
class Symbol(Expr):
    name: str
    def __repr__(self): return f"Symbol({self.name})"
    def __str__(self): return self.name

@dataclass(frozen=True)
class Expression(Expr):
    children: Tuple[Expr, ...] = ()
    def __repr__(self): return f"Expression({list(self.children)})"
    def __str__(self): return "(" + " ".join(str(c) for c in self.children) + ")"

    def __post_init__(self):
        # Lists handed in by callers are frozen as tuples
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def head(self):
        return self.children[0] if self.children else None

    @property
    def operands(self) -> Tuple[Expr, ...]:
        return self.children[1:]

from dataclasses import dataclass
from typing import Callable, Dict, List
from ..errors import ArityError, UnknownOperator
from . import arithmetic

@dataclass(frozen=True)
class PrimOp:
    name: str
    min_arity: int
    apply: Callable[[List[int]], int]
    def __str__(self): return f"<{self.name}>"

bindings: Dict[str, PrimOp] = {
    "+": PrimOp("+", 0, arithmetic.eval_add),
    "*": PrimOp("*", 0, arithmetic.eval_mul),
    "-": PrimOp("-", 1, arithmetic.eval_sub),
    "/": PrimOp("/", 1, arithmetic.eval_div),
}

def lookup_primitive(op: str) -> PrimOp:
    prim = bindings.get(op)
    if prim is None:
        raise UnknownOperator(f"unknown operator '{op}'")
    return prim

def check_arity(prim: PrimOp, argc: int):
    if argc < prim.min_arity:
        raise ArityError(f"'{prim.name}' expects at least {prim.min_arity} operand(s), got {argc}")

def eval_primitive(op: str, args: List[int]) -> int:
    prim = lookup_primitive(op)
    check_arity(prim, len(args))
    return prim.apply(args)

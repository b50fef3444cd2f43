from typing import List
from ..z3_ops.bitvec import eval_bitvec

def fold(op: str, first: int, rest: List[int]) -> int:
    acc = first
    for val in rest:
        acc = eval_bitvec(op, acc, val)
    return acc

def eval_add(args: List[int]) -> int:
    return fold("+", 0, args)

def eval_mul(args: List[int]) -> int:
    return fold("*", 1, args)

def eval_sub(args: List[int]) -> int:
    # a - b - c == a - (b + c); subtracting in turn keeps every step in range
    return fold("-", args[0], args[1:])

def eval_div(args: List[int]) -> int:
    return fold("/", args[0], args[1:])

import z3
from ..errors import DivisionByZero, IntegerOverflow

WIDTH = 64
# Wide enough that no single operation on two 64-bit operands can wrap
WORK_WIDTH = 2 * WIDTH

INT64_MIN = -(1 << (WIDTH - 1))
INT64_MAX = (1 << (WIDTH - 1)) - 1

def to_bitvec(val: int) -> z3.BitVecNumRef:
    if not INT64_MIN <= val <= INT64_MAX:
        raise IntegerOverflow(f"{val} does not fit in a 64-bit signed integer")
    return z3.BitVecVal(val, WORK_WIDTH)

def from_z3(ref, op: str, a: int, b: int) -> int:
    simp = z3.simplify(ref)
    if not isinstance(simp, z3.BitVecNumRef):
        raise RuntimeError(f"Z3 result not concrete: {simp}")
    val = simp.as_signed_long()
    if not INT64_MIN <= val <= INT64_MAX:
        raise IntegerOverflow(f"integer overflow in ({op} {a} {b})")
    return val

def eval_bitvec(op: str, a: int, b: int) -> int:
    """Apply a binary operator with 64-bit signed semantics.

    Division truncates toward zero (bvsdiv). Results outside the 64-bit
    range raise IntegerOverflow; a zero divisor raises DivisionByZero.
    """
    za = to_bitvec(a)
    zb = to_bitvec(b)

    if op == "+": return from_z3(za + zb, op, a, b)
    if op == "-": return from_z3(za - zb, op, a, b)
    if op == "*": return from_z3(za * zb, op, a, b)
    if op == "/":
        if b == 0:
            raise DivisionByZero(f"division by zero in (/ {a} {b})")
        # `/` on bit-vectors is signed division
        return from_z3(za / zb, op, a, b)

    raise RuntimeError(f"Unknown bitvec op: {op}")

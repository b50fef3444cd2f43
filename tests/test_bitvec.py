import pytest

from rispr import DivisionByZero, IntegerOverflow
from rispr.prelude import eval_primitive
from rispr.prelude.primitives import bindings
from rispr.z3_ops.bitvec import INT64_MAX, INT64_MIN, eval_bitvec, to_bitvec


def test_binary_ops():
    assert eval_bitvec("+", 2, 3) == 5
    assert eval_bitvec("-", 2, 3) == -1
    assert eval_bitvec("*", -4, 3) == -12
    assert eval_bitvec("/", -9, 4) == -2


def test_signed_division_never_floors():
    assert eval_bitvec("/", -1, 2) == 0
    assert eval_bitvec("/", 1, -2) == 0


def test_division_by_zero():
    with pytest.raises(DivisionByZero):
        eval_bitvec("/", 1, 0)


def test_overflow_in_each_direction():
    with pytest.raises(IntegerOverflow):
        eval_bitvec("+", INT64_MAX, 1)
    with pytest.raises(IntegerOverflow):
        eval_bitvec("-", INT64_MIN, 1)
    with pytest.raises(IntegerOverflow):
        eval_bitvec("*", INT64_MAX, INT64_MAX)
    with pytest.raises(IntegerOverflow):
        eval_bitvec("/", INT64_MIN, -1)


def test_operands_must_fit_in_64_bits():
    with pytest.raises(IntegerOverflow):
        to_bitvec(INT64_MAX + 1)


def test_unknown_op():
    with pytest.raises(RuntimeError):
        eval_bitvec("%", 1, 2)


def test_prelude_table():
    assert sorted(bindings) == ["*", "+", "-", "/"]
    assert bindings["-"].min_arity == 1
    assert bindings["+"].min_arity == 0
    assert eval_primitive("+", []) == 0
    assert eval_primitive("*", []) == 1
    assert eval_primitive("-", [10, 1, 2, 3]) == 4
    assert eval_primitive("/", [100, 5, 2]) == 10

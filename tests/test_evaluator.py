import pytest

from rispr import (
    ArityError, DivisionByZero, EvaluationFailure, Expression, IntegerOverflow,
    MalformedExpression, Number, ParseFailure, RisprConfig, Symbol, UnknownOperator,
    eval_expr, eval_program, evaluate, parse,
)

LENIENT = RisprConfig(strict=False)
MODULO = ("+", "-", "*", "/", "%")


@pytest.mark.parametrize("line, expected", [
    ("(+)", 0),
    ("(*)", 1),
    ("(+ 7)", 7),
    ("(* 7)", 7),
    ("(+ 1 2 3 4)", 10),
    ("(* 2 3 4)", 24),
    ("(- 10 1 2 3)", 4),
    ("(/ 100 5 2)", 10),
    ("(+ 1 (* 2 3) 4)", 11),
    ("(- (+ 10 5) (* 2 (/ 9 3)))", 9),
    ("(- 5)", 5),
    ("(/ 5)", 5),
    ("(- -5 -10)", 5),
])
def test_variadic_arithmetic(line, expected):
    assert evaluate(line) == expected


def test_bare_literal_forms():
    assert evaluate("5") == 5
    assert evaluate("(5)") == 5
    assert evaluate("-12") == -12
    with pytest.raises(MalformedExpression):
        evaluate("((5))")


def test_number_head_ignores_the_rest():
    assert evaluate("(5 6)") == 5
    assert evaluate("(5 (/ 1 0))") == 5


def test_unparenthesized_line_is_one_expression():
    assert evaluate("+ 1 2") == 3
    assert evaluate("* 2 (+ 1 2)") == 6


def test_several_top_level_forms_yield_the_last():
    assert evaluate("(+ 1 2) (* 2 3)") == 6
    assert evaluate("(+ 1 2) 9") == 9


@pytest.mark.parametrize("line, expected", [
    ("(/ 7 2)", 3),
    ("(/ -7 2)", -3),
    ("(/ 7 -2)", -3),
    ("(/ -7 -2)", 3),
    ("(/ 1 3)", 0),
])
def test_division_truncates_toward_zero(line, expected):
    assert evaluate(line) == expected


def test_division_by_zero_is_reported():
    with pytest.raises(DivisionByZero) as exc:
        evaluate("(/ 5 0)")
    assert isinstance(exc.value, EvaluationFailure)
    assert str(exc.value) == "division by zero in (/ 5 0)"
    with pytest.raises(DivisionByZero):
        evaluate("(/ 10 2 (- 3 3))")


def test_division_by_zero_is_reported_in_lenient_mode():
    with pytest.raises(DivisionByZero):
        evaluate("(/ 5 0)", LENIENT)


@pytest.mark.parametrize("line", [
    "(+ 9223372036854775807 1)",
    "(- -9223372036854775808 1)",
    "(* 4611686018427387904 2)",
    "(* -9223372036854775808 -1)",
    "(/ -9223372036854775808 -1)",
    "(+ 9223372036854775807 1 -1)",
])
def test_overflow_is_reported(line):
    with pytest.raises(IntegerOverflow):
        evaluate(line)


def test_results_at_the_int64_edges():
    assert evaluate("(+ 9223372036854775806 1)") == 2 ** 63 - 1
    assert evaluate("(- -9223372036854775807 1)") == -(2 ** 63)
    assert evaluate("(- -9223372036854775808)") == -(2 ** 63)


def test_operands_are_evaluated_left_to_right():
    # The first failing operand decides the error
    with pytest.raises(DivisionByZero):
        evaluate("(+ (/ 1 0) (+ 9223372036854775807 1))")
    with pytest.raises(IntegerOverflow):
        evaluate("(+ (+ 9223372036854775807 1) (/ 1 0))")


def test_unknown_operator_strict_and_lenient():
    config = RisprConfig(operators=MODULO)
    with pytest.raises(UnknownOperator):
        evaluate("(% 7 2)", config)
    lenient = RisprConfig(strict=False, operators=MODULO)
    assert evaluate("(% 7 2)", lenient) == 0
    assert evaluate("(+ 1 (% 7 2))", lenient) == 1


def test_unknown_operator_is_reported_before_its_operands():
    config = RisprConfig(operators=MODULO)
    with pytest.raises(UnknownOperator):
        evaluate("(% (/ 1 0))", config)


def test_lenient_mode_still_evaluates_every_operand():
    lenient = RisprConfig(strict=False, operators=MODULO)
    with pytest.raises(DivisionByZero):
        evaluate("(% (/ 1 0))", lenient)
    with pytest.raises(IntegerOverflow):
        evaluate("(% 1 (+ 9223372036854775807 1))", lenient)
    assert evaluate("(% 1 (* 2 3))", lenient) == 0


@pytest.mark.parametrize("line", ["(-)", "(/)"])
def test_missing_operand_strict_and_lenient(line):
    with pytest.raises(ArityError):
        evaluate(line)
    assert evaluate(line, LENIENT) == 0


@pytest.mark.parametrize("line", ["((+ 1 2) 3)", "(+ 1 +)", "(+ (*) -)"])
def test_malformed_shapes_strict_and_lenient(line):
    with pytest.raises(MalformedExpression):
        evaluate(line)
    assert evaluate(line, LENIENT) in (0, 1)


def test_lenient_defaults_are_zero():
    assert evaluate("((+ 1 2) 3)", LENIENT) == 0
    assert evaluate("(+ 1 +)", LENIENT) == 1
    assert evaluate("(+ (*) -)", LENIENT) == 1


def test_eval_expr_on_built_nodes():
    assert eval_expr(Number(42)) == 42
    assert eval_expr(Expression((Symbol("*"), Number(6), Number(7)))) == 42
    with pytest.raises(MalformedExpression):
        eval_expr(Expression())
    assert eval_expr(Expression(), strict=False) == 0
    with pytest.raises(MalformedExpression):
        eval_expr(Symbol("+"))
    with pytest.raises(UnknownOperator):
        eval_expr(Expression((Symbol("max"), Number(1))))


def test_eval_program_matches_evaluate():
    line = "(- 10 1 2 3)"
    assert eval_program(parse(line)) == evaluate(line) == 4


def test_parse_failures_pass_through_evaluate():
    with pytest.raises(ParseFailure):
        evaluate("(+ 1 2")


def test_deep_tree_is_reported_not_crashed():
    node = Number(1)
    for _ in range(20000):
        node = Expression((Symbol("+"), node))
    with pytest.raises(MalformedExpression):
        eval_program(Expression((node,)))

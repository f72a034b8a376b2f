import pytest

from minisims.rpn import (
    DivideByZero,
    NotEnoughOperands,
    ParenthesisMismatch,
    TooManyOperands,
    evaluate_rpn,
    run,
    to_rpn,
)


def test_precedence_keeps_multiplication_above_addition():
    assert to_rpn("1 + 2 * 3") == ["1", "2", "3", "*", "+"]


def test_left_associative_subtraction():
    assert to_rpn("a - b - c") == ["a", "b", "-", "c", "-"]


def test_parentheses_override_precedence():
    assert to_rpn("( 1 + 2 ) * 3") == ["1", "2", "+", "3", "*"]


def test_operands_keep_their_order():
    tokens = to_rpn("( 4 - 5 ) * ( 6 + 7 ) / 8")
    operands = [t for t in tokens if t not in {"+", "-", "*", "/"}]
    assert operands == ["4", "5", "6", "7", "8"]


@pytest.mark.parametrize("expr", ["( 1 + 2", "1 + 2 )", ")", "( ( 1 )"])
def test_parenthesis_mismatch(expr):
    with pytest.raises(ParenthesisMismatch):
        to_rpn(expr)


def test_evaluate_single_operand():
    assert evaluate_rpn(["12"]) == 12


def test_evaluate_round_trip_of_operator_precedence():
    assert evaluate_rpn(to_rpn("2 + 3 * 4")) == evaluate_rpn(to_rpn("2 + ( 3 * 4 )"))


def test_division_truncates_toward_zero():
    assert evaluate_rpn(["-7", "2", "/"]) == -3
    assert evaluate_rpn(["7", "2", "/"]) == 3


def test_divide_by_zero():
    with pytest.raises(DivideByZero):
        evaluate_rpn(["1", "0", "/"])


@pytest.mark.parametrize("tokens", [["+"], ["1", "+"], []])
def test_not_enough_operands(tokens):
    with pytest.raises(NotEnoughOperands):
        evaluate_rpn(tokens)


def test_too_many_operands():
    with pytest.raises(TooManyOperands):
        evaluate_rpn(["1", "2"])


def test_run_prints_rpn_with_trailing_space_and_value():
    assert run("1 + 2 * 3") == ["1 2 3 * + ", "7"]


def test_run_parenthesis_error_only():
    assert run("( 1 + 2") == ["ERROR: Parenthesis mismatch"]


def test_run_evaluation_errors_follow_rpn():
    assert run("1 / 0") == ["1 0 / ", "ERROR: Divide by zero"]
    assert run("1 2") == ["1 2 ", "ERROR: Too many operands"]
    assert run("1 +") == ["1 + ", "ERROR: Not enough operands"]
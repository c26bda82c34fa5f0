"""End-to-end tests for the evaluation pipeline."""

import logging
import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from calculator import ExpressionCalculator, calculate
from core import (
    BinaryOp, Literal, Operator, ErrorKind, CalculatorError, ExpressionSyntaxError,
    UnmatchedBracketError, NumberFormatError, StructuralError, InputError
)


@pytest.mark.parametrize("expr,expected", [
    ("5", 5.0),
    ("   42  ", 42.0),
    ("3.25", 3.25),
    ("(((4)))", 4.0),
])
def test_bare_literal(expr, expected):
    assert calculate(expr) == expected


@pytest.mark.parametrize("expr,expected", [
    ("2 + 3 * 4", 14.0),
    ("(2 + 3) * 4", 20.0),
    ("8 - 3 - 2", 3.0),
    ("16 / 4 / 2", 2.0),
    ("-3 + 5", 2.0),
    ("-(2 + 3)", -5.0),
    ("3 - -2", 5.0),
    ("-2 ^ 2", -4.0),
])
def test_precedence_grouping_and_unary_minus(expr, expected):
    assert calculate(expr) == expected


@pytest.mark.parametrize("expr,expected", [
    ("2 ^ 3 * (4 - 1) / 6 + 1", 5.0),
    ("((1 + 2) * (3 + 4)) ^ 2 / 7 - 10", 53.0),
    ("100 / (2 ^ 2 * 5) - 3 * (1 + 1)", -1.0),
    ("2 * (3 + (4 - 1) ^ 2) / 4", 6.0),
    ("(7 - 2) * (8 / (1 + 3)) ^ 3", 40.0),
    ("1.5 * 4 + 2 ^ (1 + 1) - 9 / 3", 7.0),
    ("-(2 ^ 3) + 10 / (5 - 3) * 2", 2.0),
    ("10 - (2 - (3 - (4 - 5))) * 2 ^ 2 / 8", 11.0),
    ("0.5 * (6 - 2) ^ 2 + 1 / 4", 8.25),
    ("5 - 2 * 3 ^ 2 / 6", 2.0),
    ("(9 - 1) / (2 ^ (1 + 1)) * (3 + -1)", 4.0),
])
def test_mixed_expressions(expr, expected):
    assert calculate(expr) == expected


def test_power_folds_left():
    assert calculate("2 ^ 3 ^ 2") == 64.0


def test_power_right_associative_option():
    assert ExpressionCalculator(right_associative=["^"]).evaluate("2 ^ 3 ^ 2") == 512.0


def test_unary_minus_binds_as_multiplication():
    # 12 / -(1 + 3) is read as (12 / -1) * (1 + 3)
    assert calculate("12 / -(1 + 3)") == -48.0


def test_unary_plus_heuristic():
    assert calculate("+5") == 5.0
    with pytest.raises(StructuralError):
        calculate("1 +2")
    assert ExpressionCalculator(unary_plus_heuristic=False).evaluate("1 +2") == 3.0


def test_parse_returns_tree():
    tree = ExpressionCalculator().parse("8 - 3 - 2")
    assert tree == BinaryOp(BinaryOp(Literal(8), Operator.SUB, Literal(3)), Operator.SUB, Literal(2))


def test_division_by_zero_is_not_an_error():
    assert calculate("1 / 0") == math.inf
    assert calculate("-1 / 0") == -math.inf
    assert math.isnan(calculate("0 / 0"))


def test_reevaluation_is_bit_identical():
    expr = "0.1 + 0.2 * 3 ^ 0.5 / 7"
    first = calculate(expr)
    assert all(calculate(expr).hex() == first.hex() for _ in range(10))


def test_concurrent_calls_are_independent():
    exprs = ["2 + 3 * 4", "(2 + 3) * 4", "8 - 3 - 2", "1 / 0"] * 25
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(calculate, exprs))
    assert results == [calculate(e) for e in exprs]


@pytest.mark.parametrize("expr,error_cls,position", [
    ("(1 + 2", UnmatchedBracketError, 1),
    ("1 + 2)", UnmatchedBracketError, 6),
    ("2 # 2", ExpressionSyntaxError, 3),
    ("--1", ExpressionSyntaxError, 1),
    ("1..2 + 1", NumberFormatError, 1),
])
def test_errors_with_position(expr, error_cls, position):
    with pytest.raises(error_cls) as excinfo:
        calculate(expr)
    assert excinfo.value.position == position


@pytest.mark.parametrize("expr", ["", "   ", "1 2", "1 +", "* 2", "()"])
def test_structural_errors(expr):
    with pytest.raises(StructuralError):
        calculate(expr)


def test_error_is_structured():
    with pytest.raises(CalculatorError) as excinfo:
        calculate("3 * x")
    assert excinfo.value.kind == ErrorKind.SYNTAX
    assert excinfo.value.to_dict() == {
        'kind': 'syntax',
        'message': 'unrecognized input `x`',
        'char': 'x',
        'position': 5,
    }


@pytest.mark.parametrize("value", [None, 42, b"1 + 2"])
def test_non_string_input(value):
    with pytest.raises(InputError) as excinfo:
        calculate(value)
    assert excinfo.value.kind == ErrorKind.INPUT


def test_long_left_folding_chain():
    assert calculate(" + ".join(["1"] * 5000)) == 5000.0
    assert calculate(" - ".join(["10000"] + ["1"] * 5000)) == 5000.0


def test_deep_bracket_nesting():
    depth = 5000
    assert calculate("(" * depth + "1" + ")" * depth) == 1.0
    assert calculate("(" * depth + "1" + " + 1)" * depth) == depth + 1.0


def test_long_right_folding_chain():
    calculator = ExpressionCalculator(right_associative=["^"])
    assert calculator.evaluate(" ^ ".join(["1"] * 5000)) == 1.0


def test_debug_rendering_skipped_when_debug_disabled(monkeypatch, caplog):
    import core.shunting_yard
    import core.tokenizer
    from core import Expression

    def fail(*args, **kwargs):
        raise AssertionError("debug rendering should not run")

    monkeypatch.setattr(core.tokenizer, "format_tokens", fail)
    monkeypatch.setattr(core.shunting_yard, "format_tokens", fail)
    monkeypatch.setattr(Expression, "to_rpn", fail)
    with caplog.at_level(logging.WARNING):
        assert calculate(" * ".join(["1"] * 20000)) == 1.0


def test_debug_logging_on_long_input(caplog):
    with caplog.at_level(logging.DEBUG):
        assert calculate(" + ".join(["2"] * 3000)) == 6000.0
    assert "Expression: 2.0 2.0 + 2.0 +" in caplog.text

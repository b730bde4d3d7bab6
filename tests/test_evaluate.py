import math
import threading

import pytest

from my_calculator.errors import (
    DivisionByZero,
    EvalError,
    InvalidNumberLiteral,
    NestingTooDeep,
    UnexpectedEnd,
    UnexpectedToken,
)
from my_calculator.evaluate import evaluate, evaluate_node
from my_calculator.node import Node, NodeKind, new_number
from my_calculator.token import TokenType, new_token


@pytest.mark.parametrize("expression, expected", [
    ("2 + 3 * 4", 14),
    ("(2 + 3) * 4", 20),
    ("-2 * 3", -6),
    ("2 * -3", -6),
    ("10 - 4 - 3", 3),
    ("15 / 4", 3.75),
    ("2 ^ 10", 1024),
    ("2 ^ 3 ^ 2", 64),
    ("-2 ^ 2", 4),
    ("3 + 5 * (2 - 8) ^ 2", 183),
    ("((((7))))", 7),
    ("--3", 3),
    ("1.5 * .5", 0.75),
])
def test_arithmetic(expression, expected):
    assert evaluate(expression) == pytest.approx(expected)


def test_division_by_zero():
    with pytest.raises(DivisionByZero) as info:
        evaluate("1 / 0")
    assert info.value.location == 2


def test_division_by_computed_zero():
    with pytest.raises(DivisionByZero) as info:
        evaluate("4 / (2 - 2)")
    assert info.value.location == 2


def test_division_by_negative_zero():
    with pytest.raises(DivisionByZero):
        evaluate("1 / -0")


def test_zero_to_negative_power():
    with pytest.raises(DivisionByZero) as info:
        evaluate("0 ^ -1")
    assert info.value.location == 2


def test_unexpected_end():
    with pytest.raises(UnexpectedEnd):
        evaluate("2 +")


def test_unexpected_token_at_offset():
    with pytest.raises(UnexpectedToken) as info:
        evaluate("2 + )")
    assert info.value.location == 4
    assert info.value.token.expression == ")"


def test_invalid_literal():
    with pytest.raises(InvalidNumberLiteral):
        evaluate("1.2.3 + 4")


def test_errors_share_a_base():
    for expression in ["1/0", "2 +", ")", "1..2", "(" * 200 + "1" + ")" * 200]:
        with pytest.raises(EvalError):
            evaluate(expression)


def test_configurable_nesting():
    assert evaluate("((1))", max_depth=2) == 1
    with pytest.raises(NestingTooDeep):
        evaluate("(((1)))", max_depth=2)


def test_overflow_saturates_to_infinity():
    assert evaluate("1" + "0" * 300 + " * " + "1" + "0" * 300) == math.inf
    assert evaluate("-1" + "0" * 300 + " * " + "1" + "0" * 300) == -math.inf
    assert evaluate("10 ^ 400") == math.inf
    assert evaluate("-10 ^ 401") == -math.inf


def test_overflow_then_cancel_is_nan():
    assert math.isnan(evaluate("10 ^ 400 - 10 ^ 400"))


def test_negative_base_fractional_exponent_is_nan():
    assert math.isnan(evaluate("-8 ^ 0.5"))


def test_long_chain_does_not_recurse():
    assert evaluate(" + ".join(["1"] * 5000)) == 5000


@pytest.mark.parametrize("literal", ["0", "1", "3.25", "0.1", "123456789.5", "42"])
def test_literal_round_trip(literal):
    assert evaluate(literal) == float(literal)


def test_idempotent():
    for expression in ["2 + 3 * 4", "1 / 0", "2 +"]:
        outcomes = []
        for _ in range(3):
            try:
                outcomes.append(evaluate(expression))
            except EvalError as e:
                outcomes.append((type(e), e.location))
        assert outcomes[0] == outcomes[1] == outcomes[2]


def test_parallel_evaluations():
    expressions = {f"{n} * (1 + 1)": 2.0 * n for n in range(50)}
    results = {}

    def work(expression):
        results[expression] = evaluate(expression)

    threads = [threading.Thread(target=work, args=(item,)) for item in expressions]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert results == expressions


def test_evaluator_instance(evaluator):
    assert evaluator.evaluate("2 + 2") == 4
    assert evaluator.evaluate("sin(90)") == pytest.approx(1)


def test_malformed_tree_is_rejected():
    token = new_token(TokenType.Minus, "-1", 0, 1)
    one = new_number(1.0, new_token(TokenType.Number, "-1", 1, 2, 1.0))
    assert evaluate_node(Node(NodeKind.Neg, token, left=one)) == -1
    with pytest.raises(ValueError):
        evaluate_node(Node(NodeKind.Neg, token, left=one, right=one))

"""
Tests for the scanner and the precedence/associativity tables.
"""

import numpy as np
import pytest

from core import (
    ExpressionSyntaxError, TokenType, UnknownOperatorError,
    is_right_associative, precedence, scan, should_reduce
)


def test_precedence_table():
    assert precedence('+') == precedence('-') == 0
    assert precedence('*') == precedence('/') == 1
    assert precedence('^') == 2


def test_only_power_is_right_associative():
    assert is_right_associative('^')
    for op in '+-*/':
        assert not is_right_associative(op)


def test_should_reduce():
    assert should_reduce('*', '+')
    assert not should_reduce('+', '*')
    # 同级左结合：先算栈中的
    assert should_reduce('-', '+')
    # ^ 右结合：不先算
    assert not should_reduce('^', '^')


def test_unknown_operator_is_internal_error():
    with pytest.raises(UnknownOperatorError):
        precedence('%')
    with pytest.raises(UnknownOperatorError):
        is_right_associative('%')


def test_scan_greedy_digits_and_positions():
    tokens = list(scan("12 + 305"))
    assert [t.type for t in tokens] == [TokenType.OPERAND, TokenType.OPERATOR, TokenType.OPERAND]
    assert tokens[0].value == 12
    assert tokens[2].value == 305
    assert [t.position for t in tokens] == [0, 3, 5]


def test_scan_operand_uses_requested_dtype():
    (token,) = list(scan("42", np.int32))
    assert isinstance(token.value, np.int32)


def test_scan_parentheses():
    tokens = list(scan("(1)"))
    assert [t.type for t in tokens] == [TokenType.OPEN_PAREN, TokenType.OPERAND, TokenType.CLOSE_PAREN]


def test_scan_illegal_character_after_valid_prefix():
    tokens = scan("2#3")
    assert next(tokens).value == 2
    with pytest.raises(ExpressionSyntaxError, match="'#' is an illegal character"):
        next(tokens)


def test_scan_only_plain_space_is_whitespace():
    with pytest.raises(ExpressionSyntaxError, match=r"'\\t' is an illegal character"):
        list(scan("1\t+2"))


def test_scan_wraps_oversized_literal():
    with np.errstate(over='ignore'):
        (token,) = list(scan("9223372036854775808"))
    assert token.value == np.iinfo(np.int64).min

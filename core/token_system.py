"""core/token_system.py"""
from enum import Enum
import numpy as np

from core.errors import ExpressionSyntaxError, UnknownOperatorError

DIGITS = '0123456789'


class TokenType(Enum):
    OPERAND = "operand"  # 整数字面量
    OPERATOR = "operator"  # + - * / ^
    OPEN_PAREN = "open_paren"
    CLOSE_PAREN = "close_paren"


class Token:
    def __init__(self, token_type, name, value=None, precedence=None, right_assoc=False, position=None):
        self.type = token_type
        self.name = name  # 原始字符（操作数为数字串）
        self.value = value
        self.precedence = precedence
        self.right_assoc = right_assoc
        self.position = position  # 在表达式中的起始下标

    def at(self, position):
        """返回绑定位置后的副本，定义表中的Token保持不变"""
        return Token(self.type, self.name, self.value, self.precedence, self.right_assoc, position)

    def __repr__(self):
        if self.type == TokenType.OPERAND:
            return f"Token(operand, {self.value})"
        return f"Token({self.type.value}, {self.name!r})"


# 操作符定义：优先级 + 结合性（只有 ^ 右结合）
OPERATOR_DEFINITIONS = {
    '+': Token(TokenType.OPERATOR, '+', precedence=0),
    '-': Token(TokenType.OPERATOR, '-', precedence=0),
    '*': Token(TokenType.OPERATOR, '*', precedence=1),
    '/': Token(TokenType.OPERATOR, '/', precedence=1),
    '^': Token(TokenType.OPERATOR, '^', precedence=2, right_assoc=True),
}

PAREN_DEFINITIONS = {
    '(': Token(TokenType.OPEN_PAREN, '('),
    ')': Token(TokenType.CLOSE_PAREN, ')'),
}


def precedence(op):
    """操作符优先级：+ - 为0，* / 为1，^ 为2"""
    try:
        return OPERATOR_DEFINITIONS[op].precedence
    except KeyError:
        raise UnknownOperatorError(f"unknown operator {op!r}") from None


def is_right_associative(op):
    if op not in OPERATOR_DEFINITIONS:
        raise UnknownOperatorError(f"unknown operator {op!r}")
    return OPERATOR_DEFINITIONS[op].right_assoc


def should_reduce(stacked_op, incoming_op):
    """
    栈顶操作符是否应在 incoming_op 入栈前先计算
    栈顶优先级更高，或同级且栈顶非右结合
    """
    stacked, incoming = precedence(stacked_op), precedence(incoming_op)
    return stacked > incoming or (stacked == incoming and not is_right_associative(stacked_op))


def scan(expression, int_type=np.int64):
    """
    从左到右惰性切分表达式，保证扫描与求值仍是单趟
    Args:
        expression: 一行表达式文本
        int_type: 操作数的numpy定宽整数类型
    Yields:
        Token
    Raises:
        ExpressionSyntaxError: 遇到非法字符
    """
    ten = int_type(10)
    i = 0
    n = len(expression)
    while i < n:
        c = expression[i]

        if c in DIGITS:
            # 贪婪读取连续数字，按定宽整数累加（溢出行为由调用方的 np.errstate 决定）
            start = i
            v = int_type(0)
            while i < n and expression[i] in DIGITS:
                v = v * ten + int_type(ord(expression[i]) - ord('0'))
                i += 1
            yield Token(TokenType.OPERAND, expression[start:i], value=v, position=start)
            continue

        if c in OPERATOR_DEFINITIONS:
            yield OPERATOR_DEFINITIONS[c].at(i)
        elif c in PAREN_DEFINITIONS:
            yield PAREN_DEFINITIONS[c].at(i)
        elif c != ' ':
            raise ExpressionSyntaxError(f"{c!r} is an illegal character")
        i += 1

"""核心模块 - Token系统、双栈中缀求值器和操作符"""
from .errors import (
    ExpressionError, ExpressionSyntaxError, StackUnderflow, TooManyOperands,
    ArithmeticFault, DivisionByZero, IntegerOverflow, UnknownOperatorError
)
from .token_system import (
    TokenType, Token, OPERATOR_DEFINITIONS, PAREN_DEFINITIONS,
    precedence, is_right_associative, should_reduce, scan
)
from .stack import Stack
from .operators import Operators
from .infix_evaluator import InfixEvaluator, Evaluation

__all__ = [
    'ExpressionError', 'ExpressionSyntaxError', 'StackUnderflow', 'TooManyOperands',
    'ArithmeticFault', 'DivisionByZero', 'IntegerOverflow', 'UnknownOperatorError',
    'TokenType', 'Token', 'OPERATOR_DEFINITIONS', 'PAREN_DEFINITIONS',
    'precedence', 'is_right_associative', 'should_reduce', 'scan',
    'Stack', 'Operators', 'InfixEvaluator', 'Evaluation'
]

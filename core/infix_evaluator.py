"""中缀表达式求值器 - 双栈单趟（shunting-yard）算法，调用统一的Operators类"""
import logging
from typing import List, Optional

import numpy as np

from core.errors import (
    ArithmeticFault, ExpressionError, ExpressionSyntaxError,
    IntegerOverflow, TooManyOperands
)
from core.operators import Operators
from core.stack import Stack
from core.token_system import TokenType, scan, should_reduce

logger = logging.getLogger(__name__)

ILLEGAL_EXPRESSION_PREFIX = "illegal expression: "
ARITHMETIC_ERROR_PREFIX = "arithmetic error: "

OVERFLOW_MODES = {
    'wrap': 'ignore',  # 二进制补码回绕，与机器原生整数一致
    'error': 'raise',
}

OPEN_PAREN = '('


class Evaluation:
    """单行求值结果：要么是值，要么是错误；另附括号提示信息"""

    def __init__(self, expression, value=None, error=None, notices=None):
        self.expression = expression
        self.value = value
        self.error = error
        self.notices = notices if notices is not None else []

    @property
    def ok(self):
        return self.error is None

    @property
    def kind(self):
        if self.error is None:
            return 'value'
        if isinstance(self.error, ArithmeticFault):
            return 'arithmetic'
        return 'illegal'

    def render(self, include_notices=True) -> List[str]:
        """按输出协议生成文本行：提示行在前，最后一行是结果或错误"""
        lines = list(self.notices) if include_notices else []
        if self.kind == 'value':
            lines.append(str(self.value))
        elif self.kind == 'arithmetic':
            lines.append(f"{ARITHMETIC_ERROR_PREFIX}{self.error}")
        else:
            lines.append(f"{ILLEGAL_EXPRESSION_PREFIX}{self.error}")
        return lines

    def __repr__(self):
        if self.ok:
            return f"Evaluation({self.expression!r}, value={self.value})"
        return f"Evaluation({self.expression!r}, error={self.error!r})"


class InfixEvaluator:
    """评估中缀整数表达式的值

    实例只保存不可变选项，每次求值都新建操作数栈和操作符栈，
    因此同一个实例可以在多个线程中并发使用。
    """

    def __init__(self, int_dtype='int64', overflow='wrap', enforce_grouping=False):
        """
        Args:
            int_dtype: numpy有符号整数类型名，默认 int64
            overflow: 'wrap' 回绕 或 'error' 抛出 IntegerOverflow
            enforce_grouping: 是否让括号真正分组（默认只提示，不影响优先级）
        """
        dtype = np.dtype(int_dtype)
        if dtype.kind != 'i':
            raise ValueError(f"int_dtype must be a signed integer type, got {int_dtype!r}")
        if overflow not in OVERFLOW_MODES:
            raise ValueError(f"overflow must be one of {sorted(OVERFLOW_MODES)}, got {overflow!r}")

        self.int_type = dtype.type
        self.overflow = overflow
        self.enforce_grouping = enforce_grouping

    @classmethod
    def from_config(cls, config):
        return cls(
            int_dtype=config.get('int_dtype', 'int64'),
            overflow=config.get('overflow', 'wrap'),
            enforce_grouping=config.get('enforce_grouping', False),
        )

    @staticmethod
    def apply(operand_stack, operator_stack):
        """弹出栈顶操作符及其左右操作数，计算后把结果压回操作数栈"""
        op = operator_stack.pop()
        # 先弹右操作数，再弹左操作数（- 和 / 依赖顺序）
        right = operand_stack.pop()
        left = operand_stack.pop()
        operand_stack.push(Operators.apply(op, left, right))

    def evaluate(self, expression, notices: Optional[List[str]] = None):
        """
        求值一行表达式
        Args:
            expression: 表达式文本（不含换行符）
            notices: 若提供，括号提示信息按出现顺序追加到其中
        Returns:
            numpy定宽整数标量
        Raises:
            ExpressionError: 非法表达式
            ArithmeticFault: 除零或（overflow='error' 时）溢出
        """
        operand_stack: Stack = Stack('operand')
        operator_stack: Stack = Stack('operator')
        operand_expected = True

        try:
            with np.errstate(over=OVERFLOW_MODES[self.overflow]):
                for token in scan(expression, self.int_type):
                    if token.type == TokenType.OPERAND:
                        if not operand_expected:
                            raise ExpressionSyntaxError("operator expected but operand found")
                        operand_stack.push(token.value)
                        operand_expected = False

                    elif token.type == TokenType.OPERATOR:
                        if operand_expected:
                            raise ExpressionSyntaxError("operand expected but operator found")
                        # 先计算栈中优先级更高（或同级左结合）的操作符
                        while not operator_stack.is_empty():
                            top = operator_stack.top()
                            if top == OPEN_PAREN or not should_reduce(top, token.name):
                                break
                            self.apply(operand_stack, operator_stack)
                        operator_stack.push(token.name)
                        operand_expected = True

                    elif token.type == TokenType.OPEN_PAREN:
                        self._notice(notices, f"{token.name!r} is an open parenthesis")
                        if self.enforce_grouping:
                            if not operand_expected:
                                raise ExpressionSyntaxError("operator expected but open parenthesis found")
                            operator_stack.push(OPEN_PAREN)

                    elif token.type == TokenType.CLOSE_PAREN:
                        self._notice(notices, f"{token.name!r} is a close parenthesis")
                        if self.enforce_grouping:
                            if operand_expected:
                                raise ExpressionSyntaxError("operand expected but close parenthesis found")
                            self._close_group(operand_stack, operator_stack)

                # 计算剩余的操作符
                while not operator_stack.is_empty():
                    if operator_stack.top() == OPEN_PAREN:
                        raise ExpressionSyntaxError("unmatched open parenthesis")
                    self.apply(operand_stack, operator_stack)

        except FloatingPointError as e:
            raise IntegerOverflow(str(e)) from e

        # 栈中唯一剩下的操作数就是结果
        result = operand_stack.pop()
        if not operand_stack.is_empty():
            raise TooManyOperands("too many operands")
        return result

    def _close_group(self, operand_stack, operator_stack):
        while True:
            if operator_stack.is_empty():
                raise ExpressionSyntaxError("unmatched close parenthesis")
            if operator_stack.top() == OPEN_PAREN:
                operator_stack.pop()
                return
            self.apply(operand_stack, operator_stack)

    @staticmethod
    def _notice(notices, message):
        logger.debug(message)
        if notices is not None:
            notices.append(message)

    def evaluate_line(self, line) -> Evaluation:
        """行边界：捕获单行的错误并返回 Evaluation，不影响后续行"""
        expression = line.rstrip('\r\n')
        notices = []
        try:
            value = self.evaluate(expression, notices)
        except ExpressionError as e:
            logger.debug(f"Illegal expression {expression!r}: {e}")
            return Evaluation(expression, error=e, notices=notices)
        except ArithmeticFault as e:
            logger.debug(f"Arithmetic fault in {expression!r}: {e}")
            return Evaluation(expression, error=e, notices=notices)
        return Evaluation(expression, value=value, notices=notices)

    def evaluate_lines(self, lines):
        """逐行求值，惰性返回 Evaluation"""
        for line in lines:
            yield self.evaluate_line(line)

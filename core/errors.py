"""core/errors.py - 表达式求值的异常体系"""


class ExpressionError(Exception):
    """非法表达式（用户输入错误），在行边界渲染为 illegal expression"""


class ExpressionSyntaxError(ExpressionError):
    """期望状态冲突或非法字符"""


class StackUnderflow(ExpressionError):
    """需要元素时栈为空（缺少操作数/操作符）"""


class TooManyOperands(ExpressionError):
    """归约完成后栈中剩余多个操作数"""


class ArithmeticFault(ArithmeticError):
    """运算期故障，与非法表达式分开渲染"""


class DivisionByZero(ArithmeticFault, ZeroDivisionError):
    pass


class IntegerOverflow(ArithmeticFault, OverflowError):
    """仅在 overflow='error' 时抛出"""


class UnknownOperatorError(RuntimeError):
    """内部不变量被破坏：扫描器不会产生未知操作符"""

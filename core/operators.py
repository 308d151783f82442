"""core/operators.py"""
import logging

from core.errors import DivisionByZero, UnknownOperatorError

logger = logging.getLogger(__name__)

# 操作符字符 -> Operators 中的方法名
OPERATOR_METHODS = {
    '+': 'add',
    '-': 'sub',
    '*': 'mul',
    '/': 'div',
    '^': 'pow',
}


class Operators:
    """所有二元操作符的静态方法集合

    操作数为numpy定宽整数标量；溢出时回绕还是报错由调用方的 np.errstate 决定
    """

    @staticmethod
    def apply(op, left, right):
        """按操作符字符分派到对应方法"""
        method_name = OPERATOR_METHODS.get(op)
        op_method = getattr(Operators, method_name, None) if method_name else None
        if op_method is None:
            raise UnknownOperatorError(f"unknown operator {op!r}")
        return op_method(left, right)

    @staticmethod
    def add(left, right):
        return left + right

    @staticmethod
    def sub(left, right):
        return left - right

    @staticmethod
    def mul(left, right):
        return left * right

    @staticmethod
    def div(left, right):
        """截断除法（向零取整），除数为0时报错"""
        if right == 0:
            raise DivisionByZero("integer divide by zero")
        quotient = left // right
        # numpy 的 // 向下取整，异号且不整除时修正为向零取整
        if left % right != 0 and (left < 0) != (right < 0):
            quotient = quotient + 1
        return quotient

    @staticmethod
    def pow(left, right):
        return Operators.int_power(left, right)

    @staticmethod
    def int_power(x, y):
        """
        x ^ y 的整数幂
        与逐次相乘 y 次的结果一致（含定宽回绕），用平方-乘法降低乘法次数。
        y <= 0 时循环不执行，结果为1。
        """
        result = type(x)(1)
        n = int(y)
        if n <= 0:
            if n < 0:
                logger.debug(f"Negative exponent {n}, result is 1")
            return result

        base = x
        while True:
            if n & 1:
                result = result * base
            n >>= 1
            if not n:
                break
            base = base * base
        return result

"""core/stack.py - 简单的LIFO栈，每次求值独立创建"""
from typing import Generic, List, TypeVar

from core.errors import StackUnderflow

T = TypeVar('T')


class Stack(Generic[T]):
    """单一类型的LIFO容器

    name 用于下溢时的错误信息，例如 "operand stack underflow"
    """

    def __init__(self, name='stack'):
        self.name = name
        self._items: List[T] = []

    def push(self, value: T):
        self._items.append(value)

    def pop(self) -> T:
        if not self._items:
            raise StackUnderflow(f"{self.name} stack underflow")
        return self._items.pop()

    def top(self) -> T:
        """查看栈顶但不弹出"""
        if not self._items:
            raise StackUnderflow(f"{self.name} stack underflow")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        return f"Stack({self.name!r}, {self._items!r})"

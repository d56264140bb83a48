"""A bounded stack and expression exercises built on stacks."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from operator import add, mul, sub

DEFAULT_CAPACITY = 1000

_LEXEME_PATTERN = re.compile(r"(?P<number>-?[0-9]+)|(?P<symbol>[^ \n])")


class StackUnderflow(IndexError):
    """Raised when a value is popped from an empty stack."""


class Stack:
    """A last-in, first-out stack of integers holding at most *capacity* items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[int] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: int) -> None:
        """Put *value* on top; raise OverflowError when the stack is full."""
        if len(self._items) >= self._capacity:
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflow("Stack Underflow")
        return self._items.pop()

    def pop_many(self, count: int) -> list[int]:
        """Pop up to *count* values, stopping early once the stack is empty."""
        if count < 0:
            raise ValueError("count must not be negative")
        popped: list[int] = []
        while self._items and len(popped) < count:
            popped.append(self._items.pop())
        return popped

    def __iter__(self) -> Iterator[int]:
        """Yield the values from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(top_first={list(self)!r})"


def precedence(operator: str) -> int:
    """Binding strength of an infix operator; 0 for anything that is not one."""
    if operator in ("+", "-"):
        return 1
    if operator in ("*", "/"):
        return 2
    if operator == "^":
        return 3
    return 0


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operators of equal precedence associate to the left, a stray ')' is
    dropped, and a '(' left open is emitted at the end. Whitespace is ignored.
    """
    output: list[str] = []
    pending: list[str] = []
    for char in expression:
        if char.isspace():
            continue
        if char.isascii() and char.isalnum():
            output.append(char)
        elif char == "(":
            pending.append(char)
        elif char == ")":
            while pending and pending[-1] != "(":
                output.append(pending.pop())
            if pending:
                pending.pop()
        else:
            while pending and precedence(pending[-1]) >= precedence(char):
                output.append(pending.pop())
            pending.append(char)
    output.extend(reversed(pending))
    return "".join(output)


def _truncating_divide(left: int, right: int) -> int:
    if right == 0:
        raise ZeroDivisionError("division by zero in postfix expression")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": _truncating_divide,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of integers and + - * /.

    A '-' directly before a digit starts a negative number. A missing operand
    counts as 0, an unknown symbol consumes two operands and yields nothing,
    and division truncates towards zero. An empty expression evaluates to 0.
    """
    operands: list[int] = []

    def take() -> int:
        return operands.pop() if operands else 0

    for match in _LEXEME_PATTERN.finditer(expression):
        if match.lastgroup == "number":
            operands.append(int(match.group()))
            continue
        right = take()
        left = take()
        operation = _OPERATIONS.get(match.group())
        if operation is not None:
            operands.append(operation(left, right))
    return take()
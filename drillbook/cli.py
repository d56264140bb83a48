"""Command-line sessions that drive the stack, priority queue and deque."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence

from drillbook.queues import MinPriorityQueue, RingDeque
from drillbook.stacks import Stack, StackUnderflow

_EMPTY = "-1"


class _EndOfInput(Exception):
    """The token stream ran out or held something other than what was expected."""


class _Tokens:
    """Whitespace-separated input read one token at a time."""

    def __init__(self, tokens: Iterable[str]) -> None:
        self._tokens: Iterator[str] = iter(tokens)

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise _EndOfInput from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise _EndOfInput from None


def _operations(reader: _Tokens) -> Iterator[None]:
    """Yield once for each operation announced by the leading count."""
    count = reader.integer()
    for _ in range(count):
        yield


def run_stack_session(tokens: Iterable[str]) -> list[str]:
    """Run numbered stack commands and return the lines they print.

    After the operation count, ``1 x`` pushes x (ignored once the stack is
    full), ``2`` pops and prints the top or "Stack Underflow", and ``3``
    prints the stack from top to bottom. Other command numbers do nothing.
    """
    reader = _Tokens(tokens)
    stack = Stack()
    lines: list[str] = []
    try:
        for _ in _operations(reader):
            command = reader.integer()
            if command == 1:
                value = reader.integer()
                try:
                    stack.push(value)
                except OverflowError:
                    pass
            elif command == 2:
                try:
                    lines.append(str(stack.pop()))
                except StackUnderflow as error:
                    lines.append(str(error))
            elif command == 3:
                lines.append(" ".join(str(value) for value in stack))
    except _EndOfInput:
        pass
    return lines


def _or_empty(action: Callable[[], int]) -> str:
    try:
        return str(action())
    except IndexError:
        return _EMPTY


def run_priority_queue_session(tokens: Iterable[str]) -> list[str]:
    """Run ``insert x``, ``delete`` and ``peek`` commands on a min-priority queue.

    ``delete`` and ``peek`` print the smallest value, or -1 when the queue is
    empty. Unknown commands are skipped.
    """
    reader = _Tokens(tokens)
    queue = MinPriorityQueue()
    lines: list[str] = []
    try:
        for _ in _operations(reader):
            command = reader.word()
            if command == "insert":
                queue.insert(reader.integer())
            elif command == "delete":
                lines.append(_or_empty(queue.delete_min))
            elif command == "peek":
                lines.append(_or_empty(queue.peek))
    except _EndOfInput:
        pass
    return lines


def run_deque_session(tokens: Iterable[str]) -> list[str]:
    """Run deque commands and return the lines they print.

    ``push_front x`` and ``push_back x`` add a value (ignored once the deque
    is full); ``pop_front``, ``pop_back``, ``front`` and ``back`` print a
    value or -1 when empty; ``size`` prints the element count.
    """
    reader = _Tokens(tokens)
    deque = RingDeque()
    lines: list[str] = []
    pushes: dict[str, Callable[[int], None]] = {
        "push_front": deque.push_front,
        "push_back": deque.push_back,
    }
    queries: dict[str, Callable[[], int]] = {
        "pop_front": deque.pop_front,
        "pop_back": deque.pop_back,
        "front": deque.front,
        "back": deque.back,
    }
    try:
        for _ in _operations(reader):
            command = reader.word()
            if command in pushes:
                value = reader.integer()
                try:
                    pushes[command](value)
                except OverflowError:
                    pass
            elif command in queries:
                lines.append(_or_empty(queries[command]))
            elif command == "size":
                lines.append(str(len(deque)))
    except _EndOfInput:
        pass
    return lines


_SESSIONS: dict[str, Callable[[Iterable[str]], list[str]]] = {
    "stack": run_stack_session,
    "priority-queue": run_priority_queue_session,
    "deque": run_deque_session,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Read commands for the chosen session from standard input and print the results."""
    parser = argparse.ArgumentParser(
        prog="drillbook",
        description="Drive a stack, priority queue or deque with commands read from stdin.",
    )
    parser.add_argument("session", choices=sorted(_SESSIONS))
    args = parser.parse_args(argv)
    for line in _SESSIONS[args.session](sys.stdin.read().split()):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
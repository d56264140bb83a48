"""Singly, doubly and circularly linked lists, plus a few exercises on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

from drillbook.arrays import merge_sorted


@dataclass
class _Node:
    data: int
    next: Optional[_Node] = None


@dataclass
class _DoubleNode:
    data: int
    next: Optional[_DoubleNode] = None
    prev: Optional[_DoubleNode] = None


class LinkedList:
    """A singly linked list of integers that keeps a tail pointer."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: int) -> None:
        """Add *value* at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return list(self) == list(other)

    def remove_first(self, value: int) -> bool:
        """Unlink the first node holding *value*; tell whether one was found."""
        previous: Optional[_Node] = None
        current = self._head
        while current is not None:
            if current.data == value:
                if previous is None:
                    self._head = current.next
                else:
                    previous.next = current.next
                if current is self._tail:
                    self._tail = previous
                self._size -= 1
                return True
            previous, current = current, current.next
        return False

    def count(self, value: int) -> int:
        """Return how many nodes hold *value*."""
        return sum(1 for item in self if item == value)

    def rotate_right(self, k: int) -> None:
        """Rotate the list in place so that the last *k* nodes come first."""
        if self._head is None or self._tail is None:
            raise ValueError("cannot rotate an empty list")
        shift = k % self._size
        if shift == 0:
            return
        self._tail.next = self._head
        new_tail = self._head
        for _ in range(self._size - shift - 1):
            assert new_tail.next is not None
            new_tail = new_tail.next
        self._head = new_tail.next
        new_tail.next = None
        self._tail = new_tail


class DoublyLinkedList:
    """A doubly linked list of integers, walkable in both directions."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: int) -> None:
        """Add *value* at the end of the list."""
        node = _DoubleNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class CircularList:
    """A singly linked list whose last node points back to the first."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        tail: Optional[_Node] = None
        for value in values:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1
        if tail is not None:
            tail.next = self._head

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.walk(self._size))!r})"

    def walk(self, steps: int) -> Iterator[int]:
        """Yield *steps* values starting at the head, wrapping round as needed."""
        if steps < 0:
            raise ValueError("steps must not be negative")
        node = self._head
        if node is None:
            return
        for _ in range(steps):
            yield node.data
            assert node.next is not None
            node = node.next


def merge_sorted_lists(first: Iterable[int], second: Iterable[int]) -> LinkedList:
    """Merge two ascending sequences into a new linked list; ties favour *first*."""
    return LinkedList(merge_sorted(list(first), list(second)))


def first_common_value(first: Iterable[int], second: Iterable[int]) -> Optional[int]:
    """Return the first value of *first* that also occurs in *second*, or None."""
    candidates = set(second)
    return next((value for value in first if value in candidates), None)


def _format_term(coefficient: int, exponent: int) -> str:
    if exponent == 0:
        return f"{coefficient}"
    if exponent == 1:
        return f"{coefficient}x"
    return f"{coefficient}x^{exponent}"


def format_polynomial(terms: Iterable[tuple[int, int]]) -> str:
    """Render (coefficient, exponent) pairs in the given order, joined by ' + '."""
    return " + ".join(_format_term(coefficient, exponent) for coefficient, exponent in terms)
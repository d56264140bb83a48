"""Queue exercises: draining a queue, a min-priority queue and a ring-buffer deque."""

from __future__ import annotations

import heapq
from collections.abc import Iterator, Sequence

DEFAULT_CAPACITY = 1000


def dequeue_many(values: Sequence[int], count: int) -> list[int]:
    """Return what is left of a queue holding *values* after *count* dequeues."""
    if count < 0:
        raise ValueError("count must not be negative")
    return list(values[count:])


class MinPriorityQueue:
    """A priority queue that always hands out its smallest value first."""

    def __init__(self) -> None:
        self._heap: list[int] = []

    def insert(self, value: int) -> None:
        """Add *value* to the queue."""
        heapq.heappush(self._heap, value)

    def peek(self) -> int:
        """Return the smallest value without removing it."""
        if not self._heap:
            raise IndexError("peek from an empty priority queue")
        return self._heap[0]

    def delete_min(self) -> int:
        """Remove and return the smallest value."""
        if not self._heap:
            raise IndexError("delete from an empty priority queue")
        return heapq.heappop(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._heap)!r})"


class RingDeque:
    """A double-ended queue stored in a fixed-size circular buffer."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots = [0] * capacity
        self._head = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def _ensure_room(self) -> None:
        if self._size == len(self._slots):
            raise OverflowError("deque is full")

    def _ensure_items(self, action: str) -> None:
        if self._size == 0:
            raise IndexError(f"{action} from an empty deque")

    def push_front(self, value: int) -> None:
        """Add *value* before the first element."""
        self._ensure_room()
        self._head = (self._head - 1) % len(self._slots)
        self._slots[self._head] = value
        self._size += 1

    def push_back(self, value: int) -> None:
        """Add *value* after the last element."""
        self._ensure_room()
        self._slots[(self._head + self._size) % len(self._slots)] = value
        self._size += 1

    def pop_front(self) -> int:
        """Remove and return the first element."""
        self._ensure_items("pop_front")
        value = self._slots[self._head]
        self._head = (self._head + 1) % len(self._slots)
        self._size -= 1
        return value

    def pop_back(self) -> int:
        """Remove and return the last element."""
        self._ensure_items("pop_back")
        value = self._slots[(self._head + self._size - 1) % len(self._slots)]
        self._size -= 1
        return value

    def front(self) -> int:
        """Return the first element without removing it."""
        self._ensure_items("front")
        return self._slots[self._head]

    def back(self) -> int:
        """Return the last element without removing it."""
        self._ensure_items("back")
        return self._slots[(self._head + self._size - 1) % len(self._slots)]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        for offset in range(self._size):
            yield self._slots[(self._head + offset) % len(self._slots)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"
"""Exercises on flat integer sequences."""

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate, combinations


def insert_at(values: Sequence[int], position: int, value: int) -> list[int]:
    """Return a copy of *values* with *value* placed at 1-based *position*."""
    if not 1 <= position <= len(values) + 1:
        raise IndexError(f"position {position} outside 1..{len(values) + 1}")
    result = list(values)
    result.insert(position - 1, value)
    return result


def delete_at(values: Sequence[int], position: int) -> list[int]:
    """Return a copy of *values* without the element at 1-based *position*."""
    if not 1 <= position <= len(values):
        raise IndexError(f"position {position} outside 1..{len(values)}")
    result = list(values)
    del result[position - 1]
    return result


def linear_search(values: Sequence[int], key: int) -> tuple[int | None, int]:
    """Scan for *key*; return its 0-based index (or None) and the comparisons made."""
    comparisons = 0
    for index, item in enumerate(values):
        comparisons += 1
        if item == key:
            return index, comparisons
    return None, comparisons


def reverse(values: Sequence[int]) -> list[int]:
    """Return the elements of *values* in reverse order."""
    return list(reversed(values))


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two ascending sequences; on ties the element of *first* comes first."""
    merged: list[int] = []
    left = iter(first)
    right = iter(second)
    a = next(left, None)
    b = next(right, None)
    while a is not None and b is not None:
        if a <= b:
            merged.append(a)
            a = next(left, None)
        else:
            merged.append(b)
            b = next(right, None)
    if a is not None:
        merged.append(a)
        merged.extend(left)
    if b is not None:
        merged.append(b)
        merged.extend(right)
    return merged


def dedupe_sorted(values: Sequence[int]) -> list[int]:
    """Drop consecutive repeats, keeping one of each run."""
    result: list[int] = []
    for item in values:
        if not result or result[-1] != item:
            result.append(item)
    return result


def frequencies(values: Sequence[int]) -> dict[int, int]:
    """Count each distinct value, keyed in order of first appearance."""
    return dict(Counter(values))


def min_max(values: Sequence[int]) -> tuple[int, int]:
    """Return the smallest and largest element."""
    if not values:
        raise ValueError("min_max() needs at least one value")
    return min(values), max(values)


def rotate_right(values: Sequence[int], k: int) -> list[int]:
    """Rotate *values* right by *k* places."""
    if not values:
        raise ValueError("cannot rotate an empty sequence")
    shift = k % len(values)
    if shift == 0:
        return list(values)
    return list(values[-shift:]) + list(values[:-shift])


def closest_to_zero_pair(values: Sequence[int]) -> tuple[int, int]:
    """Return the first pair, in index order, whose sum is nearest to zero."""
    if len(values) < 2:
        raise ValueError("closest_to_zero_pair() needs at least two values")
    return min(combinations(values, 2), key=lambda pair: abs(pair[0] + pair[1]))


def count_zero_sum_subarrays(values: Sequence[int]) -> int:
    """Count the contiguous, non-empty slices of *values* that sum to zero."""
    seen = Counter([0])
    count = 0
    for prefix in accumulate(values):
        count += seen[prefix]
        seen[prefix] += 1
    return count
from collections import deque

import pytest
from hypothesis import given
from hypothesis import strategies as st

from drillbook.queues import MinPriorityQueue, RingDeque, dequeue_many


@given(st.lists(st.integers(), max_size=40), st.data())
def test_dequeue_many_leaves_the_tail(values, data):
    count = data.draw(st.integers(min_value=0, max_value=len(values)))
    remaining = dequeue_many(values, count)
    assert len(remaining) + count == len(values)
    assert values[len(values) - len(remaining):] == remaining


def test_dequeue_nothing_keeps_everything():
    values = [5, 6, 7]
    assert dequeue_many(values, 0) == values


def test_dequeue_more_than_present_leaves_nothing():
    assert dequeue_many([10, 20, 30], 3) == []
    assert dequeue_many([10, 20, 30], 8) == []


def test_dequeue_many_rejects_negative_count():
    with pytest.raises(ValueError):
        dequeue_many([1, 2], -1)


def test_dequeue_many_does_not_modify_input():
    values = [1, 2, 3]
    dequeue_many(values, 2)
    assert values == [1, 2, 3]


@given(st.lists(st.integers(), min_size=1, max_size=50))
def test_priority_queue_yields_sorted_values(values):
    queue = MinPriorityQueue()
    for value in values:
        queue.insert(value)
    assert queue.peek() == min(values)
    drained = [queue.delete_min() for _ in values]
    assert drained == sorted(values)
    assert len(queue) == 0


def test_peek_does_not_remove():
    queue = MinPriorityQueue()
    for value in (40, 10, 30):
        queue.insert(value)
    assert queue.peek() == 10
    assert queue.peek() == 10
    assert len(queue) == 3


def test_delete_min_then_peek_shows_next_smallest():
    queue = MinPriorityQueue()
    for value in (40, 10, 30):
        queue.insert(value)
    assert queue.delete_min() == 10
    assert queue.peek() == 30
    assert len(queue) == 2


def test_empty_priority_queue_raises():
    queue = MinPriorityQueue()
    with pytest.raises(IndexError):
        queue.peek()
    with pytest.raises(IndexError):
        queue.delete_min()


def test_deque_front_and_back():
    ring = RingDeque()
    ring.push_back(2)
    ring.push_front(1)
    ring.push_back(3)
    assert ring.front() == 1
    assert ring.back() == 3
    assert list(ring) == [1, 2, 3]
    assert len(ring) == 3


def test_deque_pops_from_both_ends():
    ring = RingDeque()
    for value in (1, 2, 3):
        ring.push_back(value)
    assert ring.pop_front() == 1
    assert ring.pop_back() == 3
    assert ring.front() == ring.back() == 2


@pytest.mark.parametrize("method", ["pop_front", "pop_back", "front", "back"])
def test_empty_deque_raises(method):
    ring = RingDeque()
    with pytest.raises(IndexError):
        getattr(ring, method)()
    assert len(ring) == 0
    ring.push_back(7)
    assert getattr(ring, method)() == 7


def test_default_capacity_matches_source_limit():
    assert RingDeque().capacity == 1000


def test_full_deque_refuses_pushes():
    ring = RingDeque(capacity=2)
    ring.push_back(1)
    ring.push_front(0)
    with pytest.raises(OverflowError):
        ring.push_back(2)
    with pytest.raises(OverflowError):
        ring.push_front(-1)
    assert list(ring) == [0, 1]


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        RingDeque(capacity=0)


def test_wraps_around_the_buffer():
    ring = RingDeque(capacity=3)
    for round_number in range(10):
        ring.push_back(round_number)
        ring.push_back(round_number + 100)
        assert ring.pop_front() == round_number
        assert ring.pop_front() == round_number + 100
    assert len(ring) == 0


_operations = st.lists(
    st.one_of(
        st.tuples(st.sampled_from(["push_front", "push_back"]), st.integers()),
        st.tuples(
            st.sampled_from(["pop_front", "pop_back", "front", "back"]), st.none()
        ),
    ),
    max_size=60,
)


@given(_operations)
def test_deque_behaves_like_a_bounded_deque(operations):
    capacity = 5
    ring = RingDeque(capacity=capacity)
    model: deque[int] = deque()
    for name, value in operations:
        if name == "push_front":
            if len(model) == capacity:
                with pytest.raises(OverflowError):
                    ring.push_front(value)
            else:
                ring.push_front(value)
                model.appendleft(value)
        elif name == "push_back":
            if len(model) == capacity:
                with pytest.raises(OverflowError):
                    ring.push_back(value)
            else:
                ring.push_back(value)
                model.append(value)
        elif not model:
            with pytest.raises(IndexError):
                getattr(ring, name)()
        elif name == "pop_front":
            assert ring.pop_front() == model.popleft()
        elif name == "pop_back":
            assert ring.pop_back() == model.pop()
        elif name == "front":
            assert ring.front() == model[0]
        else:
            assert ring.back() == model[-1]
        assert list(ring) == list(model)
        assert len(ring) == len(model)
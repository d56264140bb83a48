# drillbook

A small collection of classic data-structure and algorithm drills, written as
plain Python functions and classes, for practice and teaching. Each drill is
short, has a clear contract, and raises a Python exception where the input
makes no sense (an out-of-range position, an empty sequence, a pop from an
empty container).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

### `drillbook.arrays`

Drills on integer sequences. Each returns a new list and leaves its input alone.

- `insert_at(values, position, value)` and `delete_at(values, position)` use
  1-based positions and raise `IndexError` outside the valid range.
- `linear_search(values, key)` returns `(index, comparisons)`. The index is
  0-based, or `None` when the key is absent.
- `reverse`, `merge_sorted` (on ties the element of the first sequence comes
  first), `dedupe_sorted` (drops consecutive repeats) and `frequencies` (a dict
  in order of first appearance).
- `min_max(values)` returns `(smallest, largest)`.
- `rotate_right(values, k)`, `closest_to_zero_pair(values)` (the first pair, in
  index order, whose sum is nearest zero) and `count_zero_sum_subarrays(values)`.

```python
from drillbook.arrays import insert_at, rotate_right, merge_sorted

insert_at([1, 2, 4, 5], 3, 3)       # [1, 2, 3, 4, 5]
rotate_right([1, 2, 3, 4, 5], 2)    # [4, 5, 1, 2, 3]
merge_sorted([1, 3, 5], [2, 4])     # [1, 2, 3, 4, 5]
```

### `drillbook.recursion`

`fibonacci(n)` (with `fibonacci(0) == 0`) and `power(base, exponent)`. Both
take non-negative arguments, raise `ValueError` otherwise, and are computed
iteratively, so large inputs do not hit the recursion limit.

### `drillbook.strings`

`reverse_string(text)` and `is_palindrome(text)`. The palindrome check is
case-sensitive.

### `drillbook.matrices`

`add_matrices`, `is_symmetric`, `spiral_order`, `is_identity` and
`diagonal_sum`, all working on lists of rows. Ragged matrices raise
`ValueError`. A non-square matrix is neither symmetric nor an identity.

```python
from drillbook.matrices import spiral_order

spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
# [1, 2, 3, 6, 9, 8, 7, 4, 5]
```

### `drillbook.linked`

- `LinkedList`: `append`, iteration, `len`, `remove_first(value)` (returns
  whether a node was removed), `count(value)`, and `rotate_right(k)`, which
  rotates in place.
- `DoublyLinkedList`: `append`, iteration forwards and with `reversed()`.
- `CircularList`: `walk(steps)` yields that many values from the head and
  wraps round the ring.
- `merge_sorted_lists(first, second)` returns a new `LinkedList`.
  `first_common_value(first, second)` returns a value or `None`.
- `format_polynomial(terms)` renders `(coefficient, exponent)` terms, for
  example `[(3, 2), (2, 1), (1, 0)]` as `3x^2 + 2x + 1`.

### `drillbook.stacks`

- `Stack(capacity=1000)`: `push` raises `OverflowError` when the stack is full,
  and `pop` raises `StackUnderflow` (a subclass of `IndexError`) when it is
  empty. `pop_many(count)` stops early once the stack is empty. Iteration runs
  from the top down.
- `precedence(operator)`, `infix_to_postfix(expression)` for single-character
  operands, and `evaluate_postfix(expression)` for integers with `+ - * /`.
  Division in `evaluate_postfix` truncates towards zero.

```python
from drillbook.stacks import infix_to_postfix, evaluate_postfix

infix_to_postfix("a+b*c")           # "abc*+"
evaluate_postfix("2 3 1 * + 9 -")   # -4
```

### `drillbook.queues`

- `dequeue_many(values, count)` returns what remains after `count` dequeues.
- `MinPriorityQueue`: `insert`, `peek` and `delete_min`. The last two raise
  `IndexError` when the queue is empty.
- `RingDeque(capacity=1000)`: `push_front`, `push_back`, `pop_front`,
  `pop_back`, `front`, `back`, `len` and iteration. It raises `OverflowError`
  when full and `IndexError` when empty.

## Command line

The `drillbook` command runs one of three sessions, `stack`,
`priority-queue` or `deque`, on commands read from standard input. The input
starts with a count of operations, followed by the operations. The command
prints one line for each operation that produces output.

```
echo "5 1 10 1 20 3 2 2" | drillbook stack
```

The commands for each session:

- `stack`: `1 x` pushes x, `2` pops and prints the value, or
  `Stack Underflow` when the stack is empty, and `3` prints the stack from the
  top down.
- `priority-queue`: `insert x`, `delete` and `peek`. `delete` and `peek`
  print `-1` when the queue is empty.
- `deque`: `push_front x`, `push_back x`, `pop_front`, `pop_back`, `front`,
  `back` and `size`. The pops, `front` and `back` print `-1` when the deque is
  empty.

Python code can run the same sessions on a list of tokens with
`drillbook.cli.run_stack_session`, `run_priority_queue_session` and
`run_deque_session`. Each returns the printed lines.

## What it does not do

The command line covers only the three sessions above. The other drills are
available from Python only. Nothing is saved between runs.
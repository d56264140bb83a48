import pytest
from hypothesis import given, strategies as st

from drillbook.matrices import (
    add_matrices,
    diagonal_sum,
    is_identity,
    is_symmetric,
    spiral_order,
)

ints = st.integers(-100, 100)


@st.composite
def matrices(draw, square=False):
    rows = draw(st.integers(1, 6))
    cols = rows if square else draw(st.integers(1, 6))
    return [draw(st.lists(ints, min_size=cols, max_size=cols)) for _ in range(rows)]


def transpose(matrix):
    return [list(column) for column in zip(*matrix)]


def identity(n):
    return [[int(i == j) for j in range(n)] for i in range(n)]


@given(matrices())
def test_add_zero_is_identity(matrix):
    zeros = [[0] * len(matrix[0]) for _ in matrix]
    assert add_matrices(matrix, zeros) == matrix


@given(st.data())
def test_add_is_commutative(data):
    first = data.draw(matrices())
    rows, cols = len(first), len(first[0])
    second = [data.draw(st.lists(ints, min_size=cols, max_size=cols)) for _ in range(rows)]
    assert add_matrices(first, second) == add_matrices(second, first)


def test_add_shape_mismatch():
    with pytest.raises(ValueError):
        add_matrices([[1, 2]], [[1], [2]])


def test_ragged_matrix_rejected():
    with pytest.raises(ValueError):
        diagonal_sum([[1, 2], [3]])


@given(matrices(square=True))
def test_sum_with_transpose_is_symmetric(matrix):
    assert is_symmetric(add_matrices(matrix, transpose(matrix)))


def test_symmetric_examples():
    assert is_symmetric([[1, 2], [3, 4]]) is False
    assert is_symmetric([[1, 2, 3]]) is False


@given(matrices())
def test_spiral_visits_every_element_once(matrix):
    order = spiral_order(matrix)
    flat = [value for row in matrix for value in row]
    assert sorted(order) == sorted(flat)
    assert order[: len(matrix[0])] == matrix[0]


def test_spiral_example():
    assert spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


def test_spiral_empty():
    assert spiral_order([]) == []


@given(st.integers(1, 8))
def test_identity_recognised(n):
    assert is_identity(identity(n))
    assert diagonal_sum(identity(n)) == n


@given(st.integers(1, 6), st.data())
def test_identity_broken_by_any_change(n, data):
    matrix = identity(n)
    i = data.draw(st.integers(0, n - 1))
    j = data.draw(st.integers(0, n - 1))
    matrix[i][j] += 2
    assert not is_identity(matrix)


def test_non_square_not_identity():
    assert is_identity([[1, 0, 0], [0, 1, 0]]) is False


@given(matrices())
def test_diagonal_sum_invariant_under_transpose(matrix):
    assert diagonal_sum(transpose(matrix)) == diagonal_sum(matrix)


@given(matrices())
def test_diagonal_sum_ignores_off_diagonal(matrix):
    cleared = [
        [value if i == j else 0 for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]
    assert diagonal_sum(cleared) == diagonal_sum(matrix)
    assert sum(map(sum, cleared)) == diagonal_sum(matrix)
"""Exercises on rectangular integer matrices given as lists of rows."""

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _shape(matrix: Matrix) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows differ in length")
    return rows, cols


def add_matrices(first: Matrix, second: Matrix) -> list[list[int]]:
    """Return the element-wise sum of two matrices of the same shape."""
    if _shape(first) != _shape(second):
        raise ValueError("matrices differ in shape")
    return [[a + b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(first, second)]


def is_symmetric(matrix: Matrix) -> bool:
    """Tell whether *matrix* is square and equal to its transpose."""
    rows, cols = _shape(matrix)
    if rows != cols:
        return False
    return all(
        matrix[i][j] == matrix[j][i] for i in range(rows) for j in range(i + 1, cols)
    )


def spiral_order(matrix: Matrix) -> list[int]:
    """Return the elements clockwise from the top-left corner, spiralling inwards."""
    _shape(matrix)
    remaining = [list(row) for row in matrix]
    order: list[int] = []
    while remaining:
        order.extend(remaining.pop(0))
        # Turn the rest counter-clockwise so the next edge becomes the top row.
        remaining = [list(column) for column in zip(*remaining)][::-1]
    return order


def is_identity(matrix: Matrix) -> bool:
    """Tell whether *matrix* is a square identity matrix."""
    rows, cols = _shape(matrix)
    if rows != cols:
        return False
    return all(
        value == (1 if i == j else 0)
        for i, row in enumerate(matrix)
        for j, value in enumerate(row)
    )


def diagonal_sum(matrix: Matrix) -> int:
    """Sum the primary diagonal, as far as the shorter side reaches."""
    _shape(matrix)
    return sum(row[i] for i, row in enumerate(matrix) if i < len(row))
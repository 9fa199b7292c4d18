"""Gauss-Jordan elimination and modular matrix powers."""

from __future__ import annotations

from collections.abc import Sequence

EPSILON = 1e-6

Matrix = list[list[int]]


class InconsistentSystemError(ValueError):
    """The linear system has no solution."""


class UnderdeterminedSystemError(ValueError):
    """The linear system has infinitely many solutions."""


def solve_linear_system(augmented: Sequence[Sequence[float]]) -> list[float]:
    """Solve ``n`` equations given as rows ``[a1, ..., an, b]``.

    Raises ``InconsistentSystemError`` or ``UnderdeterminedSystemError`` when
    there is no unique solution.
    """
    n = len(augmented)
    rows = [[float(value) for value in row] for row in augmented]
    if any(len(row) != n + 1 for row in rows):
        raise ValueError(f"each row must hold {n + 1} numbers")
    current = 0
    for column in range(n):
        pivot_row = next(
            (t for t in range(current, n) if abs(rows[t][column]) > EPSILON), None
        )
        if pivot_row is None:
            continue
        rows[pivot_row], rows[current] = rows[current], rows[pivot_row]
        pivot = rows[current]
        divisor = pivot[column]
        for k in range(column, n + 1):
            pivot[k] /= divisor
        for i, row in enumerate(rows):
            if i == current:
                continue
            factor = row[column]
            for k in range(column, n + 1):
                row[k] -= pivot[k] * factor
        current += 1
    if current < n:
        if any(abs(row[n]) > EPSILON for row in rows[current:]):
            raise InconsistentSystemError("the system has no solution")
        raise UnderdeterminedSystemError("the system has infinitely many solutions")
    return [row[n] for row in rows]


def identity(n: int) -> Matrix:
    """The ``n`` by ``n`` identity matrix."""
    return [[1 if i == j else 0 for j in range(n)] for i in range(n)]


def matrix_multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]], mod: int) -> Matrix:
    """Product of ``a`` and ``b`` with every entry reduced modulo ``mod``."""
    if any(len(row) != len(b) for row in a):
        raise ValueError("matrix dimensions do not match")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) % mod for col in columns] for row in a]


def matrix_power(a: Sequence[Sequence[int]], p: int, mod: int) -> Matrix:
    """``a`` raised to the non-negative power ``p`` modulo ``mod``."""
    if p < 0:
        raise ValueError("the exponent cannot be negative")
    if any(len(row) != len(a) for row in a):
        raise ValueError("the matrix must be square")
    result = identity(len(a))
    base = [list(row) for row in a]
    while p > 0:
        if p & 1:
            result = matrix_multiply(result, base, mod)
        base = matrix_multiply(base, base, mod)
        p >>= 1
    return result
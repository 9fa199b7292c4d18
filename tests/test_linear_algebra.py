import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.linear_algebra import (
    InconsistentSystemError,
    UnderdeterminedSystemError,
    identity,
    matrix_multiply,
    matrix_power,
    solve_linear_system,
)


def _augment(coefficients, solution):
    return [row + [sum(c * x for c, x in zip(row, solution))] for row in coefficients]


def test_solves_regular_system():
    coefficients = [[2, 1, -1], [-3, -1, 2], [-2, 1, 2]]
    solution = [2, 3, -1]
    assert solve_linear_system(_augment(coefficients, solution)) == pytest.approx(solution)


def test_solves_system_needing_row_swap():
    coefficients = [[0, 2, 1], [1, 1, 0], [3, 0, 1]]
    solution = [1, -2, 4]
    assert solve_linear_system(_augment(coefficients, solution)) == pytest.approx(solution)


def test_inconsistent_system():
    with pytest.raises(InconsistentSystemError):
        solve_linear_system([[1, 1, 2], [2, 2, 5]])


def test_underdetermined_system():
    with pytest.raises(UnderdeterminedSystemError):
        solve_linear_system([[1, 1, 2], [2, 2, 4]])


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        solve_linear_system([[0, 0, 1]])


def test_rejects_malformed_rows():
    with pytest.raises(ValueError):
        solve_linear_system([[1, 2], [3, 4]])


def test_identity():
    assert identity(2) == [[1, 0], [0, 1]]


square = st.integers(1, 3).flatmap(
    lambda n: st.lists(st.lists(st.integers(0, 20), min_size=n, max_size=n), min_size=n, max_size=n)
)


@given(square, st.integers(2, 1000))
def test_identity_is_neutral(a, mod):
    reduced = [[x % mod for x in row] for row in a]
    assert matrix_multiply(identity(len(a)), a, mod) == reduced
    assert matrix_multiply(a, identity(len(a)), mod) == reduced


@given(square, st.integers(2, 1000))
def test_power_zero_and_one(a, mod):
    assert matrix_power(a, 0, mod) == identity(len(a))
    assert matrix_power(a, 1, mod) == [[x % mod for x in row] for row in a]


@given(square, st.integers(0, 20), st.integers(0, 20), st.integers(2, 1000))
def test_power_adds_exponents(a, p, q, mod):
    combined = matrix_multiply(matrix_power(a, p, mod), matrix_power(a, q, mod), mod)
    assert matrix_power(a, p + q, mod) == combined


def test_power_gives_fibonacci():
    fib = [0, 1]
    for _ in range(40):
        fib.append(fib[-1] + fib[-2])
    result = matrix_power([[1, 1], [1, 0]], 40, 10**9 + 7)
    assert result[0][1] == fib[40] % (10**9 + 7)


def test_negative_power_rejected():
    with pytest.raises(ValueError):
        matrix_power([[1]], -1, 7)


def test_multiply_checks_dimensions():
    with pytest.raises(ValueError):
        matrix_multiply([[1, 2]], [[1, 2]], 7)
"""Base conversion, extended Euclid, Chinese remaindering, binomials, gcd and lcm."""

from __future__ import annotations

import math
from collections.abc import Iterable

DEFAULT_MODULUS = 10**9 + 7

_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _check_base(base: int) -> None:
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base {base} outside 2..{len(_DIGITS)}")


def convert_base(digits: str, from_base: int, to_base: int) -> str:
    """Rewrite ``digits`` from ``from_base`` into ``to_base``.

    Digits above 9 are the upper-case letters. A value of zero gives an empty
    string, as there are no digits left to write.
    """
    _check_base(from_base)
    _check_base(to_base)
    value = 0
    for char in digits:
        digit = _DIGITS.find(char)
        if digit < 0 or digit >= from_base:
            raise ValueError(f"invalid digit {char!r} for base {from_base}")
        value = value * from_base + digit
    out: list[str] = []
    while value:
        value, remainder = divmod(value, to_base)
        out.append(_DIGITS[remainder])
    return "".join(reversed(out))


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(d, x, y)`` with ``d = gcd(a, b)`` and ``a*x + b*y == d``."""
    if b == 0:
        return a, 1, 0
    d, x, y = extended_gcd(b, a % b)
    return d, y, x - a // b * y


def chinese_remainder(congruences: Iterable[tuple[int, int]]) -> int:
    """Smallest non-negative ``x`` with ``x ≡ a (mod m)`` for every ``(m, a)``.

    The moduli must be positive and pairwise coprime.
    """
    pairs = list(congruences)
    for modulus, _ in pairs:
        if modulus <= 0:
            raise ValueError(f"modulus {modulus} must be positive")
    product = math.prod(modulus for modulus, _ in pairs)
    x = 0
    for modulus, residue in pairs:
        partial = product // modulus
        d, inverse, _ = extended_gcd(partial, modulus)
        if d != 1:
            raise ValueError("moduli must be pairwise coprime")
        inverse %= modulus
        x = (x + partial * inverse * residue) % product
    return x


def binomial_table(n: int, m: int, mod: int = DEFAULT_MODULUS) -> list[list[int]]:
    """Pascal's triangle modulo ``mod``.

    Row ``i`` holds ``C(i, j)`` for ``j`` from 0 to ``min(i, m)``.
    """
    rows: list[list[int]] = []
    previous: list[int] = []
    for i in range(n + 1):
        row = [1]
        for j in range(1, min(i, m) + 1):
            above = previous[j] if j < len(previous) else 0
            row.append((above + previous[j - 1]) % mod)
        rows.append(row)
        previous = row
    return rows


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; both zero has none and raises ``ZeroDivisionError``."""
    return a * b // gcd(a, b)
"""Small number-theory and arithmetic routines."""

from __future__ import annotations

import statistics
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from typing import TypeVar

__all__ = [
    "is_armstrong",
    "divide",
    "add",
    "swap",
    "reverse_number",
    "power",
    "is_prime",
    "standard_deviation",
    "frequencies",
    "matrix_multiply",
]

A = TypeVar("A")
B = TypeVar("B")
H = TypeVar("H", bound=Hashable)


def is_armstrong(n: int) -> bool:
    """Tell whether ``n`` equals the sum of the cubes of its decimal digits.

    A negative number keeps its sign on every digit, so ``-n`` is an
    Armstrong number exactly when ``n`` is.
    """
    total = sum(int(digit) ** 3 for digit in str(abs(n)))
    return (-total if n < 0 else total) == n


def divide(dividend: int, divisor: int) -> tuple[int, int]:
    """Return ``(quotient, remainder)`` with the quotient truncated toward zero.

    The remainder takes the sign of the dividend.
    Raises ZeroDivisionError when ``divisor`` is zero.
    """
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, dividend - divisor * quotient


def add(first: int, second: int) -> int:
    """Return the sum of two numbers."""
    return first + second


def swap(first: A, second: B) -> tuple[B, A]:
    """Return the two values in exchanged order."""
    return second, first


def reverse_number(n: int) -> int:
    """Reverse the decimal digits of ``n``, keeping its sign and dropping leading zeros."""
    reversed_digits = int(str(abs(n))[::-1])
    return -reversed_digits if n < 0 else reversed_digits


def power(base: int, exponent: int) -> int:
    """Raise ``base`` to a non-negative integer ``exponent`` by repeated multiplication.

    Raises ValueError for a negative exponent.
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def is_prime(n: int) -> bool:
    """Tell whether the non-negative integer ``n`` is prime.

    Raises ValueError for a negative number.
    """
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    if n in (0, 1):
        return False
    return all(n % divisor for divisor in range(2, n // 2 + 1))


def standard_deviation(data: Iterable[float]) -> float:
    """Return the population standard deviation of ``data``.

    Raises ValueError when ``data`` is empty.
    """
    values = list(data)
    if not values:
        raise ValueError("standard deviation needs at least one value")
    return statistics.pstdev(values)


def frequencies(values: Iterable[H]) -> list[tuple[H, int]]:
    """Count each distinct value, in the order of its first occurrence."""
    return list(Counter(values).items())


def matrix_multiply(
    a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]
) -> list[list[float]]:
    """Return the matrix product ``a`` times ``b``.

    Raises ValueError when the rows are ragged or the inner dimensions differ.
    """
    inner = len(b)
    width = len(b[0]) if b else 0
    if any(len(row) != width for row in b):
        raise ValueError("second matrix has rows of different lengths")
    if any(len(row) != inner for row in a):
        raise ValueError(
            f"cannot multiply: rows of the first matrix need {inner} columns"
        )
    columns = list(zip(*b)) if b else []
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in a
    ]
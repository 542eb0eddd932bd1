import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.arithmetic import (
    add,
    divide,
    frequencies,
    is_armstrong,
    is_prime,
    matrix_multiply,
    power,
    reverse_number,
    standard_deviation,
    swap,
)

small_ints = st.integers(min_value=-1000, max_value=1000)


def test_armstrong_numbers_below_a_thousand():
    assert [n for n in range(1000) if is_armstrong(n)] == [0, 1, 153, 370, 371, 407]


@given(st.integers(min_value=1, max_value=100_000))
def test_armstrong_is_symmetric_under_negation(n):
    assert is_armstrong(-n) == is_armstrong(n)


@given(small_ints, small_ints.filter(lambda d: d != 0))
def test_divide_reconstructs_dividend(dividend, divisor):
    quotient, remainder = divide(dividend, divisor)
    assert quotient * divisor + remainder == dividend
    assert abs(remainder) < abs(divisor)
    assert remainder == 0 or (remainder < 0) == (dividend < 0)


@given(small_ints, small_ints.filter(lambda d: d != 0))
def test_divide_truncates_toward_zero(dividend, divisor):
    quotient, _ = divide(dividend, divisor)
    assert quotient == int(dividend / divisor)


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        divide(7, 0)


@given(small_ints, small_ints)
def test_add_is_commutative_with_identity(a, b):
    assert add(a, b) == add(b, a)
    assert add(a, 0) == a


@given(small_ints, small_ints)
def test_swap_twice_is_identity(a, b):
    assert swap(*swap(a, b)) == (a, b)


def test_swap_exchanges_values():
    assert swap(1.5, 2.5) == (2.5, 1.5)


@given(st.integers(min_value=1, max_value=10**9).filter(lambda n: n % 10 != 0))
def test_reverse_twice_is_identity(n):
    assert reverse_number(reverse_number(n)) == n


@given(st.integers(min_value=1, max_value=10**6))
def test_reverse_drops_trailing_zeros(n):
    assert reverse_number(n * 10) == reverse_number(n)


@given(st.integers(min_value=0, max_value=10**6))
def test_reverse_keeps_sign(n):
    assert reverse_number(-n) == -reverse_number(n)


@given(st.integers(min_value=-20, max_value=20))
def test_power_zero_exponent(base):
    assert power(base, 0) == 1


@given(st.integers(min_value=-20, max_value=20), st.integers(min_value=0, max_value=20))
def test_power_recurrence(base, exponent):
    assert power(base, exponent + 1) == power(base, exponent) * base


def test_power_negative_exponent_raises():
    with pytest.raises(ValueError):
        power(2, -1)


def test_zero_and_one_are_not_prime():
    assert not is_prime(0)
    assert not is_prime(1)


def test_primes_below_thirty():
    assert [n for n in range(30) if is_prime(n)] == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


@given(st.integers(min_value=2, max_value=300), st.integers(min_value=2, max_value=300))
def test_products_are_not_prime(a, b):
    assert not is_prime(a * b)


def test_is_prime_rejects_negative():
    with pytest.raises(ValueError):
        is_prime(-7)


def test_standard_deviation_worked_example():
    assert standard_deviation([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(2.0)


@given(st.floats(min_value=-1e6, max_value=1e6), st.integers(min_value=1, max_value=20))
def test_standard_deviation_of_constant_is_zero(value, count):
    assert standard_deviation([value] * count) == pytest.approx(0.0, abs=1e-6)


@given(
    st.lists(st.integers(min_value=-1000, max_value=1000), min_size=1, max_size=20),
    st.integers(min_value=-1000, max_value=1000),
)
def test_standard_deviation_shift_invariant(data, shift):
    assert standard_deviation([x + shift for x in data]) == pytest.approx(
        standard_deviation(data), abs=1e-6
    )


@given(
    st.lists(st.integers(min_value=-1000, max_value=1000), min_size=1, max_size=20),
    st.integers(min_value=-10, max_value=10),
)
def test_standard_deviation_scales(data, factor):
    assert standard_deviation([x * factor for x in data]) == pytest.approx(
        abs(factor) * standard_deviation(data), abs=1e-6
    )


def test_standard_deviation_empty_raises():
    with pytest.raises(ValueError):
        standard_deviation([])


@given(st.lists(st.integers(min_value=-5, max_value=5)))
def test_frequencies_counts_everything_in_first_occurrence_order(values):
    counts = frequencies(values)
    assert sum(count for _, count in counts) == len(values)
    assert [value for value, _ in counts] == list(dict.fromkeys(values))
    assert all(values.count(value) == count for value, count in counts)


def test_frequencies_empty():
    assert frequencies([]) == []


def _identity(n):
    return [[int(i == j) for j in range(n)] for i in range(n)]


def _transpose(m):
    return [list(row) for row in zip(*m)]


def _square(n):
    return st.lists(
        st.lists(st.integers(min_value=-50, max_value=50), min_size=n, max_size=n),
        min_size=n,
        max_size=n,
    )


square_pair = st.integers(min_value=1, max_value=4).flatmap(
    lambda n: st.tuples(_square(n), _square(n), _square(n))
)


@given(square_pair)
def test_identity_is_neutral(matrices):
    a, _, _ = matrices
    n = len(a)
    assert matrix_multiply(a, _identity(n)) == a
    assert matrix_multiply(_identity(n), a) == a


@given(square_pair)
def test_multiplication_is_associative(matrices):
    a, b, c = matrices
    assert matrix_multiply(matrix_multiply(a, b), c) == matrix_multiply(
        a, matrix_multiply(b, c)
    )


@given(square_pair)
def test_transpose_of_product(matrices):
    a, b, _ = matrices
    assert _transpose(matrix_multiply(a, b)) == matrix_multiply(
        _transpose(b), _transpose(a)
    )


def test_rectangular_product_shape():
    a = [[1, 2, 3]] * 2
    b = [[1] * 4] * 3
    product = matrix_multiply(a, b)
    assert [len(row) for row in product] == [4, 4]


def test_dimension_mismatch_raises():
    with pytest.raises(ValueError):
        matrix_multiply([[1, 2]], [[1, 2]])


def test_ragged_matrix_raises():
    with pytest.raises(ValueError):
        matrix_multiply([[1, 2]], [[1, 2], [3]])


def test_armstrong_range_matches_pairwise_negatives():
    pairs = itertools.product(range(0, 500), repeat=1)
    assert all(is_armstrong(-n) == is_armstrong(n) for (n,) in pairs)
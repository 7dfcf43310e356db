from fractions import Fraction

import pytest

from algokit.modular import ModInt
from algokit.sequences import (
    AND_MATRIX,
    OR_MATRIX,
    XOR_MATRIX,
    Pointwise,
    berlekamp_massey,
    fwht,
    fwht_convolution,
    interpolate,
)

P = 998244353


def test_berlekamp_massey_recovers_recurrence():
    s = [ModInt(1, P), ModInt(1, P), ModInt(3, P)]
    for _ in range(12):
        s.append(2 * s[-1] - s[-2] + 5 * s[-3])
    c = berlekamp_massey(s)
    assert len(c) <= 3
    for i in range(len(c), len(s)):
        assert s[i] == sum((c[j] * s[i - 1 - j] for j in range(len(c))), ModInt(0, P))


def _poly(x):
    return 3 * x**3 - 2 * x + 7


@pytest.mark.parametrize("x", [0, 2, 5, 10, -4])
def test_interpolate_fraction(x):
    y = [Fraction(_poly(i)) for i in range(4)]
    assert interpolate(y, Fraction(x)) == _poly(x)


def test_interpolate_modular():
    y = [ModInt(_poly(i), P) for i in range(5)]
    assert interpolate(y, ModInt(100, P)) == _poly(100) % P
    with pytest.raises(ValueError):
        interpolate([], ModInt(1, P))


@pytest.mark.parametrize(
    "matrix,op",
    [(XOR_MATRIX, lambda i, j: i ^ j), (OR_MATRIX, lambda i, j: i | j), (AND_MATRIX, lambda i, j: i & j)],
)
def test_fwht_convolution(matrix, op):
    a = [3, 1, 4, 1, 5, 9, 2, 6]
    b = [2, 7, 1, 8, 2, 8, 1, 8]
    expected = [0] * 8
    for i in range(8):
        for j in range(8):
            expected[op(i, j)] += a[i] * b[j]
    assert fwht_convolution(a, b, matrix) == expected


def test_fwht_xor_twice_scales():
    v = [1, 2, 3, 4]
    assert fwht(fwht(v, XOR_MATRIX), XOR_MATRIX) == [4 * x for x in v]


def test_pointwise():
    a, b = Pointwise([1, 2, 3]), Pointwise([4, 5, 6])
    assert a + b == (5, 7, 9)
    assert b - a == (3, 3, 3)
    assert a * b == (4, 10, 18)
    assert -a == (-1, -2, -3)
    assert Pointwise.filled(0, 3) + a == a
    with pytest.raises(ValueError):
        a + Pointwise([1])
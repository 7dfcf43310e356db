"""Berlekamp-Massey, Lagrange interpolation, Walsh-Hadamard transforms, pointwise tuples."""

from __future__ import annotations

import math


def berlekamp_massey(s):
    """Shortest ``c`` with ``s[i] == sum(c[j] * s[i-1-j])``; needs field elements."""
    c, b = [], [0]
    for i, d in enumerate(s):
        for j, cj in enumerate(c):
            d -= cj * s[i - 1 - j]
        nb = None
        if d != 0:
            if len(c) < len(b):
                nb = list(c)
                c.extend([0] * (len(b) - len(c)))
            for j, bj in enumerate(b):
                c[j] += d * bj
        if nb is not None:
            inv = 1 / d
            b = [inv] + [x * -inv for x in nb]
        else:
            b.insert(0, 0)
    return c


def interpolate(y, x):
    """Value at ``x`` of the polynomial of degree < len(y) through ``(i, y[i])``."""
    n = len(y)
    if n == 0:
        raise ValueError("no sample points")
    one = x * 0 + 1
    pref, suff = [one] * n, [one] * n
    for i in range(n - 1):
        pref[i + 1] = pref[i] * (x - i)
    for i in range(n - 1, 0, -1):
        suff[i - 1] = suff[i] * (x - i)
    rfact = [one / math.factorial(i) for i in range(n)]
    res = 0
    sgn = 1 if n % 2 else -1
    for i, yi in enumerate(y):
        res += yi * sgn * pref[i] * suff[i] * rfact[i] * rfact[n - 1 - i]
        sgn = -sgn
    return res


OR_MATRIX = ((1, 0), (1, 1))
AND_MATRIX = ((1, 1), (0, 1))
XOR_MATRIX = ((1, 1), (1, -1))


def _adjugate(m):
    return ((m[1][1], -m[0][1]), (-m[1][0], m[0][0]))


def fwht(v, m):
    """Apply the 2x2 butterfly ``m`` along every bit of the index."""
    v = list(v)
    n = len(v)
    length = 1
    while length < n:
        for pos in range(0, n, 2 * length):
            for i in range(pos, pos + length):
                x, y = v[i], v[i + length]
                v[i] = m[0][0] * x + m[0][1] * y
                v[i + length] = m[1][0] * x + m[1][1] * y
        length *= 2
    return v


def fwht_convolution(a, b, m):
    """Convolution of ``a`` and ``b`` under the index operation defined by ``m``."""
    n = len(a)
    c = fwht([x * y for x, y in zip(fwht(a, m), fwht(b, m))], _adjugate(m))
    det = m[0][0] * m[1][1] - m[0][1] * m[1][0]
    p = 1
    length = 1
    while length < n:
        p *= det
        length <<= 1
    if isinstance(p, int):
        return [v // p if isinstance(v, int) else v / p for v in c]
    return [v / p for v in c]


class Pointwise(tuple):
    """Fixed-length tuple with element-wise arithmetic."""

    def __new__(cls, values):
        return super().__new__(cls, values)

    @classmethod
    def filled(cls, value, k):
        return cls([value] * k)

    def _zip(self, other, op):
        if len(other) != len(self):
            raise ValueError("length mismatch")
        return Pointwise(op(x, y) for x, y in zip(self, other))

    def __add__(self, other):
        return self._zip(other, lambda x, y: x + y)

    def __sub__(self, other):
        return self._zip(other, lambda x, y: x - y)

    def __mul__(self, other):
        return self._zip(other, lambda x, y: x * y)

    def __truediv__(self, other):
        return self._zip(other, lambda x, y: x / y)

    def __neg__(self):
        return Pointwise(-x for x in self)

    def __pos__(self):
        return self
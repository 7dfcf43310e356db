"""Arithmetic modulo a prime, modular square roots and binomial tables."""

from __future__ import annotations

import random
from functools import lru_cache


class ModInt:
    """An element of the integers modulo ``mod``."""

    __slots__ = ("value", "mod")

    def __init__(self, value, mod):
        self.mod = mod
        self.value = int(value) % mod

    def _coerce(self, other):
        if isinstance(other, ModInt):
            if other.mod != self.mod:
                raise ValueError("moduli differ")
            return other.value
        if isinstance(other, int):
            return other % self.mod
        return None

    def _make(self, value):
        return ModInt(value, self.mod)

    def __add__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self._make(self.value + o)

    __radd__ = __add__

    def __sub__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self._make(self.value - o)

    def __rsub__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self._make(o - self.value)

    def __mul__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self._make(self.value * o)

    __rmul__ = __mul__

    def __truediv__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self * self._make(o).inverse()

    def __rtruediv__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._make(o) * self.inverse()

    def __neg__(self):
        return self._make(-self.value)

    def __pos__(self):
        return self

    def __pow__(self, p):
        return mod_pow(self, p)

    def __eq__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self.value == o

    def __hash__(self):
        return hash((self.value, self.mod))

    def __int__(self):
        return self.value

    def __repr__(self):
        return f"ModInt({self.value}, {self.mod})"

    def __str__(self):
        return str(self.value)

    def inverse(self):
        """Multiplicative inverse; the modulus is assumed prime."""
        if self.value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return mod_pow(self, -1)


def mod_pow(x, p):
    """Raise ``x`` to the integer power ``p`` (negative allowed) modulo a prime."""
    mod = x.mod
    if x.value == 0:
        return ModInt(1 if p == 0 else 0, mod)
    return ModInt(pow(x.value, p % (mod - 1), mod), mod)


def mod_sqrt(alpha):
    """Return some ``y`` with ``y * y == alpha``; raise ValueError if none exists."""
    mod = alpha.mod
    if mod_pow(alpha, (mod - 1) // 2) != 1:
        raise ValueError("not a quadratic residue")
    a_val = alpha.value

    def mul(u, v):
        return ((u[0] * v[0] + a_val * u[1] * v[1]) % mod, (u[0] * v[1] + u[1] * v[0]) % mod)

    while True:
        y = ModInt(random.randrange(mod), mod)
        if y * y == alpha:
            return y
        x = (y.value, 1)
        acc = (1, 0)
        p = (mod - 1) // 2
        while p:
            if p & 1:
                acc = mul(acc, x)
            x = mul(x, x)
            p >>= 1
        if acc[1] != 0:
            return ModInt(acc[1], mod).inverse()


class Combinatorics:
    """Factorials, inverse factorials and reciprocals modulo a prime below ``n``."""

    def __init__(self, n, mod):
        self.mod = mod
        size = max(n, 2)
        self.fact = [1] * size
        self.rfact = [1] * size
        self.rec = [0] * size
        self.rec[1] = 1
        for i in range(2, n):
            self.rec[i] = (-(mod // i) * self.rec[mod % i]) % mod
            self.rfact[i] = self.rec[i] * self.rfact[i - 1] % mod
            self.fact[i] = i * self.fact[i - 1] % mod

    def _z(self, v):
        return ModInt(v, self.mod)

    def binomial(self, n, k):
        if k < 0 or n < k:
            return self._z(0)
        if k == 0 or k == n:
            return self._z(1)
        return self._z(self.fact[n] * self.rfact[k] * self.rfact[n - k])

    def multiset(self, n, k):
        """Number of multisets of size ``n`` drawn from ``k`` kinds."""
        if k == 0:
            return self._z(1 if n == 0 else 0)
        return self.binomial(n + k - 1, k - 1)

    def factorial(self, n):
        return self._z(self.fact[n])

    def inverse_factorial(self, n):
        return self._z(self.rfact[n])

    def reciprocal(self, n):
        return self._z(self.rec[n])


@lru_cache(maxsize=None)
def combinatorics(mod):
    """Shared table of size 2**20 for the given prime."""
    return Combinatorics(1 << 20, mod)
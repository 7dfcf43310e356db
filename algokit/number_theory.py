"""Extended gcd, Chinese remaindering, discrete logarithms and a linear sieve."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _tdiv(a, b):
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def extended_gcd(a, b):
    """Return ``(g, x, y)`` with ``a*x + b*y == g``."""
    if a == 0:
        return b, 0, 1
    q = _tdiv(b, a)
    r = b - q * a
    g, y, x = extended_gcd(r, a)
    return g, x - q * y, y


@dataclass
class CRT:
    """Residue ``a`` modulo ``mod``; ``a == -1`` marks an inconsistent system."""

    a: int = 0
    mod: int = 1

    def __post_init__(self):
        self.a %= self.mod

    @property
    def valid(self):
        return self.a != -1

    def __add__(self, other):
        g, x, _ = extended_gcd(self.mod, other.mod)
        if not self.valid or not other.valid or (self.a - other.a) % g:
            res = CRT()
            res.a = -1
            return res
        lcm = self.mod // g * other.mod
        return CRT(self.a + (other.a - self.a) // g * self.mod * x, lcm)


def diophantine(a, b, c):
    """Return ``(x, y)`` with ``a*x + b*y == c``, or None when there is none."""
    g, x, y = extended_gcd(a, b)
    if c % g != 0:
        return None
    f = c // g
    return x * f, y * f


def discrete_log(a, b, mod):
    """Smallest ``x`` with ``a**x == b (mod mod)``, or None."""
    k, add = 1, 0
    while True:
        g = math.gcd(a, mod)
        if g == 1:
            break
        if b == k:
            return add
        if b % g:
            return None
        b //= g
        mod //= g
        k = k * a // g % mod
        add += 1
    d = 1 + math.isqrt(mod)
    small = {}
    x = 1
    for i in range(1, d + 1):
        x = x * a % mod
        small[b * x % mod] = i
    y = k
    for i in range(1, d + 1):
        y = y * x % mod
        if y in small:
            return i * d - small[y] + add
    return None


@dataclass
class PrimePower:
    """Least prime ``p`` of a number and its exact power ``pow == p**k``."""

    p: int = -1
    pow: int = 0
    k: int = 0


class Sieve:
    """Linear sieve recording the least prime power of each number up to ``n``."""

    def __init__(self, n):
        self.lp = [PrimePower() for _ in range(n + 1)]
        self.primes = []
        for i in range(2, n + 1):
            li = self.lp[i]
            if li.p == -1:
                li.p = li.pow = i
                li.k = 1
                self.primes.append(i)
            for p in self.primes:
                if i * p > n or p > li.p:
                    break
                lj = self.lp[i * p]
                lj.p = p
                if p == li.p:
                    lj.pow = p * li.pow
                    lj.k = li.k + 1
                else:
                    lj.pow = p
                    lj.k = 1

    def __getitem__(self, i):
        return self.lp[i]
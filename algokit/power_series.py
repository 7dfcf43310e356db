"""Truncated formal power series with coefficients modulo a prime."""

from __future__ import annotations

from .fft import NTT_MOD, convolve, ntt
from .modular import ModInt


def _reciprocal(i, mod):
    return pow(i, -1, mod)


class FormalPowerSeries(list):
    """Coefficient list (ascending powers) with arithmetic modulo ``mod``."""

    def __init__(self, coeffs=(), mod=NTT_MOD):
        self.mod = mod
        super().__init__(int(c) % mod for c in coeffs)

    def _new(self, coeffs):
        return FormalPowerSeries(coeffs, self.mod)

    def _series(self, other):
        if isinstance(other, FormalPowerSeries):
            if other.mod != self.mod:
                raise ValueError("moduli differ")
            return other
        if isinstance(other, (list, tuple)):
            return self._new(other)
        return None

    def _scalar(self, x):
        if isinstance(x, (int, ModInt)):
            return int(x) % self.mod
        return None

    def __repr__(self):
        return f"FormalPowerSeries({list(self)!r}, mod={self.mod})"

    def __add__(self, other):
        other = self._series(other)
        if other is None:
            return NotImplemented
        res = list(self) + [0] * (len(other) - len(self))
        for i, c in enumerate(other):
            res[i] += c
        return self._new(res)

    __iadd__ = __add__
    __radd__ = __add__

    def __sub__(self, other):
        other = self._series(other)
        if other is None:
            return NotImplemented
        res = list(self) + [0] * (len(other) - len(self))
        for i, c in enumerate(other):
            res[i] -= c
        return self._new(res)

    __isub__ = __sub__

    def __neg__(self):
        return self._new(-c for c in self)

    def __pos__(self):
        return self._new(self)

    def __mul__(self, other):
        series = self._series(other)
        if series is not None:
            return self._new(convolve(self, series, self.mod))
        s = self._scalar(other)
        if s is None:
            return NotImplemented
        return self._new(c * s for c in self)

    __imul__ = __mul__

    def __rmul__(self, other):
        s = self._scalar(other)
        if s is None:
            return NotImplemented
        return self._new(c * s for c in self)

    def __truediv__(self, other):
        series = self._series(other)
        if series is not None:
            return self._quotient(series)
        s = self._scalar(other)
        if s is None:
            return NotImplemented
        if s == 0:
            raise ZeroDivisionError("division by zero")
        return self * _reciprocal(s, self.mod)

    __itruediv__ = __truediv__

    def __mod__(self, other):
        return self.euclidean_division(self._series(other))[1]

    def _check_divisor(self, d):
        if not d or d[-1] == 0:
            raise ValueError("divisor must be non-empty with a non-zero leading coefficient")

    def naive_division(self, d):
        """Long division; returns ``(quotient, remainder)``, each at least ``[0]``."""
        self._check_divisor(d)
        mod = self.mod
        lead = _reciprocal(d[-1], mod)
        q, r = [], list(self)
        while len(r) >= len(d):
            c = r[-1] * lead % mod
            q.append(c)
            offset = len(r) - len(d)
            for i, di in enumerate(d):
                r[offset + i] = (r[offset + i] - c * di) % mod
            r.pop()
        q.reverse()
        return self._new(q or [0]), self._new(r or [0])

    def _quotient(self, d):
        self._check_divisor(d)
        n, m = len(self), len(d)
        if n < m:
            return self._new([])
        if m <= 64:
            return self.naive_division(d)[0]
        k = n - m + 1
        rd = _resized(self._new(d[::-1]), k)
        res = self._new(self[::-1][:k]) * inv(rd)
        return self._new(res[:k][::-1])

    def euclidean_division(self, d):
        """Return ``(quotient, remainder)`` with the remainder of length ``len(d) - 1``."""
        self._check_divisor(d)
        if len(d) <= 64:
            return self.naive_division(d)
        q = self / d
        q0 = self._new(q[: min(len(q), len(d))])
        r = _resized(self - d * q0, len(d) - 1)
        return q, r

    def __call__(self, x):
        x = int(x) % self.mod
        y = 0
        for c in reversed(self):
            y = (y * x + c) % self.mod
        return y

    def trim_left(self):
        del self[: self.valuation()]

    def trim_right(self):
        while self and self[-1] == 0:
            self.pop()

    def degree(self):
        """Index of the last non-zero coefficient, or -1."""
        return next((i for i in range(len(self) - 1, -1, -1) if self[i] != 0), -1)

    def valuation(self):
        """Index of the first non-zero coefficient, or the length if none."""
        return next((i for i, c in enumerate(self) if c != 0), len(self))


def _resized(p, n):
    return p._new(list(p[:n]) + [0] * (n - len(p)))


def product(series):
    """Product of a sequence of series, by divide and conquer."""
    series = list(series)
    if not series:
        return FormalPowerSeries([1])
    if len(series) == 1:
        return series[0]._new(series[0])
    h = len(series) // 2
    return product(series[:h]) * product(series[h:])


def _inv_newton(p):
    mod = p.mod
    n = len(p)
    q = [_reciprocal(p[0], mod)]
    k = 1
    while k < n:
        k *= 2
        qh = ntt(q + [0] * (2 * k - len(q)), mod=mod)
        head = list(p[: min(k, n)])
        ph = ntt(head + [0] * (2 * k - len(head)), mod=mod)
        qh = [a * (2 - b * a) % mod for a, b in zip(qh, ph)]
        q = ntt(qh, inverse=True, mod=mod)[:k]
    return p._new(q[:n])


def _inv_graeffe(p):
    n = len(p)
    if n == 1:
        return p._new([_reciprocal(p[0], p.mod)])
    aneg = p._new(-c if i % 2 else c for i, c in enumerate(p))
    b = p * aneg
    k = (n + 1) // 2
    inv_c = inv(p._new(b[0::2][:k]))
    inv_b = [0] * n
    for i, c in enumerate(inv_c):
        inv_b[2 * i] = c
    return _resized(aneg * p._new(inv_b), n)


def inv(p):
    """Multiplicative inverse modulo ``x**len(p)``."""
    if not p or p[0] == 0:
        raise ValueError("series must have a non-zero constant term")
    if p.mod == NTT_MOD:
        return _inv_newton(p)
    return _inv_graeffe(p)


def derivative(p):
    return p._new(i * c for i, c in enumerate(p) if i)


def integral(p):
    mod = p.mod
    return p._new([0] + [c * _reciprocal(i + 1, mod) for i, c in enumerate(p)])


def log(p):
    """Logarithm modulo ``x**len(p)``; the constant term must be 1."""
    if not p or p[0] != 1:
        raise ValueError("series must have constant term 1")
    n = len(p)
    r = _resized(derivative(p) * inv(p), n - 1)
    return integral(r)


def exp(p):
    """Exponential modulo ``x**len(p)``; the constant term must be 0."""
    if p and p[0] != 0:
        raise ValueError("series must have constant term 0")
    n = len(p)
    one = p._new([1])
    q = p._new([1])
    k = 1
    while k < n:
        k *= 2
        q = _resized(q, k)
        b = one + p._new(p[:k]) - log(q)
        q = _resized(q * b, k)
    return _resized(q, n)


def power(p, alpha):
    """``p ** alpha`` modulo ``x**len(p)``; the constant term must be 1."""
    if not p or p[0] != 1:
        raise ValueError("series must have constant term 1")
    return exp((int(alpha) % p.mod) * log(p))


def composition(f, g):
    """``f(g(x))`` modulo ``x**len(g)``."""
    if f.mod != g.mod:
        raise ValueError("moduli differ")
    n, m = len(f), len(g)
    block = 1
    while (block + 1) * (block + 1) <= n:
        block += 1
    powers = [f._new([1])]
    for _ in range(block - 1):
        powers.append(_resized(powers[-1] * g, m))
    h = _resized(powers[-1] * g, m)
    offset = f._new([1])
    res = f._new([])
    for i in range(0, n, block):
        part = f._new([])
        for fk, pk in zip(f[i : i + block], powers):
            part = part + fk * pk
        part = _resized(part, m)
        res = res + offset * part
        offset = _resized(offset * h, m)
    return _resized(res, m)


def non_zero(p):
    """Indices of the non-zero coefficients."""
    return [i for i, c in enumerate(p) if c != 0]


def sparse_inv(p):
    if not p or p[0] == 0:
        raise ValueError("series must have a non-zero constant term")
    mod = p.mod
    n = len(p)
    idx = non_zero(p)[1:]
    q = [0] * n
    q[0] = _reciprocal(p[0], mod)
    for j in range(1, n):
        acc = -sum(p[i] * q[j - i] for i in idx if i <= j)
        q[j] = acc * q[0] % mod
    return p._new(q)


def sparse_exp(p):
    if not p or p[0] != 0:
        raise ValueError("series must be non-empty with constant term 0")
    mod = p.mod
    n = len(p)
    dp = derivative(p)
    idx = non_zero(dp)
    q = [0] * n
    q[0] = 1
    for i in range(n - 1):
        dq = sum(q[i - j] * dp[j] for j in idx if j <= i) % mod
        q[i + 1] = _reciprocal(i + 1, mod) * dq % mod
    return p._new(q)


def sparse_log(p):
    if not p or p[0] != 1:
        raise ValueError("series must have constant term 1")
    mod = p.mod
    n = len(p)
    dp = derivative(p)
    idx = non_zero(p)[1:]
    dq = [0] * (n - 1)
    for i in range(n - 1):
        dq[i] = (dp[i] - sum(dq[i - j] * p[j] for j in idx if j <= i)) % mod
    return integral(p._new(dq))


def sparse_pow(p, alpha):
    if not p or p[0] != 1:
        raise ValueError("series must have constant term 1")
    mod = p.mod
    a = int(alpha) % mod
    n = len(p)
    idx = non_zero(p)[1:]
    dp = derivative(p)
    q = [0] * n
    dq = [0] * max(n - 1, 0)
    q[0] = 1
    for i in range(n - 1):
        acc = a * sum(dp[j - 1] * q[i - j + 1] for j in idx if j - 1 <= i)
        acc -= sum(p[j] * dq[i - j] for j in idx if j <= i)
        dq[i] = acc % mod
        q[i + 1] = dq[i] * _reciprocal(i + 1, mod) % mod
    return p._new(q)
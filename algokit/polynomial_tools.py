"""Multipoint evaluation, interpolation, basis changes and counting sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .fft import NTT_MOD
from .power_series import FormalPowerSeries, derivative, exp, sparse_pow


def _resized(p, n):
    return FormalPowerSeries(list(p[:n]) + [0] * (n - len(p)), p.mod)


def _factorials(n, mod):
    fact = [1] * n
    for i in range(1, n):
        fact[i] = fact[i - 1] * i % mod
    return fact


def _inverse_factorials(n, mod):
    if n == 0:
        return []
    fact = _factorials(n, mod)
    rfact = [1] * n
    rfact[-1] = pow(fact[-1], -1, mod)
    for i in range(n - 1, 0, -1):
        rfact[i - 1] = rfact[i] * i % mod
    return rfact


@dataclass
class _Node:
    poly: FormalPowerSeries
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    y: int = 0


class Interpolator:
    """Subproduct tree over fixed points for evaluation and interpolation."""

    def __init__(self, points, mod=NTT_MOD):
        points = [int(x) % mod for x in points]
        if not points:
            raise ValueError("at least one point is required")
        self.mod = mod
        self.points = points
        self._root = self._build(points)
        self._initialized = False

    def _build(self, pts):
        if len(pts) == 1:
            return _Node(FormalPowerSeries([-pts[0], 1], self.mod))
        h = len(pts) // 2
        left = self._build(pts[:h])
        right = self._build(pts[h:])
        return _Node(left.poly * right.poly, left, right)

    def _leaves(self, node):
        if node.left is None:
            yield node
        else:
            yield from self._leaves(node.left)
            yield from self._leaves(node.right)

    def evaluate(self, q):
        """Values of ``q`` at the points, in their given order."""
        q = FormalPowerSeries(q, self.mod)
        return list(self._evaluate(self._root, q % self._root.poly))

    def _evaluate(self, node, q):
        if node.left is None:
            if len(q) != 1:
                raise ValueError("unexpected remainder size")
            yield q[0]
            return
        for child in (node.left, node.right):
            yield from self._evaluate(child, q % child.poly)

    def interpolate(self, values):
        """The unique polynomial of degree < len(points) taking ``values`` at the points."""
        values = [int(v) % self.mod for v in values]
        if len(values) != len(self.points):
            raise ValueError("need one value per point")
        if not self._initialized:
            ys = self.evaluate(derivative(self._root.poly))
            for leaf, y in zip(self._leaves(self._root), ys):
                leaf.y = y
            self._initialized = True
        return self._interpolate(self._root, values)

    def _interpolate(self, node, values):
        if node.left is None:
            return FormalPowerSeries([values[0] * pow(node.y, -1, self.mod)], self.mod)
        h = len(values) // 2
        return node.right.poly * self._interpolate(node.left, values[:h]) + node.left.poly * self._interpolate(
            node.right, values[h:]
        )

    def to_newton_basis(self, p):
        """Coefficients of ``p`` in the basis ``prod_{j<k} (x - points[j])``."""
        p = FormalPowerSeries(p, self.mod)
        if len(p) != len(self.points):
            raise ValueError("series size must equal the number of points")
        return self._newton(self._root, p)

    def _newton(self, node, p):
        if node.left is None:
            if len(p) != 1:
                raise ValueError("unexpected remainder size")
            return FormalPowerSeries([p[0]], self.mod)
        q, r = p.euclidean_division(node.left.poly)
        a = self._newton(node.left, r)
        b = self._newton(node.right, q)
        return FormalPowerSeries(list(a) + list(b), self.mod)


def chirp_z_transform(p, a, r, m):
    """Return ``[p(a * r**i) for i in range(m)]``."""
    mod = p.mod
    a, r = int(a) % mod, int(r) % mod
    if r == 0:
        y = [0] * m
        if m:
            y[0] = p(a)
        for j in range(1, m):
            y[j] = p[0] if p else 0
        return y
    n = len(p)
    if n == 0:
        return [0] * m

    def rpow(i):
        return pow(r, i * (i - 1) // 2, mod)

    coeffs = [0] * n
    for i, c in enumerate(p):
        coeffs[n - 1 - i] = c * pow(a, i, mod) * pow(rpow(i), -1, mod) % mod
    b = FormalPowerSeries([rpow(i) for i in range(n + m)], mod)
    conv = FormalPowerSeries(coeffs, mod) * b
    return [conv[i + n - 1] * pow(rpow(i), -1, mod) % mod for i in range(m)]


def scaled_exp(alpha, n, mod=NTT_MOD):
    """``exp(alpha * x)`` modulo ``x**n``."""
    alpha = int(alpha) % mod
    coeffs = []
    acc = 1
    for rf in _inverse_factorials(n, mod):
        coeffs.append(acc * rf)
        acc = acc * alpha % mod
    return FormalPowerSeries(coeffs, mod)


def borel(p):
    """Map ``x**k`` to ``x**k / k!``."""
    return FormalPowerSeries((c * f for c, f in zip(p, _inverse_factorials(len(p), p.mod))), p.mod)


def laplace(p):
    """Map ``x**k`` to ``k! * x**k``."""
    return FormalPowerSeries((c * f for c, f in zip(p, _factorials(len(p), p.mod))), p.mod)


def apply_power_series_of_derivative(f, p):
    """Return ``f(D) p`` where ``D`` is differentiation."""
    n = len(p)
    rev = FormalPowerSeries(list(f[:n])[::-1], f.mod)
    res = rev * laplace(p)
    res = FormalPowerSeries(res[max(len(rev) - 1, 0):], p.mod)
    return _resized(borel(res), n)


def taylor_shift(p, c):
    """The polynomial ``x -> p(x + c)``."""
    return apply_power_series_of_derivative(scaled_exp(c, len(p), p.mod), p)


def falling_taylor_shift(p, c):
    """Shift by ``c`` for a polynomial given in the falling factorial basis."""
    n = len(p)
    f = [0] * max(2, n)
    f[0] = f[1] = 1
    return apply_power_series_of_derivative(sparse_pow(FormalPowerSeries(f, p.mod), c), p)


def falling_interpolate(y):
    """Falling-factorial coefficients of the polynomial of degree < len(y) with P(i) = y[i]."""
    n = len(y)
    return _resized(scaled_exp(-1, n, y.mod) * borel(y), n)


def falling_evaluate(p):
    """Values ``P(0), ..., P(len(p) - 1)`` of a falling-factorial polynomial."""
    n = len(p)
    return laplace(_resized(scaled_exp(1, n, p.mod) * p, n))


def falling_evaluate_at(p, x):
    """Value at ``x`` of a polynomial in the falling factorial basis."""
    mod = p.mod
    x = int(x) % mod
    res, fact = 0, 1
    for i, c in enumerate(p):
        res = (res + c * fact) % mod
        fact = fact * (x - i) % mod
    return res


def shift_of_sampling_points(y, c, m):
    """``P(c + j)`` for ``j < m``, where P has degree < len(y) and P(i) = y[i]."""
    p = falling_interpolate(y)
    p = falling_taylor_shift(p, c)
    return falling_evaluate(_resized(p, m))


def stirling_first(n, mod=NTT_MOD):
    """Coefficients of the falling factorial ``x (x-1) ... (x-n+1)``."""
    if n == 0:
        return FormalPowerSeries([1], mod)
    h = n // 2
    f = stirling_first(h, mod)
    g = f * taylor_shift(f, -h)
    if n % 2:
        g = g * FormalPowerSeries([-(n - 1), 1], mod)
    return g


def stirling_second(n, mod=NTT_MOD):
    """Coefficients of ``x**n`` in the falling factorial basis."""
    y = FormalPowerSeries([pow(i, n, mod) for i in range(n + 1)], mod)
    return falling_interpolate(y)


def partition_function(n, mod=NTT_MOD):
    """``p[i]`` = number of partitions of ``i``, for ``i <= n``."""
    f = [0] * (n + 1)
    for k in range(1, n + 1):
        for l in range(1, n // k + 1):
            f[l * k] = (f[l * k] + pow(l, -1, mod)) % mod
    return list(exp(FormalPowerSeries(f, mod)))
"""N-th term of a linear recurrence via the Bostan-Mori algorithm."""

from __future__ import annotations

from .fft import convolve


def _divide(a, b, mod):
    if mod is not None:
        return a * pow(b, -1, mod) % mod
    if isinstance(a, int) and isinstance(b, int) and a % b == 0:
        return a // b
    return a / b


def one_coeff(p, q, n, mod=None):
    """Coefficient of ``x**n`` in ``p / q``, where ``len(q) == len(p) + 1``."""
    if mod is not None:
        p = [int(x) % mod for x in p]
        q = [int(x) % mod for x in q]
    else:
        p, q = list(p), list(q)
    d = len(p)
    while n > 0:
        qsgn = [-c if i % 2 else c for i, c in enumerate(q)]
        if mod is not None:
            qsgn = [c % mod for c in qsgn]
        u = convolve(p, qsgn, mod)
        v = convolve(q, qsgn, mod)
        b = n & 1
        p = u[b::2][:d]
        q = v[0::2][: d + 1]
        n >>= 1
    return _divide(p[0], q[0], mod)


def solve_linear_recurrence(c, u, n, mod=None):
    """Return ``u[n]`` for ``u[i+1] = c[0]*u[i] + ... + c[d-1]*u[i-d+1]``."""
    if len(c) > len(u):
        raise ValueError("need at least as many initial values as coefficients")
    if n < len(u):
        return u[n] % mod if mod is not None else u[n]
    if not c:
        return 0
    d = len(c)
    u = list(u[:d])
    q = [1] + [-x for x in c]
    if mod is not None:
        u = [int(x) % mod for x in u]
        q = [int(x) % mod for x in q]
    p = convolve(u, q, mod)[:d]
    return one_coeff(p, q, n, mod)
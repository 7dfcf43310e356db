"""Fast Fourier and number-theoretic transforms and polynomial convolution."""

from __future__ import annotations

import cmath
import math

NTT_MOD = 998244353
NTT_ROOT = 3
MAX_SIZE = 1 << 22
NAIVE_THRESHOLD = 64
_SPLIT = 1 << 15


def _check_size(n):
    if n & (n - 1) or n > MAX_SIZE:
        raise ValueError("transform length must be a power of two not above 2**22")


def _bit_reverse(a):
    n = len(a)
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j |= bit
        if i < j:
            a[i], a[j] = a[j], a[i]


def ntt(p, inverse=False, mod=NTT_MOD):
    """Number-theoretic transform of ``p`` modulo ``mod`` with primitive root 3."""
    a = [int(x) % mod for x in p]
    n = len(a)
    _check_size(n)
    if n == 0:
        return a
    if (mod - 1) % n:
        raise ValueError("transform length does not divide mod - 1")
    _bit_reverse(a)
    length = 2
    while length <= n:
        w = pow(NTT_ROOT, (mod - 1) // length, mod)
        if inverse:
            w = pow(w, mod - 2, mod)
        half = length >> 1
        twiddles = [1] * half
        for i in range(1, half):
            twiddles[i] = twiddles[i - 1] * w % mod
        for start in range(0, n, length):
            for i, wi in enumerate(twiddles, start):
                u = a[i]
                v = a[i + half] * wi % mod
                a[i] = (u + v) % mod
                a[i + half] = (u - v) % mod
        length <<= 1
    if inverse:
        inv_n = pow(n, mod - 2, mod)
        a = [x * inv_n % mod for x in a]
    return a


def fft(p, inverse=False):
    """Complex discrete Fourier transform (forward uses the root ``exp(2*pi*i/n)``)."""
    a = [complex(x) for x in p]
    n = len(a)
    _check_size(n)
    if n == 0:
        return a
    _bit_reverse(a)
    sign = -1 if inverse else 1
    length = 2
    while length <= n:
        half = length >> 1
        twiddles = [cmath.exp(sign * 2j * math.pi * i / length) for i in range(half)]
        for start in range(0, n, length):
            for i, wi in enumerate(twiddles, start):
                u = a[i]
                v = a[i + half] * wi
                a[i] = u + v
                a[i + half] = u - v
        length <<= 1
    if inverse:
        a = [x / n for x in a]
    return a


def convolve_naive(p, q):
    """Schoolbook product of two coefficient sequences."""
    if not p or not q:
        return []
    res = [0] * (len(p) + len(q) - 1)
    for i, x in enumerate(p):
        for j, y in enumerate(q):
            res[i + j] += x * y
    return res


def _padded_size(r):
    k = 1
    while k < r:
        k <<= 1
    return k


def convolve_complex(p, q):
    """Product of complex sequences, by FFT once both exceed the naive threshold."""
    n, m = len(p), len(q)
    if n == 0 or m == 0:
        return []
    if min(n, m) <= NAIVE_THRESHOLD:
        return [complex(x) for x in convolve_naive(p, q)]
    r = n + m - 1
    k = _padded_size(r)
    ph = fft(list(p) + [0] * (k - n))
    qh = fft(list(q) + [0] * (k - m))
    return fft([x * y for x, y in zip(ph, qh)], inverse=True)[:r]


def convolve_mod(p, q, mod):
    """Product modulo an arbitrary ``mod`` using 15-bit splitting and complex FFT."""
    p = [int(x) % mod for x in p]
    q = [int(x) % mod for x in q]
    n, m = len(p), len(q)
    if n == 0 or m == 0:
        return []
    if min(n, m) <= NAIVE_THRESHOLD:
        return [x % mod for x in convolve_naive(p, q)]
    a = [complex(x % _SPLIT, x // _SPLIT) for x in p]
    b0 = [complex(x % _SPLIT) for x in q]
    b1 = [complex(x // _SPLIT) for x in q]
    x = convolve_complex(a, b0)
    res = [(round(z.real) + _SPLIT * (round(z.imag) % mod)) % mod for z in x]
    if _SPLIT <= mod:
        y = convolve_complex(a, b1)
        square = _SPLIT * _SPLIT % mod
        res = [
            (r + _SPLIT * (round(z.real) % mod) + square * (round(z.imag) % mod)) % mod
            for r, z in zip(res, y)
        ]
    return res


def convolve_ntt(p, q, mod=NTT_MOD):
    """Product modulo an NTT-friendly prime."""
    p = [int(x) % mod for x in p]
    q = [int(x) % mod for x in q]
    n, m = len(p), len(q)
    if n == 0 or m == 0:
        return []
    if min(n, m) <= NAIVE_THRESHOLD:
        return [x % mod for x in convolve_naive(p, q)]
    r = n + m - 1
    k = _padded_size(r)
    ph = ntt(p + [0] * (k - n), mod=mod)
    qh = ntt(q + [0] * (k - m), mod=mod)
    return ntt([x * y % mod for x, y in zip(ph, qh)], inverse=True, mod=mod)[:r]


def convolve(p, q, mod=None):
    """Product of ``p`` and ``q``, choosing the method from ``mod`` and the element types."""
    if mod is None:
        if any(isinstance(x, (complex, float)) for x in (*p, *q)):
            return convolve_complex(p, q)
        return convolve_naive(p, q)
    if mod == NTT_MOD:
        return convolve_ntt(p, q, mod)
    return convolve_mod(p, q, mod)
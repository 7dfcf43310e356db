import random

import pytest

from algokit.fft import NTT_MOD
from algokit.power_series import (
    FormalPowerSeries as FPS,
    composition,
    derivative,
    exp,
    integral,
    inv,
    log,
    non_zero,
    power,
    product,
    sparse_exp,
    sparse_inv,
    sparse_log,
    sparse_pow,
)

OTHER = 10**9 + 7


def rand_series(seed, n, mod=NTT_MOD, first=None):
    rng = random.Random(seed)
    coeffs = [rng.randrange(mod) for _ in range(n)]
    if first is not None and n:
        coeffs[0] = first
    elif n and coeffs[0] == 0:
        coeffs[0] = 1
    return FPS(coeffs, mod)


def sparse_series(seed, n, first, mod=NTT_MOD):
    rng = random.Random(seed)
    coeffs = [0] * n
    coeffs[0] = first
    for i in rng.sample(range(1, n), 4):
        coeffs[i] = rng.randrange(1, mod)
    return FPS(coeffs, mod)


@pytest.mark.parametrize("mod", [NTT_MOD, OTHER])
@pytest.mark.parametrize("n", [1, 5, 130])
def test_inverse_times_series_is_one(mod, n):
    p = rand_series(n, n, mod)
    q = inv(p)
    assert len(q) == n
    assert (p * q)[:n] == [1] + [0] * (n - 1)


def test_inv_requires_nonzero_constant():
    with pytest.raises(ValueError):
        inv(FPS([0, 1, 2]))
    with pytest.raises(ValueError):
        sparse_inv(FPS([0, 3]))


def test_sparse_inv_matches_inv():
    p = sparse_series(1, 50, 7)
    assert sparse_inv(p) == inv(p)


def test_exp_log_round_trip():
    p = rand_series(2, 40, first=0)
    assert log(exp(p)) == p


def test_log_exp_round_trip_other_modulus():
    p = rand_series(3, 20, OTHER, first=1)
    assert exp(log(p)) == p


def test_log_and_exp_reject_bad_constants():
    with pytest.raises(ValueError):
        log(FPS([2, 1]))
    with pytest.raises(ValueError):
        exp(FPS([1, 1]))


def test_derivative_of_integral():
    p = rand_series(4, 30)
    assert derivative(integral(p)) == p
    assert integral(p)[0] == 0


def test_power_matches_repeated_product():
    p = rand_series(5, 25, first=1)
    assert power(p, 3) == (p * p * p)[:25]
    assert power(p, -1) == inv(p)


def test_sparse_operations_match_dense():
    p1 = sparse_series(6, 60, 1)
    p0 = sparse_series(7, 60, 0)
    assert sparse_log(p1) == log(p1)
    assert sparse_exp(p0) == exp(p0)
    assert sparse_pow(p1, 5) == power(p1, 5)


def test_non_zero_indices():
    assert non_zero(FPS([0, 3, 0, 4])) == [1, 3]


def test_composition_with_square_and_identity():
    g = rand_series(8, 30)
    assert composition(FPS([0, 0, 1]), g) == (g * g)[:30]
    assert composition(FPS([0, 1]), g) == g


def test_composition_matches_power_sums():
    f = rand_series(9, 10)
    g = rand_series(10, 12, first=0)
    expected = FPS([0] * 12)
    gk = FPS([1])
    for c in f:
        expected = expected + c * gk
        gk = (gk * g)[:12]
        gk = FPS(gk)
    assert composition(f, g) == expected[:12]


@pytest.mark.parametrize("n,m", [(30, 10), (300, 100), (5, 9)])
def test_euclidean_division_invariant(n, m):
    p = rand_series(11, n)
    d = rand_series(12, m)
    q, r = p.euclidean_division(d)
    lhs = q * d + r
    lhs.trim_right()
    trimmed = FPS(p)
    trimmed.trim_right()
    assert lhs == trimmed
    assert r.degree() < d.degree()
    if n >= m:
        assert p / d == q
    assert p % d == r


def test_division_by_bad_divisor():
    with pytest.raises(ValueError):
        FPS([1, 2]).euclidean_division(FPS([1, 0]))
    with pytest.raises(ValueError):
        FPS([1, 2]) / FPS([])


def test_evaluation():
    assert FPS([1, 2, 3])(2) == 17


def test_degree_and_valuation():
    p = FPS([0, 0, 5, 0])
    assert p.degree() == 2
    assert p.valuation() == 2
    z = FPS([0, 0, 0])
    assert z.degree() == -1
    assert z.valuation() == 3


def test_trimming():
    p = FPS([0, 0, 5, 6, 0, 0])
    p.trim_right()
    assert p == [0, 0, 5, 6]
    p.trim_left()
    assert p == [5, 6]


def test_product():
    assert product([FPS([1, 1]), FPS([2, 1])]) == [2, 3, 1]
    assert product([]) == [1]
    series = [rand_series(s, 3) for s in range(5)]
    assert product(series) == series[0] * series[1] * series[2] * series[3] * series[4]


def test_scalar_arithmetic_round_trip():
    p = rand_series(13, 10)
    assert (p * 3) / 3 == p
    assert 3 * p == p * 3
    assert -p + p == [0] * 10


def test_mismatched_moduli():
    with pytest.raises(ValueError):
        FPS([1], NTT_MOD) + FPS([1], OTHER)
import math
import random

import pytest
from hypothesis import given, strategies as st

from algokit.fft import NTT_MOD
from algokit.power_series import FormalPowerSeries, exp
from algokit.polynomial_tools import (
    Interpolator,
    apply_power_series_of_derivative,
    borel,
    chirp_z_transform,
    falling_evaluate,
    falling_evaluate_at,
    falling_interpolate,
    falling_taylor_shift,
    laplace,
    partition_function,
    scaled_exp,
    shift_of_sampling_points,
    stirling_first,
    stirling_second,
    taylor_shift,
)

MOD = NTT_MOD


def fps(coeffs):
    return FormalPowerSeries(coeffs, MOD)


@given(st.lists(st.integers(0, MOD - 1), max_size=20))
def test_borel_laplace_round_trip(coeffs):
    p = fps(coeffs)
    assert laplace(borel(p)) == p
    assert borel(laplace(p)) == p


def test_scaled_exp_matches_exp():
    alpha = 5
    n = 10
    assert scaled_exp(alpha, n, MOD) == exp(fps([0, alpha] + [0] * (n - 2)))


def test_taylor_shift_evaluates_shifted():
    p = fps([3, 1, 4, 1, 5])
    s = taylor_shift(p, 7)
    assert len(s) == len(p)
    for x in range(8):
        assert s(x) == p(x + 7)


@given(st.lists(st.integers(0, MOD - 1), min_size=1, max_size=12), st.integers(-50, 50))
def test_taylor_shift_inverse(coeffs, c):
    p = fps(coeffs)
    assert taylor_shift(taylor_shift(p, c), -c) == p


def test_apply_derivative_with_identity_series():
    p = fps([9, 8, 7, 6])
    assert apply_power_series_of_derivative(fps([1]), p) == p


def test_falling_round_trip():
    y = fps([4, 1, 8, 2, 6, 5])
    p = falling_interpolate(y)
    assert falling_evaluate(p) == y
    for i, v in enumerate(y):
        assert falling_evaluate_at(p, i) == v


def test_falling_taylor_shift():
    p = fps([1, 2, 3, 4])
    shifted = falling_taylor_shift(p, 5)
    for x in range(8):
        assert falling_evaluate_at(shifted, x) == falling_evaluate_at(p, x + 5)


def test_shift_of_sampling_points():
    q = fps([5, 0, 2, 9])
    y = fps([q(i) for i in range(4)])
    res = shift_of_sampling_points(y, 10, 6)
    assert list(res) == [q(10 + j) for j in range(6)]


def test_chirp_z_transform():
    p = fps([2, 7, 1, 8])
    y = chirp_z_transform(p, 3, 5, 6)
    assert y == [p(3 * pow(5, i, MOD)) for i in range(6)]


def test_chirp_z_transform_zero_ratio():
    p = fps([2, 7, 1, 8])
    assert chirp_z_transform(p, 3, 0, 4) == [p(3), p[0], p[0], p[0]]


def test_interpolator_evaluate_and_interpolate():
    points = [2, 3, 5, 7, 11]
    interp = Interpolator(points, MOD)
    q = fps([1, 2, 3])
    values = interp.evaluate(q)
    assert values == [q(x) for x in points]
    assert list(interp.interpolate(values)) == list(q) + [0, 0]


def test_interpolator_many_points():
    rng = random.Random(1)
    points = list(range(1, 81))
    values = [rng.randrange(MOD) for _ in points]
    interp = Interpolator(points, MOD)
    p = interp.interpolate(values)
    assert interp.evaluate(p) == values


def test_newton_basis():
    points = [2, 3, 5, 7, 11]
    interp = Interpolator(points, MOD)
    p = fps([6, 0, 4, 1, 3])
    coeffs = interp.to_newton_basis(p)
    for x in points + [100]:
        value, prod = 0, 1
        for k, c in enumerate(coeffs):
            value = (value + c * prod) % MOD
            prod = prod * (x - points[k]) % MOD
        assert value == p(x)


def test_interpolator_rejects_empty():
    with pytest.raises(ValueError):
        Interpolator([], MOD)


def test_stirling_first_is_falling_factorial():
    g = stirling_first(6)
    assert len(g) == 7
    for k in range(6):
        assert g(k) == 0
    assert g(6) == math.factorial(6) % MOD
    assert g(9) == math.perm(9, 6) % MOD


def test_stirling_second_expands_power():
    p = stirling_second(5)
    assert len(p) == 6
    for x in range(10):
        assert falling_evaluate_at(p, x) == pow(x, 5, MOD)


def test_partition_function():
    assert partition_function(10) == [1, 1, 2, 3, 5, 7, 11, 15, 22, 30, 42]
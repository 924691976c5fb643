import mpmath as mp
import logging

from rysquad import moments
from rysquad import precision

logging.root.setLevel(logging.DEBUG)


def mp_moments(x, lower, count, dps=30):
    """reference moments by numeric integration"""
    with mp.workdps(dps):
        x = mp.mpf(x)
        return [mp.quad(lambda t: t ** (2 * k) * mp.exp(-x * t * t), [lower, 1]) for k in range(count)]


def test_boys_function():
    count = 10
    # x < count + 0.5 uses the series and the downward recurrence, the upward recurrence otherwise
    for x in [0, 1e-8, 0.5, 3, 9.9, 10.6, 30, 100]:
        ref = mp_moments(x, 0, count)
        f = moments.gamma_inc_like(x, count)
        assert len(f) == count
        for fk, rk in zip(f, ref):
            assert abs(fk - rk) < 1e-12 * rk


def test_boys_function_at_zero():
    f = moments.gamma_inc_like(0, 6)
    for k, fk in enumerate(f):
        assert abs(fk - 1 / (2 * k + 1)) < 1e-15


def test_boys_function_negative_x():
    x = -1e-3
    ref = mp_moments(x, 0, 4)
    f = moments.gamma_inc_like(x, 4, precision.QUADRUPLE)
    for fk, rk in zip(f, ref):
        assert abs(fk - rk) < 1e-25 * abs(rk)


def test_short_range_moments():
    count = 8
    for lower in [0.3, 0.7]:
        for x in [0.5, 5, 20, 60]:
            ref = mp_moments(x, lower, count)
            f = moments.erfc_like(x, lower, count)
            for fk, rk in zip(f, ref):
                assert abs(fk - rk) < 1e-11 * rk, (lower, x)


def test_short_range_moments_quadruple():
    ref = mp_moments(3.7, 0.45, 12, dps=40)
    f = moments.erfc_like(3.7, 0.45, 12, precision.QUADRUPLE)
    for fk, rk in zip(f, ref):
        assert abs(fk - rk) < 1e-30 * rk


def test_get_moments():
    assert moments.get_moments(2.5, 0, 5) == moments.gamma_inc_like(2.5, 5)
    assert moments.get_moments(2.5, 0.5, 5) == moments.erfc_like(2.5, 0.5, 5)

    z = moments.get_moments(2.5, 1, 5)
    assert len(z) == 5
    assert all(m == 0 for m in z)

    z = moments.get_moments(2.5, 1.2, 3, precision.EXTENDED)
    assert all(m == 0 for m in z)


def test_moments_decrease_with_lower():
    x = 4.0
    last = moments.gamma_inc_like(x, 6)
    for lower in [0.1, 0.3, 0.5, 0.7, 0.9, 0.99]:
        mu = moments.erfc_like(x, lower, 6)
        for a, b in zip(mu, last):
            assert 0 < a < b
        last = mu

import numpy as np
import logging

from rysquad import boundary
from rysquad import closed_form
from rysquad import closed_form_data
from rysquad import moments
from rysquad import rysconfig
from rysquad import wheeler

logging.root.setLevel(logging.DEBUG)


def close(a, b, rel, abs_tol=1e-14):
    return np.all(np.abs(a - b) <= rel * np.abs(b) + abs_tol)


def test_agree_with_quadruple_solver():
    for n in range(1, 6):
        x_max = rysconfig.LARGEX_BASE + rysconfig.LARGEX_STEP * n
        for x in [1e-3, 0.5, 1.7, 2.9, 4.5, 8.0, 12.0, 17.0, 22.0, 30.0, 37.0, 44.0, 51.0, 57.0]:
            if x >= x_max:
                continue
            u, w = closed_form.closed_form_roots(n, x)
            u_ref, w_ref = wheeler.jacobi_roots(n, x)
            idx = np.argsort(u)
            assert close(u[idx], u_ref, 1e-9), (n, x)
            assert close(w[idx], w_ref, 1e-9), (n, x)


def test_continuity_at_breakpoints():
    for n, segments in closed_form_data.SEGMENTS.items():
        for seg in segments:
            b = seg.upper
            u_lo, w_lo = closed_form.closed_form_roots(n, b * (1 - 1e-13))
            u_hi, w_hi = closed_form.closed_form_roots(n, b * (1 + 1e-13))
            assert close(np.sort(u_lo), np.sort(u_hi), 1e-9), (n, b)
            assert close(w_lo[np.argsort(u_lo)], w_hi[np.argsort(u_hi)], 1e-9), (n, b)


def test_order_one_from_moments():
    for x in [1e-3, 0.9, 2.2, 4.1, 7.7, 11.0, 20.0, 32.0]:
        u, w = closed_form.closed_form_roots(1, x)
        mu = moments.gamma_inc_like(x, 2)
        assert abs(w[0] - mu[0]) < 1e-12 * mu[0]
        assert abs(u[0] - mu[1] / (mu[0] - mu[1])) < 1e-11 * u[0]


def test_beyond_last_segment():
    for n in range(1, 6):
        x = closed_form_data.SEGMENTS[n][-1].upper + 0.5
        u, w = closed_form.closed_form_roots(n, x)
        u_ref, w_ref = boundary.large_x_roots(n, x)
        assert np.all(u == u_ref)
        assert np.all(w == w_ref)


def test_weights_from_moments():
    # two point masses at T = 0.25 and T = 0.5 with weights 0.3 and 0.7
    u = np.array([1 / 3, 1.0])
    f = [1.0, 0.3 * 0.25 + 0.7 * 0.5]
    w = closed_form.weights_from_moments(u, f)
    assert abs(w[0] - 0.3) < 1e-14
    assert abs(w[1] - 0.7) < 1e-14


def test_boys_moments():
    x = 7.0
    mu = moments.gamma_inc_like(x, 3)
    e = np.exp(-x)
    bare = np.sqrt(boundary.PIE4 / x)
    src = closed_form_data.Moments("tail", closed_form_data.F0_TAIL_10, 2)
    f = closed_form.boys_moments(src, x, x, e, bare)
    for a, b in zip(f, mu):
        assert abs(a - b) < 1e-11 * b

    x = 2.5
    mu = moments.gamma_inc_like(x, 3)
    src = closed_form_data.Moments("top", closed_form_data._col(closed_form_data.ORDER3_UPTO3, 3), 2)
    f = closed_form.boys_moments(src, x, x - 2, np.exp(-x), 0)
    for a, b in zip(f, mu):
        assert abs(a - b) < 1e-11 * b


def test_unsupported_order():
    try:
        closed_form.closed_form_roots(6, 1.0)
    except ValueError:
        pass
    else:
        assert False

import numpy as np
import math
import logging

from rysquad import boundary
from rysquad import moments
from rysquad import rysconfig

logging.root.setLevel(logging.DEBUG)


def test_small_x_constants():
    u, w = boundary.small_x_roots(1, 0)
    assert abs(u[0] - 0.5) < 1e-15
    assert abs(w[0] - 1) < 1e-15

    x = 1e-7
    u, w = boundary.small_x_roots(1, x)
    assert abs(u[0] - (0.5 - x / 5)) < 1e-15
    assert abs(w[0] - (1 - x / 3)) < 1e-15

    u, w = boundary.small_x_roots(2, x)
    u_ref = [1.30693606237085e-01 - 2.90430236082028e-02 * x, 2.86930639376291e00 - 6.37623643058102e-01 * x]
    w_ref = [6.52145154862545e-01 - 1.22713621927067e-01 * x, 3.47854845137453e-01 - 2.10619711404725e-01 * x]
    for a, b in zip(u, u_ref):
        assert abs(a - b) < 1e-13 * b
    for a, b in zip(w, w_ref):
        assert abs(a - b) < 1e-13 * b


def test_large_x_constants():
    rt, ww = boundary.large_x_constants(2)
    assert abs(rt[0] - 2.75255128608411e-01) < 1e-14
    assert abs(rt[1] - 2.72474487139158e00) < 1e-13
    assert abs(ww[1] - 9.17517095361369e-02) < 1e-15

    rt, ww = boundary.large_x_constants(5)
    rt_ref = [1.17581320211778e-01, 1.07456201243690e00, 3.08593744371754e00, 6.41472973366203e00, 1.18071894899717e01]
    ww_ref = [2.70967405960535e-01, 3.82231610015404e-02, 1.51614186862443e-03, 8.62130526143657e-06]
    for a, b in zip(rt, rt_ref):
        assert abs(a - b) < 1e-13 * b
    for a, b in zip(ww[1:], ww_ref):
        assert abs(a - b) < 1e-13 * b

    for n in range(1, rysconfig.MAX_ORDER + 1):
        rt, ww = boundary.large_x_constants(n)
        assert len(rt) == n
        assert abs(np.sum(ww) - 1) < 1e-14
        assert np.all(np.diff(rt) > 0)


def test_large_x_moments():
    # the asymptotic rule reproduces the zeroth moment up to exp(-x)
    for n in [1, 7, 20, 32]:
        x = rysconfig.LARGEX_BASE + rysconfig.LARGEX_STEP * n
        u, w = boundary.large_x_roots(n, x)
        mu = moments.gamma_inc_like(x, 2)
        assert abs(np.sum(w) - mu[0]) < 1e-14 * mu[0]
        assert abs(np.sum(w) - math.sqrt(boundary.PIE4 / x)) < 1e-15


def test_unsupported_order():
    for n in [0, rysconfig.MAX_ORDER + 1]:
        try:
            boundary.small_x_roots(n, 0.1)
        except ValueError:
            pass
        else:
            assert False

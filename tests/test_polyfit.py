import numpy as np
import logging

from rysquad import polyfit
from rysquad import rysconfig
from rysquad import wheeler

logging.root.setLevel(logging.DEBUG)


def test_grid_index():
    assert polyfit.grid_index(0) == (0, -1)
    it, t = polyfit.grid_index(1.25)
    assert it == 0
    assert abs(t) < 1e-15
    it, t = polyfit.grid_index(39.9)
    assert it == 15
    assert abs(t - 0.92) < 1e-12
    it, t = polyfit.grid_index(41)
    assert it == 16
    assert abs(t + 0.5) < 1e-15
    it, t = polyfit.grid_index(104.5)
    assert it == 32
    assert abs(t + 0.75) < 1e-15


def test_clenshaw():
    # T_0 + 2 T_1 + 3 T_2 at t = 0.3
    c = np.array([[1.0], [2.0], [3.0]])
    t = 0.3
    assert abs(polyfit.clenshaw(c, t)[0] - (1 + 2 * t + 3 * (2 * t * t - 1))) < 1e-15


def test_agree_with_quadruple_solver():
    for n in [6, 9, 14]:
        x_max = rysconfig.LARGEX_BASE + rysconfig.LARGEX_STEP * n
        for x in [0.3, 6.1, 27.7, 44.1, 63.0, 90.0, 104.0]:
            if x >= x_max:
                continue
            if x <= rysconfig.FULL_RANGE_BREAKPOINT:
                u_ref, w_ref = wheeler.jacobi_roots(n, x)
            else:
                u_ref, w_ref = wheeler.laguerre_roots(n, x)
            u, w = polyfit.polyfit_roots(n, x)
            assert np.max(np.abs(u - u_ref) / u_ref) < 1e-9, (n, x)
            assert np.max(np.abs(w - w_ref) / w_ref) < 1e-9, (n, x)


def test_out_of_range():
    for n, x in [(5, 1.0), (15, 1.0), (14, 200.0)]:
        try:
            polyfit.polyfit_roots(n, x)
        except ValueError:
            pass
        else:
            assert False

import numpy as np
import mpmath as mp
import logging

from rysquad import generate_py_tables
from rysquad import rys_tables
from rysquad import rysconfig
from rysquad import wheeler

logging.root.setLevel(logging.DEBUG)


def test_polyfit_intervals():
    intervals = generate_py_tables.polyfit_intervals()
    assert len(intervals) == 33
    assert intervals[0] == (0, 2.5)
    assert intervals[16] == (40, 4)
    lo, width = intervals[-1]
    assert lo + width >= rysconfig.LARGEX_BASE + rysconfig.LARGEX_STEP * rysconfig.POLYFIT_MAX_ORDER

    # intervals are contiguous
    for (lo1, w1), (lo2, w2) in zip(intervals[:-1], intervals[1:]):
        assert lo1 + w1 == lo2


def test_table_shapes():
    assert rys_tables.MAX_ORDER == rysconfig.MAX_ORDER
    for table in [
        rys_tables.SMALLX_R0,
        rys_tables.SMALLX_R1,
        rys_tables.SMALLX_W0,
        rys_tables.SMALLX_W1,
        rys_tables.LARGEX_RT,
        rys_tables.LARGEX_WW,
    ]:
        assert len(table) == rysconfig.MAX_ORDER
        for n, row in enumerate(table, 1):
            assert len(row) == n

    n_orders = rysconfig.POLYFIT_MAX_ORDER - rysconfig.POLYFIT_MIN_ORDER + 1
    for table in [rys_tables.POLYFIT_X, rys_tables.POLYFIT_W]:
        assert len(table) == n_orders
        for io, per_order in enumerate(table):
            assert len(per_order) == len(generate_py_tables.polyfit_intervals())
            for per_interval in per_order:
                assert len(per_interval) == rysconfig.POLYFIT_TERMS
                assert len(per_interval[0]) == io + rysconfig.POLYFIT_MIN_ORDER


def test_chebyshev_coefficients():
    N = 5
    with mp.workdps(30):
        t = [mp.cos(mp.pi * (j + mp.mpf(0.5)) / N) for j in range(N)]
        basis = [[mp.cos(k * mp.pi * (j + mp.mpf(0.5)) / N) for j in range(N)] for k in range(N)]
        # 1 + 2 T_1 - T_3
        values = [1 + 2 * tj - (4 * tj**3 - 3 * tj) for tj in t]
        c = generate_py_tables._chebyshev_coefficients(values, basis)
        for ck, ref in zip(c, [1, 2, 0, -1, 0]):
            assert abs(ck - ref) < 1e-25


def test_smallx_slopes():
    # u(x) = 1/2 - x/5 + O(x^2), w(x) = 1 - x/3 + O(x^2) for order 1
    assert abs(rys_tables.SMALLX_R1[0][0] + 0.2) < 1e-15
    assert abs(rys_tables.SMALLX_W1[0][0] + 1 / 3) < 1e-15

    # second order one-sided difference of the exact rule at x = 0
    h = 1e-6
    for n in [2, 5, 12]:
        u0, w0 = wheeler.jacobi_roots(n, 0.0)
        u1, w1 = wheeler.jacobi_roots(n, h)
        u2, w2 = wheeler.jacobi_roots(n, 2 * h)
        du = (4 * u1 - u2 - 3 * u0) / (2 * h)
        dw = (4 * w1 - w2 - 3 * w0) / (2 * h)
        R1 = np.array(rys_tables.SMALLX_R1[n - 1])
        W1 = np.array(rys_tables.SMALLX_W1[n - 1])
        assert np.all(R1 < 0)
        assert np.max(np.abs(R1 - du) / np.abs(R1)) < 1e-5, n
        assert np.max(np.abs(W1 - dw)) < 1e-5 * np.max(np.abs(W1)), n


def test_table_version(tmp_path):
    assert rys_tables.TABLE_VERSION == rysconfig.table_version
    f_name = tmp_path / "tables.py"
    f_name.write_text("MAX_ORDER = 32\n")
    assert generate_py_tables._table_version(str(f_name)) is None
    f_name.write_text('"""doc"""\n\nTABLE_VERSION = 7\nMAX_ORDER = 32\n')
    assert generate_py_tables._table_version(str(f_name)) == 7

"""
Rys roots and weights of orders 6 to 14 from piecewise Chebyshev fits

The x-axis is divided into intervals of width 2.5 below x = 40 and of width 4 above. On each interval
the roots and weights are given by a Chebyshev series in the local coordinate t in [-1, 1].
"""

# third party imports
import numpy as np

# rysquad module imports
from . import rys_tables
from . import rysconfig

# per order: array of shape (intervals, terms, roots)
_X = [np.array(c) for c in rys_tables.POLYFIT_X]
_W = [np.array(c) for c in rys_tables.POLYFIT_W]

_dense_scale = 2 / rysconfig.POLYFIT_DENSE_WIDTH
_coarse_scale = 2 / rysconfig.POLYFIT_COARSE_WIDTH
_n_dense = int(round(rysconfig.POLYFIT_DENSE_LIMIT / rysconfig.POLYFIT_DENSE_WIDTH))


def clenshaw(c, t):
    """
    sum_k c[k] T_k(t) by Clenshaw's recurrence

    :param c: coefficients, array of shape (terms, ...)
    :param t: point in [-1, 1]
    """
    b1 = np.zeros(c.shape[1:])
    b2 = np.zeros(c.shape[1:])
    t2 = 2 * t
    for ck in c[:0:-1]:
        b1, b2 = t2 * b1 - b2 + ck, b1
    return t * b1 - b2 + c[0]


def grid_index(x):
    """the interval holding x and the local coordinate t in [-1, 1]"""
    if x <= rysconfig.POLYFIT_DENSE_LIMIT:
        it = int(x / rysconfig.POLYFIT_DENSE_WIDTH)
        t = (x - it * rysconfig.POLYFIT_DENSE_WIDTH) * _dense_scale - 1
    else:
        xr = x - rysconfig.POLYFIT_DENSE_LIMIT
        it = int(xr / rysconfig.POLYFIT_COARSE_WIDTH)
        t = (xr - it * rysconfig.POLYFIT_COARSE_WIDTH) * _coarse_scale - 1
        it += _n_dense
    return it, t


def polyfit_roots(n, x):
    """
    roots and weights for orders POLYFIT_MIN_ORDER <= n <= POLYFIT_MAX_ORDER and 0 <= x < 35 + 5n

    :return: (roots, weights) as numpy arrays of length n
    """
    if n < rys_tables.POLYFIT_MIN_ORDER or n > rys_tables.POLYFIT_MAX_ORDER:
        raise ValueError(
            "order {} not in [{}, {}]".format(n, rys_tables.POLYFIT_MIN_ORDER, rys_tables.POLYFIT_MAX_ORDER)
        )
    cx = _X[n - rys_tables.POLYFIT_MIN_ORDER]
    cw = _W[n - rys_tables.POLYFIT_MIN_ORDER]
    it, t = grid_index(x)
    if it < 0 or it >= len(cx):
        raise ValueError("x={} outside the range of the polynomial fits".format(x))
    return clenshaw(cx[it], t), clenshaw(cw[it], t)

"""
limits of the Rys roots and weights for x -> 0 and x -> inf
"""

# python import
import math

# third party imports
import numpy as np

# rysquad module imports
from . import rys_tables

PIE4 = math.pi / 4

_R0 = [np.array(r) for r in rys_tables.SMALLX_R0]
_R1 = [np.array(r) for r in rys_tables.SMALLX_R1]
_W0 = [np.array(w) for w in rys_tables.SMALLX_W0]
_W1 = [np.array(w) for w in rys_tables.SMALLX_W1]
_RT = [np.array(r) for r in rys_tables.LARGEX_RT]
_WW = [np.array(w) for w in rys_tables.LARGEX_WW]


def _check_order(n):
    if n < 1 or n > rys_tables.MAX_ORDER:
        raise ValueError("order {} not in [1, {}]".format(n, rys_tables.MAX_ORDER))


def small_x_roots(n, x):
    """u_i = R0_i + R1_i x, w_i = W0_i + W1_i x (accurate for x below rysconfig.SMALLX_LIMIT)"""
    _check_order(n)
    return _R0[n - 1] + _R1[n - 1] * x, _W0[n - 1] + _W1[n - 1] * x


def large_x_roots(n, x):
    """u_i = RT_i / (x - RT_i), w_i = WW_i sqrt(pi / 4x) (accurate for x >= 35 + 5n)"""
    _check_order(n)
    rt = _RT[n - 1]
    return rt / (x - rt), _WW[n - 1] * math.sqrt(PIE4 / x)


def large_x_constants(n):
    """the asymptotic constants RT_i, WW_i of order n"""
    _check_order(n)
    return _RT[n - 1], _WW[n - 1]

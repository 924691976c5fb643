"""
Rys roots and weights of orders 1 to 5 from fitted closed-form expressions

The coefficients and the x-segments of each order are constant data (`closed_form_data.py`), this
module only interprets a segment:

    moments:  F_0, ..., F_k from a fitted F_k(x - c) and the downward recurrence
                  F_(k-1) = (2x F_k + exp(-x)) / (2k - 1)
              or from F_0 = sqrt(pi / 4x) + exp(-x) p(1/x) and the upward recurrence
    roots:    polynomials in y = x - c, or exponentially small corrections to the large-x asymptote
    weights:  polynomials, corrections to the asymptote, or the solution of
                  sum_i w_i T_i^k = F_k,  k < n,  T_i = u_i / (1 + u_i)
"""

# python import
import bisect
import math

# third party imports
import numpy as np

# rysquad module imports
from . import boundary
from . import closed_form_data as cfd

_UPPER = {n: [s.upper for s in segs] for n, segs in cfd.SEGMENTS.items()}


def _horner(coeffs, y):
    """evaluate the polynomial with coefficients given highest power first"""
    p = 0.0
    for c in coeffs:
        p = p * y + c
    return p


def boys_moments(src, x, y, e, bare):
    """the moments F_0, ..., F_index described by `src` (a `closed_form_data.Moments`)"""
    if src.kind == "top":
        f = [0.0] * (src.index + 1)
        f[src.index] = _horner(src.coeffs, y)
        for k in range(src.index, 0, -1):
            f[k - 1] = (2 * x * f[k] + e) / (2 * k - 1)
        return f

    f = [bare]
    if src.kind == "tail":
        f[0] += e * _horner(src.coeffs, 1 / x)
    for k in range(1, src.index + 1):
        f.append(((2 * k - 1) * f[-1] - e) / (2 * x))
    return f


def weights_from_moments(u, f):
    """
    weights of the nodes T_i = u_i / (1 + u_i) reproducing the moments F_0, ..., F_(n-1)

    :param u: physical roots, numpy array of length n
    :param f: moments, at least n values
    """
    t = u / (1 + u)
    return np.linalg.solve(np.vander(t, increasing=True).T, np.asarray(f[: len(u)], dtype=float))


def _term(term, x, y, e, asymptote):
    if isinstance(term, cfd.Fit):
        return _horner(term.coeffs, y)
    v = _horner(term.pos, x)
    if term.inv:
        v += _horner(term.inv, 1 / x)
    return v * e * x**term.power + asymptote


def closed_form_roots(n, x):
    """
    Gauss-Rys roots and weights of order 1 <= n <= 5

    Beyond the last fitted segment of the order the large-x asymptote is returned.

    :param n: number of roots
    :param x: exponent of the weight function, x >= 0
    :return: (roots, weights) as numpy arrays of length n
    """
    if n not in cfd.SEGMENTS:
        raise ValueError("no closed form for order {}".format(n))
    i = bisect.bisect_left(_UPPER[n], x)
    if i == len(_UPPER[n]):
        return boundary.large_x_roots(n, x)

    seg = cfd.SEGMENTS[n][i]
    rt, ww = boundary.large_x_constants(n)
    y = x - seg.center
    e = math.exp(-x)
    bare = math.sqrt(boundary.PIE4 / x) if x > 0 else 0.0
    f = None
    if seg.moments is not None:
        f = boys_moments(seg.moments, x, y, e, bare)

    if seg.roots is None:
        roots = np.array([f[1] / (f[0] - f[1])])
    else:
        roots = np.array([_term(t, x, y, e, rt[k] / (x - rt[k])) for k, t in enumerate(seg.roots)])

    if seg.weights is None:
        return roots, weights_from_moments(roots, f)

    weights = np.zeros(n)
    for k, t in enumerate(seg.weights):
        if not isinstance(t, cfd.Remainder):
            weights[k] = _term(t, x, y, e, ww[k] * bare)
    if isinstance(seg.weights[0], cfd.Remainder):
        weights[0] = f[0] + seg.weights[0].shift * e - weights[1:].sum()
    return roots, weights

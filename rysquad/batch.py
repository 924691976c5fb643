"""
batch variants of the root solvers

Each lane is solved independently. The results are packed lane-wise: `roots[k, i]` is the k-th root of
lane i. Output buffers may be provided by the caller, they are zero filled before use.
"""

# python import
import math

# third party imports
import numpy as np

# rysquad module imports
from . import rysconfig


def _buffers(order, lanes, roots, weights):
    if roots is None:
        roots = np.zeros((order, lanes))
    if weights is None:
        weights = np.zeros((order, lanes))
    for b in (roots, weights):
        if b.shape[0] < order or b.shape[1] < lanes:
            raise ValueError("output buffer of shape {} too small for ({}, {})".format(b.shape, order, lanes))
        b.fill(0)
    return roots, weights


def roots_batch(rq, order, x, roots=None, weights=None):
    """
    full range roots and weights for each x

    :param rq: the `RysQuad` instance solving a single lane
    :param order: number of roots
    :param x: x values, one per lane
    :param roots: optional output buffer of shape (order, lanes)
    :param weights: optional output buffer of shape (order, lanes)
    :return: roots, weights
    """
    x = np.atleast_1d(np.asarray(x, dtype=float))
    roots, weights = _buffers(order, len(x), roots, weights)
    for i, xi in enumerate(x):
        res = rq.roots(order, float(xi))
        roots[:order, i] = res.roots
        weights[:order, i] = res.weights
    return roots, weights


def sr_roots_batch(rq, order, x, theta, cutoff, roots=None, weights=None):
    """
    short range roots and weights with lower = sqrt(theta) for each lane

    A lane is only solved if x theta < cutoff and x theta < `rysconfig.EXPCUTOFF_SR`, otherwise its
    contribution is negligible and it stays zero.

    :param rq: the `RysQuad` instance solving a single lane
    :param order: number of roots
    :param x: x values, one per lane
    :param theta: one value per lane (or a scalar)
    :param cutoff: one value per lane (or a scalar)
    :return: roots, weights, all_negligible
    """
    x = np.atleast_1d(np.asarray(x, dtype=float))
    theta = np.broadcast_to(np.asarray(theta, dtype=float), x.shape)
    cutoff = np.broadcast_to(np.asarray(cutoff, dtype=float), x.shape)
    roots, weights = _buffers(order, len(x), roots, weights)

    xt = x * theta
    all_negligible = True
    for i in range(len(x)):
        if xt[i] < cutoff[i] and xt[i] < rysconfig.EXPCUTOFF_SR:
            res = rq.sr_roots(order, float(x[i]), math.sqrt(theta[i]))
            roots[:order, i] = res.roots
            weights[:order, i] = res.weights
            all_negligible = False
    return roots, weights, all_negligible

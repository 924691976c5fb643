"""
    Generalized Rys root solver

    The moments mu_k = int r^k dlambda(r) of the Rys measure (in the variable r = t^2) define an inner
    product on polynomials. A Schmidt orthogonalization of the monomials 1, r, r^2, ... with respect to
    that inner product yields the orthonormal polynomials P_0, ..., P_n. The roots r_i of P_n are the
    Gauss nodes, their weights follow from the Christoffel function

        w_i = 1 / sum_{j<n} P_j(r_i)^2

    and the physical roots are u_i = r_i / (1 - r_i).

    The same code runs for every precision tier, see `precision.py`.
"""

# python import
import logging

# third party imports
import numpy as np

# rysquad module imports
from . import moments
from . import precision
from . import rysconfig
from .rys_exceptions import RysIllConditionedError

# a root of the orthogonal polynomial equal to SENTINEL does not contribute to the quadrature
SENTINEL = 1.0


def schmidt_orth(mu, n, tier=precision.STANDARD):
    """
    Schmidt orthogonalization of the monomials r^0, ..., r^n

    Column j of the returned (lower triangular) matrix holds the coefficients c_0, ..., c_j of the
    orthonormal polynomial P_j(r) = sum_k c_k r^k. If the norm of a column vanishes exactly, the basis
    is exhausted and all remaining columns are left zero.

    :param mu: moments mu_0, ..., mu_2n (numbers of the tier)
    :param n: highest degree
    :param tier: precision tier for the arithmetic
    :return: list of n+1 columns
    """
    zero = tier.cast(0)
    cs = [[zero] * (j + 1) for j in range(n + 1)]
    cs[0][0] = 1 / tier.sqrt(mu[0])

    for j in range(1, n + 1):
        v = [zero] * j
        fac = mu[2 * j]
        for k in range(j):
            dot = sum(cs[k][i] * mu[i + j] for i in range(k + 1))
            for i in range(k + 1):
                v[i] -= dot * cs[k][i]
            fac -= dot * dot

        if fac < 0:
            raise RysIllConditionedError(
                "negative norm {} for column {} ({})".format(fac, j, tier)
            )
        if fac == 0:
            logging.debug("basis exhausted at column {} of {}".format(j, n))
            break

        fac = 1 / tier.sqrt(fac)
        cs[j] = [vi * fac for vi in v] + [fac]
    return cs


def _horner(coeffs, r):
    """evaluate sum_k coeffs[k] r^k"""
    p = 0
    for c in reversed(coeffs):
        p = p * r + c
    return p


def _polish(coeffs, r):
    """Newton steps on sum_k coeffs[k] r^k, starting from a double precision root"""
    for _ in range(rysconfig.NEWTON_STEPS):
        p = 0
        dp = 0
        for c in reversed(coeffs):
            dp = dp * r + p
            p = p * r + c
        if dp == 0:
            break
        r -= p / dp
    return r


def polynomial_roots(cs, n):
    """
    roots of the highest non-vanishing column of `cs` in double precision

    Missing roots (degenerate basis) are reported as SENTINEL.

    :return: list of n roots in [0, 1) or SENTINEL, None if no column of degree > 0 survived
    """
    m = n
    while m > 0 and cs[m][m] == 0:
        m -= 1
    if m == 0:
        return None

    c = np.array([float(ci) for ci in cs[m]])
    rt = np.polynomial.polynomial.polyroots(c)
    if np.iscomplexobj(rt):
        if np.max(np.abs(rt.imag)) > 1e-10:
            raise RysIllConditionedError("complex roots of the orthogonal polynomial of degree {}".format(m))
        rt = rt.real
    if not np.all(np.isfinite(rt)) or np.any(rt < 0) or np.any(rt >= 1):
        raise RysIllConditionedError("roots of the orthogonal polynomial of degree {} outside [0, 1)".format(m))
    return list(rt) + [SENTINEL] * (n - m)


def roots_from_moments(mu, n, tier=precision.STANDARD):
    """
    Gauss-Rys roots and weights from the moments of the weight function

    :param mu: moments mu_0, ..., mu_2n (numbers or anything the tier can cast)
    :param n: number of roots
    :param tier: precision tier for the arithmetic
    :return: (roots, weights) as numpy arrays of length n
    """
    roots = np.zeros(n)
    weights = np.zeros(n)
    mu = [tier.cast(m) for m in mu]
    if mu[0] == 0:
        return roots, weights

    if n == 1:
        roots[0] = float(mu[1] / (mu[0] - mu[1]))
        weights[0] = float(mu[0])
        return roots, weights

    cs = schmidt_orth(mu, n, tier)
    rt = polynomial_roots(cs, n)
    if rt is None:
        # only P_0 survived: the measure is a single point mass
        rt = [float(mu[1] / mu[0])] + [SENTINEL] * (n - 1)

    # degree of the polynomial whose roots were found
    m = sum(1 for r in rt if r != SENTINEL)
    inv_mu0 = 1 / mu[0]
    for k, r in enumerate(rt):
        if r == SENTINEL:
            continue
        r = _polish(cs[m], tier.cast(r))
        dum = inv_mu0
        for j in range(1, n):
            dum += _horner(cs[j], r) ** 2
        roots[k] = float(r / (1 - r))
        weights[k] = float(1 / dum)
    return roots, weights


def schmidt_roots(n, x, lower=0, tier=precision.STANDARD):
    """
    Gauss-Rys roots and weights by Schmidt orthogonalization of the moments

    :param n: number of roots
    :param x: exponent of the weight function
    :param lower: lower bound of the t-integral (short range variant), 0 for the full range
    :param tier: precision tier for the arithmetic
    :raises RysIllConditionedError: if the orthogonalization breaks down in the given arithmetic
    """
    mu = moments.get_moments(x, lower, 2 * n + 1, tier)
    return roots_from_moments(mu, n, tier)

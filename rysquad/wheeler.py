"""
    Jacobi-like and Laguerre-like variants of the Rys root solver

    Instead of orthogonalizing monomials, the recurrence coefficients alpha_k, beta_k of the Rys measure

        dlambda(r) = 1/2 r^(-1/2) exp(-x r) dr    on [lower^2, 1]

    are obtained by the modified Chebyshev algorithm (Wheeler) from the modified moments
    nu_k = int pi_k dlambda with respect to a reference family pi_k which is already close to the
    target:

        Jacobi-like:    monic Jacobi polynomials on [lower^2, 1], suited for small and moderate x
        Laguerre-like:  monic Laguerre polynomials in s = x (r - lower^2), suited for large x

    The Gauss nodes are the eigenvalues of the Jacobi matrix (polished by Newton steps in the requested
    arithmetic), the weights follow from the Christoffel function of the orthonormal recurrence.

    see W. Gautschi, Orthogonal Polynomials: Computation and Approximation (2004), sec. 2.1.7
"""

# python import
import logging
import math

# third party imports
import numpy as np

# rysquad module imports
from . import moments
from . import precision
from . import rysconfig
from .rys_exceptions import RysIllConditionedError


def jacobi_recurrence(n, alpha, beta, lo=0, hi=1):
    """
    recurrence coefficients of the monic Jacobi polynomials for the weight (hi - r)^alpha (r - lo)^beta

    The coefficient b_0 (mass) is not needed by the modified Chebyshev algorithm and set to 1.

    :param n: number of coefficients
    :return: lists a, b of length n
    """
    a = []
    b = []
    ab = alpha + beta
    scale = (hi - lo) / 2
    center = (hi + lo) / 2
    for k in range(n):
        if k == 0:
            ak = (beta - alpha) / (ab + 2)
            bk = 1
        else:
            ak = (beta * beta - alpha * alpha) / ((2 * k + ab) * (2 * k + ab + 2))
            if k == 1:
                bk = 4 * (1 + alpha) * (1 + beta) / ((2 + ab) ** 2 * (3 + ab))
            else:
                bk = (
                    4 * k * (k + alpha) * (k + beta) * (k + ab)
                    / ((2 * k + ab) ** 2 * (2 * k + ab + 1) * (2 * k + ab - 1))
                )
            bk = scale * scale * bk
        a.append(scale * ak + center)
        b.append(bk)
    return a, b


def laguerre_recurrence(n, alpha, scale=1, shift=0, mass=1):
    """
    recurrence coefficients of the monic Laguerre polynomials in r, orthogonal with respect to
    (r - shift)^alpha exp(-scale (r - shift)) on [shift, inf)

    :param n: number of coefficients
    :param mass: value of b_0
    :return: lists a, b of length n
    """
    a = [shift + (2 * k + alpha + 1) / scale for k in range(n)]
    b = [mass] + [k * (k + alpha) / (scale * scale) for k in range(1, n)]
    return a, b


def modified_moments(mu, a, b):
    """
    nu_k = sum_j c_kj mu_j where pi_k(r) = sum_j c_kj r^j is the k-th monic reference polynomial

    :param mu: ordinary moments mu_0, ..., mu_(N-1)
    :param a: reference recurrence coefficients, length >= N-1
    :param b: reference recurrence coefficients, length >= N-1
    :return: list of N modified moments
    """
    count = len(mu)
    nu = [mu[0]]
    c_prev = []
    c = [1]
    for k in range(count - 1):
        # pi_{k+1} = (r - a_k) pi_k - b_k pi_{k-1}
        c_next = [0] + c
        for j in range(len(c)):
            c_next[j] -= a[k] * c[j]
        for j in range(len(c_prev)):
            c_next[j] -= b[k] * c_prev[j]
        c_prev, c = c, c_next
        nu.append(sum(cj * mu[j] for j, cj in enumerate(c)))
    return nu


def modified_chebyshev(nu, a, b, n):
    """
    recurrence coefficients alpha_k, beta_k (k < n) of the measure with modified moments nu

    :param nu: modified moments nu_0, ..., nu_(2n-1)
    :param a: reference recurrence coefficients, length >= 2n-1
    :param b: reference recurrence coefficients, length >= 2n-1
    :param n: number of coefficients
    :raises RysIllConditionedError: if the measure turns out not to be positive (beta_k <= 0)
    """
    if nu[0] <= 0:
        raise RysIllConditionedError("non-positive zeroth moment {}".format(nu[0]))
    alpha = [a[0] + nu[1] / nu[0]]
    beta = [nu[0]]

    sig_prev = [0] * (2 * n)
    sig = list(nu)
    for k in range(1, n):
        sig_next = [0] * (2 * n)
        for l in range(k, 2 * n - k):
            sig_next[l] = (
                sig[l + 1]
                - (alpha[k - 1] - a[l]) * sig[l]
                - beta[k - 1] * sig_prev[l]
                + b[l] * sig[l - 1]
            )
        if sig_next[k] <= 0:
            raise RysIllConditionedError(
                "modified Chebyshev algorithm breaks down at k={} (sigma={})".format(k, sig_next[k])
            )
        alpha.append(a[k] + sig_next[k + 1] / sig_next[k] - sig[k] / sig[k - 1])
        beta.append(sig_next[k] / sig[k - 1])
        sig_prev, sig = sig, sig_next
    return alpha, beta


def _orthonormal_recurrence(r, alpha, sqrt_beta):
    """
    run the orthonormal recurrence up to degree n at r

    :return: q, dq, s with q proportional to p_n(r), dq = q'(r) and s = sum_{k<n} p_k(r)^2
    """
    n = len(alpha)
    p_prev = 0
    dp_prev = 0
    p = 1 / sqrt_beta[0]
    dp = 0
    s = p * p
    for k in range(n - 1):
        p_next = ((r - alpha[k]) * p - sqrt_beta[k] * p_prev) / sqrt_beta[k + 1]
        dp_next = (p + (r - alpha[k]) * dp - sqrt_beta[k] * dp_prev) / sqrt_beta[k + 1]
        p_prev, p = p, p_next
        dp_prev, dp = dp, dp_next
        s += p * p
    q = (r - alpha[n - 1]) * p - sqrt_beta[n - 1] * p_prev
    dq = p + (r - alpha[n - 1]) * dp - sqrt_beta[n - 1] * dp_prev
    return q, dq, s


def gauss_rule(alpha, beta, tier=precision.STANDARD):
    """
    Gauss nodes and weights from the recurrence coefficients of a measure (beta[0] is its mass)

    Start values are the eigenvalues of the symmetric tridiagonal Jacobi matrix in double precision,
    followed by `rysconfig.NEWTON_STEPS` Newton steps in the arithmetic of `tier`.

    :return: nodes, weights as lists of numbers of the tier (nodes ascending)
    """
    n = len(alpha)
    alpha = [tier.cast(ak) for ak in alpha]
    beta = [tier.cast(bk) for bk in beta]
    if n == 1:
        return [alpha[0]], [beta[0]]

    diag = np.array([float(ak) for ak in alpha])
    off = np.sqrt(np.array([float(bk) for bk in beta[1:]]))
    jacobi_matrix = np.diag(diag) + np.diag(off, 1) + np.diag(off, -1)
    guess = np.linalg.eigvalsh(jacobi_matrix)

    sqrt_beta = [tier.sqrt(bk) for bk in beta]
    nodes = []
    weights = []
    for r0 in guess:
        r = tier.cast(r0)
        for _ in range(rysconfig.NEWTON_STEPS):
            q, dq, _ = _orthonormal_recurrence(r, alpha, sqrt_beta)
            if dq == 0:
                break
            r -= q / dq
        _, _, s = _orthonormal_recurrence(r, alpha, sqrt_beta)
        nodes.append(r)
        weights.append(1 / s)
    return nodes, weights


def _jacobi_reference(count, x, lower, tier):
    beta = tier.cast(-0.5 if lower == 0 else 0)
    return jacobi_recurrence(count, tier.cast(0), beta, lower * lower, 1)


def _laguerre_reference(count, x, lower, tier):
    if x <= 0:
        raise RysIllConditionedError("Laguerre reference requires x > 0 (x={})".format(x))
    alpha = tier.cast(-0.5 if lower == 0 else 0)
    return laguerre_recurrence(count, alpha, scale=x, shift=lower * lower)


FAMILIES = {"jacobi": _jacobi_reference, "laguerre": _laguerre_reference}


def recurrence_coefficients(n, x, lower, tier, family="jacobi"):
    """
    recurrence coefficients alpha_k, beta_k, k < n of the Rys measure

    The modified moments are formed with `rysconfig.GUARD_BITS_PER_MOMENT` extra bits per moment, plus
    log2(1 / (1 - lower^2)) for short intervals (cancellation grows geometrically with the degree), the
    result is rounded to `tier`.

    :param family: "jacobi" or "laguerre", the reference polynomials
    :return: alpha, beta as lists of numbers of the tier, or None if the measure vanishes
    """
    if lower >= 1:
        return None
    count = 2 * n
    bits_per_moment = rysconfig.GUARD_BITS_PER_MOMENT + max(0, math.ceil(-math.log2(1 - lower * lower)))
    work = tier.widened(bits_per_moment * count + rysconfig.GUARD_BITS)
    mu = moments.get_moments(x, lower, count, work)
    if mu[0] == 0:
        return None
    a, b = FAMILIES[family](count, work.cast(x), work.cast(lower), work)
    nu = modified_moments(mu, a, b)
    alpha, beta = modified_chebyshev(nu, a, b, n)
    return [tier.cast(ak) for ak in alpha], [tier.cast(bk) for bk in beta]


def _variant_roots(n, x, lower, tier, family):
    roots = np.zeros(n)
    weights = np.zeros(n)
    ab = recurrence_coefficients(n, x, lower, tier, family)
    if ab is None:
        return roots, weights

    nodes, w = gauss_rule(ab[0], ab[1], tier)
    for k, (r, wk) in enumerate(zip(nodes, w)):
        if not (0 <= r < 1) or not (wk >= 0):
            raise RysIllConditionedError(
                "{} variant: node {} / weight {} invalid for order {} x={} ({})".format(
                    family, r, wk, n, x, tier
                )
            )
        roots[k] = float(r / (1 - r))
        weights[k] = float(wk)
    logging.debug("{} variant ({}) solved order {} at x={}, lower={}".format(family, tier.name, n, x, lower))
    return roots, weights


def jacobi_roots(n, x, lower=0, tier=precision.QUADRUPLE):
    """Gauss-Rys roots and weights using Jacobi reference polynomials on [lower^2, 1]"""
    return _variant_roots(n, x, lower, tier, "jacobi")


def laguerre_roots(n, x, lower=0, tier=precision.QUADRUPLE):
    """Gauss-Rys roots and weights using Laguerre reference polynomials scaled by x"""
    return _variant_roots(n, x, lower, tier, "laguerre")


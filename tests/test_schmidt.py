import numpy as np
import logging

from rysquad import moments
from rysquad import precision
from rysquad import schmidt
from rysquad import wheeler
from rysquad.rys_exceptions import RysIllConditionedError

logging.root.setLevel(logging.DEBUG)


def reproduced_moments(u, w, count):
    t = u / (1 + u)
    return [np.sum(w * t**k) for k in range(count)]


def test_order_one():
    for x in [0, 0.3, 7, 45]:
        for lower in [0, 0.4]:
            mu = moments.get_moments(x, lower, 3)
            u, w = schmidt.schmidt_roots(1, x, lower)
            assert abs(u[0] - mu[1] / (mu[0] - mu[1])) < 1e-15 * u[0]
            assert abs(w[0] - mu[0]) < 1e-15 * mu[0]


def test_moment_consistency():
    for n in range(2, 6):
        for x in [0.1, 1.0, 6.0]:
            u, w = schmidt.schmidt_roots(n, x)
            mu = moments.gamma_inc_like(x, 2 * n)
            for s, m in zip(reproduced_moments(u, w, 2 * n), mu):
                assert abs(s - m) < 1e-8 * m, (n, x)
            assert np.all(w > 0)
            assert np.all(u > 0)


def test_tiers_agree():
    n = 8
    x = 2.0
    u_q, w_q = schmidt.schmidt_roots(n, x, 0, precision.QUADRUPLE)
    u_j, w_j = wheeler.jacobi_roots(n, x, 0, precision.QUADRUPLE)
    assert np.max(np.abs(u_q - u_j) / u_j) < 1e-12
    assert np.max(np.abs(w_q - w_j) / w_j) < 1e-12

    u_l, w_l = schmidt.schmidt_roots(n, x, 0, precision.EXTENDED)
    assert np.max(np.abs(u_l - u_j) / u_j) < 1e-6


def test_zero_moment():
    for n in [1, 3, 7]:
        u, w = schmidt.roots_from_moments([0] * (2 * n + 1), n)
        assert np.all(u == 0)
        assert np.all(w == 0)


def test_point_mass():
    # the measure is a single point mass at r = 1/4, the basis is exhausted after P_0
    mu = [0.25**k for k in range(5)]
    cs = schmidt.schmidt_orth(mu, 2)
    assert cs[0][0] == 1
    assert all(c == 0 for c in cs[1])
    assert all(c == 0 for c in cs[2])
    assert schmidt.polynomial_roots(cs, 2) is None

    u, w = schmidt.roots_from_moments(mu, 2)
    assert abs(u[0] - 1 / 3) < 1e-15
    assert abs(w[0] - 1) < 1e-15
    assert u[1] == 0
    assert w[1] == 0


def test_degenerate_root_sentinel():
    # P_2 and P_3 vanish, the missing roots are reported as sentinel
    cs = [[1.0], [-2.0, 5.0], [0.0, 0.0, 0.0], [0.0] * 4]
    rt = schmidt.polynomial_roots(cs, 3)
    assert abs(rt[0] - 0.4) < 1e-15
    assert rt[1] == schmidt.SENTINEL
    assert rt[2] == schmidt.SENTINEL


def test_negative_norm():
    # mu_2 < mu_1^2 / mu_0 is not a moment sequence of a positive measure
    try:
        schmidt.roots_from_moments([1.0, 0.5, 0.1, 0.05, 0.02], 2)
    except RysIllConditionedError:
        pass
    else:
        assert False


def test_short_range():
    n = 4
    x = 3.0
    lower = 0.5
    u, w = schmidt.schmidt_roots(n, x, lower)
    mu = moments.erfc_like(x, lower, 2 * n)
    for s, m in zip(reproduced_moments(u, w, 2 * n), mu):
        assert abs(s - m) < 1e-9 * m
    # nodes T = u / (1 + u) lie in [lower^2, 1)
    t = u / (1 + u)
    assert np.all(t >= lower**2)
    assert np.all(t < 1)

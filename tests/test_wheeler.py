import numpy as np
import mpmath as mp
import logging

from rysquad import moments
from rysquad import precision
from rysquad import wheeler
from rysquad.rys_exceptions import RysIllConditionedError

logging.root.setLevel(logging.DEBUG)


def reproduced_moments(u, w, count):
    t = u / (1 + u)
    return [np.sum(w * t**k) for k in range(count)]


def test_jacobi_recurrence_legendre():
    # shifted Legendre polynomials on [0, 1]
    a, b = wheeler.jacobi_recurrence(4, 0.0, 0.0, 0, 1)
    for ak in a:
        assert abs(ak - 0.5) < 1e-15
    for k in range(1, 4):
        assert abs(b[k] - k * k / (4 * (4 * k * k - 1))) < 1e-15


def test_laguerre_recurrence():
    a, b = wheeler.laguerre_recurrence(3, -0.5)
    assert a == [0.5, 2.5, 4.5]
    assert b == [1, 0.5, 3.0]

    a, b = wheeler.laguerre_recurrence(2, 0, scale=2, shift=0.25, mass=3)
    assert a == [0.75, 1.75]
    assert b == [3, 0.25]


def test_modified_moments_monomials():
    # with a_k = b_k = 0 the reference polynomials are monomials
    mu = [1.0, 0.5, 0.25, 0.125]
    assert wheeler.modified_moments(mu, [0] * 4, [0] * 4) == mu


def test_gauss_rule_legendre():
    nodes, weights = wheeler.gauss_rule([0.0, 0.0], [2.0, 1 / 3])
    assert abs(nodes[0] + 1 / 3**0.5) < 1e-15
    assert abs(nodes[1] - 1 / 3**0.5) < 1e-15
    assert abs(weights[0] - 1) < 1e-14
    assert abs(weights[1] - 1) < 1e-14

    with mp.workprec(113):
        nodes, weights = wheeler.gauss_rule([0, 0, 0], [2, mp.mpf(1) / 3, mp.mpf(4) / 15], precision.QUADRUPLE)
        assert abs(nodes[2] - mp.sqrt(mp.mpf(3) / 5)) < 1e-32
        assert abs(weights[1] - mp.mpf(8) / 9) < 1e-32


def test_jacobi_full_range():
    for n in [1, 3, 8, 16]:
        for x in [0.0, 0.7, 12.0, 40.0]:
            u, w = wheeler.jacobi_roots(n, x)
            mu = moments.gamma_inc_like(x, 2 * n)
            for s, m in zip(reproduced_moments(u, w, 2 * n), mu):
                assert abs(s - m) < 1e-12 * m, (n, x)
            assert np.all(np.diff(u) > 0)


def test_jacobi_laguerre_agree():
    for n, x in [(8, 30.0), (15, 50.0), (20, 45.0)]:
        u_j, w_j = wheeler.jacobi_roots(n, x)
        u_l, w_l = wheeler.laguerre_roots(n, x)
        assert np.max(np.abs(u_j - u_l) / u_l) < 1e-12
        assert np.max(np.abs(w_j - w_l) / w_l) < 1e-12


def test_short_range():
    solvers = {"jacobi": wheeler.jacobi_roots, "laguerre": wheeler.laguerre_roots}
    for n, x, lower, family in [
        (2, 0.5, 0.995, "jacobi"),
        (5, 3.0, 0.5, "jacobi"),
        (5, 3.0, 0.5, "laguerre"),
        (7, 70.0, 0.3, "laguerre"),
        (12, 8.0, 0.8, "jacobi"),
    ]:
        u, w = solvers[family](n, x, lower)
        mu = moments.erfc_like(x, lower, 2 * n, precision.QUADRUPLE)
        for s, m in zip(reproduced_moments(u, w, 2 * n), mu):
            assert abs(s - float(m)) < 1e-11 * float(m), (n, x, lower, family)


def test_extended_tier():
    u_q, w_q = wheeler.jacobi_roots(4, 5.0, 0.85, precision.QUADRUPLE)
    u_l, w_l = wheeler.jacobi_roots(4, 5.0, 0.85, precision.EXTENDED)
    assert np.max(np.abs(u_q - u_l) / u_q) < 1e-14
    assert np.max(np.abs(w_q - w_l) / w_q) < 1e-14


def test_vanishing_interval():
    assert wheeler.recurrence_coefficients(3, 1.0, 1.0, precision.QUADRUPLE) is None
    u, w = wheeler.jacobi_roots(3, 1.0, 1.0)
    assert np.all(u == 0)
    assert np.all(w == 0)


def test_laguerre_needs_positive_x():
    try:
        wheeler.laguerre_roots(3, 0.0)
    except RysIllConditionedError:
        pass
    else:
        assert False

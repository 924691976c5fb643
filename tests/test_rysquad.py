import numpy as np
import math
import logging
import threading

from rysquad import *
from rysquad import moments
from rysquad import precision
from rysquad import wheeler

logging.root.setLevel(logging.DEBUG)


def reproduced_moments(u, w, count):
    t = u / (1 + u)
    return [np.sum(w * t**k) for k in range(count)]


def test_full_range_moments():
    rq = RysQuad()
    for n in range(1, 21):
        for x in [0, 1e-8, 0.4, 3.3, 11.0, 27.5, 48.0, 52.0, 80.0, 150.0]:
            u, w = rq.roots(n, x)
            assert len(u) == n
            assert np.all(u > 0)
            assert np.all(w > 0)
            mu = moments.gamma_inc_like(x, 2 * n)
            for k, (s, m) in enumerate(zip(reproduced_moments(u, w, 2 * n), mu)):
                assert abs(s - m) < 1e-7 * m, (n, x, k)


def test_order_one_small_x():
    rq = RysQuad()
    for x in [1e-9, 1e-7, 3e-7]:
        res = rq.roots(1, x)
        assert res.method == "SMALL_X"
        mu = moments.gamma_inc_like(x, 2)
        assert abs(res.roots[0] - mu[1] / (mu[0] - mu[1])) < 1e-13 * res.roots[0]
        assert abs(res.weights[0] - mu[0]) < 1e-13 * mu[0]


def test_methods():
    rq = RysQuad()
    assert rq.roots(3, 0).method == "SMALL_X"
    assert rq.roots(3, 2.0).method == "CLOSED_FORM"
    assert rq.roots(3, 60.0).method == "LARGE_X"
    assert rq.roots(9, 2.0).method == "POLYFIT"
    assert rq.roots(20, 2.0).method == "QJACOBI"
    assert rq.roots(20, 70.0).method == "QLAGUERRE"
    assert rq.roots(20, 2.0).attempts == 1


def test_large_x_agree():
    u, w = compute_roots(20, 140.0)
    u_ref, w_ref = wheeler.laguerre_roots(20, 140.0)
    assert np.max(np.abs(u - u_ref) / u_ref) < 1e-12
    assert np.max(np.abs(w - w_ref) / w_ref) < 1e-12


def test_short_range_moments():
    rq = RysQuad()
    for n, x, lower in [
        (1, 3.0, 0.5),
        (2, 1.0, 0.995),
        (3, 5.0, 0.95),
        (3, 20.0, 0.95),
        (4, 2.0, 0.3),
        (5, 70.0, 0.2),
        (7, 5.0, 0.3),
        (10, 80.0, 0.1),
        (16, 5.0, 0.5),
        (24, 12.0, 0.3),
    ]:
        res = rq.sr_roots(n, x, lower)
        u, w = res
        assert np.all(w >= 0)
        mu = moments.erfc_like(x, lower, 2 * n, precision.QUADRUPLE)
        for k, (s, m) in enumerate(zip(reproduced_moments(u, w, 2 * n), mu)):
            assert abs(s - float(m)) < 1e-6 * float(m), (n, x, lower, k, res.method)


def test_short_range_monotonic():
    total = [np.sum(compute_roots_short_range(4, 3.0, lower)[1]) for lower in [0, 0.1, 0.3, 0.6, 0.9]]
    assert np.all(np.diff(total) < 0)

    # lower = 0 is the full range integral
    u0, w0 = compute_roots(4, 3.0)
    assert abs(total[0] - np.sum(w0)) < 1e-9 * total[0]


def test_vanishing_interval():
    rq = RysQuad()
    for n in range(1, 25):
        u, w = rq.sr_roots(n, 2.0, 1.0)
        assert len(u) == n
        assert np.all(u == 0)
        assert np.all(w == 0)


def test_escalation():
    # the standard precision orthogonalization breaks down for this short range
    res = RysQuad().sr_roots(4, 400.0, 0.6)
    assert res.method in ("LSCHMIDT", "QSCHMIDT")
    assert res.attempts >= 2

    u, w = res
    mu = moments.erfc_like(400.0, 0.6, 2, precision.QUADRUPLE)
    assert abs(np.sum(w) - float(mu[0])) < 1e-8 * float(mu[0])
    assert np.all(w > 0)
    t = u / (1 + u)
    assert np.all(t >= 0.36)
    assert np.all(t < 1)


def test_concurrent_threads():
    rq = RysQuad()
    cases = [(20, 3.0 + 0.37 * i, 0) for i in range(12)] + [(10, 2.0 + 0.5 * i, 0.1) for i in range(12)]

    def solve(order, x, lower):
        if lower == 0:
            return rq.roots(order, x)
        return rq.sr_roots(order, x, lower)

    serial = [solve(*c) for c in cases]
    parallel = [None] * len(cases)

    def work(i):
        parallel[i] = solve(*cases[i])

    threads = [threading.Thread(target=work, args=(i,)) for i in range(len(cases))]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    for c, a, b in zip(cases, serial, parallel):
        assert a.method == b.method, c
        assert np.max(np.abs(a.roots - b.roots) / a.roots) < 1e-14, c
        assert np.max(np.abs(a.weights - b.weights) / a.weights) < 1e-14, c


def test_precision_exhausted(monkeypatch):
    get_moments = moments.get_moments

    def corrupted(x, lower, count, tier=precision.STANDARD):
        mu = list(get_moments(x, lower, count, tier))
        mu[2] = 0 * mu[2]
        return mu

    monkeypatch.setattr(moments, "get_moments", corrupted)
    try:
        RysQuad().sr_roots(3, 2.0, 0.5)
    except RysPrecisionExhaustedError as e:
        assert e.order == 3
        assert e.x == 2.0
        assert e.lower == 0.5
        assert "QSCHMIDT" in str(e)
    else:
        assert False

    try:
        RysQuad(abort_on_failure=True).sr_roots(3, 2.0, 0.5)
    except SystemExit as e:
        assert e.code == 1
    else:
        assert False


def test_unsupported_order():
    rq = RysQuad()
    for f, args in [
        (rq.roots, (0, 1.0)),
        (rq.roots, (33, 1.0)),
        (rq.sr_roots, (25, 1.0, 0.5)),
    ]:
        try:
            f(*args)
        except RysUnsupportedOrderError:
            pass
        else:
            assert False

    try:
        RysQuad(abort_on_failure=True).roots(33, 1.0)
    except SystemExit as e:
        assert e.code == 1
    else:
        assert False


def test_invalid_arguments():
    rq = RysQuad()
    for f, args in [
        (rq.roots, (3, -1.0)),
        (rq.roots, (3, math.nan)),
        (rq.sr_roots, (3, 1.0, -0.1)),
        (rq.sr_roots, (3, 1.0, 1.5)),
        (rq.sr_roots, (3, -1.0, 0.5)),
    ]:
        try:
            f(*args)
        except ValueError:
            pass
        else:
            assert False


def test_debug_trace(capsys):
    RysQuad(debug=True).roots(20, 10.0)
    out = capsys.readouterr().out
    assert "solved by QJACOBI" in out

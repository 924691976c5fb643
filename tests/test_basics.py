import numpy as np
import math
import mpmath as mp
import threading

from rysquad import rysquad_py
from rysquad import precision


def test_RysRes_slots():
    r = rysquad_py.RysRes(roots=np.zeros(2), weights=np.zeros(2), method="SCHMIDT", attempts=1)
    r.attempts += 1
    assert r.attempts == 2

    try:
        r.error = 0
    except AttributeError:
        pass
    else:
        assert False


def test_unpack_RysRes():
    r = rysquad_py.RysRes(roots=np.array([0.5]), weights=np.array([1.0]), method="SMALL_X")
    u, w = r
    assert u[0] == 0.5
    assert w[0] == 1.0
    assert r.attempts == 1
    assert "SMALL_X" in str(r)
    assert repr(r) == str(r)


def test_tiers():
    assert precision.STANDARD.bits == 53
    assert precision.EXTENDED.bits == 64
    assert precision.QUADRUPLE.bits == 113

    for tier in precision.TIERS:
        one = tier.cast(1)
        assert one + tier.eps != one
        assert one + tier.eps / 4 == one
        assert abs(tier.sqrt(tier.cast(2)) ** 2 - 2) < 4 * tier.eps
        assert abs(tier.erf(tier.cast(0.5)) + tier.erfc(tier.cast(0.5)) - 1) < 4 * tier.eps
        assert abs(tier.cos(tier.pi) + 1) < 4 * tier.eps
        assert abs(tier.pi - math.pi) < 1e-15

    wide = precision.STANDARD.widened(10)
    assert wide.bits == 63
    assert isinstance(wide, precision.MPTier)
    assert wide.name == "standard"


def test_tiers_leave_global_precision_alone():
    prec = mp.mp.prec
    third = precision.QUADRUPLE.cast(1) / 3
    assert mp.mp.prec == prec

    # the result carries 113 bits regardless of the global setting
    with mp.workprec(20):
        x = precision.QUADRUPLE.cast(1) / 3
        assert x == third
    assert abs(third * 3 - 1) < 1e-33


def test_tiers_per_thread():
    res = {}

    def work(i):
        tier = precision.MPTier("thread", 60 + 20 * i)
        s = tier.cast(0)
        for k in range(1, 2000):
            s += 1 / tier.cast(k) ** 2
        res[i] = (tier.ctx, s)

    threads = [threading.Thread(target=work, args=(i,)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    for i in range(4):
        ctx, s = res[i]
        assert ctx.prec == 60 + 20 * i
        assert ctx is not precision.MPTier("main", ctx.prec).ctx
        with mp.workprec(200):
            ref = mp.fsum(1 / mp.mpf(k) ** 2 for k in range(1, 2000))
        assert abs(s - ref) < 1e4 * 2.0 ** -(60 + 20 * i)

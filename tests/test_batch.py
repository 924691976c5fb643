import numpy as np
import logging

from rysquad import RysQuad

logging.root.setLevel(logging.DEBUG)


def test_roots_batch():
    rq = RysQuad()
    x = [0.5, 3.0, 60.0]
    roots, weights = rq.roots_batch(4, x)
    assert roots.shape == (4, 3)
    assert weights.shape == (4, 3)
    for i, xi in enumerate(x):
        u, w = rq.roots(4, xi)
        assert np.all(roots[:, i] == u)
        assert np.all(weights[:, i] == w)


def test_sr_roots_batch():
    rq = RysQuad()
    x = np.array([1.0, 100.0, 10.0])
    roots, weights, all_negligible = rq.sr_roots_batch(3, x, theta=0.25, cutoff=20)
    assert not all_negligible

    # x theta = 25 exceeds the cutoff
    assert np.all(roots[:, 1] == 0)
    assert np.all(weights[:, 1] == 0)

    for i in [0, 2]:
        u, w = rq.sr_roots(3, x[i], 0.5)
        assert np.all(roots[:, i] == u)
        assert np.all(weights[:, i] == w)


def test_sr_roots_batch_per_lane_theta():
    rq = RysQuad()
    x = [2.0, 2.0]
    theta = [0.0625, 0.25]
    roots, weights, all_negligible = rq.sr_roots_batch(2, x, theta, cutoff=[100, 100])
    assert not all_negligible
    u, w = rq.sr_roots(2, 2.0, 0.5)
    assert np.all(roots[:, 1] == u)
    assert np.all(weights[:, 1] == w)
    assert np.sum(weights[:, 0]) > np.sum(weights[:, 1])


def test_all_negligible():
    rq = RysQuad()
    # x theta beyond the hard limit of 40, regardless of the cutoff
    roots, weights, all_negligible = rq.sr_roots_batch(3, [200.0, 300.0], theta=0.5, cutoff=1e3)
    assert all_negligible
    assert np.all(roots == 0)
    assert np.all(weights == 0)


def test_output_buffers():
    rq = RysQuad()
    roots = np.full((5, 4), 7.0)
    weights = np.full((5, 4), 7.0)
    r, w = rq.roots_batch(3, [1.0, 2.0], roots, weights)
    assert r is roots
    assert w is weights
    assert np.all(roots[3:, :] == 0)
    assert np.all(roots[:, 2:] == 0)
    assert np.all(roots[:3, :2] > 0)

    r, w, all_negligible = rq.sr_roots_batch(3, [500.0], 0.5, 1.0, roots, weights)
    assert all_negligible
    assert np.all(roots == 0)
    assert np.all(weights == 0)


def test_buffer_too_small():
    rq = RysQuad()
    try:
        rq.roots_batch(3, [1.0, 2.0, 3.0], roots=np.zeros((2, 3)))
    except ValueError:
        pass
    else:
        assert False

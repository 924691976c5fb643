import logging

from rysquad import dispatch
from rysquad import rysconfig
from rysquad.rys_exceptions import RysUnsupportedOrderError

logging.root.setLevel(logging.DEBUG)


def names(strategies):
    return [s.name for s in strategies]


def test_full_range_route():
    assert dispatch.full_range_route(3, 0) == "small_x"
    assert dispatch.full_range_route(3, rysconfig.SMALLX_LIMIT) == "small_x"
    assert dispatch.full_range_route(3, 1e-6) == "closed_form"
    assert dispatch.full_range_route(3, 49.9) == "closed_form"
    assert dispatch.full_range_route(3, 50) == "large_x"
    assert dispatch.full_range_route(6, 10) == "polyfit"
    assert dispatch.full_range_route(14, 104.9) == "polyfit"
    assert dispatch.full_range_route(14, 105) == "large_x"
    assert dispatch.full_range_route(15, 10) == "segment"
    assert dispatch.full_range_route(32, 194.9) == "segment"
    assert dispatch.full_range_route(32, 195) == "large_x"


def test_full_range_strategies():
    assert names(dispatch.full_range_strategies(2, 1.0)) == ["CLOSED_FORM"]
    assert names(dispatch.full_range_strategies(20, 30)) == ["QJACOBI", "SCHMIDT", "LSCHMIDT", "QSCHMIDT"]
    assert names(dispatch.full_range_strategies(20, 50)) == ["QJACOBI", "SCHMIDT", "LSCHMIDT", "QSCHMIDT"]
    assert names(dispatch.full_range_strategies(20, 50.5)) == ["QLAGUERRE", "SCHMIDT", "LSCHMIDT", "QSCHMIDT"]


def test_with_fallback():
    assert names(dispatch.with_fallback(dispatch.SCHMIDT)) == ["SCHMIDT", "LSCHMIDT", "QSCHMIDT"]
    assert names(dispatch.with_fallback(dispatch.LSCHMIDT)) == ["LSCHMIDT", "SCHMIDT", "QSCHMIDT"]
    assert names(dispatch.with_fallback(dispatch.LJACOBI)) == ["LJACOBI", "SCHMIDT", "LSCHMIDT", "QSCHMIDT"]


def test_short_range_rows():
    assert dispatch.short_range_strategies(1, 5.0, 0.99)[0] is dispatch.SCHMIDT

    assert dispatch.short_range_strategies(2, 5.0, 0.5)[0] is dispatch.SCHMIDT
    assert dispatch.short_range_strategies(2, 5.0, 0.99)[0] is dispatch.QJACOBI

    assert dispatch.short_range_strategies(3, 5.0, 0.5)[0] is dispatch.SCHMIDT
    assert dispatch.short_range_strategies(3, 5.0, 0.95)[0] is dispatch.LJACOBI
    assert dispatch.short_range_strategies(3, 10.0, 0.95)[0] is dispatch.LJACOBI
    assert dispatch.short_range_strategies(3, 20.0, 0.95)[0] is dispatch.LLAGUERRE
    assert dispatch.short_range_strategies(3, 20.0, 0.98)[0] is dispatch.QJACOBI

    assert dispatch.short_range_strategies(5, 30.0, 0.2)[0] is dispatch.SCHMIDT
    assert dispatch.short_range_strategies(5, 70.0, 0.2)[0] is dispatch.LLAGUERRE

    assert dispatch.short_range_strategies(10, 30.0, 0.1)[0] is dispatch.QJACOBI
    assert dispatch.short_range_strategies(10, 80.0, 0.1)[0] is dispatch.QLAGUERRE
    assert dispatch.short_range_strategies(10, 80.0, 0.5)[0] is dispatch.QJACOBI

    # beyond the last lower limit only the Schmidt solver remains
    assert dispatch.short_range_row(7, 1.0) is None
    assert dispatch.short_range_row(20, 0.5) is None
    assert names(dispatch.short_range_strategies(20, 5.0, 0.5)) == ["SCHMIDT", "LSCHMIDT", "QSCHMIDT"]


def test_table_covers_orders():
    assert sorted(dispatch.SR_TABLE) == list(range(1, rysconfig.SR_MAX_ORDER + 1))
    for rows in dispatch.SR_TABLE.values():
        limits = [r.lower_limit for r in rows]
        assert limits == sorted(limits)


def test_unsupported_order():
    for order in [0, rysconfig.MAX_ORDER + 1]:
        try:
            dispatch.full_range_strategies(order, 1.0)
        except RysUnsupportedOrderError:
            pass
        else:
            assert False

    for order in [0, rysconfig.SR_MAX_ORDER + 1]:
        try:
            dispatch.short_range_strategies(order, 1.0, 0.5)
        except RysUnsupportedOrderError:
            pass
        else:
            assert False

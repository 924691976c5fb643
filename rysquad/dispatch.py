"""
decision tables of the domain dispatcher

A strategy names a method and the precision tier it runs in. The functions in this module only decide
which strategies to try (in that order), they do not compute anything.

full range (lower = 0):

    x <= SMALLX_LIMIT               small-x expansion
    x >= LARGEX_BASE + LARGEX_STEP n   large-x asymptote
    n <= 5                          closed-form fits
    n <= 14                         Chebyshev fits
    otherwise                       Jacobi-like (x <= 50) or Laguerre-like variant in quadruple precision

short range (lower > 0): per order, a list of rows (lower limit, x breakpoint, below, above). The first row
with lower < lower limit applies, `below` is used for x <= breakpoint, `above` otherwise. Rows without a
breakpoint have a single strategy.

Every strategy which may fail is followed by the Schmidt solver in standard, extended and quadruple
precision (skipping the strategy itself).
"""

# python import
import collections
import math

# rysquad module imports
from . import precision
from . import rysconfig
from .rys_exceptions import RysUnsupportedOrderError

Strategy = collections.namedtuple("Strategy", ["name", "method", "tier"])

SMALL_X = Strategy("SMALL_X", "small_x", None)
LARGE_X = Strategy("LARGE_X", "large_x", None)
CLOSED_FORM = Strategy("CLOSED_FORM", "closed_form", None)
POLYFIT = Strategy("POLYFIT", "polyfit", None)

SCHMIDT = Strategy("SCHMIDT", "schmidt", precision.STANDARD)
LSCHMIDT = Strategy("LSCHMIDT", "schmidt", precision.EXTENDED)
QSCHMIDT = Strategy("QSCHMIDT", "schmidt", precision.QUADRUPLE)
LJACOBI = Strategy("LJACOBI", "jacobi", precision.EXTENDED)
QJACOBI = Strategy("QJACOBI", "jacobi", precision.QUADRUPLE)
LLAGUERRE = Strategy("LLAGUERRE", "laguerre", precision.EXTENDED)
QLAGUERRE = Strategy("QLAGUERRE", "laguerre", precision.QUADRUPLE)

FALLBACK = (SCHMIDT, LSCHMIDT, QSCHMIDT)

SrRow = collections.namedtuple("SrRow", ["lower_limit", "breakpoint", "below", "above"])


def _row(lower_limit, strategy):
    return SrRow(lower_limit, None, strategy, None)


def _high_order_rows(lower_split, lower_limit):
    return [SrRow(lower_split, 60, QJACOBI, QLAGUERRE), _row(lower_limit, QJACOBI)]


SR_TABLE = {
    1: [_row(math.inf, SCHMIDT)],
    2: [_row(0.99, SCHMIDT), _row(math.inf, QJACOBI)],
    3: [_row(0.93, SCHMIDT), SrRow(0.97, 10, LJACOBI, LLAGUERRE), _row(math.inf, QJACOBI)],
    4: [_row(0.8, SCHMIDT), SrRow(0.9, 10, LJACOBI, LLAGUERRE), _row(math.inf, QJACOBI)],
    5: [
        SrRow(0.4, 50, SCHMIDT, LLAGUERRE),
        SrRow(0.8, 10, LJACOBI, LLAGUERRE),
        _row(math.inf, QJACOBI),
    ],
    6: [
        SrRow(0.25, 60, SCHMIDT, LLAGUERRE),
        SrRow(0.8, 10, LJACOBI, LLAGUERRE),
        _row(math.inf, QJACOBI),
    ],
    7: [SrRow(0.5, 60, LJACOBI, LLAGUERRE), _row(1, QJACOBI)],
}
for _n in range(8, 13):
    SR_TABLE[_n] = _high_order_rows(0.15, 1)
for _n, _lower_split, _lower_limit in [
    (13, 0.25, 1),
    (14, 0.25, 1),
    (15, 0.25, 0.75),
    (16, 0.25, 0.75),
    (17, 0.25, 0.65),
    (18, 0.15, 0.65),
    (19, 0.15, 0.55),
    (20, 0.25, 0.45),
    (21, 0.25, 0.45),
    (22, 0.25, 0.35),
    (23, 0.25, 0.35),
    (24, 0.25, 0.35),
]:
    SR_TABLE[_n] = _high_order_rows(_lower_split, _lower_limit)


def with_fallback(primary):
    """the primary strategy followed by the Schmidt solver in increasing precision"""
    return [primary] + [s for s in FALLBACK if s is not primary]


def full_range_route(order, x):
    """
    name of the evaluator for the full range integral

    :return: one of "small_x", "large_x", "closed_form", "polyfit", "segment"
    :raises RysUnsupportedOrderError: if order is not in [1, MAX_ORDER]
    """
    if order < 1 or order > rysconfig.MAX_ORDER:
        raise RysUnsupportedOrderError("order {} not in [1, {}]".format(order, rysconfig.MAX_ORDER))
    if x <= rysconfig.SMALLX_LIMIT:
        return "small_x"
    if x >= rysconfig.LARGEX_BASE + rysconfig.LARGEX_STEP * order:
        return "large_x"
    if order <= 5:
        return "closed_form"
    if order <= rysconfig.POLYFIT_MAX_ORDER:
        return "polyfit"
    return "segment"


def full_range_strategies(order, x):
    route = full_range_route(order, x)
    if route == "small_x":
        return [SMALL_X]
    if route == "large_x":
        return [LARGE_X]
    if route == "closed_form":
        return [CLOSED_FORM]
    if route == "polyfit":
        return [POLYFIT]
    if x <= rysconfig.FULL_RANGE_BREAKPOINT:
        return with_fallback(QJACOBI)
    return with_fallback(QLAGUERRE)


def short_range_row(order, lower):
    """the row of the short range table for `lower`, None beyond the last lower limit"""
    try:
        rows = SR_TABLE[order]
    except KeyError:
        raise RysUnsupportedOrderError(
            "short range roots support orders 1 to {}, got {}".format(rysconfig.SR_MAX_ORDER, order)
        )
    for row in rows:
        if lower < row.lower_limit:
            return row
    return None


def short_range_strategies(order, x, lower):
    row = short_range_row(order, lower)
    if row is None:
        return list(FALLBACK)
    if row.breakpoint is None or x <= row.breakpoint:
        return with_fallback(row.below)
    return with_fallback(row.above)

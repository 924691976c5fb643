"""
    Gauss-Rys Quadrature Roots and Weights

    This is the main module which dispatches a request (order, x[, lower]) to the evaluators and
    escalates the precision of the moment based solvers on numerical failure.
"""

# python import
import logging
import math
import sys
import typing

# rysquad module imports
from . import rysconfig
from . import generate_py_tables

generate_py_tables.run()
from . import batch
from . import boundary
from . import closed_form
from . import dispatch
from . import polyfit
from . import schmidt
from . import wheeler
from .rys_exceptions import RysIllConditionedError
from .rys_exceptions import RysPrecisionExhaustedError
from .rys_exceptions import RysUnsupportedOrderError

########################################################################################################################
##    typedefs
########################################################################################################################
numeric = typing.Union[int, float]


########################################################################################################################
##    evaluators, called as f(order, x, lower, tier)
########################################################################################################################


def _small_x(order, x, lower, tier):
    return boundary.small_x_roots(order, x)


def _large_x(order, x, lower, tier):
    return boundary.large_x_roots(order, x)


def _closed_form(order, x, lower, tier):
    return closed_form.closed_form_roots(order, x)


def _polyfit(order, x, lower, tier):
    return polyfit.polyfit_roots(order, x)


_METHODS = {
    "small_x": _small_x,
    "large_x": _large_x,
    "closed_form": _closed_form,
    "polyfit": _polyfit,
    "schmidt": schmidt.schmidt_roots,
    "jacobi": wheeler.jacobi_roots,
    "laguerre": wheeler.laguerre_roots,
}


def _check_x(x):
    if math.isnan(x) or x < 0:
        raise ValueError("x must be a non-negative number, got {}".format(x))


def _check_lower(lower):
    if math.isnan(lower) or lower < 0 or lower > 1:
        raise ValueError("lower must be in [0, 1], got {}".format(lower))


########################################################################################################################
##    result object and dispatcher
########################################################################################################################


class RysRes(object):
    """roots and weights together with the strategy that produced them, unpacks as (roots, weights)"""

    __slots__ = ("roots", "weights", "method", "attempts")

    def __init__(self, roots, weights, method=None, attempts=1):
        self.roots = roots
        self.weights = weights
        self.method = method
        self.attempts = attempts

    def __iter__(self):
        return iter((self.roots, self.weights))

    def __str__(self):
        return "RysRes(roots={}, weights={}, method={}, attempts={})".format(
            self.roots, self.weights, self.method, self.attempts
        )

    def __repr__(self):
        return self.__str__()


class RysQuad(object):
    """
    Compute the roots u_i and weights w_i of the Gauss-Rys quadrature of order n such that

        sum_i w_i (u_i / (1 + u_i))^k = int_lower^1 t^(2k) exp(-x t^2) dt,     k = 0, ..., 2n - 1

    The full range variant (lower = 0) supports orders up to `rysconfig.MAX_ORDER`, the short range
    variant orders up to `rysconfig.SR_MAX_ORDER`.

    A strategy which fails numerically (`RysIllConditionedError`) is followed by the next one of the list
    provided by `dispatch.py`, ending with the Schmidt solver in quadruple precision. If all strategies
    fail, a `RysPrecisionExhaustedError` is raised. Unsupported orders raise `RysUnsupportedOrderError`.

    :param abort_on_failure: if True, log fatal failures and exit the process with status 1 instead of
                             raising, None takes the value from `rysconfig.abort_on_failure`
    :param debug: if True, print the dispatch trace
    """

    def __init__(self, abort_on_failure: typing.Union[None, bool] = None, debug: bool = False):
        if abort_on_failure is None:
            abort_on_failure = rysconfig.abort_on_failure
        self.abort_on_failure = abort_on_failure
        self.debug = debug

    def _fatal(self, e):
        if self.abort_on_failure:
            logging.error("{}: {}".format(e.__class__.__name__, e))
            sys.exit(1)

    def _solve(self, strategies, order, x, lower) -> RysRes:
        failed = []
        for s in strategies:
            try:
                roots, weights = _METHODS[s.method](order, x, lower, s.tier)
            except RysIllConditionedError as e:
                logging.debug(
                    "{} failed for order={} x={} lower={}: {}".format(s.name, order, x, lower, e)
                )
                if self.debug:
                    print("{} failed, try next strategy".format(s.name))
                failed.append(s.name)
                continue

            if failed:
                logging.debug("escalated from {} to {}".format(", ".join(failed), s.name))
            if self.debug:
                print("order={} x={} lower={} solved by {}".format(order, x, lower, s.name))
            return RysRes(roots, weights, method=s.name, attempts=len(failed) + 1)

        raise RysPrecisionExhaustedError(
            "no strategy succeeded for order={} x={} lower={} (tried {})".format(
                order, x, lower, ", ".join(failed)
            ),
            order=order,
            x=x,
            lower=lower,
        )

    def roots(self, order: int, x: numeric) -> RysRes:
        """roots and weights of the full range integral over [0, 1]"""
        _check_x(x)
        try:
            strategies = dispatch.full_range_strategies(order, x)
            return self._solve(strategies, order, x, 0)
        except (RysUnsupportedOrderError, RysPrecisionExhaustedError) as e:
            self._fatal(e)
            raise

    def sr_roots(self, order: int, x: numeric, lower: numeric) -> RysRes:
        """roots and weights of the short range integral over [lower, 1]"""
        _check_x(x)
        _check_lower(lower)
        try:
            strategies = dispatch.short_range_strategies(order, x, lower)
            return self._solve(strategies, order, x, lower)
        except (RysUnsupportedOrderError, RysPrecisionExhaustedError) as e:
            self._fatal(e)
            raise

    def roots_batch(self, order, x, roots=None, weights=None):
        """see `batch.roots_batch`"""
        return batch.roots_batch(self, order, x, roots, weights)

    def sr_roots_batch(self, order, x, theta, cutoff, roots=None, weights=None):
        """see `batch.sr_roots_batch`"""
        return batch.sr_roots_batch(self, order, x, theta, cutoff, roots, weights)


########################################################################################################################
##    convenience functions
########################################################################################################################


def compute_roots(order, x):
    """
    roots and weights of order `order` for int_0^1 t^(2k) exp(-x t^2) dt

    :return: (roots, weights) as numpy arrays of length order
    """
    res = RysQuad().roots(order, x)
    return res.roots, res.weights


def compute_roots_short_range(order, x, lower):
    """
    roots and weights of order `order` for int_lower^1 t^(2k) exp(-x t^2) dt

    :return: (roots, weights) as numpy arrays of length order
    """
    res = RysQuad().sr_roots(order, x, lower)
    return res.roots, res.weights

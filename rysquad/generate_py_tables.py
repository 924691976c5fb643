"""
generate the tables used by the boundary asymptotics and the polynomial fits of the Rys roots/weights

Use high precision mpmath arithmetic to pre-calculate

    SMALLX_R0, SMALLX_R1, SMALLX_W0, SMALLX_W1:
        u_i(x) = R0_i + R1_i x,  w_i(x) = W0_i + W1_i x  for x -> 0  (orders 1 .. MAX_ORDER)

    LARGEX_RT, LARGEX_WW:
        u_i(x) = RT_i / (x - RT_i),  w_i(x) = WW_i sqrt(pi / 4x)  for x -> inf  (orders 1 .. MAX_ORDER)
        RT_i and WW_i are the nodes and (normalized) weights of the Gauss-Laguerre rule with alpha = -1/2

    POLYFIT_X, POLYFIT_W:
        Chebyshev coefficients of u_i(x) and w_i(x) on the intervals of the polynomial fit
        (orders POLYFIT_MIN_ORDER .. POLYFIT_MAX_ORDER)

and save them to a file.

See `rysconfig.py` for parameters to control the pre-calculation
"""

# python imports
import logging
import math
import os

# third party imports
import mpmath as mp

# rysquad module imports
from . import precision
from . import rysconfig
from . import wheeler

_kwargs = {"min_fixed": 0, "show_zero_exponent": True, "strip_zeros": False}


def _u(r):
    """the physical root from the root r = t^2 of the orthogonal polynomial, in the precision of r"""
    return r / (1 - r)


def polyfit_intervals():
    """lower bound and width of the intervals covered by the polynomial fits"""
    intervals = []
    n_dense = int(round(rysconfig.POLYFIT_DENSE_LIMIT / rysconfig.POLYFIT_DENSE_WIDTH))
    for i in range(n_dense):
        intervals.append((i * rysconfig.POLYFIT_DENSE_WIDTH, rysconfig.POLYFIT_DENSE_WIDTH))

    x_max = rysconfig.LARGEX_BASE + rysconfig.LARGEX_STEP * rysconfig.POLYFIT_MAX_ORDER
    n_coarse = int(math.ceil((x_max - rysconfig.POLYFIT_DENSE_LIMIT) / rysconfig.POLYFIT_COARSE_WIDTH))
    for i in range(n_coarse):
        intervals.append(
            (rysconfig.POLYFIT_DENSE_LIMIT + i * rysconfig.POLYFIT_COARSE_WIDTH, rysconfig.POLYFIT_COARSE_WIDTH)
        )
    return intervals


def _rules(alpha, beta, orders, tier):
    """(u, w) for each order in `orders` from the leading recurrence coefficients"""
    res = []
    for n in orders:
        nodes, weights = wheeler.gauss_rule(alpha[:n], beta[:n], tier)
        res.append(([_u(r) for r in nodes], weights))
    return res


def smallx_tables(max_order, tier):
    """the rule at x = 0 and its derivative with respect to x (central difference)"""
    h = tier.cast(rysconfig.SMALLX_FD_STEP)
    orders = range(1, max_order + 1)
    rules = []
    for x in [0, h, -h]:
        alpha, beta = wheeler.recurrence_coefficients(max_order, x, 0, tier)
        rules.append(_rules(alpha, beta, orders, tier))

    R0, R1, W0, W1 = [], [], [], []
    for (u0, w0), (up, wp), (um, wm) in zip(*rules):
        R0.append(u0)
        W0.append(w0)
        R1.append([(a - b) / (2 * h) for a, b in zip(up, um)])
        W1.append([(a - b) / (2 * h) for a, b in zip(wp, wm)])
    return R0, R1, W0, W1


def largex_tables(max_order, tier):
    """Gauss-Laguerre rules for alpha = -1/2 with weights normalized to 1"""
    RT, WW = [], []
    for n in range(1, max_order + 1):
        alpha, beta = wheeler.laguerre_recurrence(n, tier.cast(-0.5))
        nodes, weights = wheeler.gauss_rule(alpha, beta, tier)
        RT.append(nodes)
        WW.append(weights)
    return RT, WW


def _chebyshev_coefficients(values, basis):
    """c_k such that sum_k c_k T_k(t_j) = values[j] at the Chebyshev nodes t_j, basis[k][j] = T_k(t_j)"""
    N = len(values)
    c = []
    for k in range(N):
        s = sum(v * basis[k][j] for j, v in enumerate(values))
        c.append(2 * s / N)
    c[0] /= 2
    return c


def polyfit_tables(tier):
    """Chebyshev coefficients per order, interval, term and root"""
    orders = range(rysconfig.POLYFIT_MIN_ORDER, rysconfig.POLYFIT_MAX_ORDER + 1)
    N = rysconfig.POLYFIT_TERMS
    PX = [[] for _ in orders]
    PW = [[] for _ in orders]
    half = tier.cast(0.5)
    t_nodes = [tier.cos(tier.pi * (j + half) / N) for j in range(N)]
    basis = [[tier.cos(k * tier.pi * (j + half) / N) for j in range(N)] for k in range(N)]
    for lo, width in polyfit_intervals():
        logging.debug("polynomial fit on [{}, {}]".format(lo, lo + width))
        # rules[j][order index] = (u, w) at the j-th Chebyshev node
        rules = []
        for t in t_nodes:
            x = lo + (t + 1) * tier.cast(width) / 2
            family = "jacobi" if x <= rysconfig.FULL_RANGE_BREAKPOINT else "laguerre"
            alpha, beta = wheeler.recurrence_coefficients(orders[-1], x, 0, tier, family)
            rules.append(_rules(alpha, beta, orders, tier))

        for io, n in enumerate(orders):
            cx = [_chebyshev_coefficients([rules[j][io][0][i] for j in range(N)], basis) for i in range(n)]
            cw = [_chebyshev_coefficients([rules[j][io][1][i] for j in range(N)], basis) for i in range(n)]
            # store as [term][root]
            PX[io].append([[cx[i][k] for i in range(n)] for k in range(N)])
            PW[io].append([[cw[i][k] for i in range(n)] for k in range(N)])
    return PX, PW


def _fmt(v):
    if isinstance(v, (list, tuple)):
        return "[" + ", ".join(_fmt(vi) for vi in v) + "]"
    return mp.nstr(v, 17, **_kwargs)


def _write_table(name, table, f, depth=1):
    print("{} = [".format(name), file=f)
    for row in table:
        if depth == 1:
            print("    {},".format(_fmt(row)), file=f)
        else:
            print("    [", file=f)
            for sub in row:
                print("        {},".format(_fmt(sub)), file=f)
            print("    ],", file=f)
    print("]\n", file=f)


def write_tables(f_name, max_order, bits):
    tier = precision.MPTier("table", bits)
    R0, R1, W0, W1 = smallx_tables(max_order, precision.MPTier("table", 2 * bits))
    RT, WW = largex_tables(max_order, tier)
    PX, PW = polyfit_tables(tier)

    with open(f_name, "w") as f:
        print('"""pre-calculated tables, generated by generate_py_tables.py"""\n', file=f)
        print("TABLE_VERSION = {}".format(rysconfig.table_version), file=f)
        print("MAX_ORDER = {}".format(max_order), file=f)
        print("POLYFIT_MIN_ORDER = {}".format(rysconfig.POLYFIT_MIN_ORDER), file=f)
        print("POLYFIT_MAX_ORDER = {}".format(rysconfig.POLYFIT_MAX_ORDER), file=f)
        print("POLYFIT_TERMS = {}\n".format(rysconfig.POLYFIT_TERMS), file=f)
        # index: order - 1, root
        _write_table("SMALLX_R0", R0, f)
        _write_table("SMALLX_R1", R1, f)
        _write_table("SMALLX_W0", W0, f)
        _write_table("SMALLX_W1", W1, f)
        _write_table("LARGEX_RT", RT, f)
        _write_table("LARGEX_WW", WW, f)
        # index: order - POLYFIT_MIN_ORDER, interval, term, root
        _write_table("POLYFIT_X", PX, f, depth=2)
        _write_table("POLYFIT_W", PW, f, depth=2)


########################################################################################################################
##    pre-calculate tables if needed
########################################################################################################################


def _table_version(f_name):
    """the TABLE_VERSION line of an existing table file, None if there is none"""
    with open(f_name) as f:
        for line in f:
            if line.startswith("TABLE_VERSION = "):
                return int(line.split("=")[1])
    return None


def run(overwrite=False):
    pth, fl = os.path.split(__file__)
    _f_name_abs = os.path.join(pth, rysconfig._f_name)

    # generate, if missing or outdated, using mpmath routines
    if not os.path.exists(_f_name_abs):
        logging.info("pre-calculated tables missing ({})".format(_f_name_abs))
    elif overwrite:
        logging.info("overwrite existing file {}".format(_f_name_abs))
    elif _table_version(_f_name_abs) != rysconfig.table_version:
        logging.info("pre-calculated tables outdated ({})".format(_f_name_abs))
    else:
        return

    logging.info("generate Rys tables (this takes a while) ...")
    write_tables(
        f_name=_f_name_abs,
        max_order=rysconfig.MAX_ORDER,
        bits=rysconfig.table_bits,
    )
    logging.info("done!")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run(overwrite=True)

"""
Moments of the Rys weight function

    mu_k(x, lower) = int_lower^1 t^(2k) exp(-x t^2) dt,    k = 0, ..., count - 1

For lower = 0 these are the Boys function values F_k(x). The functions accept a precision tier
(see `precision.py`) and return a list of numbers of that tier.
"""

# rysquad module imports
from . import precision


def _boys_series(x, m, tier):
    """
    F_m(x) from its power series, together with exp(-x) / 2

    Converges quickly for x < m + 1.5 and is also valid for negative x.
    """
    half_e = tier.exp(-x) / 2
    b = tier.cast(m) + 0.5
    term = half_e
    s = half_e
    eps = tier.eps
    while abs(term) > eps * abs(s):
        b += 1
        term *= x / b
        s += term
    return s / (m + 0.5), half_e


def gamma_inc_like(x, count, tier=precision.STANDARD):
    """
    Boys function values F_0(x), ..., F_{count-1}(x)

    Uses the downward recurrence, started from the power series of the highest value,
    if x < count + 0.5 and the upward recurrence started from erf otherwise.

    :param x: argument of the Boys function
    :param count: number of values
    :param tier: precision tier for the arithmetic
    :return: list with `count` values
    """
    x = tier.cast(x)
    m = count - 1
    if x < m + 1.5:
        f, half_e = _boys_series(x, m, tier)
        res = [f]
        b = m + 0.5
        for _ in range(m):
            b -= 1
            f = (half_e + x * f) / b
            res.append(f)
        res.reverse()
        return res

    e = tier.exp(-x)
    sqrt_x = tier.sqrt(x)
    f = tier.sqrt(tier.pi) / 2 / sqrt_x * tier.erf(sqrt_x)
    res = [f]
    b = 1 / (2 * x)
    for k in range(m):
        f = b * ((2 * k + 1) * f - e)
        res.append(f)
    return res


def erfc_like(x, lower, count, tier=precision.STANDARD):
    """
    short range moments int_lower^1 t^(2k) exp(-x t^2) dt for k = 0, ..., count - 1

    :param x: exponent of the weight function
    :param lower: lower bound of the t-integral, 0 < lower < 1
    :param count: number of values
    :param tier: precision tier for the arithmetic
    :return: list with `count` values
    """
    x = tier.cast(x)
    lower = tier.cast(lower)
    m = count - 1
    l2 = lower * lower
    e = tier.exp(-x)
    e_l = tier.exp(-x * l2)

    if x < m + 1.5:
        # I_m = F_m(x) - lower^(2m+1) F_m(x lower^2)
        f_top, _ = _boys_series(x, m, tier)
        f_top_l, _ = _boys_series(x * l2, m, tier)
        f = f_top - lower ** (2 * m + 1) * f_top_l
        res = [f]
        for k in range(m, 0, -1):
            f = (2 * x * f + e - lower ** (2 * k - 1) * e_l) / (2 * k - 1)
            res.append(f)
        res.reverse()
        return res

    sqrt_x = tier.sqrt(x)
    f = tier.sqrt(tier.pi) / (2 * sqrt_x) * (tier.erfc(lower * sqrt_x) - tier.erfc(sqrt_x))
    res = [f]
    lk = lower
    for k in range(m):
        f = ((2 * k + 1) * f - (e - lk * e_l)) / (2 * x)
        lk *= l2
        res.append(f)
    return res


def get_moments(x, lower, count, tier=precision.STANDARD):
    """
    the first `count` moments of the Rys weight function on [lower, 1]

    A vanishing interval (lower >= 1) yields zero moments.
    """
    if lower == 0:
        return gamma_inc_like(x, count, tier)
    if lower >= 1:
        return [tier.cast(0)] * count
    return erfc_like(x, lower, count, tier)

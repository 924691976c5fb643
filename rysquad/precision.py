"""
Arithmetic used by the moment generator and the root solvers.

Three tiers are available: `STANDARD` (IEEE double via the math module), `EXTENDED` (64 bit mantissa)
and `QUADRUPLE` (113 bit mantissa). The latter two use mpmath. Each thread holds its own mpmath context
per working precision, numbers created by `tier.cast` carry that context, so the arithmetic never depends
on (or changes) the global `mpmath.mp` precision. Code written against this interface
(`tier.cast`, `tier.sqrt`, ...) runs unchanged in all tiers and from concurrent threads.
"""

# python imports
import math
import threading

# third party imports
import mpmath as mp

_local = threading.local()


def _context(bits):
    """the mpmath context of the calling thread with working precision `bits`"""
    contexts = getattr(_local, "contexts", None)
    if contexts is None:
        contexts = _local.contexts = {}
    ctx = contexts.get(bits)
    if ctx is None:
        ctx = mp.MPContext()
        ctx.prec = bits
        contexts[bits] = ctx
    return ctx


class FloatTier(object):
    __slots__ = ("name", "bits")

    def __init__(self, name="standard"):
        self.name = name
        self.bits = 53

    @property
    def eps(self):
        return 2.0 ** (1 - self.bits)

    @property
    def pi(self):
        return math.pi

    def cast(self, v):
        return float(v)

    def sqrt(self, v):
        return math.sqrt(v)

    def exp(self, v):
        return math.exp(v)

    def erf(self, v):
        return math.erf(v)

    def erfc(self, v):
        return math.erfc(v)

    def cos(self, v):
        return math.cos(v)

    def widened(self, extra_bits):
        return MPTier(self.name, self.bits + extra_bits)

    def __str__(self):
        return "FloatTier({})".format(self.name)

    def __repr__(self):
        return self.__str__()


class MPTier(object):
    __slots__ = ("name", "bits")

    def __init__(self, name, bits):
        self.name = name
        self.bits = bits

    @property
    def ctx(self):
        return _context(self.bits)

    @property
    def eps(self):
        ctx = self.ctx
        return ctx.ldexp(ctx.mpf(1), 1 - self.bits)

    @property
    def pi(self):
        return +self.ctx.pi

    def cast(self, v):
        return self.ctx.mpf(v)

    def sqrt(self, v):
        return self.ctx.sqrt(v)

    def exp(self, v):
        return self.ctx.exp(v)

    def erf(self, v):
        return self.ctx.erf(v)

    def erfc(self, v):
        return self.ctx.erfc(v)

    def cos(self, v):
        return self.ctx.cos(v)

    def widened(self, extra_bits):
        return MPTier(self.name, self.bits + extra_bits)

    def __str__(self):
        return "MPTier({}, bits={})".format(self.name, self.bits)

    def __repr__(self):
        return self.__str__()


STANDARD = FloatTier("standard")
EXTENDED = MPTier("extended", 64)
QUADRUPLE = MPTier("quadruple", 113)

TIERS = (STANDARD, EXTENDED, QUADRUPLE)

"""
module specific exceptions
"""


class RysError(Exception):
    pass


class RysIllConditionedError(RysError):
    """the moment problem can not be solved for this order with the given arithmetic"""

    pass


class RysUnsupportedOrderError(RysError):
    pass


class RysPrecisionExhaustedError(RysError):
    """no strategy (including the quadruple precision fallback) succeeded"""

    def __init__(self, msg, order=None, x=None, lower=None):
        super().__init__(msg)
        self.order = order
        self.x = x
        self.lower = lower

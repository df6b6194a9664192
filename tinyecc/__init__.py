"""
Copyright (c) 2020, The Decred developers
See LICENSE for details
"""


class TinyEccError(Exception):
    pass


class PrecheckViolation(TinyEccError):
    """
    An operand is outside of the domain required by the operation, e.g. a
    scalar that is not reduced modulo the group order or a point that is not
    on the curve. The operation is aborted and no partial result is returned.
    """

    pass


class InvalidOperandError(PrecheckViolation):
    """
    A finite field operand has no defined result, e.g. the multiplicative
    inverse of zero.
    """

    pass


class DegenerateResultError(TinyEccError):
    """
    Signing produced R = ∞, r = 0 or s = 0. The chance of this happening with
    a properly configured curve is negligible, so hitting it repeatedly means
    the curve parameters or the randomness source are broken.
    """

    pass

"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""

import random

import pytest

from tinyecc.crypto.curve import EllipticCurve, Point
from tinyecc.crypto.ecdsa import ECDSA
from tinyecc.curves import tiny17


# Seed initialization is delegated to tests.
# random.seed(0)


@pytest.fixture
def randBytes():
    def _randBytes(low=0, high=50):
        return bytes(random.randint(0, 255) for _ in range(random.randint(low, high)))

    return _randBytes


class SequenceRandom:
    """
    A randomness source that replays a fixed list of values, then starts over.
    Values are returned as is, even outside of the requested range.
    """

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def randRange(self, low, high):
        v = self.values[self.calls % len(self.values)]
        self.calls += 1
        return v


@pytest.fixture
def sequenceRandom():
    return SequenceRandom


@pytest.fixture
def tinyCurve():
    """
    y² = x³ + 2x + 2 mod 17, which has 19 points.
    """
    return EllipticCurve(tiny17.A, tiny17.B, tiny17.P)


@pytest.fixture
def tinyPoints(tinyCurve):
    """
    All 18 affine points of the tiny curve.
    """
    p = tinyCurve.p
    return [
        Point(x, y)
        for x in range(p)
        for y in range(p)
        if tinyCurve.isOnCurve(Point(x, y))
    ]


@pytest.fixture
def tinyECDSA():
    return ECDSA.fromCurve(tiny17.Name)

"""
Copyright (c) 2020, The Decred developers
See LICENSE for details
"""

import pytest

from tinyecc import InvalidOperandError, PrecheckViolation
from tinyecc.crypto import field
from tinyecc.curves import secp256k1


def test_add():
    assert field.add(4, 10, 11) == 3
    assert field.add(4, 10, 31) == 14
    assert field.add(0, 0, 31) == 0


def test_multiply():
    assert field.multiply(4, 10, 11) == 7
    assert field.multiply(4, 10, 51) == 40
    assert field.square(5, 11) == 3


def test_additiveInverse():
    assert field.additiveInverse(4, 51) == 47
    assert field.add(4, 47, 51) == 0
    # Zero is its own inverse.
    assert field.additiveInverse(0, 51) == 0

    for bad in (51, 52, -1):
        with pytest.raises(InvalidOperandError):
            field.additiveInverse(bad, 51)
    # Invalid operands are prechecks.
    with pytest.raises(PrecheckViolation):
        field.additiveInverse(51, 51)


def test_subtract():
    assert field.subtract(4, 4, 51) == 0
    assert field.subtract(4, 10, 11) == 5
    assert field.subtract(10, 4, 11) == 6
    assert field.subtract(3, 0, 11) == 3


def test_multiplicativeInverse():
    # 4 * 3 mod 11 = 12 mod 11 = 1
    assert field.multiplicativeInverse(4, 11) == 3
    assert field.multiply(4, 3, 11) == 1

    with pytest.raises(InvalidOperandError):
        field.multiplicativeInverse(0, 11)
    with pytest.raises(InvalidOperandError):
        field.multiplicativeInverse(22, 11)


def test_divide():
    assert field.divide(4, 4, 11) == 1
    # 6 / 3 = 2
    assert field.divide(6, 3, 11) == 2
    # 1 / 2 = 6 mod 11
    assert field.divide(1, 2, 11) == 6
    with pytest.raises(InvalidOperandError):
        field.divide(4, 0, 11)


def test_inverse_identities():
    for p in (17, 19, 31, 101):
        for j in range(p):
            assert field.add(j, field.additiveInverse(j, p), p) == 0
            if j != 0:
                assert field.multiply(j, field.multiplicativeInverse(j, p), p) == 1


def test_inverse_large():
    p = secp256k1.P
    for j in (1, 2, secp256k1.Gx, secp256k1.Gy, p - 1):
        assert field.multiply(j, field.multiplicativeInverse(j, p), p) == 1
        assert field.add(j, field.additiveInverse(j, p), p) == 0
    n = secp256k1.N
    k = 0xB3D9AAC9C5E43910B4385B53C7E78C21D4CD5F8E683C633AED04C233EFC2E120
    assert field.multiply(k, field.multiplicativeInverse(k, n), n) == 1
    assert field.divide(k, k, n) == 1

"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

Modular arithmetic over a prime field. The functions are stateless and take
the modulus explicitly, so the same code serves both the coordinate field of
a curve (mod p) and the scalar field of its subgroup (mod n).

With the exception of the inverses, the functions do not validate their
operands. Callers are expected to pass values already reduced modulo p.
"""

from tinyecc import InvalidOperandError


def add(j, k, p):
    """
    (j + k) mod p.
    """
    return (j + k) % p


def additiveInverse(j, p):
    """
    The additive inverse of j, i.e. the value that added to j gives zero.

    Args:
        j (int): A field element in [0, p).
        p (int): The modulus.

    Returns:
        int: (p - j) mod p. The inverse of zero is zero.

    Raises:
        InvalidOperandError: j is not reduced modulo p.
    """
    if j < 0 or j >= p:
        raise InvalidOperandError(f"operand {j} is not in the field of order {p}")
    return (p - j) % p


def subtract(j, k, p):
    """
    (j - k) mod p, computed as j plus the additive inverse of k.
    """
    return add(j, additiveInverse(k, p), p)


def multiply(j, k, p):
    """
    (j * k) mod p.
    """
    return (j * k) % p


def square(j, p):
    return multiply(j, j, p)


def multiplicativeInverse(j, p):
    """
    The multiplicative inverse of j by Fermat's little theorem,
    j^(p-2) = j^-1 (mod p). Only valid when p is prime.

    Args:
        j (int): A non-zero field element.
        p (int): The prime modulus.

    Returns:
        int: The inverse.

    Raises:
        InvalidOperandError: j is congruent to zero.
    """
    if j % p == 0:
        raise InvalidOperandError(f"zero has no multiplicative inverse mod {p}")
    return pow(j, p - 2, p)


def divide(j, k, p):
    """
    j / k mod p, computed as j times the multiplicative inverse of k.

    Raises:
        InvalidOperandError: k is congruent to zero.
    """
    return multiply(j, multiplicativeInverse(k, p), p)

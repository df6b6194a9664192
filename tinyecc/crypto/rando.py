"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

Randomness sources. Anything that has a randRange(low, high) method returning
an integer in [low, high) can be used as a source, which lets callers and
tests inject their own.
"""

import os

from tinyecc import InvalidOperandError


# Number of bytes drawn beyond what the range needs. Reducing a value that is
# 64 bits longer than the range keeps the modulo bias below 2^-64. This is the
# procedure given in [NSA] A.2.1.
EXTRA_BYTES = 8


def checkRange(low, high):
    """
    Check that [low, high) is not empty.

    Raises:
        InvalidOperandError if high <= low.
    """
    if high <= low:
        raise InvalidOperandError(f"empty range [{low}, {high})")


class SecureRandom:
    """
    SecureRandom draws from the operating system's CSPRNG. It holds no state,
    so a single instance can be shared between threads.
    """

    def randRange(self, low, high):
        """
        A uniformly distributed integer in [low, high).

        Args:
            low (int): The inclusive lower bound.
            high (int): The exclusive upper bound.

        Returns:
            int: The random integer.
        """
        checkRange(low, high)
        span = high - low
        b = os.urandom((span.bit_length() + 7) // 8 + EXTRA_BYTES)
        return low + int.from_bytes(b, "big") % span


# defaultSource is used when no source is injected.
defaultSource = SecureRandom()

"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

tiny17 is the textbook curve y² = x³ + 2x + 2 over F_17 from Paar and
Pelzl, Understanding Cryptography, chapter 9. The group is cyclic of prime
order 19, so every point other than ∞ generates it. Small enough to check by
hand and offering no security whatsoever.
"""

Name = "tiny17"
Aliases = ()

P = 17
A = 2
B = 2
Gx = 5
Gy = 1
N = 19
H = 1
BitSize = 5

"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

secp256k1 domain parameters. Values should mirror exactly [SEC2] 2.4.1
https://www.secg.org/sec2-v2.pdf
"""

Name = "secp256k1"
Aliases = ("k256",)

P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
A = 0
B = 7
Gx = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
Gy = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
H = 1
BitSize = 256

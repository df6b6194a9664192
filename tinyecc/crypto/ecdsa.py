"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

The Elliptic Curve Digital Signature Algorithm over a prime order subgroup of
any curve supported by tinyecc.crypto.curve.

References:
  [SECG]: Recommended Elliptic Curve Domain Parameters
    https://www.secg.org/sec2-v2.pdf

  [SEC1] Elliptic Curve Cryptography
    https://www.secg.org/sec1-v2.pdf

  [NSA]: Suite B Implementer's Guide to FIPS 186-3
    https://apps.nsa.gov/iaarchive/library/ia-guidance/ia-solutions-for-classified/algorithm-guidance/suite-b-implementers-guide-to-fips-186-3-ecdsa.cfm
"""

from tinyecc import DegenerateResultError, PrecheckViolation
from tinyecc import curves
from tinyecc.util import helpers

from . import field, rando
from .curve import EllipticCurve, Point


log = helpers.getLogger("ECDSA")

# The number of nonces sign will try before giving up. With a curve order
# anywhere near a useful size, a single degenerate nonce is already
# astronomically unlikely.
MAX_SIGN_ATTEMPTS = 8


class Signature:
    """
    Signature is an ECDSA signature (r, s). It unpacks like a tuple.
    """

    __slots__ = ("r", "s")

    def __init__(self, r, s):
        object.__setattr__(self, "r", r)
        object.__setattr__(self, "s", s)

    def __setattr__(self, name, value):
        raise AttributeError("Signature is immutable")

    def __iter__(self):
        yield self.r
        yield self.s

    def __eq__(self, other):
        if isinstance(other, Signature):
            return self.r == other.r and self.s == other.s
        return NotImplemented

    def __hash__(self):
        return hash((self.r, self.s))

    def __repr__(self):
        return f"Signature(r={self.r}, s={self.s})"


class KeyPair:
    """
    KeyPair holds a private key and the public key derived from it.
    """

    __slots__ = ("privateKey", "publicKey")

    def __init__(self, privateKey, publicKey):
        object.__setattr__(self, "privateKey", privateKey)
        object.__setattr__(self, "publicKey", publicKey)

    def __setattr__(self, name, value):
        raise AttributeError("KeyPair is immutable")

    def __iter__(self):
        yield self.privateKey
        yield self.publicKey

    def __repr__(self):
        # Keep the private key out of logs and tracebacks.
        return f"KeyPair(publicKey={self.publicKey})"


class ECDSA:
    """
    ECDSA signs and verifies digests with the subgroup of order N generated by
    G on the given curve. The context is immutable and can be shared between
    threads as long as the randomness source can.
    """

    __slots__ = ("curve", "G", "N", "rand", "maxAttempts")

    def __init__(self, curve, G, N, rand=None, maxAttempts=MAX_SIGN_ATTEMPTS):
        """
        The generator is checked to be on the curve. That N is the order of G
        and prime is assumed.

        Args:
            curve (EllipticCurve): The curve.
            G (Point): The generator of the subgroup.
            N (int): The order of G.
            rand (object): Optional. A randomness source with a
                randRange(low, high) method. Defaults to the operating
                system's CSPRNG.
            maxAttempts (int): Optional. How many nonces sign will draw before
                failing with a DegenerateResultError.
        """
        curve.requireOnCurve(G)
        if G.isIdentity:
            raise PrecheckViolation("the generator cannot be the point at infinity")
        if N < 2:
            raise PrecheckViolation(f"group order {N} is too small")
        if maxAttempts < 1:
            raise PrecheckViolation("maxAttempts must be at least 1")
        object.__setattr__(self, "curve", curve)
        object.__setattr__(self, "G", G)
        object.__setattr__(self, "N", N)
        if rand is None:
            rand = rando.defaultSource
        object.__setattr__(self, "rand", rand)
        object.__setattr__(self, "maxAttempts", maxAttempts)

    def __setattr__(self, name, value):
        raise AttributeError("ECDSA is immutable")

    @staticmethod
    def fromParams(p, a, b, gx, gy, n, **kwargs):
        """
        Create an ECDSA context from raw domain parameters. Any keyword
        arguments are passed to the ECDSA constructor.

        Args:
            p (int): The field prime.
            a (int): The curve's a coefficient.
            b (int): The curve's b coefficient.
            gx (int): The x coordinate of the generator.
            gy (int): The y coordinate of the generator.
            n (int): The order of the generator.

        Returns:
            ECDSA: The signing context.
        """
        return ECDSA(EllipticCurve(a, b, p), Point(gx, gy), n, **kwargs)

    @staticmethod
    def fromCurve(name, **kwargs):
        """
        Create an ECDSA context for one of the named curves in tinyecc.curves.
        """
        c = curves.parse(name)
        curve = EllipticCurve(c.A, c.B, c.P, name=c.Name)
        return ECDSA(curve, Point(c.Gx, c.Gy), c.N, **kwargs)

    def _checkScalar(self, name, v):
        if not 0 < v < self.N:
            raise PrecheckViolation(f"{name} is not in [1, N-1]")

    def _checkDigest(self, digest):
        if not 0 <= digest < self.N:
            raise PrecheckViolation(
                "digest is not reduced modulo the group order, see hashToInt"
            )

    def hashToInt(self, h):
        """
        hashToInt converts a hash value to an integer. There is some
        disagreement about how this is done. [NSA] suggests that this is done
        in the obvious manner, but [SECG] truncates the hash to the bit-length
        of the curve order first. We follow [SECG] because that's what OpenSSL
        does. Additionally, OpenSSL right shifts excess bits from the number if
        the hash is too large and we mirror that too. The result is then
        reduced modulo N so it can be passed straight to sign and verify.

        Args:
            h (byte-like): The hash to convert.

        Returns:
            int: The digest.
        """
        orderBits = self.N.bit_length()
        orderBytes = (orderBits + 7) // 8
        if len(h) > orderBytes:
            h = h[:orderBytes]

        ret = int.from_bytes(h, byteorder="big")
        excess = len(h) * 8 - orderBits
        if excess > 0:
            ret = ret >> excess
        return ret % self.N

    def randScalar(self):
        """
        randScalar draws a uniformly distributed integer in [1, N-1] from the
        randomness source. Zero, or anything else out of range that a custom
        source returns, is discarded and drawn again, up to maxAttempts draws
        in total.

        Returns:
            int: The scalar.

        Raises:
            DegenerateResultError: Every draw was out of range.
        """
        for _ in range(self.maxAttempts):
            k = self.rand.randRange(1, self.N)
            if 0 < k < self.N:
                return k
            log.debug("discarding out of range draw from randomness source")
        log.error(f"no scalar in range after {self.maxAttempts} draws")
        raise DegenerateResultError(
            f"randomness source {type(self.rand).__name__} returned no value in "
            f"[1, N-1] after {self.maxAttempts} draws"
        )

    def generatePrivateKey(self):
        """
        generatePrivateKey returns a new random private key.

        Returns:
            int: The private key, an integer in [1, N-1].
        """
        return self.randScalar()

    def generatePublicKey(self, privKey):
        """
        generatePublicKey returns the public key privKey*G.

        Args:
            privKey (int): The private key.

        Returns:
            Point: The public key.

        Raises:
            PrecheckViolation: The private key is not in [1, N-1].
        """
        self._checkScalar("private key", privKey)
        return self.curve.scalarMult(self.G, privKey)

    def generateKeyPair(self):
        """
        generateKeyPair generates a public and private key pair.

        Returns:
            KeyPair: The new keys.
        """
        privKey = self.generatePrivateKey()
        return KeyPair(privKey, self.generatePublicKey(privKey))

    def signWithNonce(self, digest, privKey, k):
        """
        signWithNonce signs digest with the caller's nonce k. See [SEC1] 4.1.3.
        The nonce must be secret, unpredictable and never used again. Two
        signatures sharing a nonce reveal the private key.

        Args:
            digest (int): The message digest, reduced modulo N.
            privKey (int): The private key.
            k (int): The nonce, in [1, N-1].

        Returns:
            Signature: The signature.

        Raises:
            PrecheckViolation: An argument is out of range.
            DegenerateResultError: The nonce produced r = 0 or s = 0.
        """
        self._checkDigest(digest)
        self._checkScalar("private key", privKey)
        self._checkScalar("nonce", k)
        N = self.N

        R = self.curve.scalarMult(self.G, k)
        if R.isIdentity:
            raise DegenerateResultError("calculated R is the point at infinity")
        r = R.x % N
        if r == 0:
            raise DegenerateResultError("calculated R is zero")

        # s = k^-1 (e + dr) mod N
        e = field.add(digest, field.multiply(r, privKey, N), N)
        s = field.divide(e, k, N)
        if s == 0:
            raise DegenerateResultError("calculated S is zero")

        return Signature(r, s)

    def sign(self, digest, privKey):
        """
        sign signs digest with a fresh random nonce. The rare nonce that gives
        a degenerate signature is replaced with another, up to maxAttempts
        nonces in total.

        Args:
            digest (int): The message digest, reduced modulo N.
            privKey (int): The private key.

        Returns:
            Signature: The signature.

        Raises:
            PrecheckViolation: The digest or the private key is out of range.
            DegenerateResultError: Every nonce tried was degenerate, or the
                randomness source returned no usable nonce.
        """
        self._checkDigest(digest)
        self._checkScalar("private key", privKey)
        for attempt in range(1, self.maxAttempts + 1):
            k = self.randScalar()
            try:
                return self.signWithNonce(digest, privKey, k)
            except DegenerateResultError as e:
                log.debug(f"signing attempt {attempt} discarded: {e}")
        log.error(f"no valid signature after {self.maxAttempts} nonces")
        raise DegenerateResultError(
            f"no valid signature after {self.maxAttempts} nonces, "
            "check the curve parameters and the randomness source"
        )

    def verify(self, digest, pubKey, sig):
        """
        verify checks that sig is a signature of digest by the owner of pubKey.
        See [SEC1] 4.1.4.

        Args:
            digest (int): The message digest, reduced modulo N.
            pubKey (Point): The public key.
            sig (Signature or tuple): The signature (r, s).

        Returns:
            bool: True if the signature is valid.

        Raises:
            PrecheckViolation: The digest is out of range or the public key is
                not on the curve.
        """
        self._checkDigest(digest)
        self.curve.requireOnCurve(pubKey)
        N = self.N
        r, s = sig

        if pubKey.isIdentity:
            return False
        if r <= 0 or s <= 0:
            return False
        if r >= N or s >= N:
            return False

        w = field.multiplicativeInverse(s, N)
        u1 = field.multiply(digest, w, N)
        u2 = field.multiply(r, w, N)

        pt = self.curve.add(
            self.curve.scalarMult(self.G, u1), self.curve.scalarMult(pubKey, u2)
        )
        if pt.isIdentity:
            return False
        return pt.x % N == r

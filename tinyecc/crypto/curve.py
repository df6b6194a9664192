"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

Affine group arithmetic for short Weierstrass curves y² = x³ + ax + b over a
prime field.

References:
  [GECC]: Guide to Elliptic Curve Cryptography (Hankerson, Menezes, Vanstone)

  [SEC1] Elliptic Curve Cryptography
    https://www.secg.org/sec1-v2.pdf
"""

from tinyecc import PrecheckViolation

from . import field


class Point:
    """
    Point is either an affine coordinate pair (x, y) or the point at infinity,
    which has no coordinates. Points are immutable and compare by value.
    Use IDENTITY rather than constructing a point without coordinates.
    """

    __slots__ = ("_x", "_y")

    def __init__(self, x=None, y=None):
        if (x is None) != (y is None):
            raise PrecheckViolation("a point needs both coordinates or none")
        object.__setattr__(self, "_x", x)
        object.__setattr__(self, "_y", y)

    def __setattr__(self, name, value):
        raise AttributeError("Point is immutable")

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def isIdentity(self):
        """
        True for the point at infinity.
        """
        return self._x is None

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self):
        return hash((self._x, self._y))

    def __repr__(self):
        if self.isIdentity:
            return "Point(∞)"
        return f"Point({self._x}, {self._y})"


# IDENTITY is the point at infinity, the neutral element of the group.
IDENTITY = Point()


class EllipticCurve:
    """
    EllipticCurve is the group of points satisfying y² = x³ + ax + b (mod p).
    The curve is assumed to be non-singular, i.e. 4a³ + 27b² != 0 (mod p), and
    p is assumed to be prime. Neither is checked.
    """

    __slots__ = ("a", "b", "p", "name")

    def __init__(self, a, b, p, name=""):
        if p < 3:
            raise PrecheckViolation(f"field prime {p} is too small")
        object.__setattr__(self, "a", a % p)
        object.__setattr__(self, "b", b % p)
        object.__setattr__(self, "p", p)
        object.__setattr__(self, "name", name)

    def __setattr__(self, name, value):
        raise AttributeError("EllipticCurve is immutable")

    def __eq__(self, other):
        if not isinstance(other, EllipticCurve):
            return NotImplemented
        return (self.a, self.b, self.p) == (other.a, other.b, other.p)

    def __hash__(self):
        return hash((self.a, self.b, self.p))

    def __repr__(self):
        label = self.name or f"y^2 = x^3 + {self.a}x + {self.b} mod {self.p}"
        return f"EllipticCurve({label})"

    def isOnCurve(self, pt):
        """
        isOnCurve returns True if pt satisfies the curve equation. The point at
        infinity is always on the curve. Coordinates that are not reduced
        modulo p are rejected, as is anything that is not a Point.

        Args:
            pt (Point): The point to check.

        Returns:
            bool: True if the point belongs to the group.
        """
        if not isinstance(pt, Point):
            return False
        if pt.isIdentity:
            return True
        x, y, p = pt.x, pt.y, self.p
        if not (0 <= x < p and 0 <= y < p):
            return False
        # y² = x³ + ax + b
        lhs = field.square(y, p)
        rhs = field.multiply(field.square(x, p), x, p)
        rhs = field.add(rhs, field.multiply(self.a, x, p), p)
        rhs = field.add(rhs, self.b, p)
        return lhs == rhs

    def point(self, x, y):
        """
        Create a point from affine coordinates, checking that it is on the
        curve.

        Args:
            x (int): The x coordinate.
            y (int): The y coordinate.

        Returns:
            Point: The point.

        Raises:
            PrecheckViolation: (x, y) is not on the curve.
        """
        pt = Point(x, y)
        self.requireOnCurve(pt)
        return pt

    def requireOnCurve(self, pt):
        if not isinstance(pt, Point):
            raise PrecheckViolation(f"expected a Point, got {type(pt).__name__}")
        if not self.isOnCurve(pt):
            raise PrecheckViolation(f"{pt} is not on {self}")

    def negate(self, pt):
        """
        negate returns -pt, the reflection of pt across the x axis.
        """
        self.requireOnCurve(pt)
        return self._negate(pt)

    def add(self, pt1, pt2):
        """
        add returns the sum of pt1 and pt2. Both points must be on the curve.
        Equal points are doubled, and a point added to its own inverse gives
        the point at infinity.

        Args:
            pt1 (Point): The first point.
            pt2 (Point): The second point.

        Returns:
            Point: pt1 + pt2.

        Raises:
            PrecheckViolation: Either point is not on the curve.
        """
        self.requireOnCurve(pt1)
        self.requireOnCurve(pt2)
        return self._add(pt1, pt2)

    def double(self, pt):
        """
        double returns 2*pt. The point must be on the curve.

        Raises:
            PrecheckViolation: pt is not on the curve.
        """
        self.requireOnCurve(pt)
        return self._double(pt)

    def scalarMult(self, pt, k):
        """
        scalarMult returns k*pt using left-to-right binary double-and-add. This
        is algorithm 3.27 from [GECC]. The running time depends on k, so it
        must not be used where timing side channels matter.

        Args:
            pt (Point): A point on the curve.
            k (int): A non-negative scalar.

        Returns:
            Point: k*pt. Zero gives the point at infinity.

        Raises:
            PrecheckViolation: pt is not on the curve or k is negative.
        """
        self.requireOnCurve(pt)
        if k < 0:
            raise PrecheckViolation("scalar must be non-negative")
        if k == 0 or pt.isIdentity:
            return IDENTITY

        # The top bit is always set, so the accumulator starts at pt and the
        # remaining bits are processed most significant first.
        q = pt
        for bit in bin(k)[3:]:
            q = self._double(q)
            if bit == "1":
                q = self._add(q, pt)
        return q

    def _negate(self, pt):
        if pt.isIdentity:
            return IDENTITY
        return Point(pt.x, field.additiveInverse(pt.y, self.p))

    def _add(self, pt1, pt2):
        # A point at infinity is the identity according to the group law for
        # elliptic curve cryptography.  Thus, ∞ + P = P and P + ∞ = P.
        if pt1.isIdentity:
            return pt2
        if pt2.isIdentity:
            return pt1

        p = self.p
        x1, y1, x2, y2 = pt1.x, pt1.y, pt2.x, pt2.y
        if x1 == x2:
            # P + (-P) = ∞. This also covers doubling a point with y = 0.
            if field.add(y1, y2, p) == 0:
                return IDENTITY
            # Same x and not inverses means the points are equal.
            return self._double(pt1)

        # s = (y2 - y1) / (x2 - x1)
        s = field.divide(field.subtract(y2, y1, p), field.subtract(x2, x1, p), p)
        return self._chord(s, x1, y1, x2)

    def _double(self, pt):
        if pt.isIdentity:
            return IDENTITY
        p = self.p
        x1, y1 = pt.x, pt.y
        # The tangent at a point with y = 0 is vertical, so 2P = ∞.
        if y1 == 0:
            return IDENTITY

        # s = (3x1² + a) / 2y1
        num = field.add(field.multiply(3, field.square(x1, p), p), self.a, p)
        den = field.multiply(2, y1, p)
        s = field.divide(num, den, p)
        return self._chord(s, x1, y1, x1)

    def _chord(self, s, x1, y1, x2):
        """
        The third intersection of the line with slope s through (x1, y1),
        reflected across the x axis.

        x3 = s² - x1 - x2
        y3 = s(x1 - x3) - y1
        """
        p = self.p
        x3 = field.subtract(field.subtract(field.square(s, p), x1, p), x2, p)
        y3 = field.subtract(field.multiply(s, field.subtract(x1, x3, p), p), y1, p)
        return Point(x3, y3)

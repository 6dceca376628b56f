"""Coefficient structures for polynomials.

A polynomial knows nothing about its coefficients beyond the operations of
the Ring it was built over.  Algorithms ask a ring for capabilities rather
than for its identity:
 - `is_unit(c)` decides whether exact division by a leading coefficient is
   possible (otherwise division falls back to pseudo-division)
 - `isinstance(ring, Field)` marks rings where every non-zero element is a unit
 - `elements()` is None unless the ring is finite

Available structures:
 - ZZ: the integers (an integral domain)
 - QQ: the rationals, as fractions.Fraction
 - PrimeField(p): integers modulo a prime p
"""

from fractions import Fraction
from functools import reduce
import math
import re

class NotInvertible(ArithmeticError):
    pass

class UnsupportedRing(Exception):
    """An operation needs a capability (finiteness, characteristic 0, ...) the ring lacks."""
    pass

class Ring(object):
    """A commutative ring with identity.

    Elements are plain Python values; the ring supplies arithmetic on them.
    Subclasses must define `coerce`, `is_unit`, `inverse` and `exact_div`.
    """

    name = "R"
    zero = 0
    one = 1
    characteristic = 0

    def coerce(self, value):
        raise NotImplementedError()

    def add(self, a, b):
        return a + b

    def neg(self, a):
        return -a

    def sub(self, a, b):
        return self.add(a, self.neg(b))

    def mul(self, a, b):
        return a * b

    def power(self, a, n):
        assert n >= 0
        res = self.one
        while n:
            if n & 1:
                res = self.mul(res, a)
            a = self.mul(a, a)
            n >>= 1
        return res

    def is_zero(self, a):
        return a == self.zero

    def is_unit(self, a):
        raise NotImplementedError()

    def inverse(self, a):
        raise NotImplementedError()

    def exact_div(self, a, b):
        raise NotImplementedError()

    def normal_factor(self, terms):
        """A unit-like scalar c such that terms/c is the canonical associate.

        The default is the identity; rings with a notion of canonical
        associate override it.
        """
        return self.one

    def elements(self):
        return None

    def format(self, c):
        return str(c)

    def __str__(self):
        return self.name

    def __repr__(self):
        return self.name

class Field(Ring):
    """A ring in which every non-zero element is a unit."""

    def is_unit(self, a):
        return not self.is_zero(a)

    def exact_div(self, a, b):
        return self.mul(a, self.inverse(b))

    def normal_factor(self, terms):
        if not terms:
            return self.one
        return terms[-1]

class IntegerRing(Ring):
    name = "ZZ"

    def coerce(self, value):
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int):
            return value
        if isinstance(value, Fraction) and value.denominator == 1:
            return value.numerator
        raise ValueError("{!r} is not an integer".format(value))

    def is_unit(self, a):
        return a in (1, -1)

    def inverse(self, a):
        if not self.is_unit(a):
            raise NotInvertible("{} is not a unit of ZZ".format(a))
        return a

    def exact_div(self, a, b):
        if b == 0:
            raise ZeroDivisionError("division of {} by zero in ZZ".format(a))
        q, r = divmod(a, b)
        if r:
            raise ArithmeticError("{} is not divisible by {} in ZZ".format(a, b))
        return q

    def normal_factor(self, terms):
        if not terms:
            return self.one
        g = reduce(math.gcd, terms, 0)
        return -g if terms[-1] < 0 else g

    def __eq__(self, other):
        return isinstance(other, IntegerRing)

    def __hash__(self):
        return hash(IntegerRing)

class RationalField(Field):
    name = "QQ"
    zero = Fraction(0)
    one = Fraction(1)

    def coerce(self, value):
        if isinstance(value, (int, Fraction)):
            return Fraction(value)
        raise ValueError("{!r} is not a rational number".format(value))

    def inverse(self, a):
        if a == 0:
            raise NotInvertible("0 is not a unit of QQ")
        return 1 / a

    def __eq__(self, other):
        return isinstance(other, RationalField)

    def __hash__(self):
        return hash(RationalField)

def _is_prime(n):
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True

class PrimeField(Field):
    """Integers modulo a prime; elements are ints in range(p)."""

    def __init__(self, p):
        if not _is_prime(p):
            raise ValueError("GF({}) is not a field: {} is not prime".format(p, p))
        self.p = p
        self.characteristic = p
        self.name = "GF({})".format(p)

    def coerce(self, value):
        if isinstance(value, bool):
            value = int(value)
        if isinstance(value, int):
            return value % self.p
        if isinstance(value, Fraction):
            den = value.denominator % self.p
            if den == 0:
                raise ValueError("{} has no image in {}".format(value, self.name))
            return (value.numerator * self.inverse(den)) % self.p
        raise ValueError("{!r} is not an element of {}".format(value, self.name))

    def add(self, a, b):
        return (a + b) % self.p

    def neg(self, a):
        return (-a) % self.p

    def mul(self, a, b):
        return (a * b) % self.p

    def inverse(self, a):
        if a % self.p == 0:
            raise NotInvertible("0 is not a unit of {}".format(self.name))
        return pow(a, self.p - 2, self.p)

    def elements(self):
        return range(self.p)

    def __eq__(self, other):
        return isinstance(other, PrimeField) and other.p == self.p

    def __hash__(self):
        return hash((PrimeField, self.p))

ZZ = IntegerRing()
QQ = RationalField()

def GF(p):
    return PrimeField(p)

def ring_from_name(name):
    """Look up a ring by name: "ZZ", "QQ", "GF(7)" or "GF7"."""
    name = name.strip()
    if name.upper() == "ZZ":
        return ZZ
    if name.upper() == "QQ":
        return QQ
    m = re.match(r"^GF\(?(\d+)\)?$", name, re.IGNORECASE)
    if m:
        return PrimeField(int(m.group(1)))
    raise ValueError("unknown ring {!r}".format(name))

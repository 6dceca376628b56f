"""Class for representing polynomials of one variable over a coefficient ring."""

import functools

from polydiv.common import product
from polydiv.rings import QQ, Field, UnsupportedRing

@functools.total_ordering
class Polynomial(object):
    """A dense polynomial: terms[i] is the coefficient of X^i.

    Polynomials are immutable.  The highest coefficient is never zero, so the
    zero polynomial is the one with no terms at all.
    """
    __slots__ = ("terms", "ring")

    def __init__(self, terms=(), ring=QQ):
        terms = [ring.coerce(t) for t in terms]
        while terms and ring.is_zero(terms[-1]):
            terms.pop()
        self.terms = tuple(terms)
        self.ring = ring

    @classmethod
    def constant(cls, c, ring=QQ):
        return cls([c], ring)

    @classmethod
    def monomial(cls, c, n, ring=QQ):
        assert n >= 0
        return cls([0] * n + [c], ring)

    @classmethod
    def X(cls, ring=QQ):
        return cls([0, 1], ring)

    @classmethod
    def linear_factor(cls, x, ring=QQ):
        """The polynomial X - x."""
        return cls([ring.neg(ring.coerce(x)), 1], ring)

    @classmethod
    def from_roots(cls, roots, ring=QQ):
        return product((cls.linear_factor(x, ring) for x in roots), one=cls.constant(1, ring))

    def __hash__(self):
        return hash((self.ring, self.terms))

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.ring == other.ring and self.terms == other.terms

    def __lt__(self, other):
        if len(self.terms) != len(other.terms):
            return len(self.terms) < len(other.terms)
        for i in reversed(range(len(self.terms))):
            self_term = self.terms[i]
            other_term = other.terms[i]
            if self_term < other_term:
                return True
            if other_term < self_term:
                return False
        return False

    def __bool__(self):
        return bool(self.terms)

    def format(self, variable="x"):
        if not self.terms:
            return "0"
        ring = self.ring
        s = ""
        for i in reversed(range(len(self.terms))):
            c = self.terms[i]
            if ring.is_zero(c):
                continue
            negative = ring.characteristic == 0 and c < 0
            if negative:
                c = -c
            if s:
                s += " - " if negative else " + "
            elif negative:
                s += "-"
            if i == 0:
                s += ring.format(c)
                continue
            if c != ring.one:
                s += ring.format(c)
            s += variable if i == 1 else "{}^{}".format(variable, i)
        return s

    def __str__(self):
        return self.format()

    def __repr__(self):
        return "Polynomial({!r}, {!r})".format(self.terms, self.ring)

    def size(self):
        return len(self.terms)

    def degree(self):
        """Degree of the polynomial; -1 for the zero polynomial."""
        return len(self.terms) - 1

    def get_coefficient(self, i):
        if i >= len(self.terms):
            return self.ring.zero
        return self.terms[i]

    def lead(self):
        if not self.terms:
            return self.ring.zero
        return self.terms[-1]

    def is_zero(self):
        return not self.terms

    def is_constant(self):
        return len(self.terms) <= 1

    def is_monic(self):
        return bool(self.terms) and self.terms[-1] == self.ring.one

    def _operand(self, other):
        if isinstance(other, Polynomial):
            self._check(other)
            return other
        return Polynomial.constant(other, self.ring)

    def _check(self, other):
        assert isinstance(other, Polynomial), "{!r} is not a polynomial".format(other)
        assert self.ring == other.ring, "cannot mix polynomials over {} and {}".format(self.ring, other.ring)

    def __add__(self, other):
        other = self._operand(other)
        ring = self.ring
        terms = [ring.zero] * max(len(self.terms), len(other.terms))
        for i in range(len(terms)):
            terms[i] = ring.add(self.get_coefficient(i), other.get_coefficient(i))
        return Polynomial(terms, ring)

    __radd__ = __add__

    def __neg__(self):
        return Polynomial((self.ring.neg(t) for t in self.terms), self.ring)

    def __sub__(self, other):
        return self + (-self._operand(other))

    def __rsub__(self, other):
        return self._operand(other) - self

    def __mul__(self, other):
        if not isinstance(other, Polynomial):
            return self.scale(other)
        self._check(other)
        ring = self.ring
        if not self.terms or not other.terms:
            return Polynomial((), ring)
        terms = [ring.zero] * (len(self.terms) + len(other.terms) - 1)
        for i, a in enumerate(self.terms):
            if ring.is_zero(a):
                continue
            for j, b in enumerate(other.terms):
                terms[i + j] = ring.add(terms[i + j], ring.mul(a, b))
        return Polynomial(terms, ring)

    def __rmul__(self, other):
        return self.scale(other)

    def __pow__(self, n):
        assert isinstance(n, int) and n >= 0, "exponent must be a non-negative integer"
        res = Polynomial.constant(1, self.ring)
        base = self
        while n:
            if n & 1:
                res = res * base
            base = base * base
            n >>= 1
        return res

    def scale(self, c):
        ring = self.ring
        c = ring.coerce(c)
        return Polynomial((ring.mul(c, t) for t in self.terms), ring)

    def shift(self, m):
        """Multiply by X^m."""
        assert m >= 0
        if not self.terms:
            return self
        return Polynomial([self.ring.zero] * m + list(self.terms), self.ring)

    def evaluate(self, x):
        ring = self.ring
        x = ring.coerce(x)
        res = ring.zero
        for c in reversed(self.terms):
            res = ring.add(ring.mul(res, x), c)
        return res

    def derivative(self):
        ring = self.ring
        return Polynomial(
            (ring.mul(ring.coerce(i), self.terms[i]) for i in range(1, len(self.terms))),
            ring)

    def monic(self):
        if not isinstance(self.ring, Field):
            raise UnsupportedRing("monic polynomials need a field, not {}".format(self.ring))
        if not self.terms:
            return self
        return self.scale(self.ring.inverse(self.lead()))

    def change_ring(self, ring):
        return Polynomial(self.terms, ring)

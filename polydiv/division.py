"""Euclidean division and pseudo-division of polynomials.

Important functions:
 - pseudo_divide: division over any commutative ring, scaled by a power of
   the divisor's leading coefficient
 - divide: exact division when the divisor's leading coefficient is a unit,
   pseudo-division otherwise
 - div, mod, scale_exponent: the three components of `divide`
 - divides, associated: divisibility and association (equality up to a unit)

Division by the zero polynomial is not an error: dividing p by 0 yields
(0, 0, p), so that lead(q)^k * p == quotient * q + remainder holds
unconditionally.
"""

from polydiv.polynomials import Polynomial
from polydiv.common import typechecked
from polydiv.logging import task, event

class DivisionResult(object):
    """The triple (k, quotient, remainder) of a division of p by q.

    It satisfies lead(q)^k * p == quotient * q + remainder, and the remainder
    is smaller than q whenever q is non-zero.
    """
    __slots__ = ("scale_exponent", "quotient", "remainder")

    def __init__(self, scale_exponent, quotient, remainder):
        self.scale_exponent = scale_exponent
        self.quotient = quotient
        self.remainder = remainder

    def __iter__(self):
        return iter((self.scale_exponent, self.quotient, self.remainder))

    def __eq__(self, other):
        return isinstance(other, DivisionResult) and tuple(self) == tuple(other)

    def __hash__(self):
        return hash(tuple(self))

    def __repr__(self):
        return "DivisionResult({!r}, {!r}, {!r})".format(*self)

    def reconstructs(self, p, q):
        ring = p.ring
        c = ring.power(q.lead(), self.scale_exponent) if q else ring.one
        return p.scale(c) == self.quotient * q + self.remainder

def _zero(ring):
    return Polynomial((), ring)

@typechecked
def pseudo_divide(p : Polynomial, q : Polynomial) -> DivisionResult:
    """Pseudo-division of p by q over an arbitrary commutative ring.

    Every step multiplies the running quotient and remainder by lead(q), so
    k counts the steps taken even when lead(q) happens to be a unit.
    """
    ring = p.ring
    if q.is_zero():
        return DivisionResult(0, _zero(ring), p)
    lq = q.lead()
    k = 0
    quo = _zero(ring)
    rem = p
    with task("pseudo_divide", p_size=p.size(), q_size=q.size()):
        while rem.size() >= q.size():
            m = Polynomial.monomial(rem.lead(), rem.size() - q.size(), ring)
            quo = quo.scale(lq) + m
            rem = rem.scale(lq) - m * q
            k += 1
            event("step {}: remainder size {}".format(k, rem.size()))
    return DivisionResult(k, quo, rem)

@typechecked
def divide(p : Polynomial, q : Polynomial) -> DivisionResult:
    """Divide p by q, exactly when possible.

    When lead(q) is a unit the result has k = 0 and p == quotient * q +
    remainder.  Otherwise this is `pseudo_divide`.
    """
    ring = p.ring
    if q.is_zero():
        return DivisionResult(0, _zero(ring), p)
    if not ring.is_unit(q.lead()):
        return pseudo_divide(p, q)
    inv = ring.inverse(q.lead())
    quo = _zero(ring)
    rem = p
    with task("divide", p_size=p.size(), q_size=q.size()):
        while rem.size() >= q.size():
            m = Polynomial.monomial(ring.mul(rem.lead(), inv), rem.size() - q.size(), ring)
            quo = quo + m
            rem = rem - m * q
            event("remainder size {}".format(rem.size()))
    return DivisionResult(0, quo, rem)

def div(p, q):
    return divide(p, q).quotient

def mod(p, q):
    return divide(p, q).remainder

def scale_exponent(p, q):
    return divide(p, q).scale_exponent

def pseudo_div(p, q):
    return pseudo_divide(p, q).quotient

def pseudo_mod(p, q):
    return pseudo_divide(p, q).remainder

@typechecked
def divides(d : Polynomial, p : Polynomial) -> bool:
    """True iff d divides p.  Only the zero polynomial is divisible by zero."""
    return mod(p, d).is_zero()

@typechecked
def associated(p : Polynomial, q : Polynomial) -> bool:
    """True iff p and q divide each other, i.e. they differ by a unit factor."""
    return divides(p, q) and divides(q, p)

def power_mod(base, e, modulus):
    """base^e reduced modulo `modulus`, by repeated squaring."""
    assert e >= 0
    res = mod(Polynomial.constant(1, base.ring), modulus)
    base = mod(base, modulus)
    while e:
        if e & 1:
            res = mod(res * base, modulus)
        base = mod(base * base, modulus)
        e >>= 1
    return res

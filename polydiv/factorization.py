"""Roots and irreducibility over finite fields.

Both questions are only decidable here by exhausting the coefficient ring or
by exploiting its Frobenius map, so rings without `elements()` raise
UnsupportedRing.
"""

from collections import OrderedDict

from polydiv.polynomials import Polynomial
from polydiv.rings import PrimeField, UnsupportedRing
from polydiv.division import power_mod
from polydiv.gcd import gcd, multiplicity, is_root
from polydiv.logging import task, event

def roots(p):
    """Map each root of p in its (finite) coefficient ring to its multiplicity."""
    elements = p.ring.elements()
    if elements is None:
        raise UnsupportedRing("cannot enumerate the roots of a polynomial over {}".format(p.ring))
    if p.is_zero():
        raise ValueError("every element is a root of the zero polynomial")
    res = OrderedDict()
    for x in elements:
        if is_root(p, x):
            res[x] = multiplicity(x, p)
    return res

def is_irreducible(p):
    """Whether p is non-constant and has no divisors besides units and associates.

    Uses Ben-Or's test: a polynomial f of degree n over GF(q) is irreducible
    iff gcd(f, X^(q^i) - X) is constant for every 1 <= i <= n/2.
    """
    ring = p.ring
    if not isinstance(ring, PrimeField):
        raise UnsupportedRing("irreducibility is only decided over prime fields, not {}".format(ring))
    n = p.degree()
    if n < 1:
        return False
    if n == 1:
        return True
    f = p.monic()
    x = Polynomial.X(ring)
    h = x
    with task("is_irreducible", degree=n):
        for i in range(1, n // 2 + 1):
            h = power_mod(h, ring.p, f)
            g = gcd(f, h - x)
            event("i={}: gcd size {}".format(i, g.size()))
            if not g.is_constant():
                return False
    return True

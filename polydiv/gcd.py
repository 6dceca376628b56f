"""Greatest common divisors and the predicates built on them.

Important functions:
 - gcd: Euclid's algorithm over `division.mod`
 - egcd: Bezout cofactors (u, v) with u*p + v*q associated to gcd(p, q)
 - coprime: the gcd is a non-zero constant
 - gdcop: the greatest divisor of p that is coprime to q
 - multiplicity: how often (X - x) divides p
 - normalize: the canonical associate of a polynomial

None of the gcds computed here are normalized; over a ring they are only
determined up to association.  Pass them through `normalize` before
comparing them for equality.
"""

from polydiv.polynomials import Polynomial
from polydiv.rings import UnsupportedRing
from polydiv.division import divide, div, mod, divides
from polydiv.common import typechecked
from polydiv.logging import task, event

@typechecked
def gcd(p : Polynomial, q : Polynomial) -> Polynomial:
    if p.size() < q.size():
        p, q = q, p
    if p.is_zero():
        return q
    with task("gcd", p_size=p.size(), q_size=q.size()):
        # each round shrinks q, so size(p) rounds always suffice
        for _ in range(p.size()):
            r = mod(p, q)
            if r.is_zero():
                return q
            event("remainder size {}".format(r.size()))
            p, q = q, r
        return r

def gcd_all(polys, ring=None):
    polys = list(polys)
    if ring is None:
        assert polys, "gcd_all of nothing needs an explicit ring"
        ring = polys[0].ring
    res = Polynomial((), ring)
    for p in polys:
        res = gcd(res, p)
    return res

def _egcd(p, q, budget):
    # Unroll the recursion egcd(p, q) -> egcd(q, p mod q), then apply the
    # back-substitution from the innermost call outwards.
    ring = p.ring
    frames = []
    while budget > 0 and not q.is_zero():
        k, quo, rem = divide(p, q)
        frames.append((ring.power(q.lead(), k), quo))
        p, q = q, rem
        budget -= 1
    u = Polynomial.constant(1, ring)
    v = Polynomial((), ring)
    for c, quo in reversed(frames):
        u, v = v.scale(c), u - v * quo
    return u, v

@typechecked
def egcd(p : Polynomial, q : Polynomial) -> (Polynomial, Polynomial):
    """Bezout cofactors (u, v): u*p + v*q is associated to gcd(p, q).

    The cofactors are small: size(u) <= size(q) and size(v) <= size(p).
    """
    with task("egcd", p_size=p.size(), q_size=q.size()):
        if q.size() <= p.size():
            return _egcd(p, q, q.size())
        v, u = _egcd(q, p, p.size())
        return u, v

@typechecked
def coprime(p : Polynomial, q : Polynomial) -> bool:
    return gcd(p, q).size() == 1

@typechecked
def gdcop(q : Polynomial, p : Polynomial) -> Polynomial:
    """The greatest divisor of p that is coprime to q.

    For p = 0 this is 1 when q = 0 and 0 otherwise.
    """
    ring = p.ring
    for _ in range(p.size()):
        if coprime(p, q):
            return p
        p = div(p, gcd(p, q))
    return Polynomial.constant(1 if q.is_zero() else 0, ring)

def is_root(p, x):
    return p.ring.is_zero(p.evaluate(x))

def multiplicity(x, p):
    """The largest n such that (X - x)^n divides p; 0 when p is zero."""
    factor = Polynomial.linear_factor(x, p.ring)
    n = 0
    # X - x is monic, so these divisions are exact over every ring
    while not p.is_constant() and divides(factor, p):
        p = div(p, factor)
        n += 1
    return n

@typechecked
def lcm(p : Polynomial, q : Polynomial) -> Polynomial:
    if p.is_zero() or q.is_zero():
        return Polynomial((), p.ring)
    return div(p * q, gcd(p, q))

def normalize(p):
    """The canonical associate of p: monic over a field, primitive over ZZ."""
    ring = p.ring
    if p.is_zero():
        return p
    c = ring.normal_factor(p.terms)
    return Polynomial((ring.exact_div(t, c) for t in p.terms), ring)

def is_square_free(p):
    return coprime(p, p.derivative())

def square_free_part(p):
    """p with every repeated factor reduced to a single copy."""
    ring = p.ring
    if ring.characteristic != 0:
        raise UnsupportedRing("square-free parts need characteristic 0, not {}".format(ring))
    if p.is_zero():
        return p
    return normalize(div(p, gcd(p, p.derivative())))

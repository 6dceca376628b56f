"""Independent re-checking of polynomial identities with Z3.

Important functions:
 - equivalent: prove that two polynomials are equal
 - counterexample: find a point where two polynomials differ
 - check_division: prove lead(q)^k * p == quotient * q + remainder
 - check_bezout: prove that u*p + v*q is associated to gcd(p, q)

Over rings of characteristic 0 the identities are stated as equalities of
real functions (for all x), which is equivalent to coefficient equality.
Over GF(p) that equivalence fails (x^p and x agree everywhere), so there the
coefficients are compared modulo p instead.
"""

import threading

import z3

from polydiv.rings import PrimeField, UnsupportedRing
from polydiv.gcd import gcd
from polydiv.opts import Option
from polydiv.logging import task

solver_timeout = Option("solver-timeout", int, 10000, metavar="MS", description="Z3 timeout in milliseconds; 0 disables it")

class SolverReportedUnknown(Exception):
    pass

_LOCK = threading.Lock()

def _new_solver():
    with _LOCK:
        ctx = z3.Context()
        solver = z3.Solver(ctx=ctx)
        if solver_timeout.value > 0:
            solver.set("timeout", solver_timeout.value)
    return ctx, solver

def _real(c, ctx):
    return z3.RealVal(str(c), ctx)

def _encode(p, x, ctx):
    res = _real(0, ctx)
    for c in reversed(p.terms):
        res = res * x + _real(c, ctx)
    return res

def _check(solver):
    with task("invoke Z3"):
        res = solver.check()
    if res == z3.unknown:
        raise SolverReportedUnknown("z3 reported unknown: {}".format(solver.reason_unknown()))
    return res

class _ModularTerms(object):
    """A polynomial over GF(p) as a list of z3 integer coefficient terms.

    Sums and products are built inside z3, so the coefficients of an
    identity are computed by the solver, not by polynomial arithmetic.
    """
    __slots__ = ("coefficients", "ctx")

    def __init__(self, coefficients, ctx):
        self.coefficients = list(coefficients)
        self.ctx = ctx

    def get_coefficient(self, i):
        if i < len(self.coefficients):
            return self.coefficients[i]
        return z3.IntVal(0, self.ctx)

    def __add__(self, other):
        n = max(len(self.coefficients), len(other.coefficients))
        return _ModularTerms((self.get_coefficient(i) + other.get_coefficient(i) for i in range(n)), self.ctx)

    def __mul__(self, other):
        if not self.coefficients or not other.coefficients:
            return _ModularTerms((), self.ctx)
        res = [z3.IntVal(0, self.ctx)] * (len(self.coefficients) + len(other.coefficients) - 1)
        for i, a in enumerate(self.coefficients):
            for j, b in enumerate(other.coefficients):
                res[i + j] = res[i + j] + a * b
        return _ModularTerms(res, self.ctx)

def _prove_identity(ring, lhs, rhs):
    """Prove lhs == rhs, where each side is a function (enc, const) -> term.

    `enc` turns a Polynomial into a term and `const` a ring element into a
    term; the two sides combine terms with + and *.
    """
    ctx, solver = _new_solver()
    if ring.characteristic == 0:
        x = z3.Real("x", ctx)
        enc = lambda p: _encode(p, x, ctx)
        const = lambda c: _real(c, ctx)
        solver.add(lhs(enc, const) != rhs(enc, const))
    elif isinstance(ring, PrimeField):
        enc = lambda p: _ModularTerms((z3.IntVal(c, ctx) for c in p.terms), ctx)
        const = lambda c: _ModularTerms([z3.IntVal(c, ctx)], ctx)
        l = lhs(enc, const)
        r = rhs(enc, const)
        modulus = z3.IntVal(ring.p, ctx)
        differs = [z3.BoolVal(False, ctx)]
        for i in range(max(len(l.coefficients), len(r.coefficients))):
            a = l.get_coefficient(i)
            b = r.get_coefficient(i)
            differs.append((a - b) % modulus != 0)
        solver.add(z3.Or(differs))
    else:
        raise UnsupportedRing("cannot certify identities over {}".format(ring))
    return _check(solver) == z3.unsat

def equivalent(p, q):
    assert p.ring == q.ring
    return _prove_identity(p.ring,
        lambda enc, const: enc(p),
        lambda enc, const: enc(q))

def counterexample(p, q):
    """A point where p and q evaluate differently, or None if they are equal."""
    assert p.ring == q.ring
    if p.ring.characteristic != 0:
        raise UnsupportedRing("counterexamples are only searched for in characteristic 0")
    ctx, solver = _new_solver()
    x = z3.Real("x", ctx)
    solver.add(_encode(p, x, ctx) != _encode(q, x, ctx))
    if _check(solver) == z3.unsat:
        return None
    val = solver.model().eval(x, model_completion=True)
    if isinstance(val, z3.AlgebraicNumRef):
        val = val.approx(20)
    return val.as_fraction()

def check_division(p, q, result):
    k, quo, rem = result
    ring = p.ring
    if not q.is_zero() and rem.size() >= q.size():
        return False
    c = ring.power(q.lead(), k) if not q.is_zero() else ring.one
    return _prove_identity(ring,
        lambda enc, const: const(c) * enc(p),
        lambda enc, const: enc(quo) * enc(q) + enc(rem))

def check_bezout(p, q, u, v):
    g = gcd(p, q)
    h = u * p + v * q
    if g.is_zero() or h.is_zero():
        return g.is_zero() and h.is_zero()
    # u*p + v*q and g are associated iff lead(h) * g == lead(g) * h
    return _prove_identity(p.ring,
        lambda enc, const: const(h.lead()) * enc(g),
        lambda enc, const: const(g.lead()) * (enc(u) * enc(p) + enc(v) * enc(q)))

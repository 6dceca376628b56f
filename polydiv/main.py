#!/usr/bin/env python

"""
Command-line front-end for polydiv. Run with --help for options.
"""

import sys
import argparse

from polydiv import opts
from polydiv import parse
from polydiv import rings
from polydiv import division
from polydiv import gcd
from polydiv import factorization
from polydiv import certify
from polydiv.logging import dump_profile

profile = opts.Option("profile", bool, False, description="Write task timings to --profile-path when done")

def _div(args, p, q):
    res = division.divide(p, q)
    _print_division(args, res)
    _certify(args, lambda: certify.check_division(p, q, res))

def _pdiv(args, p, q):
    res = division.pseudo_divide(p, q)
    _print_division(args, res)
    _certify(args, lambda: certify.check_division(p, q, res))

def _gcd(args, p, q):
    print(_fmt(args, gcd.normalize(gcd.gcd(p, q))))

def _egcd(args, p, q):
    u, v = gcd.egcd(p, q)
    print("u = {}".format(_fmt(args, u)))
    print("v = {}".format(_fmt(args, v)))
    print("u*p + v*q = {}".format(_fmt(args, u * p + v * q)))
    _certify(args, lambda: certify.check_bezout(p, q, u, v))

def _coprime(args, p, q):
    print("yes" if gcd.coprime(p, q) else "no")

def _gdcop(args, p, q):
    # greatest divisor of the first polynomial that is coprime to the second
    print(_fmt(args, gcd.normalize(gcd.gdcop(q, p))))

def _lcm(args, p, q):
    print(_fmt(args, gcd.normalize(gcd.lcm(p, q))))

def _mup(args, p, x):
    print(gcd.multiplicity(x, p))

def _roots(args, p):
    for x, n in factorization.roots(p).items():
        print("{} (multiplicity {})".format(p.ring.format(x), n))

def _irreducible(args, p):
    print("yes" if factorization.is_irreducible(p) else "no")

def _squarefree(args, p):
    print("yes" if gcd.is_square_free(p) else "no")
    if p.ring.characteristic == 0:
        print("square-free part: {}".format(_fmt(args, gcd.square_free_part(p))))

# name -> (handler, kind of second argument: "poly", "element" or None)
_COMMANDS = {
    "div":         (_div,         "poly"),
    "pdiv":        (_pdiv,        "poly"),
    "gcd":         (_gcd,         "poly"),
    "egcd":        (_egcd,        "poly"),
    "coprime":     (_coprime,     "poly"),
    "gdcop":       (_gdcop,       "poly"),
    "lcm":         (_lcm,         "poly"),
    "mup":         (_mup,         "element"),
    "roots":       (_roots,       None),
    "irreducible": (_irreducible, None),
    "squarefree":  (_squarefree,  None),
}

def _fmt(args, p):
    return p.format(args.var)

def _print_division(args, res):
    print("k = {}".format(res.scale_exponent))
    print("quotient = {}".format(_fmt(args, res.quotient)))
    print("remainder = {}".format(_fmt(args, res.remainder)))

def _certify(args, check):
    if not args.certify:
        return
    if not check():
        print("Certification FAILED")
        sys.exit(2)
    print("Certified by Z3")

def run(argv=None):
    """Entry point for the polydiv executable.

    This procedure reads sys.argv and executes the requested operation.
    """

    parser = argparse.ArgumentParser(description="Polynomial division, GCD and Bezout cofactors.")
    parser.add_argument("-r", "--ring", metavar="R", default="QQ", help="Coefficient ring: ZZ, QQ or GF(p); default=QQ")
    parser.add_argument("--var", metavar="NAME", default="x", help="Name of the polynomial variable; default=x")
    parser.add_argument("-c", "--certify", action="store_true", help="Re-check division and Bezout identities with Z3")

    internal_opts = parser.add_argument_group("Internal parameters")
    opts.setup(internal_opts)

    parser.add_argument("command", choices=sorted(_COMMANDS), help="Operation to perform")
    parser.add_argument("p", help="First polynomial")
    parser.add_argument("q", nargs="?", default=None, help="Second polynomial (or ring element for mup)")
    args = parser.parse_args(argv)
    opts.read(args)

    handler, second = _COMMANDS[args.command]
    try:
        ring = rings.ring_from_name(args.ring)
        p = parse.parse_polynomial(args.p, ring, args.var)
        operands = [p]
        if second is None and args.q is not None:
            parser.error("{} takes one argument".format(args.command))
        if second is not None:
            if args.q is None:
                parser.error("{} needs two arguments".format(args.command))
            if second == "poly":
                operands.append(parse.parse_polynomial(args.q, ring, args.var))
            else:
                x = parse.parse_polynomial(args.q, ring, args.var)
                if not x.is_constant():
                    parser.error("{} is not an element of {}".format(args.q, ring))
                operands.append(x.get_coefficient(0))
        handler(args, *operands)
    except (ValueError, parse.ParseError, rings.UnsupportedRing, certify.SolverReportedUnknown) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)
    finally:
        if profile.value:
            dump_profile()

if __name__ == "__main__":
    run()

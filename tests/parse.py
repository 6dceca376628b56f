import unittest
from fractions import Fraction

from polydiv.parse import parse_polynomial, tokenize, ParseError
from polydiv.polynomials import Polynomial
from polydiv.rings import ZZ, QQ, GF

class TestParser(unittest.TestCase):

    def test_tokens(self):
        self.assertEqual([t.type for t in tokenize("3x^2")], ["NUM", "WORD", "OP_POW", "NUM"])
        self.assertEqual([t.type for t in tokenize("x**2 * 1/2")], ["WORD", "OP_POW", "NUM", "OP_TIMES", "NUM", "OP_SLASH", "NUM"])

    def test_simple(self):
        self.assertEqual(parse_polynomial("x^3 + 1"), Polynomial([1, 0, 0, 1]))
        self.assertEqual(parse_polynomial("7"), Polynomial([7]))
        self.assertEqual(parse_polynomial("x", ZZ), Polynomial.X(ZZ))

    def test_operators(self):
        self.assertEqual(parse_polynomial("3x**2 - 2*x + 1/2"), Polynomial([Fraction(1, 2), -2, 3]))
        self.assertEqual(parse_polynomial("-(x + 1)^2"), Polynomial([-1, -2, -1]))
        self.assertEqual(parse_polynomial("(x - 1)(x + 1)"), Polynomial([-1, 0, 1]))
        self.assertEqual(parse_polynomial("2*x*x"), Polynomial([0, 0, 2]))
        self.assertEqual(parse_polynomial("+x - x"), Polynomial())

    def test_rings(self):
        self.assertEqual(parse_polynomial("x + 6", GF(5)), Polynomial([1, 1], GF(5)))
        self.assertEqual(parse_polynomial("1/2", GF(7)), Polynomial([4], GF(7)))
        with self.assertRaises(ParseError):
            parse_polynomial("x + 1/2", ZZ)

    def test_variable(self):
        self.assertEqual(parse_polynomial("t^2 + t", variable="t"), Polynomial([0, 1, 1]))
        with self.assertRaises(ParseError):
            parse_polynomial("y + 1")

    def test_errors(self):
        for s in ["x^", "", "x $ 1", "1/0", "(x + 1", "x^-1", "x + * 2"]:
            with self.assertRaises(ParseError, msg=s):
                parse_polynomial(s)

    def test_str_round_trip(self):
        for p in [Polynomial([1, -1, 0, 1], QQ), Polynomial([Fraction(1, 2), 0, -3], QQ), Polynomial([0, Fraction(-2, 3)], QQ), Polynomial()]:
            self.assertEqual(parse_polynomial(str(p)), p)

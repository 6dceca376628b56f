import unittest
from fractions import Fraction

from polydiv.polynomials import Polynomial
from polydiv.rings import ZZ, QQ, GF, UnsupportedRing

X = Polynomial.X(QQ)

class TestPolynomials(unittest.TestCase):

    def test_sorting(self):
        self.assertLess(Polynomial([2019, 944, 95], ZZ), Polynomial([2012, 945, 95], ZZ))
        self.assertGreater(Polynomial([2012, 945, 95], ZZ), Polynomial([2019, 944, 95], ZZ))
        self.assertLess(Polynomial([5], ZZ), Polynomial([0, 1], ZZ))

    def test_trailing_zeros_are_stripped(self):
        self.assertEqual(Polynomial([1, 0, 0]), Polynomial([1]))
        self.assertEqual(Polynomial([1, 0, 0]).terms, (Fraction(1),))
        zero = Polynomial([0, 0])
        assert zero.is_zero()
        self.assertEqual(zero.size(), 0)
        self.assertEqual(zero.degree(), -1)
        self.assertEqual(zero.lead(), 0)

    def test_coefficients_are_coerced(self):
        p = Polynomial([7, 5], GF(5))
        self.assertEqual(p.terms, (2,))
        with self.assertRaises(ValueError):
            Polynomial([Fraction(1, 2)], ZZ)

    def test_equality_depends_on_ring(self):
        self.assertNotEqual(Polynomial([1, 1], ZZ), Polynomial([1, 1], QQ))
        self.assertEqual(hash(Polynomial([1, 1], ZZ)), hash(Polynomial([1, 1, 0], ZZ)))

    def test_arithmetic(self):
        self.assertEqual((X + 1) * (X - 1), Polynomial([-1, 0, 1]))
        self.assertEqual((X + 1) ** 3, Polynomial([1, 3, 3, 1]))
        self.assertEqual(X ** 0, Polynomial([1]))
        self.assertEqual(-(X - 1), Polynomial([1, -1]))
        self.assertEqual(3 * X, Polynomial([0, 3]))
        self.assertEqual((X + 1) - (X + 1), Polynomial())

    def test_arithmetic_with_scalars(self):
        self.assertEqual(X + 1, Polynomial([1, 1]))
        self.assertEqual(1 + X, Polynomial([1, 1]))
        self.assertEqual(X - 1, Polynomial([-1, 1]))
        self.assertEqual(1 - X, Polynomial([1, -1]))
        self.assertEqual(X - Fraction(1, 2), Polynomial([Fraction(-1, 2), 1]))
        y = Polynomial.X(GF(5))
        self.assertEqual(7 - y, Polynomial([2, 4], GF(5)))
        self.assertEqual((y + 6).terms, (1, 1))

    def test_arithmetic_mod_p(self):
        x = Polynomial.X(GF(2))
        self.assertEqual((x + 1) ** 2, x ** 2 + 1)

    def test_mixing_rings_is_an_error(self):
        with self.assertRaises(AssertionError):
            Polynomial([1], ZZ) + Polynomial([1], QQ)

    def test_shift_and_scale(self):
        p = Polynomial([1, 2], ZZ)
        self.assertEqual(p.shift(2), Polynomial([0, 0, 1, 2], ZZ))
        self.assertEqual(p.scale(3), Polynomial([3, 6], ZZ))
        self.assertEqual(Polynomial((), ZZ).shift(3), Polynomial((), ZZ))

    def test_evaluate(self):
        self.assertEqual(Polynomial([1, 0, 1]).evaluate(2), 5)
        self.assertEqual(Polynomial([1, 0, 1], GF(5)).evaluate(2), 0)
        self.assertEqual(Polynomial().evaluate(3), 0)

    def test_derivative(self):
        self.assertEqual(Polynomial([1, 2, 3], ZZ).derivative(), Polynomial([2, 6], ZZ))
        self.assertEqual(Polynomial([4], ZZ).derivative(), Polynomial((), ZZ))
        # x^5 has a zero derivative in characteristic 5
        self.assertEqual(Polynomial.monomial(1, 5, GF(5)).derivative(), Polynomial((), GF(5)))

    def test_monic(self):
        self.assertEqual(Polynomial([1, 2]).monic(), Polynomial([Fraction(1, 2), 1]))
        self.assertEqual(Polynomial([1, 3], GF(5)).monic(), Polynomial([2, 1], GF(5)))
        assert Polynomial([1, 3], GF(5)).monic().is_monic()
        with self.assertRaises(UnsupportedRing):
            Polynomial([1, 2], ZZ).monic()

    def test_from_roots(self):
        self.assertEqual(Polynomial.from_roots([1, 2], ZZ), Polynomial([2, -3, 1], ZZ))
        self.assertEqual(Polynomial.from_roots([], ZZ), Polynomial([1], ZZ))
        self.assertEqual(Polynomial.linear_factor(3, GF(5)), Polynomial([2, 1], GF(5)))

    def test_str(self):
        self.assertEqual(str(Polynomial([1, -1, 0, 1], ZZ)), "x^3 - x + 1")
        self.assertEqual(str(Polynomial([Fraction(1, 2), 0, -3])), "-3x^2 + 1/2")
        self.assertEqual(str(Polynomial()), "0")
        self.assertEqual(Polynomial([0, 2], ZZ).format("t"), "2t")
        self.assertEqual(str(Polynomial([4, 1], GF(5))), "x + 4")

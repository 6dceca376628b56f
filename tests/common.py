import unittest

from polydiv.common import typechecked, check_type, product
from polydiv.polynomials import Polynomial

@typechecked
def _degree_pair(p : Polynomial, q : Polynomial) -> (int, int):
    return (p.degree(), q.degree())

class TestCommonUtils(unittest.TestCase):

    def test_typechecked_accepts_good_arguments(self):
        self.assertEqual(_degree_pair(Polynomial([1, 1]), Polynomial()), (1, -1))
        self.assertEqual(_degree_pair(Polynomial([1]), q=Polynomial([0, 1])), (0, 1))

    def test_typechecked_rejects_bad_arguments(self):
        with self.assertRaises(AssertionError):
            _degree_pair(Polynomial(), [1, 2])
        with self.assertRaises(AssertionError):
            _degree_pair(Polynomial(), q="x")

    def test_check_type_tuples(self):
        check_type((1, "a"), (int, str))
        with self.assertRaises(AssertionError):
            check_type((1, 2), (int, str))
        with self.assertRaises(AssertionError):
            check_type((1,), (int, int))
        check_type(None, None)

    def test_product(self):
        self.assertEqual(product([2, 3, 4]), 24)
        self.assertEqual(product([]), 1)
        x = Polynomial.X()
        self.assertEqual(product([x, x], one=Polynomial([1])), x ** 2)

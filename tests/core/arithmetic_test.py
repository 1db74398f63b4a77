import unittest

from fcalc.core import arithmetic
from fcalc.core.arithmetic import apply, divide, modulo, wrap
from fcalc.core.syntax import BinaryOp


class ArithmeticTestCase(unittest.TestCase):

    def test_wrap(self):
        should_pass = {2 ** 31: -2 ** 31, -2 ** 31 - 1: 2 ** 31 - 1, 5: 5, -5: -5, 2 ** 32: 0}
        for case, result in should_pass.items():
            self.assertEqual(result, wrap(case), case)

    def test_divide(self):
        should_pass = {(7, 2): (3, 1), (-7, 2): (-3, -1), (7, -2): (-3, 1), (-7, -2): (3, -1)}
        for (a, b), (quotient, remainder) in should_pass.items():
            self.assertEqual(quotient, divide(a, b), (a, b))
            self.assertEqual(remainder, modulo(a, b), (a, b))

        self.assertRaises(ZeroDivisionError, divide, 1, 0)
        self.assertRaises(ZeroDivisionError, modulo, 1, 0)

    def test_apply(self):
        should_pass = {("+", 2147483647, 1): -2147483648, ("==", 3, 3): 1, (">", 1, 2): 0, ("*", 6, 7): 42}
        for case, result in should_pass.items():
            self.assertEqual(result, apply(*case), case)

    def test_operators(self):
        self.assertEqual(tuple(arithmetic.OPERATORS), BinaryOp.OPERATORS)
        self.assertEqual(("+", "-", "*", "/", "%", ">", "<", "=="), BinaryOp.OPERATORS)


if __name__ == '__main__':
    unittest.main()

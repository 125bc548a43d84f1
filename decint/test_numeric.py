"""
Testing decint numeric.py
"""

import math
import unittest

from decint import BigInt
from decint.numeric import gcd
from decint.numeric import isqrt


class IsqrtTests(unittest.TestCase):

    def assertIsqrt(self, n):
        """isqrt(n)**2 <= n < (isqrt(n)+1)**2, and agreement with math.isqrt()."""
        root = isqrt(n)
        self.assertIsInstance(root, BigInt)
        self.assertLessEqual(root * root, n)
        self.assertLess(n, (root + 1) * (root + 1))
        self.assertEqual(math.isqrt(int(BigInt(n))), int(root))

    def test_spot_values(self):
        self.assertEqual(BigInt(0), isqrt(0))
        self.assertEqual(BigInt(1), isqrt(1))
        self.assertEqual(BigInt(1), isqrt(3))
        self.assertEqual(BigInt(2), isqrt(4))
        self.assertEqual(BigInt(3), isqrt(15))
        self.assertEqual(BigInt(4), isqrt(16))
        self.assertEqual(BigInt(4), isqrt(24))
        self.assertEqual(BigInt(5), isqrt(25))
        self.assertEqual(BigInt(9), isqrt(99))
        self.assertEqual(BigInt(10), isqrt(100))

    def test_big(self):
        self.assertEqual('9938079900', isqrt(BigInt('98765432109876543210')).to_string())
        self.assertEqual('1' + '0' * 50, isqrt(BigInt('1' + '0' * 100)).to_string())
        self.assertEqual('9' * 50, isqrt(BigInt('9' * 100)).to_string())

    def test_small_range(self):
        for n in range(0, 1000):
            self.assertIsqrt(n)

    def test_perfect_squares_and_neighbors(self):
        for root in (7, 31, 99, 100, 101, 999999, 10**9 + 7, 3**40, 2**70 + 1):
            square = root * root
            self.assertEqual(BigInt(root), isqrt(square))
            self.assertEqual(BigInt(root - 1), isqrt(square - 1))
            self.assertEqual(BigInt(root), isqrt(square + 1))
            self.assertIsqrt(square + 2 * root)

    def test_string_and_int_input(self):
        self.assertEqual(BigInt(12), isqrt('144'))
        self.assertEqual(BigInt(12), isqrt(150))

    def test_input_left_alone(self):
        n = BigInt(1000)
        isqrt(n)
        self.assertEqual(BigInt(1000), n)

    def test_negative(self):
        with self.assertRaises(BigInt.DomainError):
            isqrt(BigInt(-1))
        with self.assertRaises(BigInt.DomainError):
            isqrt('-98765432109876543210')
        with self.assertRaises(ValueError):
            isqrt(-4)

    def test_negative_zero_is_fine(self):
        self.assertEqual(BigInt(0), isqrt(BigInt('-0')))

    def test_logs_newton_steps(self):
        with self.assertLogs('decint.numeric', level='DEBUG') as logs:
            isqrt(BigInt('98765432109876543210'))
        self.assertTrue(any('Newton steps' in line for line in logs.output))


class GcdTests(unittest.TestCase):

    def test_spot_values(self):
        self.assertEqual(BigInt(12), gcd(BigInt('60'), BigInt('48')))
        self.assertEqual(BigInt(12), gcd(48, 60))
        self.assertEqual(BigInt(1), gcd(17, 5))
        self.assertEqual(BigInt(5), gcd(0, 5))
        self.assertEqual(BigInt(5), gcd(5, 0))
        self.assertEqual(BigInt(0), gcd(0, 0))

    def test_signs(self):
        self.assertEqual(BigInt(12), gcd(-60, 48))
        self.assertEqual(BigInt(12), gcd(60, -48))
        self.assertEqual(BigInt(12), gcd(-60, -48))
        self.assertEqual(BigInt(7), gcd(-7, 0))
        self.assertFalse(gcd(-7, 0).is_negative())

    def test_never_negative(self):
        values = [0, 1, -1, 6, -6, 35, -49, 1001, -10**20, 12345678901234567890]
        for a in values:
            for b in values:
                g = gcd(a, b)
                self.assertFalse(g.is_negative())
                self.assertEqual(math.gcd(a, b), int(g))

    def test_common_factor(self):
        g = BigInt('123456789012345678901234567890')
        for (x, y) in ((3, 5), (14, 15), (1, 1), (10**20 + 1, 10**20)):
            self.assertEqual(g, gcd(g * x, g * y))

    def test_string_input(self):
        self.assertEqual(BigInt(21), gcd('-1071', '462'))

    def test_inputs_left_alone(self):
        a = BigInt(-60)
        b = BigInt(48)
        gcd(a, b)
        self.assertEqual(BigInt(-60), a)
        self.assertEqual(BigInt(48), b)


if __name__ == '__main__':
    unittest.main(verbosity=2)

import unittest
from anybase import config
from anybase.magnitude import Magnitude

class MagnitudeTestCase(unittest.TestCase):
    def tearDown(self):
        config._reset()

    def test_zero(self):
        m = Magnitude()
        self.assertTrue(m.isZero())
        self.assertEqual(m.limbs, [0])
        self.assertEqual(int(m), 0)
        self.assertEqual(Magnitude.fromInt(0).limbs, [0])

    def test_normalize_drops_high_zero_limbs(self):
        self.assertEqual(Magnitude([7, 0, 0]).limbs, [7])
        self.assertEqual(Magnitude([0, 0]).limbs, [0])
        self.assertTrue(Magnitude([0, 0, 0]).isZero())

    def test_limb_range_checked(self):
        self.assertRaises(ValueError, Magnitude, [10**9])
        self.assertRaises(ValueError, Magnitude, [-1])
        self.assertRaises(ValueError, Magnitude, radix=1)
        self.assertRaises(ValueError, Magnitude.fromInt, -5)

    def test_explicit_zero_radix_rejected(self):
        self.assertRaises(ValueError, Magnitude, radix=0)
        self.assertRaises(ValueError, Magnitude.fromInt, 5, radix=0)

    def test_limbs_from_iterator(self):
        m = Magnitude(iter([1, 2]))
        self.assertEqual(m.limbs, [1, 2])
        self.assertEqual(int(m), 2*10**9 + 1)
        z = Magnitude(iter([0, 0]))
        self.assertEqual(z.limbs, [0])
        self.assertTrue(z.isZero())
        self.assertTrue(Magnitude(iter(())).isZero())

    def test_limbs_not_shared(self):
        L = [3, 4]
        m = Magnitude(L)
        m.addSmall(1)
        self.assertEqual(L, [3, 4])

    def test_mul_add_carry(self):
        m = Magnitude()
        for d in '98765432109876543210':
            m.mulSmall(10)
            m.addSmall(int(d))
        self.assertEqual(int(m), 98765432109876543210)
        self.assertEqual(len(m), 3)
        for l in m.limbs:
            self.assertTrue(0 <= l < 10**9)

    def test_mul_by_zero_and_one(self):
        m = Magnitude.fromInt(123456789012345)
        m.mulSmall(1)
        self.assertEqual(int(m), 123456789012345)
        m.mulSmall(0)
        self.assertTrue(m.isZero())

    def test_negative_operands(self):
        m = Magnitude.fromInt(10)
        self.assertRaises(ValueError, m.mulSmall, -1)
        self.assertRaises(ValueError, m.addSmall, -1)
        self.assertRaises(ValueError, m.divModSmall, -1)
        self.assertRaises(ZeroDivisionError, m.divModSmall, 0)

    def test_div_mod(self):
        n = 3**200
        m = Magnitude.fromInt(n)
        digits = []
        while not m.isZero():
            digits.append(m.divModSmall(7))
        v = 0
        for d in reversed(digits):
            v = v*7 + d
        self.assertEqual(v, n)
        self.assertEqual(m.limbs, [0])

    def test_div_normalizes(self):
        m = Magnitude.fromInt(10**9)
        self.assertEqual(m.limbs, [0, 1])
        self.assertEqual(m.divModSmall(10), 0)
        self.assertEqual(m.limbs, [100000000])

    def test_config_radix(self):
        config.limbRadix = 2**32
        m = Magnitude.fromInt(2**64 + 5)
        self.assertEqual(m.radix, 2**32)
        self.assertEqual(m.limbs, [5, 0, 1])
        self.assertEqual(m, Magnitude.fromInt(2**64 + 5, radix=10))
        self.assertNotEqual(m, Magnitude.fromInt(2**64 + 6))

    def test_tiny_radix(self):
        m = Magnitude(radix=2)
        for _ in range(10):
            m.mulSmall(3)
            m.addSmall(2)
        self.assertEqual(int(m), 3**10 - 1)
        self.assertTrue(set(m.limbs) <= {0, 1})

    def test_repr(self):
        self.assertEqual(repr(Magnitude([1, 2], radix=10)), 'Magnitude([1, 2], radix=10)')

if __name__ == '__main__':
    unittest.main()

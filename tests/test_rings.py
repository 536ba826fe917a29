import unittest
from zpoly import rings
from zpoly.rings import RingKind
from zpoly.errors import InvalidCharacteristic, UnsupportedRing


class Arithmetic(unittest.TestCase):

    def test_kinds(self):
        self.assertIs(rings.ring(0).kind, RingKind.INTEGERS)
        self.assertIs(rings.ring(2).kind, RingKind.PRIME_FIELD)
        self.assertIs(rings.ring(101).kind, RingKind.PRIME_FIELD)
        self.assertIs(rings.ring(1).kind, RingKind.COMPOSITE)
        self.assertIs(rings.ring(6).kind, RingKind.COMPOSITE)
        self.assertIs(rings.ring(5), rings.ring(5))
        self.assertTrue(rings.ring(7).is_field)
        self.assertFalse(rings.ring(0).is_field)
        self.assertFalse(rings.ring(9).is_field)
        self.assertEqual(repr(rings.ring(0)), 'Z')
        self.assertEqual(repr(rings.ring(5)), 'GF(5)')
        self.assertEqual(repr(rings.ring(6)), 'Z/6Z')

    def test_reduce(self):
        self.assertEqual(rings.ring(0).reduce(-7), -7)
        self.assertEqual(rings.ring(5).reduce(-1), 4)
        self.assertEqual(rings.ring(5).reduce(12), 2)
        self.assertEqual(rings.ring(6).reduce(6), 0)
        self.assertEqual(rings.ring(1).reduce(3), 0)

    def test_invert(self):
        self.assertEqual(rings.ring(7).invert(3), 5)
        self.assertEqual(rings.ring(2).invert(1), 1)
        self.assertRaises(UnsupportedRing, rings.ring(6).invert, 5)
        self.assertRaises(UnsupportedRing, rings.ring(0).invert, 1)

    def test_errors(self):
        self.assertRaises(InvalidCharacteristic, rings.ring, -1)
        self.assertRaises(ValueError, rings.ring, -5)
        self.assertRaises(TypeError, rings.ring, 2.5)


if __name__ == "__main__":
    unittest.main()

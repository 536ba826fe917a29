import unittest
from zpoly.terms import TermStore


class Storage(unittest.TestCase):

    def test_set_get(self):
        t = TermStore()
        self.assertEqual(t.degree(), -1)
        self.assertEqual(t.leading(), 0)
        self.assertEqual(len(t), 0)
        self.assertFalse(t)
        t.set(3, 5)
        t.set(0, -1)
        self.assertEqual(t.get(3), 5)
        self.assertEqual(t.get(1), 0)
        self.assertEqual(t.degree(), 3)
        self.assertEqual(t.leading(), 5)
        self.assertEqual(len(t), 2)
        t.set(3, 0)
        self.assertEqual(len(t), 1)
        self.assertEqual(t.degree(), 0)
        self.assertEqual(t.leading(), -1)
        t.discard(0)
        t.discard(7)
        self.assertEqual(t.degree(), -1)

    def test_iter(self):
        t = TermStore({0: 2, 5: 1, 2: 3})
        self.assertEqual(list(t), [(5, 1), (2, 3), (0, 2)])
        self.assertEqual(TermStore({1: 0, 2: 0}), TermStore())
        self.assertEqual(repr(TermStore({1: 4})), 'TermStore({1: 4})')

    def test_copy(self):
        t = TermStore({4: 1, 1: 1})
        s = t.copy()
        s.set(9, 2)
        s.discard(4)
        self.assertEqual(t.degree(), 4)
        self.assertEqual(s.degree(), 9)
        self.assertEqual(list(t), [(4, 1), (1, 1)])
        self.assertNotEqual(s, t)
        self.assertRaises(TypeError, hash, t)


if __name__ == "__main__":
    unittest.main()

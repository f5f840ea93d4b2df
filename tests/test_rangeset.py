from unittest import TestCase

from rangegaps import Gap, InvalidRangeError, RangeGappable
from rangegaps.rangeset import RangeSet


class RangeSetTest(TestCase):
    def test_init(self):
        rangeset = RangeSet([range(6, 8), range(0, 2), range(2, 3)])
        self.assertEqual(list(rangeset), [range(0, 3), range(6, 8)])

    def test_init_step(self):
        with self.assertRaises(InvalidRangeError):
            RangeSet([range(0, 10, 2)])

    def test_add_duplicate(self):
        rangeset = RangeSet()

        rangeset.add(0)
        self.assertEqual(list(rangeset), [range(0, 1)])

        rangeset.add(0)
        self.assertEqual(list(rangeset), [range(0, 1)])

    def test_add_ordered(self):
        rangeset = RangeSet()

        rangeset.add(0)
        self.assertEqual(list(rangeset), [range(0, 1)])

        rangeset.add(1)
        self.assertEqual(list(rangeset), [range(0, 2)])

        rangeset.add(2)
        self.assertEqual(list(rangeset), [range(0, 3)])

    def test_add_merge(self):
        rangeset = RangeSet()

        rangeset.add(0)
        self.assertEqual(list(rangeset), [range(0, 1)])

        rangeset.add(2)
        self.assertEqual(list(rangeset), [range(0, 1), range(2, 3)])

        rangeset.add(1)
        self.assertEqual(list(rangeset), [range(0, 3)])

    def test_add_merge_many(self):
        rangeset = RangeSet([range(0, 2), range(3, 5), range(6, 8), range(10, 12)])

        rangeset.add(1, 7)
        self.assertEqual(list(rangeset), [range(0, 8), range(10, 12)])

    def test_add_reverse(self):
        rangeset = RangeSet()

        rangeset.add(2)
        self.assertEqual(list(rangeset), [range(2, 3)])

        rangeset.add(1)
        self.assertEqual(list(rangeset), [range(1, 3)])

        rangeset.add(0)
        self.assertEqual(list(rangeset), [range(0, 3)])

    def test_add_empty(self):
        rangeset = RangeSet()
        with self.assertRaises(InvalidRangeError):
            rangeset.add(3, 3)
        with self.assertRaises(InvalidRangeError):
            rangeset.add(3, 2)

    def test_subtract(self):
        rangeset = RangeSet([range(0, 10), range(20, 30)])

        rangeset.subtract(0, 3)
        self.assertEqual(list(rangeset), [range(3, 10), range(20, 30)])

        rangeset.subtract(5, 7)
        self.assertEqual(list(rangeset), [range(3, 5), range(7, 10), range(20, 30)])

        rangeset.subtract(8, 25)
        self.assertEqual(list(rangeset), [range(3, 5), range(7, 8), range(25, 30)])

        rangeset.subtract(0, 100)
        self.assertEqual(list(rangeset), [])

    def test_subtract_outside(self):
        rangeset = RangeSet([range(10, 20)])

        rangeset.subtract(0, 10)
        rangeset.subtract(20, 30)
        self.assertEqual(list(rangeset), [range(10, 20)])

    def test_subtract_empty(self):
        with self.assertRaises(InvalidRangeError):
            RangeSet().subtract(3, 3)

    def test_bool(self):
        rangeset = RangeSet()
        self.assertFalse(bool(rangeset))

        rangeset.add(0)
        self.assertTrue(bool(rangeset))

    def test_bounds(self):
        rangeset = RangeSet([range(4, 6), range(10, 12)])
        self.assertEqual(rangeset.bounds(), range(4, 12))

    def test_contains(self):
        rangeset = RangeSet([range(4, 6), range(10, 12)])
        self.assertFalse(3 in rangeset)
        self.assertTrue(4 in rangeset)
        self.assertTrue(5 in rangeset)
        self.assertFalse(6 in rangeset)
        self.assertTrue(11 in rangeset)
        self.assertFalse(12 in rangeset)
        self.assertFalse("a" in rangeset)

    def test_eq(self):
        self.assertEqual(RangeSet([range(0, 2)]), RangeSet([range(0, 1), range(1, 2)]))
        self.assertNotEqual(RangeSet([range(0, 2)]), RangeSet([range(0, 3)]))
        self.assertNotEqual(RangeSet(), [])

    def test_getitem(self):
        rangeset = RangeSet([range(4, 6), range(10, 12)])
        self.assertEqual(rangeset[0], range(4, 6))
        self.assertEqual(rangeset[-1], range(10, 12))
        self.assertEqual(len(rangeset), 2)

    def test_repr(self):
        self.assertEqual(repr(RangeSet([range(0, 2)])), "RangeSet([range(0, 2)])")

    def test_shift(self):
        rangeset = RangeSet([range(4, 6), range(10, 12)])
        self.assertEqual(rangeset.shift(), range(4, 6))
        self.assertEqual(list(rangeset), [range(10, 12)])


class RangeSetGapsTest(TestCase):
    def setUp(self):
        self.rangeset = RangeSet([range(2, 4), range(6, 8), range(12, 20)])

    def test_gappable(self):
        self.assertIsInstance(self.rangeset, RangeGappable)

    def test_irange(self):
        self.assertEqual(
            list(self.rangeset.irange()), [range(2, 4), range(6, 8), range(12, 20)]
        )
        self.assertEqual(list(self.rangeset.irange(3, 7)), [range(2, 4), range(6, 8)])
        self.assertEqual(list(self.rangeset.irange(4, 6)), [])
        self.assertEqual(list(self.rangeset.irange(8)), [range(12, 20)])
        self.assertEqual(list(self.rangeset.irange(stop=6)), [range(2, 4)])

    def test_gaps(self):
        self.assertEqual(list(self.rangeset.gaps()), [Gap(4, 6), Gap(8, 12)])
        self.assertEqual(
            list(self.rangeset.gaps(0, 30)),
            [Gap(0, 2), Gap(4, 6), Gap(8, 12), Gap(20, 30)],
        )
        self.assertEqual(list(self.rangeset.gaps(3, 13)), [Gap(4, 6), Gap(8, 12)])
        self.assertEqual(list(self.rangeset.gaps(5, 7)), [Gap(5, 6)])
        self.assertEqual(list(self.rangeset.gaps(13, 20)), [])

    def test_gaps_empty(self):
        self.assertEqual(list(RangeSet().gaps(0, 10)), [Gap(0, 10)])

    def test_gaps_missing_chunks(self):
        # chunks received out of order, then the holes are requested again
        received = RangeSet()
        for start, stop in [(0, 100), (300, 400), (100, 150), (500, 600)]:
            received.add(start, stop)

        self.assertEqual(
            list(received.gaps(0, 700)),
            [Gap(150, 300), Gap(400, 500), Gap(600, 700)],
        )

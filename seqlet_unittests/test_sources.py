import unittest

from seqlet import rangelet, countlet, iterlet, Sequence

from seqlet_unittests.utility import IsolatedSpawnerMixin


class TestRangelet(IsolatedSpawnerMixin, unittest.TestCase):
    def test_content(self):
        """Produce `[start, stop)` as `rangelet(start, stop)`"""
        for start, stop in ((10, 100), (0, 1), (-5, 5), (-10, -3), (3, 3), (5, 3), (0, 0), (-1, -2)):
            with self.subTest(start=start, stop=stop):
                self.assertEqual(list(rangelet(start, stop)), list(range(start, stop)))
        self.assertStagesFinished()

    def test_empty(self):
        """Signal the end immediately for `start >= stop`"""
        for start, stop in ((3, 3), (5, 3)):
            with self.subTest(start=start, stop=stop):
                sequence = rangelet(start, stop)
                for _ in range(3):
                    self.assertEqual(sequence.receive(), (None, False))
        self.assertStagesFinished()

    def test_receive(self):
        """Receive elements one by one"""
        sequence = rangelet(0, 3)
        self.assertIsInstance(sequence, Sequence)
        self.assertFalse(sequence.claimed)
        for value in range(3):
            self.assertEqual(sequence.receive(), (value, True))
        self.assertEqual(sequence.receive(), (None, False))
        self.assertEqual(sequence.receive(), (None, False))

    def test_integers_only(self):
        """Reject bounds that are not integers"""
        for start, stop in ((0.5, 2), (0, 2.0), ('0', 2), (None, 1)):
            with self.subTest(start=start, stop=stop):
                with self.assertRaises(TypeError):
                    rangelet(start, stop)
        self.assertFalse(self.spawner.workers)


class TestCountlet(IsolatedSpawnerMixin, unittest.TestCase):
    def test_iterate(self):
        """Iterate over infinite `countlet()`"""
        end = 100
        actual = []
        with countlet() as numbers:
            for value in numbers:
                if value == end:
                    break
                actual.append(value)
        self.assertEqual(actual, list(range(end)))
        self.assertStagesFinished()

    def test_take(self):
        """Take from infinite `countlet().take(k)`"""
        for count in (0, 1, 2, 17, 100):
            with self.subTest(count=count):
                self.assertEqual(countlet().take(count).collect(), list(range(count)))
        self.assertStagesFinished()


class TestIterlet(IsolatedSpawnerMixin, unittest.TestCase):
    def test_content(self):
        """Produce the elements of `iterlet(iterable)`"""
        for iterable in ([], [1], [3, -1, 4, 1, -5], tuple(range(20)), range(-4, 4)):
            with self.subTest(iterable=iterable):
                self.assertEqual(list(iterlet(iterable)), list(iterable))
        self.assertStagesFinished()

    def test_iterator(self):
        """Produce the elements of `iterlet(iter(iterable))`"""
        self.assertEqual(list(iterlet(iter([2, 4, 8]))), [2, 4, 8])

    def test_not_iterable(self):
        """Reject objects that do not support iteration"""
        with self.assertRaises(TypeError):
            iterlet(12)

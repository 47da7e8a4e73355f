import functools
import operator
import unittest

from seqlet import rangelet, countlet, reduce, collect

from seqlet_unittests.utility import IsolatedSpawnerMixin, manual_sequence, add


class TestReduce(IsolatedSpawnerMixin, unittest.TestCase):
    def test_sum(self):
        """Reduce a sequence as `reduce(sequence, 0, add)`"""
        values = list(range(1, 11))
        self.assertEqual(reduce(manual_sequence(values), 0, add), sum(values))

    def test_left_fold(self):
        """Reduce a sequence from the left"""
        def digits(accumulator, value):
            return accumulator * 10 + value
        for start, stop, initial in ((1, 5, 0), (1, 5, 9), (3, 4, 0), (0, 0, 7)):
            with self.subTest(start=start, stop=stop, initial=initial):
                self.assertEqual(
                    rangelet(start, stop).reduce(initial, digits),
                    functools.reduce(digits, range(start, stop), initial)
                )
        self.assertStagesFinished()

    def test_empty(self):
        """Reduce an empty sequence to the initial value"""
        self.assertEqual(rangelet(5, 5).reduce(42, add), 42)

    def test_factorial(self):
        """Factorial of 10 as `rangelet(1, 11).reduce(1, mul)`"""
        self.assertEqual(rangelet(1, 11).reduce(1, operator.mul), 3628800)

    def test_bounded_infinite(self):
        """Reduce a bounded infinite sequence"""
        self.assertEqual(countlet().take(101).reduce(0, add), 5050)
        self.assertStagesFinished()

    def test_failure(self):
        """Propagate failures of the function and stop the sequence"""
        def add_until_three(accumulator, value):
            if value == 3:
                raise ArithmeticError(value)
            return accumulator + value
        with self.assertRaises(ArithmeticError):
            countlet().reduce(0, add_until_three)
        self.assertStagesFinished()


class TestCollect(IsolatedSpawnerMixin, unittest.TestCase):
    def test_collect(self):
        """Collect a sequence as `collect(sequence)`"""
        end = 100
        self.assertEqual(collect(manual_sequence(range(end))), list(range(end)))

    def test_empty(self):
        """Collect an empty sequence to an empty list"""
        self.assertEqual(collect(rangelet(0, 0)), [])
        self.assertEqual(rangelet(0, -1).collect(), [])
        self.assertEqual(collect(manual_sequence([])), [])

    def test_iterable(self):
        """Collect a plain iterable via conversion"""
        self.assertEqual(collect([3, 1, 2]), [3, 1, 2])
        self.assertEqual(reduce((value for value in range(4)), 0, add), 6)
        self.assertStagesFinished()

    def test_remainder(self):
        """Collect the elements not received yet"""
        sequence = rangelet(0, 5)
        self.assertEqual(sequence.receive(), (0, True))
        self.assertEqual(sequence.receive(), (1, True))
        self.assertEqual(sequence.collect(), [2, 3, 4])
        self.assertEqual(sequence.receive(), (None, False))

"""
Sources creating new sequences

Every source starts producing immediately, in its own thread, and returns
the :py:class:`~.Sequence` handle without waiting for any element.

.. code::

    rangelet(0, 3).collect()          # [0, 1, 2]
    countlet().take(3).collect()      # [0, 1, 2]
    iterlet([4, 2, 0]).collect()      # [4, 2, 0]
"""
import operator

from .dataflow import lazy
from .stagelink import sourcelet, StageLink

__all__ = ['rangelet', 'countlet', 'iterlet']


@lazy
def rangelet(start, stop):
    """
    Produce the integers from ``start`` up to, but excluding, ``stop``

    :param start: the first integer to produce
    :type start: int
    :param stop: the integer to stop at
    :type stop: int
    :raises TypeError: if ``start`` or ``stop`` is not an integer

    If ``start >= stop``, the sequence is empty.
    """
    return _rangelet(operator.index(start), operator.index(stop))


@sourcelet
def _rangelet(emit, start, stop):
    value = start
    while value < stop:
        emit(value)
        value += 1


@lazy
@sourcelet
def countlet(emit):
    """
    Produce all non-negative integers, starting at 0

    The sequence is infinite. Bound it with :py:func:`~.takelet` before
    applying a strict operation such as :py:func:`~.collect`.
    """
    value = 0
    while True:
        emit(value)
        value += 1


@lazy
def iterlet(iterable):
    """
    Produce the elements of an iterable

    :param iterable: object supporting iteration
    :type iterable: iterable
    :raises TypeError: if ``iterable`` does not support iteration
    """
    return _iterlet(iter(iterable))


@sourcelet
def _iterlet(emit, iterator):
    for value in iterator:
        emit(value)


def iterable_sequences(element):
    try:
        iterator = iter(element)
    except TypeError:
        return NotImplemented
    return _iterlet(iterator)

StageLink.add_converter(iterable_sequences)

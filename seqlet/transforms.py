"""
Lazy combinators transforming one sequence into another

Every combinator supports two modes of operation, depending on whether
a ``sequence`` is provided:

**pull**: sequence provided
    Consume ``sequence`` and immediately start producing the new sequence.
    This is the same as binding the combinator to ``sequence``.

**push**: no sequence provided
    Create an unbound stage, which starts producing once bound to a sequence.
    This allows composing pipelines before any data exists.

.. code::

    # pull
    evens = filterlet(lambda value: value % 2 == 0, rangelet(0, 10))
    # push
    keep_evens = filterlet(lambda value: value % 2 == 0)
    evens = rangelet(0, 10) >> keep_evens

Each combinator consumes its upstream sequence only as fast as its own
consumer requests elements, and is safe to use on infinite sequences.
"""
import operator

from .dataflow import lazy
from .stagelink import stagelet

__all__ = ['maplet', 'filterlet', 'takelet', 'droplet']


def _bind(stage, sequence):
    if sequence is None:
        return stage
    return sequence >> stage


@lazy
def maplet(function, sequence=None):
    """
    Apply a function to every element of a sequence

    :param function: callable computing a new element from each element
    :type function: callable
    :param sequence: sequence providing elements
    :type sequence: Sequence or None

    The new sequence has the same number of elements, in the same order.

    .. code::

        rangelet(1, 4) >> maplet(lambda value: value * value)  # 1, 4, 9
    """
    return _bind(_maplet(function), sequence)


@stagelet
def _maplet(emit, source, function):
    for value in source:
        emit(function(value))


@lazy
def filterlet(function, sequence=None):
    """
    Filter elements of a sequence

    :param function: callable selecting valid elements
    :type function: callable
    :param sequence: sequence providing elements
    :type sequence: Sequence or None

    Any element is passed on only if ``function(element)`` returns true.
    Discarded elements are consumed only while searching for the next
    valid one, so an infinite upstream sequence is fine as long as it
    keeps providing valid elements.

    .. code::

        rangelet(0, 10) >> filterlet(lambda value: value % 2 == 0)  # 0, 2, 4, 6, 8
    """
    return _bind(_filterlet(function), sequence)


@stagelet
def _filterlet(emit, source, function):
    for value in source:
        if function(value):
            emit(value)


@lazy
def takelet(count, sequence=None):
    """
    Take at most the first ``count`` elements of a sequence

    :param count: maximum number of elements to pass on
    :type count: int
    :param sequence: sequence providing elements
    :type sequence: Sequence or None
    :raises TypeError: if ``count`` is not an integer

    If the upstream sequence is shorter than ``count``, all of its elements
    are passed on. If ``count <= 0``, the new sequence is empty.

    After the last element has been passed on, the upstream sequence is closed.
    This bounds infinite sequences without leaving their producers behind.

    .. code::

        countlet() >> takelet(3)  # 0, 1, 2
    """
    return _bind(_takelet(operator.index(count)), sequence)


@stagelet
def _takelet(emit, source, count):
    if count <= 0:
        return
    for value in source:
        emit(value)
        count -= 1
        # do not pull another element just to discard it
        if count <= 0:
            break


@lazy
def droplet(count, sequence=None):
    """
    Skip the first ``count`` elements of a sequence

    :param count: number of elements to discard
    :type count: int
    :param sequence: sequence providing elements
    :type sequence: Sequence or None
    :raises TypeError: if ``count`` is not an integer

    If the upstream sequence is shorter than ``count``, the new sequence is empty.
    If ``count <= 0``, all elements are passed on.

    .. code::

        rangelet(0, 5) >> droplet(3)  # 3, 4
    """
    return _bind(_droplet(operator.index(count)), sequence)


@stagelet
def _droplet(emit, source, count):
    for value in source:
        if count > 0:
            count -= 1
            continue
        emit(value)

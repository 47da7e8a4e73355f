"""
Strict operations draining a sequence

Terminal operations consume *all* elements of a sequence before they return.
They must only be applied to finite sequences; on an infinite sequence,
such as :py:func:`~.countlet`, they block forever.
Use :py:func:`~.takelet` to bound infinite sequences first.
"""
from .dataflow import strict
from .stagelink import StageLink

__all__ = ['reduce', 'collect']


@strict
def reduce(sequence, initial, function):
    """
    Aggregate all elements of a sequence

    :param sequence: the finite sequence to aggregate
    :param initial: the initial value of the aggregate
    :param function: callable computing a new aggregate from the aggregate and an element
    :type function: callable
    :return: the final aggregate

    This is a left fold of ``function`` over ``sequence``:

    .. code::

        reduce(rangelet(1, 11), 1, operator.mul)  # 3628800
    """
    sequence = StageLink.convert(sequence)
    # claim first, a rejected claim leaves the sequence to its consumer
    values = iter(sequence)
    accumulator = initial
    with sequence:
        for value in values:
            accumulator = function(accumulator, value)
    return accumulator


@strict
def collect(sequence):
    """
    Collect all elements of a sequence

    :param sequence: the finite sequence to collect
    :return: all elements, in the order they were produced
    :rtype: list

    An empty sequence is collected to an empty :py:class:`list`.
    """
    sequence = StageLink.convert(sequence)
    values = iter(sequence)
    with sequence:
        return list(values)

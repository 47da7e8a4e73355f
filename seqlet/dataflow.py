"""
Markers for the laziness of operations on sequences

Operations on sequences are either *lazy* or *strict*:

**lazy**: produce a new sequence
    Elements are only computed as the consumer requests them.
    Lazy operations are safe to apply to infinite sequences.

**strict**: drain a sequence
    All elements are consumed before the operation returns.
    Strict operations never return when applied to an infinite sequence.

The markers are for documentation and introspection only;
applying a strict operation to an infinite sequence is not detected.

.. code:: python

    @lazy
    def evenlet(sequence):
        return sequence.filter(lambda value: value % 2 == 0)

    is_lazy(evenlet)  # True
"""

__all__ = ['lazy', 'strict', 'is_lazy']


def lazy(operation):
    """
    Decorator to mark an operation as lazy

    :param operation: an operation that is safe on infinite sequences
    :type operation: callable
    :return: the operation modified inplace
    :rtype: callable
    """
    operation.seqlet_lazy = True
    return operation


def strict(operation):
    """
    Decorator to mark an operation as strict

    :param operation: an operation that consumes its whole sequence
    :type operation: callable
    :return: the operation modified inplace
    :rtype: callable
    """
    operation.seqlet_lazy = False
    return operation


def is_lazy(operation):
    """
    Whether an operation is marked as lazy

    :return: :py:const:`True` for lazy, :py:const:`False` for strict and
             :py:const:`None` for unmarked operations
    """
    return getattr(operation, 'seqlet_lazy', None)

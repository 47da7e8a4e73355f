"""
++++++
seqlet
++++++

The ``seqlet`` library builds lazy sequences of integers from nothing but a
blocking, closable handoff channel. Every stage of a sequence runs in its own
thread and passes one element at a time to its consumer:

.. code:: python

    from seqlet import rangelet, countlet, maplet, takelet

    # squares of 1 through 20
    rangelet(1, 21).map(lambda x: x * x).collect()
    # the same, using the binding grammar
    (rangelet(1, 21) >> maplet(lambda x: x * x)).collect()
    # the first five primes, from an infinite sequence
    countlet().drop(2).filter(is_prime).take(5).collect()

Features
========

* Sequences act like Python iterators, without using generators for production.
* Lazy combinators (map, filter, take, drop) work on infinite sequences.
* Strict terminals (reduce, collect) drain finite sequences.
* Synchronous handoff between stages gives backpressure for free:
  no stage runs more than one element ahead of its consumer.
* Taking from or closing a sequence stops all of its upstream stages.

Status
======

``seqlet`` is a teaching library. It deliberately handles integers only and
provides a small, fixed set of operations.

Recent Changes
--------------

v1.0.0

    Initial release
"""

__title__ = 'seqlet'
__summary__ = 'Lazy integer sequences composed from threads and synchronous handoff channels'
__url__ = 'https://github.com/seqlet/seqlet'

__version__ = '1.0.0'
__author__ = 'seqlet developers'
__email__ = 'seqlet@users.noreply.github.com'
__copyright__ = '2018 %s' % __author__

"""
Synchronous handoff between one producer and one consumer

A :py:class:`Handoff` is a queue of capacity zero: the producer's
:py:meth:`~Handoff.emit` blocks until the consumer has taken the element,
and the consumer's :py:meth:`~Handoff.receive` blocks until an element is
offered or the producer closed the handoff.

.. code:: python

    handoff = Handoff()

    # producer thread
    try:
        for value in range(3):
            handoff.emit(value)
    finally:
        handoff.close()

    # consumer thread
    while True:
        value, has_more = handoff.receive()
        if not has_more:
            break
        print(value)

The consumer may :py:meth:`~Handoff.cancel` the handoff if it will not
request any more elements. A producer blocked in, or later calling,
:py:meth:`~Handoff.emit` is then stopped with :py:exc:`~.StopProduction`.
Callbacks added with :py:meth:`~Handoff.on_cancel` run as soon as the
handoff is cancelled, even if the producer is busy elsewhere.
"""
import threading

from . import signals
from .utility import Sentinel


#: marker for an empty slot of a handoff
EMPTY = Sentinel('EMPTY')


class Handoff(object):
    """
    Zero capacity channel for passing elements from a producer to a consumer

    There must be at most one producer and one consumer at any time.
    Producer methods are :py:meth:`emit`, :py:meth:`close` and :py:meth:`fail`;
    consumer methods are :py:meth:`receive` and :py:meth:`cancel`.
    """
    __slots__ = ('_slot', '_closed', '_cancelled', '_error', '_cancel_callbacks', '_condition')

    def __init__(self):
        self._slot = EMPTY
        self._closed = False
        self._cancelled = False
        self._error = None
        self._cancel_callbacks = []
        self._condition = threading.Condition(threading.Lock())

    @property
    def closed(self):
        """Whether the producer will not emit any more elements"""
        return self._closed

    @property
    def cancelled(self):
        """Whether the consumer will not receive any more elements"""
        return self._cancelled

    def emit(self, value):
        """
        Hand ``value`` to the consumer, blocking until it has been taken

        :raises StopProduction: if the consumer cancelled the handoff
        :raises RuntimeError: if the handoff is already closed
        """
        with self._condition:
            if self._closed:
                raise RuntimeError('emit on closed handoff')
            if self._cancelled:
                raise signals.StopProduction
            self._slot = value
            self._condition.notify_all()
            while self._slot is not EMPTY and not self._cancelled:
                self._condition.wait()
            # cancelled while waiting, the value is left behind
            if self._slot is not EMPTY:
                self._slot = EMPTY
                raise signals.StopProduction

    def close(self):
        """Signal that no more elements follow"""
        with self._condition:
            self._closed = True
            self._condition.notify_all()

    def fail(self, error):
        """
        Close the handoff due to ``error``

        The next :py:meth:`receive` raises ``error`` instead of signalling
        the end of elements. Only the first failure is kept.

        The ``error`` is raised as is, not wrapped. When a stage passes on
        the failure of its upstream, the traceback of ``error`` is extended
        by the frames of that stage, once per stage. The traceback thus
        leads from the consumer back through every stage to the original
        ``raise``.
        """
        with self._condition:
            if not self._closed:
                self._error = error
            self._closed = True
            self._condition.notify_all()

    def receive(self):
        """
        Take the next element, blocking until it is available

        :return: pair of the element and whether there was an element
        :rtype: (object, bool)
        :raises: the error passed to :py:meth:`fail`, exactly once

        Once the handoff is closed and drained, or cancelled, this
        returns ``(None, False)`` immediately on every call.
        """
        with self._condition:
            while self._slot is EMPTY and not self._closed and not self._cancelled:
                self._condition.wait()
            if self._cancelled:
                return None, False
            if self._slot is not EMPTY:
                value, self._slot = self._slot, EMPTY
                self._condition.notify_all()
                return value, True
            error, self._error = self._error, None
            if error is not None:
                raise error
            return None, False

    def cancel(self):
        """Signal that no more elements will be received"""
        with self._condition:
            if self._cancelled:
                return
            self._cancelled = True
            callbacks, self._cancel_callbacks = self._cancel_callbacks, []
            self._condition.notify_all()
        for callback in callbacks:
            callback()

    def on_cancel(self, callback):
        """
        Call ``callback()`` once the handoff is cancelled

        If the handoff is cancelled already, ``callback`` is called immediately.
        Callbacks run in the thread calling :py:meth:`cancel`.
        """
        with self._condition:
            if not self._cancelled:
                self._cancel_callbacks.append(callback)
                return
        callback()

    def __repr__(self):
        if self._cancelled:
            state = 'cancelled'
        elif self._closed:
            state = 'closed'
        else:
            state = 'open'
        return '<%s %s at 0x%x>' % (self.__class__.__name__, state, id(self))

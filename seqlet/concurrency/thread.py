"""
Thread based concurrency domain

Every stage of a sequence runs its production loop in a dedicated thread.
A stage's thread lives as long as the stage produces elements; it blocks
whenever its consumer has not taken the last element yet.
Note that regular Python code is not parallelised by threads due to the :term:`Global Interpreter Lock`.
See the :py:mod:`threading` module for details.
"""
import itertools
import logging
import threading


logger = logging.getLogger(__name__)


class ThreadSpawner(object):
    """
    Spawner running each call in a new thread

    :param identifier: base identifier for all workers
    :type identifier: str
    :param daemon: ungracefully kill workers when the program terminates
    :type daemon: bool

    Workers are not pooled: a stage may block for an unbounded time,
    for example when producing an infinite sequence, and would starve
    any pool of threads.
    """
    def __init__(self, identifier='', daemon=True):
        self.identifier = identifier or ('%s_%d' % (self.__class__.__name__, id(self)))
        self.daemon = daemon
        self._workers = set()
        self._worker_ids = itertools.count()
        self._mutex = threading.Lock()

    @property
    def workers(self):
        """The workers currently executing a call"""
        with self._mutex:
            return frozenset(self._workers)

    def spawn(self, call, *args, **kwargs):
        """
        Execute ``call(*args, **kwargs)`` in a new thread

        :return: the thread executing ``call``
        :rtype: threading.Thread
        """
        worker = threading.Thread(
            target=self._execute,
            args=(call, args, kwargs),
            name=self.identifier + '_%d' % next(self._worker_ids),
        )
        worker.daemon = self.daemon
        with self._mutex:
            self._workers.add(worker)
        logger.debug('spawning worker %s', worker.name)
        worker.start()
        return worker

    def _execute(self, call, args, kwargs):
        try:
            call(*args, **kwargs)
        finally:
            # clean up dangling threads
            with self._mutex:
                self._workers.discard(threading.current_thread())

    def join(self, timeout=None):
        """
        Wait for all current workers to finish

        :param timeout: maximum time in seconds to wait for each worker
        :type timeout: float or None
        :return: whether all workers have finished
        :rtype: bool
        """
        for worker in self.workers:
            worker.join(timeout)
        return not self.workers


DEFAULT_SPAWNER = ThreadSpawner(identifier='seqlet_thread')

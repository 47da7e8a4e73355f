import threading

import seqlet.stagelink
from seqlet.concurrency.thread import ThreadSpawner
from seqlet.handoff import Handoff
from seqlet.sequence import Sequence
from seqlet.signals import StopProduction


#: seconds to wait for threads that must finish
JOIN_TIMEOUT = 5.0


def square(value):
    return value * value


def odd(value):
    """Test if value is odd"""
    return value % 2 != 0


def even(value):
    """Test if value is even"""
    return value % 2 == 0


def add(accumulator, value):
    return accumulator + value


class FailOn(object):
    """Callback that raises ``error`` for ``value`` and otherwise returns its input"""
    def __init__(self, value, error=None):
        self.value = value
        self.error = error if error is not None else ValueError(value)

    def __call__(self, value):
        if value == self.value:
            raise self.error
        return value


class Recorder(object):
    """Callback recording every call and delegating to ``function``"""
    def __init__(self, function):
        self.function = function
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)
        return self.function(*args)


def manual_sequence(values):
    """
    Create a sequence from a hand-written producer thread

    This deliberately does not use any stages, to test them against a
    bare handoff.
    """
    handoff = Handoff()

    def produce():
        try:
            for value in values:
                handoff.emit(value)
        except StopProduction:
            pass
        finally:
            handoff.close()
    producer = threading.Thread(target=produce)
    producer.daemon = True
    producer.start()
    return Sequence(handoff, name='manual')


class ThreadCall(object):
    """Run ``call(*args)`` in a thread, storing its result or exception"""
    def __init__(self, call, *args):
        self.result = None
        self.error = None
        self.done = threading.Event()
        self._thread = threading.Thread(target=self._run, args=(call, args))
        self._thread.daemon = True
        self._thread.start()

    def _run(self, call, args):
        try:
            self.result = call(*args)
        except Exception as err:
            self.error = err
        finally:
            self.done.set()

    def wait(self, timeout=JOIN_TIMEOUT):
        return self.done.wait(timeout)


class IsolatedSpawnerMixin(object):
    """Run all stages of a test in a private spawner, available as ``self.spawner``"""
    def setUp(self):
        super(IsolatedSpawnerMixin, self).setUp()
        self.spawner = ThreadSpawner(identifier='seqlet_test_%s' % self.__class__.__name__)
        default_spawner = seqlet.stagelink.StageLink.spawner
        seqlet.stagelink.StageLink.spawner = self.spawner
        self.addCleanup(setattr, seqlet.stagelink.StageLink, 'spawner', default_spawner)

    def assertStagesFinished(self):
        """Assert that no stage of the test is left running"""
        self.assertTrue(
            self.spawner.join(JOIN_TIMEOUT),
            'stages still running: %s' % sorted(worker.name for worker in self.spawner.workers)
        )

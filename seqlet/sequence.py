from . import signals
from .dataflow import lazy, strict


class Sequence(object):
    """
    Handle to a lazily produced, ordered stream of integers

    A :py:class:`Sequence` is the consuming end of a :py:class:`~.Handoff`.
    Its producer runs concurrently, and hands over one element at a time
    whenever the consumer asks for it. A sequence is either *open*, in which
    case asking for an element blocks until it is produced, or *exhausted*,
    in which case asking for an element signals the end immediately.

    Sequences are created by sources, such as :py:func:`~.rangelet`, and by
    binding stages to other sequences:

    .. describe:: sequence >> stage

       Bind ``stage`` to consume ``sequence``, returning the
       :py:class:`Sequence` produced by ``stage``.

    .. describe:: iter(sequence)

       Claim the sequence and iterate over its remaining elements.

    .. describe:: sequence.receive()

       Take the next element as a pair ``(value, has_more)``.
       Once ``has_more`` is :py:const:`False`, every further call
       returns ``(None, False)``.

    Every sequence has exactly one consumer: iterating it, binding a stage to
    it, or applying a terminal operation *claims* the sequence. Claiming an
    already claimed sequence raises :py:exc:`~.SequenceClaimed`.

    For a fluent style, the combinators are also available as methods.
    The *lazy* methods return a new :py:class:`Sequence` and are safe on
    infinite sequences; the *strict* methods drain the sequence and never
    return for infinite ones.

    .. code:: python

        rangelet(1, 21).map(square).collect()       # squares of 1 to 20
        rangelet(1, 11).reduce(1, operator.mul)     # factorial of 10
        countlet().drop(2).filter(is_prime).take(5).collect()  # 2, 3, 5, 7, 11

    A consumer may abandon a sequence by calling :py:meth:`close`, or by
    using it as a context manager. This stops the producer and every stage
    before it.
    """
    __slots__ = ('_handoff', '_claimed', 'name')

    def __init__(self, handoff, name='sequence'):
        self._handoff = handoff
        self._claimed = False
        self.name = name

    @property
    def claimed(self):
        """Whether the sequence has a consumer already"""
        return self._claimed

    def claim(self):
        """
        Become the sole consumer of this sequence

        :raises SequenceClaimed: if the sequence already has a consumer
        """
        if self._claimed:
            raise signals.SequenceClaimed('%r is already consumed' % self)
        self._claimed = True
        return self

    def receive(self):
        """
        Take the next element, blocking until it is produced

        :return: pair of the element and whether there was an element
        :rtype: (int, bool)
        :raises: any error raised while producing the element
        """
        return self._handoff.receive()

    def __iter__(self):
        return SequenceIterator(self.claim())

    def close(self):
        """Abandon the sequence, stopping its producer and all stages before it"""
        self._handoff.cancel()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    @lazy
    def map(self, function):
        """Apply ``function`` to every element"""
        from .transforms import maplet
        return maplet(function, self)

    @lazy
    def filter(self, function):
        """Keep only elements for which ``function`` is true"""
        from .transforms import filterlet
        return filterlet(function, self)

    @lazy
    def take(self, count):
        """Keep at most the first ``count`` elements"""
        from .transforms import takelet
        return takelet(count, self)

    @lazy
    def drop(self, count):
        """Skip the first ``count`` elements"""
        from .transforms import droplet
        return droplet(count, self)

    @strict
    def reduce(self, initial, function):
        """Fold all elements into one value, starting with ``initial``"""
        from .terminals import reduce
        return reduce(self, initial, function)

    @strict
    def collect(self):
        """Collect all elements into a :py:class:`list`"""
        from .terminals import collect
        return collect(self)

    def __repr__(self):
        return '<%s %s at 0x%x>' % (self.__class__.__name__, self.name, id(self))


class SequenceIterator(object):
    """Iterator over the elements of a claimed :py:class:`Sequence`"""
    __slots__ = ('sequence',)

    def __init__(self, sequence):
        self.sequence = sequence

    def __iter__(self):
        return self

    def __next__(self):
        value, has_more = self.sequence.receive()
        if not has_more:
            raise StopIteration
        return value

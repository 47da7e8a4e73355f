"""
Stages producing sequences in their own thread

A stage is a *production function* run concurrently to its consumer.
It receives an ``emit`` callable to hand elements to the consumer and,
unless it is a source, an iterator over the elements of its upstream
sequence:

.. code:: python

    @stagelet
    def doubled(emit, source):
        for value in source:
            emit(value)
            emit(value)

    @sourcelet
    def repeat(emit, value, count):
        while count > 0:
            emit(value)
            count -= 1

    repeat(2, 3) >> doubled()  # sequence of 2, 2, 2, 2, 2, 2

Calling a :py:func:`sourcelet` immediately starts producing a new
:py:class:`~.Sequence`. Calling a :py:func:`stagelet` creates an unbound
:py:class:`StageLink`, which starts producing once bound to an upstream
sequence as ``sequence >> stage``. Unbound stages can be chained as
``stage_a >> stage_b`` to form a :py:class:`StageChain`.

Each ``emit`` blocks until the consumer has taken the element. When the
production function returns, the sequence is closed. If the consumer
abandons the sequence, the upstream sequence is closed right away, so
the source iterator of the production function runs out, and the next
``emit`` raises :py:exc:`~.StopProduction` to end the production function.
Any other exception of the production function is passed on to the consumer.
Either way, a finished stage closes its upstream sequence.
"""
import functools
import logging

from . import signals
from .concurrency.thread import DEFAULT_SPAWNER
from .handoff import Handoff
from .sequence import Sequence
from .utility import getname


logger = logging.getLogger(__name__)


def _format_arg(arg):
    if callable(arg):
        return getname(arg)
    return repr(arg)


class StageLink(object):
    """
    A production function with its arguments, waiting to produce a sequence

    :param production: function to produce elements, as ``production(emit, [source,] *args)``
    :type production: callable
    :param args: positional arguments for ``production``

    .. describe:: sequence >> link

       Bind the link to the upstream ``sequence``, as :py:meth:`bind`.
       The ``sequence`` may also be any iterable that can be converted.

    .. describe:: link >> other

       Chain the link to another :py:class:`StageLink` or :py:class:`StageChain`.
    """
    #: spawner to run production functions concurrently
    spawner = DEFAULT_SPAWNER
    #: callables to convert objects to sequences; must return a Sequence or NotImplemented
    converters = []

    def __init__(self, production, *args):
        self.production = production
        self.args = args

    @classmethod
    def convert(cls, element):
        """Convert an element to a :py:class:`~.Sequence`"""
        if isinstance(element, Sequence):
            return element
        for converter in cls.converters:
            sequence = converter(element)
            if sequence is not NotImplemented:
                return sequence
        raise TypeError('%r cannot be converted to a sequence' % (element,))

    @classmethod
    def add_converter(cls, converter):
        """
        Add a converter used when binding to something that is not a :py:class:`~.Sequence`

        Each converter is a callable with the signature

        .. py:function:: converter(element: object) -> Sequence

        and must return :py:const:`NotImplemented` for any ``element`` it cannot convert.
        """
        cls.converters.append(converter)

    def bind(self, upstream=None):
        """
        Start producing a new sequence, consuming ``upstream`` if given

        :param upstream: the sequence to consume, or :py:const:`None` for a source
        :return: the sequence produced by this stage
        :rtype: Sequence
        :raises SequenceClaimed: if ``upstream`` is consumed already
        """
        source = None
        if upstream is not None:
            source = iter(self.convert(upstream))
        handoff = Handoff()
        if source is not None:
            # stages that never emit, such as a filter without matches,
            # must not keep pulling for a consumer that is gone
            handoff.on_cancel(source.sequence.close)
        self.spawner.spawn(self._run_stage, handoff, source)
        return Sequence(handoff, name=repr(self))

    def _run_stage(self, handoff, source):
        logger.debug('stage %r started', self)
        try:
            if source is None:
                self.production(handoff.emit, *self.args)
            else:
                self.production(handoff.emit, source, *self.args)
        except signals.StopProduction:
            logger.debug('stage %r stopped by its consumer', self)
        except Exception as err:
            logger.debug('stage %r failed: %r', self, err)
            handoff.fail(err)
        else:
            if handoff.cancelled:
                logger.debug('stage %r stopped by its consumer', self)
            else:
                logger.debug('stage %r finished', self)
        finally:
            handoff.close()
            if source is not None:
                source.sequence.close()

    def __rrshift__(self, upstream):
        # upstream >> self
        return self.bind(upstream)

    def __rshift__(self, child):
        """
        self >> child

        :param child: following stage to chain
        :type child: StageLink
        :returns: chain of self and child
        :rtype: StageChain
        """
        if not isinstance(child, StageLink):
            return NotImplemented
        return StageChain((self, child))

    def __repr__(self):
        return '%s(%s)' % (
            getname(self.production).lstrip('_'), ', '.join(_format_arg(arg) for arg in self.args)
        )


class StageChain(StageLink):
    """
    A group of stages that sequentially consume each other's sequence

    :param elements: the stages making up this chain
    :type elements: iterable[:py:class:`StageLink`]

    :note: If ``elements`` contains a :py:class:`StageChain`, this is flattened
           and any sub-elements are directly included in the new :py:class:`StageChain`.

    Binding a chain is equivalent to binding each of its elements in turn:

    .. code:: python

        (sequence >> (stage_a >> stage_b)) == ((sequence >> stage_a) >> stage_b)
    """
    def __init__(self, elements):
        super(StageChain, self).__init__(None)
        self.elements = tuple(self._flatten(elements))

    @staticmethod
    def _flatten(elements):
        for element in elements:
            if isinstance(element, StageChain):
                for sub_element in element.elements:
                    yield sub_element
            else:
                yield element

    def __len__(self):
        return len(self.elements)

    def __getitem__(self, item):
        if item.__class__ == slice:
            return self.__class__(self.elements[item])
        return self.elements[item]

    def bind(self, upstream=None):
        sequence = upstream
        for element in self.elements:
            sequence = element.bind(sequence)
        return sequence

    def __repr__(self):
        return ' >> '.join(repr(element) for element in self.elements)


def stagelet(production):
    """
    Decorator to convert a production function to a factory of :py:class:`StageLink`

    .. code:: python

        @stagelet
        def squared(emit, source):
            "Square every element of the upstream sequence"
            for value in source:
                emit(value * value)

        rangelet(1, 5) >> squared()

    The production function receives ``emit`` and an iterator over the
    upstream sequence as its first two positional parameters, followed by
    any arguments passed to the factory.
    """
    @functools.wraps(production)
    def stage_factory(*args):
        return StageLink(production, *args)
    return stage_factory


def sourcelet(production):
    """
    Decorator to convert a production function to a source of :py:class:`~.Sequence`

    .. code:: python

        @sourcelet
        def evens(emit):
            "Produce all even numbers"
            value = 0
            while True:
                emit(value)
                value += 2

    The production function receives ``emit`` as its first positional
    parameter, followed by any arguments passed to the source.
    Calling the source starts production immediately.
    """
    @functools.wraps(production)
    def source(*args):
        return StageLink(production, *args).bind()
    return source

class StopProduction(Exception):
    """
    Stop the production of a sequence

    Raised inside a producer when it tries to :py:meth:`~.Handoff.emit`
    to a consumer that has cancelled its sequence. The consumer will never
    request any more elements, so the producer must stop.

    The stage running a producer handles this signal; it never reaches
    the consumer of a sequence.
    """
    def __init__(self):
        Exception.__init__(self)


class SequenceClaimed(RuntimeError):
    """
    A sequence already has a consumer

    Every :py:class:`~.Sequence` is consumed by exactly one consumer.
    Iterating a sequence, binding a stage to it, or applying a terminal
    operation claims it; any further claim raises this error.
    """
    pass

import logging

from .signals import StopProduction, SequenceClaimed
from .handoff import Handoff
from .sequence import Sequence
from .stagelink import StageLink, StageChain, stagelet, sourcelet
from .dataflow import lazy, strict, is_lazy
from .sources import rangelet, countlet, iterlet
from .transforms import maplet, filterlet, takelet, droplet
from .terminals import reduce, collect

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'StopProduction', 'SequenceClaimed',
    'Handoff', 'Sequence',
    'StageLink', 'StageChain', 'stagelet', 'sourcelet',
    'lazy', 'strict', 'is_lazy',
    'rangelet', 'countlet', 'iterlet',
    'maplet', 'filterlet', 'takelet', 'droplet',
    'reduce', 'collect',
]

import functools


class Sentinel(object):
    """
    Unique placeholder for values that are not there

    A sentinel only ever compares equal to itself and is always false,
    which allows it to mark an empty slot even where :py:const:`None`
    or ``0`` are valid elements.
    """
    __slots__ = ('name',)

    def __init__(self, name=None):
        self.name = name

    def __bool__(self):
        return False

    def __repr__(self):
        if self.name is not None:
            return '<%s %s>' % (self.__class__.__name__, self.name)
        return '<%s at 0x%x>' % (self.__class__.__name__, id(self))


def getname(obj):
    """
    Return the most qualified name of a callback

    :param obj: object to fetch name
    :return: name of ``obj``

    A :py:func:`functools.partial` is named after the function it wraps.
    """
    while isinstance(obj, functools.partial):
        obj = obj.func
    for name_attribute in ('__qualname__', '__name__'):
        try:
            # an object always has a class, as per Python data model
            return getattr(obj, name_attribute, getattr(obj.__class__, name_attribute))
        except AttributeError:
            pass
    raise TypeError('object of type %r does not define a canonical name' % type(obj))

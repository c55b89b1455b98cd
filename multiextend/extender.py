# -*- encoding: utf-8
"""Extender - build one class out of several unrelated ones

The composed class is not a subclass of its bases. It is a fresh class whose
body is the right-biased merge of the bases' own members, and whose
constructor builds one instance of each base and eats its fields.

.. code:: python

    class DataService(compose(Database, Cache)):
        def __init__(self, config):
            super().__init__(config)  # config goes to Database and Cache
            self.initialized = True
"""

import logging
import sys
from types import MappingProxyType
from .plumbing import construct, merge_tables, own_fields
from .utils import class_names
from .validation import validate_bases

logger = logging.getLogger(__name__)

NAME_TEMPLATE = 'Composed_{}'
DOC_TEMPLATE = 'Generated composition of {}'


def _caller_module(depth=2):
    try:
        return sys._getframe(depth).f_globals.get('__name__', '__main__')
    except (AttributeError, ValueError):
        return __name__


def _build_constructor(bases):
    """Make the __init__ of a composed class

    Every base gets the same arguments; later bases overwrite the fields
    of earlier ones."""
    def __init__(self, *args, **kwargs):
        for base in bases:
            instance = construct(base, args, kwargs)
            for (field, value) in own_fields(instance).items():
                setattr(self, field, value)
    return __init__


def compose(*bases, name=None, metaclass=type, module=None):
    """Create a new class that behaves as if extending all bases

    :param bases: the classes to compose, in priority order (last one wins)
    :param name: optional name of the new class
    :param metaclass: metaclass used to build the new class
    :param module: optional __module__ of the new class, defaults to the
        caller's module
    :return: the composed class
    :raises ConfigurationError: if no base or a non-class is given"""
    validate_bases(bases)
    (namespace, instance_ops, static_ops) = merge_tables(bases)
    names = class_names(bases)
    init = _build_constructor(bases)
    namespace.update({
        '__init__': init,
        '__module__': module or _caller_module(),
        '__doc__': DOC_TEMPLATE.format(', '.join(names)),
        '__composed_of__': bases,
        '__instance_operations__': MappingProxyType(instance_ops),
        '__static_operations__': MappingProxyType(static_ops),
    })
    derived = metaclass(name or NAME_TEMPLATE.format('_'.join(names)),
                        (object,), namespace)
    init.__qualname__ = '{}.__init__'.format(derived.__qualname__)
    logger.debug("composed %s from %s: %d instance ops, %d static ops",
                 derived.__name__, names, len(instance_ops), len(static_ops))
    return derived


Extender = compose

__all__ = ['compose', 'Extender', ]

"""Operation tables of classes and instances.

A class is seen through two ordered tables built from its *own* ``__dict__``:

* the instance table: functions, properties and other descriptors that act
  on instances (dunder methods included)
* the static table: static methods, class methods and plain values

Inherited members are not enumerated: composition copies what a class
declares itself.
"""
import inspect
import logging
import types
from sortedcontainers import SortedSet
from .utils import dict_update

logger = logging.getLogger(__name__)

# never copied from a base, these belong to the derived class itself
RESERVED_INSTANCE_NAMES = frozenset((
    '__init__', '__new__',
))
RESERVED_STATIC_NAMES = frozenset((
    '__dict__', '__weakref__',
    '__name__', '__qualname__', '__module__', '__doc__',
    '__slots__',
    '__firstlineno__', '__static_attributes__',
    '__annotations__', '__annotate__', '__annotate_func__',
    '__annotations_cache__',
    '__orig_bases__', '__parameters__',
    '__abstractmethods__', '_abc_impl',
    '__composed_of__', '__instance_operations__', '__static_operations__',
))
RESERVED_NAMES = RESERVED_INSTANCE_NAMES | RESERVED_STATIC_NAMES


def is_static_member(value) -> bool:
    """Tell whether a class member goes to the static table"""
    if isinstance(value, (staticmethod, classmethod)):
        return True
    return not hasattr(type(value), '__get__')


def operation_tables(cls):
    """Split the own members of a class into (instance, static) tables

    Slot descriptors are left out: slot values travel as instance fields.

    :param cls: a class
    :return: tuple of two dicts, in declaration order"""
    instance_ops = {}
    static_ops = {}
    for (name, value) in vars(cls).items():
        if name in RESERVED_NAMES:
            continue
        if isinstance(value, types.MemberDescriptorType):
            continue
        if is_static_member(value):
            static_ops[name] = value
        else:
            instance_ops[name] = value
    return instance_ops, static_ops


def merge_tables(bases):
    """Fold the operation tables of bases, later bases win

    A name lives in exactly one of the merged tables: a later static member
    displaces an earlier method of the same name and vice versa.

    :param bases: ordered sequence of classes
    :return: (namespace, instance_ops, static_ops); namespace holds every
        merged member in first-seen order"""
    namespace = {}
    instance_ops = {}
    static_ops = {}
    for base in bases:
        (inst, stat) = operation_tables(base)
        for name in inst:
            static_ops.pop(name, None)
        for name in stat:
            instance_ops.pop(name, None)
        dict_update(instance_ops, inst, label='{} instance'.format(base.__name__))
        dict_update(static_ops, stat, label='{} static'.format(base.__name__))
        namespace.update(inst)
        namespace.update(stat)
    return namespace, instance_ops, static_ops


def fit_arguments(base, args, kwargs):
    """Trim the shared arguments to what the constructor of base accepts

    Surplus trailing positional arguments and unknown keywords are dropped
    unless the signature takes *args / **kwargs. Arguments are never
    reordered or routed.

    :return: (args, kwargs)"""
    try:
        parameters = inspect.signature(base).parameters.values()
    except (TypeError, ValueError):
        # no introspectable signature, replay everything
        return args, kwargs
    kinds = set(p.kind for p in parameters)
    if inspect.Parameter.VAR_POSITIONAL not in kinds:
        positional = [p for p in parameters if p.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD)]
        args = args[:len(positional)]
    if inspect.Parameter.VAR_KEYWORD not in kinds:
        accepted = set(p.name for p in parameters if p.kind in (
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.KEYWORD_ONLY))
        kwargs = dict((k, v) for (k, v) in kwargs.items() if k in accepted)
    return args, kwargs


def construct(base, args, kwargs):
    """Build a fresh instance of base with the shared arguments

    Every base sees the same argument list, trimmed to its constructor's
    signature, so that arguments meant for other bases do not break it."""
    (args, kwargs) = fit_arguments(base, tuple(args), kwargs)
    return base(*args, **kwargs)


def _slot_names(cls):
    slots = vars(cls).get('__slots__', ())
    if isinstance(slots, str):
        slots = (slots,)
    for slot in slots:
        if slot in ('__dict__', '__weakref__'):
            continue
        if slot.startswith('__') and not slot.endswith('__'):
            # private slots are name-mangled
            yield '_{}{}'.format(cls.__name__.lstrip('_'), slot)
        else:
            yield slot


def own_fields(instance) -> dict:
    """Fields assigned on an instance, slots included

    :param instance: any object
    :return: dict of field name to value, base slots first"""
    fields = {}
    for klass in reversed(type(instance).__mro__):
        for slot in _slot_names(klass):
            try:
                fields[slot] = getattr(instance, slot)
            except AttributeError:
                # declared but never assigned
                continue
    fields.update(getattr(instance, '__dict__', {}))
    fields.pop('__init__', None)
    return fields


def member_names(cls) -> SortedSet:
    """Names of the members a class brings to a composition

    For a composed class, the merged tables; for any other class, its own
    operation tables.

    :param cls: a class
    :return: SortedSet of names"""
    if '__composed_of__' in vars(cls):
        return SortedSet(cls.__instance_operations__) | SortedSet(cls.__static_operations__)
    (inst, stat) = operation_tables(cls)
    return SortedSet(inst) | SortedSet(stat)


__all__ = ['operation_tables', 'merge_tables', 'fit_arguments', 'construct',
           'own_fields', 'member_names', ]

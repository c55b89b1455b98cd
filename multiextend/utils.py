"""Misc helpers used by the composer"""
import logging

logger = logging.getLogger(__name__)


def dict_update(d1, *args, label=None):
    """Update d1 with other maps passed as args, last one wins

    Unlike a plain dict.update, keys that get replaced are logged.

    :param d1: dictionary to update
    :param ...: maps to take the updates from, treated in order
    :param label: optional name of the thing being folded, for the logs
    :return: d1"""
    for d2 in args:
        for k, v in d2.items():
            if k in d1 and d1[k] is not v:
                logger.debug("%s: %s %s replaced by %s", label or 'merge', k,
                             describe_member(d1[k]), describe_member(v))
            d1[k] = v
    return d1


def get_real_function(o):
    """Get the real function behind a static/class method

    :return: callable, or o itself"""
    return getattr(o, '__func__', o)


def describe_member(o):
    """Short human description of a class member, for logs"""
    real = get_real_function(o)
    qualname = getattr(real, '__qualname__', None)
    if qualname:
        return '{}({})'.format(type(o).__name__, qualname)
    return '{}({!r})'.format(type(o).__name__, o)


def class_names(classes):
    return list(getattr(c, '__name__', repr(c)) for c in classes)

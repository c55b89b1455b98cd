"""Checks run on candidate bases before anything gets composed"""
import types

# members implemented in C, bound to their own type's instance layout
_BUILTIN_DESCRIPTORS = (
    types.MethodDescriptorType,
    types.WrapperDescriptorType,
    types.ClassMethodDescriptorType,
    types.GetSetDescriptorType,
)


class ConfigurationError(TypeError):
    """Raised when compose() is given an unusable list of bases.

    :param message: human readable message
    :param index: position of the offending base, None if the list itself
        is the problem"""

    def __init__(self, message, index=None):
        super().__init__(message)
        self.index = index


def has_builtin_members(base) -> bool:
    """Tell whether a class declares C-level members, as built-in types do"""
    return any(
        isinstance(value, _BUILTIN_DESCRIPTORS)
        for (name, value) in vars(base).items()
        if name not in ('__dict__', '__weakref__'))


def validate_bases(bases):
    """Validate the base classes passed to compose

    Fails on the first problem met; nothing is constructed or merged.

    :param bases: sequence of candidate base classes
    :raises ConfigurationError: empty sequence, non-class or built-in
        type element"""
    if not bases:
        raise ConfigurationError('at least one base must be provided')
    for (index, base) in enumerate(bases):
        if not isinstance(base, type):
            raise ConfigurationError(
                'invalid base at index {}: {!r} is not a class'.format(index, base),
                index=index)
        if has_builtin_members(base):
            raise ConfigurationError(
                'invalid base at index {}: {} is a built-in type'.format(
                    index, base.__name__),
                index=index)


__all__ = ['ConfigurationError', 'validate_bases', ]

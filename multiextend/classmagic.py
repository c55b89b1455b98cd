"""Utilities that change class items"""
from .extender import compose


class ComposableType(type):
    """A type that can be composed

    Used so we can compose behaviours easily

    CT1 + CT2 = CT3, with CT3 = compose(CT1, CT2)

    Works whichever side the plain class is on: Plain + CT1 composes too."""

    def __add__(self, other):
        if not isinstance(other, type):
            return NotImplemented
        return compose(self, other, metaclass=type(self), module=self.__module__)

    def __radd__(self, other):
        if not isinstance(other, type):
            return NotImplemented
        return compose(other, self, metaclass=type(self), module=self.__module__)


__all__ = ['ComposableType', ]

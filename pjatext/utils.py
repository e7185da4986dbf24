"""
pjatext utilities (internal helpers)

Scope
- Small building blocks shared by the instruction, output and command layers.

Overview
- UnsetType / Unset
  • Singleton sentinel meaning “not provided”, distinct from None and "".
  • The engine uses it to tell “read sys.argv” apart from an explicit prompt;
    outputs use it for “no fault code”.

- @rename("name")
  • Give a generated method a stable __name__/__qualname__ (repr hooks built
    by the command metaclass).

- mirror("attr")
  • Read-only property over the slot "_attr"; an Unset slot reads as None.

Quick example
    >>> class Point:
    ...     __slots__ = ("_x",)
    ...     x = mirror("x")
    ...     def __init__(self, x):
    ...         self._x = x
    >>> Point(3).x
    3
"""
import functools
from typing import final


@final
class UnsetType:
    """
    Sentinel type for a value that was not provided.

    - bool(Unset) is False, yet Unset is not None.
    - repr(Unset) -> "Unset".
    - One instance per process; the type cannot be subclassed.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()


def rename(name, /):
    """
    Decorator setting __name__ and __qualname__ of the decorated callable.
    """
    if not isinstance(name, str):
        raise TypeError("@rename() argument must be a string")

    def wrapper(function):
        if not callable(function):
            raise TypeError("@rename() must be applied to a callable")
        function.__name__ = function.__qualname__ = name
        return function

    return wrapper


def mirror(name, /):
    """
    Define a read-only property that mirrors the backing slot "_{name}".
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")
    attribute = "_" + name

    @rename(name)
    def getter(self):
        value = getattr(self, attribute)
        return None if value is Unset else value

    return property(getter)


__all__ = (
    # Functions
    "rename",
    "mirror",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)

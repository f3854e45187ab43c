"""
Cmdline utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the parameter, parser and fault layers.

Overview
- UnsetType / Unset
  • Singleton sentinel for “value not provided”, distinct from None and "".
  • Falsey, printable as "Unset", non-subclassable, usable in isinstance
    unions (str | Unset).

- coalesce(value, default=None)
  • Replace Unset with a concrete default; None/0/"" pass through.

- @rename("name")
  • Give generated methods and property getters a stable __name__/__qualname__.

- mirror("attr")
  • Read-only property exposing self._attr; containers (token deques, value
    lists, option tuples) are handed out as fresh copies.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> coalesce(None, "fallback") is None
    True
    >>> class X:
    ...     _values = deque(["a.mp3", "b.mp3"])
    ...     values = mirror("values")
    >>> X().values
    ['a.mp3', 'b.mp3']
"""
import functools
from collections.abc import Mapping, Sequence, Set
from typing import final


@final
class UnsetType:
    """
    Sentinel type for a value that was not provided.

    Parameters default their descriptions and option names to it, so that an
    explicit "" can be told apart from an omitted argument.
    """

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Return object, or default when object is Unset.
    """
    return object if object is not Unset else default


def rename(name, /):
    """
    Decorator setting __name__ and __qualname__ of the decorated function.

    Raises TypeError when name is not a string or the target is not a function.
    """
    if not isinstance(name, str):
        raise TypeError("rename() argument must be a string")

    def decorator(function):
        if not callable(function):
            raise TypeError("@rename() must be applied to a callable")
        function.__name__ = function.__qualname__ = name
        return function

    return decorator


def _detach(object):
    # deques and tuples come back as lists, mappings as dicts.
    if isinstance(object, Sequence) and not isinstance(object, str):
        return [_detach(item) for item in object]
    if isinstance(object, Mapping):
        return {key: _detach(value) for key, value in object.items()}
    if isinstance(object, Set):
        return {_detach(item) for item in object}
    return object


def mirror(name, /):
    """
    Define a read-only property returning a detached copy of "_{name}".
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _detach(getattr(self, "_" + name))

    return property(getter)


Unset = UnsetType()


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "mirror",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)

r"""
Cmdline parameter definitions.

Overview
- Parameter: anything with a name, a description, a mandatory flag and a
  specified flag (set once populated).
  • OptionParam: a named value inside a ValueOption, populated from a NameValuePair.
- Argument(Parameter): a parameter populated from the parser's token queue.
  Each one answers three questions about a deque of tokens:
  • consumes(queue): how many tokens it would take.
  • can_populate(queue): whether it accepts the queue's current front.
  • populate(queue): take its tokens from the front and record the values.
  Concrete arguments:
  • Program: the first token (the program name as typed).
  • Option: a presence switch such as -v/--verbose (or /v, /verbose).
  • ValueOption: an option followed by exactly one value (-p song).
  • Positional: one non-option token.
  • MultiPositional: every remaining token, once no option-shaped token is left.

- Introspection & representation
  • ParameterType metaclass derives __typename__ from the class name, exposes the
    names in __introspectable__ as read-only properties (mirror()), and builds
    __repr__/__rich_repr__ from __displayable__ (or __introspectable__).

Metadata (sanitized on construction)
- description: Unset | str (defaults to "").
- mandatory: bool.
- name (Positional, MultiPositional, OptionParam): legal name, see is_legal_name().
- short/long (Option, ValueOption): a single ASCII alphanumeric character or "?",
  and a legal name; at least one of them is required.
- style (Option, ValueOption): Style.UNIX or Style.WINDOWS; the only field that
  stays mutable after construction (see restyle()).
- order (MultiPositional): Order.END (default) or Order.AFTER_OPTIONS.

Quick example:
    >>> from collections import deque
    >>> verbose = Option("v", "verbose", "prints verbose info")
    >>> verbose.help
    '  -v, --verbose               prints verbose info'
    >>> queue = deque(["--verbose", "a.mp3"])
    >>> verbose.populate(queue), verbose.specified, list(queue)
    (True, True, ['a.mp3'])
"""
import functools
import operator
import re
from abc import ABCMeta, abstractmethod

from .constants import (
    HELP_INDENT,
    NAME_MESSAGE,
    OPTION_EMPTY_NAME_MESSAGE,
    OPTION_LONG_NAME_MESSAGE,
    OPTION_SHORT_NAME_MESSAGE,
    PROGRAM_NAME_MESSAGE,
    WILDCARD_SHORT_NAME,
)
from .enums import Order, Style
from .faults import (
    DuplicateOptionParamError,
    InvalidDefinitionError,
    NullOptionParamError,
)
from .help import help_line
from .pairs import NameValuePair, parse_pair
from .utils import Unset, coalesce, mirror, rename
from .validation import is_legal_name, is_option


class ParameterType(ABCMeta):
    """
    Metaclass that turns parameter classes into introspectable definitions.

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens)
      and used in messages and representations ("value-option", "multi-positional").
    - every name in __introspectable__ becomes a read-only property mirroring "_{name}".
    - __displayable__ (if set) narrows or extends what __rich_repr__ yields;
      otherwise __introspectable__ is used.
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
            **options
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Example
            - option(name='-v', long_name='--verbose', description='prints verbose info', ...)
            """
            return f"{type(self).__typename__}({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: normalize the fields every parameter shares.

    - description: Unset becomes ""; anything else must be a string.
    - mandatory: coerced to bool.

    Mutates metadata in place.
    """
    if not isinstance(description := metadata["description"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'description' must be a string")
    metadata["description"] = coalesce(description, "")
    metadata["mandatory"] = bool(metadata["mandatory"])


def _sanitize_named_metadata(cls, metadata, /):
    """
    Internal: validate the 'name' of positionals and option params.

    Raises
    - TypeError: the name is not a string.
    - InvalidDefinitionError: the name is not legal (see is_legal_name).
    """
    if not isinstance(name := metadata["name"], str):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    if not is_legal_name(name):
        raise InvalidDefinitionError(f"{cls.__typename__} name {name!r}: {NAME_MESSAGE}", name=name)


def _sanitize_option_metadata(cls, metadata, /):
    """
    Internal: validate the short/long names and the style of an option.

    - short: Unset/"" (absent) or a single ASCII alphanumeric character or "?".
    - long: Unset/"" (absent) or a legal name.
    - at least one of them must be present.
    - style: a Style member.

    Absent names are normalized to None. Mutates metadata in place.
    """
    for field in ("short", "long"):
        if not isinstance(value := metadata[field], str | Unset):
            raise TypeError(f"{cls.__typename__} '{field}' must be a string")
        metadata[field] = coalesce(value) or None

    short, long = metadata["short"], metadata["long"]
    if short is None and long is None:
        raise InvalidDefinitionError(f"{cls.__typename__}: {OPTION_EMPTY_NAME_MESSAGE}")
    if short is not None and not (len(short) == 1 and (short.isascii() and short.isalnum() or short == WILDCARD_SHORT_NAME)):
        raise InvalidDefinitionError(f"{cls.__typename__} short name {short!r}: {OPTION_SHORT_NAME_MESSAGE}", name=short)
    if long is not None and not is_legal_name(long):
        raise InvalidDefinitionError(f"{cls.__typename__} long name {long!r}: {OPTION_LONG_NAME_MESSAGE}", name=long)

    if not isinstance(metadata["style"], Style):
        raise TypeError(f"{cls.__typename__} 'style' must be a Style")


def _sanitize_order_metadata(cls, metadata, /):
    if not isinstance(metadata["order"], Order):
        raise TypeError(f"{cls.__typename__} 'order' must be an Order")


class Parameter(metaclass=ParameterType):
    """
    Base of every parameter: a description, a mandatory flag and a specified flag.

    Subclasses provide 'name' and 'help' (the line shown in help output).
    """

    def __new__(cls, /, **metadata):
        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        self._specified = False
        return self

    @property
    @abstractmethod
    def name(self): ...

    @property
    @abstractmethod
    def help(self): ...


class Argument(Parameter):
    """
    A parameter populated from the front of the parser's token queue.

    Contract
    - consumes(queue) never mutates the queue.
    - can_populate(queue) never mutates the queue.
    - populate(queue) returns False and leaves the queue untouched when
      can_populate(queue) is False; otherwise it removes exactly the tokens it
      takes from the front, records them and returns True.
    """

    @abstractmethod
    def consumes(self, queue, /): ...

    @abstractmethod
    def can_populate(self, queue, /): ...

    @abstractmethod
    def populate(self, queue, /): ...


class Program(Argument):
    """
    The program parameter: takes the first token of the command line.

    'name' is the name defined by the program (used in usage output), while
    'value' holds the token the user actually typed (e.g. "./mediaedit").
    """

    __introspectable__ = (
        "name",
        "description",
        "mandatory",
        "specified",
        "value",
    )

    def __new__(cls, name, /, description=Unset, *, mandatory=False):
        if not isinstance(name, str):
            raise TypeError(f"{cls.__typename__} 'name' must be a string")
        if not name:
            raise InvalidDefinitionError(f"{cls.__typename__} {PROGRAM_NAME_MESSAGE}")
        metadata = {
            "name": name,
            "description": description,
            "mandatory": mandatory,
        }
        _sanitize_metadata(cls, metadata)
        self = super().__new__(cls, **metadata)
        self._value = None
        return self

    @property
    def help(self):
        return HELP_INDENT + self._description

    def consumes(self, queue, /):
        return 1

    def can_populate(self, queue, /):
        return not self._specified and len(queue) > 0

    def populate(self, queue, /):
        if not self.can_populate(queue):
            return False
        self._value = queue.popleft()
        self._specified = True
        return True


class Option(Argument):
    """
    Presence switch identified by a short and/or a long name.

    Under Style.UNIX the option matches "-{short}" and "--{long}"; under
    Style.WINDOWS it matches "/{short}" and "/{long}". The style may be changed
    after construction with restyle().

    Properties
    - short / long: the bare names (None when absent).
    - short_name / long_name: the prefixed forms for the current style (None when absent).
    - name: short_name when there is a short name, long_name otherwise.
    - label: the help label ("-p, --print", "-s" or "--long").
    """

    __introspectable__ = (
        "short",
        "long",
        "description",
        "mandatory",
        "specified",
        "style",
    )
    __displayable__ = (
        "name",
        "long_name",
        "description",
        "mandatory",
        "specified",
        "style",
    )

    def __new__(cls, short=Unset, long=Unset, description=Unset, *, mandatory=False, style=Style.UNIX):
        metadata = {
            "short": short,
            "long": long,
            "description": description,
            "mandatory": mandatory,
            "style": style,
        }
        _sanitize_metadata(cls, metadata)
        _sanitize_option_metadata(cls, metadata)
        return super().__new__(cls, **metadata)

    @property
    def short_name(self):
        if self._short is None:
            return None
        return self._style.short_prefix + self._short

    @property
    def long_name(self):
        if self._long is None:
            return None
        return self._style.long_prefix + self._long

    @property
    def name(self):
        return self.short_name if self._short is not None else self.long_name

    @property
    def label(self):
        return ", ".join(name for name in (self.short_name, self.long_name) if name is not None)

    @property
    def help(self):
        return help_line(self.label, self._description)

    def restyle(self, style, /):
        if not isinstance(style, Style):
            raise TypeError(f"{type(self).__typename__} 'style' must be a Style")
        self._style = style

    def names(self, style=Unset, /):
        """
        Prefixed names under style (the current style when omitted).
        """
        style = coalesce(style, self._style)
        if not isinstance(style, Style):
            raise TypeError(f"{type(self).__typename__} 'style' must be a Style")
        names = set()
        if self._short is not None:
            names.add(style.short_prefix + self._short)
        if self._long is not None:
            names.add(style.long_prefix + self._long)
        return names

    def matches(self, token, /):
        """
        Check a single token against the prefixed short and long names.
        """
        return token is not None and token in (self.short_name, self.long_name)

    def consumes(self, queue, /):
        return 1

    def can_populate(self, queue, /):
        return len(queue) > 0 and self.matches(queue[0])

    def populate(self, queue, /):
        if not self.can_populate(queue):
            return False
        queue.popleft()
        self._specified = True
        return True


class ValueOption(Option):
    """
    Option followed by exactly one value token ("-p song", "/edit album=Title").

    Every value is appended to 'values' (repeating the option accumulates).
    When a value is also a valid name=value pair, the first registered
    OptionParam with the same name receives the pair's value; values that are
    not pairs, or that match no OptionParam, are still recorded.
    """

    __introspectable__ = Option.__introspectable__ + (
        "params",
        "values",
    )
    __displayable__ = Option.__displayable__ + (
        "params",
        "values",
    )

    def __new__(cls, short=Unset, long=Unset, description=Unset, *, mandatory=False, style=Style.UNIX):
        self = super().__new__(cls, short, long, description, mandatory=mandatory, style=style)
        self._params = []
        self._values = []
        return self

    @property
    def help(self):
        if not self._params:
            return super().help
        return super().help + "\n\n" + "".join(param.help + "\n" for param in self._params)

    def add(self, param, /):
        """
        Register an OptionParam.

        Raises
        - NullOptionParamError: param is None.
        - TypeError: param is not an OptionParam.
        - DuplicateOptionParamError: an OptionParam with the same name exists.
        """
        if param is None:
            raise NullOptionParamError("cannot add null OptionParam to Option")
        if not isinstance(param, OptionParam):
            raise TypeError(f"{type(self).__typename__} can only add option-param instances")
        if any(existing.name == param.name for existing in self._params):
            raise DuplicateOptionParamError("cannot add a duplicate OptionParam to Option", name=param.name)
        self._params.append(param)

    def consumes(self, queue, /):
        return 2

    def can_populate(self, queue, /):
        return len(queue) >= 2 and self.matches(queue[0])

    def populate(self, queue, /):
        if not self.can_populate(queue):
            return False
        queue.popleft()
        value = queue.popleft()
        self._values.append(value)
        self._specified = True

        if (pair := parse_pair(value)) is not None:
            for param in self._params:
                if param.can_populate(pair):
                    param.populate(pair)
                    break
        return True


class OptionParam(Parameter):
    """
    Named value accepted by a ValueOption ("song" in "-p song", "album" in
    "-e album=Title"). Populated from a NameValuePair; 'value' is the pair's
    value, possibly "".
    """

    __introspectable__ = (
        "name",
        "description",
        "mandatory",
        "specified",
        "value",
    )

    def __new__(cls, name, /, description=Unset, *, mandatory=False):
        metadata = {
            "name": name,
            "description": description,
            "mandatory": mandatory,
        }
        _sanitize_metadata(cls, metadata)
        _sanitize_named_metadata(cls, metadata)
        self = super().__new__(cls, **metadata)
        self._value = None
        return self

    @property
    def help(self):
        return help_line(self._name, self._description)

    def can_populate(self, pair, /):
        return isinstance(pair, NameValuePair) and pair.name == self._name

    def populate(self, pair, /):
        if not self.can_populate(pair):
            return False
        self._value = pair.value
        self._specified = True
        return True


class Positional(Argument):
    """
    Single non-option token, taken at most once.
    """

    __introspectable__ = (
        "name",
        "description",
        "mandatory",
        "specified",
        "value",
    )

    def __new__(cls, name, /, description=Unset, *, mandatory=False):
        metadata = {
            "name": name,
            "description": description,
            "mandatory": mandatory,
        }
        _sanitize_metadata(cls, metadata)
        _sanitize_named_metadata(cls, metadata)
        self = super().__new__(cls, **metadata)
        self._value = None
        return self

    @property
    def help(self):
        return help_line(self._name, self._description)

    def consumes(self, queue, /):
        return 1

    def can_populate(self, queue, /):
        return not self._specified and len(queue) > 0 and bool(queue[0]) and not is_option(queue[0])

    def populate(self, queue, /):
        if not self.can_populate(queue):
            return False
        self._value = queue.popleft()
        self._specified = True
        return True


class MultiPositional(Argument):
    """
    Collects every remaining token at once.

    Notes
    - can_populate() is all-or-nothing: it refuses while any option-shaped
      token remains in the queue.
    - consumes() counts the non-option tokens whether or not can_populate()
      would accept the queue; the parser uses it to size the AFTER_OPTIONS split.
    """

    __introspectable__ = (
        "name",
        "description",
        "mandatory",
        "specified",
        "order",
        "values",
    )

    def __new__(cls, name, /, description=Unset, *, mandatory=False, order=Order.END):
        metadata = {
            "name": name,
            "description": description,
            "mandatory": mandatory,
            "order": order,
        }
        _sanitize_metadata(cls, metadata)
        _sanitize_named_metadata(cls, metadata)
        _sanitize_order_metadata(cls, metadata)
        self = super().__new__(cls, **metadata)
        self._values = []
        return self

    @property
    def help(self):
        return help_line(self._name, self._description)

    def consumes(self, queue, /):
        return sum(1 for token in queue if not is_option(token))

    def can_populate(self, queue, /):
        return len(queue) > 0 and not any(map(is_option, queue))

    def populate(self, queue, /):
        if not self.can_populate(queue):
            return False
        self._values.extend(queue)
        queue.clear()
        self._specified = True
        return True


__all__ = (
    "Parameter",
    "Argument",
    "Program",
    "Option",
    "ValueOption",
    "OptionParam",
    "Positional",
    "MultiPositional",
)

# Remove the internal metaclass from the module namespace to avoid accidental
# exposure in docs, autocompletion, or star-imports. Not part of the public API.
del ParameterType

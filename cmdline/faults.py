"""
Cmdline faults (definition errors and input errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every fault the library
  can produce, grouped by domain.
- DefinitionError: raised while a program declares its parameters (bad names,
  None where a parameter is required, duplicates, empty argument lists, use of
  an already parsed parser). These are programmer errors and always raise.
- InputError: describes what was wrong with the end user's command line
  (unknown option, option missing its value, argument nobody accepts). The
  parser never raises these; it returns Status.FAILURE and keeps the instance
  in Parser.faults for the host to print, raise or ignore.

Rendering
- Both families carry a message plus a read-only mapping of options (code, title,
  hint, program, colorful, fancy) and render themselves through rich (__rich__).
- Colours can be overridden with a __styles__ mapping in __main__, the program
  label with __prog__, and code labels with __codes__.
"""
from collections import defaultdict, namedtuple
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, coalesce


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - definitions (211xx)
      • INVALID_DEFINITION, INVALID_PAIR, NULL_PARAMETER, NULL_OPTION_PARAM,
        DUPLICATE_OPTION, DUPLICATE_POSITIONAL, DUPLICATE_OPTION_PARAM,
        EMPTY_ARGUMENTS, SEALED_PARSER
    - input (221xx)
      • UNKNOWN_OPTION, MISSING_OPTION_VALUE, UNEXPECTED_ARGUMENT

    spacing leaves room for future additions without reshuffling existing codes.
    """
    # --- definition errors (21xxx) ---
    INVALID_DEFINITION          = 21101
    INVALID_PAIR                = 21102
    NULL_PARAMETER              = 21111
    NULL_OPTION_PARAM           = 21112
    DUPLICATE_OPTION            = 21121
    DUPLICATE_POSITIONAL        = 21122
    DUPLICATE_OPTION_PARAM      = 21123
    EMPTY_ARGUMENTS             = 21131
    SEALED_PARSER               = 21141

    # --- input errors (22xxx) ---
    UNKNOWN_OPTION              = 22111
    MISSING_OPTION_VALUE        = 22112
    UNEXPECTED_ARGUMENT         = 22121

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class Fault(Exception):
    """
    Common base of every cmdline fault.

    Subclasses declare class-level defaults for 'code', 'title' and 'hint';
    any of them can be overridden per instance through keyword options.
    """
    code = Unset
    title = Unset
    hint = Unset

    __palette__ = {
        "prog-name": "bold #E6E6F0",  # near-white program name
        "code": "bold #00E5FF",  # neon cyan fault code
        "title": "bold #FF4DA6",  # friendly pinky title
        "message": "#C8C8D0",  # soft light gray message
        "hint-arrow": "#9CE19C dim",  # gentle green arrow
        "hint": "italic #9CE19C",  # gentle green hint text
    }

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(coalesce(message, ""))
        self.message = message
        self.options = MappingProxyType({
            "code": type(self).code,
            "title": type(self).title,
            "hint": type(self).hint,
        } | options)

    def __str__(self):
        return coalesce(self.message, "")

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", True)

        styles = defaultdict(str, type(self).__palette__ | getattr(main, "__styles__", {}))

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            return Text(str(fragment), styles[style] if colorful else "")

        header = Text.assemble(
            "[ ",
            text(getattr(main, "__prog__", self.options.get("program", "cmdline")), "prog-name"),
            " — ",
            text(self.options["code"].normalize() if self.options["code"] else "", "code"),
            " | ",
            text(coalesce(self.options["title"], "").title(), "title"),
            " ]"
        )
        message = text(self.message, "message")
        hint = Text.assemble(text(" → ", "hint-arrow"), text(coalesce(self.options["hint"], ""), "hint"))

        if self.options.get("fancy", False):
            return Panel(Group(message, hint), title=header, title_align="left")

        return Group(header, message, hint)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class DefinitionError(Fault, ValueError):
    code = FaultCode.INVALID_DEFINITION
    title = "invalid definition"
    hint = "fix the parameter declarations of the program"


class InvalidDefinitionError(DefinitionError): ...


class InvalidPairError(DefinitionError):
    code = FaultCode.INVALID_PAIR
    title = "invalid name=value pair"
    hint = "use a legal name, optionally followed by '=' and a value"


class NullParameterError(DefinitionError):
    code = FaultCode.NULL_PARAMETER
    title = "missing parameter"


class NullOptionParamError(DefinitionError):
    code = FaultCode.NULL_OPTION_PARAM
    title = "missing option parameter"


class DuplicateOptionError(DefinitionError):
    code = FaultCode.DUPLICATE_OPTION
    title = "duplicate option"
    hint = "every short and long option name must be unique, including -h/--help"


class DuplicatePositionalError(DefinitionError):
    code = FaultCode.DUPLICATE_POSITIONAL
    title = "duplicate positional parameter"


class DuplicateOptionParamError(DefinitionError):
    code = FaultCode.DUPLICATE_OPTION_PARAM
    title = "duplicate option parameter"


class EmptyArgumentsError(DefinitionError):
    code = FaultCode.EMPTY_ARGUMENTS
    title = "empty arguments"
    hint = "pass the full argument vector, program name included"


class SealedParserError(DefinitionError):
    code = FaultCode.SEALED_PARSER
    title = "parser already used"
    hint = "create a new parser for every argument vector"


Outcome = namedtuple("Outcome", ("value", "fault"))


def attempt(factory, /, *args, **kwargs):
    """
    Call a parameter or parser constructor and report its outcome instead of raising.

    Returns Outcome(value, None) on success and Outcome(None, fault) when the
    constructor raised a DefinitionError. Other exceptions propagate.

    Example
    - attempt(Option, "", "") -> Outcome(value=None, fault=InvalidDefinitionError(...))
    """
    if not callable(factory):
        raise TypeError("attempt() first argument must be callable")
    try:
        return Outcome(factory(*args, **kwargs), None)
    except DefinitionError as fault:
        return Outcome(None, fault)


class InputError(Fault):
    code = Unset
    title = "invalid command line"
    hint = Unset


class UnknownOptionError(InputError):
    code = FaultCode.UNKNOWN_OPTION
    title = "unknown option"


class MissingOptionValueError(InputError):
    code = FaultCode.MISSING_OPTION_VALUE
    title = "option value required"


class UnexpectedArgumentError(InputError):
    code = FaultCode.UNEXPECTED_ARGUMENT
    title = "unexpected argument"


__all__ = (
    "FaultCode",
    "Fault",
    "DefinitionError",
    "InvalidDefinitionError",
    "InvalidPairError",
    "NullParameterError",
    "NullOptionParamError",
    "DuplicateOptionError",
    "DuplicatePositionalError",
    "DuplicateOptionParamError",
    "EmptyArgumentsError",
    "SealedParserError",
    "InputError",
    "UnknownOptionError",
    "MissingOptionValueError",
    "UnexpectedArgumentError",
    "Outcome",
    "attempt",
)

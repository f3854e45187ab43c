"""
Cmdline parser: turns one argument vector into populated parameters.

Overview
- Parser(program, arguments): bind a Program parameter to an argument vector
  (program token first). A built-in -h/--help Option is registered before
  anything else.
- add(option | positional), set(multipositional | None), restyle(style):
  registration, all before parse().
- parse() -> Status: runs two phases.
  • Queue reconstruction: option tokens (with the value tokens they consume) are
    moved in front of the positional tokens, and the positional tokens are
    ordered according to the MultiPositional's Order.
  • Population: the queue is offered, front first, to [program, options...,
    positionals..., multipositional]; the first parameter accepting it takes
    its tokens. Any token nobody takes fails the parse.
- all_mandatory_specified() / missing(): a separate query; a successful parse
  may still leave mandatory parameters unspecified.
- generate_usage() / generate_help(): plain text, available at any time.

Notes
- Definition problems raise DefinitionError subclasses. Problems with the
  user's command line never raise: parse() returns Status.FAILURE and the
  reason is kept in 'faults' as an InputError.
- A parser is single-use. Once parse() ran, calling it again or changing the
  registrations raises SealedParserError.
- The parser only holds references to the parameters it is given and writes
  to them solely through their populate() methods.
"""
import logging as logmod
from collections import deque

from .constants import (
    EMPTY_ARGUMENTS_MESSAGE,
    HELP_DESCRIPTION,
    HELP_LONG_NAME,
    HELP_SHORT_NAME,
)
from .enums import Order, Status, Style
from .faults import (
    DuplicateOptionError,
    DuplicatePositionalError,
    EmptyArgumentsError,
    MissingOptionValueError,
    NullParameterError,
    SealedParserError,
    UnexpectedArgumentError,
    UnknownOptionError,
)
from .help import help_text, render, usage_text
from .parameters import MultiPositional, Option, Positional, Program
from .utils import mirror
from .validation import is_option

logging = logmod.getLogger(__name__)


class Parser:
    """
    Queue-based command-line parser.

    Example
        >>> parser = Parser(Program("copy", "copies one or more files"), sys.argv)
        >>> parser.add(verbose := Option("v", "verbose", "prints verbose info"))
        >>> parser.add(destination := Positional("destination", mandatory=True))
        >>> parser.set(source := MultiPositional("source", mandatory=True, order=Order.AFTER_OPTIONS))
        >>> if parser.parse() is Status.FAILURE or not parser.all_mandatory_specified():
        ...     print(parser.generate_usage())

    Properties
    - program, arguments, options (help option first), positionals,
      multipositional, help_option: the registrations.
    - queue: the canonical queue built by the last parse (copy).
    - faults: input errors recorded by the last parse (copy).
    - sealed: whether parse() already ran.
    """

    program = mirror("program")
    arguments = mirror("arguments")
    options = mirror("options")
    positionals = mirror("positionals")
    multipositional = mirror("multipositional")
    help_option = mirror("help_option")
    queue = mirror("queue")
    faults = mirror("faults")
    sealed = mirror("sealed")

    def __init__(self, program, arguments, /):
        if program is None:
            raise NullParameterError("cannot add null ProgParam to the Parser")
        if not isinstance(program, Program):
            raise TypeError("parser 'program' must be a program instance")
        if isinstance(arguments, str):
            raise TypeError("parser 'arguments' must be a sequence of strings, not a string")
        arguments = tuple(arguments)
        if not arguments:
            raise EmptyArgumentsError(EMPTY_ARGUMENTS_MESSAGE)
        if not all(isinstance(argument, str) for argument in arguments):
            raise TypeError("parser 'arguments' must only contain strings")

        self._program = program
        self._arguments = arguments
        self._options = []
        self._positionals = []
        self._multipositional = None
        self._queue = deque()
        self._faults = []
        self._sealed = False

        self._help_option = Option(HELP_SHORT_NAME, HELP_LONG_NAME, HELP_DESCRIPTION)
        self.add(self._help_option)

    def __repr__(self):
        return f"parser(program={self._program.name!r}, arguments={list(self._arguments)!r}, sealed={self._sealed!r})"

    def __rich__(self):
        return render(self)

    @property
    def help_specified(self):
        return self._help_option.specified

    def _ensure_open(self):
        if self._sealed:
            raise SealedParserError("parser already parsed its arguments", program=self._program.name)

    def add(self, parameter, /):
        """
        Register an Option (ValueOption included) or a Positional.

        Raises
        - NullParameterError: parameter is None.
        - TypeError: parameter is neither an Option nor a Positional.
        - DuplicateOptionError: a registered option already uses one of its
          prefixed names (the built-in help option counts).
        - DuplicatePositionalError: a registered positional has the same name.
        - SealedParserError: parse() already ran.
        """
        self._ensure_open()
        if parameter is None:
            raise NullParameterError("cannot add a null parameter to the Parser")

        if isinstance(parameter, Option):
            names = parameter.names()
            for option in self._options:
                if names & option.names():
                    raise DuplicateOptionError(
                        "cannot add a duplicate Option to the Parser",
                        program=self._program.name,
                        name=parameter.name,
                    )
            self._options.append(parameter)
        elif isinstance(parameter, Positional):
            if any(positional.name == parameter.name for positional in self._positionals):
                raise DuplicatePositionalError(
                    "cannot add a duplicate PosParam to the Parser",
                    program=self._program.name,
                    name=parameter.name,
                )
            self._positionals.append(parameter)
        else:
            raise TypeError(f"parser cannot add {type(parameter).__name__!r} instances, use set() for multi-positionals")

    def set(self, multipositional, /):
        """
        Register the single MultiPositional, replacing any previous one;
        None clears it.
        """
        self._ensure_open()
        if multipositional is not None and not isinstance(multipositional, MultiPositional):
            raise TypeError("parser 'multipositional' must be a multi-positional instance or None")
        self._multipositional = multipositional

    def restyle(self, style, /):
        """
        Apply a Style to every registered option, the built-in help option included.

        Raises DuplicateOptionError, leaving every option untouched, when two
        options would share a prefixed name under the new style (e.g. a long
        name "h" and the help option's short name, both "/h" on Windows).
        """
        self._ensure_open()
        if not isinstance(style, Style):
            raise TypeError("parser 'style' must be a Style")
        taken = set()
        for option in self._options:
            names = option.names(style)
            if names & taken:
                raise DuplicateOptionError(
                    f"restyling would give two Options the same name {sorted(names & taken)[0]!r}",
                    program=self._program.name,
                    name=option.name,
                )
            taken |= names
        for option in self._options:
            option.restyle(style)

    def parse(self):
        self._ensure_open()
        self._sealed = True

        if not self._reconstruct():
            return Status.FAILURE
        if not self._populate():
            return Status.FAILURE
        return Status.SUCCESS

    def missing(self):
        """
        Mandatory parameters that are still unspecified, in registration order.
        """
        parameters = [self._program, *self._options, *self._positionals]
        if self._multipositional is not None:
            parameters.append(self._multipositional)
        return tuple(parameter for parameter in parameters if parameter.mandatory and not parameter.specified)

    def all_mandatory_specified(self):
        return not self.missing()

    def generate_usage(self):
        return usage_text(self)

    def generate_help(self):
        return help_text(self)

    def _record(self, fault):
        logging.debug("parse of %r failed: %s", self._program.name, fault.message)
        self._faults.append(fault)

    def _reconstruct(self):
        working = deque(self._arguments)
        self._queue = queue = deque([working.popleft()])
        remainder = deque()

        while working:
            token = working[0]
            if not is_option(token):
                remainder.append(working.popleft())
                continue

            option = next((option for option in self._options if option.can_populate(working)), None)
            if option is None:
                if any(option.matches(token) for option in self._options):
                    self._record(MissingOptionValueError(
                        f"option {token!r} requires a value",
                        program=self._program.name,
                        token=token,
                        hint=f"pass a value right after {token}",
                    ))
                else:
                    self._record(UnknownOptionError(
                        f"unknown option {token!r}",
                        program=self._program.name,
                        token=token,
                        hint=f"run '{self._program.name} {self._help_option.long_name}' to list the accepted options",
                    ))
                return False

            count = option.consumes(working)
            if not 0 < count <= len(working):
                self._record(MissingOptionValueError(
                    f"option {token!r} expects {count - 1} value(s)",
                    program=self._program.name,
                    token=token,
                ))
                return False
            for _ in range(count):
                queue.append(working.popleft())
            logging.debug("queued %r with %d token(s) for %s", token, count, option.name)

        multipositional = self._multipositional
        if multipositional is not None and multipositional.order is Order.AFTER_OPTIONS:
            leading = max(multipositional.consumes(remainder) - len(self._positionals), 0)
            moved = [remainder.popleft() for _ in range(leading)]
            queue.extend(remainder)
            queue.extend(moved)
        else:
            queue.extend(remainder)

        logging.debug("canonical queue: %r", list(queue))
        return True

    def _populate(self):
        arguments = [self._program, *self._options, *self._positionals]
        if self._multipositional is not None:
            arguments.append(self._multipositional)

        queue = deque(self._queue)
        while queue:
            size = len(queue)
            argument = next((argument for argument in arguments if argument.can_populate(queue)), None)
            if argument is None or not argument.populate(queue) or len(queue) >= size:
                self._record(UnexpectedArgumentError(
                    f"unexpected argument {queue[0]!r}",
                    program=self._program.name,
                    token=queue[0],
                    hint=f"run '{self._program.name} {self._help_option.long_name}' to see the expected parameters",
                ))
                return False
            logging.debug("%s %r took %d token(s)", type(argument).__typename__, argument.name, size - len(queue))
        return True


__all__ = (
    "Parser",
)

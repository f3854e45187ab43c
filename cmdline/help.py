"""
Usage and help generation.

Overview
- help_line(name, description): the two-space indented, 28-column aligned line
  used for every parameter in help output:
      "  -p, --print                 prints the specified fields"
- bracketed_label(parameter): "<name>" for mandatory, "[name]" for optional.
- plain_usage(parser): the "Usage:" block ("  copy [options] <source>... <destination>").
- usage_text(parser): plain usage, a blank line and the "Try ..." hint.
- help_text(parser): plain usage followed by description, positional and option
  sections.
- render(parser): the same content as help_text, as a styled rich renderable.

Notes
- Usage always shows the program's defined name, never the token the user typed.
- The multi-positional label goes first when its order is AFTER_OPTIONS, last
  otherwise, and always carries the "..." indicator.
"""
from collections import defaultdict

from rich.console import Group
from rich.text import Text

from .constants import (
    DESCRIPTION_HEADER,
    HELP_HINT,
    HELP_INDENT,
    HELP_NAME_FIELD_WIDTH,
    MANDATORY_BRACKETS,
    MULTI_INDICATOR,
    OPTIONAL_BRACKETS,
    OPTIONS_HEADER,
    OPTIONS_LABEL,
    POSITIONALS_HEADER,
    USAGE_HEADER,
)
from .enums import Order


def help_line(name, description, /):
    return HELP_INDENT + name.ljust(HELP_NAME_FIELD_WIDTH) + description


def bracketed_label(parameter, /):
    opening, closing = MANDATORY_BRACKETS if parameter.mandatory else OPTIONAL_BRACKETS
    return opening + parameter.name + closing


def _usage_labels(parser):
    positionals = [bracketed_label(positional) for positional in parser.positionals]
    if (multi := parser.multipositional) is None:
        return positionals
    if multi.order is Order.AFTER_OPTIONS:
        return [bracketed_label(multi) + MULTI_INDICATOR, *positionals]
    return [*positionals, bracketed_label(multi) + MULTI_INDICATOR]


def plain_usage(parser, /):
    opening, closing = OPTIONAL_BRACKETS
    return "".join((
        USAGE_HEADER,
        "\n",
        HELP_INDENT,
        parser.program.name,
        " ",
        opening + OPTIONS_LABEL + closing,
        *(" " + label for label in _usage_labels(parser)),
    ))


def usage_text(parser, /):
    return plain_usage(parser) + "\n\n" + HELP_HINT.format(program=parser.program.name) + "\n"


def help_text(parser, /):
    parts = [
        plain_usage(parser),
        "\n\n", DESCRIPTION_HEADER, "\n", parser.program.help,
        "\n\n", POSITIONALS_HEADER, "\n",
    ]
    for positional in parser.positionals:
        parts += positional.help, "\n"
    if parser.multipositional is not None:
        parts += parser.multipositional.help, "\n"
    parts += "\n", OPTIONS_HEADER, "\n"
    for option in parser.options:
        parts += option.help, "\n"
    return "".join(parts)


def render(parser, /, *, colorful=True):
    """
    Build a styled rich renderable of the parser's help.

    The layout mirrors help_text(); only styling differs. Styles can be
    overridden with a __styles__ mapping in __main__ using the keys below.
    """
    styles = defaultdict(str, {
        "section": "bold #FF4DA6",  # friendly pinky headers
        "prog-name": "bold #E6E6F0",  # near-white program name
        "label": "bold #00E5FF",  # neon cyan parameter labels
        "mandatory": "bold #FFB400",  # amber mandatory labels
        "description": "#C8C8D0",  # soft light gray text
        "hint": "italic #9CE19C",  # gentle green hint text
    } | getattr(__import__("__main__"), "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    def entry(label, description, mandatory=False, depth=1):
        return Text.assemble(
            HELP_INDENT * depth,
            (label.ljust(HELP_NAME_FIELD_WIDTH), styler("mandatory" if mandatory else "label")),
            (description, styler("description")),
        )

    usage = Text.assemble(
        HELP_INDENT,
        (parser.program.name, styler("prog-name")),
        " ",
        OPTIONAL_BRACKETS[0] + OPTIONS_LABEL + OPTIONAL_BRACKETS[1],
        *(" " + label for label in _usage_labels(parser)),
    )

    lines = [
        Text(USAGE_HEADER, styler("section")),
        usage,
        Text(""),
        Text(DESCRIPTION_HEADER, styler("section")),
        Text(parser.program.help, styler("description")),
        Text(""),
        Text(POSITIONALS_HEADER, styler("section")),
    ]
    for positional in parser.positionals:
        lines.append(entry(positional.name, positional.description, positional.mandatory))
    if (multi := parser.multipositional) is not None:
        lines.append(entry(multi.name, multi.description, multi.mandatory))
    lines += Text(""), Text(OPTIONS_HEADER, styler("section"))
    for option in parser.options:
        lines.append(entry(option.label, option.description, option.mandatory))
        for param in getattr(option, "params", ()):
            lines.append(entry(param.name, param.description, param.mandatory, depth=2))
    return Group(*lines)


__all__ = (
    "help_line",
    "bracketed_label",
    "plain_usage",
    "usage_text",
    "help_text",
    "render",
)

"""
Fixed text and limits shared by the validator, the parameters and the help
formatter.

Every user-visible string the library produces on its own (headers, brackets,
hints, messages of definition errors) lives here so that output stays
byte-for-byte stable across modules.
"""

# --- names ---
MIN_NAME_SIZE = 1
MAX_NAME_SIZE = 20

# --- option prefixes (short, long) per style ---
UNIX_SHORT_PREFIX = "-"
UNIX_LONG_PREFIX = "--"
WINDOWS_SHORT_PREFIX = "/"
WINDOWS_LONG_PREFIX = "/"

# --- help layout ---
HELP_INDENT_WIDTH = 2
HELP_NAME_FIELD_WIDTH = 28
HELP_INDENT = " " * HELP_INDENT_WIDTH

OPTIONAL_BRACKETS = ("[", "]")
MANDATORY_BRACKETS = ("<", ">")
MULTI_INDICATOR = "..."

USAGE_HEADER = "Usage:"
DESCRIPTION_HEADER = "Description:"
POSITIONALS_HEADER = "Positional Parameters:"
OPTIONS_HEADER = "Options:"
OPTIONS_LABEL = "options"

HELP_HINT = "Try '{program} --help' for more info"

# --- option names ---
WILDCARD_SHORT_NAME = "?"

# --- built-in help option ---
HELP_SHORT_NAME = "h"
HELP_LONG_NAME = "help"
HELP_DESCRIPTION = "prints detailed help info"

# --- definition error messages ---
NAME_MESSAGE = (
    f"{MAX_NAME_SIZE} chars max > {MIN_NAME_SIZE - 1} min: alphanumeric, _ or -. No option prefix."
)
OPTION_SHORT_NAME_MESSAGE = "must be an alphanumeric character or ?"
OPTION_LONG_NAME_MESSAGE = f"{MAX_NAME_SIZE} chars max: alphanumeric, _ or -. No option prefix."
OPTION_EMPTY_NAME_MESSAGE = "at least one option name (short or long) must not be empty."
PROGRAM_NAME_MESSAGE = "name can't be empty"
EMPTY_ARGUMENTS_MESSAGE = "Command line arguments can't be empty"


__all__ = (
    "MIN_NAME_SIZE",
    "MAX_NAME_SIZE",
    "UNIX_SHORT_PREFIX",
    "UNIX_LONG_PREFIX",
    "WINDOWS_SHORT_PREFIX",
    "WINDOWS_LONG_PREFIX",
    "HELP_INDENT_WIDTH",
    "HELP_NAME_FIELD_WIDTH",
    "HELP_INDENT",
    "OPTIONAL_BRACKETS",
    "MANDATORY_BRACKETS",
    "MULTI_INDICATOR",
    "USAGE_HEADER",
    "DESCRIPTION_HEADER",
    "POSITIONALS_HEADER",
    "OPTIONS_HEADER",
    "OPTIONS_LABEL",
    "HELP_HINT",
    "WILDCARD_SHORT_NAME",
    "HELP_SHORT_NAME",
    "HELP_LONG_NAME",
    "HELP_DESCRIPTION",
    "NAME_MESSAGE",
    "OPTION_SHORT_NAME_MESSAGE",
    "OPTION_LONG_NAME_MESSAGE",
    "OPTION_EMPTY_NAME_MESSAGE",
    "PROGRAM_NAME_MESSAGE",
    "EMPTY_ARGUMENTS_MESSAGE",
)

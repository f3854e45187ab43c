"""
Name and token predicates.

Overview
- is_legal_name(name): the rule every parameter name and every pair name obeys:
  1 to 20 ASCII characters, each alphanumeric, "_" or "-", and not starting with
  an option prefix ("-", "--" or "/").
- has_option_prefix(token): the token starts with any recognized prefix.
- is_option(token): the token is option-shaped, i.e. one of "-name", "--name"
  or "/name" where name is legal, or the wildcard short forms "-?" and "/?".

All three are total over strings and return False for anything else.
"""
import re

from .constants import (
    MAX_NAME_SIZE,
    MIN_NAME_SIZE,
    UNIX_LONG_PREFIX,
    UNIX_SHORT_PREFIX,
    WILDCARD_SHORT_NAME,
    WINDOWS_LONG_PREFIX,
    WINDOWS_SHORT_PREFIX,
)

_PREFIXES = (UNIX_LONG_PREFIX, UNIX_SHORT_PREFIX, WINDOWS_LONG_PREFIX, WINDOWS_SHORT_PREFIX)
_WILDCARDS = (UNIX_SHORT_PREFIX + WILDCARD_SHORT_NAME, WINDOWS_SHORT_PREFIX + WILDCARD_SHORT_NAME)

# "-" may appear inside a name, never first.
_NAME = re.compile(rf"[A-Za-z0-9_][A-Za-z0-9_-]{{{MIN_NAME_SIZE - 1},{MAX_NAME_SIZE - 1}}}")


def is_legal_name(name, /):
    """
    Check a parameter or pair name.

    Examples
    - "print", "ignore-case", "a_1" -> True
    - "", "-print", "/print", "na me", "x" * 21 -> False
    """
    if not isinstance(name, str):
        return False
    return _NAME.fullmatch(name) is not None


def has_option_prefix(token, /):
    """
    Check whether token starts with "-", "--" or "/".
    """
    if not isinstance(token, str):
        return False
    return token.startswith(_PREFIXES)


def is_option(token, /):
    """
    Check whether token looks like an option: a recognized prefix followed by
    a legal name.

    Examples
    - "-p", "--print", "/print", "-5", "-?", "/?" -> True
    - "-", "--", "/", "---x", "song", "" -> False
    """
    if not has_option_prefix(token) or len(token) < 2:
        return False
    if token in _WILDCARDS:
        return True
    for prefix in _PREFIXES:
        if token.startswith(prefix) and is_legal_name(token.removeprefix(prefix)):
            return True
    return False


__all__ = (
    "is_legal_name",
    "has_option_prefix",
    "is_option",
)

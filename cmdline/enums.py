"""
Small enumerations shared by parameters, the parser and the help formatter.

- Style: option prefix convention (Unix "-x"/"--long", Windows "/x"/"/long").
- Order: where a MultiPositional's tokens sit relative to fixed positionals.
- Status: outcome of Parser.parse().
"""
from enum import Enum

from .constants import (
    UNIX_LONG_PREFIX,
    UNIX_SHORT_PREFIX,
    WINDOWS_LONG_PREFIX,
    WINDOWS_SHORT_PREFIX,
)


class Style(Enum):
    UNIX = (UNIX_SHORT_PREFIX, UNIX_LONG_PREFIX)
    WINDOWS = (WINDOWS_SHORT_PREFIX, WINDOWS_LONG_PREFIX)

    @property
    def short_prefix(self):
        return self.value[0]

    @property
    def long_prefix(self):
        return self.value[1]


class Order(Enum):
    """
    Placement of a MultiPositional.

    - END: its tokens follow the fixed positionals (e.g. "search <pattern> <files>...").
    - AFTER_OPTIONS: its tokens precede the fixed positionals
      (e.g. "copy <sources>... <destination>").
    """
    END = "end"
    AFTER_OPTIONS = "after-options"


class Status(Enum):
    SUCCESS = "success"
    FAILURE = "failure"


__all__ = (
    "Style",
    "Order",
    "Status",
)

"""Enumeration definitions for lazylog.

This module contains the ``Severity`` enumeration shared by the formatter,
the logger facade, the configuration registry and the sinks.
"""

import logging
from enum import Enum
from typing import Union

TRACE_LEVEL_NUM = 5

logging.addLevelName(TRACE_LEVEL_NUM, "TRACE")


class Severity(str, Enum):
    """Importance of a log call, compared against a logger's threshold.

    Members are ordered by rank, not by their string value:
    TRACE < DEBUG < INFO < WARN < ERROR.

    Attributes:
        TRACE: Extremely fine-grained execution detail.
        DEBUG: Developer-focused diagnostic information.
        INFO: Normal operation.
        WARN: Unexpected but recoverable condition.
        ERROR: An operation failed.
    """

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def __lt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank

    def to_stdlib(self) -> int:
        """Returns the matching numeric level of the ``logging`` module."""
        return _STDLIB_LEVELS[self]

    @classmethod
    def parse(cls, value: Union["Severity", str]) -> "Severity":
        """Parses a severity name leniently.

        Accepts members, names in any case and the ``WARNING`` alias.

        Raises:
            ValueError: If the name matches no severity.
        """
        if isinstance(value, Severity):
            return value
        name = str(value).strip().upper()
        if name == "WARNING":
            return cls.WARN
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown severity: {value!r}") from None


_RANKS = {
    Severity.TRACE: 0,
    Severity.DEBUG: 1,
    Severity.INFO: 2,
    Severity.WARN: 3,
    Severity.ERROR: 4,
}

_STDLIB_LEVELS = {
    Severity.TRACE: TRACE_LEVEL_NUM,
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}

"""Log priorities, numbered like the Android log levels."""

from __future__ import annotations

import logging
from enum import IntEnum


class Priority(IntEnum):
    """Severity passed through to every printer.

    The values match ``android.util.Log`` so that hosts bridging to a
    platform console can forward them unchanged.  Jobcat never filters on
    priority; printers decide what to do with it.
    """

    VERBOSE = 2
    DEBUG = 3
    INFO = 4
    WARN = 5
    ERROR = 6
    ASSERT = 7

    @property
    def label(self) -> str:
        """Single-letter label, e.g. ``"D"`` for DEBUG."""
        return _LABELS[self]

    @property
    def logging_level(self) -> int:
        """The closest stdlib ``logging`` level."""
        return _LOGGING_LEVELS[self]


_LABELS: dict[Priority, str] = {
    Priority.VERBOSE: "V",
    Priority.DEBUG: "D",
    Priority.INFO: "I",
    Priority.WARN: "W",
    Priority.ERROR: "E",
    Priority.ASSERT: "A",
}

_LOGGING_LEVELS: dict[Priority, int] = {
    Priority.VERBOSE: 5,
    Priority.DEBUG: logging.DEBUG,
    Priority.INFO: logging.INFO,
    Priority.WARN: logging.WARNING,
    Priority.ERROR: logging.ERROR,
    Priority.ASSERT: logging.CRITICAL,
}

"""Shared formatting helpers for jobcat printers and loggers.

Keeps the ``"D/Tag: message"`` layout and the ``%``-argument handling in
one place so every printer and logger writes the same text.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jobcat.models.priority import Priority


def format_message(message: str, args: tuple[Any, ...]) -> str:
    """Apply ``%``-style *args* to *message*.

    A mismatch between the format string and the arguments never raises;
    the arguments are appended to the raw message instead.

    Examples
    --------
    >>> format_message("hello %s", ("world",))
    'hello world'
    >>> format_message("no placeholder", (1,))
    'no placeholder 1'
    """
    if not args:
        return message
    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping):
        values = args[0]
    try:
        return message % values
    except (TypeError, ValueError, KeyError):
        return " ".join([message, *(str(arg) for arg in args)])


def format_line(priority: Priority, tag: str, message: str) -> str:
    """Return the single console line for a message.

    Examples
    --------
    >>> format_line(Priority.WARN, "Tag", "world")
    'W/Tag: world'
    """
    return f"{priority.label}/{tag}: {message}"


"""Logcat printer — the built-in console output of jobcat.

Renders every message as ``"P/Tag: message"`` through a Rich console,
color-coded by priority.  Attached errors are rendered as a Rich traceback
below the line.

Color scheme
------------
- dim        : VERBOSE
- cyan       : DEBUG
- green      : INFO
- yellow     : WARN
- red        : ERROR
- bold red   : ASSERT
"""

from __future__ import annotations

from datetime import datetime

from rich.console import Console
from rich.text import Text
from rich.traceback import Traceback

from jobcat.config import config
from jobcat.models.priority import Priority
from jobcat.printers._formatting import format_line

_PRIORITY_STYLES: dict[Priority, str] = {
    Priority.VERBOSE: "dim",
    Priority.DEBUG: "cyan",
    Priority.INFO: "green",
    Priority.WARN: "yellow",
    Priority.ERROR: "red",
    Priority.ASSERT: "bold red",
}


class LogcatPrinter:
    """Writes messages to the terminal.

    One instance is owned by every ``PrinterRegistry`` and invoked by
    ``JobCat`` only while the registry's logcat flag is enabled.  It is
    never part of the registry's custom printer collection.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided,
        writing to stderr unless ``JOBCAT_LOGCAT_STDERR=false``.
    show_time:
        Prefix each line with the local time.  Defaults to
        ``JOBCAT_LOGCAT_SHOW_TIME``.
    """

    def __init__(
        self,
        console: Console | None = None,
        show_time: bool | None = None,
    ) -> None:
        self.console = console or Console(stderr=config.logcat_stderr)
        self.show_time = config.logcat_show_time if show_time is None else show_time

    def println(
        self,
        priority: Priority,
        tag: str,
        message: str,
        error: BaseException | None,
    ) -> None:
        line = Text(format_line(priority, tag, message), style=_PRIORITY_STYLES[priority])
        if self.show_time:
            stamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
            line = Text.assemble((f"{stamp} ", "dim"), line)
        self.console.print(line, highlight=False)

        if error is not None:
            self.console.print(
                Traceback.from_exception(type(error), error, error.__traceback__)
            )

"""Logging printer — forwards jobcat messages into stdlib ``logging``.

Lets a host application route library output through its own logging
configuration (handlers, formatters, level filters).  Each tag maps to its
own logger, optionally nested under a prefix.
"""

from __future__ import annotations

import logging

from jobcat.config import config
from jobcat.models.priority import Priority


class LoggingPrinter:
    """Re-emits every message on ``logging.getLogger(<prefix>.<tag>)``.

    Parameters
    ----------
    prefix:
        Dotted logger-name prefix.  Defaults to ``JOBCAT_BRIDGE_PREFIX``;
        an empty prefix uses the bare tag as the logger name.
    """

    def __init__(self, prefix: str | None = None) -> None:
        self.prefix = config.bridge_prefix if prefix is None else prefix

    def logger_for(self, tag: str) -> logging.Logger:
        """Return the stdlib logger that receives messages for *tag*."""
        name = f"{self.prefix}.{tag}" if self.prefix else tag
        return logging.getLogger(name)

    def println(
        self,
        priority: Priority,
        tag: str,
        message: str,
        error: BaseException | None,
    ) -> None:
        exc_info = (type(error), error, error.__traceback__) if error is not None else None
        self.logger_for(tag).log(priority.logging_level, message, exc_info=exc_info)

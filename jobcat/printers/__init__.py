"""Printer protocol for jobcat output.

A printer is any object with a ``println(priority, tag, message, error)``
method.  ``JobCat`` calls ``println`` on the logcat printer (while enabled)
and on every printer registered with the ``PrinterRegistry``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from jobcat.models.priority import Priority


@runtime_checkable
class CatPrinter(Protocol):
    """Protocol that every jobcat printer must implement.

    Printers are compared by identity: registering the same instance twice
    is a no-op, while two equal-looking instances are two printers.
    """

    def println(
        self,
        priority: Priority,
        tag: str,
        message: str,
        error: BaseException | None,
    ) -> None:
        """Write one message.

        Implementations may raise; the caller logs the failure and keeps
        delivering to the remaining printers.

        Parameters
        ----------
        priority:
            Severity of the message.
        tag:
            Component name of the emitting ``JobCat``.
        message:
            Already formatted message text.
        error:
            Exception attached to the message, if any.
        """
        ...

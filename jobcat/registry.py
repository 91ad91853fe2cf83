"""PrinterRegistry — the process-wide set of printers every JobCat writes to.

Custom printers live in an identity-keyed, insertion-ordered collection.
The built-in logcat printer is owned by the registry but kept outside that
collection; ``JobCat`` consults the ``logcat_enabled`` flag before calling
it, so silencing the console never touches the custom printers.

Thread safety
-------------
Mutations are serialized by a lock and publish a new immutable tuple of
printers.  Readers pick up the current tuple without locking, so an emit
never iterates a half-updated collection and a printer may call back into
``add_printer``/``remove_printer`` from inside ``println`` without
deadlocking.  Such a change applies from the next emit onwards.
"""

from __future__ import annotations

import logging
import threading

from jobcat.config import config
from jobcat.printers import CatPrinter
from jobcat.printers.logcat import LogcatPrinter

logger = logging.getLogger(__name__)


class PrinterRegistry:
    """Ordered, duplicate-free set of custom printers plus the logcat flag.

    Usage
    -----
    >>> from jobcat.printers.memory import MemoryPrinter
    >>> registry = PrinterRegistry()
    >>> printer = MemoryPrinter()
    >>> registry.add_printer(printer)
    True
    >>> registry.add_printer(printer)
    False
    >>> registry.active_printers() == (printer,)
    True

    Parameters
    ----------
    logcat_printer:
        The built-in console printer.  A ``LogcatPrinter`` is created if
        not provided.
    logcat_enabled:
        Initial value of the logcat flag.  Defaults to
        ``JOBCAT_LOGCAT_ENABLED`` (``True`` unless overridden).
    """

    def __init__(
        self,
        logcat_printer: CatPrinter | None = None,
        logcat_enabled: bool | None = None,
    ) -> None:
        self.logcat_printer: CatPrinter = (
            LogcatPrinter() if logcat_printer is None else logcat_printer
        )
        self._logcat_enabled = (
            config.logcat_enabled if logcat_enabled is None else logcat_enabled
        )
        self._lock = threading.Lock()
        self._printers: dict[int, CatPrinter] = {}
        self._snapshot: tuple[CatPrinter, ...] = ()

    # ------------------------------------------------------------------
    # Printer management
    # ------------------------------------------------------------------

    def add_printer(self, printer: CatPrinter) -> bool:
        """Register *printer* after all printers already registered.

        Returns ``True`` if the printer was added, ``False`` if this exact
        instance was already registered.
        """
        with self._lock:
            key = id(printer)
            if key in self._printers:
                return False
            self._printers[key] = printer
            self._publish()
        logger.debug("Registered printer: %r", printer)
        return True

    def remove_printer(self, printer: CatPrinter) -> None:
        """Unregister *printer*; does nothing if it is not registered."""
        with self._lock:
            if self._printers.pop(id(printer), None) is None:
                return
            self._publish()
        logger.debug("Unregistered printer: %r", printer)

    def clear_printers(self) -> None:
        """Unregister every custom printer.  The logcat printer stays."""
        with self._lock:
            self._printers.clear()
            self._publish()

    def active_printers(self) -> tuple[CatPrinter, ...]:
        """Return the registered printers in registration order.

        The logcat printer is not included.  The tuple is a snapshot:
        later registrations do not change it.
        """
        return self._snapshot

    def _publish(self) -> None:
        # Caller holds self._lock.
        self._snapshot = tuple(self._printers.values())

    # ------------------------------------------------------------------
    # Logcat flag
    # ------------------------------------------------------------------

    def set_logcat_enabled(self, enabled: bool) -> None:
        """Turn the built-in console printer on or off for every JobCat."""
        self._logcat_enabled = bool(enabled)

    def is_logcat_enabled(self) -> bool:
        return self._logcat_enabled

    def reset(self) -> None:
        """Restore the start-up state: logcat enabled, no custom printers."""
        self.clear_printers()
        self._logcat_enabled = True

    def __len__(self) -> int:
        return len(self._snapshot)

    def __contains__(self, printer: object) -> bool:
        return self._printers.get(id(printer)) is printer


# Process-wide registry — import as `from jobcat.registry import registry`
registry = PrinterRegistry()


def add_log_printer(printer: CatPrinter) -> bool:
    """Register *printer* with the process-wide registry."""
    return registry.add_printer(printer)


def remove_log_printer(printer: CatPrinter) -> None:
    """Unregister *printer* from the process-wide registry."""
    registry.remove_printer(printer)


def clear_log_printers() -> None:
    registry.clear_printers()


def set_logcat_enabled(enabled: bool) -> None:
    """Enable or disable the console printer for the whole process."""
    registry.set_logcat_enabled(enabled)


def is_logcat_enabled() -> bool:
    return registry.is_logcat_enabled()

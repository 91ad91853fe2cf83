"""JobCat — per-component logger handle.

A ``JobCat`` carries a tag and, optionally, printers of its own.  Every
call formats the message, then hands it to the logcat printers (while
enabled) and to every printer registered at call time, so a handle created
before a printer is registered still reaches it.

Delivery order
--------------
1. The registry's logcat printer, if the logcat flag is on.
2. Printers added to this handle with ``add_printer``, in the order they
   were added.  The logcat flag gates them too.
3. Custom printers of the registry, in registration order.

A printer that raises is logged and skipped; the remaining printers still
receive the message.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from jobcat.models.priority import Priority
from jobcat.printers import CatPrinter
from jobcat.printers._formatting import format_message
from jobcat.registry import PrinterRegistry
from jobcat.registry import registry as default_registry

logger = logging.getLogger(__name__)


class JobCat:
    """Logger handle bound to a tag.

    Parameters
    ----------
    tag:
        Component name passed to every printer.
    enabled:
        ``False`` turns every call on this handle into a no-op.
    registry:
        Registry to read printers from.  Defaults to the process-wide one.

    Examples
    --------
    >>> cat = JobCat("JobManager")
    >>> cat.tag
    'JobManager'
    """

    __slots__ = ("_tag", "_enabled", "_registry", "_lock", "_printers")

    def __init__(
        self,
        tag: str,
        *,
        enabled: bool = True,
        registry: PrinterRegistry | None = None,
    ) -> None:
        self._tag = tag
        self._enabled = enabled
        self._registry = registry
        self._lock = threading.Lock()
        self._printers: tuple[CatPrinter, ...] = ()

    @classmethod
    def for_class(cls, klass: type, **kwargs: Any) -> JobCat:
        """Create a handle tagged with the name of *klass*."""
        return cls(klass.__name__, **kwargs)

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def registry(self) -> PrinterRegistry:
        return default_registry if self._registry is None else self._registry

    def __repr__(self) -> str:
        return f"JobCat(tag={self._tag!r}, enabled={self._enabled})"

    # ------------------------------------------------------------------
    # Handle printers
    # ------------------------------------------------------------------

    def add_printer(self, printer: CatPrinter) -> bool:
        """Add a printer that only this handle writes to.

        It sits next to the logcat printer and is silenced together with
        it by ``set_logcat_enabled(False)``.  Returns ``False`` if this
        exact instance was already added.
        """
        with self._lock:
            if any(added is printer for added in self._printers):
                return False
            self._printers = (*self._printers, printer)
        return True

    def remove_printer(self, printer: CatPrinter) -> None:
        """Remove a printer added with ``add_printer``; no-op if absent."""
        with self._lock:
            self._printers = tuple(p for p in self._printers if p is not printer)

    @property
    def printers(self) -> tuple[CatPrinter, ...]:
        return self._printers

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def println(
        self,
        priority: Priority | int,
        message: str,
        error: BaseException | None = None,
    ) -> int:
        """Send one message to the logcat printers and every registered printer.

        Returns the number of printers that accepted the message.  Printer
        failures are logged and do not stop delivery to the others.
        """
        if not self._enabled:
            return 0

        priority = Priority(priority)
        registry = self.registry

        printers: list[CatPrinter] = []
        if registry.is_logcat_enabled():
            printers.append(registry.logcat_printer)
            printers.extend(self._printers)
        printers.extend(registry.active_printers())

        delivered = 0
        for printer in printers:
            try:
                printer.println(priority, self._tag, message, error)
                delivered += 1
            except Exception:  # noqa: BLE001
                logger.error(
                    "Printer %r failed for tag %s", printer, self._tag, exc_info=True
                )
        return delivered

    def _emit(
        self,
        priority: Priority,
        message: str | BaseException,
        args: tuple[Any, ...],
        error: BaseException | None,
    ) -> int:
        if isinstance(message, BaseException):
            if error is None:
                error = message
            message = str(message) or type(message).__name__
        return self.println(priority, format_message(message, args), error)

    # ------------------------------------------------------------------
    # Leveled shortcuts
    # ------------------------------------------------------------------

    def v(self, message: str | BaseException, *args: Any, error: BaseException | None = None) -> int:
        return self._emit(Priority.VERBOSE, message, args, error)

    def d(self, message: str | BaseException, *args: Any, error: BaseException | None = None) -> int:
        return self._emit(Priority.DEBUG, message, args, error)

    def i(self, message: str | BaseException, *args: Any, error: BaseException | None = None) -> int:
        return self._emit(Priority.INFO, message, args, error)

    def w(self, message: str | BaseException, *args: Any, error: BaseException | None = None) -> int:
        return self._emit(Priority.WARN, message, args, error)

    def e(self, message: str | BaseException, *args: Any, error: BaseException | None = None) -> int:
        return self._emit(Priority.ERROR, message, args, error)

    def wtf(self, message: str | BaseException, *args: Any, error: BaseException | None = None) -> int:
        """Log a condition that should never happen, at ASSERT priority."""
        return self._emit(Priority.ASSERT, message, args, error)

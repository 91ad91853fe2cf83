"""In-memory printer — captures messages for tests and host UIs."""

from __future__ import annotations

import threading

from jobcat.models.priority import Priority
from jobcat.models.records import CatRecord


class MemoryPrinter:
    """Collects every message as a ``CatRecord``.

    Safe to share between threads; each accessor returns a copy.

    Examples
    --------
    >>> printer = MemoryPrinter()
    >>> printer.println(Priority.DEBUG, "Tag", "hello", None)
    >>> printer.messages
    ['hello']
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: list[CatRecord] = []

    def println(
        self,
        priority: Priority,
        tag: str,
        message: str,
        error: BaseException | None,
    ) -> None:
        record = CatRecord(priority=priority, tag=tag, message=message, error=error)
        with self._lock:
            self._records.append(record)

    @property
    def records(self) -> list[CatRecord]:
        with self._lock:
            return list(self._records)

    @property
    def tags(self) -> list[str]:
        return [record.tag for record in self.records]

    @property
    def messages(self) -> list[str]:
        return [record.message for record in self.records]

    def clear(self) -> None:
        """Drop all captured records."""
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

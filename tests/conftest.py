"""Shared test fixtures for jobcat."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from jobcat.printers.memory import MemoryPrinter
from jobcat.registry import PrinterRegistry
from jobcat.registry import registry as process_registry


@pytest.fixture(autouse=True)
def _reset_process_registry() -> Iterator[None]:
    """Give every test a clean process-wide registry and restore it afterwards."""
    process_registry.reset()
    yield
    process_registry.reset()


@pytest.fixture
def memory_printer() -> MemoryPrinter:
    """Provide an empty capturing printer."""
    return MemoryPrinter()


@pytest.fixture
def fake_logcat() -> MemoryPrinter:
    """Provide a capturing printer that stands in for the console printer."""
    return MemoryPrinter()


@pytest.fixture
def registry(fake_logcat: MemoryPrinter) -> PrinterRegistry:
    """Provide an isolated registry whose logcat printer is ``fake_logcat``."""
    return PrinterRegistry(logcat_printer=fake_logcat, logcat_enabled=True)


# ---------------------------------------------------------------------------
# Printer doubles — shared across test modules
# ---------------------------------------------------------------------------


class FailingPrinter:
    """A printer that always raises."""

    def __init__(self) -> None:
        self.calls = 0

    def println(self, priority, tag, message, error) -> None:
        self.calls += 1
        raise RuntimeError("Printer failure for testing")


@pytest.fixture
def failing_printer() -> FailingPrinter:
    return FailingPrinter()

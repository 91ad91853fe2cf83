"""Jobcat: an embeddable logging facility with pluggable printers.

Libraries log through ``JobCat`` handles; host applications decide where
the output goes:
  - register any object with a ``println(priority, tag, message, error)``
    method as a printer
  - capture output in memory or forward it into stdlib ``logging``
  - silence the built-in console printer without touching other printers
"""

__version__ = "0.1.0"
__description__ = "Embeddable logger handles with a process-wide printer registry"

from jobcat.cat import JobCat
from jobcat.models.priority import Priority
from jobcat.printers import CatPrinter
from jobcat.printers.logcat import LogcatPrinter
from jobcat.printers.logging_bridge import LoggingPrinter
from jobcat.printers.memory import MemoryPrinter
from jobcat.registry import registry as process_registry
from jobcat.registry import (
    PrinterRegistry,
    add_log_printer,
    clear_log_printers,
    is_logcat_enabled,
    remove_log_printer,
    set_logcat_enabled,
)

__all__ = [
    "JobCat",
    "Priority",
    "CatPrinter",
    "LogcatPrinter",
    "LoggingPrinter",
    "MemoryPrinter",
    "PrinterRegistry",
    "process_registry",
    "add_log_printer",
    "remove_log_printer",
    "clear_log_printers",
    "set_logcat_enabled",
    "is_logcat_enabled",
    "__version__",
]

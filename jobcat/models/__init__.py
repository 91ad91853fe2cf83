"""Jobcat data models — priorities and captured log records."""

from jobcat.models.priority import Priority
from jobcat.models.records import CatRecord

__all__ = ["Priority", "CatRecord"]

"""Captured log record model."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from jobcat.models.priority import Priority


class CatRecord(BaseModel):
    """Immutable snapshot of one ``println`` call as seen by a printer.

    Examples
    --------
    >>> record = CatRecord(priority=Priority.DEBUG, tag="Tag", message="hello")
    >>> record.error is None
    True
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    priority: Priority
    tag: str
    message: str
    error: BaseException | None = None
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

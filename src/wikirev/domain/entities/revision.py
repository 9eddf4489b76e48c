"""Revision entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Revision:
    """Immutable snapshot of a document. id is assigned on insert."""

    short_id: str
    title: str | None
    source: str | None
    revision_count: int
    created_at: datetime
    created_by: str | None
    id: int | None = None

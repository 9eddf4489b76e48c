"""Document entity - the current state of a wiki page."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Document:
    """Current state of a page, one row per short id.

    revision_count is maintained by the store; it only moves when title or
    source change.
    """

    short_id: str
    title: str | None
    source: str | None
    revision_count: int
    created_at: datetime
    created_by: str | None
    updated_at: datetime
    updated_by: str | None

    def content_differs(self, title: str | None, source: str | None) -> bool:
        """True when title or source differ from the stored values."""
        return self.title != title or self.source != source

"""Revision repository port."""

from typing import Protocol

from wikirev.domain.entities import Revision


class RevisionRepository(Protocol):
    """Port for append-only revision persistence."""

    async def create(self, revision: Revision) -> Revision:
        """Insert revision, returning it with its assigned id."""
        ...

    async def get(self, short_id: str, revision_id: int) -> Revision | None: ...

    async def list_by_short_id(self, short_id: str) -> list[Revision]:
        """Revisions of a document, newest first."""
        ...

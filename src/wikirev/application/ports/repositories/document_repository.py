"""Document repository port."""

from typing import Protocol

from wikirev.domain.entities import Document


class DocumentRepository(Protocol):
    """Port for current-document persistence."""

    async def get_by_short_id(self, short_id: str) -> Document | None: ...

    async def get_for_update(self, short_id: str) -> Document | None:
        """Read the row and hold a write lock on it until the transaction ends."""
        ...

    async def create(self, document: Document) -> Document:
        """Insert document. Raises Conflict if short_id exists."""
        ...

    async def update(self, document: Document) -> Document: ...

"""Revisioned document store.

Keeps the current document row and its append-only revision history in
lockstep. Every mutating operation runs in one unit of work, so either both
tables change or neither does.

Revision counting:
    - a new document starts at revision_count 0 with one revision carrying 0
    - an update whose title or source differ from the locked row's values
      bumps revision_count by exactly 1 and appends a revision with the new
      count
    - an update with identical title and source only refreshes
      updated_by/updated_at; no revision is appended and the count stays

updated_at strictly increases on every write, even if the clock does not.
"""

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import UTC, datetime, timedelta

from wikirev.application.ports import UnitOfWorkFactory
from wikirev.domain.entities import Document, Revision
from wikirev.domain.exceptions import NotFound, ValidationError

logger = logging.getLogger(__name__)

_TICK = timedelta(microseconds=1)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class RevisionedStore:
    """Owns the document and revision tables."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock

    def _next_timestamp(self, previous: datetime | None = None) -> datetime:
        now = self._clock()
        if previous is not None and now <= previous:
            now = previous + _TICK
        return now

    async def create_document(
        self,
        short_id: str,
        title: str | None,
        source: str | None,
        author: str | None,
    ) -> tuple[Document, Revision]:
        """Insert a document and its initial revision.

        Raises ValidationError for an empty short_id and Conflict when the
        short_id is already taken.
        """
        if not short_id or not short_id.strip():
            raise ValidationError("Document id must not be empty")

        now = self._next_timestamp()
        document = Document(
            short_id=short_id,
            title=title,
            source=source,
            revision_count=0,
            created_at=now,
            created_by=author,
            updated_at=now,
            updated_by=author,
        )
        async with self._uow_factory() as uow:
            document = await uow.documents.create(document)
            revision = await uow.revisions.create(
                Revision(
                    short_id=short_id,
                    title=title,
                    source=source,
                    revision_count=0,
                    created_at=now,
                    created_by=author,
                )
            )

        logger.debug(
            "Created document %s",
            short_id,
            extra={"short_id": short_id, "revision_id": revision.id},
        )
        return document, revision

    async def get_document(self, short_id: str) -> Document:
        """Get current document. Raises NotFound."""
        async with self._uow_factory() as uow:
            document = await uow.documents.get_by_short_id(short_id)
        if document is None:
            raise NotFound("Document", short_id)
        return document

    async def get_revision(self, short_id: str, revision_id: int) -> Revision:
        """Get revision by its own id, scoped to the document. Raises NotFound."""
        async with self._uow_factory() as uow:
            revision = await uow.revisions.get(short_id, revision_id)
        if revision is None:
            raise NotFound("Revision", f"{short_id}/{revision_id}")
        return revision

    async def list_history(self, short_id: str) -> list[Revision]:
        """Revisions of a document, newest first. Empty for unknown ids."""
        async with self._uow_factory() as uow:
            return await uow.revisions.list_by_short_id(short_id)

    async def update_document(
        self,
        short_id: str,
        title: str | None,
        source: str | None,
        author: str | None,
    ) -> tuple[Document, Revision | None]:
        """Apply new content and metadata to a document.

        The row is read with a write lock, so concurrent updates of the same
        document serialize and see each other's revision_count. Returns the
        appended revision, or None when the content was unchanged.
        Raises NotFound.
        """
        async with self._uow_factory() as uow:
            current = await uow.documents.get_for_update(short_id)
            if current is None:
                raise NotFound("Document", short_id)

            changed = current.content_differs(title, source)
            now = self._next_timestamp(current.updated_at)
            updated = replace(
                current,
                title=title,
                source=source,
                revision_count=current.revision_count + 1 if changed else current.revision_count,
                updated_at=now,
                updated_by=author,
            )
            updated = await uow.documents.update(updated)

            revision = None
            if changed:
                revision = await uow.revisions.create(
                    Revision(
                        short_id=short_id,
                        title=title,
                        source=source,
                        revision_count=updated.revision_count,
                        created_at=now,
                        created_by=author,
                    )
                )

        logger.debug(
            "Updated document %s (content changed: %s)",
            short_id,
            changed,
            extra={"short_id": short_id, "revision_count": updated.revision_count},
        )
        return updated, revision

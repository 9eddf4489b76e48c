"""Pytest fixtures for WikiRev tests."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime

import pytest

from wikirev.application.store import RevisionedStore
from wikirev.domain.entities import Document, Revision
from wikirev.domain.exceptions import Conflict, NotFound, StorageError


# --- Fake database ---


class FakeDatabase:
    """Committed state shared by all fake units of work."""

    def __init__(self) -> None:
        self.documents: dict[str, Document] = {}
        self.revisions: list[Revision] = []
        self.fail_revision_insert = False
        self.fail_ping = False
        self.commits = 0
        self.rollbacks = 0
        self._next_revision_id = 1
        self._row_locks: dict[str, asyncio.Lock] = {}

    def row_lock(self, short_id: str) -> asyncio.Lock:
        return self._row_locks.setdefault(short_id, asyncio.Lock())

    def next_revision_id(self) -> int:
        # Like a serial column: ids are not reused after rollback.
        value = self._next_revision_id
        self._next_revision_id += 1
        return value


# --- Fake repositories ---


class FakeDocumentRepository:
    """In-memory document repository with staged writes."""

    def __init__(self, db: FakeDatabase, uow: FakeUnitOfWork) -> None:
        self._db = db
        self._uow = uow

    def _lookup(self, short_id: str) -> Document | None:
        doc = self._uow.staged_documents.get(short_id) or self._db.documents.get(short_id)
        return replace(doc) if doc else None

    async def get_by_short_id(self, short_id: str) -> Document | None:
        return self._lookup(short_id)

    async def get_for_update(self, short_id: str) -> Document | None:
        await self._uow.lock_row(short_id)
        await asyncio.sleep(0)
        return self._lookup(short_id)

    async def create(self, document: Document) -> Document:
        if (
            document.short_id in self._db.documents
            or document.short_id in self._uow.staged_documents
        ):
            raise Conflict(f"Document id already exists: {document.short_id}")
        self._uow.staged_documents[document.short_id] = replace(document)
        return replace(document)

    async def update(self, document: Document) -> Document:
        await asyncio.sleep(0)
        self._uow.staged_documents[document.short_id] = replace(document)
        return replace(document)


class FakeRevisionRepository:
    """In-memory append-only revision repository."""

    def __init__(self, db: FakeDatabase, uow: FakeUnitOfWork) -> None:
        self._db = db
        self._uow = uow

    def _visible(self) -> list[Revision]:
        return self._db.revisions + self._uow.staged_revisions

    async def create(self, revision: Revision) -> Revision:
        if self._db.fail_revision_insert:
            raise StorageError("revision insert failed")
        if (
            revision.short_id not in self._db.documents
            and revision.short_id not in self._uow.staged_documents
        ):
            raise NotFound("Document", revision.short_id)
        stored = replace(revision, id=self._db.next_revision_id())
        self._uow.staged_revisions.append(stored)
        return replace(stored)

    async def get(self, short_id: str, revision_id: int) -> Revision | None:
        for r in self._visible():
            if r.short_id == short_id and r.id == revision_id:
                return replace(r)
        return None

    async def list_by_short_id(self, short_id: str) -> list[Revision]:
        items = [replace(r) for r in self._visible() if r.short_id == short_id]
        items.sort(key=lambda r: r.id, reverse=True)
        return items


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work: writes become visible to others on commit."""

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db
        self.staged_documents: dict[str, Document] = {}
        self.staged_revisions: list[Revision] = []
        self._held_locks: list[asyncio.Lock] = []
        self.documents = FakeDocumentRepository(db, self)
        self.revisions = FakeRevisionRepository(db, self)

    async def lock_row(self, short_id: str) -> None:
        lock = self._db.row_lock(short_id)
        if lock in self._held_locks:
            return
        await lock.acquire()
        self._held_locks.append(lock)

    def _release(self) -> None:
        for lock in self._held_locks:
            lock.release()
        self._held_locks.clear()

    async def ping(self) -> None:
        if self._db.fail_ping:
            raise StorageError("database unreachable")

    async def commit(self) -> None:
        self._db.documents.update(self.staged_documents)
        self._db.revisions.extend(self.staged_revisions)
        self.staged_documents = {}
        self.staged_revisions = []
        self._db.commits += 1
        self._release()

    async def rollback(self) -> None:
        self.staged_documents = {}
        self.staged_revisions = []
        self._db.rollbacks += 1
        self._release()


def make_uow_factory(db: FakeDatabase):
    """Factory with the same commit/rollback contract as the Postgres one."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[FakeUnitOfWork]:
        uow = FakeUnitOfWork(db)
        try:
            yield uow
            await uow.commit()
        except BaseException:
            await uow.rollback()
            raise

    return factory


class SequenceIds:
    """Id generator returning preset values, for collision tests."""

    def __init__(self, *values: str) -> None:
        self._values = list(values)
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return self._values.pop(0)


# --- Fixtures ---


@pytest.fixture
def fake_db() -> FakeDatabase:
    """Fresh in-memory database for each test."""
    return FakeDatabase()


@pytest.fixture
def uow_factory(fake_db: FakeDatabase):
    """Factory returning async context manager with FakeUnitOfWork."""
    return make_uow_factory(fake_db)


@pytest.fixture
def frozen_clock():
    """Clock that never advances."""
    instant = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)
    return lambda: instant


@pytest.fixture
def store(uow_factory) -> RevisionedStore:
    return RevisionedStore(uow_factory)

"""Unit of Work port - transactional boundary."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from wikirev.application.ports.repositories.document_repository import DocumentRepository
from wikirev.application.ports.repositories.revision_repository import RevisionRepository


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def documents(self) -> DocumentRepository: ...

    @property
    def revisions(self) -> RevisionRepository: ...

    async def ping(self) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances.

    The yielded unit commits when the block exits cleanly and rolls back
    otherwise.
    """

    def __call__(self) -> AbstractAsyncContextManager[UnitOfWork]: ...

"""Get revision use case."""

from wikirev.application.dto.document_dto import RevisionOutput
from wikirev.application.store import RevisionedStore


class GetRevisionUseCase:
    """Get one revision of a document by revision id."""

    def __init__(self, store: RevisionedStore) -> None:
        self._store = store

    async def execute(self, short_id: str, revision_id: int) -> RevisionOutput:
        revision = await self._store.get_revision(short_id, revision_id)
        return RevisionOutput.from_entity(revision)

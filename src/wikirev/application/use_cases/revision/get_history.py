"""Get document history use case."""

from wikirev.application.dto.document_dto import RevisionOutput
from wikirev.application.store import RevisionedStore


class GetHistoryUseCase:
    """List revisions of a document, newest first."""

    def __init__(self, store: RevisionedStore) -> None:
        self._store = store

    async def execute(self, short_id: str) -> list[RevisionOutput]:
        revisions = await self._store.list_history(short_id)
        return [RevisionOutput.from_entity(r) for r in revisions]

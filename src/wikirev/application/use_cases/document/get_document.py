"""Get document use case."""

from wikirev.application.dto.document_dto import DocumentOutput
from wikirev.application.store import RevisionedStore


class GetDocumentUseCase:
    """Get current document by short id."""

    def __init__(self, store: RevisionedStore) -> None:
        self._store = store

    async def execute(self, short_id: str) -> DocumentOutput:
        document = await self._store.get_document(short_id)
        return DocumentOutput.from_entity(document)

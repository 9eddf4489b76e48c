"""Update document use case."""

from wikirev.application.dto.document_dto import DocumentInput, DocumentOutput
from wikirev.application.store import RevisionedStore
from wikirev.application.use_cases.document._validation import validate_document_input


class UpdateDocumentUseCase:
    """Replace title/source of an existing document."""

    def __init__(self, store: RevisionedStore) -> None:
        self._store = store

    async def execute(self, short_id: str, input_data: DocumentInput) -> DocumentOutput:
        """Update document. Raises NotFound, ValidationError."""
        validate_document_input(input_data)
        document, _ = await self._store.update_document(
            short_id,
            input_data.title,
            input_data.source,
            input_data.author,
        )
        return DocumentOutput.from_entity(document)

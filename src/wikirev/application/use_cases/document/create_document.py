"""Create document use case."""

import logging
from collections.abc import Callable

from wikirev.application.dto.document_dto import DocumentInput, DocumentOutput
from wikirev.application.store import RevisionedStore
from wikirev.application.use_cases.document._validation import validate_document_input
from wikirev.domain.exceptions import Conflict
from wikirev.domain.value_objects import ShortId, generate_short_id

logger = logging.getLogger(__name__)


class CreateDocumentUseCase:
    """Create a document under a freshly generated short id.

    A short id collision is retried with a new id, up to max_attempts in
    total; the last Conflict is re-raised.
    """

    def __init__(
        self,
        store: RevisionedStore,
        id_generator: Callable[[], ShortId] = generate_short_id,
        max_attempts: int = 3,
    ) -> None:
        self._store = store
        self._id_generator = id_generator
        self._max_attempts = max(1, max_attempts)

    async def execute(self, input_data: DocumentInput) -> DocumentOutput:
        """Create document and its initial revision."""
        validate_document_input(input_data)

        attempt = 1
        while True:
            short_id = str(self._id_generator())
            try:
                document, _ = await self._store.create_document(
                    short_id,
                    input_data.title,
                    input_data.source,
                    input_data.author,
                )
            except Conflict:
                if attempt >= self._max_attempts:
                    raise
                logger.warning(
                    "Short id collision on %s, retrying",
                    short_id,
                    extra={"short_id": short_id, "attempt": attempt},
                )
                attempt += 1
                continue
            return DocumentOutput.from_entity(document)

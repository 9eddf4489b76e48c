"""Repository ports."""

from wikirev.application.ports.repositories.document_repository import (
    DocumentRepository,
)
from wikirev.application.ports.repositories.revision_repository import (
    RevisionRepository,
)

__all__ = [
    "DocumentRepository",
    "RevisionRepository",
]

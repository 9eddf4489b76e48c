"""Domain entities."""

from wikirev.domain.entities.document import Document
from wikirev.domain.entities.revision import Revision

__all__ = [
    "Document",
    "Revision",
]

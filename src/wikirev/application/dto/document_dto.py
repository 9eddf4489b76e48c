"""Document and revision DTOs."""

from dataclasses import dataclass
from datetime import datetime

from wikirev.domain.entities import Document, Revision


@dataclass
class DocumentInput:
    """Input for creating or updating a document."""

    title: str | None
    source: str | None
    author: str


@dataclass
class DocumentOutput:
    """Output DTO for the current state of a document."""

    short_id: str
    title: str
    source: str
    created_at: datetime
    created_by: str
    updated_at: datetime
    updated_by: str
    revision_count: int

    @classmethod
    def from_entity(cls, document: Document) -> "DocumentOutput":
        return cls(
            short_id=document.short_id,
            title=document.title or "",
            source=document.source or "",
            created_at=document.created_at,
            created_by=document.created_by or "",
            updated_at=document.updated_at,
            updated_by=document.updated_by or "",
            revision_count=document.revision_count,
        )

    def to_dict(self) -> dict:
        return {
            "shortId": self.short_id,
            "title": self.title,
            "source": self.source,
            "createdAt": self.created_at.isoformat(),
            "createdBy": self.created_by,
            "updatedAt": self.updated_at.isoformat(),
            "updatedBy": self.updated_by,
            "revisionCount": self.revision_count,
        }


@dataclass
class RevisionOutput:
    """Output DTO for one history entry."""

    revision_id: int
    short_id: str
    title: str
    source: str
    revision_count: int
    created_at: datetime
    created_by: str

    @classmethod
    def from_entity(cls, revision: Revision) -> "RevisionOutput":
        if revision.id is None:
            raise ValueError(f"Revision of {revision.short_id} has no id; it was never stored")
        return cls(
            revision_id=revision.id,
            short_id=revision.short_id,
            title=revision.title or "",
            source=revision.source or "",
            revision_count=revision.revision_count,
            created_at=revision.created_at,
            created_by=revision.created_by or "",
        )

    def to_dict(self) -> dict:
        return {
            "revisionId": self.revision_id,
            "shortId": self.short_id,
            "title": self.title,
            "source": self.source,
            "revisionCount": self.revision_count,
            "createdAt": self.created_at.isoformat(),
            "createdBy": self.created_by,
        }

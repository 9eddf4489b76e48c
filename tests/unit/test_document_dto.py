"""Unit tests for document and revision DTOs."""

from datetime import UTC, datetime

import pytest

from wikirev.application.dto.document_dto import RevisionOutput
from wikirev.domain.entities import Revision


def _revision(**overrides) -> Revision:
    fields = {
        "short_id": "doc1",
        "title": None,
        "source": "x",
        "revision_count": 2,
        "created_at": datetime(2024, 1, 1, tzinfo=UTC),
        "created_by": "u1",
        "id": 5,
    }
    fields.update(overrides)
    return Revision(**fields)


def test_revision_output_shapes_stored_revision() -> None:
    out = RevisionOutput.from_entity(_revision()).to_dict()

    assert out == {
        "revisionId": 5,
        "shortId": "doc1",
        "title": "",
        "source": "x",
        "revisionCount": 2,
        "createdAt": "2024-01-01T00:00:00+00:00",
        "createdBy": "u1",
    }


def test_revision_output_rejects_unsaved_revision() -> None:
    with pytest.raises(ValueError, match="doc1"):
        RevisionOutput.from_entity(_revision(id=None))

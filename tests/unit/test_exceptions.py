"""Unit tests for domain exceptions."""

import pytest

from wikirev.domain.exceptions import (
    Conflict,
    NotFound,
    RenderError,
    StorageError,
    ValidationError,
    WikiRevError,
)


@pytest.mark.parametrize(
    "exc_type", [NotFound, Conflict, ValidationError, StorageError, RenderError]
)
def test_inherits_wikirev_error(exc_type: type) -> None:
    assert issubclass(exc_type, WikiRevError)


def test_not_found_message_and_fields() -> None:
    err = NotFound("Document", "abc")
    assert str(err) == "Document not found: abc"
    assert err.resource == "Document"
    assert err.identifier == "abc"


def test_raise_conflict_catchable_as_wikirev_error() -> None:
    with pytest.raises(WikiRevError):
        raise Conflict("duplicate id")


def test_exception_message_preserved() -> None:
    msg = "createdBy is required"
    with pytest.raises(ValidationError, match=msg):
        raise ValidationError(msg)

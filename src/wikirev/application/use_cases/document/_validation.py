"""Input checks shared by document use cases."""

from wikirev.application.dto.document_dto import DocumentInput
from wikirev.domain.exceptions import ValidationError


def validate_document_input(input_data: DocumentInput) -> None:
    """Raise ValidationError for malformed create/update input."""
    if not isinstance(input_data.author, str) or not input_data.author.strip():
        raise ValidationError("createdBy is required")
    for name, value in (("title", input_data.title), ("source", input_data.source)):
        if value is not None and not isinstance(value, str):
            raise ValidationError(f"{name} must be a string")

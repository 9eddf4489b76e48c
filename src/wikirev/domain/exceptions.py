"""Domain exceptions."""


class WikiRevError(Exception):
    """Base exception for WikiRev."""

    pass


class NotFound(WikiRevError):
    """Requested document or revision was not found."""

    def __init__(self, resource: str, identifier: str) -> None:
        super().__init__(f"{resource} not found: {identifier}")
        self.resource = resource
        self.identifier = identifier


class Conflict(WikiRevError):
    """Document identifier already exists."""

    pass


class ValidationError(WikiRevError):
    """Validation failed for input data."""

    pass


class StorageError(WikiRevError):
    """Storage or transport failure (connection lost, pool exhausted, timeout)."""

    pass


class RenderError(WikiRevError):
    """Rendering service failed or returned an unusable response."""

    pass

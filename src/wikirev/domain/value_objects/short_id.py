"""Public document identifier."""

import secrets
import string
from dataclasses import dataclass

SHORT_ID_ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase
SHORT_ID_LENGTH = 10


@dataclass(frozen=True)
class ShortId:
    """URL-safe alphanumeric page identifier."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("Short id must not be empty")

    def __str__(self) -> str:
        return self.value


def generate_short_id(length: int = SHORT_ID_LENGTH) -> ShortId:
    """Generate a random identifier from the 62-symbol alphabet."""
    return ShortId("".join(secrets.choice(SHORT_ID_ALPHABET) for _ in range(length)))

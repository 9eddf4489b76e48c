"""Unit tests for ShortId value object and generator."""

import pytest

from wikirev.domain.value_objects import ShortId, generate_short_id
from wikirev.domain.value_objects.short_id import SHORT_ID_ALPHABET


def test_alphabet_is_62_alphanumerics() -> None:
    assert len(SHORT_ID_ALPHABET) == 62
    assert len(set(SHORT_ID_ALPHABET)) == 62
    assert SHORT_ID_ALPHABET.isalnum()


def test_generated_id_has_fixed_length_and_alphabet() -> None:
    for _ in range(200):
        value = generate_short_id().value
        assert len(value) == 10
        assert set(value) <= set(SHORT_ID_ALPHABET)


def test_generated_ids_differ() -> None:
    values = {generate_short_id().value for _ in range(1000)}
    assert len(values) == 1000


def test_custom_length() -> None:
    assert len(generate_short_id(16).value) == 16


def test_str_returns_value() -> None:
    assert str(ShortId("abc")) == "abc"


@pytest.mark.parametrize("value", ["", "  "])
def test_empty_short_id_rejected(value: str) -> None:
    with pytest.raises(ValueError, match="empty"):
        ShortId(value)

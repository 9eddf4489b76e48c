"""Domain value objects."""

from wikirev.domain.value_objects.render_mode import (
    RenderLayout,
    RenderMode,
    RenderOutputKind,
)
from wikirev.domain.value_objects.short_id import ShortId, generate_short_id

__all__ = [
    "RenderLayout",
    "RenderMode",
    "RenderOutputKind",
    "ShortId",
    "generate_short_id",
]

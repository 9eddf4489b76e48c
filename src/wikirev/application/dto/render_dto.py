"""Rendering DTOs."""

from dataclasses import dataclass, field
from typing import Any

from wikirev.domain.value_objects import RenderLayout, RenderMode, RenderOutputKind


@dataclass
class RenderRequest:
    """Source text plus the page context it is rendered in."""

    source: str
    kind: RenderOutputKind
    page_info: dict[str, Any] = field(default_factory=dict)
    mode: RenderMode = RenderMode.PAGE
    layout: RenderLayout = RenderLayout.WIKIJUMP


@dataclass
class RenderOutput:
    """Renderer result. Only the fields the requested kind produces are set."""

    html: str | None = None
    text: str | None = None
    ast: Any | None = None
    tokens: list[Any] | None = None
    errors: list[Any] = field(default_factory=list)
    meta: dict[str, Any] | None = None
    word_count: int | None = None

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"errors": self.errors}
        for key, value in (
            ("html", self.html),
            ("text", self.text),
            ("ast", self.ast),
            ("tokens", self.tokens),
            ("meta", self.meta),
            ("wordCount", self.word_count),
        ):
            if value is not None:
                out[key] = value
        return out

"""Renderer port - wikitext rendering collaborator."""

from typing import Protocol

from wikirev.application.dto.render_dto import RenderOutput, RenderRequest


class Renderer(Protocol):
    """Port for turning wikitext source into parsed or rendered output."""

    async def render(self, request: RenderRequest) -> RenderOutput: ...

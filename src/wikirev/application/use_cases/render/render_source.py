"""Render wikitext source use case."""

from wikirev.application.dto.render_dto import RenderOutput, RenderRequest
from wikirev.application.ports import Renderer
from wikirev.domain.exceptions import ValidationError


class RenderSourceUseCase:
    """Hand source text to the rendering collaborator."""

    def __init__(self, renderer: Renderer) -> None:
        self._renderer = renderer

    async def execute(self, request: RenderRequest) -> RenderOutput:
        """Render source. Raises ValidationError, RenderError."""
        if not request.source:
            raise ValidationError("Source is required")
        return await self._renderer.render(request)

"""Wikitext renderer backed by an HTTP rendering service."""

import logging

import httpx

from wikirev.application.dto.render_dto import RenderOutput, RenderRequest
from wikirev.domain.exceptions import RenderError
from wikirev.domain.value_objects import RenderOutputKind

logger = logging.getLogger(__name__)

_ENDPOINTS = {
    RenderOutputKind.PARSE: "parse",
    RenderOutputKind.HTML: "render",
    RenderOutputKind.DETAIL: "detail-render",
    RenderOutputKind.TEXT: "text",
    RenderOutputKind.WORD_COUNT: "word-count",
}


def _to_output(kind: RenderOutputKind, data: object) -> RenderOutput:
    """Map the service's data payload onto RenderOutput."""
    if kind is RenderOutputKind.TEXT and isinstance(data, str):
        return RenderOutput(text=data)
    if not isinstance(data, dict):
        raise RenderError("Renderer returned an unexpected payload")
    return RenderOutput(
        html=data.get("html"),
        text=data.get("text"),
        ast=data.get("ast"),
        tokens=data.get("tokens"),
        errors=list(data.get("errors") or []),
        meta=data.get("meta"),
        word_count=data.get("wordCount"),
    )


class HttpRenderer:
    """Renderer that POSTs {source, pageInfo, mode, layout} to a render service."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client = client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
        )

    async def render(self, request: RenderRequest) -> RenderOutput:
        """Render source through the service."""
        payload = {
            "source": request.source,
            "pageInfo": request.page_info,
            "mode": str(request.mode),
            "layout": str(request.layout),
        }
        try:
            response = await self._client.post(f"/{_ENDPOINTS[request.kind]}", json=payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as e:
            logger.error("Renderer request failed: %s", e)
            raise RenderError("Rendering service unavailable") from e
        except ValueError as e:
            raise RenderError("Renderer returned invalid JSON") from e

        if not isinstance(body, dict) or not body.get("success", True):
            message = body.get("error") if isinstance(body, dict) else None
            raise RenderError(message or "Rendering failed")
        return _to_output(request.kind, body.get("data"))

    async def aclose(self) -> None:
        await self._client.aclose()

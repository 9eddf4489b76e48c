"""Wikitext rendering resources."""

import logging

import falcon
import falcon.asgi

from wikirev.application.dto.render_dto import RenderRequest
from wikirev.application.use_cases.render.render_source import RenderSourceUseCase
from wikirev.domain.exceptions import RenderError, ValidationError
from wikirev.domain.value_objects import RenderLayout, RenderMode, RenderOutputKind

logger = logging.getLogger(__name__)


def _parse_render_request(body: object, kind: RenderOutputKind) -> RenderRequest:
    """Build RenderRequest from {source, pageInfo?, mode?, layout?}."""
    if not isinstance(body, dict):
        raise ValidationError("Invalid JSON in request body")
    source = body.get("source")
    if not source or not isinstance(source, str):
        raise ValidationError("Source is required")
    page_info = body.get("pageInfo") or {}
    if not isinstance(page_info, dict):
        raise ValidationError("pageInfo must be an object")
    try:
        mode = RenderMode(body.get("mode", RenderMode.PAGE))
        layout = RenderLayout(body.get("layout", RenderLayout.WIKIJUMP))
    except ValueError as e:
        raise ValidationError(str(e)) from e
    return RenderRequest(
        source=source,
        kind=kind,
        page_info=page_info,
        mode=mode,
        layout=layout,
    )


class RenderResource:
    """POST /v1/ftml/<kind> - parse or render wikitext source."""

    def __init__(self, render_source: RenderSourceUseCase, kind: RenderOutputKind) -> None:
        self._render_source = render_source
        self._kind = kind

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            body = await req.get_media()
        except (falcon.MediaNotFoundError, falcon.MediaMalformedError):
            resp.status = falcon.HTTP_400
            resp.media = {"success": False, "error": "Invalid JSON in request body"}
            return

        try:
            request = _parse_render_request(body, self._kind)
            output = await self._render_source.execute(request)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"success": False, "error": str(e)}
            return
        except RenderError as e:
            logger.error("Render (%s) failed: %s", self._kind, e)
            resp.status = falcon.HTTP_502
            resp.media = {"success": False, "error": str(e)}
            return

        resp.media = {"success": True, "data": output.to_dict()}
        resp.status = falcon.HTTP_200

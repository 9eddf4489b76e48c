"""Document API resources."""

import logging

import falcon
import falcon.asgi

from wikirev.application.dto.document_dto import DocumentInput
from wikirev.application.use_cases.document.create_document import CreateDocumentUseCase
from wikirev.application.use_cases.document.get_document import GetDocumentUseCase
from wikirev.application.use_cases.document.update_document import UpdateDocumentUseCase
from wikirev.application.use_cases.revision.get_history import GetHistoryUseCase
from wikirev.application.use_cases.revision.get_revision import GetRevisionUseCase
from wikirev.domain.exceptions import NotFound, ValidationError, WikiRevError

logger = logging.getLogger(__name__)


def _fail(resp: falcon.asgi.Response, status: str, message: str) -> None:
    resp.status = status
    resp.media = {"data": None, "error": message}


async def _read_document_input(
    req: falcon.asgi.Request, require_content: bool = False
) -> DocumentInput:
    """Parse {title, source, createdBy} body. Raises ValidationError.

    On create an absent title or source is stored as "". Updates must send
    both, so a partial body cannot blank the stored value.
    """
    try:
        body = await req.get_media()
    except (falcon.MediaNotFoundError, falcon.MediaMalformedError) as e:
        raise ValidationError("Invalid request data") from e
    if not isinstance(body, dict):
        raise ValidationError("Invalid request data")
    if require_content:
        for key in ("title", "source"):
            if key not in body:
                raise ValidationError(f"{key} is required")
    return DocumentInput(
        title=body.get("title", ""),
        source=body.get("source", ""),
        author=body.get("createdBy"),
    )


def _parse_revision_id(value: str) -> int:
    """Base-10 ASCII integer with an optional leading minus. Raises ValidationError."""
    digits = value[1:] if value.startswith("-") else value
    if not (digits.isascii() and digits.isdigit()):
        raise ValidationError("Invalid revision ID")
    return int(value)


class DocumentsResource:
    """POST /v1/data - create document."""

    def __init__(self, create_document: CreateDocumentUseCase) -> None:
        self._create_document = create_document

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create document with its first revision."""
        try:
            input_data = await _read_document_input(req)
            result = await self._create_document.execute(input_data)
        except ValidationError as e:
            _fail(resp, falcon.HTTP_400, str(e))
            return
        except WikiRevError:
            logger.exception("Error creating page")
            _fail(resp, falcon.HTTP_500, "Failed to create page")
            return
        resp.media = {"data": result.to_dict(), "error": None}
        resp.status = falcon.HTTP_200


class DocumentResource:
    """GET/PATCH /v1/data/{short_id} - read or update document."""

    def __init__(
        self,
        get_document: GetDocumentUseCase,
        update_document: UpdateDocumentUseCase,
    ) -> None:
        self._get_document = get_document
        self._update_document = update_document

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        short_id: str,
    ) -> None:
        """Get current document."""
        try:
            result = await self._get_document.execute(short_id)
        except NotFound:
            _fail(resp, falcon.HTTP_200, "Page not found")
            return
        except WikiRevError:
            logger.exception("Error getting page data")
            _fail(resp, falcon.HTTP_500, "Failed to retrieve page data")
            return
        resp.media = {"data": result.to_dict(), "error": None}
        resp.status = falcon.HTTP_200

    async def on_patch(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        short_id: str,
    ) -> None:
        """Update document content."""
        try:
            input_data = await _read_document_input(req, require_content=True)
            result = await self._update_document.execute(short_id, input_data)
        except ValidationError as e:
            _fail(resp, falcon.HTTP_400, str(e))
            return
        except NotFound:
            _fail(resp, falcon.HTTP_200, "Page not found")
            return
        except WikiRevError:
            logger.exception("Error updating page")
            _fail(resp, falcon.HTTP_500, "Failed to update page")
            return
        resp.media = {"data": result.to_dict(), "error": None}
        resp.status = falcon.HTTP_200


class HistoryResource:
    """POST /v1/data/{short_id}/history - list revisions, newest first."""

    def __init__(self, get_history: GetHistoryUseCase) -> None:
        self._get_history = get_history

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        short_id: str,
    ) -> None:
        try:
            result = await self._get_history.execute(short_id)
        except WikiRevError:
            logger.exception("Error getting history data")
            _fail(resp, falcon.HTTP_500, "Failed to retrieve history data")
            return
        resp.media = {"data": [r.to_dict() for r in result], "error": None}
        resp.status = falcon.HTTP_200


class RevisionResource:
    """POST /v1/data/{short_id}/revision/{revision_id} - one revision."""

    def __init__(self, get_revision: GetRevisionUseCase) -> None:
        self._get_revision = get_revision

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        short_id: str,
        revision_id: str,
    ) -> None:
        try:
            revision_number = _parse_revision_id(revision_id)
        except ValidationError as e:
            _fail(resp, falcon.HTTP_400, str(e))
            return

        try:
            result = await self._get_revision.execute(short_id, revision_number)
        except NotFound:
            _fail(resp, falcon.HTTP_200, "Revision not found")
            return
        except WikiRevError:
            logger.exception("Error getting revision data")
            _fail(resp, falcon.HTTP_500, "Failed to retrieve revision data")
            return
        resp.media = {"data": result.to_dict(), "error": None}
        resp.status = falcon.HTTP_200

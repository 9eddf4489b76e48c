"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from wikirev.application.use_cases.render.render_source import RenderSourceUseCase
from wikirev.domain.value_objects import RenderOutputKind
from wikirev.interfaces.api.errors import create_error_handler
from wikirev.interfaces.api.resources.documents import (
    DocumentResource,
    DocumentsResource,
    HistoryResource,
    RevisionResource,
)
from wikirev.interfaces.api.resources.health import HealthResource, IndexResource
from wikirev.interfaces.api.resources.render import RenderResource

RENDER_ROUTES = {
    "/v1/ftml/parse": RenderOutputKind.PARSE,
    "/v1/ftml/render": RenderOutputKind.HTML,
    "/v1/ftml/detail-render": RenderOutputKind.DETAIL,
    "/v1/ftml/text": RenderOutputKind.TEXT,
    "/v1/ftml/word-count": RenderOutputKind.WORD_COUNT,
}


def create_app(
    documents_resource: DocumentsResource,
    document_resource: DocumentResource,
    history_resource: HistoryResource,
    revision_resource: RevisionResource,
    health_resource: HealthResource,
    index_resource: IndexResource,
    render_source: RenderSourceUseCase,
    middleware: list | None = None,
    expose_error_details: bool = False,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, create_error_handler(expose_error_details))
    app.add_route("/", index_resource)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/data", documents_resource)
    app.add_route("/v1/data/{short_id}", document_resource)
    app.add_route("/v1/data/{short_id}/history", history_resource)
    app.add_route("/v1/data/{short_id}/revision/{revision_id}", revision_resource)
    for path, kind in RENDER_ROUTES.items():
        app.add_route(path, RenderResource(render_source, kind))
    return app

"""Application entry point and composition root."""

import logging

from wikirev import __version__
from wikirev.application.store import RevisionedStore
from wikirev.application.use_cases.document.create_document import CreateDocumentUseCase
from wikirev.application.use_cases.document.get_document import GetDocumentUseCase
from wikirev.application.use_cases.document.update_document import UpdateDocumentUseCase
from wikirev.application.use_cases.render.render_source import RenderSourceUseCase
from wikirev.application.use_cases.revision.get_history import GetHistoryUseCase
from wikirev.application.use_cases.revision.get_revision import GetRevisionUseCase
from wikirev.config import Settings, get_settings
from wikirev.infrastructure.persistence.postgres.connection import create_pool
from wikirev.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from wikirev.infrastructure.rendering.http_renderer import HttpRenderer
from wikirev.interfaces.api.app import create_app
from wikirev.interfaces.api.middleware.cors import CORSMiddleware
from wikirev.interfaces.api.middleware.lifespan import LifespanMiddleware
from wikirev.interfaces.api.resources.documents import (
    DocumentResource,
    DocumentsResource,
    HistoryResource,
    RevisionResource,
)
from wikirev.interfaces.api.resources.health import HealthResource, IndexResource
from wikirev.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_wikirev_app(settings: Settings | None = None):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    setup_logging(settings)

    pool = create_pool(
        settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
        timeout=settings.pool_timeout,
        statement_timeout_ms=settings.statement_timeout_ms,
    )
    uow_factory = create_uow_factory(pool)
    store = RevisionedStore(uow_factory)
    renderer = HttpRenderer(settings.renderer_url, timeout=settings.renderer_timeout)

    create_document = CreateDocumentUseCase(
        store,
        max_attempts=settings.create_max_attempts,
    )
    get_document = GetDocumentUseCase(store)
    update_document = UpdateDocumentUseCase(store)
    get_history = GetHistoryUseCase(store)
    get_revision = GetRevisionUseCase(store)
    render_source = RenderSourceUseCase(renderer)

    return create_app(
        documents_resource=DocumentsResource(create_document),
        document_resource=DocumentResource(get_document, update_document),
        history_resource=HistoryResource(get_history),
        revision_resource=RevisionResource(get_revision),
        health_resource=HealthResource(settings.environment, uow_factory),
        index_resource=IndexResource(settings.environment),
        render_source=render_source,
        middleware=[
            CORSMiddleware(settings.cors_origin_list),
            LifespanMiddleware(pool, closers=[renderer.aclose]),
        ],
        expose_error_details=not settings.is_production,
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    app = create_wikirev_app(settings)
    logger.info("Starting WikiRev v%s on %s:%s", __version__, settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


def main() -> None:
    """CLI entry point."""
    run_server()


if __name__ == "__main__":
    main()

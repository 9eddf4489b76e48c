"""Fixtures for API tests."""

from unittest.mock import AsyncMock

import pytest
from falcon.testing import TestClient

from wikirev.application.dto.render_dto import RenderOutput
from wikirev.application.store import RevisionedStore
from wikirev.application.use_cases.document.create_document import CreateDocumentUseCase
from wikirev.application.use_cases.document.get_document import GetDocumentUseCase
from wikirev.application.use_cases.document.update_document import UpdateDocumentUseCase
from wikirev.application.use_cases.render.render_source import RenderSourceUseCase
from wikirev.application.use_cases.revision.get_history import GetHistoryUseCase
from wikirev.application.use_cases.revision.get_revision import GetRevisionUseCase
from wikirev.interfaces.api.app import create_app
from wikirev.interfaces.api.middleware.cors import CORSMiddleware
from wikirev.interfaces.api.resources.documents import (
    DocumentResource,
    DocumentsResource,
    HistoryResource,
    RevisionResource,
)
from wikirev.interfaces.api.resources.health import HealthResource, IndexResource


@pytest.fixture
def mock_renderer():
    """AsyncMock renderer returning a fixed HTML result."""
    mock = AsyncMock()
    mock.render.return_value = RenderOutput(html="<p>rendered</p>")
    return mock


@pytest.fixture
def expose_error_details() -> bool:
    return True


@pytest.fixture
def app(uow_factory, mock_renderer, expose_error_details):
    """Falcon ASGI app over the in-memory store."""
    store = RevisionedStore(uow_factory)
    return create_app(
        documents_resource=DocumentsResource(CreateDocumentUseCase(store)),
        document_resource=DocumentResource(
            GetDocumentUseCase(store), UpdateDocumentUseCase(store)
        ),
        history_resource=HistoryResource(GetHistoryUseCase(store)),
        revision_resource=RevisionResource(GetRevisionUseCase(store)),
        health_resource=HealthResource("test", uow_factory),
        index_resource=IndexResource("test"),
        render_source=RenderSourceUseCase(mock_renderer),
        middleware=[CORSMiddleware(["http://localhost:3000", "http://wiki.test"])],
        expose_error_details=expose_error_details,
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)

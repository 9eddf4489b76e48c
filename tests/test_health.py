"""Health endpoint tests."""

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from wikirev import __version__
from wikirev.interfaces.api.resources.health import HealthResource

from tests.conftest import FakeDatabase, make_uow_factory


@pytest.fixture
def db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def client(db: FakeDatabase) -> TestClient:
    """Create test client with health endpoints."""
    app = App()
    health = HealthResource("development", make_uow_factory(db))
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json == {
        "status": "healthy",
        "version": __version__,
        "environment": "development",
    }


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200 when the database answers."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


def test_health_ready_database_down(client: TestClient, db: FakeDatabase) -> None:
    """GET /v1/health/ready returns 503 when the database is unreachable."""
    db.fail_ping = True
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 503
    assert result.json["status"] == "unavailable"


def test_health_ready_without_database() -> None:
    app = App()
    app.add_route("/v1/health/ready", HealthResource(), suffix="ready")
    result = TestClient(app).simulate_get("/v1/health/ready")
    assert result.status_code == 200

"""Health check endpoints."""

import logging

import falcon.asgi

from wikirev import __version__
from wikirev.application.ports import UnitOfWorkFactory
from wikirev.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(
        self,
        environment: str = "development",
        unit_of_work_factory: UnitOfWorkFactory | None = None,
    ) -> None:
        self._environment = environment
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {
            "status": "healthy",
            "version": __version__,
            "environment": self._environment,
        }
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (database reachable)."""
        if self._uow_factory is not None:
            try:
                async with self._uow_factory() as uow:
                    await uow.ping()
            except StorageError:
                logger.warning("Readiness check failed", exc_info=True)
                resp.media = {"status": "unavailable"}
                resp.status = falcon.HTTP_503
                return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200


class IndexResource:
    """GET / - service banner."""

    def __init__(self, environment: str = "development") -> None:
        self._environment = environment

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = {
            "message": "Welcome to the Wikitext Previewer API",
            "version": __version__,
            "environment": self._environment,
            "endpoints": {
                "health": "/v1/health",
                "data": "/v1/data",
                "history": "/v1/data/:shortId/history",
                "revision": "/v1/data/:shortId/revision/:revisionId",
                "render": "/v1/ftml/{parse,render,detail-render,text,word-count}",
            },
        }
        resp.status = falcon.HTTP_200

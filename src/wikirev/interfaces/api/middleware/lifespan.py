"""Lifespan middleware - opens the pool on startup, releases resources on shutdown."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from psycopg_pool import AsyncConnectionPool

logger = logging.getLogger(__name__)


class LifespanMiddleware:
    """Opens the connection pool when the ASGI server starts and closes it,
    plus any extra closers (e.g. HTTP clients), on shutdown."""

    def __init__(
        self,
        pool: AsyncConnectionPool,
        closers: list[Callable[[], Awaitable[None]]] | None = None,
    ) -> None:
        self._pool = pool
        self._closers = closers or []

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Open pool when ASGI server starts."""
        await self._pool.open()
        logger.info("Database pool opened")

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close pool and other resources when ASGI server shuts down."""
        for close in self._closers:
            await close()
        await self._pool.close()
        logger.info("Database pool closed")

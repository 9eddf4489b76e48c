"""Global error handler for the Falcon app."""

import logging

import falcon
import falcon.asgi

logger = logging.getLogger(__name__)


def create_error_handler(expose_details: bool):
    """Handler for exceptions no resource mapped.

    The exception text is only returned when expose_details is set
    (non-production); otherwise the client sees a generic message.
    """

    async def handle_exception(
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        ex: Exception,
        params: dict,
    ) -> None:
        logger.error(
            "Unhandled error on %s %s",
            req.method,
            req.path,
            exc_info=(type(ex), ex, ex.__traceback__),
        )
        resp.status = falcon.HTTP_500
        resp.media = {
            "data": None,
            "error": str(ex) if expose_details else "Internal server error",
        }

    return handle_exception

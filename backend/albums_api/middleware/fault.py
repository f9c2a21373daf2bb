"""
Album Catalog API - Fault Isolation Middleware
==============================================

What:  Converts any exception escaping a route handler into a 500 response.
How:   Wraps call_next; an exception is wrapped in HandlerFaultError, logged
       with its traceback, and rendered in the configured error body style.
When:  Innermost user middleware, directly around the router.

A fault only ever affects the request that raised it: the exception stops
here, the client gets a well-formed 500, and the server keeps serving.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from albums_api.config import Settings
from albums_api.exceptions import HandlerFaultError
from albums_api.middleware.request_id import request_id_var
from albums_api.responses import error_response

logger = logging.getLogger(__name__)


class FaultIsolationMiddleware(BaseHTTPMiddleware):
    """
    Maps unexpected handler exceptions to HTTP 500.

    Exceptions with a registered handler (HTTPException, AlbumsAPIError) are
    resolved further in by Starlette's ExceptionMiddleware and never reach
    this layer. Everything else arrives here.
    """

    def __init__(self, app: ASGIApp, settings: Settings):
        super().__init__(app)
        self.settings = settings

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            fault = HandlerFaultError(
                cause=exc,
                context={"method": request.method, "path": request.url.path},
            )
            logger.error(
                "[%s] Unexpected error: %s | Context: %s",
                request_id_var.get(""),
                str(exc),
                fault.context,
                exc_info=exc,
            )
            return error_response(
                self.settings,
                status_code=fault.status_code,
                error=fault.error_code,
                message=fault.message,
                plain_text=self.settings.server_error_text,
            )

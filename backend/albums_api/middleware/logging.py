"""
Album Catalog API - Request Logging Middleware
==============================================

What:  One structured access-log line per HTTP request.
How:   Measures time around call_next and logs method, path, status,
       duration, request ID and client IP on the ``albums_api.access`` logger.
When:  Runs inside RequestIDMiddleware, so the request ID is already set.

Example line:
    2024-01-15T12:00:00 [INFO] albums_api.access: GET /albums 200 1.3ms [a1b2c3d4] from 127.0.0.1

Not logged: request bodies and headers.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from albums_api.middleware.request_id import request_id_var

logger = logging.getLogger("albums_api.access")

# Probe endpoints are polled constantly; logging them drowns real traffic
SKIPPED_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration for each request.

    Log level follows the status code:
        5xx       → ERROR
        4xx       → WARNING
        2xx/3xx   → INFO
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        if path in SKIPPED_PATHS:
            return await call_next(request)

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response

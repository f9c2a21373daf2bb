"""
Album Catalog API - Error Response Rendering
============================================

What:  Builds the response for framework-level errors (404, 405, 500).
How:   Honors ``settings.error_body_style``:
           json  → ErrorResponse envelope with the request ID
           plain → text/plain body pinned by configuration
Who:   Used by the exception handlers in main.py and by FaultIsolationMiddleware.
"""

from starlette.responses import JSONResponse, PlainTextResponse, Response

from albums_api.config import Settings
from albums_api.middleware.request_id import request_id_var
from albums_api.schemas.album import ErrorResponse


def error_response(
    settings: Settings,
    status_code: int,
    error: str,
    message: str,
    plain_text: str,
) -> Response:
    """
    Render an error in the configured body style.

    Args:
        status_code: HTTP status of the response
        error:       Machine-readable code for the JSON envelope
        message:     Human-readable text for the JSON envelope
        plain_text:  Exact body used when error_body_style is "plain"
    """
    if settings.error_body_style == "plain":
        return PlainTextResponse(plain_text, status_code=status_code)

    body = ErrorResponse(error=error, message=message, request_id=request_id_var.get("") or None)
    return JSONResponse(status_code=status_code, content=body.model_dump())
